"""mvp24h_build_context MCP tool implementation."""

from __future__ import annotations

from loguru import logger

from mvp24h_mcp.catalogs import build_context as catalog
from mvp24h_mcp.core import DocLoader, get_doc_loader, load_available
from mvp24h_mcp.schemas import DatabaseProvider
from mvp24h_mcp.utils import bullet_list, join_sections


def _architecture_not_found(architecture: str) -> str:
    groups = []
    for group, entries in catalog.ARCHITECTURE_GROUPS.items():
        lines = bullet_list([f"`{key}` - {desc}" for key, desc in entries])
        groups.append(f"### {group}\n\n{lines}")

    available = "\n\n".join(groups)
    return f"""# Architecture Not Found

The architecture "{architecture}" is not supported by `mvp24h_build_context`.

## Available Architectures

{available}

{catalog.USAGE_EXAMPLES}
"""


def _checklist(architecture: str, resources: list[str], database_provider: str | None) -> str:
    lines = [f"- [ ] {step}" for step in catalog.ARCHITECTURE_CHECKLIST.get(architecture, [])]

    for resource, (title, steps) in catalog.RESOURCE_CHECKLIST.items():
        wanted = resource in resources or (resource == "database" and database_provider)
        if not wanted:
            continue
        lines.append("")
        lines.append(f"**{title}:**")
        lines.extend(f"- [ ] {step}" for step in steps)

    return "\n".join(lines)


def _related_tools(architecture: str, resources: list[str], database_provider: str | None) -> list[str]:
    tools = list(catalog.ARCHITECTURE_RELATED_TOOLS.get(architecture, []))
    if "database" in resources or database_provider:
        tools.append(f'mvp24h_database_advisor({{ provider: "{database_provider or "postgresql"}" }})')
    tools.extend(
        usage for resource, usage in catalog.RESOURCE_TOOLS.items()
        if resource in resources
    )
    return [f"`{tool}`" for tool in tools]


async def build_context(
    architecture: str,
    resources: list[str] | None = None,
    database_provider: str | None = None,
    loader: DocLoader | None = None,
) -> str:
    """Build a complete implementation context for an architecture in one call.

    Args:
        architecture: Architecture template, e.g. "cqrs" or "clean-architecture"
        resources: Extra areas to include: database, caching, observability,
            messaging, security, testing, containerization
        database_provider: Database provider whose configuration docs to include

    Returns:
        Markdown context combining architecture, resource and provider documentation
    """
    resources = resources or []
    logger.info(f"Building context for {architecture}, resources={resources}, database={database_provider}")

    if architecture not in catalog.ARCHITECTURE_CONTEXT:
        return _architecture_not_found(architecture)

    loader = loader or get_doc_loader()
    name = catalog.ARCHITECTURE_NAMES.get(architecture, architecture)
    packages = bullet_list([f"`{pkg}`" for pkg in catalog.ARCHITECTURE_PACKAGES.get(architecture, [])])

    sections = [
        f"# Complete Context: {name} Architecture\n\n"
        f"This document provides complete context for implementing a .NET application "
        f"using the **{name}** architecture pattern.\n\n"
        f"## Quick Reference\n\n### NuGet Packages\n\n{packages}",
    ]

    foundation = load_available(loader, catalog.ARCHITECTURE_CONTEXT[architecture])
    if foundation:
        sections.append(f"## Architecture Foundation\n\n{foundation}")

    if database_provider:
        provider_map = {p.value: p for p in DatabaseProvider}
        provider = provider_map.get(database_provider.lower())
        if provider is None:
            logger.warning(f"Unknown database provider {database_provider!r}, skipping provider docs")
            database_provider = None
        else:
            provider_docs = load_available(loader, catalog.DATABASE_PROVIDER_CONTEXT[provider])
            if provider_docs:
                sections.append(f"## Database Configuration: {provider.value.upper()}\n\n{provider_docs}")

    for resource in resources:
        if resource not in catalog.RESOURCE_CONTEXT:
            logger.warning(f"Unknown resource {resource!r}, skipping")
            continue
        title, paths = catalog.RESOURCE_CONTEXT[resource]
        resource_docs = load_available(loader, paths)
        if resource_docs:
            sections.append(f"## {title}\n\n{resource_docs}")

    interfaces = "\n\n".join(catalog.KEY_INTERFACES.get(architecture, [catalog.BASE_INTERFACES]))
    sections.append(f"## Key Interfaces Reference\n\n{interfaces}")

    related = bullet_list(_related_tools(architecture, resources, database_provider))
    sections.append(
        "## Next Steps\n\n### Related Tools\n\n"
        f"Use these tools to get more detailed documentation:\n\n{related}\n\n"
        f"### Implementation Checklist\n\n{_checklist(architecture, resources, database_provider)}"
    )

    return join_sections(sections)
