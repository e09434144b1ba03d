"""mvp24h_database_advisor MCP tool implementation."""

from __future__ import annotations

from loguru import logger

from mvp24h_mcp.catalogs import database_advisor as catalog
from mvp24h_mcp.core import DocLoader, TopicResolver, get_doc_loader, load_available
from mvp24h_mcp.schemas import DatabaseProvider, DataType
from mvp24h_mcp.utils import join_sections

DATA_TYPE_PROVIDERS = {
    DataType.DOCUMENT: DatabaseProvider.MONGODB,
    DataType.KEY_VALUE: DatabaseProvider.REDIS,
}


def select_provider(
    data_type: str | None = None,
    provider: str | None = None,
    requirements: list[str] | None = None,
) -> DatabaseProvider:
    """Derive the database provider.

    An explicit provider wins; an unrecognised one falls back to PostgreSQL.
    Otherwise requirements are checked in order, then the data type.
    """
    requirements = requirements or []
    provider_map = {p.value: p for p in DatabaseProvider}

    if provider:
        selected = provider_map.get(provider.lower())
        if selected is None:
            logger.warning(f"Unknown database provider {provider!r}, using postgresql")
            return DatabaseProvider.POSTGRESQL
        return selected

    for requirement, selected in catalog.REQUIREMENT_PROVIDERS:
        if requirement in requirements:
            return selected

    data_type_map = {d.value: d for d in DataType}
    kind = data_type_map.get((data_type or "").lower())
    return DATA_TYPE_PROVIDERS.get(kind, DatabaseProvider.POSTGRESQL)


def select_patterns(requirements: list[str] | None = None) -> list[str]:
    requirements = requirements or []
    patterns = ["repository", "unit-of-work"]
    if "complex-queries" in requirements:
        patterns.append("specification")
    if "high-write-throughput" in requirements:
        patterns.append("dapper")
    return patterns


def pattern_files(patterns: list[str]) -> list[str]:
    """Fragment paths for the patterns, deduplicated in first-seen order."""
    files = [path for pattern in patterns for path in catalog.PATTERN_FILES.get(pattern, [])]
    return list(dict.fromkeys(files))


async def database_advisor(
    data_type: str | None = None,
    provider: str | None = None,
    requirements: list[str] | None = None,
    patterns: list[str] | None = None,
    topic: str | None = None,
    loader: DocLoader | None = None,
) -> str:
    """Recommend a database provider and data access patterns.

    Args:
        data_type: "relational", "document", "key-value" or "mixed"
        provider: Explicit provider; overrides derivation
        requirements: Requirements such as "transactions" or "caching"
        patterns: Explicit patterns; override the derived ones
        topic: Return a documentation topic instead of a recommendation

    Returns:
        Markdown recommendation, or topic documentation
    """
    requirements = requirements or []
    patterns = patterns or []
    loader = loader or get_doc_loader()
    resolver = TopicResolver(catalog.CATALOG, loader)

    if topic:
        logger.info(f"Database topic requested: {topic}")
        return resolver.resolve(topic)

    if not (data_type or provider or requirements or patterns):
        return resolver.resolve("overview")

    selected = select_provider(data_type, provider, requirements)
    selected_patterns = patterns or select_patterns(requirements)
    logger.info(f"Recommending database: {selected.value}, patterns={selected_patterns}")

    name, reasoning = catalog.PROVIDER_SUMMARIES[selected]
    provider_docs = load_available(loader, catalog.PROVIDER_FILES[selected])
    pattern_docs = load_available(loader, pattern_files(selected_patterns))

    steps = [
        "1. Add the NuGet packages to your project",
        "2. Configure the connection string",
        "3. Create your DbContext (for EF Core) or configure MongoDB options",
        "4. Register services in DI container",
    ]
    if "dapper" in selected_patterns or "high-write-throughput" in requirements:
        steps.append("5. Consider hybrid approach with Dapper for read-heavy queries")

    sections = [
        f"# Database Configuration Recommendation\n\n"
        f"## Recommended Database: **{name}**\n\n### Why This Database?\n{reasoning}",
        catalog.QUICK_REFERENCE,
        catalog.SELECTION_MATRIX,
        f"## Provider Documentation\n\n{provider_docs}" if provider_docs else "",
        f"## Pattern Documentation\n\n{pattern_docs}" if pattern_docs else "",
        "## Next Steps\n\n" + "\n".join(steps),
        resolver.related_section("nosql" if selected.is_nosql else "relational"),
    ]
    return join_sections(sections)
