"""mvp24h_get_template MCP tool implementation."""

from __future__ import annotations

from loguru import logger

from mvp24h_mcp.catalogs import templates as catalog
from mvp24h_mcp.catalogs.build_context import ARCHITECTURE_CONTEXT
from mvp24h_mcp.core import DocLoader, TopicResolver, get_doc_loader
from mvp24h_mcp.utils import bullet_list, join_sections, title_case


def _template_not_found(template_name: str) -> str:
    groups = []
    for group, templates in catalog.TEMPLATE_GROUPS.items():
        rows = "\n".join(f"| `{name}` | {desc} |" for name, (_, desc) in templates.items())
        groups.append(f"### {group}\n\n| Template | Description |\n|----------|-------------|\n{rows}")

    available = "\n\n".join(groups)
    example = catalog.CATALOG.usage(catalog.CATALOG.keys[0])
    return f"""# Template Not Found

The template "{template_name}" was not found.

## Available Templates

{available}

## Usage Example

```
{example}
```
"""


async def get_template(template_name: str, loader: DocLoader | None = None) -> str:
    """Get the full documentation of an architecture or AI template.

    Args:
        template_name: Template name, e.g. "cqrs" or "skg-react-agent"

    Returns:
        Markdown template with related context and tools
    """
    logger.info(f"Template requested: {template_name}")
    resolver = TopicResolver(catalog.CATALOG, loader or get_doc_loader())

    if not resolver.is_known(template_name):
        return _template_not_found(template_name)

    body = resolver.load_body(template_name)
    if body is None:
        logger.warning(f"Template documentation missing: {template_name}")
        return (
            f'Template "{template_name}" documentation not available. '
            "Use `mvp24h_architecture_advisor` to get recommendations."
        )

    context = ARCHITECTURE_CONTEXT.get(template_name, [])
    related_context = f"## Related Context\n\n{bullet_list([f'`{path}`' for path in context])}" if context else ""

    return join_sections([
        f"# Template: {title_case(template_name)}\n\n{body}",
        related_context,
        catalog.RELATED_TOOLS,
    ])
