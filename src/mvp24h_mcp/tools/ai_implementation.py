"""mvp24h_ai_implementation MCP tool implementation."""

from __future__ import annotations

from loguru import logger

from mvp24h_mcp.catalogs import ai_implementation as catalog
from mvp24h_mcp.core import DocLoader, TopicResolver, get_doc_loader
from mvp24h_mcp.utils import join_sections, title_case


def recommend(use_case: str | None = None) -> str:
    """Approach and template recommendation for a use case."""
    approach, template, reason = catalog.USE_CASES.get(use_case or "", catalog.DEFAULT_RECOMMENDATION)
    logger.info(f"AI recommendation for {use_case or 'unspecified use case'}: {approach.value}/{template}")

    header = f"""# AI Implementation Recommendation

## Recommended Approach: **{catalog.APPROACH_NAMES[approach]}**
## Recommended Template: **{title_case(template)}**

### Why?
- {reason}"""

    next_steps = f"""## Next Steps

1. **Get the template**: `{catalog.TEMPLATES.usage(template)}`
2. **Understand the approach**: `{catalog.APPROACHES.usage(approach.value)}`
3. **Add observability**: `mvp24h_observability_setup({{ component: "tracing" }})`"""

    return join_sections([
        header,
        catalog.DECISION_MATRIX,
        catalog.PACKAGES,
        catalog.CONFIGURATION,
        next_steps,
    ])


async def ai_implementation(
    use_case: str | None = None,
    approach: str | None = None,
    template: str | None = None,
    loader: DocLoader | None = None,
) -> str:
    """Guide AI integration with Semantic Kernel, SK Graph or Agent Framework.

    Args:
        use_case: What the AI feature should do, e.g. "chatbot" or "qa-documents"
        approach: Return the overview of one approach
        template: Return one implementation template

    Returns:
        Markdown documentation or recommendation
    """
    loader = loader or get_doc_loader()

    if template:
        logger.info(f"AI template requested: {template}")
        return TopicResolver(catalog.TEMPLATES, loader).resolve(template)

    if approach:
        logger.info(f"AI approach requested: {approach}")
        return TopicResolver(catalog.APPROACHES, loader).resolve(approach)

    return recommend(use_case)
