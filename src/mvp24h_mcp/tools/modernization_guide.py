"""mvp24h_modernization_guide MCP tool implementation."""

from __future__ import annotations

from loguru import logger

from mvp24h_mcp.catalogs import modernization_guide as catalog
from mvp24h_mcp.core import DocLoader, TopicResolver, get_doc_loader
from mvp24h_mcp.utils import bullet_list, join_sections


def _category_links(category: str) -> str:
    features = catalog.CATEGORY_FEATURES.get(category, [])
    others = [
        f"`{catalog.CATEGORIES.usage(key)}` - {desc}"
        for key, desc in catalog.CATEGORIES.descriptions.items()
        if key != category
    ]

    parts = []
    if features:
        usages = [f"`{catalog.FEATURES.usage(feature)}`" for feature in features]
        parts.append(
            "## Related Features\n\nGet detailed documentation for specific features:\n\n"
            + bullet_list(usages)
        )
    parts.append(f"## Other Categories\n\n{bullet_list(others)}")
    return "\n\n".join(parts)


async def modernization_guide(
    category: str | None = None,
    feature: str | None = None,
    loader: DocLoader | None = None,
) -> str:
    """Get guidance on .NET 9 native features adopted by Mvp24Hours.

    Args:
        category: Feature category, e.g. "resilience" or "caching"
        feature: Single feature, e.g. "hybrid-cache"; takes precedence over category

    Returns:
        Markdown documentation
    """
    loader = loader or get_doc_loader()
    features = TopicResolver(catalog.FEATURES, loader)

    if feature:
        logger.info(f"Modernization feature requested: {feature}")
        return features.resolve(feature)

    if category:
        logger.info(f"Modernization category requested: {category}")
        categories = TopicResolver(catalog.CATEGORIES, loader)
        if not categories.is_known(category):
            return categories.not_found(category)
        return join_sections([categories.resolve(category), _category_links(category)])

    logger.info("Modernization overview requested")
    return features.overview("\n\n".join(catalog.OVERVIEW_SECTIONS))
