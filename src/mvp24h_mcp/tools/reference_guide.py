"""mvp24h_reference_guide MCP tool implementation."""

from __future__ import annotations

from loguru import logger

from mvp24h_mcp.catalogs import reference_guide as catalog
from mvp24h_mcp.core import DocLoader, TopicResolver, get_doc_loader


async def reference_guide(topic: str | None = None, loader: DocLoader | None = None) -> str:
    """Reference documentation for mapping, validation, specification and friends."""
    logger.info(f"Reference guide requested: {topic or 'overview'}")
    resolver = TopicResolver(catalog.CATALOG, loader or get_doc_loader())

    if topic and topic != "overview":
        return resolver.resolve(topic)
    return resolver.overview(catalog.OVERVIEW_INTRO, catalog.OVERVIEW_REFERENCE)
