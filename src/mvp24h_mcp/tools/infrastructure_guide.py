"""mvp24h_infrastructure_guide MCP tool implementation."""

from __future__ import annotations

from loguru import logger

from mvp24h_mcp.catalogs import infrastructure_guide as catalog
from mvp24h_mcp.core import DocLoader, TopicResolver, get_doc_loader


async def infrastructure_guide(topic: str | None = None, loader: DocLoader | None = None) -> str:
    """Get infrastructure documentation (pipeline, caching, WebAPI, CronJob, ...).

    Args:
        topic: Infrastructure topic; omitted or "overview" returns the overview

    Returns:
        Markdown documentation
    """
    logger.info(f"Infrastructure guide requested: {topic or 'overview'}")
    resolver = TopicResolver(catalog.CATALOG, loader or get_doc_loader())

    if topic and topic != "overview":
        return resolver.resolve(topic)
    return resolver.overview(catalog.OVERVIEW_INTRO, catalog.OVERVIEW_REFERENCE)
