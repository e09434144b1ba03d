"""mvp24h_security_patterns MCP tool implementation."""

from __future__ import annotations

from loguru import logger

from mvp24h_mcp.catalogs import security_patterns as catalog
from mvp24h_mcp.core import DocLoader, TopicResolver, get_doc_loader


async def security_patterns(topic: str | None = None, loader: DocLoader | None = None) -> str:
    """Get security patterns documentation for Mvp24Hours applications.

    Args:
        topic: Security topic; omitted or "overview" returns the overview

    Returns:
        Markdown documentation
    """
    logger.info(f"Security patterns requested: {topic or 'overview'}")
    resolver = TopicResolver(catalog.CATALOG, loader or get_doc_loader())

    if topic and topic != "overview":
        return resolver.resolve(topic)
    return resolver.overview(catalog.OVERVIEW_INTRO, catalog.OVERVIEW_REFERENCE)
