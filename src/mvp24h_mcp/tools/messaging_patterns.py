"""mvp24h_messaging_patterns MCP tool implementation."""

from __future__ import annotations

from loguru import logger

from mvp24h_mcp.catalogs import messaging_patterns as catalog
from mvp24h_mcp.core import DocLoader, TopicResolver, get_doc_loader


async def messaging_patterns(pattern: str | None = None, loader: DocLoader | None = None) -> str:
    """Get async messaging guidance (RabbitMQ, hosted services, outbox, channels).

    Args:
        pattern: Messaging pattern key; omitted or "overview" returns the overview

    Returns:
        Markdown documentation
    """
    logger.info(f"Messaging pattern requested: {pattern or 'overview'}")
    resolver = TopicResolver(catalog.CATALOG, loader or get_doc_loader())

    if pattern and pattern != "overview":
        return resolver.resolve(pattern)
    return resolver.overview(catalog.OVERVIEW_INTRO, catalog.OVERVIEW_REFERENCE)
