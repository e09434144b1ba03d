"""mvp24h_containerization_patterns MCP tool implementation."""

from __future__ import annotations

from loguru import logger

from mvp24h_mcp.catalogs import containerization_patterns as catalog
from mvp24h_mcp.core import DocLoader, TopicResolver, get_doc_loader


async def containerization_patterns(topic: str | None = None, loader: DocLoader | None = None) -> str:
    """Docker, Compose and Kubernetes guidance for Mvp24Hours services."""
    logger.info(f"Containerization patterns requested: {topic or 'overview'}")
    resolver = TopicResolver(catalog.CATALOG, loader or get_doc_loader())

    if topic and topic != "overview":
        return resolver.resolve(topic)
    return resolver.overview(catalog.OVERVIEW_INTRO, catalog.OVERVIEW_REFERENCE)
