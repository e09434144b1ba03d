"""mvp24h_cqrs_guide MCP tool implementation."""

from __future__ import annotations

from loguru import logger

from mvp24h_mcp.catalogs import cqrs_guide as catalog
from mvp24h_mcp.core import DocLoader, TopicResolver, get_doc_loader


async def cqrs_guide(topic: str = "overview", loader: DocLoader | None = None) -> str:
    """Get CQRS and Mediator documentation.

    Args:
        topic: CQRS topic (default: "overview")

    Returns:
        Markdown documentation with related topics
    """
    logger.info(f"CQRS guide requested: {topic}")
    resolver = TopicResolver(catalog.CATALOG, loader or get_doc_loader())
    return resolver.resolve(topic)
