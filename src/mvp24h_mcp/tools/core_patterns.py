"""mvp24h_core_patterns MCP tool implementation."""

from __future__ import annotations

from loguru import logger

from mvp24h_mcp.catalogs import core_patterns as catalog
from mvp24h_mcp.core import DocLoader, TopicResolver, get_doc_loader


async def core_patterns(topic: str | None = None, loader: DocLoader | None = None) -> str:
    """Get documentation for the Mvp24Hours core module.

    Covers guard clauses, value objects, strongly-typed IDs, functional
    patterns, smart enums, entity interfaces and infrastructure abstractions.

    Args:
        topic: Core topic; omitted or "overview" returns the module overview

    Returns:
        Markdown documentation
    """
    logger.info(f"Core patterns requested: {topic or 'overview'}")
    resolver = TopicResolver(catalog.CATALOG, loader or get_doc_loader())

    if topic and topic != "overview":
        return resolver.resolve(topic)
    return resolver.overview(
        catalog.OVERVIEW_INTRO,
        catalog.OVERVIEW_REFERENCE,
        hidden=catalog.HIDDEN_TOPICS,
    )
