"""mvp24h_get_started MCP tool implementation."""

from __future__ import annotations

from loguru import logger

from mvp24h_mcp.catalogs import get_started as catalog
from mvp24h_mcp.core import TopicResolver, get_doc_loader


async def get_started(focus: str | None = None) -> str:
    """Get the Mvp24Hours framework overview and tool map.

    Args:
        focus: "overview", "quick-start", "packages" or "all" (default: "overview")

    Returns:
        Markdown with the tool reference, the requested sections and next steps
    """
    focus = focus or catalog.DEFAULT_FOCUS
    logger.info(f"Getting started, focus: {focus}")

    sections = catalog.FOCUS_SECTIONS.get(focus)
    if sections is None:
        return TopicResolver(catalog.CATALOG, get_doc_loader()).not_found(focus)

    return "\n\n".join([catalog.HEADER, *sections, catalog.NEXT_STEPS])
