"""mvp24h_observability_setup MCP tool implementation."""

from __future__ import annotations

from loguru import logger

from mvp24h_mcp.catalogs import observability_setup as catalog
from mvp24h_mcp.core import DocLoader, TopicResolver, get_doc_loader


async def observability_setup(
    component: str | None = None,
    exporter: str | None = None,
    loader: DocLoader | None = None,
) -> str:
    """Get OpenTelemetry logging, tracing and metrics setup.

    Args:
        component: "logging", "tracing", "metrics", "exporters" or "migration"
        exporter: Exporter-specific setup, e.g. "jaeger"; takes precedence over component

    Returns:
        Markdown documentation
    """
    loader = loader or get_doc_loader()

    if exporter:
        logger.info(f"Observability exporter requested: {exporter}")
        return TopicResolver(catalog.EXPORTER_CATALOG, loader).resolve(exporter)

    resolver = TopicResolver(catalog.COMPONENTS, loader)
    if component and component != "overview":
        logger.info(f"Observability component requested: {component}")
        return resolver.resolve(component)

    logger.info("Observability overview requested")
    return resolver.overview(catalog.OVERVIEW_INTRO, catalog.OVERVIEW_REFERENCE)
