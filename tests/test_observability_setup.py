"""Tests for the observability setup tool."""

import pytest

from mvp24h_mcp.core import DocLoader
from mvp24h_mcp.tools import observability_setup


@pytest.mark.asyncio
async def test_exporter_setup(loader: DocLoader) -> None:
    result = await observability_setup(exporter="jaeger", loader=loader)

    assert result.startswith("# Jaeger Exporter")
    assert "Exporter body." in result
    assert "## Jaeger Setup" in result
    assert "dotnet add package OpenTelemetry.Exporter.OpenTelemetryProtocol" in result


@pytest.mark.asyncio
async def test_exporter_takes_precedence_over_component(loader: DocLoader) -> None:
    result = await observability_setup(component="logging", exporter="zipkin", loader=loader)
    assert result.startswith("# Zipkin Exporter")


@pytest.mark.asyncio
async def test_unknown_exporter(loader: DocLoader) -> None:
    result = await observability_setup(exporter="datadog", loader=loader)

    assert result.startswith("# Exporter Not Found")
    assert "- application-insights" in result


@pytest.mark.asyncio
async def test_component_resolves_docs(loader: DocLoader) -> None:
    result = await observability_setup(component="exporters", loader=loader)

    assert result.startswith("# Telemetry Exporters")
    assert "Exporter body." in result
    assert 'mvp24h_observability_setup({ component: "tracing" })' in result


@pytest.mark.asyncio
async def test_overview(loader: DocLoader) -> None:
    result = await observability_setup(loader=loader)

    assert result.startswith("# Observability Setup")
    assert "## Available Components" in result
    assert "- `prometheus` - Prometheus" in result
