"""Tests for the .NET 9 modernization guide."""

import pytest

from mvp24h_mcp.core import DocLoader
from mvp24h_mcp.tools import modernization_guide


@pytest.mark.asyncio
async def test_feature_returns_doc_and_quick_reference(loader: DocLoader) -> None:
    result = await modernization_guide(feature="hybrid-cache", loader=loader)

    assert result.startswith("# HybridCache")
    assert "HybridCache body." in result
    assert "dotnet add package Microsoft.Extensions.Caching.Hybrid" in result
    assert 'mvp24h_modernization_guide({ feature: "output-caching" })' in result
    assert "## Other Resources" in result


@pytest.mark.asyncio
async def test_feature_takes_precedence_over_category(loader: DocLoader) -> None:
    result = await modernization_guide(category="cloud", feature="hybrid-cache", loader=loader)
    assert result.startswith("# HybridCache")


@pytest.mark.asyncio
async def test_category_lists_features_and_other_categories(loader: DocLoader, listed) -> None:
    result = await modernization_guide(category="caching", loader=loader)

    assert result.startswith("# Caching Features (.NET 9)")
    assert "HybridCache body." in result
    assert listed(result, "## Related Features") == [
        '`mvp24h_modernization_guide({ feature: "hybrid-cache" })`',
        '`mvp24h_modernization_guide({ feature: "output-caching" })`',
    ]
    others = listed(result, "## Other Categories")
    assert '`mvp24h_modernization_guide({ category: "resilience" })` - Resilience patterns' in others
    assert not any('category: "caching"' in item for item in others)


@pytest.mark.asyncio
async def test_unknown_category(loader: DocLoader) -> None:
    result = await modernization_guide(category="quantum", loader=loader)

    assert result.startswith("# Category Not Found")
    assert "- communication" in result


@pytest.mark.asyncio
async def test_unknown_feature(loader: DocLoader) -> None:
    result = await modernization_guide(feature="time-travel", loader=loader)
    assert result.startswith("# Feature Not Found")


@pytest.mark.asyncio
async def test_overview_without_arguments(loader: DocLoader) -> None:
    result = await modernization_guide(loader=loader)

    assert result.startswith("# .NET 9 Modernization Guide")
    assert "## Available Features" in result
    assert "| `hybrid-cache` | L1/L2 caching with stampede protection |" in result
