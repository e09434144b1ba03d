"""Tests for the get-started tool."""

import pytest

from mvp24h_mcp.catalogs import get_started as catalog
from mvp24h_mcp.tools import get_started


@pytest.mark.asyncio
async def test_default_focus_is_overview() -> None:
    result = await get_started()

    assert result == await get_started(focus="overview")
    assert result.startswith("# Mvp24Hours .NET Framework")
    assert "## Framework Overview" in result
    assert "## Quick Start" not in result
    assert result.endswith(catalog.NEXT_STEPS)


@pytest.mark.asyncio
async def test_all_includes_every_section_in_order() -> None:
    result = await get_started(focus="all")

    positions = [result.index(heading) for heading in (
        "## Quick Tool Reference",
        "## Framework Overview",
        "## Quick Start",
        "## NuGet Packages Reference",
        "## Next Steps",
    )]
    assert positions == sorted(positions)


@pytest.mark.asyncio
async def test_packages_focus() -> None:
    result = await get_started(focus="packages")
    assert '<PackageReference Include="Mvp24Hours.Core" Version="9.*" />' in result


@pytest.mark.asyncio
async def test_unknown_focus_lists_focus_areas(listed) -> None:
    result = await get_started(focus="everything")

    assert result.startswith("# Focus Not Found")
    assert listed(result, "## Available Focus Areas") == ["overview", "quick-start", "packages", "all"]
