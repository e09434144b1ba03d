"""Tests for the build-context tool."""

import pytest

from mvp24h_mcp.core import DocLoader
from mvp24h_mcp.tools import build_context


@pytest.mark.asyncio
async def test_unknown_architecture_lists_groups(loader: DocLoader) -> None:
    result = await build_context("big-ball-of-mud", loader=loader)

    assert result.startswith("# Architecture Not Found")
    assert "### Advanced Architectures" in result
    assert "- `cqrs` - CQRS with Mediator pattern" in result


@pytest.mark.asyncio
async def test_cqrs_with_database(loader: DocLoader) -> None:
    result = await build_context(
        "cqrs", resources=["database", "bogus"], database_provider="postgresql", loader=loader,
    )

    assert result.startswith("# Complete Context: CQRS/Mediator Architecture")
    assert "- `Mvp24Hours.Infrastructure.Cqrs`" in result
    assert "## Architecture Foundation" in result
    assert "CQRS template body." in result
    assert "IMediatorCommand body." in result
    assert "## Database Configuration: POSTGRESQL" in result
    assert "EF Core relational body." in result
    assert "## Database Patterns" in result
    assert "### CQRS Interfaces" in result
    assert "**Database:**" in result
    assert "- [ ] Create Commands and CommandHandlers" in result
    assert 'mvp24h_database_advisor({ provider: "postgresql" })' in result


@pytest.mark.asyncio
async def test_sections_keep_their_order(loader: DocLoader) -> None:
    result = await build_context("cqrs", resources=["testing"], database_provider="sqlserver", loader=loader)

    headings = [
        "## Architecture Foundation",
        "## Database Configuration: SQLSERVER",
        "## Testing Patterns",
        "## Key Interfaces Reference",
        "## Next Steps",
    ]
    positions = [result.index(heading) for heading in headings]
    assert positions == sorted(positions)


@pytest.mark.asyncio
async def test_unknown_provider_is_skipped(loader: DocLoader) -> None:
    result = await build_context("cqrs", database_provider="oracle", loader=loader)

    assert "## Database Configuration" not in result
    assert 'provider: "oracle"' not in result
    assert "**Database:**" not in result


@pytest.mark.asyncio
async def test_missing_docs_keep_inline_sections(empty_loader: DocLoader) -> None:
    result = await build_context("clean-architecture", resources=["caching"], loader=empty_loader)

    assert result.startswith("# Complete Context: Clean Architecture Architecture")
    assert "## Architecture Foundation" not in result
    assert "## Caching Patterns" not in result
    assert "## Key Interfaces Reference" in result
    assert "### Core Interfaces (Mvp24Hours.Core)" in result
    assert "**Caching:**" in result
