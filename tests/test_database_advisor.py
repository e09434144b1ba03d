"""Tests for the database advisor."""

import pytest

from mvp24h_mcp.core import DocLoader
from mvp24h_mcp.schemas import DatabaseProvider
from mvp24h_mcp.tools import database_advisor
from mvp24h_mcp.tools.database_advisor import pattern_files, select_patterns, select_provider


def test_explicit_provider_wins_over_requirements() -> None:
    assert select_provider(provider="mysql", requirements=["caching"]) is DatabaseProvider.MYSQL


def test_unknown_provider_falls_back_to_postgresql() -> None:
    assert select_provider(provider="bogus") is DatabaseProvider.POSTGRESQL


def test_first_matching_requirement_decides() -> None:
    assert select_provider(requirements=["flexible-schema", "caching"]) is DatabaseProvider.REDIS
    assert select_provider(requirements=["flexible-schema"]) is DatabaseProvider.MONGODB


@pytest.mark.parametrize(
    "data_type,expected",
    [
        ("document", DatabaseProvider.MONGODB),
        ("key-value", DatabaseProvider.REDIS),
        ("relational", DatabaseProvider.POSTGRESQL),
        ("mixed", DatabaseProvider.POSTGRESQL),
        (None, DatabaseProvider.POSTGRESQL),
    ],
)
def test_data_type_mapping(data_type, expected) -> None:
    assert select_provider(data_type=data_type) is expected


def test_select_patterns_from_requirements() -> None:
    assert select_patterns() == ["repository", "unit-of-work"]
    assert select_patterns(["complex-queries", "high-write-throughput"]) == [
        "repository", "unit-of-work", "specification", "dapper",
    ]


def test_pattern_files_are_deduplicated() -> None:
    files = pattern_files(["unit-of-work", "dapper", "hybrid"])
    assert files == ["database/use-unitofwork.md", "database/efcore-advanced.md"]


@pytest.mark.asyncio
async def test_no_arguments_returns_overview_topic(loader: DocLoader) -> None:
    result = await database_advisor(loader=loader)

    assert result.startswith("# Database Patterns")
    assert "Patterns body." in result


@pytest.mark.asyncio
async def test_topic_short_circuits_recommendation(loader: DocLoader) -> None:
    result = await database_advisor(topic="repository", provider="mongodb", loader=loader)

    assert result.startswith("# Repository")
    assert "Database Configuration Recommendation" not in result


@pytest.mark.asyncio
async def test_unknown_topic_lists_topics(loader: DocLoader) -> None:
    result = await database_advisor(topic="graph-db", loader=loader)
    assert result.startswith("# Topic Not Found")


@pytest.mark.asyncio
async def test_flexible_schema_recommends_mongodb(loader: DocLoader) -> None:
    result = await database_advisor(requirements=["flexible-schema"], loader=loader)

    assert "## Recommended Database: **MongoDB**" in result
    assert "MongoDB body." in result
    assert 'mvp24h_database_advisor({ topic: "mongodb-advanced" })' in result


@pytest.mark.asyncio
async def test_unknown_provider_recommends_postgresql(loader: DocLoader) -> None:
    result = await database_advisor(provider="bogus", loader=loader)

    assert "**PostgreSQL with Entity Framework Core**" in result
    assert "EF Core relational body." in result
    assert 'mvp24h_database_advisor({ topic: "efcore-advanced" })' in result


@pytest.mark.asyncio
async def test_pattern_documentation_is_loaded_once(loader: DocLoader) -> None:
    result = await database_advisor(
        provider="sqlserver", patterns=["unit-of-work", "dapper"], loader=loader,
    )

    assert "## Pattern Documentation" in result
    assert result.count("IUnitOfWorkAsync body.") == 1
    assert "IRepositoryAsync body." not in result


@pytest.mark.asyncio
async def test_high_write_throughput_adds_dapper_step(loader: DocLoader) -> None:
    result = await database_advisor(requirements=["high-write-throughput"], loader=loader)

    assert "**PostgreSQL with Entity Framework Core**" in result
    assert "5. Consider hybrid approach with Dapper" in result


@pytest.mark.asyncio
async def test_plain_recommendation_has_four_steps(loader: DocLoader) -> None:
    result = await database_advisor(data_type="relational", loader=loader)
    assert "4. Register services in DI container" in result
    assert "5. Consider hybrid approach" not in result


@pytest.mark.asyncio
async def test_missing_docs_drop_documentation_sections(empty_loader: DocLoader) -> None:
    result = await database_advisor(data_type="document", loader=empty_loader)

    assert "## Recommended Database: **MongoDB**" in result
    assert "## Provider Documentation" not in result
    assert "## Pattern Documentation" not in result
    assert "## Database Selection Matrix" in result
