"""Tests for the topic-driven documentation tools."""

import pytest

from mvp24h_mcp.catalogs import (
    containerization_patterns as containerization_catalog,
    core_patterns as core_catalog,
    cqrs_guide as cqrs_catalog,
    infrastructure_guide as infrastructure_catalog,
    messaging_patterns as messaging_catalog,
    reference_guide as reference_catalog,
    security_patterns as security_catalog,
    testing_patterns as testing_catalog,
)
from mvp24h_mcp.core import DocLoader, TopicResolver
from mvp24h_mcp.tools import (
    containerization_patterns,
    core_patterns,
    cqrs_guide,
    infrastructure_guide,
    messaging_patterns,
    reference_guide,
    security_patterns,
    testing_patterns as patterns_testing_tool,
)
from mvp24h_mcp.utils import title_case

# (tool, catalog module, selector argument)
TOPIC_TOOLS = [
    (core_patterns, core_catalog, "topic"),
    (infrastructure_guide, infrastructure_catalog, "topic"),
    (reference_guide, reference_catalog, "topic"),
    (patterns_testing_tool, testing_catalog, "topic"),
    (security_patterns, security_catalog, "topic"),
    (containerization_patterns, containerization_catalog, "topic"),
    (messaging_patterns, messaging_catalog, "pattern"),
]

KEYED_CASES = [
    (tool, catalog, argument, key)
    for tool, catalog, argument in TOPIC_TOOLS
    for key in catalog.CATALOG.keys
    if key != "overview"
] + [(cqrs_guide, cqrs_catalog, "topic", key) for key in cqrs_catalog.CATALOG.keys]


@pytest.mark.asyncio
@pytest.mark.parametrize("tool,catalog,argument,key", KEYED_CASES)
async def test_every_key_yields_its_header(tool, catalog, argument, key, loader: DocLoader) -> None:
    result = await tool(**{argument: key}, loader=loader)
    title = TopicResolver(catalog.CATALOG, loader).title(key)

    assert result.startswith(f"# {title}")
    assert "Not Found" not in result.splitlines()[0]


@pytest.mark.asyncio
@pytest.mark.parametrize("tool,catalog,argument", TOPIC_TOOLS + [(cqrs_guide, cqrs_catalog, "topic")])
async def test_unknown_key_lists_declared_keys(tool, catalog, argument, loader: DocLoader, listed) -> None:
    result = await tool(**{argument: "does-not-exist"}, loader=loader)
    heading = f"## Available {title_case(catalog.CATALOG.plural)}"

    assert "Not Found" in result.splitlines()[0]
    assert listed(result, heading) == catalog.CATALOG.keys


@pytest.mark.asyncio
@pytest.mark.parametrize("tool,catalog,argument", TOPIC_TOOLS)
async def test_overview_is_inline(tool, catalog, argument, empty_loader: DocLoader) -> None:
    implicit = await tool(loader=empty_loader)
    explicit = await tool(**{argument: "overview"}, loader=empty_loader)

    assert implicit == explicit
    assert implicit.startswith(catalog.OVERVIEW_INTRO)
    assert "## Additional Context" not in implicit


@pytest.mark.asyncio
async def test_core_overview_appends_home_and_hides_aliases(loader: DocLoader) -> None:
    result = await core_patterns(loader=loader)

    assert "## Additional Context" in result
    assert "Core overview body." in result
    assert "| `guard-clauses` |" in result
    assert "| `infrastructure` |" not in result


@pytest.mark.asyncio
async def test_section_topics_load_only_their_section(loader: DocLoader) -> None:
    result = await patterns_testing_tool(topic="unit-testing", loader=loader)

    assert "xUnit body." in result
    assert "WebApplicationFactory body." not in result


@pytest.mark.asyncio
async def test_missing_documents_degrade_to_placeholder(empty_loader: DocLoader) -> None:
    result = await cqrs_guide(topic="commands", loader=empty_loader)

    assert result.startswith("# CQRS Commands")
    assert '_Documentation not available for "commands"._' in result


@pytest.mark.asyncio
async def test_cqrs_defaults_to_overview(loader: DocLoader) -> None:
    result = await cqrs_guide(loader=loader)

    assert result.startswith("# CQRS/Mediator Overview")
    assert "Mediator overview body." in result


@pytest.mark.asyncio
async def test_related_topics_render_tool_usage(loader: DocLoader) -> None:
    result = await cqrs_guide(topic="commands", loader=loader)

    assert "IMediatorCommand body." in result
    assert "## Related Topics" in result
    assert 'mvp24h_cqrs_guide({ topic: "queries" })' in result


@pytest.mark.asyncio
async def test_topic_tools_are_idempotent(loader: DocLoader) -> None:
    first = await infrastructure_guide(topic="pipeline", loader=loader)
    second = await infrastructure_guide(topic="pipeline", loader=loader)
    assert first == second


@pytest.mark.asyncio
async def test_undecodable_fragment_is_skipped(loader: DocLoader, docs_root) -> None:
    (docs_root / "cqrs" / "commands.md").write_bytes(b"# Commands\n\n\xff\xfe bad")

    result = await cqrs_guide(topic="commands", loader=loader)

    assert result.startswith("# CQRS Commands")
    assert '_Documentation not available for "commands"._' in result
    assert "## Related Topics" in result
