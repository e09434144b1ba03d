"""Tests for MCP resource URI resolution."""

import pytest

from mvp24h_mcp.core import DocLoader
from mvp24h_mcp.core.resources import (
    STATIC_RESOURCES,
    TEMPLATE_CATEGORIES,
    category_uris,
    read_resource,
    resolve_uri,
)


@pytest.mark.parametrize(
    "uri,expected",
    [
        ("mvp24hours://docs/overview", "home.md"),
        ("mvp24hours://docs/ai-decision-matrix", "ai-context/ai-decision-matrix.md"),
        ("mvp24hours://docs/template/cqrs", "ai-context/template-cqrs.md"),
        ("mvp24hours://docs/ai-template/skg-react-agent", "ai-context/template-skg-react-agent.md"),
        ("mvp24hours://docs/core/guard-clauses", "core/guard-clauses.md"),
        ("mvp24hours://docs/testing/unit-testing", "ai-context/testing-patterns.md#Unit Testing"),
        ("mvp24hours://docs/modernization/overview", "ai-context/modernization-patterns.md"),
        ("mvp24hours://docs/modernization/hybrid-cache", "modernization/hybrid-cache.md"),
    ],
)
def test_resolve_uri(uri, expected) -> None:
    assert resolve_uri(uri) == expected


@pytest.mark.parametrize(
    "uri",
    [
        "mvp24hours://docs/nothing",
        "mvp24hours://docs/template/spaghetti",
        "mvp24hours://docs/unknown/cqrs",
        "mvp24hours://docs/template/cqrs/extra",
        "https://example.com/docs/overview",
    ],
)
def test_resolve_unknown_uri(uri) -> None:
    assert resolve_uri(uri) is None


def test_static_resources_win_over_categories() -> None:
    assert "mvp24hours://docs/pipeline" in STATIC_RESOURCES
    assert resolve_uri("mvp24hours://docs/pipeline") == "pipeline.md"


def test_category_uris_cover_every_param() -> None:
    uris = {uri for uri, _, _ in category_uris()}

    assert len(uris) == sum(len(group.params) for group in TEMPLATE_CATEGORIES.values())
    assert "mvp24hours://docs/database/unit-of-work" in uris
    assert all(resolve_uri(uri) is not None for uri in uris)


def test_category_uri_names() -> None:
    names = {uri: name for uri, name, _ in category_uris()}
    assert names["mvp24hours://docs/cqrs/commands"] == "CQRS Pattern: Commands"


def test_uri_template() -> None:
    assert TEMPLATE_CATEGORIES["template"].uri_template("template") == "mvp24hours://docs/template/{templateName}"


def test_read_whole_document(loader: DocLoader) -> None:
    assert read_resource("mvp24hours://docs/overview", loader) == "# Mvp24Hours\n\nWelcome to the framework."


def test_read_section(loader: DocLoader) -> None:
    text = read_resource("mvp24hours://docs/testing/unit-testing", loader)

    assert text.startswith("## Unit Testing")
    assert "### Naming" in text
    assert "Integration Testing" not in text


def test_read_unknown_resource_lists_categories(loader: DocLoader) -> None:
    text = read_resource("mvp24hours://docs/template/spaghetti", loader)

    assert text.startswith("# Resource not found")
    assert '"mvp24hours://docs/template/spaghetti"' in text
    assert "- **containerization**:" in text


def test_read_missing_document_reports_error(loader: DocLoader) -> None:
    text = read_resource("mvp24hours://docs/webapi", loader)
    assert text.startswith("Error loading resource:")
    assert "webapi.md" in text


def test_read_undecodable_document_reports_error(loader: DocLoader, docs_root) -> None:
    (docs_root / "cqrs" / "commands.md").write_bytes(b"# Commands\n\n\xff\xfe bad")

    text = read_resource("mvp24hours://docs/cqrs/commands", loader)
    assert text.startswith("Error loading resource:")
