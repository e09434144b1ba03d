"""Tests for MCP prompt rendering."""

import pytest

from mvp24h_mcp.core.prompts import PROMPTS, render_prompt


def test_defaults_fill_missing_arguments() -> None:
    rendered = render_prompt("create-dotnet-project")

    assert rendered.description == "Create a new .NET api project with simple-nlayers architecture"
    assert "using the simple-nlayers architecture pattern" in rendered.text


def test_supplied_arguments_are_used() -> None:
    rendered = render_prompt("setup-database", {"database": "mongodb", "orm": "dapper"})

    assert rendered.description == "Setup mongodb database with dapper"
    assert "setup mongodb database using dapper" in rendered.text


def test_empty_argument_falls_back_to_default() -> None:
    rendered = render_prompt("implement-cqrs", {"component": ""})
    assert 'topic "command"' in rendered.text


def test_all_observability_signals() -> None:
    rendered = render_prompt("setup-observability")

    assert rendered.description == "Setup all observability with jaeger"
    assert "2. Setup logging, tracing, and metrics" in rendered.text


def test_single_observability_signal() -> None:
    rendered = render_prompt("setup-observability", {"component": "tracing"})
    assert "2. Setup tracing\n" in rendered.text


def test_unknown_prompt() -> None:
    with pytest.raises(ValueError, match="Unknown prompt: deploy-to-mars"):
        render_prompt("deploy-to-mars")


@pytest.mark.parametrize("name", list(PROMPTS))
def test_every_prompt_renders_with_defaults(name) -> None:
    rendered = render_prompt(name)

    assert rendered.description
    assert "{" not in rendered.text
    assert "mvp24h_" in rendered.text
