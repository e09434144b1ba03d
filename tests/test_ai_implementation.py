"""Tests for the AI implementation tool."""

import pytest

from mvp24h_mcp.core import DocLoader
from mvp24h_mcp.tools import ai_implementation
from mvp24h_mcp.tools.ai_implementation import recommend


def test_use_case_recommendation() -> None:
    result = recommend("qa-documents")

    assert result.startswith("# AI Implementation Recommendation")
    assert "## Recommended Approach: **Semantic Kernel**" in result
    assert "## Recommended Template: **Rag Basic**" in result
    assert "- Document Q&A → Semantic Kernel RAG" in result
    assert 'mvp24h_ai_implementation({ template: "rag-basic" })' in result


def test_unknown_use_case_uses_default() -> None:
    assert recommend("astrology") == recommend(None)
    assert "No specific use case → Default to Semantic Kernel" in recommend(None)


def test_recommendation_carries_reference_sections() -> None:
    result = recommend("workflow")

    assert "## Recommended Approach: **Semantic Kernel Graph**" in result
    assert "## AI Decision Matrix" in result
    assert "## Required Packages" in result
    assert "### appsettings.json" in result


@pytest.mark.asyncio
async def test_approach_loads_only_its_section(loader: DocLoader) -> None:
    result = await ai_implementation(approach="sk-graph", loader=loader)

    assert result.startswith("# Semantic Kernel Graph")
    assert "SKG body." in result
    assert "AF body." not in result
    assert 'mvp24h_ai_implementation({ template: "react-agent" })' in result


@pytest.mark.asyncio
async def test_template_wins_over_approach(loader: DocLoader) -> None:
    result = await ai_implementation(approach="sk-graph", template="react-agent", loader=loader)

    assert result.startswith("# React Agent")
    assert '_Documentation not available for "react-agent"._' in result


@pytest.mark.asyncio
async def test_unknown_approach(loader: DocLoader) -> None:
    result = await ai_implementation(approach="langchain", loader=loader)

    assert result.startswith("# Approach Not Found")
    assert "- agent-framework" in result


@pytest.mark.asyncio
async def test_no_arguments_recommends(loader: DocLoader) -> None:
    result = await ai_implementation(loader=loader)
    assert result == recommend(None)
