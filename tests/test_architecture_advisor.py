"""Tests for the architecture advisor."""

import pytest

from mvp24h_mcp.catalogs import architecture_advisor as catalog
from mvp24h_mcp.tools import architecture_advisor
from mvp24h_mcp.tools.architecture_advisor import recommend_template


@pytest.mark.parametrize(
    "kwargs,expected",
    [
        ({"requirements": ["microservices", "cqrs"]}, "microservices"),
        ({"requirements": ["event-sourcing"]}, "ddd"),
        ({"requirements": ["cqrs"], "complexity": "low"}, "cqrs"),
        ({"requirements": ["external-integrations"]}, "hexagonal"),
        ({"requirements": ["audit-trail"]}, "event-driven"),
        ({"requirements": ["rapid-prototype"]}, "minimal-api"),
        ({"complexity": "low"}, "minimal-api"),
        ({"entity_count": "few", "business_rules": "simple"}, "minimal-api"),
        ({"complexity": "medium"}, "simple-nlayers"),
        ({"complexity": "medium", "entity_count": "many"}, "complex-nlayers"),
        ({"complexity": "high"}, "complex-nlayers"),
        ({"business_rules": "complex", "team_size": "large"}, "clean-architecture"),
        ({"complexity": "very-high"}, "clean-architecture"),
        ({}, "simple-nlayers"),
    ],
)
def test_recommend_template(kwargs, expected) -> None:
    template, reasons = recommend_template(**kwargs)

    assert template == expected
    assert template in catalog.TEMPLATES
    assert reasons


def test_requirement_rule_carries_single_reason() -> None:
    _, reasons = recommend_template(requirements=["cqrs"])
    assert reasons == ["CQRS pattern for read/write separation"]


def test_default_reason_when_nothing_given() -> None:
    _, reasons = recommend_template()
    assert reasons == ["No strong signals provided; a balanced default structure"]


def test_adjustments_accumulate_reasons() -> None:
    _, reasons = recommend_template(complexity="high", team_size="large")
    assert reasons == [
        "High complexity requiring dedicated application layer",
        "Large team benefits from stricter architectural boundaries",
    ]


@pytest.mark.asyncio
async def test_cqrs_recommendation_renders_card() -> None:
    result = await architecture_advisor(requirements=["cqrs"])

    assert result.startswith("# Architecture Recommendation")
    assert "## Recommended Template: **CQRS (Command Query Responsibility Segregation)**" in result
    assert '<PackageReference Include="FluentValidation" Version="11.*" />' in result
    assert '<PackageReference Include="Mvp24Hours.Core" Version="9.*" />' in result
    assert "## Decision Matrix" in result
    assert "- complex-nlayers without CQRS" in result
    assert '4. **CQRS patterns**: `mvp24h_cqrs_guide({ topic: "commands" })`' in result


@pytest.mark.asyncio
async def test_non_cqrs_recommendation_has_three_steps() -> None:
    result = await architecture_advisor(complexity="low")

    assert "## Recommended Template: **Minimal API**" in result
    assert 'mvp24h_get_template({ template_name: "minimal-api" })' in result
    assert "4. **CQRS patterns**" not in result


@pytest.mark.asyncio
async def test_cqrs_requirement_adds_step_even_when_outranked() -> None:
    result = await architecture_advisor(requirements=["microservices", "cqrs"])

    assert "**Microservices Architecture**" in result
    assert "4. **CQRS patterns**" in result
