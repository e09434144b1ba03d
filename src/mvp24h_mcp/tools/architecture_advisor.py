"""mvp24h_architecture_advisor MCP tool implementation."""

from __future__ import annotations

from loguru import logger

from mvp24h_mcp.catalogs import architecture_advisor as catalog
from mvp24h_mcp.utils import bullet_list


def recommend_template(
    complexity: str | None = None,
    entity_count: str | None = None,
    business_rules: str | None = None,
    team_size: str | None = None,
    requirements: list[str] | None = None,
) -> tuple[str, list[str]]:
    """Pick an architecture template from project characteristics.

    Explicit requirements win, first match in rule order. Otherwise the
    complexity rules apply, then the team-size and entity-count adjustments.

    Returns:
        (template name, reasons)
    """
    requirements = requirements or []

    for needs, template, reason in catalog.REQUIREMENT_RULES:
        if any(need in requirements for need in needs):
            return template, [reason]

    template = catalog.DEFAULT_TEMPLATE
    reasoning: list[str] = []

    if complexity == "low" or (entity_count == "few" and business_rules == "simple"):
        template = "minimal-api"
        reasoning.append("Low complexity with simple requirements")
    elif complexity == "medium" or business_rules == "moderate":
        template = "simple-nlayers"
        reasoning.append("Medium complexity with moderate business rules")
    elif complexity == "high" or business_rules == "complex":
        template = "complex-nlayers"
        reasoning.append("High complexity requiring dedicated application layer")
    elif complexity == "very-high":
        template = "clean-architecture"
        reasoning.append("Very high complexity requiring clean architecture principles")

    if team_size == "large" and template == "complex-nlayers":
        template = "clean-architecture"
        reasoning.append("Large team benefits from stricter architectural boundaries")

    if entity_count == "many" and template == "simple-nlayers":
        template = "complex-nlayers"
        reasoning.append("Many entities benefit from specification pattern and services layer")

    if not reasoning:
        reasoning.append("No strong signals provided; a balanced default structure")

    return template, reasoning


def _alternatives(template: str) -> str:
    alternatives = catalog.TEMPLATES[template].alternatives
    if not alternatives:
        return "This is the recommended approach for your requirements."
    return f"Consider these alternatives:\n{bullet_list(alternatives)}"


async def architecture_advisor(
    complexity: str | None = None,
    entity_count: str | None = None,
    business_rules: str | None = None,
    team_size: str | None = None,
    requirements: list[str] | None = None,
) -> str:
    """Recommend an Mvp24Hours architecture template.

    Args:
        complexity: "low", "medium", "high" or "very-high"
        entity_count: "few", "medium" or "many"
        business_rules: "simple", "moderate" or "complex"
        team_size: "solo", "small" or "large"
        requirements: Specific needs such as "cqrs" or "microservices"

    Returns:
        Markdown recommendation with decision matrix and next steps
    """
    requirements = requirements or []
    logger.info(f"Advising architecture: complexity={complexity}, requirements={requirements}")

    name, reasoning = recommend_template(complexity, entity_count, business_rules, team_size, requirements)
    template = catalog.TEMPLATES[name]
    logger.info(f"Recommended template: {name}")

    next_steps = [
        f'1. **Get the template code**: `mvp24h_get_template({{ template_name: "{name}" }})`',
        "2. **Configure database**: `mvp24h_database_advisor({ ... })`",
        "3. **Add observability**: `mvp24h_observability_setup({ ... })`",
    ]
    if "cqrs" in requirements or name == "cqrs":
        next_steps.append('4. **CQRS patterns**: `mvp24h_cqrs_guide({ topic: "commands" })`')
    steps = "\n".join(next_steps)

    return f"""# Architecture Recommendation

## Recommended Template: **{template.name}**

### Why This Template?
{bullet_list(reasoning)}

### Template Overview
{template.description}

### Project Structure
```
{template.structure}
```

### Key Characteristics
{bullet_list(template.characteristics)}

### Required Packages
```xml
{template.package_references(catalog.PACKAGE_VERSIONS)}
```

---

{catalog.DECISION_MATRIX}

---

## Alternative Options

{_alternatives(name)}

---

## Next Steps

{steps}
"""
