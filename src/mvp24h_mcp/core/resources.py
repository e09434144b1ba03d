"""MCP resources: mvp24hours://docs URIs mapped onto the documentation tree."""

from __future__ import annotations

import re

from loguru import logger
from pydantic import BaseModel, ConfigDict

from mvp24h_mcp.catalogs import core_patterns, cqrs_guide, database_advisor, modernization_guide
from mvp24h_mcp.catalogs import containerization_patterns, observability_setup, security_patterns
from mvp24h_mcp.catalogs import templates, testing_patterns
from mvp24h_mcp.core.doc_loader import DocLoader
from mvp24h_mcp.core.resolver import split_fragment
from mvp24h_mcp.schemas import TopicCatalog
from mvp24h_mcp.utils import title_case

URI_PREFIX = "mvp24hours://docs/"
URI_RE = re.compile(r"^mvp24hours://docs/([^/]+)/([^/]+)$")


class StaticResource(BaseModel):
    """A fixed documentation resource."""
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    path: str


class ResourceCategory(BaseModel):
    """A parameterised resource family: mvp24hours://docs/{category}/{param}."""
    model_config = ConfigDict(frozen=True)

    name: str
    param: str  # placeholder name shown in the URI template
    description: str
    params: dict[str, str]  # param value -> doc reference

    def uri_template(self, category: str) -> str:
        return f"{URI_PREFIX}{category}/{{{self.param}}}"


def _single_fragment(catalog: TopicCatalog) -> dict[str, str]:
    return {key: refs[0] for key, refs in catalog.topics.items() if len(refs) == 1}


def _template_paths(groups: list[str]) -> dict[str, str]:
    return {
        name: path
        for group in groups
        for name, (path, _) in templates.TEMPLATE_GROUPS[group].items()
    }


STATIC_RESOURCES: dict[str, StaticResource] = {
    f"{URI_PREFIX}{key}": StaticResource(name=name, description=description, path=path)
    for key, name, description, path in [
        ("overview", "Mvp24Hours Overview", "Framework overview and getting started guide", "home.md"),
        ("getting-started", "Getting Started", "Installation and first steps", "getting-started.md"),
        ("decision-matrix", "Architecture Decision Matrix", "Choose the right architecture template", "ai-context/decision-matrix.md"),
        ("ai-decision-matrix", "AI Decision Matrix", "Choose the right AI approach", "ai-context/ai-decision-matrix.md"),
        ("architecture-templates", "Architecture Templates", "Overview of every architecture template", "ai-context/architecture-templates.md"),
        ("pipeline", "Pipeline Pattern", "Pipe and Filters with IPipelineAsync", "pipeline.md"),
        ("webapi", "Web API", "Web API configuration and controllers", "webapi.md"),
        ("webapi-advanced", "Web API Advanced", "Advanced Web API features", "webapi-advanced.md"),
        ("cronjob", "CronJob", "Scheduled background jobs", "cronjob.md"),
        ("application-services", "Application Services", "Application service layer", "application-services.md"),
        ("broker", "RabbitMQ", "RabbitMQ messaging", "broker.md"),
        ("broker-advanced", "RabbitMQ Advanced", "Advanced RabbitMQ patterns", "broker-advanced.md"),
        ("messaging-patterns", "Messaging Patterns", "Async messaging and event patterns", "ai-context/messaging-patterns.md"),
        ("mapping", "Object Mapping", "AutoMapper patterns", "mapping.md"),
        ("validation", "Validation", "FluentValidation patterns", "validation.md"),
        ("specification", "Specification Pattern", "Specification pattern implementation", "specification.md"),
        ("documentation", "API Documentation", "Swagger/OpenAPI documentation", "documentation.md"),
        ("migration", "EF Core Migrations", "Database migration patterns", "migration.md"),
    ]
}

TEMPLATE_CATEGORIES: dict[str, ResourceCategory] = {
    "template": ResourceCategory(
        name="Architecture Template",
        param="templateName",
        description="Get a specific architecture template by name",
        params=_template_paths(["Architecture Templates"]),
    ),
    "ai-template": ResourceCategory(
        name="AI Template",
        param="templateName",
        description="Get a specific AI template",
        params=_template_paths([
            "AI Templates - Semantic Kernel",
            "AI Templates - Semantic Kernel Graph",
            "AI Templates - Agent Framework",
        ]),
    ),
    "core": ResourceCategory(
        name="Core Pattern",
        param="topic",
        description="Get core module documentation",
        params=_single_fragment(core_patterns.CATALOG),
    ),
    "database": ResourceCategory(
        name="Database Pattern",
        param="topic",
        description="Get database documentation",
        params=_single_fragment(database_advisor.CATALOG),
    ),
    "cqrs": ResourceCategory(
        name="CQRS Pattern",
        param="topic",
        description="Get CQRS documentation",
        params=_single_fragment(cqrs_guide.CATALOG),
    ),
    "modernization": ResourceCategory(
        name="Modernization Feature",
        param="feature",
        description="Get .NET 9 modernization documentation",
        params={
            "overview": "ai-context/modernization-patterns.md",
            **_single_fragment(modernization_guide.FEATURES),
        },
    ),
    "observability": ResourceCategory(
        name="Observability Component",
        param="component",
        description="Get observability documentation",
        params=_single_fragment(observability_setup.COMPONENTS),
    ),
    "testing": ResourceCategory(
        name="Testing Pattern",
        param="topic",
        description="Get testing documentation",
        params=_single_fragment(testing_patterns.CATALOG),
    ),
    "security": ResourceCategory(
        name="Security Pattern",
        param="topic",
        description="Get security documentation",
        params=_single_fragment(security_patterns.CATALOG),
    ),
    "containerization": ResourceCategory(
        name="Containerization Pattern",
        param="topic",
        description="Get containerization documentation",
        params=_single_fragment(containerization_patterns.CATALOG),
    ),
}


def category_uris() -> list[tuple[str, str, str]]:
    """Every concrete templated URI as (uri, name, description)."""
    return [
        (f"{URI_PREFIX}{category}/{param}", f"{group.name}: {title_case(param)}", group.description)
        for category, group in TEMPLATE_CATEGORIES.items()
        for param in group.params
    ]


def resolve_uri(uri: str) -> str | None:
    """Map a resource URI to a doc reference, static resources first."""
    if uri in STATIC_RESOURCES:
        return STATIC_RESOURCES[uri].path

    match = URI_RE.match(uri)
    if not match:
        return None

    category, param = match.groups()
    group = TEMPLATE_CATEGORIES.get(category)
    if group is None:
        return None
    return group.params.get(param)


def _resource_not_found(uri: str) -> str:
    lines = [
        f"- **{category}**: {', '.join(group.params)}"
        for category, group in TEMPLATE_CATEGORIES.items()
    ]
    available = "\n".join(lines)
    return f"""# Resource not found

The resource "{uri}" does not exist.

## Available Resource Categories

{available}

Use the format: `mvp24hours://docs/{{category}}/{{name}}`
"""


def read_resource(uri: str, loader: DocLoader) -> str:
    """Return the markdown behind a resource URI.

    Unknown URIs and unreadable documents produce a message instead of an error.
    """
    ref = resolve_uri(uri)
    if ref is None:
        logger.info(f"Resource not found: {uri}")
        return _resource_not_found(uri)

    path, section = split_fragment(ref)
    try:
        return loader.load_section(path, section) if section else loader.load(path)
    except (OSError, LookupError, UnicodeError) as e:
        logger.warning(f"Failed to read resource {uri}: {e}")
        return f"Error loading resource: {e}"
