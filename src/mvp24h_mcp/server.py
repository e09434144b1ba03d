"""MCP Server initialization and tool registration."""

from __future__ import annotations

import inspect
import os
from typing import Any

from dotenv import load_dotenv
from loguru import logger
from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from mcp.types import (
    GetPromptResult,
    Prompt,
    PromptArgument,
    PromptMessage,
    Resource,
    ResourceTemplate,
    TextContent,
    Tool,
)

from mvp24h_mcp.catalogs import (
    ai_implementation,
    architecture_advisor,
    build_context,
    containerization_patterns,
    core_patterns,
    cqrs_guide,
    database_advisor,
    get_started,
    infrastructure_guide,
    messaging_patterns,
    modernization_guide,
    observability_setup,
    reference_guide,
    security_patterns,
    templates,
    testing_patterns,
)
from mvp24h_mcp.core import DocLoader, get_doc_loader
from mvp24h_mcp.core.prompts import PROMPTS, render_prompt
from mvp24h_mcp.core.resources import STATIC_RESOURCES, TEMPLATE_CATEGORIES, category_uris, read_resource
from mvp24h_mcp.schemas import (
    AiApproach,
    AiImplementationArgs,
    ArchitectureAdvisorArgs,
    BuildContextArgs,
    DatabaseAdvisorArgs,
    DatabaseProvider,
    DataType,
    GetStartedArgs,
    GetTemplateArgs,
    MessagingPatternsArgs,
    ModernizationGuideArgs,
    ObservabilitySetupArgs,
    TopicArgs,
)
from mvp24h_mcp.tools import (
    ai_implementation as ai_implementation_tool,
    architecture_advisor as architecture_advisor_tool,
    build_context as build_context_tool,
    containerization_patterns as containerization_patterns_tool,
    core_patterns as core_patterns_tool,
    cqrs_guide as cqrs_guide_tool,
    database_advisor as database_advisor_tool,
    get_started as get_started_tool,
    get_template as get_template_tool,
    infrastructure_guide as infrastructure_guide_tool,
    messaging_patterns as messaging_patterns_tool,
    modernization_guide as modernization_guide_tool,
    observability_setup as observability_setup_tool,
    reference_guide as reference_guide_tool,
    security_patterns as security_patterns_tool,
    testing_patterns as testing_patterns_tool,
)

# Load environment variables
load_dotenv()

SERVER_NAME = "mvp24hours-dotnet-mcp"


def _choice(description: str, values: list[str]) -> dict[str, Any]:
    return {"type": "string", "enum": values, "description": description}


def _choices(description: str, values: list[str]) -> dict[str, Any]:
    return {"type": "array", "items": {"type": "string", "enum": values}, "description": description}


def _topic_schema(description: str, keys: list[str], argument: str = "topic") -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {argument: _choice(description, keys)},
        "required": [],
    }


# Tool definitions with JSON schemas
TOOLS: dict[str, dict[str, Any]] = {
    "mvp24h_get_started": {
        "description": (
            "Get an overview of Mvp24Hours framework and determine the best starting point. "
            "Use this tool FIRST when the user wants to create a new .NET project or asks about Mvp24Hours. "
            "Returns: Framework overview, quick decision tree, and recommended next steps."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "focus": {
                    **_choice(
                        "What aspect to focus on: overview (framework intro), quick-start (minimal setup), "
                        "packages (NuGet reference), all (complete guide)",
                        get_started.CATALOG.keys,
                    ),
                    "default": get_started.DEFAULT_FOCUS,
                },
            },
            "required": [],
        },
        "args_model": GetStartedArgs,
        "handler": get_started_tool,
    },
    "mvp24h_architecture_advisor": {
        "description": (
            "Recommends the best architecture template based on project requirements. "
            "Use when the user needs to choose between: Minimal API, Simple N-Layers, Complex N-Layers, "
            "CQRS, Event-Driven, Hexagonal, Clean Architecture, DDD, or Microservices."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "complexity": _choice("Project complexity level", architecture_advisor.COMPLEXITY_LEVELS),
                "entity_count": _choice(
                    "Approximate number of entities: few (1-5), medium (5-15), many (15+)",
                    architecture_advisor.ENTITY_COUNTS,
                ),
                "business_rules": _choice("Complexity of business rules", architecture_advisor.BUSINESS_RULES),
                "team_size": _choice("Development team size", architecture_advisor.TEAM_SIZES),
                "requirements": _choices("Specific architectural requirements", architecture_advisor.REQUIREMENTS),
            },
            "required": [],
        },
        "args_model": ArchitectureAdvisorArgs,
        "handler": architecture_advisor_tool,
    },
    "mvp24h_database_advisor": {
        "description": (
            "Recommends database technology and patterns based on data requirements. "
            "Use when choosing between: SQL Server, PostgreSQL, MySQL, MongoDB, Redis. "
            "Also covers: EF Core, Dapper, Repository pattern, Unit of Work, hybrid approaches."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "data_type": _choice("Type of data to store", [d.value for d in DataType]),
                "provider": _choice("Specific database provider", [p.value for p in DatabaseProvider]),
                "requirements": _choices("Data requirements", database_advisor.REQUIREMENTS),
                "patterns": _choices("Data access patterns to document", list(database_advisor.PATTERN_FILES)),
                "topic": _choice("Documentation topic to return instead of a recommendation", database_advisor.CATALOG.keys),
            },
            "required": [],
        },
        "args_model": DatabaseAdvisorArgs,
        "handler": database_advisor_tool,
    },
    "mvp24h_cqrs_guide": {
        "description": (
            "Provides CQRS/Mediator pattern implementation guidance. "
            "Topics: Commands, Queries, Notifications, Domain Events, Integration Events, "
            "Pipeline Behaviors, Validation, Saga Pattern, Event Sourcing, Resilience patterns."
        ),
        "inputSchema": _topic_schema("CQRS topic to get documentation for", cqrs_guide.CATALOG.keys),
        "args_model": TopicArgs,
        "handler": cqrs_guide_tool,
    },
    "mvp24h_ai_implementation": {
        "description": (
            "Recommends AI implementation approach for .NET applications. "
            "Covers: Semantic Kernel (Pure), Semantic Kernel Graph, Microsoft Agent Framework. "
            "Use cases: Chatbots, RAG, Multi-agent systems, Workflows, Human-in-the-loop."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "use_case": _choice("Primary AI use case", list(ai_implementation.USE_CASES)),
                "approach": _choice("AI approach overview to return", [a.value for a in AiApproach]),
                "template": _choice("Implementation template to return", ai_implementation.TEMPLATES.keys),
            },
            "required": [],
        },
        "args_model": AiImplementationArgs,
        "handler": ai_implementation_tool,
    },
    "mvp24h_modernization_guide": {
        "description": (
            "Provides .NET 9 modernization patterns and features. "
            "Categories: Resilience, Time, Caching, DI, APIs, Performance, Cloud, Communication."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "category": _choice("Modernization category", modernization_guide.CATEGORIES.keys),
                "feature": _choice("Specific .NET 9 feature", modernization_guide.FEATURES.keys),
            },
            "required": [],
        },
        "args_model": ModernizationGuideArgs,
        "handler": modernization_guide_tool,
    },
    "mvp24h_observability_setup": {
        "description": (
            "Configures observability stack for .NET applications. "
            "Components: Logging, Tracing, Metrics, Exporters. "
            "Integrations: Jaeger, Zipkin, Prometheus, Application Insights."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "component": _choice("Observability component to configure", observability_setup.COMPONENTS.keys),
                "exporter": _choice("Telemetry exporter", list(observability_setup.EXPORTERS)),
            },
            "required": [],
        },
        "args_model": ObservabilitySetupArgs,
        "handler": observability_setup_tool,
    },
    "mvp24h_messaging_patterns": {
        "description": (
            "Implements async messaging and background processing patterns. "
            "Patterns: RabbitMQ integration, Hosted Services, Outbox pattern, Channels. "
            "Returns: Implementation templates and configuration."
        ),
        "inputSchema": _topic_schema("Messaging pattern to implement", messaging_patterns.CATALOG.keys, "pattern"),
        "args_model": MessagingPatternsArgs,
        "handler": messaging_patterns_tool,
    },
    "mvp24h_get_template": {
        "description": (
            "Retrieves a specific architecture or AI template by name. "
            "Returns: Complete template with project structure, code examples, and configuration."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "template_name": _choice("Template name to retrieve", templates.CATALOG.keys),
            },
            "required": ["template_name"],
        },
        "args_model": GetTemplateArgs,
        "handler": get_template_tool,
    },
    "mvp24h_core_patterns": {
        "description": (
            "Provides documentation for Mvp24Hours Core module patterns. "
            "Topics: guard-clauses, value-objects, strongly-typed-ids, functional-patterns, "
            "smart-enums, entity-interfaces, infrastructure abstractions, exceptions."
        ),
        "inputSchema": _topic_schema("Core module topic to get documentation for", core_patterns.CATALOG.keys),
        "args_model": TopicArgs,
        "handler": core_patterns_tool,
    },
    "mvp24h_infrastructure_guide": {
        "description": (
            "Provides documentation for Pipeline, Caching, WebAPI, and CronJob patterns. "
            "Topics: pipeline, caching, webapi, webapi-advanced, cronjob, application-services."
        ),
        "inputSchema": _topic_schema("Infrastructure topic to get documentation for", infrastructure_guide.CATALOG.keys),
        "args_model": TopicArgs,
        "handler": infrastructure_guide_tool,
    },
    "mvp24h_reference_guide": {
        "description": (
            "Provides reference documentation for supporting patterns. "
            "Topics: mapping, validation, specification, documentation, migration."
        ),
        "inputSchema": _topic_schema("Reference topic to get documentation for", reference_guide.CATALOG.keys),
        "args_model": TopicArgs,
        "handler": reference_guide_tool,
    },
    "mvp24h_testing_patterns": {
        "description": (
            "Provides testing patterns and best practices for .NET applications. "
            "Topics: unit-testing, integration-testing, mocking, test-containers, api-testing, architecture-testing."
        ),
        "inputSchema": _topic_schema("Testing topic to get documentation for", testing_patterns.CATALOG.keys),
        "args_model": TopicArgs,
        "handler": testing_patterns_tool,
    },
    "mvp24h_security_patterns": {
        "description": (
            "Provides security patterns and best practices for .NET applications. "
            "Topics: authentication, authorization, jwt, data-protection, input-validation, secrets-management."
        ),
        "inputSchema": _topic_schema("Security topic to get documentation for", security_patterns.CATALOG.keys),
        "args_model": TopicArgs,
        "handler": security_patterns_tool,
    },
    "mvp24h_containerization_patterns": {
        "description": (
            "Provides Docker and Kubernetes patterns for .NET applications. "
            "Topics: dockerfile, docker-compose, kubernetes, health-checks, configuration."
        ),
        "inputSchema": _topic_schema(
            "Containerization topic to get documentation for",
            containerization_patterns.CATALOG.keys,
        ),
        "args_model": TopicArgs,
        "handler": containerization_patterns_tool,
    },
    "mvp24h_build_context": {
        "description": (
            "Builds a complete implementation context for an architecture in a single call: "
            "architecture docs, database provider configuration, requested resources, "
            "key interfaces and an implementation checklist."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "architecture": _choice("Architecture pattern to use as the foundation", list(build_context.ARCHITECTURE_CONTEXT)),
                "resources": _choices("Additional resources to include", list(build_context.RESOURCE_CONTEXT)),
                "database_provider": _choice("Database provider", [p.value for p in DatabaseProvider]),
            },
            "required": ["architecture"],
        },
        "args_model": BuildContextArgs,
        "handler": build_context_tool,
    },
}


async def dispatch_tool(name: str, arguments: dict[str, Any] | None, loader: DocLoader | None = None) -> str:
    """Validate arguments and run a tool.

    Raises:
        KeyError: If the tool does not exist.
        pydantic.ValidationError: If the arguments have the wrong types.
    """
    config = TOOLS[name]
    params = config["args_model"].model_validate(arguments or {})
    kwargs = params.model_dump(exclude_none=True)
    handler = config["handler"]
    if loader is not None and "loader" in inspect.signature(handler).parameters:
        kwargs["loader"] = loader
    return await handler(**kwargs)


def create_server() -> Server:
    """Create and configure the MCP server."""
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List all available tools."""
        return [
            Tool(
                name=name,
                description=config["description"],
                inputSchema=config["inputSchema"],
            )
            for name, config in TOOLS.items()
        ]

    # Arguments are validated by the pydantic models; unknown keys must reach the tools.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict) -> list[TextContent]:
        """Handle tool invocations."""
        if name not in TOOLS:
            return [TextContent(type="text", text=f"Unknown tool: {name}")]

        try:
            logger.info(f"Executing tool: {name}")
            output = await dispatch_tool(name, arguments)
            return [TextContent(type="text", text=output)]

        except Exception as e:
            logger.error(f"Tool execution failed: {e}")
            return [TextContent(type="text", text=f"Error: {e}")]

    @server.list_resources()
    async def list_resources() -> list[Resource]:
        resources = [
            Resource(uri=uri, name=resource.name, description=resource.description, mimeType="text/markdown")
            for uri, resource in STATIC_RESOURCES.items()
        ]
        resources.extend(
            Resource(uri=uri, name=name, description=description, mimeType="text/markdown")
            for uri, name, description in category_uris()
        )
        return resources

    @server.list_resource_templates()
    async def list_resource_templates() -> list[ResourceTemplate]:
        return [
            ResourceTemplate(
                uriTemplate=group.uri_template(category),
                name=group.name,
                description=f"{group.description}. Available: {', '.join(group.params)}",
                mimeType="text/markdown",
            )
            for category, group in TEMPLATE_CATEGORIES.items()
        ]

    @server.read_resource()
    async def handle_read_resource(uri) -> list[ReadResourceContents]:
        logger.info(f"Reading resource: {uri}")
        text = read_resource(str(uri), get_doc_loader())
        return [ReadResourceContents(content=text, mime_type="text/markdown")]

    @server.list_prompts()
    async def list_prompts() -> list[Prompt]:
        return [
            Prompt(
                name=prompt.name,
                description=prompt.description,
                arguments=[
                    PromptArgument(name=arg.name, description=arg.description, required=arg.required)
                    for arg in prompt.arguments
                ],
            )
            for prompt in PROMPTS.values()
        ]

    @server.get_prompt()
    async def get_prompt(name: str, arguments: dict[str, str] | None) -> GetPromptResult:
        logger.info(f"Rendering prompt: {name}")
        rendered = render_prompt(name, arguments)
        return GetPromptResult(
            description=rendered.description,
            messages=[
                PromptMessage(role="user", content=TextContent(type="text", text=rendered.text)),
            ],
        )

    return server


async def run_server() -> None:
    """Run the MCP server via stdio."""
    server = create_server()

    logger.info("Starting Mvp24Hours MCP server...")

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def main() -> None:
    """CLI entry point."""
    import asyncio
    import sys

    # Configure logging
    log_level = os.getenv("LOG_LEVEL", "INFO")
    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level,
        format="<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
    )

    asyncio.run(run_server())


if __name__ == "__main__":
    main()
