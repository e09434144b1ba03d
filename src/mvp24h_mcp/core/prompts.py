"""MCP prompts: guided conversations that point the agent at the right tools."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PromptArgumentDef(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    required: bool = False
    default: str


class PromptTemplate(BaseModel):
    """A prompt with its arguments; description and text are str.format templates."""
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    arguments: list[PromptArgumentDef] = Field(default_factory=list)
    title: str
    text: str


class RenderedPrompt(BaseModel):
    description: str
    text: str


PROMPTS: dict[str, PromptTemplate] = {
    prompt.name: prompt
    for prompt in [
        PromptTemplate(
            name="create-dotnet-project",
            description="Guide to create a new .NET project with Mvp24Hours framework",
            arguments=[
                PromptArgumentDef(
                    name="project_type",
                    description="Type of project: api, webapp, console, worker",
                    required=True,
                    default="api",
                ),
                PromptArgumentDef(
                    name="architecture",
                    description=(
                        "Architecture pattern: minimal-api, simple-nlayers, complex-nlayers, cqrs, "
                        "hexagonal, clean-architecture, ddd, microservices"
                    ),
                    default="simple-nlayers",
                ),
            ],
            title="Create a new .NET {project_type} project with {architecture} architecture",
            text="""I want to create a new .NET {project_type} project using the {architecture} architecture pattern with Mvp24Hours framework.

Please help me:
1. Set up the project structure
2. Configure the necessary NuGet packages
3. Implement the base architecture
4. Add common patterns (repository, validation, logging)

Use the mvp24h_get_started and mvp24h_architecture_advisor tools to get the relevant documentation.""",
        ),
        PromptTemplate(
            name="implement-cqrs",
            description="Guide to implement CQRS pattern with the Mvp24Hours mediator",
            arguments=[
                PromptArgumentDef(
                    name="component",
                    description="CQRS component: command, query, notification, domain-event, pipeline-behavior",
                    required=True,
                    default="command",
                ),
            ],
            title="Implement CQRS {component} pattern",
            text="""I want to implement the CQRS {component} pattern in my .NET application.

Please help me:
1. Understand the {component} pattern
2. Create the necessary classes and interfaces
3. Configure the mediator pipeline
4. Add validation and error handling

Use the mvp24h_cqrs_guide tool with topic "{component}" to get the implementation details.""",
        ),
        PromptTemplate(
            name="setup-database",
            description="Guide to setup database with repository pattern",
            arguments=[
                PromptArgumentDef(
                    name="database",
                    description="Database type: sqlserver, postgresql, mysql, mongodb, redis",
                    required=True,
                    default="sqlserver",
                ),
                PromptArgumentDef(name="orm", description="ORM choice: efcore, dapper, hybrid", default="efcore"),
            ],
            title="Setup {database} database with {orm}",
            text="""I want to setup {database} database using {orm} in my .NET application.

Please help me:
1. Configure the database connection
2. Implement the repository pattern
3. Setup Unit of Work
4. Add migrations (if applicable)

Use the mvp24h_database_advisor tool to get the configuration and implementation details.""",
        ),
        PromptTemplate(
            name="add-ai-capabilities",
            description="Guide to add AI capabilities using Semantic Kernel or Agent Framework",
            arguments=[
                PromptArgumentDef(
                    name="approach",
                    description="AI approach: semantic-kernel, sk-graph, agent-framework",
                    required=True,
                    default="semantic-kernel",
                ),
                PromptArgumentDef(
                    name="use_case",
                    description="Use case: chatbot, rag, multi-agent, workflow",
                    default="chatbot",
                ),
            ],
            title="Add AI capabilities using {approach} for {use_case}",
            text="""I want to add AI capabilities to my .NET application using {approach} for a {use_case} use case.

Please help me:
1. Choose the right AI approach
2. Configure the necessary packages
3. Implement the AI integration
4. Add proper error handling and observability

Use the mvp24h_ai_implementation tool to get the implementation template and guidance.""",
        ),
        PromptTemplate(
            name="setup-observability",
            description="Guide to setup logging, tracing, and metrics",
            arguments=[
                PromptArgumentDef(
                    name="component",
                    description="Component: logging, tracing, metrics, all",
                    required=True,
                    default="all",
                ),
                PromptArgumentDef(
                    name="exporter",
                    description="Exporter: jaeger, zipkin, prometheus, application-insights",
                    default="jaeger",
                ),
            ],
            title="Setup {component} observability with {exporter}",
            text="""I want to setup {component} observability in my .NET application using {exporter} as the exporter.

Please help me:
1. Configure OpenTelemetry
2. Setup {signals}
3. Configure the {exporter} exporter
4. Add proper instrumentation

Use the mvp24h_observability_setup tool to get the configuration details.""",
        ),
        PromptTemplate(
            name="modernize-dotnet",
            description="Guide to modernize .NET application with .NET 9 features",
            arguments=[
                PromptArgumentDef(
                    name="feature",
                    description="Feature: resilience, caching, keyed-services, minimal-apis, aspire",
                    required=True,
                    default="resilience",
                ),
            ],
            title="Modernize .NET app with {feature}",
            text="""I want to modernize my .NET application using the {feature} feature from .NET 9.

Please help me:
1. Understand the {feature} feature
2. Configure the necessary packages
3. Implement the pattern
4. Add best practices

Use the mvp24h_modernization_guide tool to get the implementation details.""",
        ),
        PromptTemplate(
            name="containerize-app",
            description="Guide to containerize .NET application with Docker and Kubernetes",
            arguments=[
                PromptArgumentDef(
                    name="target",
                    description="Target: dockerfile, docker-compose, kubernetes",
                    required=True,
                    default="dockerfile",
                ),
            ],
            title="Containerize app with {target}",
            text="""I want to containerize my .NET application using {target}.

Please help me:
1. Create an optimized {target} configuration
2. Setup multi-stage builds (if applicable)
3. Configure health checks
4. Add production best practices

Use the mvp24h_containerization_patterns tool to get the configuration templates.""",
        ),
    ]
}


def render_prompt(name: str, arguments: dict[str, str] | None = None) -> RenderedPrompt:
    """Fill a prompt's templates, using declared defaults for missing arguments.

    Raises:
        ValueError: If the prompt does not exist.
    """
    prompt = PROMPTS.get(name)
    if prompt is None:
        raise ValueError(f"Unknown prompt: {name}")

    arguments = arguments or {}
    values = {arg.name: arguments.get(arg.name) or arg.default for arg in prompt.arguments}
    # "all" expands to every observability signal
    component = values.get("component", "")
    values["signals"] = "logging, tracing, and metrics" if component == "all" else component

    return RenderedPrompt(
        description=prompt.title.format(**values),
        text=prompt.text.format(**values),
    )
