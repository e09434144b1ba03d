"""Decision tables for mvp24h_architecture_advisor."""

from mvp24h_mcp.schemas import ArchitectureTemplate

DEFAULT_TEMPLATE = "simple-nlayers"

# NuGet versions that do not follow the framework's major version
PACKAGE_VERSIONS: dict[str, str] = {
    "FluentValidation": "11.*",
    "AutoMapper": "12.*",
    "RabbitMQ.Client": "6.*",
}

# Checked in order before any complexity rule. Each entry: (requirements, template, reason).
REQUIREMENT_RULES: list[tuple[tuple[str, ...], str, str]] = [
    (("microservices",), "microservices", "Microservices architecture requested"),
    (("domain-driven", "event-sourcing"), "ddd", "Domain-driven design with rich domain model needed"),
    (("cqrs",), "cqrs", "CQRS pattern for read/write separation"),
    (("external-integrations",), "hexagonal", "Hexagonal/Ports & Adapters for external integrations"),
    (("audit-trail",), "event-driven", "Event-driven for audit trail and event sourcing"),
    (("rapid-prototype",), "minimal-api", "Minimal API for rapid prototyping"),
]

COMPLEXITY_LEVELS = ["low", "medium", "high", "very-high"]
ENTITY_COUNTS = ["few", "medium", "many"]
BUSINESS_RULES = ["simple", "moderate", "complex"]
TEAM_SIZES = ["solo", "small", "large"]
REQUIREMENTS = [
    "cqrs",
    "event-sourcing",
    "audit-trail",
    "external-integrations",
    "microservices",
    "domain-driven",
    "rapid-prototype",
    "high-performance",
    "multiple-databases",
]

DECISION_MATRIX = """## Decision Matrix

| Template | Complexity | Entities | Business Rules | Team Size |
|----------|------------|----------|----------------|-----------|
| Minimal API | Low | 1-5 | Simple | Solo/Small |
| Simple N-Layers | Medium | 5-15 | Moderate | Small |
| Complex N-Layers | High | 15+ | Complex | Small/Large |
| CQRS | High | 10+ | Complex + R/W separation | Any |
| Event-Driven | High | Any | Audit/Event history | Any |
| Hexagonal | High | Any | Many integrations | Small/Large |
| Clean Architecture | Very High | 20+ | Very Complex | Large |
| DDD | Very High | Any | Rich Domain Model | Large |
| Microservices | Very High | Service-based | Independent deploy | Large |"""

TEMPLATES: dict[str, ArchitectureTemplate] = {
    "minimal-api": ArchitectureTemplate(
        name="Minimal API",
        description=(
            "Lightweight single-project structure ideal for microservices and simple CRUDs. "
            "Uses .NET minimal API syntax with endpoint-based routing."
        ),
        structure="""ProjectName/
├── ProjectName.csproj
├── Program.cs
├── Entities/
├── Validators/
├── Data/
└── Endpoints/""",
        characteristics=[
            "Single project, minimal boilerplate",
            "Endpoint-based routing (MapGet, MapPost)",
            "No separate service layer",
            "Direct repository access",
            "Fast startup time",
        ],
        packages=["Mvp24Hours.Core", "Mvp24Hours.Infrastructure.Data.EFCore", "FluentValidation"],
        alternatives=["simple-nlayers if you need more structure"],
    ),
    "simple-nlayers": ArchitectureTemplate(
        name="Simple N-Layers",
        description=(
            "3-layer architecture with Core, Infrastructure, and WebAPI projects. "
            "Good balance between simplicity and separation of concerns."
        ),
        structure="""Solution/
├── ProjectName.Core/
│   ├── Entities/
│   └── Validators/
├── ProjectName.Infrastructure/
│   └── Data/
└── ProjectName.WebAPI/
    └── Controllers/""",
        characteristics=[
            "3 projects: Core, Infrastructure, WebAPI",
            "Clear separation of concerns",
            "Controllers with repository access",
            "Validators in Core layer",
            "Easy to understand and maintain",
        ],
        packages=[
            "Mvp24Hours.Core",
            "Mvp24Hours.Infrastructure.Data.EFCore",
            "Mvp24Hours.WebAPI",
            "FluentValidation",
            "AutoMapper",
        ],
        alternatives=["minimal-api for simpler apps", "complex-nlayers for more structure"],
    ),
    "complex-nlayers": ArchitectureTemplate(
        name="Complex N-Layers",
        description=(
            "4-layer architecture adding an Application layer with services, specifications, "
            "and mapping. Ideal for enterprise applications."
        ),
        structure="""Solution/
├── ProjectName.Core/
│   ├── Entities/
│   ├── Contract/
│   └── Specifications/
├── ProjectName.Infrastructure/
│   └── Data/
├── ProjectName.Application/
│   ├── Services/
│   ├── Mappings/
│   └── Pipelines/
└── ProjectName.WebAPI/
    └── Controllers/""",
        characteristics=[
            "4 projects with dedicated Application layer",
            "Service contracts and implementations",
            "Specification pattern for queries",
            "AutoMapper profiles",
            "Pipeline support for complex workflows",
        ],
        packages=[
            "Mvp24Hours.Core",
            "Mvp24Hours.Application",
            "Mvp24Hours.Infrastructure.Data.EFCore",
            "Mvp24Hours.Infrastructure.Pipe",
            "Mvp24Hours.WebAPI",
            "FluentValidation",
            "AutoMapper",
        ],
        alternatives=[
            "simple-nlayers for simpler apps",
            "clean-architecture for stricter rules",
            "cqrs for read/write separation",
        ],
    ),
    "cqrs": ArchitectureTemplate(
        name="CQRS (Command Query Responsibility Segregation)",
        description=(
            "Separates read and write operations with dedicated Command and Query handlers. "
            "Includes pipeline behaviors for cross-cutting concerns."
        ),
        structure="""Solution/
├── ProjectName.Domain/
│   ├── Entities/
│   └── Events/
├── ProjectName.Application/
│   ├── Commands/
│   ├── Queries/
│   └── Behaviors/
├── ProjectName.Infrastructure/
└── ProjectName.WebAPI/""",
        characteristics=[
            "Separate Command and Query models",
            "Mediator pattern (built-in Mvp24Hours.Mediator)",
            "Pipeline behaviors for validation, logging, etc.",
            "Support for domain events",
            "Optimized read models",
        ],
        packages=[
            "Mvp24Hours.Core",
            "Mvp24Hours.Application",
            "Mvp24Hours.Infrastructure.Data.EFCore",
            "FluentValidation",
        ],
        alternatives=["complex-nlayers without CQRS", "event-driven with event sourcing"],
    ),
    "event-driven": ArchitectureTemplate(
        name="Event-Driven Architecture",
        description=(
            "Centered around domain events and integration events. "
            "Supports event sourcing for complete audit trails."
        ),
        structure="""Solution/
├── ProjectName.Domain/
│   ├── Entities/
│   └── Events/
├── ProjectName.Application/
├── ProjectName.Infrastructure/
│   ├── EventStore/
│   └── Messaging/
└── ProjectName.WebAPI/""",
        characteristics=[
            "Domain events for internal state changes",
            "Integration events for external communication",
            "Event Store for persistence (optional)",
            "Eventual consistency",
            "Complete audit trail",
        ],
        packages=["Mvp24Hours.Core", "Mvp24Hours.Infrastructure.RabbitMQ", "RabbitMQ.Client"],
        alternatives=["cqrs without event sourcing", "ddd with events"],
    ),
    "hexagonal": ArchitectureTemplate(
        name="Hexagonal (Ports & Adapters)",
        description=(
            "Clean separation between business logic and external dependencies. "
            "Core has no knowledge of infrastructure."
        ),
        structure="""Solution/
├── ProjectName.Core/
│   ├── Domain/
│   └── Ports/
├── ProjectName.Adapters/
│   ├── Inbound/
│   └── Outbound/
└── ProjectName.Bootstrap/""",
        characteristics=[
            "Ports define contracts",
            "Adapters implement ports",
            "Business logic isolated from infrastructure",
            "Easy to swap external dependencies",
            "High testability",
        ],
        packages=["Mvp24Hours.Core", "Mvp24Hours.Infrastructure.Data.EFCore", "Mvp24Hours.WebAPI"],
        alternatives=["clean-architecture for similar separation", "complex-nlayers for simpler approach"],
    ),
    "clean-architecture": ArchitectureTemplate(
        name="Clean Architecture",
        description=(
            "Follows Uncle Bob's Clean Architecture with strict dependency rules. "
            "All dependencies point inward toward the domain."
        ),
        structure="""Solution/
├── ProjectName.Domain/
├── ProjectName.Application/
│   ├── UseCases/
│   └── DTOs/
├── ProjectName.Infrastructure/
└── ProjectName.WebAPI/""",
        characteristics=[
            "Domain at the center",
            "Use Cases in Application layer",
            "Infrastructure implements interfaces",
            "Dependency inversion throughout",
            "Framework-agnostic domain",
        ],
        packages=[
            "Mvp24Hours.Core",
            "Mvp24Hours.Application",
            "Mvp24Hours.Infrastructure.Data.EFCore",
            "Mvp24Hours.WebAPI",
        ],
        alternatives=["complex-nlayers for simpler approach", "ddd for richer domain"],
    ),
    "ddd": ArchitectureTemplate(
        name="Domain-Driven Design (DDD)",
        description=(
            "Rich domain model with Aggregates, Value Objects, Domain Services, and Domain Events. "
            "Best for complex business domains."
        ),
        structure="""Solution/
├── ProjectName.Domain/
│   ├── Aggregates/
│   ├── Services/
│   └── Repositories/
├── ProjectName.Application/
│   ├── Commands/
│   ├── Queries/
│   └── EventHandlers/
├── ProjectName.Infrastructure/
└── ProjectName.WebAPI/""",
        characteristics=[
            "Aggregates with Aggregate Roots",
            "Value Objects for identity-less concepts",
            "Domain Services for cross-aggregate logic",
            "Domain Events for state changes",
            "Rich domain model (behavior + data)",
        ],
        packages=["Mvp24Hours.Core", "Mvp24Hours.Application", "Mvp24Hours.Infrastructure.Data.EFCore"],
        alternatives=["clean-architecture without DDD", "event-driven for event sourcing"],
    ),
    "microservices": ArchitectureTemplate(
        name="Microservices Architecture",
        description=(
            "Decomposed services with independent deployments. "
            "Each service owns its data and communicates via APIs or messaging."
        ),
        structure="""Solution/
├── src/
│   ├── Services/
│   ├── BuildingBlocks/
│   └── ApiGateway/
├── docker-compose.yml
└── kubernetes/""",
        characteristics=[
            "Independent deployable services",
            "Each service has its own database",
            "API Gateway for routing",
            "Event-based communication",
            "Container-ready (Docker/Kubernetes)",
        ],
        packages=["Mvp24Hours.Core", "Mvp24Hours.WebAPI", "Mvp24Hours.Infrastructure.RabbitMQ"],
        alternatives=["modular monolith as first step"],
    ),
}
