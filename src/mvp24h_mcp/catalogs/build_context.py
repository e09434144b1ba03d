"""Context maps for mvp24h_build_context."""

from mvp24h_mcp.schemas import DatabaseProvider

# architecture -> foundation documents, in load order
ARCHITECTURE_CONTEXT: dict[str, list[str]] = {
    "cqrs": [
        "ai-context/template-cqrs.md",
        "cqrs/commands.md",
        "cqrs/queries.md",
        "cqrs/behaviors.md",
        "database/use-repository.md",
        "database/use-unitofwork.md",
    ],
    "event-driven": [
        "ai-context/template-event-driven.md",
        "cqrs/domain-events.md",
        "cqrs/integration-events.md",
        "ai-context/messaging-patterns.md",
    ],
    "clean-architecture": [
        "ai-context/template-clean-architecture.md",
        "core/entity-interfaces.md",
        "database/use-repository.md",
        "database/use-unitofwork.md",
    ],
    "ddd": [
        "ai-context/template-ddd.md",
        "core/value-objects.md",
        "core/entity-interfaces.md",
        "cqrs/domain-events.md",
        "database/use-repository.md",
    ],
    "hexagonal": [
        "ai-context/template-hexagonal.md",
        "core/entity-interfaces.md",
        "database/use-repository.md",
    ],
    "minimal-api": [
        "ai-context/structure-minimal-api.md",
        "modernization/minimal-apis.md",
        "webapi.md",
    ],
    "simple-nlayers": [
        "ai-context/structure-simple-nlayers.md",
        "database/use-repository.md",
        "application-services.md",
    ],
    "complex-nlayers": [
        "ai-context/structure-complex-nlayers.md",
        "database/use-repository.md",
        "database/use-unitofwork.md",
        "application-services.md",
    ],
    "microservices": [
        "ai-context/template-microservices.md",
        "ai-context/messaging-patterns.md",
        "cqrs/integration-events.md",
        "modernization/aspire.md",
    ],
}

ARCHITECTURE_NAMES: dict[str, str] = {
    "cqrs": "CQRS/Mediator",
    "event-driven": "Event-Driven",
    "clean-architecture": "Clean Architecture",
    "ddd": "Domain-Driven Design",
    "hexagonal": "Hexagonal (Ports & Adapters)",
    "minimal-api": "Minimal API",
    "simple-nlayers": "Simple N-Layers",
    "complex-nlayers": "Complex N-Layers",
    "microservices": "Microservices",
}

# resource -> (section title, documents)
RESOURCE_CONTEXT: dict[str, tuple[str, list[str]]] = {
    "database": (
        "Database Patterns",
        ["ai-context/database-patterns.md", "database/use-entity.md", "database/use-context.md"],
    ),
    "caching": ("Caching Patterns", ["caching-advanced.md", "modernization/hybrid-cache.md"]),
    "observability": (
        "Observability",
        ["ai-context/observability-patterns.md", "observability/logging.md", "observability/tracing.md"],
    ),
    "messaging": ("Messaging Patterns", ["ai-context/messaging-patterns.md", "broker.md"]),
    "security": ("Security Patterns", ["ai-context/security-patterns.md"]),
    "testing": ("Testing Patterns", ["ai-context/testing-patterns.md"]),
    "containerization": ("Containerization", ["ai-context/containerization-patterns.md"]),
}

DATABASE_PROVIDER_CONTEXT: dict[DatabaseProvider, list[str]] = {
    DatabaseProvider.POSTGRESQL: ["database/relational.md", "database/efcore-advanced.md"],
    DatabaseProvider.SQLSERVER: ["database/relational.md", "database/efcore-advanced.md"],
    DatabaseProvider.MYSQL: ["database/relational.md", "database/efcore-advanced.md"],
    DatabaseProvider.MONGODB: ["database/nosql.md", "database/mongodb-advanced.md"],
    DatabaseProvider.REDIS: ["database/nosql.md", "caching-advanced.md"],
}

ARCHITECTURE_PACKAGES: dict[str, list[str]] = {
    "cqrs": [
        "Mvp24Hours.Core",
        "Mvp24Hours.Application",
        "Mvp24Hours.Infrastructure.Cqrs",
        "Mvp24Hours.Infrastructure.Data.EFCore (or MongoDB)",
        "FluentValidation.DependencyInjectionExtensions",
    ],
    "event-driven": [
        "Mvp24Hours.Core",
        "Mvp24Hours.Application",
        "Mvp24Hours.Infrastructure.Cqrs",
        "Mvp24Hours.Infrastructure.RabbitMQ",
    ],
    "clean-architecture": ["Mvp24Hours.Core", "Mvp24Hours.Application", "Mvp24Hours.Infrastructure.Data.EFCore"],
    "ddd": [
        "Mvp24Hours.Core",
        "Mvp24Hours.Application",
        "Mvp24Hours.Infrastructure.Cqrs",
        "Mvp24Hours.Infrastructure.Data.EFCore",
    ],
    "hexagonal": ["Mvp24Hours.Core", "Mvp24Hours.Application", "Mvp24Hours.Infrastructure.Data.EFCore"],
    "minimal-api": ["Mvp24Hours.Core", "Mvp24Hours.WebAPI"],
    "simple-nlayers": ["Mvp24Hours.Core", "Mvp24Hours.Application", "Mvp24Hours.Infrastructure.Data.EFCore"],
    "complex-nlayers": ["Mvp24Hours.Core", "Mvp24Hours.Application", "Mvp24Hours.Infrastructure.Data.EFCore"],
    "microservices": [
        "Mvp24Hours.Core",
        "Mvp24Hours.Application",
        "Mvp24Hours.Infrastructure.Cqrs",
        "Mvp24Hours.Infrastructure.RabbitMQ",
        "Aspire.Hosting",
    ],
}

ARCHITECTURE_RELATED_TOOLS: dict[str, list[str]] = {
    "cqrs": [
        'mvp24h_cqrs_guide({ topic: "commands" })',
        'mvp24h_cqrs_guide({ topic: "queries" })',
        'mvp24h_cqrs_guide({ topic: "behaviors" })',
        'mvp24h_database_advisor({ patterns: ["repository", "unit-of-work"] })',
    ],
    "event-driven": [
        'mvp24h_cqrs_guide({ topic: "domain-events" })',
        'mvp24h_cqrs_guide({ topic: "integration-events" })',
        'mvp24h_messaging_patterns({ pattern: "rabbitmq" })',
    ],
    "clean-architecture": [
        'mvp24h_core_patterns({ topic: "entity-interfaces" })',
        'mvp24h_database_advisor({ patterns: ["repository"] })',
    ],
    "ddd": [
        'mvp24h_core_patterns({ topic: "value-objects" })',
        'mvp24h_core_patterns({ topic: "entity-interfaces" })',
        'mvp24h_cqrs_guide({ topic: "domain-events" })',
    ],
    "hexagonal": [
        'mvp24h_core_patterns({ topic: "entity-interfaces" })',
        'mvp24h_database_advisor({ patterns: ["repository"] })',
    ],
    "minimal-api": [
        'mvp24h_modernization_guide({ feature: "minimal-apis" })',
        'mvp24h_infrastructure_guide({ topic: "webapi" })',
    ],
    "simple-nlayers": [
        'mvp24h_database_advisor({ patterns: ["repository"] })',
        'mvp24h_infrastructure_guide({ topic: "application-services" })',
    ],
    "complex-nlayers": [
        'mvp24h_database_advisor({ patterns: ["repository", "unit-of-work"] })',
        'mvp24h_infrastructure_guide({ topic: "application-services" })',
    ],
    "microservices": [
        'mvp24h_messaging_patterns({ pattern: "rabbitmq" })',
        'mvp24h_modernization_guide({ feature: "aspire" })',
        'mvp24h_containerization_patterns({ topic: "kubernetes" })',
    ],
}

# resource -> overview call appended to the related tools list
RESOURCE_TOOLS: dict[str, str] = {
    "observability": 'mvp24h_observability_setup({ component: "overview" })',
    "messaging": 'mvp24h_messaging_patterns({ pattern: "overview" })',
    "security": 'mvp24h_security_patterns({ topic: "overview" })',
    "testing": 'mvp24h_testing_patterns({ topic: "overview" })',
    "containerization": 'mvp24h_containerization_patterns({ topic: "overview" })',
}

BASE_INTERFACES = """### Core Interfaces (Mvp24Hours.Core)

| Interface | Namespace | Description |
|-----------|-----------|-------------|
| `IRepository<TEntity>` | `Mvp24Hours.Core.Contract.Data` | Sync repository |
| `IRepositoryAsync<TEntity>` | `Mvp24Hours.Core.Contract.Data` | Async repository |
| `IUnitOfWork` | `Mvp24Hours.Core.Contract.Data` | Sync unit of work |
| `IUnitOfWorkAsync` | `Mvp24Hours.Core.Contract.Data` | Async unit of work |
| `IBusinessResult<T>` | `Mvp24Hours.Core.Contract.ValueObjects.Logic` | Business result |
| `EntityBase<TKey>` | `Mvp24Hours.Core.Entities` | Entity base class |"""

CQRS_INTERFACES = """### CQRS Interfaces (Mvp24Hours.Infrastructure.Cqrs)

| Interface | Namespace | Description |
|-----------|-----------|-------------|
| `IMediatorCommand<TResponse>` | `Mvp24Hours.Infrastructure.Cqrs.Abstractions` | Command with return |
| `IMediatorCommandHandler<TCommand, TResponse>` | `Mvp24Hours.Infrastructure.Cqrs.Abstractions` | Command handler |
| `IMediatorQuery<TResponse>` | `Mvp24Hours.Infrastructure.Cqrs.Abstractions` | Query with return |
| `IMediatorQueryHandler<TQuery, TResponse>` | `Mvp24Hours.Infrastructure.Cqrs.Abstractions` | Query handler |
| `IMediatorNotification` | `Mvp24Hours.Infrastructure.Cqrs.Abstractions` | In-process notification |
| `IMediator` | `Mvp24Hours.Infrastructure.Cqrs.Abstractions` | Mediator interface |"""

EVENT_INTERFACES = """### Event Interfaces

| Interface | Namespace | Description |
|-----------|-----------|-------------|
| `IDomainEvent` | `Mvp24Hours.Core.Contract.Domain.Events` | Domain event marker |
| `IIntegrationEvent` | `Mvp24Hours.Core.Contract.Domain.Events` | Integration event marker |
| `IMvpRabbitMQPublisher` | `Mvp24Hours.Infrastructure.RabbitMQ` | RabbitMQ publisher |
| `IMvpRabbitMQConsumer` | `Mvp24Hours.Infrastructure.RabbitMQ` | RabbitMQ consumer |"""

KEY_INTERFACES: dict[str, list[str]] = {
    "cqrs": [BASE_INTERFACES, CQRS_INTERFACES],
    "event-driven": [BASE_INTERFACES, CQRS_INTERFACES, EVENT_INTERFACES],
    "ddd": [BASE_INTERFACES, CQRS_INTERFACES, EVENT_INTERFACES],
    "microservices": [BASE_INTERFACES, CQRS_INTERFACES, EVENT_INTERFACES],
}

ARCHITECTURE_CHECKLIST: dict[str, list[str]] = {
    "cqrs": [
        "Create Commands and CommandHandlers",
        "Create Queries and QueryHandlers",
        "Configure Mediator in Program.cs",
        "Add Pipeline Behaviors (Validation, Logging)",
    ],
    "event-driven": [
        "Define Domain Events",
        "Define Integration Events",
        "Configure Event Publishers",
        "Configure Event Consumers",
    ],
    "clean-architecture": [
        "Create Domain layer (Entities, Interfaces)",
        "Create Application layer (Use Cases)",
        "Create Infrastructure layer (Repositories)",
        "Create Presentation layer (API)",
    ],
    "ddd": [
        "Define Bounded Contexts",
        "Create Aggregate Roots",
        "Implement Value Objects",
        "Define Domain Events",
        "Create Domain Services",
    ],
    "hexagonal": [
        "Define Domain/Core (Entities, Ports)",
        "Create Input Adapters (Controllers)",
        "Create Output Adapters (Repositories)",
        "Configure Dependency Injection",
    ],
    "minimal-api": ["Define API Endpoints", "Configure Route Groups", "Add OpenAPI Documentation"],
    "simple-nlayers": [
        "Create Data Access Layer",
        "Create Business Logic Layer",
        "Create Presentation Layer",
        "Configure Dependency Injection",
    ],
    "complex-nlayers": [
        "Create Data Access Layer",
        "Create Business Logic Layer",
        "Create Presentation Layer",
        "Configure Dependency Injection",
    ],
    "microservices": [
        "Define Service Boundaries",
        "Create Service Projects",
        "Configure Inter-Service Communication",
        "Setup API Gateway (if needed)",
        "Configure Aspire Orchestration",
    ],
}

# (section title, steps); database steps also apply when a provider is given
RESOURCE_CHECKLIST: dict[str, tuple[str, list[str]]] = {
    "database": (
        "Database",
        ["Configure DbContext", "Create Entity Configurations", "Register Repositories", "Create Initial Migration"],
    ),
    "caching": (
        "Caching",
        ["Configure HybridCache or Redis", "Add Cache Keys Strategy", "Implement Cache Invalidation"],
    ),
    "observability": (
        "Observability",
        ["Configure OpenTelemetry", "Setup Logging Provider", "Configure Tracing Exporter", "Add Metrics Collection"],
    ),
    "messaging": (
        "Messaging",
        ["Configure RabbitMQ Connection", "Create Message Publishers", "Create Message Consumers", "Setup Dead Letter Queue"],
    ),
    "security": (
        "Security",
        ["Configure Authentication", "Setup Authorization Policies", "Configure JWT (if needed)", "Add Input Validation"],
    ),
    "testing": (
        "Testing",
        ["Create Unit Test Project", "Create Integration Test Project", "Setup Test Fixtures", "Configure Test Containers (if needed)"],
    ),
    "containerization": (
        "Containerization",
        ["Create Dockerfile", "Configure docker-compose.yml", "Add Health Checks", "Create Kubernetes Manifests (if needed)"],
    ),
}

ARCHITECTURE_GROUPS: dict[str, list[tuple[str, str]]] = {
    "Simple Architectures": [
        ("minimal-api", "Minimal API for simple endpoints"),
        ("simple-nlayers", "Simple N-Layers (Data, Business, Presentation)"),
    ],
    "Standard Architectures": [
        ("complex-nlayers", "Complex N-Layers with UoW and Repository"),
        ("clean-architecture", "Clean Architecture with dependency inversion"),
        ("hexagonal", "Hexagonal/Ports & Adapters"),
    ],
    "Advanced Architectures": [
        ("cqrs", "CQRS with Mediator pattern"),
        ("event-driven", "Event-Driven Architecture"),
        ("ddd", "Domain-Driven Design"),
        ("microservices", "Microservices Architecture"),
    ],
}

USAGE_EXAMPLES = """## Usage Examples

### Basic Context
```
mvp24h_build_context({ architecture: "cqrs" })
```

### With Resources
```
mvp24h_build_context({
  architecture: "cqrs",
  resources: ["database", "observability", "caching"]
})
```

### With Database Provider
```
mvp24h_build_context({
  architecture: "cqrs",
  resources: ["database"],
  database_provider: "postgresql"
})
```"""
