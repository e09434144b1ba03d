"""Lookup tables for mvp24h_cqrs_guide."""

from mvp24h_mcp.schemas import TopicCatalog

CATALOG = TopicCatalog(
    tool="mvp24h_cqrs_guide",
    topics={
        "overview": ["cqrs/home.md"],
        "commands": ["cqrs/commands.md"],
        "queries": ["cqrs/queries.md"],
        "notifications": ["cqrs/notifications.md"],
        "domain-events": ["cqrs/domain-events.md"],
        "integration-events": ["cqrs/integration-events.md"],
        "behaviors": ["cqrs/behaviors.md"],
        "validation": ["cqrs/validation-behavior.md"],
        "saga": ["cqrs/saga/home.md"],
        "event-sourcing": ["cqrs/event-sourcing.md"],
        "resilience": ["cqrs/resilience.md"],
        "multi-tenancy": ["cqrs/multi-tenancy.md"],
        "scheduled-commands": ["cqrs/scheduled-commands.md"],
        "extensibility": ["cqrs/extensibility.md"],
        "best-practices": ["cqrs/best-practices.md"],
        "api-reference": ["cqrs/api-reference.md"],
        "migration-mediatr": ["cqrs/migration-mediatr.md"],
    },
    related={
        "commands": ["queries", "validation", "behaviors"],
        "queries": ["commands", "behaviors", "database/use-repository.md"],
        "notifications": ["domain-events", "integration-events"],
        "domain-events": ["notifications", "integration-events", "event-sourcing"],
        "integration-events": ["domain-events", "saga", "ai-context/messaging-patterns.md"],
        "behaviors": ["validation", "resilience", "commands"],
        "validation": ["behaviors", "commands", "validation.md"],
        "saga": ["integration-events", "resilience"],
        "event-sourcing": ["domain-events", "saga"],
        "resilience": ["behaviors", "modernization/generic-resilience.md"],
        "multi-tenancy": ["behaviors", "core/entity-interfaces.md"],
        "scheduled-commands": ["commands", "cronjob.md"],
        "extensibility": ["behaviors", "api-reference"],
        "best-practices": ["commands", "queries", "behaviors"],
        "migration-mediatr": ["overview", "api-reference"],
    },
    descriptions={
        "overview": "CQRS and the Mvp24Hours mediator",
        "commands": "State-changing requests and their handlers",
        "queries": "Read-only requests and their handlers",
        "notifications": "In-process publish/subscribe notifications",
        "domain-events": "Events raised by aggregates inside the domain",
        "integration-events": "Events published to other services",
        "behaviors": "Pipeline behaviors wrapping every request",
        "validation": "FluentValidation behavior for commands and queries",
        "saga": "Long-running processes with compensation",
        "event-sourcing": "Persisting state as a stream of events",
        "resilience": "Retry, circuit breaker and timeout behaviors",
        "multi-tenancy": "Tenant resolution and isolation for requests",
        "scheduled-commands": "Commands executed at a later time",
        "extensibility": "Custom behaviors and mediator extensions",
        "best-practices": "Guidelines for handlers, naming and structure",
        "api-reference": "Mediator interfaces and result types",
        "migration-mediatr": "Moving from MediatR to the Mvp24Hours mediator",
    },
    titles={
        "overview": "CQRS/Mediator Overview",
        "commands": "CQRS Commands",
        "queries": "CQRS Queries",
        "notifications": "CQRS Notifications",
        "behaviors": "Pipeline Behaviors",
        "validation": "Validation in CQRS",
        "saga": "Saga Pattern",
        "resilience": "Resilience Patterns in CQRS",
        "multi-tenancy": "Multi-Tenancy in CQRS",
        "extensibility": "CQRS Extensibility",
        "best-practices": "CQRS Best Practices",
        "api-reference": "CQRS API Reference",
        "migration-mediatr": "Migration from MediatR",
    },
    quick_refs={
        "commands": """## Quick Reference

```csharp
public record CreateCustomerCommand(string Name, string Email)
    : IMediatorCommand<IBusinessResult<CustomerDto>>;

public class CreateCustomerHandler
    : IMediatorCommandHandler<CreateCustomerCommand, IBusinessResult<CustomerDto>>
{
    public async Task<IBusinessResult<CustomerDto>> Handle(
        CreateCustomerCommand request, CancellationToken cancellationToken)
    {
        // persist and map
    }
}
```""",
        "queries": """## Quick Reference

```csharp
public record GetCustomerByIdQuery(Guid Id) : IMediatorQuery<IBusinessResult<CustomerDto>>;

var result = await _mediator.SendAsync(new GetCustomerByIdQuery(id));
```""",
        "api-reference": """## Quick Reference

| Interface | Description |
|-----------|-------------|
| `IMediator` | Sends requests and publishes notifications |
| `IMediatorCommand<TResult>` | Command contract |
| `IMediatorQuery<TResult>` | Query contract |
| `IMediatorNotification` | Notification contract |
| `IPipelineBehavior<TRequest, TResponse>` | Cross-cutting behavior |""",
    },
)
