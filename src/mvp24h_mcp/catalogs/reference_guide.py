"""Lookup tables for mvp24h_reference_guide."""

from mvp24h_mcp.schemas import TopicCatalog

CATALOG = TopicCatalog(
    tool="mvp24h_reference_guide",
    topics={
        "overview": ["home.md"],
        "mapping": ["mapping.md"],
        "validation": ["validation.md"],
        "specification": ["specification.md"],
        "documentation": ["documentation.md"],
        "migration": ["migration.md"],
        "api-versioning": ["ai-context/api-versioning-patterns.md"],
        "error-handling": ["ai-context/error-handling-patterns.md"],
        "telemetry": ["telemetry.md"],
    },
    related={
        "mapping": ["cqrs/commands.md", "database/use-repository.md", "application-services.md"],
        "validation": ["cqrs/validation-behavior.md", "error-handling", "application-services.md"],
        "specification": ["cqrs/specifications.md", "database/use-repository.md"],
        "documentation": ["modernization/native-openapi.md", "api-versioning"],
        "migration": [
            "observability/migration.md",
            "modernization/migration-guide.md",
            "cqrs/getting-started.md",
        ],
        "api-versioning": ["documentation", "error-handling", "modernization/minimal-apis.md"],
        "error-handling": [
            "validation",
            "modernization/problem-details.md",
            "core/exceptions.md",
            "cqrs/validation-behavior.md",
        ],
        "telemetry": ["observability/migration.md", "observability/logging.md", "observability/tracing.md"],
    },
    descriptions={
        "mapping": "AutoMapper configuration and IMapFrom interface for object-to-object mapping",
        "validation": "FluentValidation patterns and DataAnnotations for data validation",
        "specification": "Specification pattern implementation for query composition",
        "documentation": "API documentation with Swagger and Native OpenAPI (.NET 9+)",
        "migration": "Migration guides from legacy to modern APIs and version upgrades",
        "api-versioning": "API versioning patterns (URL, Query String, Header, Media Type)",
        "error-handling": "Exception handling, ProblemDetails, and Result pattern with IBusinessResult",
        "telemetry": "Telemetry configuration (deprecated - migrate to ILogger and OpenTelemetry)",
    },
    quick_refs={
        "mapping": """## Quick Reference

```csharp
public class CustomerDto : IMapFrom
{
    public int Id { get; set; }
    public string Name { get; set; }

    public void Mapping(Profile profile)
        => profile.CreateMap<Customer, CustomerDto>();
}

builder.Services.AddMvp24HoursMapService(Assembly.GetExecutingAssembly());
```""",
        "validation": """## Quick Reference

```csharp
public class CustomerValidator : AbstractValidator<Customer>
{
    public CustomerValidator()
    {
        RuleFor(x => x.Name).NotEmpty().MaximumLength(100);
        RuleFor(x => x.Email).NotEmpty().EmailAddress();
    }
}
```""",
        "telemetry": """## Quick Reference

> `TelemetryHelper` is deprecated. Use `ILogger<T>` with OpenTelemetry instead.
> See `mvp24h_observability_setup({ component: "migration" })`.""",
    },
)

OVERVIEW_INTRO = """# Reference Guide

## Overview

The Reference Guide provides documentation for cross-cutting concerns and supporting patterns
used throughout Mvp24Hours applications. These patterns complement the core architecture
with mapping, validation, documentation, and error handling capabilities."""

OVERVIEW_REFERENCE = """## NuGet Packages

| Package | Description |
|---------|-------------|
| `Mvp24Hours.Core` | Mapping, validation and specification contracts |
| `Mvp24Hours.WebAPI` | Swagger and API documentation helpers |

Use `mvp24h_reference_guide({ topic: "..." })` for detailed documentation on each topic."""
