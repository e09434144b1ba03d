"""Lookup tables for mvp24h_infrastructure_guide."""

from mvp24h_mcp.schemas import TopicCatalog

CATALOG = TopicCatalog(
    tool="mvp24h_infrastructure_guide",
    topics={
        "overview": ["home.md"],
        "pipeline": ["pipeline.md"],
        "caching": ["caching-advanced.md"],
        "caching-advanced": ["caching-advanced.md"],
        "webapi": ["webapi.md"],
        "webapi-advanced": ["webapi-advanced.md"],
        "cronjob": ["cronjob.md"],
        "cronjob-advanced": ["cronjob-advanced.md"],
        "cronjob-observability": ["cronjob-observability.md"],
        "cronjob-resilience": ["cronjob-resilience.md"],
        "application-services": ["application-services.md"],
    },
    related={
        "pipeline": ["cqrs/behaviors.md", "cqrs/saga/home.md"],
        "caching": ["modernization/hybrid-cache.md", "cqrs/integration-caching.md"],
        "caching-advanced": [
            "modernization/hybrid-cache.md",
            "cqrs/integration-caching.md",
            "database/use-repository.md",
        ],
        "webapi": ["webapi-advanced", "modernization/minimal-apis.md", "modernization/native-openapi.md"],
        "webapi-advanced": ["webapi", "modernization/rate-limiting.md", "modernization/problem-details.md"],
        "cronjob": ["cronjob-advanced", "cronjob-resilience", "cronjob-observability"],
        "cronjob-advanced": ["cronjob", "cronjob-resilience", "cronjob-observability"],
        "cronjob-observability": [
            "cronjob",
            "cronjob-advanced",
            "observability/metrics.md",
            "observability/tracing.md",
        ],
        "cronjob-resilience": ["cronjob", "cronjob-advanced", "modernization/generic-resilience.md"],
        "application-services": [
            "database/use-repository.md",
            "database/use-unitofwork.md",
            "cqrs/commands.md",
        ],
    },
    descriptions={
        "pipeline": "Pipe and Filters pattern for composing complex operations",
        "caching": "Redis caching basics with Mvp24Hours",
        "caching-advanced": "Advanced caching patterns (multi-level, invalidation, resilience)",
        "webapi": "ASP.NET Web API configuration and patterns",
        "webapi-advanced": "Advanced Web API features (security, idempotency, versioning)",
        "cronjob": "Background job scheduling with CRON expressions",
        "cronjob-advanced": "Advanced CronJob features (context, dependencies, distributed locking)",
        "cronjob-observability": "CronJob health checks, metrics, and tracing",
        "cronjob-resilience": "CronJob retry, circuit breaker, and overlapping prevention",
        "application-services": "Service layer patterns with Mvp24Hours",
    },
    quick_refs={
        "pipeline": """## Quick Reference - Pipeline Interfaces

| Interface | Description |
|-----------|-------------|
| `IPipeline` | Synchronous pipeline |
| `IPipelineAsync` | Asynchronous pipeline |
| `IOperation<T>` | Operation/filter interface |
| `OperationBaseAsync` | Async operation base class |
| `IPipelineMessage` | Message/context passed through pipeline |

```csharp
builder.Services.AddMvp24HoursPipelineAsync();
var pipeline = serviceProvider.GetService<IPipelineAsync>();
```""",
        "caching": """## Quick Reference - Caching Interfaces

| Interface | Description |
|-----------|-------------|
| `ICacheProvider` | Low-level cache provider |
| `ICacheService` | High-level cache service |
| `IMultiLevelCache` | L1 (memory) + L2 (distributed) cache |""",
        "caching-advanced": """## Quick Reference - Advanced Caching

| Pattern | Description |
|---------|-------------|
| Cache-Aside | Check cache, fetch on miss, store result |
| Read-Through | Cache automatically fetches on miss |
| Write-Through | Updates written to cache and DB synchronously |
| Write-Behind | Updates queued and written asynchronously |
| Refresh-Ahead | Proactively refresh before expiration |""",
        "cronjob": """## Quick Reference - CronJob Classes

| Class | Description |
|-------|-------------|
| `CronJobService<T>` | Base CronJob with CRON scheduling |
| `ResilientCronJobService<T>` | Adds retry, circuit breaker, overlapping prevention |
| `AdvancedCronJobService<T>` | Full-featured with context, state, dependencies |

| Expression | Description |
|------------|-------------|
| `*/5 * * * *` | Every 5 minutes |
| `0 0 * * *` | Daily at midnight |
| `0 9 * * 1-5` | Weekdays at 9 AM |""",
        "cronjob-resilience": """## Quick Reference - Resilience Options

| Option | Default | Description |
|--------|---------|-------------|
| `EnableRetry` | false | Enable retry policy |
| `MaxRetryAttempts` | 3 | Max retry attempts |
| `EnableCircuitBreaker` | false | Enable circuit breaker |
| `PreventOverlapping` | true | Prevent concurrent runs |""",
        "webapi": """## Quick Reference - WebAPI Extensions

| Extension | Description |
|-----------|-------------|
| `AddMvp24HoursWebEssential()` | Essential services |
| `AddMvp24HoursWebJson()` | JSON configuration |
| `AddMvp24HoursSwagger()` | Swagger/OpenAPI |
| `UseMvp24HoursExceptionHandling()` | Global exception handler |""",
        "application-services": """## Quick Reference - Application Services

| Class | Description |
|-------|-------------|
| `RepositoryService<T, TUoW>` | Sync service base |
| `RepositoryServiceAsync<T, TUoW>` | Async service base |
| `RepositoryPagingServiceAsync<T, TUoW>` | Async with pagination |""",
    },
    related_footer="""### Other Tools

- `mvp24h_cqrs_guide` - CQRS/Mediator patterns
- `mvp24h_database_advisor` - Database patterns and configuration
- `mvp24h_observability_setup` - Logging, tracing, and metrics
- `mvp24h_modernization_guide` - .NET 9 modern patterns""",
)

OVERVIEW_INTRO = "# Infrastructure Guide"

OVERVIEW_REFERENCE = """## NuGet Packages

| Package | Description |
|---------|-------------|
| `Mvp24Hours.Infrastructure.Pipe` | Pipeline/Pipe and Filters pattern |
| `Mvp24Hours.Infrastructure.Caching` | Caching abstractions |
| `Mvp24Hours.Infrastructure.Caching.Redis` | Redis caching implementation |
| `Mvp24Hours.Infrastructure.CronJob` | CronJob/Background tasks |
| `Mvp24Hours.WebAPI` | Web API utilities and extensions |
| `Mvp24Hours.Application` | Application services base classes |

## Key Interfaces

| Interface | Package | Description |
|-----------|---------|-------------|
| `IPipeline` / `IPipelineAsync` | Infrastructure.Pipe | Pipeline orchestration |
| `ICacheProvider` | Infrastructure.Caching | Cache provider abstraction |
| `CronJobService<T>` | Infrastructure.CronJob | Base CronJob service |

Use `mvp24h_infrastructure_guide({ topic: "..." })` for detailed documentation on each topic."""
