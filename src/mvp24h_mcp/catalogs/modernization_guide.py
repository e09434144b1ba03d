"""Lookup tables for mvp24h_modernization_guide."""

from mvp24h_mcp.schemas import TopicCatalog

FEATURES = TopicCatalog(
    tool="mvp24h_modernization_guide",
    argument="feature",
    label="feature",
    topics={
        "http-resilience": ["modernization/http-resilience.md"],
        "generic-resilience": ["modernization/generic-resilience.md"],
        "rate-limiting": ["modernization/rate-limiting.md"],
        "hybrid-cache": ["modernization/hybrid-cache.md"],
        "output-caching": ["modernization/output-caching.md"],
        "time-provider": ["modernization/time-provider.md"],
        "periodic-timer": ["modernization/periodic-timer.md"],
        "keyed-services": ["modernization/keyed-services.md"],
        "options-pattern": ["modernization/options-configuration.md"],
        "options-configuration": ["modernization/options-configuration.md"],
        "problem-details": ["modernization/problem-details.md"],
        "minimal-apis": ["modernization/minimal-apis.md"],
        "native-openapi": ["modernization/native-openapi.md"],
        "source-generators": ["modernization/source-generators.md"],
        "aspire": ["modernization/aspire.md"],
        "channels": ["modernization/channels.md"],
        "dotnet9-features": ["modernization/dotnet9-features.md"],
        "migration-guide": ["modernization/migration-guide.md"],
    },
    related={
        "http-resilience": ["generic-resilience", "rate-limiting"],
        "generic-resilience": ["http-resilience", "rate-limiting"],
        "rate-limiting": ["http-resilience", "generic-resilience"],
        "hybrid-cache": ["output-caching"],
        "output-caching": ["hybrid-cache"],
        "time-provider": ["periodic-timer"],
        "periodic-timer": ["time-provider", "channels"],
        "keyed-services": ["options-configuration"],
        "options-pattern": ["keyed-services"],
        "options-configuration": ["keyed-services"],
        "problem-details": ["minimal-apis", "native-openapi"],
        "minimal-apis": ["problem-details", "native-openapi"],
        "native-openapi": ["minimal-apis", "problem-details"],
        "source-generators": ["aspire"],
        "aspire": ["source-generators", "channels"],
        "channels": ["periodic-timer", "aspire"],
        "dotnet9-features": ["migration-guide"],
        "migration-guide": ["dotnet9-features"],
    },
    descriptions={
        "http-resilience": "HTTP client resilience",
        "generic-resilience": "Generic resilience patterns",
        "rate-limiting": "API rate limiting",
        "hybrid-cache": "L1/L2 caching with stampede protection",
        "output-caching": "HTTP response caching",
        "time-provider": "Testable time abstraction",
        "periodic-timer": "Async-friendly periodic timer",
        "keyed-services": "Key-based DI resolution",
        "options-pattern": "Strongly-typed configuration",
        "options-configuration": "Strongly-typed configuration with validation",
        "problem-details": "RFC 7807 error responses",
        "minimal-apis": "Lightweight endpoints with TypedResults",
        "native-openapi": "Built-in OpenAPI support",
        "source-generators": "AOT-friendly code generation",
        "aspire": ".NET Aspire cloud-native stack",
        "channels": "High-performance producer/consumer",
        "dotnet9-features": ".NET 9 features overview",
        "migration-guide": "Migration from legacy code",
    },
    titles={
        "http-resilience": "HTTP Resilience",
        "hybrid-cache": "HybridCache",
        "time-provider": "TimeProvider",
        "periodic-timer": "PeriodicTimer",
        "problem-details": "ProblemDetails",
        "minimal-apis": "Minimal APIs",
        "native-openapi": "Native OpenAPI",
        "aspire": ".NET Aspire",
        "dotnet9-features": ".NET 9 Features",
    },
    quick_refs={
        "http-resilience": """## Quick Reference

```bash
dotnet add package Microsoft.Extensions.Http.Resilience
```

```csharp
builder.Services.AddHttpClient("my-api")
    .AddStandardResilienceHandler();
```

The standard handler includes a rate limiter, total request timeout, retry
with exponential backoff, circuit breaker and attempt timeout.""",
        "hybrid-cache": """## Quick Reference

```bash
dotnet add package Microsoft.Extensions.Caching.Hybrid
```

```csharp
builder.Services.AddHybridCache(options =>
{
    options.DefaultEntryOptions = new HybridCacheEntryOptions
    {
        Expiration = TimeSpan.FromMinutes(5),
        LocalCacheExpiration = TimeSpan.FromMinutes(1)
    };
});
```""",
        "rate-limiting": """## Quick Reference

```csharp
builder.Services.AddRateLimiter(options =>
{
    options.AddFixedWindowLimiter("api", opt =>
    {
        opt.Window = TimeSpan.FromMinutes(1);
        opt.PermitLimit = 100;
    });
});

app.UseRateLimiter();
```""",
        "channels": """## Quick Reference

```csharp
var channel = Channel.CreateBounded<Order>(100);

await channel.Writer.WriteAsync(order);

await foreach (var item in channel.Reader.ReadAllAsync())
{
    await ProcessAsync(item);
}
```""",
        "aspire": """## Quick Reference

```bash
dotnet new install Aspire.ProjectTemplates
dotnet new aspire-starter -n MyApp
```

```csharp
var builder = DistributedApplication.CreateBuilder(args);
var cache = builder.AddRedis("cache");
builder.AddProject<Projects.MyApp_Api>("api").WithReference(cache);
builder.Build().Run();
```""",
    },
    related_footer="""## Other Resources

- `mvp24h_modernization_guide({ feature: "dotnet9-features" })` - Complete .NET 9 features overview
- `mvp24h_modernization_guide({ feature: "migration-guide" })` - Migration from legacy code""",
)

CATEGORIES = TopicCatalog(
    tool="mvp24h_modernization_guide",
    argument="category",
    label="category",
    topics={
        "overview": ["modernization/dotnet9-features.md"],
        "resilience": [
            "modernization/http-resilience.md",
            "modernization/generic-resilience.md",
            "modernization/rate-limiting.md",
        ],
        "caching": ["modernization/hybrid-cache.md", "modernization/output-caching.md"],
        "time": ["modernization/time-provider.md", "modernization/periodic-timer.md"],
        "di": ["modernization/keyed-services.md", "modernization/options-configuration.md"],
        "apis": [
            "modernization/problem-details.md",
            "modernization/minimal-apis.md",
            "modernization/native-openapi.md",
        ],
        "performance": ["modernization/source-generators.md"],
        "cloud": ["modernization/aspire.md"],
        "communication": ["modernization/channels.md"],
    },
    descriptions={
        "resilience": "Resilience patterns",
        "caching": "Caching strategies",
        "time": "Time abstractions",
        "di": "DI enhancements",
        "apis": "API improvements",
        "performance": "Source generators and AOT",
        "cloud": "Cloud-native features",
        "communication": "Channels & messaging",
    },
    titles={
        "overview": ".NET 9 Modernization - Overview",
        "resilience": "Resilience Features (.NET 9)",
        "caching": "Caching Features (.NET 9)",
        "time": "Time & Scheduling Features (.NET 9)",
        "di": "Dependency Injection Features (.NET 9)",
        "apis": "API Features (.NET 9)",
        "performance": "Performance Features (.NET 9)",
        "cloud": "Cloud-Native Features (.NET 9)",
        "communication": "Communication Features (.NET 9)",
    },
)

# Features advertised under each category's related section.
CATEGORY_FEATURES: dict[str, list[str]] = {
    "resilience": ["http-resilience", "generic-resilience", "rate-limiting"],
    "caching": ["hybrid-cache", "output-caching"],
    "time": ["time-provider", "periodic-timer"],
    "di": ["keyed-services", "options-configuration"],
    "apis": ["problem-details", "minimal-apis", "native-openapi"],
    "performance": ["source-generators"],
    "cloud": ["aspire"],
    "communication": ["channels"],
}

OVERVIEW_SECTIONS = [
    """# .NET 9 Modernization Guide

## Overview

.NET 9 introduces many features for building modern, resilient, and performant applications.
This guide covers the native .NET 9 features adopted by Mvp24Hours framework.""",
    """## Feature Categories

| Category | Features | When to Use |
|----------|----------|-------------|
| **Resilience** | HTTP Resilience, Generic Resilience, Rate Limiting | External API calls, protecting resources |
| **Caching** | HybridCache, Output Caching | Performance optimization, reducing load |
| **Time** | TimeProvider, PeriodicTimer | Testable time-dependent code, background tasks |
| **DI** | Keyed Services, Options Pattern | Multiple implementations, configuration |
| **APIs** | ProblemDetails, Minimal APIs, Native OpenAPI | Better error handling, lightweight endpoints |
| **Performance** | Source Generators | Startup time, AOT compilation |
| **Cloud** | .NET Aspire | Cloud-native applications, orchestration |
| **Communication** | Channels | High-performance producer/consumer patterns |""",
    """## Quick Decision Guide

### Need resilience for HTTP calls?
→ Use `mvp24h_modernization_guide({ feature: "http-resilience" })`

### Need distributed caching with local fallback?
→ Use `mvp24h_modernization_guide({ feature: "hybrid-cache" })`

### Need standardized error responses?
→ Use `mvp24h_modernization_guide({ feature: "problem-details" })`

### Building cloud-native app?
→ Use `mvp24h_modernization_guide({ feature: "aspire" })`

### Need migration help from legacy code?
→ Use `mvp24h_modernization_guide({ feature: "migration-guide" })`""",
    """## Migration Considerations

| From | To | Benefit |
|------|-----|---------|
| Polly v7 | Microsoft.Extensions.Resilience | Built-in, standardized |
| IMemoryCache + IDistributedCache | HybridCache | Unified API, stampede protection |
| DateTime.Now | TimeProvider | Testability |
| Swashbuckle | Native OpenAPI | Smaller footprint |
| ConcurrentQueue + AutoResetEvent | System.Threading.Channels | Modern async-first API |
| TelemetryHelper | ILogger + OpenTelemetry | Industry standard |""",
]
