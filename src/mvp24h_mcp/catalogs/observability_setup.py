"""Lookup tables for mvp24h_observability_setup."""

from mvp24h_mcp.schemas import TopicCatalog

COMPONENTS = TopicCatalog(
    tool="mvp24h_observability_setup",
    argument="component",
    label="component",
    topics={
        "overview": ["observability/home.md"],
        "logging": ["observability/logging.md"],
        "tracing": ["observability/tracing.md"],
        "metrics": ["observability/metrics.md"],
        "exporters": ["observability/exporters.md"],
        "migration": ["observability/migration.md"],
    },
    related={
        "logging": ["tracing", "metrics"],
        "tracing": ["logging", "exporters"],
        "metrics": ["exporters", "cronjob-observability.md"],
        "exporters": ["tracing", "metrics"],
        "migration": ["logging", "telemetry.md"],
    },
    descriptions={
        "logging": "Structured logging with ILogger and OpenTelemetry",
        "tracing": "Distributed tracing across services",
        "metrics": "Counters, histograms and meters",
        "exporters": "Console, Jaeger, Zipkin, OTLP, Prometheus, Application Insights",
        "migration": "Migration from TelemetryHelper to OpenTelemetry",
    },
    titles={
        "logging": "Logging Configuration",
        "tracing": "Distributed Tracing",
        "metrics": "Metrics Configuration",
        "exporters": "Telemetry Exporters",
        "migration": "Migration from TelemetryHelper to OpenTelemetry",
    },
)

# exporter -> (display name, NuGet package, registration call)
EXPORTERS: dict[str, tuple[str, str, str]] = {
    "console": ("Console", "OpenTelemetry.Exporter.Console", ".AddConsoleExporter()"),
    "jaeger": ("Jaeger", "OpenTelemetry.Exporter.OpenTelemetryProtocol", ".AddOtlpExporter(o => o.Endpoint = new Uri(\"http://localhost:4317\"))"),
    "zipkin": ("Zipkin", "OpenTelemetry.Exporter.Zipkin", ".AddZipkinExporter()"),
    "otlp": ("OTLP", "OpenTelemetry.Exporter.OpenTelemetryProtocol", ".AddOtlpExporter()"),
    "prometheus": ("Prometheus", "OpenTelemetry.Exporter.Prometheus.AspNetCore", ".AddPrometheusExporter()"),
    "application-insights": ("Application Insights", "Azure.Monitor.OpenTelemetry.Exporter", ".AddAzureMonitorTraceExporter()"),
}

OVERVIEW_INTRO = """# Observability Setup

## Overview

Complete observability for .NET applications using OpenTelemetry.

## Three Pillars of Observability

| Pillar | Purpose | Tools |
|--------|---------|-------|
| **Logging** | Record events and errors | NLog, Serilog, OpenTelemetry |
| **Tracing** | Follow requests across services | OpenTelemetry, Jaeger, Zipkin |
| **Metrics** | Measure performance | Prometheus, Application Insights |

## Quick Setup

```bash
dotnet add package OpenTelemetry.Extensions.Hosting
dotnet add package OpenTelemetry.Instrumentation.AspNetCore
dotnet add package OpenTelemetry.Instrumentation.Http
dotnet add package OpenTelemetry.Exporter.Console
```

## Basic Configuration

```csharp
builder.Services.AddOpenTelemetry()
    .ConfigureResource(resource => resource
        .AddService(serviceName: "MyService", serviceVersion: "1.0.0"))
    .WithTracing(tracing => tracing
        .AddAspNetCoreInstrumentation()
        .AddHttpClientInstrumentation()
        .AddConsoleExporter())
    .WithMetrics(metrics => metrics
        .AddAspNetCoreInstrumentation()
        .AddConsoleExporter());
```"""

OVERVIEW_REFERENCE = """## Exporters

Get exporter-specific setup with `mvp24h_observability_setup({ exporter: "..." })`.

""" + "\n".join(f"- `{key}` - {name}" for key, (name, _, _) in EXPORTERS.items())

EXPORTER_CATALOG = TopicCatalog(
    tool="mvp24h_observability_setup",
    argument="exporter",
    label="exporter",
    topics={key: ["observability/exporters.md"] for key in EXPORTERS},
    titles={key: f"{name} Exporter" for key, (name, _, _) in EXPORTERS.items()},
    quick_refs={
        key: f"""## {name} Setup

```bash
dotnet add package {package}
```

```csharp
builder.Services.AddOpenTelemetry()
    .WithTracing(tracing => tracing
        .AddAspNetCoreInstrumentation()
        {call});
```"""
        for key, (name, package, call) in EXPORTERS.items()
    },
)
