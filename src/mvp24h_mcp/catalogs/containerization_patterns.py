"""Lookup tables for mvp24h_containerization_patterns."""

from mvp24h_mcp.schemas import TopicCatalog

PATTERNS_DOC = "ai-context/containerization-patterns.md"

CATALOG = TopicCatalog(
    tool="mvp24h_containerization_patterns",
    topics={
        "overview": [PATTERNS_DOC],
        "dockerfile": [f"{PATTERNS_DOC}#Dockerfile"],
        "docker-compose": [f"{PATTERNS_DOC}#Docker Compose"],
        "kubernetes": [f"{PATTERNS_DOC}#Kubernetes"],
        "health-checks": [f"{PATTERNS_DOC}#Health Checks"],
        "configuration": [f"{PATTERNS_DOC}#Configuration"],
    },
    related={
        "dockerfile": ["docker-compose", "kubernetes"],
        "docker-compose": ["dockerfile", "configuration"],
        "kubernetes": ["health-checks", "configuration"],
        "health-checks": ["kubernetes", "cronjob-observability.md"],
        "configuration": ["kubernetes", "modernization/options-configuration.md"],
    },
    descriptions={
        "dockerfile": "Multi-stage builds, optimization",
        "docker-compose": "Local development, service orchestration",
        "kubernetes": "Deployments, services, config",
        "health-checks": "Liveness, readiness probes",
        "configuration": "ConfigMaps, secrets, environment",
    },
    titles={
        "dockerfile": "Dockerfile Best Practices",
        "configuration": "Configuration in Containers",
    },
)

OVERVIEW_INTRO = """# Containerization Patterns

## Overview

Docker and Kubernetes patterns for .NET applications."""

OVERVIEW_REFERENCE = """## Quick Start

```bash
# Build image
docker build -t myapp:latest .

# Run locally
docker run -p 8080:8080 myapp:latest

# Docker Compose
docker-compose up -d
```

Use `mvp24h_containerization_patterns({ topic: "..." })` for detailed documentation."""
