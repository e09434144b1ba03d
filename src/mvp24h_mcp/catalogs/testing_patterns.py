"""Lookup tables for mvp24h_testing_patterns."""

from mvp24h_mcp.schemas import TopicCatalog

PATTERNS_DOC = "ai-context/testing-patterns.md"

CATALOG = TopicCatalog(
    tool="mvp24h_testing_patterns",
    topics={
        "overview": [PATTERNS_DOC],
        "unit-testing": [f"{PATTERNS_DOC}#Unit Testing"],
        "integration-testing": [f"{PATTERNS_DOC}#Integration Testing"],
        "mocking": [f"{PATTERNS_DOC}#Mocking"],
        "test-containers": [f"{PATTERNS_DOC}#TestContainers"],
        "api-testing": [f"{PATTERNS_DOC}#API Testing"],
        "architecture-testing": [f"{PATTERNS_DOC}#Architecture Testing"],
    },
    related={
        "unit-testing": ["mocking", "core/infrastructure-abstractions.md"],
        "integration-testing": ["test-containers", "api-testing"],
        "mocking": ["unit-testing"],
        "test-containers": ["integration-testing", "ai-context/containerization-patterns.md"],
        "api-testing": ["integration-testing", "webapi.md"],
        "architecture-testing": ["unit-testing"],
    },
    descriptions={
        "unit-testing": "xUnit, test organization, assertions",
        "integration-testing": "WebApplicationFactory, database testing",
        "mocking": "Moq, NSubstitute patterns",
        "test-containers": "Docker-based integration tests",
        "api-testing": "HTTP client testing, response validation",
        "architecture-testing": "ArchUnitNET, dependency validation",
    },
    titles={
        "mocking": "Mocking with Moq",
        "test-containers": "TestContainers",
        "api-testing": "API Testing",
    },
)

OVERVIEW_INTRO = """# Testing Patterns

## Overview

Comprehensive testing strategies for .NET applications.

## Testing Pyramid

```
         /\\
        /  \\     E2E Tests (Few)
       /----\\
      /      \\   Integration Tests (Some)
     /--------\\
    /          \\ Unit Tests (Many)
   /------------\\
```"""

OVERVIEW_REFERENCE = """## Quick Start

```bash
dotnet add package xunit
dotnet add package xunit.runner.visualstudio
dotnet add package Moq
dotnet add package FluentAssertions
dotnet add package Microsoft.AspNetCore.Mvc.Testing
```

Use `mvp24h_testing_patterns({ topic: "..." })` for detailed documentation."""
