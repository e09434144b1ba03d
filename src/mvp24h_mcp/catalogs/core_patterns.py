"""Lookup tables for mvp24h_core_patterns."""

from mvp24h_mcp.schemas import TopicCatalog

INFRASTRUCTURE_REF = """## Quick Reference

| Interface | Description |
|-----------|-------------|
| `IClock` | Abstracts system time (UtcNow, Now, Today) |
| `IGuidGenerator` | Abstracts GUID generation |
| `ICurrentUserProvider` | Current user context |
| `ITenantProvider` | Multi-tenant context |

```csharp
// Production
services.AddSingleton<IClock, SystemClock>();
services.AddSingleton<IGuidGenerator, DefaultGuidGenerator>();

// Testing
services.AddSingleton<IClock>(new TestClock(DateTime.UtcNow));
```"""

CATALOG = TopicCatalog(
    tool="mvp24h_core_patterns",
    topics={
        "overview": ["core/home.md"],
        "guard-clauses": ["core/guard-clauses.md"],
        "value-objects": ["core/value-objects.md"],
        "strongly-typed-ids": ["core/strongly-typed-ids.md"],
        "functional-patterns": ["core/functional-patterns.md"],
        "smart-enums": ["core/smart-enums.md"],
        "entity-interfaces": ["core/entity-interfaces.md"],
        "infrastructure": ["core/infrastructure-abstractions.md"],
        "infrastructure-abstractions": ["core/infrastructure-abstractions.md"],
        "exceptions": ["core/exceptions.md"],
    },
    related={
        "guard-clauses": ["value-objects", "exceptions"],
        "value-objects": ["guard-clauses", "entity-interfaces", "database/use-entity.md"],
        "strongly-typed-ids": ["entity-interfaces", "value-objects", "database/use-entity.md"],
        "functional-patterns": ["exceptions", "cqrs/commands.md", "cqrs/queries.md"],
        "smart-enums": ["value-objects", "entity-interfaces"],
        "entity-interfaces": [
            "strongly-typed-ids",
            "value-objects",
            "database/use-entity.md",
            "database/use-repository.md",
        ],
        "infrastructure": [
            "infrastructure-abstractions",
            "modernization/time-provider.md",
            "ai-context/testing-patterns.md",
        ],
        "infrastructure-abstractions": [
            "modernization/time-provider.md",
            "ai-context/testing-patterns.md",
            "entity-interfaces",
        ],
        "exceptions": [
            "guard-clauses",
            "functional-patterns",
            "ai-context/error-handling-patterns.md",
            "modernization/problem-details.md",
        ],
    },
    descriptions={
        "guard-clauses": "Defensive programming utilities for argument validation",
        "value-objects": "Immutable domain primitives (Email, CPF, CNPJ, Money, etc.)",
        "strongly-typed-ids": "Type-safe entity identifiers to prevent ID mix-ups",
        "functional-patterns": "Maybe<T>, Either<TLeft, TRight> monads for null safety",
        "smart-enums": "Enumeration<T> base class for rich enumerations with behavior",
        "entity-interfaces": "IEntity, IAuditableEntity, ISoftDeletable, ITenantEntity contracts",
        "infrastructure": "IClock, IGuidGenerator abstractions for testability (alias for infrastructure-abstractions)",
        "infrastructure-abstractions": "IClock, IGuidGenerator, ICurrentUserProvider abstractions",
        "exceptions": "BusinessException, ValidationException, NotFoundException hierarchy",
    },
    quick_refs={
        "guard-clauses": """## Quick Reference

| Guard | Description |
|-------|-------------|
| `Null` | Value is null |
| `NullOrEmpty` | String/collection is null or empty |
| `NullOrWhiteSpace` | String is null, empty, or whitespace |
| `NegativeOrZero` | Number is negative or zero |
| `OutOfRange` | Number outside min/max range |
| `InvalidEmail` | String is not valid email format |

```csharp
Guard.Against.NullOrEmpty(name, nameof(name));
Guard.Against.OutOfRange(age, nameof(age), 18, 120);
```""",
        "entity-interfaces": """## Quick Reference

| Interface | Description |
|-----------|-------------|
| `IEntityBase<TKey>` | Base entity with typed ID |
| `IEntityLog` | Full audit (Created, Modified, Removed with user) |
| `IEntityLogDate` | Date audit only (without user) |
| `EntityBase<TKey>` | Base class implementation |
| `EntityBaseLog<TKey>` | Base class with audit |""",
        "infrastructure": INFRASTRUCTURE_REF,
        "infrastructure-abstractions": INFRASTRUCTURE_REF,
        "exceptions": """## Quick Reference

| Exception | HTTP Status | Description |
|-----------|-------------|-------------|
| `ValidationException` | 400 | Input validation failures |
| `NotFoundException` | 404 | Entity not found |
| `BusinessRuleException` | 422 | Business rule violation |
| `Mvp24HoursException` | 500 | Base exception |""",
        "functional-patterns": """## Quick Reference

| Pattern | Description |
|---------|-------------|
| `Maybe<T>` | Null-safe wrapper (Some/None) |
| `Either<TLeft, TRight>` | Error-or-success (Left/Right) |
| `IBusinessResult<T>` | Operation result with messages |""",
        "value-objects": """## Quick Reference

| Value Object | Description |
|--------------|-------------|
| `Email` | Email with domain validation |
| `Cpf` | Brazilian CPF with validation |
| `Cnpj` | Brazilian CNPJ with validation |
| `Money` | Decimal with currency |
| `DateRange` | Start/end date range |
| `PhoneNumber` | Phone with validation |""",
        "strongly-typed-ids": """## Quick Reference

```csharp
public readonly record struct CustomerId(Guid Value)
{
    public static CustomerId New() => new(Guid.NewGuid());
}

public class Customer : EntityBase<CustomerId> { }
```""",
    },
)

# Aliases are accepted but not advertised in the overview table.
HIDDEN_TOPICS = ("infrastructure",)

OVERVIEW_INTRO = """# Mvp24Hours Core Module

## Overview

The Core module provides foundational patterns and abstractions for building robust .NET applications.
It contains essential Value Objects, DDD patterns, Guard Clauses, and utilities used by all other modules."""

OVERVIEW_REFERENCE = """## Quick Reference

### Business Result

```csharp
public IBusinessResult<CustomerDto> GetCustomer(Guid id)
{
    var customer = _repository.GetById(id);
    if (customer is null)
        return BusinessResult<CustomerDto>.Failure("Customer not found");
    return BusinessResult<CustomerDto>.Success(_mapper.Map<CustomerDto>(customer));
}
```

## NuGet Package

```bash
dotnet add package Mvp24Hours.Core
```

Use `mvp24h_core_patterns({ topic: "..." })` for detailed documentation on each topic."""
