"""Lookup tables for mvp24h_database_advisor."""

from mvp24h_mcp.schemas import DatabaseProvider, TopicCatalog

QUICK_REFERENCE = """## Quick Reference - Mvp24Hours Interfaces

### Repository Interfaces (`Mvp24Hours.Core.Contract.Data`)

| Interface | Description |
|-----------|-------------|
| `IRepository<TEntity>` | Synchronous repository for CRUD operations |
| `IRepositoryAsync<TEntity>` | Asynchronous repository for CRUD operations |
| `IUnitOfWork` | Synchronous Unit of Work for transaction management |
| `IUnitOfWorkAsync` | Asynchronous Unit of Work for transaction management |

### Entity Interfaces (`Mvp24Hours.Core.Entities`)

| Class/Interface | Description |
|-----------------|-------------|
| `IEntityBase` | Base interface for all entities |
| `EntityBase<TKey>` | Base entity class with typed ID |
| `IEntityDateLog` | Interface for date-based audit (Created, Modified, Removed) |
| `EntityBaseLog<TKey, TUserKey>` | Base entity with full audit support |

### DbContext (`Mvp24Hours.Infrastructure.Data.EFCore`)

| Class | Description |
|-------|-------------|
| `Mvp24HoursContext` | Base DbContext with logging support |
| `Mvp24HoursContextAsync` | Async-optimized DbContext |

### Extension Methods

```csharp
services.AddMvp24HoursDbContext<TContext>();
services.AddMvp24HoursRepositoryAsync();

// MongoDB
services.AddMvp24HoursRepositoryMongoDb();

// Redis
services.AddMvp24HoursCachingRedis(connectionString);
```"""

SELECTION_MATRIX = """## Database Selection Matrix

| Requirement | SQL Server | PostgreSQL | MySQL | MongoDB | Redis |
|-------------|:----------:|:----------:|:-----:|:-------:|:-----:|
| ACID transactions | ✅ | ✅ | ✅ | ⚠️ | ❌ |
| Complex queries | ✅ | ✅ | ✅ | ⚠️ | ❌ |
| High write throughput | ⚠️ | ✅ | ⚠️ | ✅ | ✅ |
| Horizontal scaling | ⚠️ | ⚠️ | ⚠️ | ✅ | ✅ |
| Flexible schema | ❌ | ⚠️ | ❌ | ✅ | ✅ |
| Relationships | ✅ | ✅ | ✅ | ⚠️ | ❌ |
| Cloud cost | $$$ | $$ | $ | $$ | $$ |"""

_TOPICS = {
    "overview": ["ai-context/database-patterns.md"],
    "relational": ["database/relational.md"],
    "nosql": ["database/nosql.md"],
    "repository": ["database/use-repository.md"],
    "unit-of-work": ["database/use-unitofwork.md"],
    "entity": ["database/use-entity.md"],
    "context": ["database/use-context.md"],
    "service": ["database/use-service.md"],
    "efcore-advanced": ["database/efcore-advanced.md"],
    "mongodb-advanced": ["database/mongodb-advanced.md"],
}

CATALOG = TopicCatalog(
    tool="mvp24h_database_advisor",
    topics=_TOPICS,
    related={
        "overview": ["relational", "nosql", "repository", "unit-of-work"],
        "relational": ["efcore-advanced", "entity", "context", "repository", "unit-of-work"],
        "nosql": ["mongodb-advanced", "entity", "repository"],
        "repository": ["unit-of-work", "entity", "service"],
        "unit-of-work": ["repository", "efcore-advanced"],
        "entity": ["context", "repository", "relational", "nosql"],
        "context": ["entity", "efcore-advanced", "relational"],
        "service": ["repository", "unit-of-work"],
        "efcore-advanced": ["relational", "context", "repository"],
        "mongodb-advanced": ["nosql", "repository"],
    },
    descriptions={
        "overview": "Database patterns overview for AI agents",
        "relational": "SQL Server, PostgreSQL, MySQL configuration with EF Core",
        "nosql": "MongoDB and Redis configuration",
        "repository": "Repository pattern implementation and usage",
        "unit-of-work": "Unit of Work pattern for transaction management",
        "entity": "Entity implementation with audit support",
        "context": "DbContext implementation and configuration",
        "service": "Service layer using repository pattern",
        "efcore-advanced": "Advanced EF Core features: interceptors, bulk operations, multi-tenancy",
        "mongodb-advanced": "Advanced MongoDB features: GridFS, Change Streams, geospatial queries",
    },
    titles={
        "overview": "Database Patterns",
        "nosql": "NoSQL",
        "efcore-advanced": "EF Core Advanced",
        "mongodb-advanced": "MongoDB Advanced",
    },
    quick_refs={key: QUICK_REFERENCE for key in _TOPICS},
)

PROVIDER_FILES: dict[DatabaseProvider, list[str]] = {
    DatabaseProvider.SQLSERVER: ["database/relational.md", "database/efcore-advanced.md"],
    DatabaseProvider.POSTGRESQL: ["database/relational.md", "database/efcore-advanced.md"],
    DatabaseProvider.MYSQL: ["database/relational.md", "database/efcore-advanced.md"],
    DatabaseProvider.MONGODB: ["database/nosql.md", "database/mongodb-advanced.md"],
    DatabaseProvider.REDIS: ["database/nosql.md"],
}

PATTERN_FILES: dict[str, list[str]] = {
    "repository": ["database/use-repository.md"],
    "unit-of-work": ["database/use-unitofwork.md"],
    "specification": ["database/efcore-advanced.md"],
    "dapper": ["database/use-unitofwork.md"],
    "hybrid": ["database/efcore-advanced.md", "database/use-unitofwork.md"],
}

# provider -> (display name, reasoning)
PROVIDER_SUMMARIES: dict[DatabaseProvider, tuple[str, str]] = {
    DatabaseProvider.SQLSERVER: (
        "SQL Server with Entity Framework Core",
        "Enterprise-grade relational database with excellent .NET integration. Best for Windows "
        "environments and Azure deployments. Supports ACID transactions, complex queries, and relationships.",
    ),
    DatabaseProvider.POSTGRESQL: (
        "PostgreSQL with Entity Framework Core",
        "Open-source, highly performant relational database. Excellent for complex queries, JSON support, "
        "and full-text search. Cost-effective in cloud environments and supports advanced features like JSONB columns.",
    ),
    DatabaseProvider.MYSQL: (
        "MySQL with Entity Framework Core",
        "Popular open-source database with wide hosting support. Good for web applications with moderate "
        "requirements and cost-sensitive deployments.",
    ),
    DatabaseProvider.MONGODB: (
        "MongoDB",
        "Document database ideal for flexible schemas and horizontal scaling. Great for content management, "
        "real-time analytics, and applications with evolving data models.",
    ),
    DatabaseProvider.REDIS: (
        "Redis",
        "In-memory data store ideal for caching, sessions, and real-time data. Use as a secondary store "
        "alongside a primary database for high-performance scenarios.",
    ),
}

# Checked in order; the first requirement present decides the provider.
REQUIREMENT_PROVIDERS: list[tuple[str, DatabaseProvider]] = [
    ("caching", DatabaseProvider.REDIS),
    ("flexible-schema", DatabaseProvider.MONGODB),
    ("high-write-throughput", DatabaseProvider.POSTGRESQL),
]

REQUIREMENTS = [
    "transactions",
    "complex-queries",
    "high-write-throughput",
    "horizontal-scaling",
    "flexible-schema",
    "caching",
    "full-text-search",
    "relationships",
]
