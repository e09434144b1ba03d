"""Inline sections for mvp24h_get_started."""

from mvp24h_mcp.schemas import TopicCatalog

HEADER = """# Mvp24Hours .NET Framework

> **AI Agent Note**: This is a modular framework for building .NET applications with best practices.
> Use the specialized tools (mvp24h_*) to get detailed guidance for specific topics.

## Quick Tool Reference

| Need | Tool to Use |
|------|-------------|
| Choose architecture template | `mvp24h_architecture_advisor` |
| Select database/ORM | `mvp24h_database_advisor` |
| Implement CQRS/Mediator | `mvp24h_cqrs_guide` |
| Add AI capabilities | `mvp24h_ai_implementation` |
| Use .NET 9 features | `mvp24h_modernization_guide` |
| Setup observability | `mvp24h_observability_setup` |
| Async messaging | `mvp24h_messaging_patterns` |
| Core patterns (Guards, Value Objects) | `mvp24h_core_patterns` |
| Pipeline, Caching, WebAPI, CronJob | `mvp24h_infrastructure_guide` |
| Mapping, Validation, Specification | `mvp24h_reference_guide` |
| Testing, Security, Containers | `mvp24h_testing_patterns`, `mvp24h_security_patterns`, `mvp24h_containerization_patterns` |
| Get specific template | `mvp24h_get_template` |
| Full implementation context | `mvp24h_build_context` |"""

OVERVIEW = """## Framework Overview

Mvp24Hours is a comprehensive .NET framework that provides:

### Core Features
- **Entity Base Classes**: `EntityBase<TKey>`, `IEntityLog` for audit
- **Repository Pattern**: `IRepository<T>`, `IRepositoryAsync<T>`
- **Unit of Work**: Transaction management with `IUnitOfWork`
- **Business Results**: Standardized responses with `IBusinessResult<T>`
- **Pipeline Pattern**: Pipe and Filters with `IPipelineAsync`
- **Validation**: FluentValidation integration

### Architecture Templates
| Template | Complexity | Best For |
|----------|------------|----------|
| Minimal API | Low | Microservices, simple CRUDs |
| Simple N-Layers | Medium | Medium apps, clear separation |
| Complex N-Layers | High | Enterprise, complex logic |
| CQRS | High | Read/write separation |
| Event-Driven | High | Audit, event sourcing |
| Hexagonal | High | External integrations |
| Clean Architecture | High | Domain-centric apps |
| DDD | Very High | Complex business rules |
| Microservices | Very High | Independent deployments |

### Database Support
- **Relational**: SQL Server, PostgreSQL, MySQL (via EF Core)
- **NoSQL**: MongoDB
- **Cache**: Redis
- **Hybrid**: EF Core + Dapper for optimized queries

### AI Capabilities
- **Semantic Kernel**: Chat, RAG, Plugins
- **Semantic Kernel Graph**: Workflows, Multi-agent, Checkpointing
- **Agent Framework**: Enterprise agents, Middleware"""

QUICK_START = """## Quick Start

### 1. Create a new project

```bash
dotnet new webapi -n MyProject
cd MyProject
```

### 2. Add Mvp24Hours packages

```bash
dotnet add package Mvp24Hours.Core
dotnet add package Mvp24Hours.Infrastructure.Data.EFCore  # SQL Server/PostgreSQL/MySQL
dotnet add package Mvp24Hours.WebAPI
dotnet add package FluentValidation.AspNetCore
```

### 3. Configure in Program.cs

```csharp
var builder = WebApplication.CreateBuilder(args);

builder.Services.AddDbContext<MyDbContext>(options =>
    options.UseSqlServer(builder.Configuration.GetConnectionString("DefaultConnection")));

builder.Services.AddMvp24HoursDbContext<MyDbContext>();
builder.Services.AddMvp24HoursRepository(options => options.MaxQtyByQueryPage = 100);
builder.Services.AddValidatorsFromAssemblyContaining<Program>();

var app = builder.Build();
app.Run();
```

### 4. Create your entity

```csharp
public class Customer : EntityBase<Guid>
{
    public string Name { get; set; } = string.Empty;
    public string Email { get; set; } = string.Empty;
}
```

### 5. Use the repository

```csharp
[HttpGet]
public async Task<IActionResult> GetAll()
{
    var repo = _uow.GetRepository<Customer>();
    return Ok(await repo.ToBusinessPagingAsync());
}
```"""

PACKAGES = """## NuGet Packages Reference

### Core Packages
```xml
<PackageReference Include="Mvp24Hours.Core" Version="9.*" />
<PackageReference Include="Mvp24Hours.Application" Version="9.*" />
```

### Database Packages
```xml
<PackageReference Include="Mvp24Hours.Infrastructure.Data.EFCore" Version="9.*" />
<PackageReference Include="Mvp24Hours.Infrastructure.Data.MongoDb" Version="9.*" />
<PackageReference Include="Mvp24Hours.Infrastructure.Caching.Redis" Version="9.*" />
```

### Web API, Messaging and Pipeline
```xml
<PackageReference Include="Mvp24Hours.WebAPI" Version="9.*" />
<PackageReference Include="Mvp24Hours.Infrastructure.RabbitMQ" Version="9.*" />
<PackageReference Include="Mvp24Hours.Infrastructure.Pipe" Version="9.*" />
```

### Validation & Mapping
```xml
<PackageReference Include="FluentValidation" Version="11.*" />
<PackageReference Include="AutoMapper" Version="12.*" />
```"""

NEXT_STEPS = """## Next Steps

Based on your needs, use these tools:

1. **Choosing Architecture**: Call `mvp24h_architecture_advisor` with your requirements
2. **Database Setup**: Call `mvp24h_database_advisor` to configure data layer
3. **Get Template Code**: Call `mvp24h_get_template` with the template name

### Example Flow

```
1. mvp24h_architecture_advisor({ complexity: "high", business_rules: "complex" })
   → Recommends: Complex N-Layers or CQRS

2. mvp24h_database_advisor({ data_type: "relational", requirements: ["transactions"] })
   → Recommends: PostgreSQL + EF Core + Unit of Work

3. mvp24h_get_template({ template_name: "complex-nlayers" })
   → Returns: Complete project structure and code
```"""

DEFAULT_FOCUS = "overview"

# focus -> inline sections, in output order
FOCUS_SECTIONS: dict[str, list[str]] = {
    "overview": [OVERVIEW],
    "quick-start": [QUICK_START],
    "packages": [PACKAGES],
    "all": [OVERVIEW, QUICK_START, PACKAGES],
}

# Used only for the enum and the "not found" message; sections are inline.
CATALOG = TopicCatalog(
    tool="mvp24h_get_started",
    argument="focus",
    label="focus",
    label_plural="focus areas",
    topics={focus: [] for focus in FOCUS_SECTIONS},
)
