"""Argument models for the MCP tools.

Selector fields stay plain strings so that unknown keys reach the tool and
produce a catalog response instead of a validation error. Closed enums are
used where a tool derives a value rather than looking one up.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class DatabaseProvider(str, Enum):
    """Database providers covered by the database advisor."""
    SQLSERVER = "sqlserver"
    POSTGRESQL = "postgresql"
    MYSQL = "mysql"
    MONGODB = "mongodb"
    REDIS = "redis"

    @property
    def is_nosql(self) -> bool:
        return self in (DatabaseProvider.MONGODB, DatabaseProvider.REDIS)


class DataType(str, Enum):
    """Shape of the data an application stores."""
    RELATIONAL = "relational"
    DOCUMENT = "document"
    KEY_VALUE = "key-value"
    MIXED = "mixed"


class AiApproach(str, Enum):
    """AI implementation approaches."""
    SEMANTIC_KERNEL = "semantic-kernel"
    SK_GRAPH = "sk-graph"
    AGENT_FRAMEWORK = "agent-framework"


class ToolArgs(BaseModel):
    """Base for tool arguments; unknown fields are ignored."""
    model_config = ConfigDict(extra="ignore")


class GetStartedArgs(ToolArgs):
    focus: str | None = None


class ArchitectureAdvisorArgs(ToolArgs):
    complexity: str | None = None
    entity_count: str | None = None
    business_rules: str | None = None
    team_size: str | None = None
    requirements: list[str] = Field(default_factory=list)


class DatabaseAdvisorArgs(ToolArgs):
    data_type: str | None = None
    provider: str | None = None
    requirements: list[str] = Field(default_factory=list)
    patterns: list[str] = Field(default_factory=list)
    topic: str | None = None


class TopicArgs(ToolArgs):
    topic: str | None = None


class AiImplementationArgs(ToolArgs):
    use_case: str | None = None
    approach: str | None = None
    template: str | None = None


class ModernizationGuideArgs(ToolArgs):
    category: str | None = None
    feature: str | None = None


class ObservabilitySetupArgs(ToolArgs):
    component: str | None = None
    exporter: str | None = None


class MessagingPatternsArgs(ToolArgs):
    pattern: str | None = None


class GetTemplateArgs(ToolArgs):
    template_name: str


class BuildContextArgs(ToolArgs):
    architecture: str
    resources: list[str] = Field(default_factory=list)
    database_provider: str | None = None
