"""Pydantic schemas for the Mvp24Hours MCP server."""

from mvp24h_mcp.schemas.catalog import ArchitectureTemplate, TopicCatalog
from mvp24h_mcp.schemas.tools import (
    AiApproach,
    AiImplementationArgs,
    ArchitectureAdvisorArgs,
    BuildContextArgs,
    DatabaseAdvisorArgs,
    DatabaseProvider,
    DataType,
    GetStartedArgs,
    GetTemplateArgs,
    MessagingPatternsArgs,
    ModernizationGuideArgs,
    ObservabilitySetupArgs,
    ToolArgs,
    TopicArgs,
)

__all__ = [
    "AiApproach",
    "AiImplementationArgs",
    "ArchitectureTemplate",
    "ArchitectureAdvisorArgs",
    "BuildContextArgs",
    "DatabaseAdvisorArgs",
    "DatabaseProvider",
    "DataType",
    "GetStartedArgs",
    "GetTemplateArgs",
    "MessagingPatternsArgs",
    "ModernizationGuideArgs",
    "ObservabilitySetupArgs",
    "ToolArgs",
    "TopicArgs",
    "TopicCatalog",
]
