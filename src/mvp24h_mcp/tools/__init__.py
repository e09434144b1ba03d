"""MCP tool implementations."""

from mvp24h_mcp.tools.ai_implementation import ai_implementation
from mvp24h_mcp.tools.architecture_advisor import architecture_advisor
from mvp24h_mcp.tools.build_context import build_context
from mvp24h_mcp.tools.containerization_patterns import containerization_patterns
from mvp24h_mcp.tools.core_patterns import core_patterns
from mvp24h_mcp.tools.cqrs_guide import cqrs_guide
from mvp24h_mcp.tools.database_advisor import database_advisor
from mvp24h_mcp.tools.get_started import get_started
from mvp24h_mcp.tools.get_template import get_template
from mvp24h_mcp.tools.infrastructure_guide import infrastructure_guide
from mvp24h_mcp.tools.messaging_patterns import messaging_patterns
from mvp24h_mcp.tools.modernization_guide import modernization_guide
from mvp24h_mcp.tools.observability_setup import observability_setup
from mvp24h_mcp.tools.reference_guide import reference_guide
from mvp24h_mcp.tools.security_patterns import security_patterns
from mvp24h_mcp.tools.testing_patterns import testing_patterns

__all__ = [
    "ai_implementation",
    "architecture_advisor",
    "build_context",
    "containerization_patterns",
    "core_patterns",
    "cqrs_guide",
    "database_advisor",
    "get_started",
    "get_template",
    "infrastructure_guide",
    "messaging_patterns",
    "modernization_guide",
    "observability_setup",
    "reference_guide",
    "security_patterns",
    "testing_patterns",
]
