"""MCP server exposing Mvp24Hours .NET framework documentation to AI agents."""

__version__ = "1.0.0"
