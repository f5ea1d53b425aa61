"""Server implementations for MCP Jira."""

from .main import main_mcp

__all__ = ["main_mcp"]
