"""Tool-related utility functions for the Jira MCP server."""

import logging
import os

logger = logging.getLogger("mcp-jira.utils.tools")


def get_enabled_tools() -> list[str] | None:
    """Get the list of enabled tools from the ENABLED_TOOLS environment variable.

    The variable holds a comma-separated list of registered tool names
    (e.g. "jira_search_issues,jira_get_issue"). Whitespace is stripped.

    Returns:
        List of enabled tool names, or None when the variable is unset
        or empty after stripping.
    """
    enabled_tools_str = os.getenv("ENABLED_TOOLS")
    if not enabled_tools_str:
        logger.debug("ENABLED_TOOLS environment variable not set or empty.")
        return None

    tools = [tool.strip() for tool in enabled_tools_str.split(",")]
    tools = [tool for tool in tools if tool]

    logger.debug(f"Parsed enabled tools from environment: {tools}")
    return tools if tools else None


def should_include_tool(
    tool_name: str,
    tool_tags: set[str],
    enabled_tools: list[str] | None,
    read_only: bool,
) -> bool:
    """Decide whether a registered tool is exposed in tool listings.

    Args:
        tool_name: Registered (prefixed) tool name.
        tool_tags: Tags attached to the tool.
        enabled_tools: Allow-list of tool names, or None to include all tools.
        read_only: Whether write tools must be hidden.

    Returns:
        True if the tool should be listed, False otherwise.
    """
    if enabled_tools is not None and tool_name not in enabled_tools:
        logger.debug(f"Excluding tool '{tool_name}' (not enabled)")
        return False
    if read_only and "write" in tool_tags:
        logger.debug(f"Excluding tool '{tool_name}' due to read-only mode")
        return False
    return True
