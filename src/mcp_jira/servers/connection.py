"""Connection tools: credential check and current user."""

import logging

from fastmcp import Context, FastMCP

from mcp_jira.exceptions import JiraError
from mcp_jira.utils.decorators import handle_tool_errors
from mcp_jira.utils.formatting import format_response, to_json

from .dependencies import get_app_context, get_jira_fetcher

logger = logging.getLogger("mcp-jira.servers.connection")

connection_mcp = FastMCP(
    name="Jira Connection",
    instructions="Verify tenant credentials and identify the authenticated user.",
)


@connection_mcp.tool(tags={"jira", "connection", "read"})
async def test_connection(ctx: Context) -> str:
    """Test the connection to Jira with the supplied credentials.

    Never fails: problems are reported as {"connected": false, "message": ...}.
    """
    try:
        jira = await get_jira_fetcher(ctx)
    except JiraError as e:
        logger.warning(f"Connection test could not build a client: {e}")
        result = {"connected": False, "message": e.message}
    else:
        result = jira.test_connection()
    return to_json(result)


@connection_mcp.tool(tags={"jira", "connection", "read"})
@handle_tool_errors
async def get_myself(ctx: Context) -> str:
    """Get the profile of the authenticated Jira user."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    return format_response(jira.get_myself(), "json", "user", app_ctx.character_limit)
