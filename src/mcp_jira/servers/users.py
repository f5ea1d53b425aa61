"""User, group, watcher and vote tools."""

import logging
from typing import Annotated

from fastmcp import Context, FastMCP
from pydantic import Field

from mcp_jira.utils.decorators import check_write_access, handle_tool_errors
from mcp_jira.utils.formatting import format_response, success_response

from .dependencies import get_app_context, get_jira_fetcher, resolve_page_size
from .params import IssueKey, MaxResults, ResponseFormat, StartAt

logger = logging.getLogger("mcp-jira.servers.users")

users_mcp = FastMCP(
    name="Jira Users",
    instructions="Look up Jira users and groups, and manage watchers and votes.",
)

AccountId = Annotated[str, Field(description="Atlassian account ID")]


@users_mcp.tool(tags={"jira", "users", "read"})
@handle_tool_errors
async def get_user(ctx: Context, account_id: AccountId) -> str:
    """Get a Jira user by account ID."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    user = jira.get_user(account_id)
    return format_response(user, "json", "user", app_ctx.character_limit)


@users_mcp.tool(tags={"jira", "users", "read"})
@handle_tool_errors
async def search_users(
    ctx: Context,
    query: Annotated[str, Field(description="Name or email fragment to search for")],
    start_at: StartAt = 0,
    max_results: MaxResults = None,
    format: ResponseFormat = "json",
) -> str:
    """Search Jira users by name or email.

    Args:
        ctx: The FastMCP context.
        query: Search text.
        start_at: Starting index for pagination.
        max_results: Maximum number of users.
        format: Output format.

    Returns:
        Paginated users as JSON or Markdown.
    """
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    result = jira.search_users(
        query,
        start_at=start_at,
        max_results=resolve_page_size(max_results, app_ctx),
    )
    return format_response(result, format, "users", app_ctx.character_limit)


@users_mcp.tool(tags={"jira", "users", "read"})
@handle_tool_errors
async def find_assignable_users(
    ctx: Context,
    project_key: Annotated[
        str | None, Field(description="Project whose issues the user can be assigned")
    ] = None,
    issue_key: Annotated[
        str | None, Field(description="Issue the user can be assigned to")
    ] = None,
    query: Annotated[
        str | None, Field(description="Name or email fragment")
    ] = None,
    start_at: StartAt = 0,
    max_results: MaxResults = None,
    format: ResponseFormat = "json",
) -> str:
    """Find users that can be assigned to issues of a project or to a specific issue."""
    if not project_key and not issue_key:
        raise ValueError("Either project_key or issue_key is required.")
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    result = jira.find_assignable_users(
        project_key=project_key,
        issue_key=issue_key,
        query=query,
        start_at=start_at,
        max_results=resolve_page_size(max_results, app_ctx),
    )
    return format_response(result, format, "users", app_ctx.character_limit)


@users_mcp.tool(tags={"jira", "users", "read"})
@handle_tool_errors
async def list_groups(
    ctx: Context,
    query: Annotated[str | None, Field(description="Group name filter")] = None,
    start_at: StartAt = 0,
    max_results: MaxResults = None,
    format: ResponseFormat = "json",
) -> str:
    """List Jira groups matching a query."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    result = jira.list_groups(
        query=query,
        start_at=start_at,
        max_results=resolve_page_size(max_results, app_ctx),
    )
    return format_response(result, format, "groups", app_ctx.character_limit)


@users_mcp.tool(tags={"jira", "users", "read"})
@handle_tool_errors
async def get_group_members(
    ctx: Context,
    group_name: Annotated[str, Field(description="Group name")],
    start_at: StartAt = 0,
    max_results: MaxResults = None,
    format: ResponseFormat = "json",
) -> str:
    """Get the members of a Jira group."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    result = jira.get_group_members(
        group_name,
        start_at=start_at,
        max_results=resolve_page_size(max_results, app_ctx),
    )
    return format_response(result, format, "users", app_ctx.character_limit)


@users_mcp.tool(tags={"jira", "users", "read"})
@handle_tool_errors
async def get_watchers(ctx: Context, issue_key: IssueKey) -> str:
    """Get the watchers of a Jira issue."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    watchers = jira.get_watchers(issue_key)
    return format_response(watchers, "json", "watchers", app_ctx.character_limit)


@users_mcp.tool(tags={"jira", "users", "write"})
@handle_tool_errors
@check_write_access
async def add_watcher(ctx: Context, issue_key: IssueKey, account_id: AccountId) -> str:
    """Add a user as a watcher of a Jira issue."""
    jira = await get_jira_fetcher(ctx)
    jira.add_watcher(issue_key, account_id)
    return success_response("Watcher created")


@users_mcp.tool(tags={"jira", "users", "write"})
@handle_tool_errors
@check_write_access
async def remove_watcher(
    ctx: Context, issue_key: IssueKey, account_id: AccountId
) -> str:
    """Remove a watcher from a Jira issue."""
    jira = await get_jira_fetcher(ctx)
    jira.remove_watcher(issue_key, account_id)
    return success_response("Watcher deleted")


@users_mcp.tool(tags={"jira", "users", "read"})
@handle_tool_errors
async def get_votes(ctx: Context, issue_key: IssueKey) -> str:
    """Get the votes on a Jira issue."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    votes = jira.get_votes(issue_key)
    return format_response(votes, "json", "votes", app_ctx.character_limit)


@users_mcp.tool(tags={"jira", "users", "write"})
@handle_tool_errors
@check_write_access
async def add_vote(ctx: Context, issue_key: IssueKey) -> str:
    """Vote for a Jira issue as the authenticated user."""
    jira = await get_jira_fetcher(ctx)
    jira.add_vote(issue_key)
    return success_response("Vote created")


@users_mcp.tool(tags={"jira", "users", "write"})
@handle_tool_errors
@check_write_access
async def remove_vote(ctx: Context, issue_key: IssueKey) -> str:
    """Withdraw the authenticated user's vote from a Jira issue."""
    jira = await get_jira_fetcher(ctx)
    jira.remove_vote(issue_key)
    return success_response("Vote deleted")
