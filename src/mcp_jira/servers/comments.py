"""Comment and worklog tools."""

import logging
from typing import Annotated

from fastmcp import Context, FastMCP
from pydantic import Field

from mcp_jira.utils.decorators import check_write_access, handle_tool_errors
from mcp_jira.utils.formatting import format_response, success_response

from .dependencies import get_app_context, get_jira_fetcher, resolve_page_size
from .params import IssueKey, MaxResults, ResponseFormat, StartAt

logger = logging.getLogger("mcp-jira.servers.comments")

comments_mcp = FastMCP(
    name="Jira Comments",
    instructions="Read and manage comments and worklogs on Jira issues.",
)

CommentId = Annotated[str, Field(description="Comment ID")]
WorklogId = Annotated[str, Field(description="Worklog ID")]
TimeSpent = Annotated[
    str | None,
    Field(description="Time spent in Jira duration format (e.g., '2h 30m', '1d')"),
]
Started = Annotated[
    str | None,
    Field(
        description=(
            "When the work started, ISO 8601 with milliseconds and offset "
            "(e.g., '2024-01-15T09:00:00.000+0000')"
        )
    ),
]


@comments_mcp.tool(tags={"jira", "comments", "read"})
@handle_tool_errors
async def get_comments(
    ctx: Context,
    issue_key: IssueKey,
    start_at: StartAt = 0,
    max_results: MaxResults = None,
    format: ResponseFormat = "json",
) -> str:
    """Get the comments of a Jira issue.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.
        start_at: Starting index for pagination.
        max_results: Maximum number of comments.
        format: Output format.

    Returns:
        Paginated comments as JSON or Markdown.
    """
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    result = jira.get_comments(
        issue_key,
        start_at=start_at,
        max_results=resolve_page_size(max_results, app_ctx),
    )
    return format_response(result, format, "comments", app_ctx.character_limit)


@comments_mcp.tool(tags={"jira", "comments", "read"})
@handle_tool_errors
async def get_comment(
    ctx: Context, issue_key: IssueKey, comment_id: CommentId
) -> str:
    """Get a single comment of a Jira issue."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    comment = jira.get_comment(issue_key, comment_id)
    return format_response(comment, "json", "comment", app_ctx.character_limit)


@comments_mcp.tool(tags={"jira", "comments", "write"})
@handle_tool_errors
@check_write_access
async def add_comment(
    ctx: Context,
    issue_key: IssueKey,
    body: Annotated[str, Field(description="Comment text (plain text)")],
) -> str:
    """Add a comment to a Jira issue.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.
        body: Comment text.

    Returns:
        JSON string with the created comment.
    """
    jira = await get_jira_fetcher(ctx)
    comment = jira.add_comment(issue_key, body)
    return success_response("Comment created", comment=comment)


@comments_mcp.tool(tags={"jira", "comments", "write"})
@handle_tool_errors
@check_write_access
async def update_comment(
    ctx: Context,
    issue_key: IssueKey,
    comment_id: CommentId,
    body: Annotated[str, Field(description="New comment text (plain text)")],
) -> str:
    """Replace the text of an existing comment."""
    jira = await get_jira_fetcher(ctx)
    comment = jira.update_comment(issue_key, comment_id, body)
    return success_response("Comment updated", comment=comment)


@comments_mcp.tool(tags={"jira", "comments", "write"})
@handle_tool_errors
@check_write_access
async def delete_comment(
    ctx: Context, issue_key: IssueKey, comment_id: CommentId
) -> str:
    """Delete a comment from a Jira issue."""
    jira = await get_jira_fetcher(ctx)
    jira.delete_comment(issue_key, comment_id)
    return success_response("Comment deleted")


@comments_mcp.tool(tags={"jira", "comments", "read"})
@handle_tool_errors
async def get_worklogs(
    ctx: Context,
    issue_key: IssueKey,
    start_at: StartAt = 0,
    max_results: MaxResults = None,
    format: ResponseFormat = "json",
) -> str:
    """Get the worklogs recorded on a Jira issue.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.
        start_at: Starting index for pagination.
        max_results: Maximum number of worklogs.
        format: Output format.

    Returns:
        Paginated worklogs as JSON or Markdown.
    """
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    result = jira.get_worklogs(
        issue_key,
        start_at=start_at,
        max_results=resolve_page_size(max_results, app_ctx),
    )
    return format_response(result, format, "worklogs", app_ctx.character_limit)


@comments_mcp.tool(tags={"jira", "comments", "write"})
@handle_tool_errors
@check_write_access
async def add_worklog(
    ctx: Context,
    issue_key: IssueKey,
    time_spent: Annotated[
        str,
        Field(description="Time spent in Jira duration format (e.g., '2h 30m', '1d')"),
    ],
    started: Started = None,
    comment: Annotated[str | None, Field(description="Worklog comment")] = None,
) -> str:
    """Log work on a Jira issue.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.
        time_spent: Time spent.
        started: Start time of the work.
        comment: Optional comment.

    Returns:
        JSON string with the created worklog.
    """
    jira = await get_jira_fetcher(ctx)
    worklog = jira.add_worklog(
        issue_key, time_spent=time_spent, started=started, comment=comment
    )
    return success_response("Worklog created", worklog=worklog)


@comments_mcp.tool(tags={"jira", "comments", "write"})
@handle_tool_errors
@check_write_access
async def update_worklog(
    ctx: Context,
    issue_key: IssueKey,
    worklog_id: WorklogId,
    time_spent: TimeSpent = None,
    started: Started = None,
    comment: Annotated[str | None, Field(description="New worklog comment")] = None,
) -> str:
    """Update a worklog. Only the provided values are changed."""
    jira = await get_jira_fetcher(ctx)
    worklog = jira.update_worklog(
        issue_key,
        worklog_id,
        time_spent=time_spent,
        started=started,
        comment=comment,
    )
    return success_response("Worklog updated", worklog=worklog)


@comments_mcp.tool(tags={"jira", "comments", "write"})
@handle_tool_errors
@check_write_access
async def delete_worklog(
    ctx: Context, issue_key: IssueKey, worklog_id: WorklogId
) -> str:
    """Delete a worklog from a Jira issue."""
    jira = await get_jira_fetcher(ctx)
    jira.delete_worklog(issue_key, worklog_id)
    return success_response("Worklog deleted")
