"""Agile tools: boards, sprints and epics."""

import logging
from typing import Annotated, Literal

from fastmcp import Context, FastMCP
from pydantic import Field

from mcp_jira.utils.decorators import check_write_access, handle_tool_errors
from mcp_jira.utils.formatting import format_response, split_csv, success_response

from .dependencies import get_app_context, get_jira_fetcher, resolve_page_size
from .params import IssueKeys, MaxResults, ResponseFormat, StartAt

logger = logging.getLogger("mcp-jira.servers.agile")

agile_mcp = FastMCP(
    name="Jira Agile",
    instructions="Work with Jira Software boards, sprints and epics.",
)

BoardId = Annotated[int, Field(description="Board ID")]
SprintId = Annotated[int, Field(description="Sprint ID")]
EpicKey = Annotated[str, Field(description="Epic key or ID (e.g., 'PROJ-10')")]
Jql = Annotated[str | None, Field(description="Additional JQL filter")]
SprintDate = Annotated[
    str | None,
    Field(description="ISO 8601 date-time (e.g., '2024-01-15T09:00:00.000Z')"),
]
SprintGoal = Annotated[str | None, Field(description="Sprint goal")]


def _issue_keys(issue_keys: str) -> list[str]:
    keys = split_csv(issue_keys)
    if not keys:
        raise ValueError("At least one issue key is required.")
    return keys


@agile_mcp.tool(tags={"jira", "agile", "read"})
@handle_tool_errors
async def list_boards(
    ctx: Context,
    start_at: StartAt = 0,
    max_results: MaxResults = None,
    type: Annotated[
        Literal["scrum", "kanban", "simple"] | None,
        Field(description="Board type filter"),
    ] = None,
    name: Annotated[str | None, Field(description="Board name filter")] = None,
    project_key_or_id: Annotated[
        str | None, Field(description="Only boards of this project")
    ] = None,
    format: ResponseFormat = "json",
) -> str:
    """List Jira Software boards.

    Args:
        ctx: The FastMCP context.
        start_at: Starting index for pagination.
        max_results: Maximum number of boards.
        type: Board type filter.
        name: Board name filter.
        project_key_or_id: Project filter.
        format: Output format.

    Returns:
        Paginated boards as JSON or Markdown.
    """
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    result = jira.list_boards(
        start_at=start_at,
        max_results=resolve_page_size(max_results, app_ctx),
        board_type=type,
        name=name,
        project_key_or_id=project_key_or_id,
    )
    return format_response(result, format, "boards", app_ctx.character_limit)


@agile_mcp.tool(tags={"jira", "agile", "read"})
@handle_tool_errors
async def get_board(ctx: Context, board_id: BoardId) -> str:
    """Get a board."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    board = jira.get_board(board_id)
    return format_response(board, "json", "board", app_ctx.character_limit)


@agile_mcp.tool(tags={"jira", "agile", "read"})
@handle_tool_errors
async def get_board_issues(
    ctx: Context,
    board_id: BoardId,
    start_at: StartAt = 0,
    max_results: MaxResults = None,
    jql: Jql = None,
    format: ResponseFormat = "json",
) -> str:
    """Get the issues on a board."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    result = jira.get_board_issues(
        board_id,
        start_at=start_at,
        max_results=resolve_page_size(max_results, app_ctx),
        jql=jql,
    )
    return format_response(result, format, "issues", app_ctx.character_limit)


@agile_mcp.tool(tags={"jira", "agile", "read"})
@handle_tool_errors
async def get_backlog_issues(
    ctx: Context,
    board_id: BoardId,
    start_at: StartAt = 0,
    max_results: MaxResults = None,
    jql: Jql = None,
    format: ResponseFormat = "json",
) -> str:
    """Get the backlog issues of a board."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    result = jira.get_backlog_issues(
        board_id,
        start_at=start_at,
        max_results=resolve_page_size(max_results, app_ctx),
        jql=jql,
    )
    return format_response(result, format, "issues", app_ctx.character_limit)


@agile_mcp.tool(tags={"jira", "agile", "read"})
@handle_tool_errors
async def list_sprints(
    ctx: Context,
    board_id: BoardId,
    start_at: StartAt = 0,
    max_results: MaxResults = None,
    state: Annotated[
        Literal["future", "active", "closed"] | None,
        Field(description="Sprint state filter"),
    ] = None,
    format: ResponseFormat = "json",
) -> str:
    """List the sprints of a board.

    Args:
        ctx: The FastMCP context.
        board_id: Board ID.
        start_at: Starting index for pagination.
        max_results: Maximum number of sprints.
        state: Sprint state filter.
        format: Output format.

    Returns:
        Paginated sprints as JSON or Markdown.
    """
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    result = jira.list_sprints(
        board_id,
        start_at=start_at,
        max_results=resolve_page_size(max_results, app_ctx),
        state=state,
    )
    return format_response(result, format, "sprints", app_ctx.character_limit)


@agile_mcp.tool(tags={"jira", "agile", "read"})
@handle_tool_errors
async def get_sprint(ctx: Context, sprint_id: SprintId) -> str:
    """Get a sprint."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    sprint = jira.get_sprint(sprint_id)
    return format_response(sprint, "json", "sprint", app_ctx.character_limit)


@agile_mcp.tool(tags={"jira", "agile", "read"})
@handle_tool_errors
async def get_sprint_issues(
    ctx: Context,
    sprint_id: SprintId,
    start_at: StartAt = 0,
    max_results: MaxResults = None,
    jql: Jql = None,
    format: ResponseFormat = "json",
) -> str:
    """Get the issues in a sprint."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    result = jira.get_sprint_issues(
        sprint_id,
        start_at=start_at,
        max_results=resolve_page_size(max_results, app_ctx),
        jql=jql,
    )
    return format_response(result, format, "issues", app_ctx.character_limit)


@agile_mcp.tool(tags={"jira", "agile", "write"})
@handle_tool_errors
@check_write_access
async def create_sprint(
    ctx: Context,
    name: Annotated[str, Field(description="Sprint name")],
    origin_board_id: Annotated[int, Field(description="Board the sprint belongs to")],
    start_date: SprintDate = None,
    end_date: SprintDate = None,
    goal: SprintGoal = None,
) -> str:
    """Create a sprint on a board.

    Args:
        ctx: The FastMCP context.
        name: Sprint name.
        origin_board_id: Board ID.
        start_date: Start date.
        end_date: End date.
        goal: Sprint goal.

    Returns:
        JSON string with the created sprint.
    """
    jira = await get_jira_fetcher(ctx)
    sprint = jira.create_sprint(
        name=name,
        origin_board_id=origin_board_id,
        start_date=start_date,
        end_date=end_date,
        goal=goal,
    )
    return success_response("Sprint created", sprint=sprint)


@agile_mcp.tool(tags={"jira", "agile", "write"})
@handle_tool_errors
@check_write_access
async def update_sprint(
    ctx: Context,
    sprint_id: SprintId,
    name: Annotated[str | None, Field(description="New sprint name")] = None,
    state: Annotated[
        Literal["future", "active", "closed"] | None,
        Field(description="New sprint state"),
    ] = None,
    start_date: SprintDate = None,
    end_date: SprintDate = None,
    goal: SprintGoal = None,
) -> str:
    """Update a sprint. Only the provided values are changed."""
    jira = await get_jira_fetcher(ctx)
    sprint = jira.update_sprint(
        sprint_id,
        name=name,
        state=state,
        start_date=start_date,
        end_date=end_date,
        goal=goal,
    )
    return success_response("Sprint updated", sprint=sprint)


@agile_mcp.tool(tags={"jira", "agile", "write"})
@handle_tool_errors
@check_write_access
async def delete_sprint(ctx: Context, sprint_id: SprintId) -> str:
    """Delete a sprint."""
    jira = await get_jira_fetcher(ctx)
    jira.delete_sprint(sprint_id)
    return success_response("Sprint deleted")


@agile_mcp.tool(tags={"jira", "agile", "write"})
@handle_tool_errors
@check_write_access
async def start_sprint(
    ctx: Context,
    sprint_id: SprintId,
    start_date: Annotated[str, Field(description="ISO 8601 start date-time")],
    end_date: Annotated[str, Field(description="ISO 8601 end date-time")],
    goal: SprintGoal = None,
) -> str:
    """Start a future sprint."""
    jira = await get_jira_fetcher(ctx)
    jira.start_sprint(sprint_id, start_date=start_date, end_date=end_date, goal=goal)
    return success_response("Sprint started")


@agile_mcp.tool(tags={"jira", "agile", "write"})
@handle_tool_errors
@check_write_access
async def complete_sprint(
    ctx: Context,
    sprint_id: SprintId,
    move_to_sprint_id: Annotated[
        int | None,
        Field(description="Sprint that receives the unfinished issues"),
    ] = None,
) -> str:
    """Complete an active sprint."""
    jira = await get_jira_fetcher(ctx)
    jira.complete_sprint(sprint_id, move_to_sprint_id=move_to_sprint_id)
    return success_response("Sprint completed")


@agile_mcp.tool(tags={"jira", "agile", "write"})
@handle_tool_errors
@check_write_access
async def move_issues_to_sprint(
    ctx: Context, sprint_id: SprintId, issue_keys: IssueKeys
) -> str:
    """Move issues into a sprint."""
    keys = _issue_keys(issue_keys)
    jira = await get_jira_fetcher(ctx)
    jira.move_issues_to_sprint(sprint_id, keys)
    return success_response(f"Moved {len(keys)} issues to sprint")


@agile_mcp.tool(tags={"jira", "agile", "write"})
@handle_tool_errors
@check_write_access
async def move_issues_to_backlog(ctx: Context, issue_keys: IssueKeys) -> str:
    """Move issues back to the backlog."""
    keys = _issue_keys(issue_keys)
    jira = await get_jira_fetcher(ctx)
    jira.move_issues_to_backlog(keys)
    return success_response(f"Moved {len(keys)} issues to backlog")


@agile_mcp.tool(tags={"jira", "agile", "read"})
@handle_tool_errors
async def list_epics(
    ctx: Context,
    board_id: BoardId,
    start_at: StartAt = 0,
    max_results: MaxResults = None,
    format: ResponseFormat = "json",
) -> str:
    """List the epics of a board."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    result = jira.list_epics(
        board_id,
        start_at=start_at,
        max_results=resolve_page_size(max_results, app_ctx),
    )
    return format_response(result, format, "epics", app_ctx.character_limit)


@agile_mcp.tool(tags={"jira", "agile", "read"})
@handle_tool_errors
async def get_epic(ctx: Context, epic_key: EpicKey) -> str:
    """Get an epic."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    epic = jira.get_epic(epic_key)
    return format_response(epic, "json", "epic", app_ctx.character_limit)


@agile_mcp.tool(tags={"jira", "agile", "read"})
@handle_tool_errors
async def get_epic_issues(
    ctx: Context,
    epic_key: EpicKey,
    start_at: StartAt = 0,
    max_results: MaxResults = None,
    jql: Jql = None,
    format: ResponseFormat = "json",
) -> str:
    """Get the issues that belong to an epic.

    Args:
        ctx: The FastMCP context.
        epic_key: Epic key.
        start_at: Starting index for pagination.
        max_results: Maximum number of issues.
        jql: Additional JQL filter.
        format: Output format.

    Returns:
        Paginated issues as JSON or Markdown.
    """
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    result = jira.get_epic_issues(
        epic_key,
        start_at=start_at,
        max_results=resolve_page_size(max_results, app_ctx),
        jql=jql,
    )
    return format_response(result, format, "issues", app_ctx.character_limit)


@agile_mcp.tool(tags={"jira", "agile", "write"})
@handle_tool_errors
@check_write_access
async def move_issues_to_epic(
    ctx: Context, epic_key: EpicKey, issue_keys: IssueKeys
) -> str:
    """Move issues into an epic."""
    keys = _issue_keys(issue_keys)
    jira = await get_jira_fetcher(ctx)
    jira.move_issues_to_epic(epic_key, keys)
    return success_response(f"Moved {len(keys)} issues to epic")


@agile_mcp.tool(tags={"jira", "agile", "write"})
@handle_tool_errors
@check_write_access
async def remove_issues_from_epic(ctx: Context, issue_keys: IssueKeys) -> str:
    """Detach issues from whatever epic they belong to."""
    keys = _issue_keys(issue_keys)
    jira = await get_jira_fetcher(ctx)
    jira.remove_issues_from_epic(keys)
    return success_response(f"Removed {len(keys)} issues from epic")
