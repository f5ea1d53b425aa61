"""Saved filter and dashboard tools."""

import logging
from typing import Annotated, Any, Literal

from fastmcp import Context, FastMCP
from pydantic import Field

from mcp_jira.models import PaginatedResponse
from mcp_jira.utils.decorators import check_write_access, handle_tool_errors
from mcp_jira.utils.formatting import format_response, split_csv, success_response

from .dependencies import get_app_context, get_jira_fetcher, resolve_page_size
from .params import MaxResults, ResponseFormat, StartAt

logger = logging.getLogger("mcp-jira.servers.filters")

filters_mcp = FastMCP(
    name="Jira Filters",
    instructions="Manage saved JQL filters and browse dashboards.",
)

FilterId = Annotated[str, Field(description="Filter ID")]
Favourite = Annotated[
    bool | None, Field(description="Whether the filter is a favourite")
]


def _as_page(filters: list[dict[str, Any]]) -> dict[str, Any]:
    # Filter lists are unpaged; wrap them so Markdown renders the filters table
    return PaginatedResponse(
        items=filters, count=len(filters), max_results=len(filters)
    ).to_simplified_dict()


@filters_mcp.tool(tags={"jira", "filters", "read"})
@handle_tool_errors
async def get_my_filters(
    ctx: Context,
    expand: Annotated[
        str | None,
        Field(description="Entities to expand (e.g., 'sharePermissions')"),
    ] = None,
    format: ResponseFormat = "json",
) -> str:
    """Get the filters owned by the authenticated user."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    filters = jira.get_my_filters(expand=split_csv(expand))
    if format == "markdown":
        return format_response(
            _as_page(filters), format, "filters", app_ctx.character_limit
        )
    return format_response(filters, format, "filters", app_ctx.character_limit)


@filters_mcp.tool(tags={"jira", "filters", "read"})
@handle_tool_errors
async def get_favourite_filters(
    ctx: Context, format: ResponseFormat = "json"
) -> str:
    """Get the authenticated user's favourite filters."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    filters = jira.get_favourite_filters()
    if format == "markdown":
        return format_response(
            _as_page(filters), format, "filters", app_ctx.character_limit
        )
    return format_response(filters, format, "filters", app_ctx.character_limit)


@filters_mcp.tool(tags={"jira", "filters", "read"})
@handle_tool_errors
async def get_filter(ctx: Context, filter_id: FilterId) -> str:
    """Get a saved filter including its JQL."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    jql_filter = jira.get_filter(filter_id)
    return format_response(jql_filter, "json", "filter", app_ctx.character_limit)


@filters_mcp.tool(tags={"jira", "filters", "write"})
@handle_tool_errors
@check_write_access
async def create_filter(
    ctx: Context,
    name: Annotated[str, Field(description="Filter name")],
    jql: Annotated[str, Field(description="JQL query to save")],
    description: Annotated[
        str | None, Field(description="Filter description")
    ] = None,
    favourite: Favourite = None,
) -> str:
    """Save a JQL query as a filter.

    Args:
        ctx: The FastMCP context.
        name: Filter name.
        jql: JQL query.
        description: Filter description.
        favourite: Favourite flag.

    Returns:
        JSON string with the created filter.
    """
    jira = await get_jira_fetcher(ctx)
    jql_filter = jira.create_filter(
        name=name, jql=jql, description=description, favourite=favourite
    )
    return success_response("Filter created", filter=jql_filter)


@filters_mcp.tool(tags={"jira", "filters", "write"})
@handle_tool_errors
@check_write_access
async def update_filter(
    ctx: Context,
    filter_id: FilterId,
    name: Annotated[str | None, Field(description="New filter name")] = None,
    jql: Annotated[str | None, Field(description="New JQL query")] = None,
    description: Annotated[
        str | None, Field(description="New filter description")
    ] = None,
    favourite: Favourite = None,
) -> str:
    """Update a saved filter. Only the provided values are changed."""
    jira = await get_jira_fetcher(ctx)
    jql_filter = jira.update_filter(
        filter_id, name=name, jql=jql, description=description, favourite=favourite
    )
    return success_response("Filter updated", filter=jql_filter)


@filters_mcp.tool(tags={"jira", "filters", "write"})
@handle_tool_errors
@check_write_access
async def delete_filter(ctx: Context, filter_id: FilterId) -> str:
    """Delete a saved filter."""
    jira = await get_jira_fetcher(ctx)
    jira.delete_filter(filter_id)
    return success_response("Filter deleted")


@filters_mcp.tool(tags={"jira", "filters", "read"})
@handle_tool_errors
async def list_dashboards(
    ctx: Context,
    start_at: StartAt = 0,
    max_results: MaxResults = None,
    filter: Annotated[
        Literal["favourite", "my"] | None,
        Field(description="Only favourite dashboards or only your own"),
    ] = None,
    format: ResponseFormat = "json",
) -> str:
    """List Jira dashboards.

    Args:
        ctx: The FastMCP context.
        start_at: Starting index for pagination.
        max_results: Maximum number of dashboards.
        filter: 'favourite' or 'my'.
        format: Output format.

    Returns:
        Paginated dashboards as JSON or Markdown.
    """
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    result = jira.list_dashboards(
        start_at=start_at,
        max_results=resolve_page_size(max_results, app_ctx),
        filter=filter,
    )
    return format_response(result, format, "dashboards", app_ctx.character_limit)


@filters_mcp.tool(tags={"jira", "filters", "read"})
@handle_tool_errors
async def get_dashboard(
    ctx: Context,
    dashboard_id: Annotated[str, Field(description="Dashboard ID")],
) -> str:
    """Get a dashboard."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    dashboard = jira.get_dashboard(dashboard_id)
    return format_response(dashboard, "json", "dashboard", app_ctx.character_limit)
