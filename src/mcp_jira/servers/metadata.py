"""Metadata tools: issue types, priorities, statuses, fields, labels and links."""

import logging
from typing import Annotated

from fastmcp import Context, FastMCP
from pydantic import Field

from mcp_jira.utils.decorators import check_write_access, handle_tool_errors
from mcp_jira.utils.formatting import format_response, success_response

from .dependencies import get_app_context, get_jira_fetcher
from .params import ProjectKey, ResponseFormat, StartAt

logger = logging.getLogger("mcp-jira.servers.metadata")

metadata_mcp = FastMCP(
    name="Jira Metadata",
    instructions="Look up Jira configuration such as issue types, statuses and fields.",
)

DEFAULT_LABELS_PAGE_SIZE = 100


@metadata_mcp.tool(tags={"jira", "metadata", "read"})
@handle_tool_errors
async def get_issue_types(ctx: Context) -> str:
    """Get all issue types available on the Jira site."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    return format_response(
        jira.get_issue_types(), "json", "issue types", app_ctx.character_limit
    )


@metadata_mcp.tool(tags={"jira", "metadata", "read"})
@handle_tool_errors
async def get_project_issue_types(
    ctx: Context,
    project_id: Annotated[str, Field(description="Numeric project ID")],
) -> str:
    """Get the issue types available in a project."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    return format_response(
        jira.get_project_issue_types(project_id),
        "json",
        "issue types",
        app_ctx.character_limit,
    )


@metadata_mcp.tool(tags={"jira", "metadata", "read"})
@handle_tool_errors
async def get_priorities(ctx: Context) -> str:
    """Get all issue priorities."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    return format_response(
        jira.get_priorities(), "json", "priorities", app_ctx.character_limit
    )


@metadata_mcp.tool(tags={"jira", "metadata", "read"})
@handle_tool_errors
async def get_statuses(ctx: Context) -> str:
    """Get all workflow statuses."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    return format_response(
        jira.get_statuses(), "json", "statuses", app_ctx.character_limit
    )


@metadata_mcp.tool(tags={"jira", "metadata", "read"})
@handle_tool_errors
async def get_project_statuses(ctx: Context, project_key: ProjectKey) -> str:
    """Get the distinct statuses used by a project across all issue types."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    return format_response(
        jira.get_project_statuses(project_key),
        "json",
        "statuses",
        app_ctx.character_limit,
    )


@metadata_mcp.tool(tags={"jira", "metadata", "read"})
@handle_tool_errors
async def get_resolutions(ctx: Context) -> str:
    """Get all issue resolutions."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    return format_response(
        jira.get_resolutions(), "json", "resolutions", app_ctx.character_limit
    )


@metadata_mcp.tool(tags={"jira", "metadata", "read"})
@handle_tool_errors
async def get_fields(ctx: Context) -> str:
    """Get all system and custom fields.

    Useful for finding custom field IDs (e.g., 'customfield_10010') to pass
    to jira_create_issue or jira_update_issue.
    """
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    return format_response(jira.get_fields(), "json", "fields", app_ctx.character_limit)


@metadata_mcp.tool(tags={"jira", "metadata", "read"})
@handle_tool_errors
async def get_issue_link_types(ctx: Context) -> str:
    """Get the issue link types (e.g., 'Blocks', 'Relates')."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    return format_response(
        jira.get_issue_link_types(), "json", "link types", app_ctx.character_limit
    )


@metadata_mcp.tool(tags={"jira", "metadata", "write"})
@handle_tool_errors
@check_write_access
async def create_issue_link(
    ctx: Context,
    type: Annotated[
        str,
        Field(description="Link type name (e.g., 'Blocks', 'Duplicate', 'Relates')"),
    ],
    inward_issue_key: Annotated[
        str, Field(description="Key of the inward issue (e.g., 'PROJ-123')")
    ],
    outward_issue_key: Annotated[
        str, Field(description="Key of the outward issue (e.g., 'PROJ-456')")
    ],
    comment: Annotated[
        str | None, Field(description="Optional comment added with the link")
    ] = None,
) -> str:
    """Create a link between two Jira issues.

    Args:
        ctx: The FastMCP context.
        type: Link type name.
        inward_issue_key: Inward issue key.
        outward_issue_key: Outward issue key.
        comment: Optional comment.

    Returns:
        JSON string indicating success.
    """
    jira = await get_jira_fetcher(ctx)
    jira.create_issue_link(type, inward_issue_key, outward_issue_key, comment=comment)
    return success_response("Issue link created")


@metadata_mcp.tool(tags={"jira", "metadata", "write"})
@handle_tool_errors
@check_write_access
async def delete_issue_link(
    ctx: Context,
    link_id: Annotated[str, Field(description="Issue link ID")],
) -> str:
    """Delete an issue link."""
    jira = await get_jira_fetcher(ctx)
    jira.delete_issue_link(link_id)
    return success_response("Issue link deleted")


@metadata_mcp.tool(tags={"jira", "metadata", "read"})
@handle_tool_errors
async def get_labels(
    ctx: Context,
    start_at: StartAt = 0,
    max_results: Annotated[
        int,
        Field(description="Maximum number of labels (1-1000)", ge=1, le=1000),
    ] = DEFAULT_LABELS_PAGE_SIZE,
    format: ResponseFormat = "json",
) -> str:
    """Get the labels used on the Jira site."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    result = jira.get_labels(start_at=start_at, max_results=max_results)
    return format_response(result, format, "labels", app_ctx.character_limit)


@metadata_mcp.tool(tags={"jira", "metadata", "read"})
@handle_tool_errors
async def get_server_info(ctx: Context) -> str:
    """Get information about the Jira site (version, base URL, title)."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    return format_response(
        jira.get_server_info(), "json", "server info", app_ctx.character_limit
    )
