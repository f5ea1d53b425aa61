"""Issue tools: search, CRUD, transitions, changelog and attachments."""

import logging
from typing import Annotated, Any

from fastmcp import Context, FastMCP
from pydantic import Field

from mcp_jira.utils.decorators import check_write_access, handle_tool_errors
from mcp_jira.utils.formatting import format_response, split_csv, success_response

from .dependencies import get_app_context, get_jira_fetcher, resolve_page_size
from .params import IssueKey, MaxResults, ResponseFormat, StartAt

logger = logging.getLogger("mcp-jira.servers.issues")

issues_mcp = FastMCP(
    name="Jira Issues",
    instructions="Search, read, create, update and transition Jira issues.",
)


@issues_mcp.tool(tags={"jira", "issues", "read"})
@handle_tool_errors
async def search_issues(
    ctx: Context,
    jql: Annotated[
        str,
        Field(
            description=(
                "JQL query string (Jira Query Language). Examples:\n"
                '- By project: "project = PROJ AND status = \'In Progress\'"\n'
                '- By assignee: "assignee = currentUser()"\n'
                '- Recently updated: "updated >= -7d ORDER BY updated DESC"'
            )
        ),
    ],
    start_at: StartAt = 0,
    max_results: MaxResults = None,
    fields: Annotated[
        str | None,
        Field(
            description=(
                "Comma-separated fields to return (e.g., 'summary,status,assignee'). "
                "Defaults to a compact set of common fields."
            )
        ),
    ] = None,
    format: ResponseFormat = "json",
) -> str:
    """Search Jira issues using JQL (Jira Query Language).

    Args:
        ctx: The FastMCP context.
        jql: JQL query string.
        start_at: Starting index for pagination.
        max_results: Maximum number of issues.
        fields: Comma-separated fields to return.
        format: Output format.

    Returns:
        Paginated issues as JSON or Markdown.
    """
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    result = jira.search_issues(
        jql=jql,
        start_at=start_at,
        max_results=resolve_page_size(max_results, app_ctx),
        fields=split_csv(fields),
    )
    return format_response(result, format, "issues", app_ctx.character_limit)


@issues_mcp.tool(tags={"jira", "issues", "read"})
@handle_tool_errors
async def get_issue(
    ctx: Context,
    issue_key: IssueKey,
    fields: Annotated[
        str | None,
        Field(description="Comma-separated fields to return, or '*all'"),
    ] = None,
    expand: Annotated[
        str | None,
        Field(
            description=(
                "Comma-separated entities to expand, e.g. 'renderedFields', "
                "'transitions', 'changelog'"
            )
        ),
    ] = None,
    format: ResponseFormat = "json",
) -> str:
    """Get details of a specific Jira issue.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.
        fields: Fields to return.
        expand: Entities to expand.
        format: Output format.

    Returns:
        The issue as JSON or Markdown.
    """
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    issue = jira.get_issue(
        issue_key, fields=split_csv(fields), expand=split_csv(expand)
    )
    return format_response(issue, format, "issue", app_ctx.character_limit)


@issues_mcp.tool(tags={"jira", "issues", "write"})
@handle_tool_errors
@check_write_access
async def create_issue(
    ctx: Context,
    project_key: Annotated[str, Field(description="Project key (e.g., 'PROJ')")],
    issue_type: Annotated[
        str, Field(description="Issue type name (e.g., 'Task', 'Bug', 'Story')")
    ],
    summary: Annotated[str, Field(description="Issue summary (title)")],
    description: Annotated[
        str | None, Field(description="Plain text description")
    ] = None,
    priority: Annotated[
        str | None, Field(description="Priority name (e.g., 'High')")
    ] = None,
    assignee_id: Annotated[
        str | None, Field(description="Account ID of the assignee")
    ] = None,
    reporter_id: Annotated[
        str | None, Field(description="Account ID of the reporter")
    ] = None,
    labels: Annotated[str | None, Field(description="Comma-separated labels")] = None,
    components: Annotated[
        str | None, Field(description="Comma-separated component names")
    ] = None,
    fix_versions: Annotated[
        str | None, Field(description="Comma-separated fix version names")
    ] = None,
    due_date: Annotated[
        str | None, Field(description="Due date (YYYY-MM-DD)")
    ] = None,
    parent_key: Annotated[
        str | None, Field(description="Parent issue key, required for sub-tasks")
    ] = None,
    custom_fields: Annotated[
        dict[str, Any] | None,
        Field(
            description=(
                "Additional fields keyed by field ID, sent as-is "
                "(e.g., {'customfield_10010': 5})"
            )
        ),
    ] = None,
) -> str:
    """Create a new Jira issue.

    Args:
        ctx: The FastMCP context.
        project_key: Project key.
        issue_type: Issue type name.
        summary: Issue summary.
        description: Issue description.
        priority: Priority name.
        assignee_id: Assignee account ID.
        reporter_id: Reporter account ID.
        labels: Comma-separated labels.
        components: Comma-separated component names.
        fix_versions: Comma-separated fix versions.
        due_date: Due date.
        parent_key: Parent issue key.
        custom_fields: Additional fields.

    Returns:
        JSON string with the created issue reference.
    """
    jira = await get_jira_fetcher(ctx)
    created = jira.create_issue(
        project_key=project_key,
        issue_type=issue_type,
        summary=summary,
        description=description,
        priority=priority,
        assignee_id=assignee_id,
        reporter_id=reporter_id,
        labels=split_csv(labels),
        components=split_csv(components),
        fix_versions=split_csv(fix_versions),
        due_date=due_date,
        parent_key=parent_key,
        custom_fields=custom_fields,
    )
    return success_response(f"Issue {created.get('key')} created", issue=created)


@issues_mcp.tool(tags={"jira", "issues", "write"})
@handle_tool_errors
@check_write_access
async def update_issue(
    ctx: Context,
    issue_key: IssueKey,
    summary: Annotated[str | None, Field(description="New summary")] = None,
    description: Annotated[
        str | None, Field(description="New plain text description")
    ] = None,
    priority: Annotated[str | None, Field(description="New priority name")] = None,
    assignee_id: Annotated[
        str | None,
        Field(description="New assignee account ID (empty string to unassign)"),
    ] = None,
    labels: Annotated[
        str | None, Field(description="Comma-separated labels (replaces existing)")
    ] = None,
    components: Annotated[
        str | None,
        Field(description="Comma-separated component names (replaces existing)"),
    ] = None,
    fix_versions: Annotated[
        str | None,
        Field(description="Comma-separated fix versions (replaces existing)"),
    ] = None,
    due_date: Annotated[
        str | None, Field(description="New due date (YYYY-MM-DD)")
    ] = None,
    custom_fields: Annotated[
        dict[str, Any] | None,
        Field(description="Additional fields keyed by field ID, sent as-is"),
    ] = None,
) -> str:
    """Update an existing Jira issue. Only the provided fields are changed.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.
        summary: New summary.
        description: New description.
        priority: New priority.
        assignee_id: New assignee account ID.
        labels: Replacement labels.
        components: Replacement components.
        fix_versions: Replacement fix versions.
        due_date: New due date.
        custom_fields: Additional fields.

    Returns:
        JSON string indicating success.
    """
    jira = await get_jira_fetcher(ctx)
    jira.update_issue(
        issue_key,
        summary=summary,
        description=description,
        priority=priority,
        assignee_id=assignee_id,
        labels=None if labels is None else split_csv(labels) or [],
        components=None if components is None else split_csv(components) or [],
        fix_versions=None if fix_versions is None else split_csv(fix_versions) or [],
        due_date=due_date,
        custom_fields=custom_fields,
    )
    return success_response(f"Issue {issue_key} updated")


@issues_mcp.tool(tags={"jira", "issues", "write"})
@handle_tool_errors
@check_write_access
async def delete_issue(
    ctx: Context,
    issue_key: IssueKey,
    delete_subtasks: Annotated[
        bool, Field(description="Also delete the issue's sub-tasks")
    ] = False,
) -> str:
    """Delete a Jira issue.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.
        delete_subtasks: Whether to delete sub-tasks.

    Returns:
        JSON string indicating success.
    """
    jira = await get_jira_fetcher(ctx)
    jira.delete_issue(issue_key, delete_subtasks=delete_subtasks)
    return success_response(f"Issue {issue_key} deleted")


@issues_mcp.tool(tags={"jira", "issues", "write"})
@handle_tool_errors
@check_write_access
async def assign_issue(
    ctx: Context,
    issue_key: IssueKey,
    account_id: Annotated[
        str | None,
        Field(description="Assignee account ID; omit or leave empty to unassign"),
    ] = None,
) -> str:
    """Assign a Jira issue to a user, or unassign it."""
    jira = await get_jira_fetcher(ctx)
    jira.assign_issue(issue_key, account_id)
    if account_id:
        return success_response(f"Issue {issue_key} assigned to {account_id}")
    return success_response(f"Issue {issue_key} unassigned")


@issues_mcp.tool(tags={"jira", "issues", "read"})
@handle_tool_errors
async def get_transitions(ctx: Context, issue_key: IssueKey) -> str:
    """Get the workflow transitions available for an issue.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.

    Returns:
        JSON list of transitions with their IDs, target statuses and fields.
    """
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    transitions = jira.get_transitions(issue_key)
    return format_response(transitions, "json", "transitions", app_ctx.character_limit)


@issues_mcp.tool(tags={"jira", "issues", "write"})
@handle_tool_errors
@check_write_access
async def transition_issue(
    ctx: Context,
    issue_key: IssueKey,
    transition_id: Annotated[
        str,
        Field(description="Transition ID (use jira_get_transitions to find it)"),
    ],
    comment: Annotated[
        str | None, Field(description="Comment to add with the transition")
    ] = None,
    resolution: Annotated[
        str | None, Field(description="Resolution name (e.g., 'Done', 'Fixed')")
    ] = None,
) -> str:
    """Transition a Jira issue to a new status.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.
        transition_id: Transition ID.
        comment: Optional comment.
        resolution: Optional resolution name.

    Returns:
        JSON string indicating success.
    """
    jira = await get_jira_fetcher(ctx)
    jira.transition_issue(
        issue_key, transition_id, comment=comment, resolution=resolution
    )
    return success_response(f"Issue {issue_key} transitioned")


@issues_mcp.tool(tags={"jira", "issues", "read"})
@handle_tool_errors
async def get_changelog(
    ctx: Context,
    issue_key: IssueKey,
    start_at: StartAt = 0,
    max_results: MaxResults = None,
    format: ResponseFormat = "json",
) -> str:
    """Get the change history of a Jira issue."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    result = jira.get_changelog(
        issue_key,
        start_at=start_at,
        max_results=resolve_page_size(max_results, app_ctx),
    )
    return format_response(result, format, "changelog", app_ctx.character_limit)


@issues_mcp.tool(tags={"jira", "issues", "read"})
@handle_tool_errors
async def get_attachments(ctx: Context, issue_key: IssueKey) -> str:
    """List the attachments of a Jira issue."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    attachments = jira.get_attachments(issue_key)
    return format_response(attachments, "json", "attachments", app_ctx.character_limit)


@issues_mcp.tool(tags={"jira", "issues", "write"})
@handle_tool_errors
@check_write_access
async def delete_attachment(
    ctx: Context,
    attachment_id: Annotated[str, Field(description="Attachment ID")],
) -> str:
    """Delete an attachment."""
    jira = await get_jira_fetcher(ctx)
    jira.delete_attachment(attachment_id)
    return success_response("Attachment deleted")
