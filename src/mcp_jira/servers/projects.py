"""Project, component and version tools."""

import logging
from typing import Annotated, Literal

from fastmcp import Context, FastMCP
from pydantic import Field

from mcp_jira.utils.decorators import check_write_access, handle_tool_errors
from mcp_jira.utils.formatting import format_response, split_csv, success_response

from .dependencies import get_app_context, get_jira_fetcher, resolve_page_size
from .params import MaxResults, ProjectKey, ResponseFormat, StartAt

logger = logging.getLogger("mcp-jira.servers.projects")

projects_mcp = FastMCP(
    name="Jira Projects",
    instructions="Manage Jira projects, project roles, components and versions.",
)

AssigneeType = Annotated[
    Literal["PROJECT_LEAD", "UNASSIGNED"] | None,
    Field(description="Default assignee: PROJECT_LEAD or UNASSIGNED"),
]
ComponentId = Annotated[str, Field(description="Component ID")]
VersionId = Annotated[str, Field(description="Version ID")]
DateParam = Annotated[str | None, Field(description="Date (YYYY-MM-DD)")]


@projects_mcp.tool(tags={"jira", "projects", "read"})
@handle_tool_errors
async def list_projects(
    ctx: Context,
    start_at: StartAt = 0,
    max_results: MaxResults = None,
    search_query: Annotated[
        str | None, Field(description="Filter projects by key or name")
    ] = None,
    type_key: Annotated[
        str | None,
        Field(description="Project type: software, service_desk or business"),
    ] = None,
    order_by: Annotated[
        str | None,
        Field(description="Sort order, e.g. 'name', 'key', '-lastIssueUpdatedTime'"),
    ] = None,
    format: ResponseFormat = "json",
) -> str:
    """List the Jira projects visible to the authenticated user.

    Args:
        ctx: The FastMCP context.
        start_at: Starting index for pagination.
        max_results: Maximum number of projects.
        search_query: Key or name filter.
        type_key: Project type filter.
        order_by: Sort order.
        format: Output format.

    Returns:
        Paginated projects as JSON or Markdown.
    """
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    result = jira.list_projects(
        start_at=start_at,
        max_results=resolve_page_size(max_results, app_ctx),
        search_query=search_query,
        type_key=type_key,
        order_by=order_by,
    )
    return format_response(result, format, "projects", app_ctx.character_limit)


@projects_mcp.tool(tags={"jira", "projects", "read"})
@handle_tool_errors
async def get_project(
    ctx: Context,
    project_key: ProjectKey,
    expand: Annotated[
        str | None,
        Field(description="Entities to expand (e.g., 'lead,description')"),
    ] = None,
    format: ResponseFormat = "json",
) -> str:
    """Get details of a Jira project."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    project = jira.get_project(project_key, expand=split_csv(expand))
    return format_response(project, format, "project", app_ctx.character_limit)


@projects_mcp.tool(tags={"jira", "projects", "write"})
@handle_tool_errors
@check_write_access
async def create_project(
    ctx: Context,
    key: Annotated[
        str,
        Field(
            description="Project key: uppercase letters and digits, e.g. 'PROJ'",
            pattern=r"^[A-Z][A-Z0-9]*$",
        ),
    ],
    name: Annotated[str, Field(description="Project name")],
    project_type_key: Annotated[
        Literal["software", "service_desk", "business"],
        Field(description="Project type"),
    ],
    lead_account_id: Annotated[
        str, Field(description="Account ID of the project lead")
    ],
    description: Annotated[
        str | None, Field(description="Project description")
    ] = None,
    assignee_type: AssigneeType = None,
) -> str:
    """Create a new Jira project.

    Args:
        ctx: The FastMCP context.
        key: Project key.
        name: Project name.
        project_type_key: Project type.
        lead_account_id: Project lead account ID.
        description: Project description.
        assignee_type: Default assignee type.

    Returns:
        JSON string with the created project reference.
    """
    jira = await get_jira_fetcher(ctx)
    project = jira.create_project(
        key=key,
        name=name,
        project_type_key=project_type_key,
        lead_account_id=lead_account_id,
        description=description,
        assignee_type=assignee_type,
    )
    return success_response("Project created", project=project)


@projects_mcp.tool(tags={"jira", "projects", "write"})
@handle_tool_errors
@check_write_access
async def update_project(
    ctx: Context,
    project_key: ProjectKey,
    key: Annotated[str | None, Field(description="New project key")] = None,
    name: Annotated[str | None, Field(description="New project name")] = None,
    description: Annotated[
        str | None, Field(description="New project description")
    ] = None,
    lead_account_id: Annotated[
        str | None, Field(description="Account ID of the new project lead")
    ] = None,
    assignee_type: AssigneeType = None,
) -> str:
    """Update a Jira project. Only the provided values are changed."""
    jira = await get_jira_fetcher(ctx)
    project = jira.update_project(
        project_key,
        key=key,
        name=name,
        description=description,
        lead_account_id=lead_account_id,
        assignee_type=assignee_type,
    )
    return success_response("Project updated", project=project)


@projects_mcp.tool(tags={"jira", "projects", "write"})
@handle_tool_errors
@check_write_access
async def delete_project(ctx: Context, project_key: ProjectKey) -> str:
    """Delete a Jira project (moves it to the trash)."""
    jira = await get_jira_fetcher(ctx)
    jira.delete_project(project_key)
    return success_response("Project deleted")


@projects_mcp.tool(tags={"jira", "projects", "read"})
@handle_tool_errors
async def get_project_roles(ctx: Context, project_key: ProjectKey) -> str:
    """Get the roles of a Jira project as a mapping of role name to role URL."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    roles = jira.get_project_roles(project_key)
    return format_response(roles, "json", "roles", app_ctx.character_limit)


@projects_mcp.tool(tags={"jira", "projects", "read"})
@handle_tool_errors
async def get_project_role(
    ctx: Context,
    project_key: ProjectKey,
    role_id: Annotated[int, Field(description="Project role ID")],
) -> str:
    """Get a project role including its actors."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    role = jira.get_project_role(project_key, role_id)
    return format_response(role, "json", "role", app_ctx.character_limit)


@projects_mcp.tool(tags={"jira", "projects", "read"})
@handle_tool_errors
async def get_project_components(ctx: Context, project_key: ProjectKey) -> str:
    """Get the components of a Jira project."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    components = jira.get_project_components(project_key)
    return format_response(components, "json", "components", app_ctx.character_limit)


@projects_mcp.tool(tags={"jira", "projects", "read"})
@handle_tool_errors
async def get_component(ctx: Context, component_id: ComponentId) -> str:
    """Get a component."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    component = jira.get_component(component_id)
    return format_response(component, "json", "component", app_ctx.character_limit)


@projects_mcp.tool(tags={"jira", "projects", "write"})
@handle_tool_errors
@check_write_access
async def create_component(
    ctx: Context,
    project: Annotated[str, Field(description="Project key the component belongs to")],
    name: Annotated[str, Field(description="Component name")],
    description: Annotated[
        str | None, Field(description="Component description")
    ] = None,
    lead_account_id: Annotated[
        str | None, Field(description="Account ID of the component lead")
    ] = None,
) -> str:
    """Create a component in a Jira project."""
    jira = await get_jira_fetcher(ctx)
    component = jira.create_component(
        project=project,
        name=name,
        description=description,
        lead_account_id=lead_account_id,
    )
    return success_response("Component created", component=component)


@projects_mcp.tool(tags={"jira", "projects", "write"})
@handle_tool_errors
@check_write_access
async def update_component(
    ctx: Context,
    component_id: ComponentId,
    name: Annotated[str | None, Field(description="New component name")] = None,
    description: Annotated[
        str | None, Field(description="New component description")
    ] = None,
    lead_account_id: Annotated[
        str | None, Field(description="Account ID of the new component lead")
    ] = None,
) -> str:
    """Update a component. Only the provided values are changed."""
    jira = await get_jira_fetcher(ctx)
    component = jira.update_component(
        component_id,
        name=name,
        description=description,
        lead_account_id=lead_account_id,
    )
    return success_response("Component updated", component=component)


@projects_mcp.tool(tags={"jira", "projects", "write"})
@handle_tool_errors
@check_write_access
async def delete_component(ctx: Context, component_id: ComponentId) -> str:
    """Delete a component."""
    jira = await get_jira_fetcher(ctx)
    jira.delete_component(component_id)
    return success_response("Component deleted")


@projects_mcp.tool(tags={"jira", "projects", "read"})
@handle_tool_errors
async def get_project_versions(
    ctx: Context,
    project_key: ProjectKey,
    start_at: StartAt = 0,
    max_results: MaxResults = None,
    format: ResponseFormat = "json",
) -> str:
    """Get the versions (releases) of a Jira project.

    Args:
        ctx: The FastMCP context.
        project_key: Project key.
        start_at: Starting index for pagination.
        max_results: Maximum number of versions.
        format: Output format.

    Returns:
        Paginated versions as JSON or Markdown.
    """
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    result = jira.get_project_versions(
        project_key,
        start_at=start_at,
        max_results=resolve_page_size(max_results, app_ctx),
    )
    return format_response(result, format, "versions", app_ctx.character_limit)


@projects_mcp.tool(tags={"jira", "projects", "read"})
@handle_tool_errors
async def get_version(ctx: Context, version_id: VersionId) -> str:
    """Get a version."""
    app_ctx = get_app_context(ctx)
    jira = await get_jira_fetcher(ctx)
    version = jira.get_version(version_id)
    return format_response(version, "json", "version", app_ctx.character_limit)


@projects_mcp.tool(tags={"jira", "projects", "write"})
@handle_tool_errors
@check_write_access
async def create_version(
    ctx: Context,
    project_id: Annotated[int, Field(description="Numeric project ID")],
    name: Annotated[str, Field(description="Version name (e.g., 'v1.2.0')")],
    description: Annotated[
        str | None, Field(description="Version description")
    ] = None,
    start_date: DateParam = None,
    release_date: DateParam = None,
    released: Annotated[
        bool | None, Field(description="Whether the version is released")
    ] = None,
    archived: Annotated[
        bool | None, Field(description="Whether the version is archived")
    ] = None,
) -> str:
    """Create a version (release) in a Jira project.

    Args:
        ctx: The FastMCP context.
        project_id: Numeric project ID.
        name: Version name.
        description: Version description.
        start_date: Start date.
        release_date: Release date.
        released: Released flag.
        archived: Archived flag.

    Returns:
        JSON string with the created version.
    """
    jira = await get_jira_fetcher(ctx)
    version = jira.create_version(
        project_id=project_id,
        name=name,
        description=description,
        start_date=start_date,
        release_date=release_date,
        released=released,
        archived=archived,
    )
    return success_response("Version created", version=version)


@projects_mcp.tool(tags={"jira", "projects", "write"})
@handle_tool_errors
@check_write_access
async def update_version(
    ctx: Context,
    version_id: VersionId,
    name: Annotated[str | None, Field(description="New version name")] = None,
    description: Annotated[
        str | None, Field(description="New version description")
    ] = None,
    start_date: DateParam = None,
    release_date: DateParam = None,
    released: Annotated[
        bool | None, Field(description="Whether the version is released")
    ] = None,
    archived: Annotated[
        bool | None, Field(description="Whether the version is archived")
    ] = None,
) -> str:
    """Update a version. Only the provided values are changed."""
    jira = await get_jira_fetcher(ctx)
    version = jira.update_version(
        version_id,
        name=name,
        description=description,
        start_date=start_date,
        release_date=release_date,
        released=released,
        archived=archived,
    )
    return success_response("Version updated", version=version)


@projects_mcp.tool(tags={"jira", "projects", "write"})
@handle_tool_errors
@check_write_access
async def release_version(ctx: Context, version_id: VersionId) -> str:
    """Mark a version as released."""
    jira = await get_jira_fetcher(ctx)
    jira.release_version(version_id)
    return success_response("Version released")


@projects_mcp.tool(tags={"jira", "projects", "write"})
@handle_tool_errors
@check_write_access
async def delete_version(ctx: Context, version_id: VersionId) -> str:
    """Delete a version."""
    jira = await get_jira_fetcher(ctx)
    jira.delete_version(version_id)
    return success_response("Version deleted")
