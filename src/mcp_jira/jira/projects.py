"""Module for Jira project operations."""

import logging
from typing import Any

from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class ProjectsMixin(JiraClient):
    """Mixin for Jira project and project role operations."""

    def list_projects(
        self,
        start_at: int = 0,
        max_results: int | None = None,
        search_query: str | None = None,
        type_key: str | None = None,
        order_by: str | None = None,
        expand: list[str] | None = None,
    ) -> dict[str, Any]:
        """
        Search the projects visible to the user.

        Args:
            start_at: Index of the first project
            max_results: Maximum number of projects
            search_query: Filter on project key or name
            type_key: Project type (software, service_desk, business)
            order_by: Sort order (e.g. 'name', '-lastIssueUpdatedTime')
            expand: Entities to expand

        Returns:
            Pagination envelope of projects
        """
        data = self._request(
            "GET",
            "/project/search",
            params={
                "startAt": start_at or None,
                "maxResults": max_results,
                "query": search_query,
                "typeKey": type_key,
                "orderBy": order_by,
                "expand": expand,
            },
        )
        return self._paginate(data, "values", start_at, max_results)

    def get_project(
        self, project_key: str, expand: list[str] | None = None
    ) -> dict[str, Any]:
        return self._request(
            "GET", f"/project/{project_key}", params={"expand": expand}
        )

    def create_project(
        self,
        key: str,
        name: str,
        project_type_key: str,
        lead_account_id: str,
        description: str | None = None,
        assignee_type: str | None = None,
        project_template_key: str | None = None,
    ) -> dict[str, Any]:
        """
        Create a project.

        Args:
            key: Project key (uppercase, e.g. 'PROJ')
            name: Project name
            project_type_key: software, service_desk or business
            lead_account_id: Account ID of the project lead
            description: Project description
            assignee_type: PROJECT_LEAD or UNASSIGNED
            project_template_key: Template used to create the project

        Returns:
            The created project reference (id, key, self)
        """
        body = self._compact(
            key=key,
            name=name,
            projectTypeKey=project_type_key,
            leadAccountId=lead_account_id,
            description=description,
            assigneeType=assignee_type,
            projectTemplateKey=project_template_key,
        )
        result = self._request("POST", "/project", json=body)
        logger.info(f"Created project {key}")
        return result

    def update_project(
        self,
        project_key: str,
        key: str | None = None,
        name: str | None = None,
        description: str | None = None,
        lead_account_id: str | None = None,
        assignee_type: str | None = None,
    ) -> dict[str, Any]:
        body = self._compact(
            key=key,
            name=name,
            description=description,
            leadAccountId=lead_account_id,
            assigneeType=assignee_type,
        )
        return self._request("PUT", f"/project/{project_key}", json=body)

    def delete_project(self, project_key: str) -> None:
        self._request("DELETE", f"/project/{project_key}")
        logger.info(f"Deleted project {project_key}")

    def get_project_roles(self, project_key: str) -> dict[str, str]:
        """
        Get the roles of a project.

        Returns:
            Mapping of role name to role URL
        """
        return self._request("GET", f"/project/{project_key}/role") or {}

    def get_project_role(self, project_key: str, role_id: int) -> dict[str, Any]:
        return self._request("GET", f"/project/{project_key}/role/{role_id}")
