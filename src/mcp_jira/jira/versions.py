"""Module for Jira project version operations."""

import logging
from typing import Any

from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class VersionsMixin(JiraClient):
    """Mixin for Jira version (release) operations."""

    def get_project_versions(
        self, project_key: str, start_at: int = 0, max_results: int | None = None
    ) -> dict[str, Any]:
        """
        Get the versions of a project.

        Args:
            project_key: Project key
            start_at: Index of the first version
            max_results: Maximum number of versions

        Returns:
            Pagination envelope of versions
        """
        data = self._request(
            "GET",
            f"/project/{project_key}/version",
            params={"startAt": start_at or None, "maxResults": max_results},
        )
        return self._paginate(data, "values", start_at, max_results)

    def get_version(self, version_id: str) -> dict[str, Any]:
        return self._request("GET", f"/version/{version_id}")

    def create_version(
        self,
        project_id: int,
        name: str,
        description: str | None = None,
        start_date: str | None = None,
        release_date: str | None = None,
        released: bool | None = None,
        archived: bool | None = None,
    ) -> dict[str, Any]:
        """
        Create a version in a project.

        Args:
            project_id: Numeric project ID
            name: Version name
            description: Version description
            start_date: Start date (YYYY-MM-DD)
            release_date: Release date (YYYY-MM-DD)
            released: Whether the version is released
            archived: Whether the version is archived

        Returns:
            The created version
        """
        body = self._compact(
            projectId=project_id,
            name=name,
            description=description,
            startDate=start_date,
            releaseDate=release_date,
            released=released,
            archived=archived,
        )
        result = self._request("POST", "/version", json=body)
        logger.info(f"Created version '{name}' in project {project_id}")
        return result

    def update_version(
        self,
        version_id: str,
        name: str | None = None,
        description: str | None = None,
        start_date: str | None = None,
        release_date: str | None = None,
        released: bool | None = None,
        archived: bool | None = None,
    ) -> dict[str, Any]:
        body = self._compact(
            name=name,
            description=description,
            startDate=start_date,
            releaseDate=release_date,
            released=released,
            archived=archived,
        )
        return self._request("PUT", f"/version/{version_id}", json=body)

    def release_version(self, version_id: str) -> None:
        self._request("PUT", f"/version/{version_id}", json={"released": True})
        logger.info(f"Released version {version_id}")

    def delete_version(self, version_id: str) -> None:
        self._request("DELETE", f"/version/{version_id}")
