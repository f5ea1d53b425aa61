"""Module for Jira instance metadata: issue types, statuses, fields and labels."""

import logging
from typing import Any

from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class MetadataMixin(JiraClient):
    """Mixin for read-only Jira metadata lookups."""

    def get_issue_types(self) -> list[dict[str, Any]]:
        return self._request("GET", "/issuetype") or []

    def get_project_issue_types(self, project_id: str) -> list[dict[str, Any]]:
        return (
            self._request(
                "GET", "/issuetype/project", params={"projectId": project_id}
            )
            or []
        )

    def get_priorities(self) -> list[dict[str, Any]]:
        return self._request("GET", "/priority") or []

    def get_statuses(self) -> list[dict[str, Any]]:
        return self._request("GET", "/status") or []

    def get_project_statuses(self, project_key: str) -> list[dict[str, Any]]:
        """
        Get the statuses used by a project across all of its issue types.

        Jira groups statuses by issue type, so the same status usually appears
        several times. The result keeps the first occurrence of each status ID.

        Args:
            project_key: Project key or ID

        Returns:
            Unique statuses in first-seen order
        """
        issue_types = self._request("GET", f"/project/{project_key}/statuses") or []
        unique: dict[str, dict[str, Any]] = {}
        for issue_type in issue_types:
            for status in issue_type.get("statuses", []):
                status_id = str(status.get("id"))
                if status_id not in unique:
                    unique[status_id] = status
        return list(unique.values())

    def get_resolutions(self) -> list[dict[str, Any]]:
        return self._request("GET", "/resolution") or []

    def get_fields(self) -> list[dict[str, Any]]:
        """
        Get all system and custom fields.

        Returns:
            Field definitions, useful for finding custom field IDs
        """
        return self._request("GET", "/field") or []

    def get_labels(
        self, start_at: int = 0, max_results: int | None = None
    ) -> dict[str, Any]:
        data = self._request(
            "GET",
            "/label",
            params={"startAt": start_at or None, "maxResults": max_results},
        )
        return self._paginate(data, "values", start_at, max_results)

    def get_server_info(self) -> dict[str, Any]:
        return self._request("GET", "/serverInfo")
