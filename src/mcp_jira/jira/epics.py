"""Module for Jira epic operations."""

import logging
from typing import Any

from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class EpicsMixin(JiraClient):
    """Mixin for Jira Agile epic operations."""

    def list_epics(
        self, board_id: int, start_at: int = 0, max_results: int | None = None
    ) -> dict[str, Any]:
        data = self._request(
            "GET",
            f"/board/{board_id}/epic",
            params={"startAt": start_at or None, "maxResults": max_results},
            agile=True,
        )
        return self._paginate(data, "values", start_at, max_results)

    def get_epic(self, epic_key: str) -> dict[str, Any]:
        return self._request("GET", f"/epic/{epic_key}", agile=True)

    def get_epic_issues(
        self,
        epic_key: str,
        start_at: int = 0,
        max_results: int | None = None,
        jql: str | None = None,
    ) -> dict[str, Any]:
        """
        Get the issues that belong to an epic.

        Args:
            epic_key: Epic ID or key
            start_at: Index of the first issue
            max_results: Maximum number of issues
            jql: Additional JQL filter

        Returns:
            Pagination envelope of issues
        """
        data = self._request(
            "GET",
            f"/epic/{epic_key}/issue",
            params={
                "startAt": start_at or None,
                "maxResults": max_results,
                "jql": jql,
            },
            agile=True,
        )
        return self._paginate(data, "issues", start_at, max_results)

    def move_issues_to_epic(self, epic_key: str, issue_keys: list[str]) -> None:
        self._request(
            "POST", f"/epic/{epic_key}/issue", json={"issues": issue_keys}, agile=True
        )
        logger.info(f"Moved {len(issue_keys)} issues to epic {epic_key}")

    def remove_issues_from_epic(self, issue_keys: list[str]) -> None:
        # "none" is the agile API's pseudo-epic for detaching issues
        self._request(
            "POST", "/epic/none/issue", json={"issues": issue_keys}, agile=True
        )
