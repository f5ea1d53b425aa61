"""Module for Jira Agile board operations."""

import logging
from typing import Any

from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class BoardsMixin(JiraClient):
    """Mixin for Jira Agile boards."""

    def list_boards(
        self,
        start_at: int = 0,
        max_results: int | None = None,
        board_type: str | None = None,
        name: str | None = None,
        project_key_or_id: str | None = None,
    ) -> dict[str, Any]:
        """
        List boards.

        Args:
            start_at: Index of the first board
            max_results: Maximum number of boards
            board_type: scrum, kanban or simple
            name: Filter on board name
            project_key_or_id: Filter on project

        Returns:
            Pagination envelope of boards
        """
        data = self._request(
            "GET",
            "/board",
            params={
                "startAt": start_at or None,
                "maxResults": max_results,
                "type": board_type,
                "name": name,
                "projectKeyOrId": project_key_or_id,
            },
            agile=True,
        )
        return self._paginate(data, "values", start_at, max_results)

    def get_board(self, board_id: int) -> dict[str, Any]:
        return self._request("GET", f"/board/{board_id}", agile=True)

    def _board_issue_query(
        self,
        endpoint: str,
        start_at: int,
        max_results: int | None,
        jql: str | None,
    ) -> dict[str, Any]:
        data = self._request(
            "GET",
            endpoint,
            params={
                "startAt": start_at or None,
                "maxResults": max_results,
                "jql": jql,
            },
            agile=True,
        )
        return self._paginate(data, "issues", start_at, max_results)

    def get_board_issues(
        self,
        board_id: int,
        start_at: int = 0,
        max_results: int | None = None,
        jql: str | None = None,
    ) -> dict[str, Any]:
        """
        Get the issues on a board, optionally narrowed with JQL.

        Returns:
            Pagination envelope of issues
        """
        return self._board_issue_query(
            f"/board/{board_id}/issue", start_at, max_results, jql
        )

    def get_backlog_issues(
        self,
        board_id: int,
        start_at: int = 0,
        max_results: int | None = None,
        jql: str | None = None,
    ) -> dict[str, Any]:
        return self._board_issue_query(
            f"/board/{board_id}/backlog", start_at, max_results, jql
        )
