"""Module for Jira worklog operations."""

import logging
from typing import Any

from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class WorklogMixin(JiraClient):
    """Mixin for Jira worklog operations."""

    def get_worklogs(
        self, issue_key: str, start_at: int = 0, max_results: int | None = None
    ) -> dict[str, Any]:
        """
        Get worklogs for an issue.

        Returns:
            Pagination envelope of worklog entries
        """
        data = self._request(
            "GET",
            f"/issue/{issue_key}/worklog",
            params={"startAt": start_at or None, "maxResults": max_results},
        )
        return self._paginate(data, "worklogs", start_at, max_results)

    def _worklog_body(
        self,
        time_spent: str | None,
        started: str | None,
        comment: str | dict[str, Any] | None,
    ) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if time_spent:
            body["timeSpent"] = time_spent
        if started:
            body["started"] = started
        if comment:
            body["comment"] = self._to_adf(comment)
        return body

    def add_worklog(
        self,
        issue_key: str,
        time_spent: str | None = None,
        started: str | None = None,
        comment: str | dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Log work on an issue.

        Args:
            issue_key: The issue key
            time_spent: Jira duration (e.g. '2h 30m')
            started: Start time, e.g. '2024-01-15T09:00:00.000+0000'
            comment: Plain text or ADF comment

        Returns:
            The created worklog
        """
        result = self._request(
            "POST",
            f"/issue/{issue_key}/worklog",
            json=self._worklog_body(time_spent, started, comment),
        )
        logger.info(f"Added worklog to {issue_key}: {time_spent}")
        return result

    def update_worklog(
        self,
        issue_key: str,
        worklog_id: str,
        time_spent: str | None = None,
        started: str | None = None,
        comment: str | dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        return self._request(
            "PUT",
            f"/issue/{issue_key}/worklog/{worklog_id}",
            json=self._worklog_body(time_spent, started, comment),
        )

    def delete_worklog(self, issue_key: str, worklog_id: str) -> None:
        self._request("DELETE", f"/issue/{issue_key}/worklog/{worklog_id}")
