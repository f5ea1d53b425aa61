"""Module for Jira comment operations."""

import logging
from typing import Any

from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class CommentsMixin(JiraClient):
    """Mixin for Jira comment operations."""

    def get_comments(
        self, issue_key: str, start_at: int = 0, max_results: int | None = None
    ) -> dict[str, Any]:
        """
        Get comments for a specific issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            start_at: Index of the first comment
            max_results: Maximum number of comments

        Returns:
            Pagination envelope of comments
        """
        data = self._request(
            "GET",
            f"/issue/{issue_key}/comment",
            params={"startAt": start_at or None, "maxResults": max_results},
        )
        return self._paginate(data, "comments", start_at, max_results)

    def get_comment(self, issue_key: str, comment_id: str) -> dict[str, Any]:
        return self._request("GET", f"/issue/{issue_key}/comment/{comment_id}")

    def add_comment(
        self, issue_key: str, body: str | dict[str, Any]
    ) -> dict[str, Any]:
        """
        Add a comment to an issue.

        Args:
            issue_key: The issue key
            body: Plain text or ADF comment body

        Returns:
            The created comment
        """
        result = self._request(
            "POST", f"/issue/{issue_key}/comment", json={"body": self._to_adf(body)}
        )
        logger.info(f"Added comment to {issue_key}")
        return result

    def update_comment(
        self, issue_key: str, comment_id: str, body: str | dict[str, Any]
    ) -> dict[str, Any]:
        return self._request(
            "PUT",
            f"/issue/{issue_key}/comment/{comment_id}",
            json={"body": self._to_adf(body)},
        )

    def delete_comment(self, issue_key: str, comment_id: str) -> None:
        self._request("DELETE", f"/issue/{issue_key}/comment/{comment_id}")
