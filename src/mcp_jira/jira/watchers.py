"""Module for Jira watcher and vote operations."""

import logging
from typing import Any

from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class WatchersMixin(JiraClient):
    """Mixin for issue watchers and votes."""

    def get_watchers(self, issue_key: str) -> dict[str, Any]:
        """
        Get the watchers of an issue.

        Returns:
            Dictionary with watchCount and watchers
        """
        data = self._request("GET", f"/issue/{issue_key}/watchers") or {}
        return {
            "watchCount": data.get("watchCount", 0),
            "watchers": data.get("watchers", []),
        }

    def add_watcher(self, issue_key: str, account_id: str) -> None:
        # The endpoint takes the account ID as a bare JSON string
        self._request("POST", f"/issue/{issue_key}/watchers", data=account_id)

    def remove_watcher(self, issue_key: str, account_id: str) -> None:
        self._request(
            "DELETE",
            f"/issue/{issue_key}/watchers",
            params={"accountId": account_id},
        )

    def get_votes(self, issue_key: str) -> dict[str, Any]:
        """
        Get the votes on an issue.

        Returns:
            Dictionary with votes, hasVoted and voters
        """
        data = self._request("GET", f"/issue/{issue_key}/votes") or {}
        return {
            "votes": data.get("votes", 0),
            "hasVoted": data.get("hasVoted", False),
            "voters": data.get("voters", []),
        }

    def add_vote(self, issue_key: str) -> None:
        self._request("POST", f"/issue/{issue_key}/votes")

    def remove_vote(self, issue_key: str) -> None:
        self._request("DELETE", f"/issue/{issue_key}/votes")
