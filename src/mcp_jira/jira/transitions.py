"""Module for Jira transition operations."""

import logging
from typing import Any

from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class TransitionsMixin(JiraClient):
    """Mixin for Jira transition operations."""

    def get_transitions(self, issue_key: str) -> list[dict[str, Any]]:
        """
        Get the available status transitions for an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            List of transitions, including the fields each one accepts
        """
        data = self._request(
            "GET",
            f"/issue/{issue_key}/transitions",
            params={"expand": "transitions.fields"},
        )
        return (data or {}).get("transitions", [])

    def transition_issue(
        self,
        issue_key: str,
        transition_id: str,
        comment: str | dict[str, Any] | None = None,
        resolution: str | None = None,
    ) -> None:
        """
        Move an issue through a workflow transition.

        Args:
            issue_key: The issue key
            transition_id: Transition ID (see get_transitions)
            comment: Comment added with the transition
            resolution: Resolution name (e.g. 'Done', 'Fixed')
        """
        body: dict[str, Any] = {"transition": {"id": transition_id}}
        if resolution:
            body["fields"] = {"resolution": {"name": resolution}}
        if comment:
            body["update"] = {"comment": [{"add": {"body": self._to_adf(comment)}}]}

        self._request("POST", f"/issue/{issue_key}/transitions", json=body)
        logger.info(f"Transitioned issue {issue_key} via transition {transition_id}")
