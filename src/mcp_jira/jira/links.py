"""Module for Jira issue link operations."""

import logging
from typing import Any

from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class LinksMixin(JiraClient):
    """Mixin for Jira issue link operations."""

    def get_issue_link_types(self) -> list[dict[str, Any]]:
        """
        Get all issue link types configured on the site.
        """
        data = self._request("GET", "/issueLinkType")
        return (data or {}).get("issueLinkTypes", [])

    def create_issue_link(
        self,
        link_type: str,
        inward_issue_key: str,
        outward_issue_key: str,
        comment: str | dict[str, Any] | None = None,
    ) -> None:
        """
        Link two issues.

        Args:
            link_type: Link type name (e.g. 'Blocks', 'Relates')
            inward_issue_key: Inward issue key
            outward_issue_key: Outward issue key
            comment: Optional comment added to the inward issue
        """
        body: dict[str, Any] = {
            "type": {"name": link_type},
            "inwardIssue": {"key": inward_issue_key},
            "outwardIssue": {"key": outward_issue_key},
        }
        if comment:
            body["comment"] = {"body": self._to_adf(comment)}
        self._request("POST", "/issueLink", json=body)
        logger.info(
            f"Linked {inward_issue_key} -> {outward_issue_key} ({link_type})"
        )

    def delete_issue_link(self, link_id: str) -> None:
        self._request("DELETE", f"/issueLink/{link_id}")
