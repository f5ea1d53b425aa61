"""Attachment operations for Jira API."""

import logging
from typing import Any

from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class AttachmentsMixin(JiraClient):
    """Mixin for Jira attachment operations."""

    def get_attachments(self, issue_key: str) -> list[dict[str, Any]]:
        """
        List the attachments of an issue.

        Returns:
            Attachment metadata (id, filename, size, mimeType, content URL)
        """
        issue = self._request(
            "GET", f"/issue/{issue_key}", params={"fields": "attachment"}
        )
        return ((issue or {}).get("fields") or {}).get("attachment") or []

    def delete_attachment(self, attachment_id: str) -> None:
        self._request("DELETE", f"/attachment/{attachment_id}")
        logger.info(f"Deleted attachment {attachment_id}")
