"""Module for Jira search operations."""

import logging
from typing import Any

from .client import JiraClient
from .constants import DEFAULT_SEARCH_FIELDS, DEFAULT_SEARCH_LIMIT

logger = logging.getLogger("mcp-jira")


class SearchMixin(JiraClient):
    """Mixin for Jira search operations."""

    def search_issues(
        self,
        jql: str,
        start_at: int = 0,
        max_results: int = DEFAULT_SEARCH_LIMIT,
        fields: list[str] | None = None,
    ) -> dict[str, Any]:
        """
        Search for issues using JQL (Jira Query Language).

        Args:
            jql: JQL query string
            start_at: Index of the first issue to return
            max_results: Maximum issues to return
            fields: Fields to return (defaults to a compact summary set)

        Returns:
            Pagination envelope of issues
        """
        body: dict[str, Any] = {
            "jql": jql,
            "startAt": start_at or 0,
            "maxResults": max_results or DEFAULT_SEARCH_LIMIT,
            "fields": fields or DEFAULT_SEARCH_FIELDS,
        }
        logger.debug(f"Searching issues with JQL: {jql}")
        data = self._request("POST", "/search", json=body)
        return self._paginate(data, "issues", start_at, body["maxResults"])
