"""Module for Jira filter and dashboard operations."""

import logging
from typing import Any

from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class FiltersMixin(JiraClient):
    """Mixin for saved filters and dashboards."""

    def get_my_filters(self, expand: list[str] | None = None) -> list[dict[str, Any]]:
        return self._request("GET", "/filter/my", params={"expand": expand}) or []

    def get_favourite_filters(self) -> list[dict[str, Any]]:
        return self._request("GET", "/filter/favourite") or []

    def get_filter(self, filter_id: str) -> dict[str, Any]:
        return self._request("GET", f"/filter/{filter_id}")

    def create_filter(
        self,
        name: str,
        jql: str,
        description: str | None = None,
        favourite: bool | None = None,
    ) -> dict[str, Any]:
        """
        Save a JQL query as a filter.

        Args:
            name: Filter name
            jql: JQL query
            description: Filter description
            favourite: Whether to mark the filter as a favourite

        Returns:
            The created filter
        """
        body = self._compact(
            name=name, jql=jql, description=description, favourite=favourite
        )
        result = self._request("POST", "/filter", json=body)
        logger.info(f"Created filter '{name}'")
        return result

    def update_filter(
        self,
        filter_id: str,
        name: str | None = None,
        jql: str | None = None,
        description: str | None = None,
        favourite: bool | None = None,
    ) -> dict[str, Any]:
        body = self._compact(
            name=name, jql=jql, description=description, favourite=favourite
        )
        return self._request("PUT", f"/filter/{filter_id}", json=body)

    def delete_filter(self, filter_id: str) -> None:
        self._request("DELETE", f"/filter/{filter_id}")

    def list_dashboards(
        self,
        start_at: int = 0,
        max_results: int | None = None,
        filter: str | None = None,
    ) -> dict[str, Any]:
        """
        List dashboards.

        Args:
            start_at: Index of the first dashboard
            max_results: Maximum number of dashboards
            filter: 'favourite' or 'my'

        Returns:
            Pagination envelope of dashboards
        """
        data = self._request(
            "GET",
            "/dashboard",
            params={
                "startAt": start_at or None,
                "maxResults": max_results,
                "filter": filter,
            },
        )
        return self._paginate(data, "dashboards", start_at, max_results)

    def get_dashboard(self, dashboard_id: str) -> dict[str, Any]:
        return self._request("GET", f"/dashboard/{dashboard_id}")
