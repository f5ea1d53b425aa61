"""Module for Jira user and group operations."""

import logging
from typing import Any

import requests

from ..exceptions import JiraError
from ..models import PaginatedResponse
from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class UsersMixin(JiraClient):
    """Mixin for Jira user and group operations."""

    def get_myself(self) -> dict[str, Any]:
        """
        Get the user the credentials belong to.

        Returns:
            The authenticated user's profile
        """
        return self._request("GET", "/myself")

    def test_connection(self) -> dict[str, Any]:
        """
        Check that the tenant credentials work.

        Never raises; failures are reported in the result.

        Returns:
            Dictionary with 'connected' and a human readable 'message'
        """
        try:
            myself = self.get_myself() or {}
        except (JiraError, requests.RequestException) as e:
            logger.warning(f"Connection test failed for {self.config.url}: {e}")
            return {"connected": False, "message": str(e)}

        identity = myself.get("emailAddress") or myself.get("accountId")
        return {
            "connected": True,
            "message": f"Connected as {myself.get('displayName')} ({identity})",
        }

    def get_user(self, account_id: str) -> dict[str, Any]:
        return self._request("GET", "/user", params={"accountId": account_id})

    def search_users(
        self, query: str, start_at: int = 0, max_results: int | None = None
    ) -> dict[str, Any]:
        """
        Search users by name or email.

        Jira returns a bare list here, so the envelope carries no total and
        reports more results whenever a full page came back.

        Args:
            query: Name or email fragment
            start_at: Index of the first user
            max_results: Maximum number of users

        Returns:
            Pagination envelope of users
        """
        users = self._request(
            "GET",
            "/user/search",
            params={
                "query": query,
                "startAt": start_at or None,
                "maxResults": max_results,
            },
        )
        return PaginatedResponse.from_list(
            users or [], start_at=start_at, max_results=max_results
        ).to_simplified_dict()

    def find_assignable_users(
        self,
        project_key: str | None = None,
        issue_key: str | None = None,
        query: str | None = None,
        start_at: int = 0,
        max_results: int | None = None,
    ) -> dict[str, Any]:
        """
        Find users that can be assigned to issues of a project or to one issue.

        Args:
            project_key: Project key
            issue_key: Issue key
            query: Name or email fragment
            start_at: Index of the first user
            max_results: Maximum number of users

        Returns:
            Pagination envelope of users
        """
        users = self._request(
            "GET",
            "/user/assignable/search",
            params={
                "project": project_key,
                "issueKey": issue_key,
                "query": query,
                "startAt": start_at or None,
                "maxResults": max_results,
            },
        )
        return PaginatedResponse.from_list(
            users or [], start_at=start_at, max_results=max_results
        ).to_simplified_dict()

    def list_groups(
        self,
        query: str | None = None,
        start_at: int = 0,
        max_results: int | None = None,
    ) -> dict[str, Any]:
        data = self._request(
            "GET",
            "/groups/picker",
            params={
                "query": query,
                "startAt": start_at or None,
                "maxResults": max_results,
            },
        )
        return self._paginate(data, "groups", start_at, max_results)

    def get_group_members(
        self, group_name: str, start_at: int = 0, max_results: int | None = None
    ) -> dict[str, Any]:
        data = self._request(
            "GET",
            "/group/member",
            params={
                "groupname": group_name,
                "startAt": start_at or None,
                "maxResults": max_results,
            },
        )
        return self._paginate(data, "values", start_at, max_results)
