"""Module for Jira sprint operations."""

import logging
from typing import Any

from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class SprintsMixin(JiraClient):
    """Mixin for Jira Agile sprint operations."""

    def list_sprints(
        self,
        board_id: int,
        start_at: int = 0,
        max_results: int | None = None,
        state: str | None = None,
    ) -> dict[str, Any]:
        """
        Get the sprints of a board.

        Args:
            board_id: Board ID
            start_at: Index of the first sprint
            max_results: Maximum number of sprints
            state: future, active or closed

        Returns:
            Pagination envelope of sprints
        """
        data = self._request(
            "GET",
            f"/board/{board_id}/sprint",
            params={
                "startAt": start_at or None,
                "maxResults": max_results,
                "state": state,
            },
            agile=True,
        )
        return self._paginate(data, "values", start_at, max_results)

    def get_sprint(self, sprint_id: int) -> dict[str, Any]:
        return self._request("GET", f"/sprint/{sprint_id}", agile=True)

    def get_sprint_issues(
        self,
        sprint_id: int,
        start_at: int = 0,
        max_results: int | None = None,
        jql: str | None = None,
    ) -> dict[str, Any]:
        data = self._request(
            "GET",
            f"/sprint/{sprint_id}/issue",
            params={
                "startAt": start_at or None,
                "maxResults": max_results,
                "jql": jql,
            },
            agile=True,
        )
        return self._paginate(data, "issues", start_at, max_results)

    def create_sprint(
        self,
        name: str,
        origin_board_id: int,
        start_date: str | None = None,
        end_date: str | None = None,
        goal: str | None = None,
    ) -> dict[str, Any]:
        """
        Create a sprint on a board.

        Args:
            name: Sprint name
            origin_board_id: Board the sprint belongs to
            start_date: ISO 8601 start date
            end_date: ISO 8601 end date
            goal: Sprint goal

        Returns:
            The created sprint
        """
        body = self._compact(
            name=name,
            originBoardId=origin_board_id,
            startDate=start_date,
            endDate=end_date,
            goal=goal,
        )
        result = self._request("POST", "/sprint", json=body, agile=True)
        logger.info(f"Created sprint '{name}' on board {origin_board_id}")
        return result

    def update_sprint(
        self,
        sprint_id: int,
        name: str | None = None,
        state: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
        goal: str | None = None,
    ) -> dict[str, Any]:
        body = self._compact(
            name=name,
            state=state,
            startDate=start_date,
            endDate=end_date,
            goal=goal,
        )
        return self._request("PUT", f"/sprint/{sprint_id}", json=body, agile=True)

    def delete_sprint(self, sprint_id: int) -> None:
        self._request("DELETE", f"/sprint/{sprint_id}", agile=True)

    def start_sprint(
        self,
        sprint_id: int,
        start_date: str,
        end_date: str,
        goal: str | None = None,
    ) -> None:
        """
        Start a future sprint.

        Args:
            sprint_id: Sprint ID
            start_date: ISO 8601 start date
            end_date: ISO 8601 end date
            goal: Sprint goal
        """
        body = self._compact(
            state="active", startDate=start_date, endDate=end_date, goal=goal
        )
        self._request("POST", f"/sprint/{sprint_id}", json=body, agile=True)
        logger.info(f"Started sprint {sprint_id}")

    def complete_sprint(
        self, sprint_id: int, move_to_sprint_id: int | None = None
    ) -> None:
        """
        Close an active sprint.

        Args:
            sprint_id: Sprint ID
            move_to_sprint_id: Sprint that receives the unfinished issues
        """
        body: dict[str, Any] = {"state": "closed"}
        if move_to_sprint_id:
            body["completeSprintId"] = move_to_sprint_id
        self._request("POST", f"/sprint/{sprint_id}", json=body, agile=True)
        logger.info(f"Completed sprint {sprint_id}")

    def move_issues_to_sprint(self, sprint_id: int, issue_keys: list[str]) -> None:
        self._request(
            "POST",
            f"/sprint/{sprint_id}/issue",
            json={"issues": issue_keys},
            agile=True,
        )

    def move_issues_to_backlog(self, issue_keys: list[str]) -> None:
        self._request(
            "POST", "/backlog/issue", json={"issues": issue_keys}, agile=True
        )
