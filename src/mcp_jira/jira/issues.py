"""Module for Jira issue operations."""

import logging
from typing import Any

from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class IssuesMixin(JiraClient):
    """Mixin for Jira issue operations."""

    def get_issue(
        self,
        issue_key: str,
        fields: list[str] | None = None,
        expand: list[str] | None = None,
    ) -> dict[str, Any]:
        """
        Get a single issue.

        Args:
            issue_key: Issue ID or key (e.g. 'PROJ-123')
            fields: Fields to return
            expand: Entities to expand (e.g. changelog, renderedFields)

        Returns:
            The issue as returned by Jira
        """
        return self._request(
            "GET", f"/issue/{issue_key}", params={"fields": fields, "expand": expand}
        )

    def create_issue(
        self,
        project_key: str,
        issue_type: str,
        summary: str,
        description: str | dict[str, Any] | None = None,
        priority: str | None = None,
        assignee_id: str | None = None,
        reporter_id: str | None = None,
        labels: list[str] | None = None,
        components: list[str] | None = None,
        fix_versions: list[str] | None = None,
        due_date: str | None = None,
        parent_key: str | None = None,
        custom_fields: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Create a new issue.

        Args:
            project_key: Project key
            issue_type: Issue type name (e.g. 'Bug', 'Story')
            summary: Issue summary
            description: Plain text or ADF description
            priority: Priority name
            assignee_id: Assignee account ID
            reporter_id: Reporter account ID
            labels: Labels to set
            components: Component names
            fix_versions: Fix version names
            due_date: Due date (YYYY-MM-DD)
            parent_key: Parent issue key (sub-tasks)
            custom_fields: Extra fields merged into the payload as-is

        Returns:
            The created issue reference (id, key, self)
        """
        fields: dict[str, Any] = {
            "project": {"key": project_key},
            "issuetype": {"name": issue_type},
            "summary": summary,
        }
        if description:
            fields["description"] = self._to_adf(description)
        if priority:
            fields["priority"] = {"name": priority}
        if assignee_id:
            fields["assignee"] = {"accountId": assignee_id}
        if reporter_id:
            fields["reporter"] = {"accountId": reporter_id}
        if labels:
            fields["labels"] = labels
        if components:
            fields["components"] = [{"name": name} for name in components]
        if fix_versions:
            fields["fixVersions"] = [{"name": name} for name in fix_versions]
        if due_date:
            fields["duedate"] = due_date
        if parent_key:
            fields["parent"] = {"key": parent_key}
        if custom_fields:
            fields.update(custom_fields)

        result = self._request("POST", "/issue", json={"fields": fields})
        logger.info(f"Created issue {(result or {}).get('key')} in {project_key}")
        return result

    def update_issue(
        self,
        issue_key: str,
        summary: str | None = None,
        description: str | dict[str, Any] | None = None,
        priority: str | None = None,
        assignee_id: str | None = None,
        labels: list[str] | None = None,
        components: list[str] | None = None,
        fix_versions: list[str] | None = None,
        due_date: str | None = None,
        custom_fields: dict[str, Any] | None = None,
    ) -> None:
        """
        Update the provided fields of an issue.

        Only arguments that are not None are sent. An empty ``assignee_id``
        unassigns the issue; empty lists clear labels, components or versions.

        Args:
            issue_key: Issue ID or key
            summary: New summary
            description: New plain text or ADF description
            priority: New priority name
            assignee_id: New assignee account ID ("" to unassign)
            labels: Replacement labels
            components: Replacement component names
            fix_versions: Replacement fix version names
            due_date: New due date (YYYY-MM-DD)
            custom_fields: Extra fields merged into the payload as-is
        """
        fields: dict[str, Any] = {}
        if summary is not None:
            fields["summary"] = summary
        if description is not None:
            fields["description"] = self._to_adf(description)
        if priority is not None:
            fields["priority"] = {"name": priority}
        if assignee_id is not None:
            fields["assignee"] = {"accountId": assignee_id} if assignee_id else None
        if labels is not None:
            fields["labels"] = labels
        if components is not None:
            fields["components"] = [{"name": name} for name in components]
        if fix_versions is not None:
            fields["fixVersions"] = [{"name": name} for name in fix_versions]
        if due_date is not None:
            fields["duedate"] = due_date
        if custom_fields:
            fields.update(custom_fields)

        self._request("PUT", f"/issue/{issue_key}", json={"fields": fields})
        logger.info(f"Updated issue {issue_key}: {sorted(fields)}")

    def delete_issue(self, issue_key: str, delete_subtasks: bool = False) -> None:
        """
        Delete an issue.

        Args:
            issue_key: Issue ID or key
            delete_subtasks: Whether sub-tasks are deleted too
        """
        self._request(
            "DELETE",
            f"/issue/{issue_key}",
            params={"deleteSubtasks": delete_subtasks},
        )
        logger.info(f"Deleted issue {issue_key}")

    def assign_issue(self, issue_key: str, account_id: str | None) -> None:
        """
        Assign an issue, or unassign it when ``account_id`` is empty.
        """
        self._request(
            "PUT",
            f"/issue/{issue_key}/assignee",
            json={"accountId": account_id or None},
        )

    def get_changelog(
        self, issue_key: str, start_at: int = 0, max_results: int | None = None
    ) -> dict[str, Any]:
        """
        Get the change history of an issue.

        Returns:
            Pagination envelope of changelog entries
        """
        data = self._request(
            "GET",
            f"/issue/{issue_key}/changelog",
            params={"startAt": start_at or None, "maxResults": max_results},
        )
        return self._paginate(data, "values", start_at, max_results)
