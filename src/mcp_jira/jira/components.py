"""Module for Jira project component operations."""

import logging
from typing import Any

from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class ComponentsMixin(JiraClient):
    """Mixin for Jira component operations."""

    def get_project_components(self, project_key: str) -> list[dict[str, Any]]:
        return self._request("GET", f"/project/{project_key}/components") or []

    def get_component(self, component_id: str) -> dict[str, Any]:
        return self._request("GET", f"/component/{component_id}")

    def create_component(
        self,
        project: str,
        name: str,
        description: str | None = None,
        lead_account_id: str | None = None,
    ) -> dict[str, Any]:
        """
        Create a component in a project.

        Args:
            project: Project key
            name: Component name
            description: Component description
            lead_account_id: Account ID of the component lead

        Returns:
            The created component
        """
        body = self._compact(
            project=project,
            name=name,
            description=description,
            leadAccountId=lead_account_id,
        )
        result = self._request("POST", "/component", json=body)
        logger.info(f"Created component '{name}' in {project}")
        return result

    def update_component(
        self,
        component_id: str,
        name: str | None = None,
        description: str | None = None,
        lead_account_id: str | None = None,
    ) -> dict[str, Any]:
        body = self._compact(
            name=name, description=description, leadAccountId=lead_account_id
        )
        return self._request("PUT", f"/component/{component_id}", json=body)

    def delete_component(self, component_id: str) -> None:
        self._request("DELETE", f"/component/{component_id}")
