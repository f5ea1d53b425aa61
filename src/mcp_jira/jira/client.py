"""Base client module for Jira API interactions."""

import logging
from typing import Any

from atlassian import Jira
from requests import Response, Session

from ..exceptions import (
    JiraApiError,
    JiraAuthenticationError,
    JiraPermissionError,
    JiraRateLimitError,
)
from ..models import PaginatedResponse
from ..preprocessing import text_to_adf
from .config import AGILE_API_PATH, REST_API_PATH, JiraConfig

# Configure logging
logger = logging.getLogger("mcp-jira")


class JiraClient:
    """Base client for Jira Cloud REST and Agile API interactions.

    One instance serves one tenant. All requests go through ``_request``,
    which maps HTTP status codes onto the exception hierarchy.
    """

    config: JiraConfig

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with tenant configuration.

        Args:
            config: Tenant configuration (will use env vars if not provided)

        Raises:
            JiraConfigurationError: If the domain or credentials are missing
        """
        self.config = config or JiraConfig.from_env()
        self.config.validate()

        session = Session()
        session.headers.update(
            {
                "Authorization": self.config.auth_header(),
                "Content-Type": "application/json",
                "Accept": "application/json",
            }
        )

        self.jira = Jira(url=self.config.url, session=session, cloud=True)
        logger.debug(
            f"Initialized Jira client for {self.config.url} "
            f"(auth_type={self.config.auth_type})"
        )

    def _request(
        self,
        method: str,
        endpoint: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        data: Any = None,
        agile: bool = False,
    ) -> Any:
        """Send a request to the REST (or Agile) API and decode the result.

        Args:
            method: HTTP method
            endpoint: Path below the API base, e.g. "/issue/PROJ-1"
            params: Query parameters; None values are dropped
            json: JSON body
            data: Raw body, serialised to JSON by the underlying client
            agile: Use the Agile API base instead of REST v3

        Returns:
            Decoded JSON, or None for empty (204) responses

        Raises:
            JiraRateLimitError: On HTTP 429
            JiraAuthenticationError: On HTTP 401
            JiraPermissionError: On HTTP 403
            JiraApiError: On any other non-2xx status
        """
        base = AGILE_API_PATH if agile else REST_API_PATH
        path = f"{base}/{endpoint.lstrip('/')}"
        query = self._clean_params(params)
        logger.debug(f"{method} {path} params={query}")
        response = self.jira.request(
            method=method,
            path=path,
            params=query,
            json=json,
            data=data,
            advanced_mode=True,
        )
        return self._handle_response(response)

    @staticmethod
    def _clean_params(params: dict[str, Any] | None) -> dict[str, Any] | None:
        if not params:
            return None
        cleaned: dict[str, Any] = {}
        for key, value in params.items():
            if value is None:
                continue
            if isinstance(value, bool):
                cleaned[key] = "true" if value else "false"
            elif isinstance(value, list | tuple):
                cleaned[key] = ",".join(str(v) for v in value)
            else:
                cleaned[key] = value
        return cleaned or None

    def _handle_response(self, response: Response) -> Any:
        status = response.status_code

        if status == 429:
            retry_after = self._parse_retry_after(response.headers.get("Retry-After"))
            logger.warning(f"Jira rate limit hit; retry after {retry_after}s")
            raise JiraRateLimitError("Rate limit exceeded", retry_after)
        if status == 401:
            raise JiraAuthenticationError()
        if status == 403:
            raise JiraPermissionError()
        if not response.ok:
            message = self._extract_error_message(response)
            logger.error(f"Jira API error {status}: {message}")
            raise JiraApiError(message, status)

        if status == 204 or not response.content:
            return None
        return response.json()

    @staticmethod
    def _parse_retry_after(value: str | None) -> int | None:
        if not value:
            return None
        try:
            return int(value.strip())
        except ValueError:
            return None

    @staticmethod
    def _extract_error_message(response: Response) -> str:
        """Pick the most specific message out of a Jira error envelope."""
        default = f"Jira API error: {response.status_code}"
        try:
            body = response.json()
        except ValueError:
            return default
        if not isinstance(body, dict):
            return default

        error_messages = body.get("errorMessages")
        if error_messages:
            return "; ".join(str(m) for m in error_messages)
        errors = body.get("errors")
        if errors:
            return "; ".join(f"{key}: {value}" for key, value in errors.items())
        if body.get("message"):
            return str(body["message"])
        return default

    @staticmethod
    def _compact(**values: Any) -> dict[str, Any]:
        """Build a request body from the values that were actually provided."""
        return {key: value for key, value in values.items() if value is not None}

    def _to_adf(self, value: str | dict[str, Any] | None) -> dict[str, Any] | None:
        return text_to_adf(value)

    def _paginate(
        self,
        data: dict[str, Any],
        items_key: str = "values",
        start_at: int = 0,
        max_results: int | None = None,
    ) -> dict[str, Any]:
        return PaginatedResponse.from_api_response(
            data, items_key=items_key, start_at=start_at, max_results=max_results
        ).to_simplified_dict()
