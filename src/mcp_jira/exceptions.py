"""Exception hierarchy for Jira API interactions."""

from typing import Any


class JiraError(Exception):
    """Base class for errors raised while talking to Jira."""

    retryable: bool = False

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        """Structured details included in tool error payloads."""
        details: dict[str, Any] = {
            "type": type(self).__name__,
            "message": self.message,
        }
        if self.status_code is not None:
            details["statusCode"] = self.status_code
        details["retryable"] = self.retryable
        return details


class JiraConfigurationError(JiraError, ValueError):
    """Tenant domain or credentials are missing."""


class JiraApiError(JiraError):
    """Generic non-2xx response from the Jira API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message, status_code)
        self.retryable = status_code is not None and status_code >= 500


class JiraAuthenticationError(JiraApiError):
    """Credentials were rejected (HTTP 401) or could not be resolved."""

    def __init__(
        self, message: str = "Authentication failed. Check your credentials."
    ) -> None:
        super().__init__(message, 401)


class JiraPermissionError(JiraApiError):
    """The authenticated user lacks access (HTTP 403)."""

    def __init__(
        self, message: str = "Permission denied. Check your access rights."
    ) -> None:
        super().__init__(message, 403)


class JiraRateLimitError(JiraApiError):
    """Jira throttled the request (HTTP 429)."""

    DEFAULT_RETRY_AFTER = 60

    def __init__(
        self, message: str = "Rate limit exceeded", retry_after: int | None = None
    ) -> None:
        super().__init__(message, 429)
        self.retry_after = (
            retry_after if retry_after is not None else self.DEFAULT_RETRY_AFTER
        )
        self.retryable = True

    def to_dict(self) -> dict[str, Any]:
        details = super().to_dict()
        details["retryAfter"] = self.retry_after
        return details
