"""Configuration module for Jira API interactions."""

import base64
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal

from ..exceptions import JiraAuthenticationError, JiraConfigurationError
from ..utils.logging import mask_sensitive

logger = logging.getLogger("mcp-jira.config")

DOMAIN_HEADER = "X-Jira-Domain"
EMAIL_HEADER = "X-Jira-Email"
API_TOKEN_HEADER = "X-Jira-API-Token"
ACCESS_TOKEN_HEADER = "X-Jira-Access-Token"

REQUIRED_HEADERS = [
    DOMAIN_HEADER,
    f"{EMAIL_HEADER} + {API_TOKEN_HEADER} (or {ACCESS_TOKEN_HEADER})",
]

REST_API_PATH = "rest/api/3"
AGILE_API_PATH = "rest/agile/1.0"


@dataclass
class JiraConfig:
    """Credentials for a single Jira Cloud tenant.

    A tenant is identified by its Atlassian subdomain and authenticates either
    with an OAuth 2.0 access token (preferred) or with email + API token.
    """

    domain: str  # Cloud subdomain ("mycompany") or host ("mycompany.atlassian.net")
    email: str | None = None  # Account email (basic auth)
    api_token: str | None = None  # API token (basic auth)
    access_token: str | None = None  # OAuth 2.0 access token

    @property
    def auth_type(self) -> Literal["oauth", "basic"] | None:
        """Authentication scheme resolved from the available credentials."""
        if self.access_token:
            return "oauth"
        if self.email and self.api_token:
            return "basic"
        return None

    @property
    def url(self) -> str:
        """Base site URL, e.g. https://mycompany.atlassian.net."""
        host = self.domain.strip()
        for scheme in ("https://", "http://"):
            if host.lower().startswith(scheme):
                host = host[len(scheme) :]
        host = host.split("/", 1)[0]
        if "." not in host:
            host = f"{host}.atlassian.net"
        return f"https://{host}"

    @property
    def api_url(self) -> str:
        return f"{self.url}/{REST_API_PATH}"

    @property
    def agile_url(self) -> str:
        return f"{self.url}/{AGILE_API_PATH}"

    def is_auth_configured(self) -> bool:
        """Check whether a domain and one complete credential set are present."""
        return bool(self.domain) and self.auth_type is not None

    def validate(self) -> None:
        """Ensure the tenant can be contacted.

        Raises:
            JiraConfigurationError: If the domain or credentials are missing
        """
        if not self.domain:
            raise JiraConfigurationError(
                "Missing X-Jira-Domain header. Provide your Jira Cloud domain."
            )
        if self.auth_type is None:
            raise JiraConfigurationError(
                "Missing credentials. Provide either X-Jira-Email + X-Jira-API-Token "
                "headers, or X-Jira-Access-Token header."
            )

    def auth_header(self) -> str:
        """Build the Authorization header value.

        Returns:
            "Bearer <token>" for OAuth, otherwise "Basic <base64(email:token)>"

        Raises:
            JiraAuthenticationError: If no usable credentials are present
        """
        if self.access_token:
            return f"Bearer {self.access_token}"
        if self.email and self.api_token:
            raw = f"{self.email}:{self.api_token}".encode()
            return f"Basic {base64.b64encode(raw).decode('ascii')}"
        raise JiraAuthenticationError(
            "No credentials provided. Include X-Jira-Email + X-Jira-API-Token "
            "or X-Jira-Access-Token header."
        )

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "JiraConfig":
        """Create configuration from tenant request headers.

        Header lookup is delegated to the mapping, so a case-insensitive
        mapping (such as Starlette's ``Headers``) matches any casing.

        Args:
            headers: Request headers

        Returns:
            JiraConfig with values from the X-Jira-* headers
        """
        config = cls(
            domain=(headers.get(DOMAIN_HEADER) or "").strip(),
            email=headers.get(EMAIL_HEADER) or None,
            api_token=headers.get(API_TOKEN_HEADER) or None,
            access_token=headers.get(ACCESS_TOKEN_HEADER) or None,
        )
        logger.debug(
            f"Parsed tenant headers: domain='{config.domain}', "
            f"auth_type={config.auth_type}, "
            f"api_token={mask_sensitive(config.api_token)}, "
            f"access_token={mask_sensitive(config.access_token)}"
        )
        return config

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        Used when the server runs without HTTP headers (stdio transport).

        Returns:
            JiraConfig with values from JIRA_* environment variables
        """
        return cls(
            domain=os.getenv("JIRA_DOMAIN", "").strip(),
            email=os.getenv("JIRA_EMAIL") or None,
            api_token=os.getenv("JIRA_API_TOKEN") or None,
            access_token=os.getenv("JIRA_ACCESS_TOKEN") or None,
        )
