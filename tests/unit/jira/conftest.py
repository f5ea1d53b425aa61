"""Test fixtures for Jira unit tests."""

import json
import os
from typing import Any
from unittest.mock import MagicMock, patch

import pytest
from requests import Response

from mcp_jira.jira import JiraFetcher
from mcp_jira.jira.config import JiraConfig


def _build_response(
    status_code: int = 200,
    body: Any = None,
    headers: dict[str, str] | None = None,
    raw: bytes | None = None,
) -> Response:
    response = Response()
    response.status_code = status_code
    if raw is not None:
        response._content = raw
    elif body is not None:
        response._content = json.dumps(body).encode("utf-8")
    else:
        response._content = b""
    response.headers.update(headers or {})
    return response


@pytest.fixture
def make_response():
    """Factory for requests.Response objects as returned in advanced mode."""
    return _build_response


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing."""
    with patch.dict(
        os.environ,
        {
            "JIRA_DOMAIN": "test",
            "JIRA_EMAIL": "user@example.com",
            "JIRA_API_TOKEN": "test_token",
        },
        clear=True,  # Clear existing environment variables
    ):
        yield


@pytest.fixture
def mock_config():
    """Create a JiraConfig for a basic-auth tenant."""
    return JiraConfig(domain="test", email="user@example.com", api_token="test_token")


@pytest.fixture
def mock_atlassian_jira():
    """Patch the Atlassian Jira client used by JiraClient."""
    with patch("mcp_jira.jira.client.Jira") as mock_jira_class:
        mock_jira_class.return_value = MagicMock()
        yield mock_jira_class


@pytest.fixture
def jira_fetcher(mock_config, mock_atlassian_jira):
    """Create a JiraFetcher whose HTTP layer answers 200 with an empty object."""
    fetcher = JiraFetcher(config=mock_config)
    fetcher.jira.request.return_value = _build_response(200, {})
    return fetcher


@pytest.fixture
def respond(jira_fetcher):
    """Set the body the mocked Jira API returns for the next calls."""

    def _respond(body: Any = None, status_code: int = 200, **kwargs: Any) -> None:
        jira_fetcher.jira.request.return_value = _build_response(
            status_code, body, **kwargs
        )

    return _respond
