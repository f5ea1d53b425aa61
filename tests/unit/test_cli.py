"""Tests for the mcp-jira command line entry point."""

import os
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from mcp_jira import main
from mcp_jira.servers import main_mcp


@pytest.fixture
def run_server():
    """Patch out the server start and capture the run arguments."""
    with (
        patch.dict(os.environ, {}, clear=True),
        patch("mcp_jira.load_dotenv"),
        patch.object(main_mcp, "run_async", MagicMock()) as mock_run_async,
        patch("mcp_jira.asyncio.run") as mock_asyncio_run,
    ):
        yield mock_run_async, mock_asyncio_run


def test_default_stdio(run_server):
    mock_run_async, mock_asyncio_run = run_server

    result = CliRunner().invoke(main, [])

    assert result.exit_code == 0, result.output
    mock_run_async.assert_called_once_with(transport="stdio")
    mock_asyncio_run.assert_called_once_with(mock_run_async.return_value)


def test_streamable_http_options(run_server):
    mock_run_async, _ = run_server

    result = CliRunner().invoke(
        main,
        ["--transport", "streamable-http", "--port", "9000", "--path", "/jira"],
    )

    assert result.exit_code == 0, result.output
    kwargs = mock_run_async.call_args.kwargs
    assert kwargs["transport"] == "streamable-http"
    assert kwargs["port"] == 9000
    assert kwargs["host"] == "0.0.0.0"  # noqa: S104
    assert kwargs["path"] == "/jira"
    assert kwargs["stateless_http"] is True


def test_transport_from_environment(run_server):
    mock_run_async, _ = run_server
    os.environ.update({"TRANSPORT": "streamable-http", "PORT": "8123"})

    result = CliRunner().invoke(main, [])

    assert result.exit_code == 0, result.output
    kwargs = mock_run_async.call_args.kwargs
    assert kwargs["transport"] == "streamable-http"
    assert kwargs["port"] == 8123
    assert "path" not in kwargs


def test_invalid_transport_in_environment_falls_back(run_server):
    mock_run_async, _ = run_server
    os.environ["TRANSPORT"] = "sse"

    result = CliRunner().invoke(main, [])

    assert result.exit_code == 0, result.output
    assert mock_run_async.call_args.kwargs == {"transport": "stdio"}


def test_options_exported_to_environment(run_server):
    result = CliRunner().invoke(
        main,
        [
            "--jira-domain",
            "acme",
            "--jira-email",
            "a@acme.com",
            "--jira-token",
            "tok",
            "--read-only",
            "--enabled-tools",
            "jira_get_issue",
        ],
    )

    assert result.exit_code == 0, result.output
    assert os.environ["JIRA_DOMAIN"] == "acme"
    assert os.environ["JIRA_EMAIL"] == "a@acme.com"
    assert os.environ["JIRA_API_TOKEN"] == "tok"
    assert os.environ["READ_ONLY_MODE"] == "true"
    assert os.environ["ENABLED_TOOLS"] == "jira_get_issue"
