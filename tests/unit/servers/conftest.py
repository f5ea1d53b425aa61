"""Fixtures for the Jira tool server tests."""

from collections.abc import AsyncGenerator
from contextlib import ExitStack, asynccontextmanager
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastmcp import Client, FastMCP
from fastmcp.client import FastMCPTransport

from mcp_jira.jira import JiraFetcher
from mcp_jira.servers.agile import agile_mcp
from mcp_jira.servers.comments import comments_mcp
from mcp_jira.servers.connection import connection_mcp
from mcp_jira.servers.context import MainAppContext
from mcp_jira.servers.filters import filters_mcp
from mcp_jira.servers.issues import issues_mcp
from mcp_jira.servers.main import JiraMCP
from mcp_jira.servers.metadata import metadata_mcp
from mcp_jira.servers.projects import projects_mcp
from mcp_jira.servers.users import users_mcp

TOOL_MODULES = (
    "issues",
    "comments",
    "projects",
    "agile",
    "users",
    "metadata",
    "filters",
    "connection",
)

DOMAIN_SERVERS = (
    issues_mcp,
    comments_mcp,
    projects_mcp,
    agile_mcp,
    users_mcp,
    metadata_mcp,
    filters_mcp,
    connection_mcp,
)


@pytest.fixture
def mock_jira_fetcher():
    """Create a mock JiraFetcher with the tenant URL set."""
    mock_fetcher = MagicMock(spec=JiraFetcher)
    mock_fetcher.config = MagicMock()
    mock_fetcher.config.url = "https://test.atlassian.net"
    return mock_fetcher


@pytest.fixture
def app_context():
    """Server-wide settings yielded by the test lifespan."""
    return MainAppContext()


def build_test_mcp(app_context: MainAppContext) -> JiraMCP:
    @asynccontextmanager
    async def test_lifespan(app: FastMCP) -> AsyncGenerator[dict, None]:
        yield {"app_lifespan_context": app_context}

    test_mcp = JiraMCP(name="TestJira", lifespan=test_lifespan)
    for domain_server in DOMAIN_SERVERS:
        test_mcp.mount(domain_server, prefix="jira")
    return test_mcp


@pytest.fixture
def test_jira_mcp(app_context):
    """Create a test JiraMCP instance with every domain server mounted."""
    return build_test_mcp(app_context)


@pytest.fixture
def patched_fetcher(mock_jira_fetcher):
    """Make every tool module resolve the mock fetcher."""
    with ExitStack() as stack:
        for module in TOOL_MODULES:
            stack.enter_context(
                patch(
                    f"mcp_jira.servers.{module}.get_jira_fetcher",
                    AsyncMock(return_value=mock_jira_fetcher),
                )
            )
        yield mock_jira_fetcher


@pytest.fixture
async def jira_client(test_jira_mcp, patched_fetcher):
    """Create a FastMCP client talking to the test server in memory."""
    async with Client(transport=FastMCPTransport(test_jira_mcp)) as client_instance:
        yield client_instance


@pytest.fixture
def client_factory(patched_fetcher):
    """Open clients against servers with custom server-wide settings."""

    @asynccontextmanager
    async def _client(app_context: MainAppContext):
        test_mcp = build_test_mcp(app_context)
        async with Client(transport=FastMCPTransport(test_mcp)) as client_instance:
            yield client_instance

    return _client


@pytest.fixture
def call_tool():
    """Call a tool and return (is_error, first text content)."""

    async def _call(client: Client, name: str, arguments: dict | None = None):
        result = await client.call_tool_mcp(name, arguments or {})
        return result.isError, result.content[0].text

    return _call
