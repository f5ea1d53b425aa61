"""Unit tests for the project, agile, user, metadata and filter tool servers."""

import json
from unittest.mock import AsyncMock, patch

import pytest

from mcp_jira.exceptions import JiraConfigurationError
from mcp_jira.utils.formatting import to_json


@pytest.mark.anyio
async def test_list_projects_markdown(jira_client, call_tool, mock_jira_fetcher):
    """Test the projects table."""
    mock_jira_fetcher.list_projects.return_value = {
        "items": [
            {
                "key": "PROJ",
                "name": "Project",
                "projectTypeKey": "software",
                "lead": {"displayName": "Ada"},
            }
        ],
        "count": 1,
        "total": 1,
        "startAt": 0,
        "maxResults": 20,
        "hasMore": False,
    }

    is_error, text = await call_tool(
        jira_client, "jira_list_projects", {"format": "markdown"}
    )

    assert is_error is False
    assert "| PROJ | Project | software | Ada |" in text


@pytest.mark.anyio
async def test_release_version(jira_client, call_tool, mock_jira_fetcher):
    """Test releasing a version."""
    is_error, text = await call_tool(
        jira_client, "jira_release_version", {"version_id": "10"}
    )

    assert is_error is False
    assert json.loads(text) == {"success": True, "message": "Version released"}
    mock_jira_fetcher.release_version.assert_called_once_with("10")


@pytest.mark.anyio
async def test_list_boards_type_filter(jira_client, call_tool, mock_jira_fetcher):
    """Test that the board type argument reaches the fetcher."""
    mock_jira_fetcher.list_boards.return_value = {
        "items": [],
        "count": 0,
        "startAt": 0,
        "maxResults": 20,
        "hasMore": False,
    }

    is_error, text = await call_tool(
        jira_client, "jira_list_boards", {"type": "kanban", "format": "markdown"}
    )

    assert is_error is False
    assert "_No items found._" in text
    kwargs = mock_jira_fetcher.list_boards.call_args.kwargs
    assert kwargs["board_type"] == "kanban"
    assert kwargs["max_results"] == 20


@pytest.mark.anyio
async def test_list_boards_invalid_type(jira_client, call_tool, mock_jira_fetcher):
    """Test that unknown board types are rejected."""
    is_error, _ = await call_tool(jira_client, "jira_list_boards", {"type": "gantt"})

    assert is_error is True
    mock_jira_fetcher.list_boards.assert_not_called()


@pytest.mark.anyio
async def test_move_issues_to_sprint(jira_client, call_tool, mock_jira_fetcher):
    """Test that comma-separated keys are split."""
    is_error, text = await call_tool(
        jira_client,
        "jira_move_issues_to_sprint",
        {"sprint_id": 4, "issue_keys": "PROJ-1, PROJ-2"},
    )

    assert is_error is False
    assert json.loads(text)["message"] == "Moved 2 issues to sprint"
    mock_jira_fetcher.move_issues_to_sprint.assert_called_once_with(
        4, ["PROJ-1", "PROJ-2"]
    )


@pytest.mark.anyio
async def test_move_issues_requires_keys(jira_client, call_tool, mock_jira_fetcher):
    """Test that an empty key list is rejected before calling Jira."""
    is_error, text = await call_tool(
        jira_client, "jira_move_issues_to_backlog", {"issue_keys": " , "}
    )

    assert is_error is True
    assert json.loads(text)["error"] == "Error: At least one issue key is required."
    mock_jira_fetcher.move_issues_to_backlog.assert_not_called()


@pytest.mark.anyio
async def test_complete_sprint(jira_client, call_tool, mock_jira_fetcher):
    """Test completing a sprint and moving open issues."""
    is_error, text = await call_tool(
        jira_client,
        "jira_complete_sprint",
        {"sprint_id": 4, "move_to_sprint_id": 5},
    )

    assert is_error is False
    assert json.loads(text)["message"] == "Sprint completed"
    mock_jira_fetcher.complete_sprint.assert_called_once_with(4, move_to_sprint_id=5)


@pytest.mark.anyio
async def test_remove_issues_from_epic(jira_client, call_tool, mock_jira_fetcher):
    """Test detaching issues from their epic."""
    is_error, text = await call_tool(
        jira_client, "jira_remove_issues_from_epic", {"issue_keys": "PROJ-3"}
    )

    assert is_error is False
    assert json.loads(text)["message"] == "Removed 1 issues from epic"


@pytest.mark.anyio
async def test_find_assignable_users_requires_scope(
    jira_client, call_tool, mock_jira_fetcher
):
    """Test that a project or issue key is required."""
    is_error, text = await call_tool(
        jira_client, "jira_find_assignable_users", {"query": "ada"}
    )

    assert is_error is True
    assert "Either project_key or issue_key is required." in text
    mock_jira_fetcher.find_assignable_users.assert_not_called()


@pytest.mark.anyio
async def test_search_users_markdown(jira_client, call_tool, mock_jira_fetcher):
    """Test the users table."""
    mock_jira_fetcher.search_users.return_value = {
        "items": [{"accountId": "acc-1", "displayName": "Ada", "active": True}],
        "count": 1,
        "startAt": 0,
        "maxResults": 20,
        "hasMore": False,
    }

    is_error, text = await call_tool(
        jira_client, "jira_search_users", {"query": "ada", "format": "markdown"}
    )

    assert is_error is False
    assert "| acc-1 | Ada | - | Yes |" in text


@pytest.mark.anyio
async def test_add_watcher(jira_client, call_tool, mock_jira_fetcher):
    """Test adding a watcher."""
    is_error, text = await call_tool(
        jira_client,
        "jira_add_watcher",
        {"issue_key": "PROJ-1", "account_id": "acc-1"},
    )

    assert is_error is False
    assert json.loads(text)["message"] == "Watcher created"
    mock_jira_fetcher.add_watcher.assert_called_once_with("PROJ-1", "acc-1")


@pytest.mark.anyio
async def test_get_project_statuses(jira_client, call_tool, mock_jira_fetcher):
    """Test that the project statuses are returned as JSON."""
    mock_jira_fetcher.get_project_statuses.return_value = [{"id": "1", "name": "Open"}]

    is_error, text = await call_tool(
        jira_client, "jira_get_project_statuses", {"project_key": "PROJ"}
    )

    assert is_error is False
    assert json.loads(text) == [{"id": "1", "name": "Open"}]


@pytest.mark.anyio
async def test_create_issue_link(jira_client, call_tool, mock_jira_fetcher):
    """Test linking issues."""
    is_error, text = await call_tool(
        jira_client,
        "jira_create_issue_link",
        {
            "type": "Blocks",
            "inward_issue_key": "PROJ-1",
            "outward_issue_key": "PROJ-2",
        },
    )

    assert is_error is False
    assert json.loads(text)["message"] == "Issue link created"
    mock_jira_fetcher.create_issue_link.assert_called_once_with(
        "Blocks", "PROJ-1", "PROJ-2", comment=None
    )


@pytest.mark.anyio
async def test_get_labels_default_page(jira_client, call_tool, mock_jira_fetcher):
    """Test that labels default to pages of 100."""
    mock_jira_fetcher.get_labels.return_value = {
        "items": ["a"],
        "count": 1,
        "total": 1,
        "startAt": 0,
        "maxResults": 100,
        "hasMore": False,
    }

    is_error, _ = await call_tool(jira_client, "jira_get_labels")

    assert is_error is False
    mock_jira_fetcher.get_labels.assert_called_once_with(start_at=0, max_results=100)


@pytest.mark.anyio
async def test_get_my_filters_markdown(jira_client, call_tool, mock_jira_fetcher):
    """Test that unpaged filter lists render the filters table."""
    mock_jira_fetcher.get_my_filters.return_value = [
        {"id": "7", "name": "Bugs", "owner": {"displayName": "Ada"}, "favourite": True}
    ]

    is_error, text = await call_tool(
        jira_client, "jira_get_my_filters", {"format": "markdown"}
    )

    assert is_error is False
    assert "## Filters" in text
    assert "| 7 | Bugs | Ada | Yes |" in text


@pytest.mark.anyio
async def test_create_filter(jira_client, call_tool, mock_jira_fetcher):
    """Test saving a filter."""
    mock_jira_fetcher.create_filter.return_value = {"id": "8", "name": "Mine"}

    is_error, text = await call_tool(
        jira_client,
        "jira_create_filter",
        {"name": "Mine", "jql": "assignee = currentUser()"},
    )

    assert is_error is False
    assert json.loads(text)["filter"] == {"id": "8", "name": "Mine"}


@pytest.mark.anyio
async def test_test_connection(jira_client, call_tool, mock_jira_fetcher):
    """Test that the connection check reports the fetcher's result."""
    mock_jira_fetcher.test_connection.return_value = {
        "connected": True,
        "message": "Connected as Ada (ada@example.com)",
    }

    is_error, text = await call_tool(jira_client, "jira_test_connection")

    assert is_error is False
    assert text == to_json(mock_jira_fetcher.test_connection.return_value)


@pytest.mark.anyio
async def test_test_connection_keeps_unicode(
    jira_client, call_tool, mock_jira_fetcher
):
    """Test that display names are returned as-is, not escaped."""
    mock_jira_fetcher.test_connection.return_value = {
        "connected": True,
        "message": "Connected as Zoë Müller (acc-1)",
    }

    _, text = await call_tool(jira_client, "jira_test_connection")

    assert "Zoë Müller" in text


@pytest.mark.anyio
async def test_test_connection_without_credentials(
    jira_client, call_tool, mock_jira_fetcher
):
    """Test that missing credentials are reported without failing the call."""
    with patch(
        "mcp_jira.servers.connection.get_jira_fetcher",
        AsyncMock(side_effect=JiraConfigurationError("Missing credentials.")),
    ):
        is_error, text = await call_tool(jira_client, "jira_test_connection")

    assert is_error is False
    assert json.loads(text) == {"connected": False, "message": "Missing credentials."}
