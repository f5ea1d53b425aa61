"""Tests for the Jira users mixin."""

from unittest.mock import MagicMock

import requests

from mcp_jira.exceptions import JiraAuthenticationError


def test_get_myself(jira_fetcher, respond):
    """Test reading the authenticated user."""
    respond({"accountId": "acc-1", "displayName": "Test User"})

    assert jira_fetcher.get_myself()["accountId"] == "acc-1"
    assert jira_fetcher.jira.request.call_args.kwargs["path"] == "rest/api/3/myself"


def test_test_connection_success(jira_fetcher, respond):
    """Test a successful connection check."""
    respond(
        {
            "accountId": "acc-1",
            "displayName": "Test User",
            "emailAddress": "user@example.com",
        }
    )

    assert jira_fetcher.test_connection() == {
        "connected": True,
        "message": "Connected as Test User (user@example.com)",
    }


def test_test_connection_hidden_email(jira_fetcher, respond):
    """Test that the account ID is shown when the email is private."""
    respond({"accountId": "acc-1", "displayName": "Test User"})

    assert jira_fetcher.test_connection()["message"] == (
        "Connected as Test User (acc-1)"
    )


def test_test_connection_auth_failure(jira_fetcher, respond):
    """Test that an authentication failure is reported, not raised."""
    respond(status_code=401)

    result = jira_fetcher.test_connection()

    assert result == {
        "connected": False,
        "message": JiraAuthenticationError().message,
    }


def test_test_connection_network_failure(jira_fetcher):
    """Test that transport errors are reported, not raised."""
    jira_fetcher.jira.request = MagicMock(
        side_effect=requests.ConnectionError("Name or service not known")
    )

    result = jira_fetcher.test_connection()

    assert result["connected"] is False
    assert "Name or service not known" in result["message"]


def test_get_user(jira_fetcher, respond):
    """Test reading a user by account ID."""
    respond({"accountId": "acc-2"})

    jira_fetcher.get_user("acc-2")

    assert jira_fetcher.jira.request.call_args.kwargs["params"] == {
        "accountId": "acc-2"
    }


def test_search_users_full_page(jira_fetcher, respond):
    """Test that a full page of users reports more results."""
    respond([{"accountId": "a"}, {"accountId": "b"}])

    result = jira_fetcher.search_users("smith", max_results=2)

    assert result == {
        "items": [{"accountId": "a"}, {"accountId": "b"}],
        "count": 2,
        "startAt": 0,
        "maxResults": 2,
        "hasMore": True,
    }


def test_search_users_partial_page(jira_fetcher, respond):
    """Test that a short page reports no more results."""
    respond([{"accountId": "a"}])

    result = jira_fetcher.search_users("smith", start_at=20, max_results=10)

    assert result["hasMore"] is False
    assert result["startAt"] == 20
    assert jira_fetcher.jira.request.call_args.kwargs["params"] == {
        "query": "smith",
        "startAt": 20,
        "maxResults": 10,
    }


def test_search_users_without_page_size(jira_fetcher, respond):
    """Test the envelope when no page size was requested."""
    respond([{"accountId": "a"}])

    result = jira_fetcher.search_users("smith")

    assert result["maxResults"] == 1
    assert result["hasMore"] is False


def test_find_assignable_users(jira_fetcher, respond):
    """Test assignable user lookup for a project."""
    respond([])

    result = jira_fetcher.find_assignable_users(project_key="PROJ", max_results=5)

    assert result["items"] == []
    kwargs = jira_fetcher.jira.request.call_args.kwargs
    assert kwargs["path"] == "rest/api/3/user/assignable/search"
    assert kwargs["params"] == {"project": "PROJ", "maxResults": 5}


def test_list_groups(jira_fetcher, respond):
    """Test the group picker, which reports a total but no offset."""
    respond(
        {
            "header": "Showing 2 of 7 matching groups",
            "total": 7,
            "groups": [{"name": "admins"}, {"name": "devs"}],
        }
    )

    result = jira_fetcher.list_groups(query="d", max_results=2)

    assert result["count"] == 2
    assert result["total"] == 7
    assert result["startAt"] == 0
    assert result["maxResults"] == 2
    assert result["hasMore"] is True


def test_get_group_members(jira_fetcher, respond):
    """Test listing the members of a group."""
    respond(
        {
            "startAt": 0,
            "maxResults": 50,
            "total": 1,
            "isLast": True,
            "values": [{"accountId": "a"}],
        }
    )

    result = jira_fetcher.get_group_members("devs")

    assert result["hasMore"] is False
    assert jira_fetcher.jira.request.call_args.kwargs["params"] == {
        "groupname": "devs"
    }
