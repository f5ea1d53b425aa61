"""Tests for the Jira metadata mixin."""

import pytest


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("get_issue_types", "rest/api/3/issuetype"),
        ("get_priorities", "rest/api/3/priority"),
        ("get_statuses", "rest/api/3/status"),
        ("get_resolutions", "rest/api/3/resolution"),
        ("get_fields", "rest/api/3/field"),
    ],
)
def test_list_lookups(jira_fetcher, respond, method, path):
    """Test the site-wide lookup lists."""
    respond([{"id": "1", "name": "One"}])

    assert getattr(jira_fetcher, method)() == [{"id": "1", "name": "One"}]
    assert jira_fetcher.jira.request.call_args.kwargs["path"] == path


def test_get_project_issue_types(jira_fetcher, respond):
    """Test issue types for a project ID."""
    respond([{"id": "10001", "name": "Story"}])

    jira_fetcher.get_project_issue_types("10000")

    kwargs = jira_fetcher.jira.request.call_args.kwargs
    assert kwargs["path"] == "rest/api/3/issuetype/project"
    assert kwargs["params"] == {"projectId": "10000"}


def test_get_project_statuses_deduplicates(jira_fetcher, respond):
    """Test that statuses shared between issue types appear once, in order."""
    respond(
        [
            {
                "name": "Bug",
                "statuses": [
                    {"id": "1", "name": "To Do"},
                    {"id": "3", "name": "Done"},
                ],
            },
            {
                "name": "Story",
                "statuses": [
                    {"id": 1, "name": "To Do"},
                    {"id": "2", "name": "In Progress"},
                ],
            },
        ]
    )

    statuses = jira_fetcher.get_project_statuses("PROJ")

    assert [s["name"] for s in statuses] == ["To Do", "Done", "In Progress"]
    assert statuses[0]["id"] == "1"


def test_get_project_statuses_empty(jira_fetcher, respond):
    """Test a project without issue types."""
    respond([])

    assert jira_fetcher.get_project_statuses("PROJ") == []


def test_get_labels(jira_fetcher, respond):
    """Test paged label listing."""
    respond(
        {
            "startAt": 0,
            "maxResults": 2,
            "total": 5,
            "isLast": False,
            "values": ["a", "b"],
        }
    )

    result = jira_fetcher.get_labels(max_results=2)

    assert result["items"] == ["a", "b"]
    assert result["hasMore"] is True


def test_get_server_info(jira_fetcher, respond):
    """Test reading server information."""
    respond({"baseUrl": "https://test.atlassian.net", "deploymentType": "Cloud"})

    assert jira_fetcher.get_server_info()["deploymentType"] == "Cloud"
