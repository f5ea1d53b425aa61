"""Tests for the Jira Worklog mixin."""


def test_get_worklogs(jira_fetcher, respond):
    """Test listing worklogs."""
    respond(
        {
            "startAt": 0,
            "maxResults": 20,
            "total": 1,
            "worklogs": [{"id": "1", "timeSpent": "1h"}],
        }
    )

    result = jira_fetcher.get_worklogs("PROJ-1")

    assert result["items"][0]["timeSpent"] == "1h"
    assert result["total"] == 1
    assert jira_fetcher.jira.request.call_args.kwargs["params"] is None


def test_add_worklog(jira_fetcher, respond):
    """Test logging work with a start time and comment."""
    respond({"id": "200"})

    result = jira_fetcher.add_worklog(
        "PROJ-1",
        time_spent="2h 30m",
        started="2024-01-15T09:00:00.000+0000",
        comment="Pairing",
    )

    assert result == {"id": "200"}
    body = jira_fetcher.jira.request.call_args.kwargs["json"]
    assert body["timeSpent"] == "2h 30m"
    assert body["started"] == "2024-01-15T09:00:00.000+0000"
    assert body["comment"]["type"] == "doc"


def test_update_worklog(jira_fetcher, respond):
    """Test updating an existing worklog."""
    respond({"id": "200"})

    jira_fetcher.update_worklog("PROJ-1", "200", time_spent="3h")

    kwargs = jira_fetcher.jira.request.call_args.kwargs
    assert kwargs["method"] == "PUT"
    assert kwargs["path"] == "rest/api/3/issue/PROJ-1/worklog/200"
    assert kwargs["json"] == {"timeSpent": "3h"}


def test_delete_worklog(jira_fetcher, respond):
    """Test deleting a worklog."""
    respond(status_code=204)

    jira_fetcher.delete_worklog("PROJ-1", "200")

    kwargs = jira_fetcher.jira.request.call_args.kwargs
    assert kwargs["method"] == "DELETE"
    assert kwargs["path"] == "rest/api/3/issue/PROJ-1/worklog/200"
