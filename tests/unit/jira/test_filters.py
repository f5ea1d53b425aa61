"""Tests for the Jira filters and dashboards mixin."""


def test_get_my_filters(jira_fetcher, respond):
    """Test listing the user's own filters."""
    respond([{"id": "1", "name": "Mine"}])

    assert jira_fetcher.get_my_filters() == [{"id": "1", "name": "Mine"}]
    assert (
        jira_fetcher.jira.request.call_args.kwargs["path"] == "rest/api/3/filter/my"
    )


def test_get_favourite_filters_empty(jira_fetcher, respond):
    """Test that an empty body gives an empty list."""
    respond(status_code=204)

    assert jira_fetcher.get_favourite_filters() == []


def test_create_filter(jira_fetcher, respond):
    """Test saving a filter."""
    respond({"id": "10", "name": "Open bugs"})

    jira_fetcher.create_filter("Open bugs", "type = Bug AND resolution IS EMPTY")

    kwargs = jira_fetcher.jira.request.call_args.kwargs
    assert kwargs["method"] == "POST"
    assert kwargs["json"] == {
        "name": "Open bugs",
        "jql": "type = Bug AND resolution IS EMPTY",
    }


def test_update_filter(jira_fetcher, respond):
    """Test updating a filter's query."""
    respond({"id": "10"})

    jira_fetcher.update_filter("10", jql="type = Bug", favourite=False)

    assert jira_fetcher.jira.request.call_args.kwargs["json"] == {
        "jql": "type = Bug",
        "favourite": False,
    }


def test_list_dashboards(jira_fetcher, respond):
    """Test paged dashboard listing."""
    respond(
        {
            "startAt": 0,
            "maxResults": 20,
            "total": 1,
            "dashboards": [{"id": "1", "name": "Team"}],
        }
    )

    result = jira_fetcher.list_dashboards(filter="favourite")

    assert result["items"] == [{"id": "1", "name": "Team"}]
    assert jira_fetcher.jira.request.call_args.kwargs["params"] == {
        "filter": "favourite"
    }


def test_get_dashboard(jira_fetcher, respond):
    """Test reading a dashboard."""
    respond({"id": "1"})

    jira_fetcher.get_dashboard("1")

    assert (
        jira_fetcher.jira.request.call_args.kwargs["path"]
        == "rest/api/3/dashboard/1"
    )
