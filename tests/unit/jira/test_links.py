"""Tests for the Jira issue link mixin."""


def test_get_issue_link_types(jira_fetcher, respond):
    """Test listing link types."""
    respond({"issueLinkTypes": [{"id": "1", "name": "Blocks"}]})

    assert jira_fetcher.get_issue_link_types() == [{"id": "1", "name": "Blocks"}]
    assert (
        jira_fetcher.jira.request.call_args.kwargs["path"]
        == "rest/api/3/issueLinkType"
    )


def test_create_issue_link(jira_fetcher, respond):
    """Test linking two issues with a comment."""
    respond(status_code=201)

    jira_fetcher.create_issue_link("Blocks", "PROJ-1", "PROJ-2", comment="Linked")

    body = jira_fetcher.jira.request.call_args.kwargs["json"]
    assert body["type"] == {"name": "Blocks"}
    assert body["inwardIssue"] == {"key": "PROJ-1"}
    assert body["outwardIssue"] == {"key": "PROJ-2"}
    assert body["comment"]["body"]["type"] == "doc"


def test_delete_issue_link(jira_fetcher, respond):
    """Test deleting a link by ID."""
    respond(status_code=204)

    jira_fetcher.delete_issue_link("10050")

    kwargs = jira_fetcher.jira.request.call_args.kwargs
    assert kwargs["method"] == "DELETE"
    assert kwargs["path"] == "rest/api/3/issueLink/10050"
