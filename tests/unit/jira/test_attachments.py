"""Tests for the Jira attachments mixin."""


def test_get_attachments(jira_fetcher, respond):
    """Test that attachments are read from the issue's attachment field."""
    attachment = {"id": "5", "filename": "log.txt", "size": 12}
    respond({"key": "PROJ-1", "fields": {"attachment": [attachment]}})

    assert jira_fetcher.get_attachments("PROJ-1") == [attachment]
    kwargs = jira_fetcher.jira.request.call_args.kwargs
    assert kwargs["path"] == "rest/api/3/issue/PROJ-1"
    assert kwargs["params"] == {"fields": "attachment"}


def test_get_attachments_none(jira_fetcher, respond):
    """Test an issue without attachments."""
    respond({"key": "PROJ-1", "fields": {}})

    assert jira_fetcher.get_attachments("PROJ-1") == []


def test_delete_attachment(jira_fetcher, respond):
    """Test deleting an attachment."""
    respond(status_code=204)

    jira_fetcher.delete_attachment("5")

    kwargs = jira_fetcher.jira.request.call_args.kwargs
    assert kwargs["method"] == "DELETE"
    assert kwargs["path"] == "rest/api/3/attachment/5"
