"""Tests for the Jira Comments mixin."""

from mcp_jira.preprocessing import text_to_adf


def test_get_comments(jira_fetcher, respond):
    """Test that comments are returned as a pagination envelope."""
    respond(
        {
            "startAt": 0,
            "maxResults": 2,
            "total": 2,
            "comments": [{"id": "1"}, {"id": "2"}],
        }
    )

    result = jira_fetcher.get_comments("PROJ-1", max_results=2)

    assert [c["id"] for c in result["items"]] == ["1", "2"]
    assert result["hasMore"] is False
    kwargs = jira_fetcher.jira.request.call_args.kwargs
    assert kwargs["path"] == "rest/api/3/issue/PROJ-1/comment"
    assert kwargs["params"] == {"maxResults": 2}


def test_get_comments_offset(jira_fetcher, respond):
    """Test that a non-zero offset is sent."""
    respond({"startAt": 5, "maxResults": 5, "total": 20, "comments": [{}] * 5})

    result = jira_fetcher.get_comments("PROJ-1", start_at=5, max_results=5)

    assert jira_fetcher.jira.request.call_args.kwargs["params"] == {
        "startAt": 5,
        "maxResults": 5,
    }
    assert result["hasMore"] is True


def test_get_comment(jira_fetcher, respond):
    """Test fetching a single comment."""
    respond({"id": "100"})

    assert jira_fetcher.get_comment("PROJ-1", "100") == {"id": "100"}
    assert (
        jira_fetcher.jira.request.call_args.kwargs["path"]
        == "rest/api/3/issue/PROJ-1/comment/100"
    )


def test_add_comment_wraps_text(jira_fetcher, respond):
    """Test that a plain text comment body is sent as ADF."""
    respond({"id": "101"})

    result = jira_fetcher.add_comment("PROJ-1", "Looks good")

    assert result == {"id": "101"}
    kwargs = jira_fetcher.jira.request.call_args.kwargs
    assert kwargs["method"] == "POST"
    assert kwargs["json"] == {"body": text_to_adf("Looks good")}


def test_update_comment(jira_fetcher, respond):
    """Test replacing a comment body."""
    respond({"id": "101"})

    jira_fetcher.update_comment("PROJ-1", "101", "Edited")

    kwargs = jira_fetcher.jira.request.call_args.kwargs
    assert kwargs["method"] == "PUT"
    assert kwargs["path"] == "rest/api/3/issue/PROJ-1/comment/101"


def test_delete_comment(jira_fetcher, respond):
    """Test deleting a comment."""
    respond(status_code=204)

    assert jira_fetcher.delete_comment("PROJ-1", "101") is None
    assert jira_fetcher.jira.request.call_args.kwargs["method"] == "DELETE"
