"""Tests for the pagination envelope model."""

import pytest

from mcp_jira.models import ApiModel, PaginatedResponse


def test_from_api_response_with_total():
    page = PaginatedResponse.from_api_response(
        {"startAt": 20, "maxResults": 10, "total": 25, "issues": [1, 2, 3, 4, 5]},
        items_key="issues",
    )

    assert page.count == 5
    assert page.start_at == 20
    assert page.has_more is False
    assert page.to_simplified_dict() == {
        "items": [1, 2, 3, 4, 5],
        "count": 5,
        "total": 25,
        "startAt": 20,
        "maxResults": 10,
        "hasMore": False,
    }


def test_from_api_response_total_wins_over_is_last():
    page = PaginatedResponse.from_api_response(
        {"startAt": 0, "maxResults": 2, "total": 3, "isLast": True, "values": [1, 2]}
    )

    assert page.has_more is True


@pytest.mark.parametrize(("is_last", "has_more"), [(True, False), (False, True)])
def test_from_api_response_is_last(is_last, has_more):
    page = PaginatedResponse.from_api_response(
        {"startAt": 0, "maxResults": 1, "isLast": is_last, "values": [1]}
    )

    assert page.has_more is has_more
    assert "total" not in page.to_simplified_dict()


def test_from_api_response_uses_requested_paging():
    page = PaginatedResponse.from_api_response(
        {"groups": [{"name": "a"}]}, items_key="groups", start_at=5, max_results=10
    )

    assert page.start_at == 5
    assert page.max_results == 10
    assert page.has_more is False


def test_from_api_response_empty():
    page = PaginatedResponse.from_api_response(None)

    assert page.items == []
    assert page.count == 0
    assert page.max_results == 0


def test_from_list():
    assert PaginatedResponse.from_list([1, 2], 0, 2).has_more is True
    assert PaginatedResponse.from_list([1], 0, 2).has_more is False
    assert PaginatedResponse.from_list(None, 0, 2).items == []


def test_aliases_on_dump():
    page = PaginatedResponse(items=[1], count=1, startAt=3, maxResults=1, hasMore=True)

    assert page.model_dump(by_alias=True)["startAt"] == 3


def test_base_model_requires_override():
    with pytest.raises(NotImplementedError):
        ApiModel.from_api_response({})
