"""Tests for tool filtering utilities."""

import os
from unittest.mock import patch

import pytest

from mcp_jira.utils.tools import get_enabled_tools, should_include_tool


def test_get_enabled_tools_not_set(clean_env):
    assert get_enabled_tools() is None


def test_get_enabled_tools_empty_string():
    with patch.dict(os.environ, {"ENABLED_TOOLS": ""}):
        assert get_enabled_tools() is None


def test_get_enabled_tools_only_separators():
    with patch.dict(os.environ, {"ENABLED_TOOLS": " , ,"}):
        assert get_enabled_tools() is None


def test_get_enabled_tools_strips_whitespace():
    with patch.dict(
        os.environ, {"ENABLED_TOOLS": " jira_get_issue , jira_search_issues,"}
    ):
        assert get_enabled_tools() == ["jira_get_issue", "jira_search_issues"]


@pytest.mark.parametrize(
    ("name", "tags", "enabled", "read_only", "expected"),
    [
        ("jira_get_issue", {"jira", "read"}, None, False, True),
        ("jira_create_issue", {"jira", "write"}, None, False, True),
        ("jira_create_issue", {"jira", "write"}, None, True, False),
        ("jira_get_issue", {"jira", "read"}, None, True, True),
        ("jira_get_issue", {"jira", "read"}, ["jira_get_issue"], False, True),
        ("jira_get_project", {"jira", "read"}, ["jira_get_issue"], False, False),
        ("jira_create_issue", {"jira", "write"}, ["jira_create_issue"], True, False),
    ],
)
def test_should_include_tool(name, tags, enabled, read_only, expected):
    assert should_include_tool(name, tags, enabled, read_only) is expected
