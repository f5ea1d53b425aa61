"""Response formatting for Jira tool results.

Tools answer either with the raw JSON or with a condensed Markdown rendering.
Paginated envelopes get a per-entity table, bare lists a generic table and
single objects a key/value listing.
"""

import json
import logging
import re
from collections.abc import Callable
from typing import Any, Literal

from ..exceptions import JiraError
from .date import date_only
from .env import DEFAULT_CHARACTER_LIMIT

logger = logging.getLogger("mcp-jira.utils.formatting")

ResponseFormat = Literal["json", "markdown"]

GENERIC_TABLE_COLUMNS = 5
SUMMARY_MAX_LENGTH = 50
TRUNCATION_NOTICE = (
    "\n\n[Response truncated at {limit} characters. "
    "Use pagination (start_at/max_results) or request fewer fields to see more.]"
)


def to_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def split_csv(value: str | None) -> list[str] | None:
    """Split a comma-separated input into trimmed, non-empty entries.

    Args:
        value: Comma-separated string, e.g. "summary, status,,labels"

    Returns:
        List of entries, or None when nothing remains
    """
    if not value:
        return None
    items = [item.strip() for item in value.split(",")]
    items = [item for item in items if item]
    return items or None


def truncate_response(text: str, limit: int | None = None) -> str:
    """Cut text that exceeds the character limit and append a notice."""
    limit = DEFAULT_CHARACTER_LIMIT if limit is None else limit
    if len(text) <= limit:
        return text
    logger.info(f"Truncating response of {len(text)} characters to {limit}")
    return text[:limit] + TRUNCATION_NOTICE.format(limit=limit)


def format_response(
    data: Any,
    fmt: ResponseFormat = "json",
    entity_type: str = "items",
    character_limit: int | None = None,
) -> str:
    """Render a tool result as JSON or Markdown.

    Args:
        data: Result returned by the fetcher
        fmt: "json" or "markdown"
        entity_type: Plural entity name, selects the Markdown table layout
        character_limit: Maximum length of the rendered text

    Returns:
        The rendered text, truncated to the character limit
    """
    if fmt == "markdown":
        text = format_as_markdown(data, entity_type)
    else:
        text = to_json(data)
    return truncate_response(text, character_limit)


def success_response(message: str, **entities: Any) -> str:
    """Render the result of a write operation.

    Example:
        success_response("Issue PROJ-1 created", issue={"key": "PROJ-1"})
    """
    payload: dict[str, Any] = {"success": True, "message": message}
    payload.update(entities)
    return to_json(payload)


def format_error_response(error: Exception) -> str:
    """Render an exception as the JSON error payload of a failed tool call."""
    if isinstance(error, JiraError):
        message = f"Error: {error.message}"
        if error.retryable:
            message += " (retryable)"
        details = error.to_dict()
    else:
        message = f"Error: {error}"
        details = {"type": type(error).__name__, "message": str(error)}
    return to_json({"error": message, "details": details})


def format_as_markdown(data: Any, entity_type: str) -> str:
    if is_paginated(data):
        return format_paginated(data, entity_type)
    if isinstance(data, list):
        return format_generic_table(data)
    if isinstance(data, dict):
        return format_object(data, entity_type)
    return str(data)


def is_paginated(data: Any) -> bool:
    return isinstance(data, dict) and isinstance(data.get("items"), list)


def format_paginated(data: dict[str, Any], entity_type: str) -> str:
    items = data["items"]
    lines = [f"## {_capitalize(entity_type)}", ""]

    count = data.get("count", len(items))
    if data.get("total") is not None:
        lines.append(f"**Total:** {data['total']} | **Showing:** {count}")
    else:
        lines.append(f"**Showing:** {count}")

    if data.get("hasMore"):
        next_start = (data.get("startAt") or 0) + (data.get("maxResults") or 0)
        lines.append(f"**More available:** Yes (startAt: {next_start})")
    lines.append("")

    if not items:
        lines.append("_No items found._")
        return "\n".join(lines)

    table = ENTITY_TABLES.get(entity_type, format_generic_table)
    lines.append(table(items))
    return "\n".join(lines)


def _table(headers: list[str], rows: list[list[Any]]) -> str:
    lines = [
        "| " + " | ".join(headers) + " |",
        "|" + "|".join("---" for _ in headers) + "|",
    ]
    for row in rows:
        lines.append("| " + " | ".join(_cell(value) for value in row) + " |")
    return "\n".join(lines)


def _cell(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _name(value: Any, key: str = "name", default: str = "-") -> str:
    if isinstance(value, dict) and value.get(key):
        return str(value[key])
    return default


def _yes_no(value: Any) -> str:
    return "Yes" if value else "No"


def _shorten(text: str | None, max_length: int) -> str:
    text = text or ""
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


def format_issues_table(issues: list[dict[str, Any]]) -> str:
    rows = []
    for issue in issues:
        fields = issue.get("fields") or {}
        rows.append(
            [
                issue.get("key"),
                _shorten(fields.get("summary"), SUMMARY_MAX_LENGTH),
                _name(fields.get("status")),
                _name(fields.get("priority")),
                _name(fields.get("assignee"), "displayName", "Unassigned"),
                _name(fields.get("issuetype")),
            ]
        )
    return _table(["Key", "Summary", "Status", "Priority", "Assignee", "Type"], rows)


def format_projects_table(projects: list[dict[str, Any]]) -> str:
    rows = [
        [
            project.get("key"),
            project.get("name"),
            project.get("projectTypeKey"),
            _name(project.get("lead"), "displayName"),
        ]
        for project in projects
    ]
    return _table(["Key", "Name", "Type", "Lead"], rows)


def format_users_table(users: list[dict[str, Any]]) -> str:
    rows = [
        [
            user.get("accountId"),
            user.get("displayName"),
            user.get("emailAddress") or "-",
            _yes_no(user.get("active")),
        ]
        for user in users
    ]
    return _table(["Account ID", "Display Name", "Email", "Active"], rows)


def format_boards_table(boards: list[dict[str, Any]]) -> str:
    rows = [
        [
            board.get("id"),
            board.get("name"),
            board.get("type"),
            _name(board.get("location"), "projectKey"),
        ]
        for board in boards
    ]
    return _table(["ID", "Name", "Type", "Project"], rows)


def format_sprints_table(sprints: list[dict[str, Any]]) -> str:
    rows = [
        [
            sprint.get("id"),
            sprint.get("name"),
            sprint.get("state"),
            date_only(sprint.get("startDate")),
            date_only(sprint.get("endDate")),
        ]
        for sprint in sprints
    ]
    return _table(["ID", "Name", "State", "Start", "End"], rows)


def format_comments_table(comments: list[dict[str, Any]]) -> str:
    rows = [
        [
            comment.get("id"),
            _name(comment.get("author"), "displayName", "Unknown"),
            date_only(comment.get("created")),
            date_only(comment.get("updated")),
        ]
        for comment in comments
    ]
    return _table(["ID", "Author", "Created", "Updated"], rows)


def format_worklogs_table(worklogs: list[dict[str, Any]]) -> str:
    rows = [
        [
            worklog.get("id"),
            _name(worklog.get("author"), "displayName", "Unknown"),
            worklog.get("timeSpent"),
            date_only(worklog.get("started")),
            date_only(worklog.get("created")),
        ]
        for worklog in worklogs
    ]
    return _table(["ID", "Author", "Time Spent", "Started", "Created"], rows)


def format_filters_table(filters: list[dict[str, Any]]) -> str:
    rows = [
        [
            jql_filter.get("id"),
            jql_filter.get("name"),
            _name(jql_filter.get("owner"), "displayName"),
            _yes_no(jql_filter.get("favourite")),
        ]
        for jql_filter in filters
    ]
    return _table(["ID", "Name", "Owner", "Favourite"], rows)


def format_dashboards_table(dashboards: list[dict[str, Any]]) -> str:
    rows = [
        [
            dashboard.get("id"),
            dashboard.get("name"),
            _name(dashboard.get("owner"), "displayName"),
            _yes_no(dashboard.get("isFavourite")),
        ]
        for dashboard in dashboards
    ]
    return _table(["ID", "Name", "Owner", "Favourite"], rows)


def format_generic_table(items: list[Any]) -> str:
    """Tabulate the first five keys of the first item."""
    if not items:
        return "_No items_"
    first = items[0]
    if not isinstance(first, dict):
        return "\n".join(f"- {item}" for item in items)

    keys = list(first)[:GENERIC_TABLE_COLUMNS]
    rows = [
        [item.get(key) if isinstance(item, dict) else None for key in keys]
        for item in items
    ]
    return _table(keys, rows)


def format_object(data: dict[str, Any], entity_type: str) -> str:
    lines = [f"## {_capitalize(re.sub(r's$', '', entity_type))}", ""]
    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, dict | list):
            lines.append(f"**{format_key(key)}:**")
            lines.append("```json")
            lines.append(to_json(value))
            lines.append("```")
        else:
            lines.append(f"**{format_key(key)}:** {_cell(value)}")
    return "\n".join(lines)


def format_key(key: str) -> str:
    """Turn a camelCase key into Title Case ("issueType" -> "Issue Type")."""
    spaced = re.sub(r"([A-Z])", r" \1", key).strip()
    return spaced[:1].upper() + spaced[1:]


def _capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


ENTITY_TABLES: dict[str, Callable[[list[dict[str, Any]]], str]] = {
    "issues": format_issues_table,
    "projects": format_projects_table,
    "users": format_users_table,
    "boards": format_boards_table,
    "sprints": format_sprints_table,
    "comments": format_comments_table,
    "worklogs": format_worklogs_table,
    "filters": format_filters_table,
    "dashboards": format_dashboards_table,
}
