"""Constants specific to Jira operations."""

# Fields returned by issue searches when no specific fields are requested.
DEFAULT_SEARCH_FIELDS: list[str] = [
    "summary",
    "status",
    "priority",
    "assignee",
    "reporter",
    "project",
    "issuetype",
    "created",
    "updated",
    "labels",
    "components",
]

DEFAULT_SEARCH_LIMIT = 50
