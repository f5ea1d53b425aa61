"""Annotated parameter types shared by the Jira tool servers."""

from typing import Annotated, Literal

from pydantic import Field

StartAt = Annotated[
    int,
    Field(description="Starting index for pagination (0-based)", ge=0),
]

MaxResults = Annotated[
    int | None,
    Field(
        description=(
            "Maximum number of results (1-100). Defaults to the server's "
            "DEFAULT_PAGE_SIZE and is capped at MAX_PAGE_SIZE."
        ),
        ge=1,
        le=100,
    ),
]

ResponseFormat = Annotated[
    Literal["json", "markdown"],
    Field(description="Output format: 'json' (raw data) or 'markdown' (condensed)"),
]

IssueKey = Annotated[str, Field(description="Jira issue key or ID (e.g., 'PROJ-123')")]

ProjectKey = Annotated[str, Field(description="Jira project key or ID (e.g., 'PROJ')")]

IssueKeys = Annotated[
    str,
    Field(description="Comma-separated issue keys (e.g., 'PROJ-1,PROJ-2')"),
]
