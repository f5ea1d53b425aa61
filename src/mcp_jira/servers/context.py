from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mcp_jira.utils.env import (
    DEFAULT_CHARACTER_LIMIT,
    DEFAULT_MAX_PAGE_SIZE,
    DEFAULT_PAGE_SIZE,
)

if TYPE_CHECKING:
    from mcp_jira.jira.config import JiraConfig


@dataclass(frozen=True)
class MainAppContext:
    """
    Server-wide settings loaded from environment variables at startup.

    Tenant credentials normally arrive with each HTTP request; the fallback
    configuration is only used when no request headers exist (stdio).
    """

    fallback_jira_config: JiraConfig | None = None
    read_only: bool = False
    enabled_tools: list[str] | None = None
    character_limit: int = DEFAULT_CHARACTER_LIMIT
    default_page_size: int = DEFAULT_PAGE_SIZE
    max_page_size: int = DEFAULT_MAX_PAGE_SIZE
