"""
Utility functions for the Jira MCP server.

This package provides helpers for environment parsing, logging, response
formatting and tool decoration.
"""

from .date import date_only, parse_date
from .env import (
    get_character_limit,
    get_default_page_size,
    get_env_int,
    get_max_page_size,
    is_env_truthy,
)
from .formatting import (
    format_error_response,
    format_response,
    split_csv,
    success_response,
)
from .io import is_read_only_mode
from .logging import mask_sensitive, setup_logging
from .tools import get_enabled_tools, should_include_tool

__all__ = [
    "date_only",
    "format_error_response",
    "format_response",
    "get_character_limit",
    "get_default_page_size",
    "get_enabled_tools",
    "get_env_int",
    "get_max_page_size",
    "is_env_truthy",
    "is_read_only_mode",
    "mask_sensitive",
    "parse_date",
    "setup_logging",
    "should_include_tool",
    "split_csv",
    "success_response",
]
