"""Utility functions for date operations."""

import logging
from datetime import datetime, timezone

import dateutil.parser

logger = logging.getLogger("mcp-jira.utils.date")


def parse_date(date_str: str | int | None) -> datetime | None:
    """
    Parse a Jira date value to a datetime object.

    The input accepts:
    - None
    - Epoch timestamp in milliseconds (int or digit-only string)
    - Other formats supported by `dateutil.parser` (ISO 8601, RFC 3339, etc.)

    Args:
        date_str: Date value

    Returns:
        Parsed datetime or None if date_str is None / empty string
    """
    if not date_str:
        return None
    if isinstance(date_str, int) or date_str.isdigit():
        return datetime.fromtimestamp(int(date_str) / 1000, tz=timezone.utc)
    return dateutil.parser.parse(date_str)


def date_only(value: str | int | None, default: str = "-") -> str:
    """Render the calendar date part of a Jira timestamp (YYYY-MM-DD).

    Values that cannot be parsed are cut at the ``T`` separator instead.
    """
    if not value:
        return default
    try:
        parsed = parse_date(value)
    except (ValueError, OverflowError):
        logger.debug(f"Could not parse date value {value!r}")
        return str(value).split("T")[0]
    return parsed.date().isoformat() if parsed else default
