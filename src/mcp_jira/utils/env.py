"""Environment variable helpers."""

import logging
import os

logger = logging.getLogger("mcp-jira.utils.env")

TRUTHY_VALUES = ("true", "1", "yes", "y", "on")

DEFAULT_CHARACTER_LIMIT = 50000
DEFAULT_PAGE_SIZE = 20
DEFAULT_MAX_PAGE_SIZE = 100


def is_env_truthy(name: str, default: str = "false") -> bool:
    """Check whether an environment variable holds a truthy value."""
    return os.getenv(name, default).strip().lower() in TRUTHY_VALUES


def get_env_int(name: str, default: int) -> int:
    """Read an integer environment variable.

    Args:
        name: Variable name
        default: Value used when the variable is unset or not an integer

    Returns:
        The parsed integer or the default
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={raw!r}; using {default}.")
        return default


def get_character_limit() -> int:
    return get_env_int("CHARACTER_LIMIT", DEFAULT_CHARACTER_LIMIT)


def get_default_page_size() -> int:
    return get_env_int("DEFAULT_PAGE_SIZE", DEFAULT_PAGE_SIZE)


def get_max_page_size() -> int:
    return get_env_int("MAX_PAGE_SIZE", DEFAULT_MAX_PAGE_SIZE)
