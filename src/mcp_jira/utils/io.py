"""I/O utility functions for the Jira MCP server."""

from .env import is_env_truthy


def is_read_only_mode() -> bool:
    """Check if the server is running in read-only mode.

    Read-only mode prevents all write operations (create, update, delete,
    move) while allowing all read operations, for every tenant served.

    Returns:
        True if read-only mode is enabled, False otherwise
    """
    return is_env_truthy("READ_ONLY_MODE")
