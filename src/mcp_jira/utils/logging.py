"""Logging utilities for the Jira MCP server.

All loggers in this package live under the ``mcp-jira`` namespace, so a single
level applies to the client, the tool layer and the HTTP middleware.
"""

import logging

APP_LOGGER = "mcp-jira"


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Configure mcp-jira logging with a single stream handler.

    Args:
        level: The minimum logging level to display (default: WARNING)

    Returns:
        The configured application logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to prevent duplication
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(levelname)s - %(name)s - %(message)s")
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    for logger_name in (APP_LOGGER, "mcp.server", "mcp.server.lowlevel.server"):
        logging.getLogger(logger_name).setLevel(level)

    return logging.getLogger(APP_LOGGER)


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Masks sensitive strings for logging.

    Args:
        value: The string to mask
        keep_chars: Number of characters to keep visible at start and end

    Returns:
        Masked string with most characters replaced by asterisks
    """
    if not value:
        return "Not Provided"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    return f"{value[:keep_chars]}{'*' * (len(value) - keep_chars * 2)}{value[-keep_chars:]}"


def log_config_param(
    logger: logging.Logger,
    param: str,
    value: str | int | bool | None,
    sensitive: bool = False,
) -> None:
    """Logs a configuration parameter, masking if sensitive.

    Args:
        logger: The logger to use
        param: The parameter name
        value: The parameter value
        sensitive: Whether the value should be masked
    """
    if sensitive:
        display_value = mask_sensitive(str(value) if value is not None else None)
    else:
        display_value = "Not Provided" if value is None else str(value)
    logger.info(f"{param}: {display_value}")
