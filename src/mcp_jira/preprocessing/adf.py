"""Atlassian Document Format (ADF) helpers.

Jira Cloud REST v3 expects descriptions, comment bodies and worklog comments
as ADF documents rather than plain strings.
"""

from typing import Any

ADF_VERSION = 1


def is_adf_document(value: Any) -> bool:
    """Check whether a value is already an ADF document."""
    return isinstance(value, dict) and value.get("type") == "doc"


def text_to_adf(value: str | dict[str, Any] | None) -> dict[str, Any] | None:
    """Wrap plain text into a single-paragraph ADF document.

    Args:
        value: Plain text, an existing ADF document, or None

    Returns:
        The ADF document. Existing documents are returned unchanged and
        None stays None.
    """
    if value is None:
        return None
    if is_adf_document(value):
        return value
    return {
        "type": "doc",
        "version": ADF_VERSION,
        "content": [
            {
                "type": "paragraph",
                "content": [{"type": "text", "text": str(value)}],
            }
        ],
    }
