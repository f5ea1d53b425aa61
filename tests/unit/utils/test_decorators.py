import json
from unittest.mock import MagicMock

import pytest
from fastmcp.exceptions import ToolError

from mcp_jira.exceptions import JiraRateLimitError
from mcp_jira.utils.decorators import check_write_access, handle_tool_errors


class DummyContext:
    def __init__(self, read_only):
        self.request_context = MagicMock()
        self.request_context.lifespan_context = {
            "app_lifespan_context": MagicMock(read_only=read_only)
        }


@pytest.mark.anyio
async def test_check_write_access_blocks_in_read_only():
    @check_write_access
    async def create_issue(ctx, x):
        return x * 2

    ctx = DummyContext(read_only=True)
    with pytest.raises(ValueError) as exc:
        await create_issue(ctx, 3)
    assert str(exc.value) == "Cannot create issue in read-only mode."


@pytest.mark.anyio
async def test_check_write_access_allows_in_writable():
    @check_write_access
    async def create_issue(ctx, x):
        return x * 2

    ctx = DummyContext(read_only=False)
    assert await create_issue(ctx, 4) == 8


@pytest.mark.anyio
async def test_check_write_access_without_lifespan_context():
    @check_write_access
    async def create_issue(ctx):
        return "ok"

    ctx = MagicMock()
    ctx.request_context.lifespan_context = None
    assert await create_issue(ctx) == "ok"


@pytest.mark.anyio
async def test_handle_tool_errors_passes_results():
    @handle_tool_errors
    async def get_issue():
        return "result"

    assert await get_issue() == "result"


@pytest.mark.anyio
async def test_handle_tool_errors_wraps_jira_errors():
    @handle_tool_errors
    async def get_issue():
        raise JiraRateLimitError(retry_after=30)

    with pytest.raises(ToolError) as exc:
        await get_issue()

    payload = json.loads(str(exc.value))
    assert payload["error"] == "Error: Rate limit exceeded (retryable)"
    assert payload["details"]["statusCode"] == 429
    assert payload["details"]["retryAfter"] == 30
    assert isinstance(exc.value.__cause__, JiraRateLimitError)


@pytest.mark.anyio
async def test_handle_tool_errors_wraps_other_errors():
    @handle_tool_errors
    async def get_issue():
        raise ValueError("bad input")

    with pytest.raises(ToolError) as exc:
        await get_issue()

    payload = json.loads(str(exc.value))
    assert payload == {
        "error": "Error: bad input",
        "details": {"type": "ValueError", "message": "bad input"},
    }


@pytest.mark.anyio
async def test_handle_tool_errors_keeps_tool_errors():
    @handle_tool_errors
    async def get_issue():
        raise ToolError("already formatted")

    with pytest.raises(ToolError, match="already formatted"):
        await get_issue()
