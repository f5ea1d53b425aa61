"""Main FastMCP server setup for the multi-tenant Jira integration."""

import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from typing import Any

import fastmcp
import mcp.types as mt
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.server.middleware import CallNext, MiddlewareContext
from fastmcp.server.middleware import Middleware as MCPMiddleware
from fastmcp.tools import Tool as FastMCPTool
from fastmcp.tools.tool import ToolResult
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response

from mcp_jira.exceptions import JiraConfigurationError
from mcp_jira.jira.config import REQUIRED_HEADERS, JiraConfig
from mcp_jira.utils.env import (
    get_character_limit,
    get_default_page_size,
    get_max_page_size,
)
from mcp_jira.utils.formatting import format_error_response
from mcp_jira.utils.io import is_read_only_mode
from mcp_jira.utils.logging import log_config_param
from mcp_jira.utils.tools import get_enabled_tools, should_include_tool

from .agile import agile_mcp
from .comments import comments_mcp
from .connection import connection_mcp
from .context import MainAppContext
from .dependencies import get_app_context
from .filters import filters_mcp
from .issues import issues_mcp
from .metadata import metadata_mcp
from .projects import projects_mcp
from .users import users_mcp

logger = logging.getLogger("mcp-jira.server.main")

SERVER_NAME = "mcp-jira"
SERVER_VERSION = "1.0.0"
SERVER_DESCRIPTION = "Multi-tenant MCP server for the Jira Cloud REST and Agile APIs"

DOMAIN_TAGS = (
    "issues",
    "comments",
    "projects",
    "agile",
    "users",
    "metadata",
    "filters",
    "connection",
)

SSE_NOT_SUPPORTED = (
    "SSE endpoint is not supported in stateless mode. "
    "Use the /mcp endpoint with X-Jira-* headers."
)


@asynccontextmanager
async def main_lifespan(app: FastMCP) -> AsyncIterator[dict]:
    logger.info("Main Jira MCP server lifespan starting...")
    read_only = is_read_only_mode()
    enabled_tools = get_enabled_tools()

    fallback_config: JiraConfig | None = None
    env_config = JiraConfig.from_env()
    if env_config.is_auth_configured():
        fallback_config = env_config
        logger.info(f"Fallback Jira configuration loaded for {env_config.url}.")
        log_config_param(logger, "JIRA_DOMAIN", env_config.domain)
        log_config_param(logger, "Auth type", env_config.auth_type)
        log_config_param(logger, "JIRA_EMAIL", env_config.email)
        log_config_param(
            logger, "JIRA_API_TOKEN", env_config.api_token, sensitive=True
        )
        log_config_param(
            logger, "JIRA_ACCESS_TOKEN", env_config.access_token, sensitive=True
        )
    elif env_config.domain:
        logger.warning(
            "JIRA_DOMAIN is set, but credentials are incomplete. "
            "Tools will require X-Jira-* request headers."
        )

    app_context = MainAppContext(
        fallback_jira_config=fallback_config,
        read_only=read_only,
        enabled_tools=enabled_tools,
        character_limit=get_character_limit(),
        default_page_size=get_default_page_size(),
        max_page_size=get_max_page_size(),
    )
    logger.info(f"Read-only mode: {'ENABLED' if read_only else 'DISABLED'}")
    logger.info(f"Enabled tools filter: {enabled_tools or 'All tools enabled'}")
    yield {"app_lifespan_context": app_context}
    logger.info("Main Jira MCP server lifespan shutting down.")


class ToolFilterMiddleware(MCPMiddleware):
    """Applies READ_ONLY_MODE and ENABLED_TOOLS to tool listings and calls.

    Write tools remain callable in read-only mode; check_write_access refuses them.
    """

    async def on_list_tools(
        self,
        context: MiddlewareContext[mt.ListToolsRequest],
        call_next: CallNext[mt.ListToolsRequest, Sequence[FastMCPTool]],
    ) -> Sequence[FastMCPTool]:
        tools = await call_next(context)
        app_ctx = self._app_context(context)
        filtered_tools = [
            tool
            for tool in tools
            if should_include_tool(
                tool.key, tool.tags, app_ctx.enabled_tools, app_ctx.read_only
            )
        ]
        logger.debug(
            f"ToolFilterMiddleware: {len(filtered_tools)} of {len(tools)} tools listed"
        )
        return filtered_tools

    async def on_call_tool(
        self,
        context: MiddlewareContext[mt.CallToolRequestParams],
        call_next: CallNext[mt.CallToolRequestParams, ToolResult],
    ) -> ToolResult:
        tool_name = context.message.name
        enabled_tools = self._app_context(context).enabled_tools
        if enabled_tools is not None and tool_name not in enabled_tools:
            logger.warning(f"Refusing call to tool '{tool_name}': not enabled.")
            raise ToolError(
                format_error_response(ValueError(f"Tool '{tool_name}' is not enabled."))
            )
        return await call_next(context)

    @staticmethod
    def _app_context(context: MiddlewareContext[Any]) -> MainAppContext:
        if context.fastmcp_context is None:
            return MainAppContext()
        return get_app_context(context.fastmcp_context)


class JiraMCP(FastMCP):
    """Custom FastMCP server class for Jira with tool filtering and tenant middleware."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.mcp_http_path: str = fastmcp.settings.streamable_http_path
        self.add_middleware(ToolFilterMiddleware())

    def http_app(
        self,
        path: str | None = None,
        middleware: list[Middleware] | None = None,
        **kwargs: Any,
    ) -> Starlette:
        mcp_path = path or fastmcp.settings.streamable_http_path
        self.mcp_http_path = mcp_path
        tenant_mw = Middleware(TenantCredentialsMiddleware, mcp_path=mcp_path)
        final_middleware_list = [tenant_mw]
        if middleware:
            final_middleware_list.extend(middleware)
        return super().http_app(path=path, middleware=final_middleware_list, **kwargs)


class TenantCredentialsMiddleware(BaseHTTPMiddleware):
    """Middleware resolving the tenant's Jira credentials from X-Jira-* headers.

    Requests to the MCP endpoint without a usable domain and credential set
    are rejected with 401 before they reach the MCP handler.
    """

    def __init__(self, app: Any, mcp_path: str = "/mcp") -> None:
        super().__init__(app)
        self.mcp_path = mcp_path.rstrip("/") or "/"

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_path = request.url.path.rstrip("/") or "/"
        if request_path != self.mcp_path or request.method != "POST":
            return await call_next(request)

        config = JiraConfig.from_headers(request.headers)
        try:
            config.validate()
        except JiraConfigurationError as e:
            logger.warning(f"Rejecting MCP request without tenant credentials: {e}")
            return JSONResponse(
                {
                    "error": "Unauthorized",
                    "message": e.message,
                    "required_headers": REQUIRED_HEADERS,
                },
                status_code=401,
            )

        logger.debug(
            f"TenantCredentialsMiddleware: tenant={config.url}, auth_type={config.auth_type}"
        )
        request.state.jira_config = config
        return await call_next(request)


main_mcp = JiraMCP(
    name=SERVER_NAME,
    instructions=(
        "Tools for Jira Cloud: issues, comments, worklogs, projects, boards, "
        "sprints, epics, users, filters and dashboards. All tools are prefixed "
        "with 'jira_'."
    ),
    lifespan=main_lifespan,
)
for domain_server in (
    issues_mcp,
    comments_mcp,
    projects_mcp,
    agile_mcp,
    users_mcp,
    metadata_mcp,
    filters_mcp,
    connection_mcp,
):
    main_mcp.mount(domain_server, prefix="jira")


async def health_check(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok", "server": SERVER_NAME})


async def sse_not_supported(request: Request) -> PlainTextResponse:
    return PlainTextResponse(SSE_NOT_SUPPORTED, status_code=501)


async def server_info(request: Request) -> JSONResponse:
    tools = await main_mcp.get_tools()
    grouped: dict[str, list[str]] = {domain: [] for domain in DOMAIN_TAGS}
    for name, tool in sorted(tools.items()):
        domain = next((tag for tag in DOMAIN_TAGS if tag in tool.tags), "other")
        grouped.setdefault(domain, []).append(name)

    mcp_path = main_mcp.mcp_http_path
    return JSONResponse(
        {
            "name": SERVER_NAME,
            "version": SERVER_VERSION,
            "description": SERVER_DESCRIPTION,
            "endpoints": {
                "mcp": f"{mcp_path} (POST) - Streamable HTTP MCP endpoint",
                "health": "/health - Health check",
            },
            "authentication": {
                "required_headers": REQUIRED_HEADERS,
                "description": (
                    "Send X-Jira-Domain with either X-Jira-Email + X-Jira-API-Token "
                    "(basic auth) or X-Jira-Access-Token (OAuth 2.0) on every request."
                ),
            },
            "tools": {domain: names for domain, names in grouped.items() if names},
        }
    )


@main_mcp.custom_route("/health", methods=["GET"], include_in_schema=False)
async def _health_check_route(request: Request) -> JSONResponse:
    return await health_check(request)


@main_mcp.custom_route("/sse", methods=["GET", "POST"], include_in_schema=False)
async def _sse_route(request: Request) -> PlainTextResponse:
    return await sse_not_supported(request)


@main_mcp.custom_route("/", methods=["GET"], include_in_schema=False)
async def _server_info_route(request: Request) -> JSONResponse:
    return await server_info(request)
