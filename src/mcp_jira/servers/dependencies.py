"""Dependency providers for tool functions.

Provides get_jira_fetcher, which builds a per-tenant JiraFetcher from the
credentials resolved for the current request, and helpers for the
server-wide settings held in the lifespan context.
"""

from __future__ import annotations

import logging

from fastmcp import Context
from fastmcp.server.dependencies import get_http_request
from starlette.requests import Request

from mcp_jira.exceptions import JiraConfigurationError
from mcp_jira.jira import JiraConfig, JiraFetcher
from mcp_jira.servers.context import MainAppContext

logger = logging.getLogger("mcp-jira.servers.dependencies")

_DEFAULT_APP_CONTEXT = MainAppContext()


def get_app_context(ctx: Context) -> MainAppContext:
    """Return the server-wide settings for the current call.

    Falls back to defaults when the lifespan context is unavailable.
    """
    try:
        lifespan_ctx_dict = ctx.request_context.lifespan_context
    except (AttributeError, LookupError, ValueError):
        return _DEFAULT_APP_CONTEXT
    app_lifespan_ctx = (
        lifespan_ctx_dict.get("app_lifespan_context")
        if isinstance(lifespan_ctx_dict, dict)
        else None
    )
    return app_lifespan_ctx or _DEFAULT_APP_CONTEXT


def resolve_page_size(max_results: int | None, app_ctx: MainAppContext) -> int:
    """Apply the configured default and ceiling to a requested page size."""
    if not max_results:
        max_results = app_ctx.default_page_size
    return max(1, min(max_results, app_ctx.max_page_size))


async def get_jira_fetcher(ctx: Context) -> JiraFetcher:
    """Returns a JiraFetcher instance for the tenant of the current request.

    Within an HTTP request the tenant comes from the X-Jira-* headers, which
    the middleware has already parsed into ``request.state.jira_config``.
    Outside HTTP (stdio) the JIRA_* environment configuration loaded at
    startup is used.

    Args:
        ctx: The FastMCP context.

    Returns:
        JiraFetcher instance for the current tenant.

    Raises:
        JiraConfigurationError: If no usable tenant configuration exists.
    """
    try:
        request: Request = get_http_request()
    except RuntimeError:
        logger.debug("Not in an HTTP request context. Using environment config.")
    else:
        fetcher = getattr(request.state, "jira_fetcher", None)
        if fetcher is not None:
            logger.debug("get_jira_fetcher: Returning JiraFetcher from request.state.")
            return fetcher

        config: JiraConfig | None = getattr(request.state, "jira_config", None)
        if config is None:
            config = JiraConfig.from_headers(request.headers)
        fetcher = JiraFetcher(config=config)
        request.state.jira_fetcher = fetcher
        logger.debug(f"get_jira_fetcher: Created JiraFetcher for {config.url}")
        return fetcher

    app_ctx = get_app_context(ctx)
    if app_ctx.fallback_jira_config is not None:
        return JiraFetcher(config=app_ctx.fallback_jira_config)
    logger.error("Jira configuration could not be resolved.")
    raise JiraConfigurationError(
        "Jira credentials not available. Set JIRA_DOMAIN and JIRA_EMAIL + "
        "JIRA_API_TOKEN (or JIRA_ACCESS_TOKEN), or send X-Jira-* headers."
    )
