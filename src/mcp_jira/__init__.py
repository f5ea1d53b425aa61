import asyncio
import logging
import os
import sys

import click
from dotenv import load_dotenv

from mcp_jira.utils.env import is_env_truthy
from mcp_jira.utils.logging import setup_logging

__version__ = "1.0.0"

# Initialize logging with appropriate level
logging_level = logging.WARNING
if is_env_truthy("MCP_VERBOSE"):
    logging_level = logging.DEBUG

# Set up logging using the utility function
logger = setup_logging(logging_level)

TRANSPORTS = ("stdio", "streamable-http")


@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--transport",
    type=click.Choice(TRANSPORTS),
    default="stdio",
    help="Transport type (stdio or streamable-http)",
)
@click.option(
    "--port",
    default=8000,
    help="Port to listen on for Streamable HTTP transport",
)
@click.option(
    "--host",
    default="0.0.0.0",  # noqa: S104
    help="Host to bind to for Streamable HTTP transport (default: 0.0.0.0)",
)
@click.option(
    "--path",
    default="/mcp",
    help="Path for Streamable HTTP transport (e.g., /mcp).",
)
@click.option(
    "--jira-domain",
    help="Fallback Jira Cloud domain for stdio (e.g., mycompany or mycompany.atlassian.net)",
)
@click.option("--jira-email", help="Fallback Jira account email")
@click.option("--jira-token", help="Fallback Jira API token")
@click.option("--jira-access-token", help="Fallback Jira OAuth 2.0 access token")
@click.option(
    "--read-only",
    is_flag=True,
    help="Run in read-only mode (disables all write operations)",
)
@click.option(
    "--enabled-tools",
    help="Comma-separated list of tools to enable (enables all if not specified)",
)
def main(
    verbose: int,
    env_file: str | None,
    transport: str,
    port: int,
    host: str,
    path: str | None,
    jira_domain: str | None,
    jira_email: str | None,
    jira_token: str | None,
    jira_access_token: str | None,
    read_only: bool,
    enabled_tools: str | None,
) -> None:
    """MCP Jira Server - multi-tenant Jira Cloud tools for MCP

    Over Streamable HTTP every request carries its own tenant in X-Jira-*
    headers:
    - X-Jira-Domain
    - X-Jira-Email + X-Jira-API-Token (basic auth), or
    - X-Jira-Access-Token (OAuth 2.0)

    Over stdio the JIRA_* environment variables (or the --jira-* options)
    provide a single tenant.
    """
    # Logging level logic
    if verbose == 1:
        current_logging_level = logging.INFO
    elif verbose >= 2:  # -vv or more
        current_logging_level = logging.DEBUG
    else:
        if is_env_truthy("MCP_VERY_VERBOSE"):
            current_logging_level = logging.DEBUG
        elif is_env_truthy("MCP_VERBOSE"):
            current_logging_level = logging.INFO
        else:
            current_logging_level = logging.WARNING

    global logger
    logger = setup_logging(current_logging_level)
    logger.debug(f"Logging level set to: {logging.getLevelName(current_logging_level)}")

    def was_option_provided(ctx: click.Context, param_name: str) -> bool:
        return (
            ctx.get_parameter_source(param_name)
            != click.core.ParameterSource.DEFAULT_MAP
            and ctx.get_parameter_source(param_name)
            != click.core.ParameterSource.DEFAULT
        )

    if env_file:
        logger.debug(f"Loading environment from file: {env_file}")
        load_dotenv(env_file, override=True)
    else:
        logger.debug(
            "Attempting to load environment from default .env file if it exists"
        )
        load_dotenv(override=True)

    click_ctx = click.get_current_context(silent=True)

    # Transport precedence
    final_transport = os.getenv("TRANSPORT", "stdio").lower()
    if click_ctx and was_option_provided(click_ctx, "transport"):
        final_transport = transport
    if final_transport not in TRANSPORTS:
        logger.warning(
            f"Invalid transport '{final_transport}' from env/default, using 'stdio'."
        )
        final_transport = "stdio"
    logger.debug(f"Final transport determined: {final_transport}")

    # Port precedence
    final_port = 8000
    env_port = os.getenv("PORT")
    if env_port and env_port.isdigit():
        final_port = int(env_port)
    if click_ctx and was_option_provided(click_ctx, "port"):
        final_port = port
    logger.debug(f"Final port for HTTP transport: {final_port}")

    # Host precedence
    final_host = os.getenv("HOST", "0.0.0.0")  # noqa: S104
    if click_ctx and was_option_provided(click_ctx, "host"):
        final_host = host
    logger.debug(f"Final host for HTTP transport: {final_host}")

    # Path precedence
    final_path: str | None = os.getenv("STREAMABLE_HTTP_PATH", None)
    if click_ctx and was_option_provided(click_ctx, "path"):
        final_path = path
    logger.debug(
        f"Final path for Streamable HTTP: {final_path if final_path else 'FastMCP default'}"
    )

    # Set env vars for downstream config
    env_overrides = {
        "enabled_tools": ("ENABLED_TOOLS", enabled_tools),
        "jira_domain": ("JIRA_DOMAIN", jira_domain),
        "jira_email": ("JIRA_EMAIL", jira_email),
        "jira_token": ("JIRA_API_TOKEN", jira_token),
        "jira_access_token": ("JIRA_ACCESS_TOKEN", jira_access_token),
    }
    for param_name, (env_name, value) in env_overrides.items():
        if click_ctx and was_option_provided(click_ctx, param_name) and value:
            os.environ[env_name] = value
    if click_ctx and was_option_provided(click_ctx, "read_only"):
        os.environ["READ_ONLY_MODE"] = str(read_only).lower()

    from mcp_jira.servers import main_mcp

    run_kwargs: dict = {
        "transport": final_transport,
    }

    if final_transport == "stdio":
        logger.info("Starting server with STDIO transport.")
    elif final_transport == "streamable-http":
        run_kwargs["host"] = final_host
        run_kwargs["port"] = final_port
        run_kwargs["log_level"] = logging.getLevelName(current_logging_level).lower()
        run_kwargs["stateless_http"] = True

        if final_path is not None:
            run_kwargs["path"] = final_path

        logger.info(
            f"Starting server with STREAMABLE-HTTP transport on "
            f"http://{final_host}:{final_port}{final_path or '/mcp'}"
        )
    else:
        logger.error(
            f"Invalid transport type '{final_transport}' determined. Cannot start server."
        )
        sys.exit(1)

    asyncio.run(main_mcp.run_async(**run_kwargs))


__all__ = ["main", "__version__"]

if __name__ == "__main__":
    main()
