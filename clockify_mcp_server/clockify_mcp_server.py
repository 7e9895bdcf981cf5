"""
Clockify MCP Server

This is the main entry point for the Clockify MCP server.
It creates an MCP server that provides tools for interacting with Clockify.
"""

import argparse
from typing import List, Optional

import structlog
from dotenv import load_dotenv
from mcp.server.fastmcp import Context, FastMCP

from clockify_mcp_server.api.client import ClockifyApiClient
from clockify_mcp_server.config import Settings, get_settings
from clockify_mcp_server.helpers.users import get_current_user
from clockify_mcp_server.helpers.workspaces import list_workspaces
from clockify_mcp_server.logging_config import configure_logging
from clockify_mcp_server.tools.client_tools import register_client_tools
from clockify_mcp_server.tools.project_tools import register_project_tools
from clockify_mcp_server.tools.tag_tools import register_tag_tools
from clockify_mcp_server.tools.task_tools import register_task_tools
from clockify_mcp_server.tools.time_entry_tools import register_time_entry_tools
from clockify_mcp_server.tools.user_tools import register_user_tools
from clockify_mcp_server.utils.credentials import api_key_from_context
from clockify_mcp_server.utils.formatting import format_json
from clockify_mcp_server.utils.timezone import tz_converter

log = structlog.get_logger(__name__)

INSTRUCTIONS = """
Tools for the Clockify time tracker. Almost every tool needs a workspace ID:
call get_current_user (activeWorkspace, defaultWorkspace) or list_workspaces
first. Timestamps are ISO 8601; send them in UTC with a trailing "Z", or
without an offset to have them read in the server's local timezone.
"""


def create_mcp_server(
    api_client: Optional[ClockifyApiClient] = None,
    settings: Optional[Settings] = None,
) -> FastMCP:
    """
    Create and configure the MCP server with Clockify tools.

    Args:
        api_client: Client to use; built from settings when omitted
        settings: Server settings; loaded from the environment when omitted

    Returns:
        FastMCP: The configured MCP server
    """
    settings = settings or get_settings()

    mcp = FastMCP(
        "clockify",
        instructions=INSTRUCTIONS,
        host=settings.mcp_host,
        port=settings.mcp_port,
    )

    if api_client is None:
        api_client = ClockifyApiClient(
            api_key=settings.api_key_value(),
            base_url=settings.clockify_api_base,
            timeout=settings.http_timeout,
        )

    # Register tools
    register_user_tools(mcp, api_client)
    register_project_tools(mcp, api_client)
    register_time_entry_tools(mcp, api_client)
    register_client_tools(mcp, api_client)
    register_tag_tools(mcp, api_client)
    register_task_tools(mcp, api_client)

    # Register resources
    @mcp.resource("clockify://user", mime_type="application/json")
    async def current_user(ctx: Context) -> str:
        """The Clockify user that owns the request's (or configured) API key."""
        client = api_client.with_api_key(api_key_from_context(ctx))
        return format_json(await get_current_user(client))

    @mcp.resource("clockify://workspaces", mime_type="application/json")
    async def workspaces(ctx: Context) -> str:
        """All workspaces the request's (or configured) API key has access to."""
        client = api_client.with_api_key(api_key_from_context(ctx))
        return format_json(await list_workspaces(client))

    @mcp.resource("clockify://timezone", mime_type="application/json")
    def timezone_info() -> str:
        """The timezone used for timestamps sent without an offset."""
        return format_json(tz_converter.get_timezone_info())

    return mcp


def _port(value: str) -> int:
    port = int(value)
    if not 1 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port must be between 1 and 65535, got {port}")
    return port


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Expose the Clockify API over the Model Context Protocol.",
    )
    parser.add_argument(
        "--transport",
        choices=("stdio", "sse", "streamable-http"),
        default="stdio",
        help="Transport for MCP (default: stdio).",
    )
    parser.add_argument("--host", default=None, help="Host for SSE/HTTP transports (default: MCP_HOST).")
    parser.add_argument("--port", type=_port, default=None, help="Port for SSE/HTTP transports (default: MCP_PORT).")
    return parser.parse_args(argv)


def main() -> None:
    load_dotenv()
    args = parse_args()

    settings = get_settings()
    overrides = {}
    if args.host is not None:
        overrides["mcp_host"] = args.host
    if args.port is not None:
        overrides["mcp_port"] = args.port
    if overrides:
        settings = settings.model_copy(update=overrides)

    configure_logging(settings.log_level, settings.log_file)

    mcp = create_mcp_server(settings=settings)
    log.info(
        "server_starting",
        transport=args.transport,
        api_base=settings.clockify_api_base,
        fallback_key_configured=settings.api_key_value() is not None,
    )
    mcp.run(transport=args.transport)


if __name__ == "__main__":
    main()
