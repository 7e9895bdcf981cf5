"""
MCP tool definitions for Clockify users and workspaces.
"""

from typing import Literal, Optional

from mcp.server.fastmcp import Context, FastMCP

from clockify_mcp_server.api.client import ClockifyApiClient
from clockify_mcp_server.helpers.users import (
    get_current_user as helper_get_current_user,
    list_workspace_users as helper_list_workspace_users,
)
from clockify_mcp_server.helpers.workspaces import list_workspaces as helper_list_workspaces
from clockify_mcp_server.utils.credentials import api_key_from_context
from clockify_mcp_server.utils.formatting import format_json

MEMBERSHIP_STATUSES = Literal["PENDING", "ACTIVE", "DECLINED", "INACTIVE"]


def register_user_tools(mcp: FastMCP, api_client: ClockifyApiClient):
    """
    Register the user and workspace MCP tools.

    Args:
        mcp: The FastMCP instance
        api_client: The Clockify API client instance
    """

    @mcp.tool()
    async def get_current_user(ctx: Context) -> str:
        """
        Get information about the currently authenticated user.

        The response includes the user's ID and their active and default
        workspace IDs, which most other tools need.
        """
        client = api_client.with_api_key(api_key_from_context(ctx))
        return format_json(await helper_get_current_user(client))

    @mcp.tool()
    async def list_workspaces(ctx: Context) -> str:
        """List all workspaces the user has access to."""
        client = api_client.with_api_key(api_key_from_context(ctx))
        return format_json(await helper_list_workspaces(client))

    @mcp.tool()
    async def list_workspace_users(
        ctx: Context,
        workspace_id: str,
        email: Optional[str] = None,
        name: Optional[str] = None,
        status: Optional[MEMBERSHIP_STATUSES] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> str:
        """
        List all users in a workspace.

        Args:
            workspace_id (str): The workspace ID
            email (str, optional): Filter by email
            name (str, optional): Filter by name
            status (str, optional): Filter by status: PENDING, ACTIVE, DECLINED or INACTIVE
            page (int, optional): Page number
            page_size (int, optional): Page size
        """
        client = api_client.with_api_key(api_key_from_context(ctx))
        users = await helper_list_workspace_users(
            client,
            workspace_id,
            email=email,
            name=name,
            status=status,
            page=page,
            page_size=page_size,
        )
        return format_json(users)
