"""
MCP tool definitions for Clockify clients.
"""

from typing import Optional

from mcp.server.fastmcp import Context, FastMCP

from clockify_mcp_server.api.client import ClockifyApiClient
from clockify_mcp_server.helpers.clients import (
    create_client as helper_create_client,
    delete_client as helper_delete_client,
    get_client as helper_get_client,
    list_clients as helper_list_clients,
    update_client as helper_update_client,
)
from clockify_mcp_server.utils.credentials import api_key_from_context
from clockify_mcp_server.utils.formatting import deleted_message, format_json


def register_client_tools(mcp: FastMCP, api_client: ClockifyApiClient):
    """
    Register all client-related MCP tools.

    Args:
        mcp: The FastMCP instance
        api_client: The Clockify API client instance
    """

    @mcp.tool()
    async def list_clients(
        ctx: Context,
        workspace_id: str,
        archived: Optional[bool] = None,
        name: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> str:
        """
        List all clients in a workspace.

        Args:
            workspace_id (str): The workspace ID
            archived (bool, optional): Filter by archived status
            name (str, optional): Filter by name (contains)
            page (int, optional): Page number
            page_size (int, optional): Page size
        """
        client = api_client.with_api_key(api_key_from_context(ctx))
        clients = await helper_list_clients(
            client,
            workspace_id,
            archived=archived,
            name=name,
            page=page,
            page_size=page_size,
        )
        return format_json(clients)

    @mcp.tool()
    async def get_client(ctx: Context, workspace_id: str, client_id: str) -> str:
        """Get a specific client by ID."""
        client = api_client.with_api_key(api_key_from_context(ctx))
        return format_json(await helper_get_client(client, workspace_id, client_id))

    @mcp.tool()
    async def create_client(
        ctx: Context,
        workspace_id: str,
        name: str,
        email: Optional[str] = None,
        address: Optional[str] = None,
        note: Optional[str] = None,
    ) -> str:
        """
        Create a new client in a workspace.

        Args:
            workspace_id (str): The workspace ID
            name (str): Client name
            email (str, optional): Client email
            address (str, optional): Client address
            note (str, optional): Notes about the client
        """
        client = api_client.with_api_key(api_key_from_context(ctx))
        created = await helper_create_client(
            client,
            workspace_id,
            name,
            email=email,
            address=address,
            note=note,
        )
        return format_json(created, heading="Client created")

    @mcp.tool()
    async def update_client(
        ctx: Context,
        workspace_id: str,
        client_id: str,
        name: Optional[str] = None,
        email: Optional[str] = None,
        address: Optional[str] = None,
        note: Optional[str] = None,
        archived: Optional[bool] = None,
    ) -> str:
        """
        Update an existing client.

        Args:
            workspace_id (str): The workspace ID
            client_id (str): The client ID
            name (str, optional): Client name
            email (str, optional): Client email
            address (str, optional): Client address
            note (str, optional): Notes
            archived (bool, optional): Archive the client
        """
        client = api_client.with_api_key(api_key_from_context(ctx))
        updated = await helper_update_client(
            client,
            workspace_id,
            client_id,
            name=name,
            email=email,
            address=address,
            note=note,
            archived=archived,
        )
        return format_json(updated, heading="Client updated")

    @mcp.tool()
    async def delete_client(ctx: Context, workspace_id: str, client_id: str) -> str:
        """Delete a client. This cannot be undone."""
        client = api_client.with_api_key(api_key_from_context(ctx))
        await helper_delete_client(client, workspace_id, client_id)
        return deleted_message("Client", client_id)
