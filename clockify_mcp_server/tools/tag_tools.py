"""
MCP tool definitions for Clockify tags.
"""

from typing import Optional

from mcp.server.fastmcp import Context, FastMCP

from clockify_mcp_server.api.client import ClockifyApiClient
from clockify_mcp_server.helpers.tags import (
    create_tag as helper_create_tag,
    delete_tag as helper_delete_tag,
    get_tag as helper_get_tag,
    list_tags as helper_list_tags,
    update_tag as helper_update_tag,
)
from clockify_mcp_server.utils.credentials import api_key_from_context
from clockify_mcp_server.utils.formatting import deleted_message, format_json


def register_tag_tools(mcp: FastMCP, api_client: ClockifyApiClient):
    """
    Register all tag-related MCP tools.

    Args:
        mcp: The FastMCP instance
        api_client: The Clockify API client instance
    """

    @mcp.tool()
    async def list_tags(
        ctx: Context,
        workspace_id: str,
        archived: Optional[bool] = None,
        name: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> str:
        """
        List all tags in a workspace.

        Args:
            workspace_id (str): The workspace ID
            archived (bool, optional): Filter by archived status
            name (str, optional): Filter by name (contains)
            page (int, optional): Page number
            page_size (int, optional): Page size
        """
        client = api_client.with_api_key(api_key_from_context(ctx))
        tags = await helper_list_tags(
            client,
            workspace_id,
            archived=archived,
            name=name,
            page=page,
            page_size=page_size,
        )
        return format_json(tags)

    @mcp.tool()
    async def get_tag(ctx: Context, workspace_id: str, tag_id: str) -> str:
        """Get a specific tag by ID."""
        client = api_client.with_api_key(api_key_from_context(ctx))
        return format_json(await helper_get_tag(client, workspace_id, tag_id))

    @mcp.tool()
    async def create_tag(ctx: Context, workspace_id: str, name: str) -> str:
        """Create a new tag in a workspace."""
        client = api_client.with_api_key(api_key_from_context(ctx))
        tag = await helper_create_tag(client, workspace_id, name)
        return format_json(tag, heading="Tag created")

    @mcp.tool()
    async def update_tag(
        ctx: Context,
        workspace_id: str,
        tag_id: str,
        name: Optional[str] = None,
        archived: Optional[bool] = None,
    ) -> str:
        """
        Update an existing tag.

        Args:
            workspace_id (str): The workspace ID
            tag_id (str): The tag ID
            name (str, optional): New tag name
            archived (bool, optional): Archive the tag
        """
        client = api_client.with_api_key(api_key_from_context(ctx))
        tag = await helper_update_tag(client, workspace_id, tag_id, name=name, archived=archived)
        return format_json(tag, heading="Tag updated")

    @mcp.tool()
    async def delete_tag(ctx: Context, workspace_id: str, tag_id: str) -> str:
        """Delete a tag. This cannot be undone."""
        client = api_client.with_api_key(api_key_from_context(ctx))
        await helper_delete_tag(client, workspace_id, tag_id)
        return deleted_message("Tag", tag_id)
