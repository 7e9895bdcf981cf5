"""
Helper functions for Clockify tags.
"""

from typing import Any, Dict, List, Optional

from clockify_mcp_server.api.client import ClockifyApiClient


async def list_tags(
    client: ClockifyApiClient,
    workspace_id: str,
    archived: Optional[bool] = None,
    name: Optional[str] = None,
    page: Optional[int] = None,
    page_size: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """
    List one page of tags in a workspace.

    Args:
        client: The Clockify API client
        workspace_id: The workspace ID
        archived: Filter by archived status
        name: Filter by name (contains)
        page: Page number
        page_size: Page size

    Returns:
        List[dict]: Tag objects
    """
    params = {
        "archived": archived,
        "name": name,
        "page": page,
        "page-size": page_size,
    }
    return await client.get(f"/workspaces/{workspace_id}/tags", params=params)


async def get_tag(client: ClockifyApiClient, workspace_id: str, tag_id: str) -> Dict[str, Any]:
    return await client.get(f"/workspaces/{workspace_id}/tags/{tag_id}")


async def create_tag(client: ClockifyApiClient, workspace_id: str, name: str) -> Dict[str, Any]:
    return await client.post(f"/workspaces/{workspace_id}/tags", {"name": name})


async def update_tag(
    client: ClockifyApiClient,
    workspace_id: str,
    tag_id: str,
    name: Optional[str] = None,
    archived: Optional[bool] = None,
) -> Dict[str, Any]:
    payload = {"name": name, "archived": archived}
    return await client.put(f"/workspaces/{workspace_id}/tags/{tag_id}", payload)


async def delete_tag(client: ClockifyApiClient, workspace_id: str, tag_id: str) -> Dict[str, Any]:
    return await client.delete(f"/workspaces/{workspace_id}/tags/{tag_id}")
