"""
Helper functions for Clockify clients (the customers projects are billed to).
"""

from typing import Any, Dict, List, Optional

from clockify_mcp_server.api.client import ClockifyApiClient


async def list_clients(
    client: ClockifyApiClient,
    workspace_id: str,
    archived: Optional[bool] = None,
    name: Optional[str] = None,
    page: Optional[int] = None,
    page_size: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """
    List one page of clients in a workspace.

    Args:
        client: The Clockify API client
        workspace_id: The workspace ID
        archived: Filter by archived status
        name: Filter by name (contains)
        page: Page number
        page_size: Page size

    Returns:
        List[dict]: Client objects
    """
    params = {
        "archived": archived,
        "name": name,
        "page": page,
        "page-size": page_size,
    }
    return await client.get(f"/workspaces/{workspace_id}/clients", params=params)


async def get_client(client: ClockifyApiClient, workspace_id: str, client_id: str) -> Dict[str, Any]:
    return await client.get(f"/workspaces/{workspace_id}/clients/{client_id}")


async def create_client(
    client: ClockifyApiClient,
    workspace_id: str,
    name: str,
    email: Optional[str] = None,
    address: Optional[str] = None,
    note: Optional[str] = None,
) -> Dict[str, Any]:
    payload = {
        "name": name,
        "email": email,
        "address": address,
        "note": note,
    }
    return await client.post(f"/workspaces/{workspace_id}/clients", payload)


async def update_client(
    client: ClockifyApiClient,
    workspace_id: str,
    client_id: str,
    name: Optional[str] = None,
    email: Optional[str] = None,
    address: Optional[str] = None,
    note: Optional[str] = None,
    archived: Optional[bool] = None,
) -> Dict[str, Any]:
    payload = {
        "name": name,
        "email": email,
        "address": address,
        "note": note,
        "archived": archived,
    }
    return await client.put(f"/workspaces/{workspace_id}/clients/{client_id}", payload)


async def delete_client(client: ClockifyApiClient, workspace_id: str, client_id: str) -> Dict[str, Any]:
    return await client.delete(f"/workspaces/{workspace_id}/clients/{client_id}")
