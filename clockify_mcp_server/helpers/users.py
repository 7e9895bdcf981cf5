"""
Helper functions for Clockify users.

This module provides functions for reading the authenticated user and the
members of a workspace.
"""

from typing import Any, Dict, List, Optional

from clockify_mcp_server.api.client import ClockifyApiClient


async def get_current_user(client: ClockifyApiClient) -> Dict[str, Any]:
    """
    Retrieve the user that owns the API key.

    Args:
        client: The Clockify API client

    Returns:
        dict: The user record (id, email, name, activeWorkspace, ...)
    """
    return await client.get("/user")


async def resolve_user_id(client: ClockifyApiClient, user_id: Optional[str] = None) -> str:
    """
    Return `user_id`, or the current user's ID when it is not given.

    Costs exactly one extra request when the ID has to be looked up.
    """
    if user_id:
        return user_id

    user = await get_current_user(client)
    return user["id"]


async def list_workspace_users(
    client: ClockifyApiClient,
    workspace_id: str,
    email: Optional[str] = None,
    name: Optional[str] = None,
    status: Optional[str] = None,
    page: Optional[int] = None,
    page_size: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """
    List the users of a workspace.

    Args:
        client: The Clockify API client
        workspace_id: The workspace ID
        email: Filter by email
        name: Filter by name
        status: Filter by membership status (PENDING, ACTIVE, DECLINED, INACTIVE)
        page: Page number
        page_size: Page size

    Returns:
        list: User records
    """
    params = {
        "email": email,
        "name": name,
        "status": status,
        "page": page,
        "page-size": page_size,
    }
    return await client.get(f"/workspaces/{workspace_id}/users", params=params)
