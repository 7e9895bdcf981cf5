"""
Helper functions for Clockify workspaces.
"""

from typing import Any, Dict, List

from clockify_mcp_server.api.client import ClockifyApiClient


async def list_workspaces(client: ClockifyApiClient) -> List[Dict[str, Any]]:
    """
    Retrieve all workspaces the authenticated user has access to.

    Args:
        client: The Clockify API client

    Returns:
        List[Dict[str, Any]]: List of workspace objects
    """
    return await client.get("/workspaces")
