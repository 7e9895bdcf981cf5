"""
Helper functions for Clockify projects.

This module provides functions for managing Clockify projects, including
listing, creating, updating and deleting projects.
"""

from typing import Any, Dict, List, Optional

from clockify_mcp_server.api.client import ClockifyApiClient

DEFAULT_PROJECT_COLOR = "#03A9F4"


async def list_projects(
    client: ClockifyApiClient,
    workspace_id: str,
    archived: Optional[bool] = None,
    name: Optional[str] = None,
    page: Optional[int] = None,
    page_size: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """
    Retrieve one page of projects from a workspace.

    Args:
        client: The Clockify API client
        workspace_id: ID of the workspace to fetch projects from
        archived: Filter by archived status
        name: Filter by project name (contains)
        page: Page number (Clockify defaults to 1)
        page_size: Projects per page (Clockify defaults to 50, max 5000)

    Returns:
        List[dict]: List of project objects
    """
    params = {
        "archived": archived,
        "name": name,
        "page": page,
        "page-size": page_size,
    }
    return await client.get(f"/workspaces/{workspace_id}/projects", params=params)


async def get_project(client: ClockifyApiClient, workspace_id: str, project_id: str) -> Dict[str, Any]:
    """Fetch a single project by ID."""
    return await client.get(f"/workspaces/{workspace_id}/projects/{project_id}")


async def create_project(
    client: ClockifyApiClient,
    workspace_id: str,
    name: str,
    client_id: Optional[str] = None,
    color: Optional[str] = None,
    billable: Optional[bool] = None,
    is_public: Optional[bool] = None,
    note: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Creates a new project in a Clockify workspace.

    Args:
        client: The Clockify API client
        workspace_id: ID of the workspace to create the project in
        name: Name of the project to create
        client_id: Associated client ID
        color: Project color hex code (defaults to DEFAULT_PROJECT_COLOR)
        billable: Whether project is billable
        is_public: Whether project is public
        note: Project notes

    Returns:
        dict: Project data
    """
    payload = {
        "name": name,
        "clientId": client_id,
        "color": color or DEFAULT_PROJECT_COLOR,
        "billable": billable,
        "public": is_public,
        "note": note,
    }
    return await client.post(f"/workspaces/{workspace_id}/projects", payload)


async def update_project(
    client: ClockifyApiClient,
    workspace_id: str,
    project_id: str,
    name: Optional[str] = None,
    client_id: Optional[str] = None,
    color: Optional[str] = None,
    billable: Optional[bool] = None,
    archived: Optional[bool] = None,
    note: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Update a project. Only the fields that are given are sent.

    Returns:
        dict: The updated project
    """
    payload = {
        "name": name,
        "clientId": client_id,
        "color": color,
        "billable": billable,
        "archived": archived,
        "note": note,
    }
    return await client.put(f"/workspaces/{workspace_id}/projects/{project_id}", payload)


async def delete_project(client: ClockifyApiClient, workspace_id: str, project_id: str) -> Dict[str, Any]:
    """
    Deletes a project identified by its ID within a workspace.

    Clockify only deletes archived projects; anything else comes back as an
    API error.
    """
    return await client.delete(f"/workspaces/{workspace_id}/projects/{project_id}")
