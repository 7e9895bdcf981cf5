"""
MCP tool definitions for Clockify projects.

This module provides MCP tools for managing Clockify projects, including
listing, retrieving, creating, updating and deleting projects.
"""

from typing import Optional

from mcp.server.fastmcp import Context, FastMCP

from clockify_mcp_server.api.client import ClockifyApiClient
from clockify_mcp_server.helpers.projects import (
    create_project as helper_create_project,
    delete_project as helper_delete_project,
    get_project as helper_get_project,
    list_projects as helper_list_projects,
    update_project as helper_update_project,
)
from clockify_mcp_server.utils.credentials import api_key_from_context
from clockify_mcp_server.utils.formatting import deleted_message, format_json


def register_project_tools(mcp: FastMCP, api_client: ClockifyApiClient):
    """
    Register all project-related MCP tools.

    Args:
        mcp: The FastMCP instance
        api_client: The Clockify API client instance
    """

    @mcp.tool()
    async def list_projects(
        ctx: Context,
        workspace_id: str,
        archived: Optional[bool] = None,
        name: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> str:
        """
        List all projects in a workspace.

        Args:
            workspace_id (str): The workspace ID
            archived (bool, optional): Filter by archived status
            name (str, optional): Filter by project name (contains)
            page (int, optional): Page number (default: 1)
            page_size (int, optional): Page size (default: 50, max: 5000)
        """
        client = api_client.with_api_key(api_key_from_context(ctx))
        projects = await helper_list_projects(
            client,
            workspace_id,
            archived=archived,
            name=name,
            page=page,
            page_size=page_size,
        )
        return format_json(projects)

    @mcp.tool()
    async def get_project(ctx: Context, workspace_id: str, project_id: str) -> str:
        """Get a specific project by ID."""
        client = api_client.with_api_key(api_key_from_context(ctx))
        return format_json(await helper_get_project(client, workspace_id, project_id))

    @mcp.tool()
    async def create_project(
        ctx: Context,
        workspace_id: str,
        name: str,
        client_id: Optional[str] = None,
        color: Optional[str] = None,
        billable: Optional[bool] = None,
        is_public: Optional[bool] = None,
        note: Optional[str] = None,
    ) -> str:
        """
        Create a new project in a workspace.

        Args:
            workspace_id (str): The workspace ID
            name (str): Project name
            client_id (str, optional): Client ID to associate
            color (str, optional): Project color as hex, e.g. #FF5722. Defaults to #03A9F4
            billable (bool, optional): Is the project billable
            is_public (bool, optional): Is the project public
            note (str, optional): Project notes
        """
        client = api_client.with_api_key(api_key_from_context(ctx))
        project = await helper_create_project(
            client,
            workspace_id,
            name,
            client_id=client_id,
            color=color,
            billable=billable,
            is_public=is_public,
            note=note,
        )
        return format_json(project, heading="Project created")

    @mcp.tool()
    async def update_project(
        ctx: Context,
        workspace_id: str,
        project_id: str,
        name: Optional[str] = None,
        client_id: Optional[str] = None,
        color: Optional[str] = None,
        billable: Optional[bool] = None,
        archived: Optional[bool] = None,
        note: Optional[str] = None,
    ) -> str:
        """
        Update an existing project.

        Args:
            workspace_id (str): The workspace ID
            project_id (str): The project ID
            name (str, optional): New project name
            client_id (str, optional): Client ID
            color (str, optional): Project color
            billable (bool, optional): Is billable
            archived (bool, optional): Archive the project
            note (str, optional): Project notes
        """
        client = api_client.with_api_key(api_key_from_context(ctx))
        project = await helper_update_project(
            client,
            workspace_id,
            project_id,
            name=name,
            client_id=client_id,
            color=color,
            billable=billable,
            archived=archived,
            note=note,
        )
        return format_json(project, heading="Project updated")

    @mcp.tool()
    async def delete_project(ctx: Context, workspace_id: str, project_id: str) -> str:
        """
        Delete a project. This cannot be undone.

        Clockify only deletes archived projects: archive it with update_project first.
        """
        client = api_client.with_api_key(api_key_from_context(ctx))
        await helper_delete_project(client, workspace_id, project_id)
        return deleted_message("Project", project_id)
