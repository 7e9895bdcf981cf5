"""
MCP tool definitions for Clockify time entries.

This module provides MCP tools for managing Clockify time entries, including
listing, creating, stopping, updating and deleting time entries.
"""

from typing import List, Optional

from mcp.server.fastmcp import Context, FastMCP

from clockify_mcp_server.api.client import ClockifyApiClient
from clockify_mcp_server.helpers.time_entries import (
    create_time_entry as helper_create_time_entry,
    delete_time_entry as helper_delete_time_entry,
    get_time_entry as helper_get_time_entry,
    list_time_entries as helper_list_time_entries,
    stop_timer as helper_stop_timer,
    update_time_entry as helper_update_time_entry,
)
from clockify_mcp_server.utils.credentials import api_key_from_context
from clockify_mcp_server.utils.formatting import deleted_message, format_json


def register_time_entry_tools(mcp: FastMCP, api_client: ClockifyApiClient):
    """
    Register all time entry-related MCP tools.

    Args:
        mcp: The FastMCP instance
        api_client: The Clockify API client instance
    """

    @mcp.tool()
    async def list_time_entries(
        ctx: Context,
        workspace_id: str,
        user_id: Optional[str] = None,
        start: Optional[str] = None,
        end: Optional[str] = None,
        project: Optional[str] = None,
        description: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> str:
        """
        List time entries for a user in a workspace.

        Timestamps without an offset are read in the server's local timezone.

        Args:
            workspace_id (str): The workspace ID
            user_id (str, optional): User ID. Defaults to the current user.
            start (str, optional): Start date (ISO 8601, e.g. 2024-01-01T00:00:00Z)
            end (str, optional): End date (ISO 8601)
            project (str, optional): Filter by project ID
            description (str, optional): Filter by description (contains)
            page (int, optional): Page number
            page_size (int, optional): Page size (max: 50)
        """
        client = api_client.with_api_key(api_key_from_context(ctx))
        entries = await helper_list_time_entries(
            client,
            workspace_id,
            user_id=user_id,
            start=start,
            end=end,
            project=project,
            description=description,
            page=page,
            page_size=page_size,
        )
        return format_json(entries)

    @mcp.tool()
    async def get_time_entry(ctx: Context, workspace_id: str, entry_id: str) -> str:
        """Get a specific time entry by ID."""
        client = api_client.with_api_key(api_key_from_context(ctx))
        return format_json(await helper_get_time_entry(client, workspace_id, entry_id))

    @mcp.tool()
    async def create_time_entry(
        ctx: Context,
        workspace_id: str,
        start: str,
        end: Optional[str] = None,
        description: Optional[str] = None,
        project_id: Optional[str] = None,
        task_id: Optional[str] = None,
        tag_ids: Optional[List[str]] = None,
        billable: Optional[bool] = None,
    ) -> str:
        """
        Create a new time entry: a completed one, or a running timer.

        Examples:
        - "Log 9 to 11 this morning on the Website project"
        - "Start a timer for 'Code review'" (omit end)

        Args:
            workspace_id (str): The workspace ID
            start (str): Start time (ISO 8601, e.g. 2024-01-15T09:00:00Z)
            end (str, optional): End time (ISO 8601). Omit to start a running timer
            description (str, optional): Time entry description
            project_id (str, optional): Project ID
            task_id (str, optional): Task ID
            tag_ids (List[str], optional): Tag IDs
            billable (bool, optional): Is the entry billable
        """
        client = api_client.with_api_key(api_key_from_context(ctx))
        entry = await helper_create_time_entry(
            client,
            workspace_id,
            start,
            end=end,
            description=description,
            project_id=project_id,
            task_id=task_id,
            tag_ids=tag_ids,
            billable=billable,
        )

        time_interval = entry.get("timeInterval") or {}
        status = "completed" if time_interval.get("end") else "running"
        return format_json(entry, heading=f"Time entry created ({status})")

    @mcp.tool()
    async def stop_timer(
        ctx: Context,
        workspace_id: str,
        user_id: Optional[str] = None,
        end: Optional[str] = None,
    ) -> str:
        """
        Stop the currently running timer for a user.

        Args:
            workspace_id (str): The workspace ID
            user_id (str, optional): User ID. Defaults to the current user.
            end (str, optional): End time (ISO 8601). Defaults to now.
        """
        client = api_client.with_api_key(api_key_from_context(ctx))
        entry = await helper_stop_timer(client, workspace_id, user_id=user_id, end=end)
        return format_json(entry, heading="Timer stopped")

    @mcp.tool()
    async def update_time_entry(
        ctx: Context,
        workspace_id: str,
        entry_id: str,
        description: Optional[str] = None,
        project_id: Optional[str] = None,
        task_id: Optional[str] = None,
        tag_ids: Optional[List[str]] = None,
        start: Optional[str] = None,
        end: Optional[str] = None,
        billable: Optional[bool] = None,
    ) -> str:
        """
        Update an existing time entry.

        Clockify replaces the whole entry: pass start (and end, for a
        completed entry) along with the fields you change.

        Args:
            workspace_id (str): The workspace ID
            entry_id (str): The time entry ID
            description (str, optional): New description
            project_id (str, optional): Project ID
            task_id (str, optional): Task ID
            tag_ids (List[str], optional): Tag IDs
            start (str, optional): Start time (ISO 8601)
            end (str, optional): End time (ISO 8601)
            billable (bool, optional): Is billable
        """
        client = api_client.with_api_key(api_key_from_context(ctx))
        entry = await helper_update_time_entry(
            client,
            workspace_id,
            entry_id,
            description=description,
            project_id=project_id,
            task_id=task_id,
            tag_ids=tag_ids,
            start=start,
            end=end,
            billable=billable,
        )
        return format_json(entry, heading="Time entry updated")

    @mcp.tool()
    async def delete_time_entry(ctx: Context, workspace_id: str, entry_id: str) -> str:
        """Delete a time entry. This cannot be undone."""
        client = api_client.with_api_key(api_key_from_context(ctx))
        await helper_delete_time_entry(client, workspace_id, entry_id)
        return deleted_message("Time entry", entry_id)
