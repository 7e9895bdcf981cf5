"""
Helper functions for Clockify time entries.

This module provides functions for managing Clockify time entries, including
listing, creating, stopping, updating and deleting them. Timestamps given by
the caller are normalised with `tz_converter.to_api_timestamp`.
"""

from typing import Any, Dict, List, Optional

from clockify_mcp_server.api.client import ClockifyApiClient
from clockify_mcp_server.helpers.users import resolve_user_id
from clockify_mcp_server.utils.timezone import tz_converter


async def list_time_entries(
    client: ClockifyApiClient,
    workspace_id: str,
    user_id: Optional[str] = None,
    start: Optional[str] = None,
    end: Optional[str] = None,
    project: Optional[str] = None,
    description: Optional[str] = None,
    page: Optional[int] = None,
    page_size: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """
    List one page of a user's time entries in a workspace.

    Args:
        client: The Clockify API client
        workspace_id: The workspace ID
        user_id: The user whose entries to list. Defaults to the current user.
        start: Only entries starting at or after this ISO 8601 timestamp
        end: Only entries starting before this ISO 8601 timestamp
        project: Filter by project ID
        description: Filter by description (contains)
        page: Page number
        page_size: Entries per page (max 50)

    Returns:
        List[dict]: Time entry objects
    """
    uid = await resolve_user_id(client, user_id)

    params = {
        "start": tz_converter.to_api_timestamp(start),
        "end": tz_converter.to_api_timestamp(end),
        "project": project,
        "description": description,
        "page": page,
        "page-size": page_size,
    }
    return await client.get(f"/workspaces/{workspace_id}/user/{uid}/time-entries", params=params)


async def get_time_entry(client: ClockifyApiClient, workspace_id: str, entry_id: str) -> Dict[str, Any]:
    """Fetch a single time entry by ID."""
    return await client.get(f"/workspaces/{workspace_id}/time-entries/{entry_id}")


async def create_time_entry(
    client: ClockifyApiClient,
    workspace_id: str,
    start: str,
    end: Optional[str] = None,
    description: Optional[str] = None,
    project_id: Optional[str] = None,
    task_id: Optional[str] = None,
    tag_ids: Optional[List[str]] = None,
    billable: Optional[bool] = None,
) -> Dict[str, Any]:
    """
    Create a time entry. Without `end` Clockify starts a running timer.

    Args:
        client: The Clockify API client
        workspace_id: The workspace ID
        start: ISO 8601 start time
        end: ISO 8601 end time; omit for a running timer
        description: Activity being tracked
        project_id: Associated project ID
        task_id: Associated task ID
        tag_ids: Tag IDs to attach
        billable: Whether the entry is billable

    Returns:
        dict: The created time entry
    """
    payload = {
        "description": description,
        "projectId": project_id,
        "taskId": task_id,
        "tagIds": tag_ids,
        "start": tz_converter.to_api_timestamp(start),
        "end": tz_converter.to_api_timestamp(end),
        "billable": billable,
    }
    return await client.post(f"/workspaces/{workspace_id}/time-entries", payload)


async def stop_timer(
    client: ClockifyApiClient,
    workspace_id: str,
    user_id: Optional[str] = None,
    end: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Stop the running timer of a user.

    Args:
        client: The Clockify API client
        workspace_id: The workspace ID
        user_id: Whose timer to stop. Defaults to the current user.
        end: ISO 8601 end time. Defaults to now.

    Returns:
        dict: The stopped time entry
    """
    uid = await resolve_user_id(client, user_id)

    if end:
        end_time = tz_converter.to_api_timestamp(end)
    else:
        end_time = tz_converter.get_current_utc_time()

    return await client.patch(f"/workspaces/{workspace_id}/user/{uid}/time-entries", {"end": end_time})


async def update_time_entry(
    client: ClockifyApiClient,
    workspace_id: str,
    entry_id: str,
    description: Optional[str] = None,
    project_id: Optional[str] = None,
    task_id: Optional[str] = None,
    tag_ids: Optional[List[str]] = None,
    start: Optional[str] = None,
    end: Optional[str] = None,
    billable: Optional[bool] = None,
) -> Dict[str, Any]:
    """
    Update an existing time entry.

    Clockify replaces the entry with the body it receives, so fields left out
    here may be cleared upstream.

    Returns:
        dict: The updated time entry
    """
    payload = {
        "description": description,
        "projectId": project_id,
        "taskId": task_id,
        "tagIds": tag_ids,
        "start": tz_converter.to_api_timestamp(start),
        "end": tz_converter.to_api_timestamp(end),
        "billable": billable,
    }
    return await client.put(f"/workspaces/{workspace_id}/time-entries/{entry_id}", payload)


async def delete_time_entry(client: ClockifyApiClient, workspace_id: str, entry_id: str) -> Dict[str, Any]:
    """
    Deletes a time entry. This cannot be undone.
    """
    return await client.delete(f"/workspaces/{workspace_id}/time-entries/{entry_id}")
