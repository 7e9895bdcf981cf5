"""
Helper functions for Clockify tasks.

Tasks live under a project, so every endpoint takes both the workspace and
the project ID.
"""

from typing import Any, Dict, List, Optional

from clockify_mcp_server.api.client import ClockifyApiClient


def _tasks_endpoint(workspace_id: str, project_id: str) -> str:
    return f"/workspaces/{workspace_id}/projects/{project_id}/tasks"


async def list_tasks(
    client: ClockifyApiClient,
    workspace_id: str,
    project_id: str,
    is_active: Optional[bool] = None,
    name: Optional[str] = None,
    page: Optional[int] = None,
    page_size: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """
    List one page of tasks of a project.

    Args:
        client: The Clockify API client
        workspace_id: The workspace ID
        project_id: The project ID
        is_active: Filter by active status
        name: Filter by name (contains)
        page: Page number
        page_size: Page size

    Returns:
        List[dict]: Task objects
    """
    params = {
        "is-active": is_active,
        "name": name,
        "page": page,
        "page-size": page_size,
    }
    return await client.get(_tasks_endpoint(workspace_id, project_id), params=params)


async def get_task(client: ClockifyApiClient, workspace_id: str, project_id: str, task_id: str) -> Dict[str, Any]:
    return await client.get(f"{_tasks_endpoint(workspace_id, project_id)}/{task_id}")


async def create_task(
    client: ClockifyApiClient,
    workspace_id: str,
    project_id: str,
    name: str,
    assignee_ids: Optional[List[str]] = None,
    estimate: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Create a task in a project.

    Args:
        estimate: ISO 8601 duration, e.g. "PT1H30M"
    """
    payload = {
        "name": name,
        "assigneeIds": assignee_ids,
        "estimate": estimate,
    }
    return await client.post(_tasks_endpoint(workspace_id, project_id), payload)


async def update_task(
    client: ClockifyApiClient,
    workspace_id: str,
    project_id: str,
    task_id: str,
    name: Optional[str] = None,
    assignee_ids: Optional[List[str]] = None,
    estimate: Optional[str] = None,
    status: Optional[str] = None,
) -> Dict[str, Any]:
    payload = {
        "name": name,
        "assigneeIds": assignee_ids,
        "estimate": estimate,
        "status": status,
    }
    return await client.put(f"{_tasks_endpoint(workspace_id, project_id)}/{task_id}", payload)


async def delete_task(client: ClockifyApiClient, workspace_id: str, project_id: str, task_id: str) -> Dict[str, Any]:
    return await client.delete(f"{_tasks_endpoint(workspace_id, project_id)}/{task_id}")
