"""
MCP tool definitions for Clockify tasks.
"""

from typing import List, Literal, Optional

from mcp.server.fastmcp import Context, FastMCP

from clockify_mcp_server.api.client import ClockifyApiClient
from clockify_mcp_server.helpers.tasks import (
    create_task as helper_create_task,
    delete_task as helper_delete_task,
    get_task as helper_get_task,
    list_tasks as helper_list_tasks,
    update_task as helper_update_task,
)
from clockify_mcp_server.utils.credentials import api_key_from_context
from clockify_mcp_server.utils.formatting import deleted_message, format_json

TASK_STATUSES = Literal["ACTIVE", "DONE"]


def register_task_tools(mcp: FastMCP, api_client: ClockifyApiClient):
    """
    Register all task-related MCP tools.

    Args:
        mcp: The FastMCP instance
        api_client: The Clockify API client instance
    """

    @mcp.tool()
    async def list_tasks(
        ctx: Context,
        workspace_id: str,
        project_id: str,
        is_active: Optional[bool] = None,
        name: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> str:
        """
        List all tasks for a project.

        Args:
            workspace_id (str): The workspace ID
            project_id (str): The project ID
            is_active (bool, optional): Filter by active status
            name (str, optional): Filter by name (contains)
            page (int, optional): Page number
            page_size (int, optional): Page size
        """
        client = api_client.with_api_key(api_key_from_context(ctx))
        tasks = await helper_list_tasks(
            client,
            workspace_id,
            project_id,
            is_active=is_active,
            name=name,
            page=page,
            page_size=page_size,
        )
        return format_json(tasks)

    @mcp.tool()
    async def get_task(ctx: Context, workspace_id: str, project_id: str, task_id: str) -> str:
        """Get a specific task of a project by ID."""
        client = api_client.with_api_key(api_key_from_context(ctx))
        return format_json(await helper_get_task(client, workspace_id, project_id, task_id))

    @mcp.tool()
    async def create_task(
        ctx: Context,
        workspace_id: str,
        project_id: str,
        name: str,
        assignee_ids: Optional[List[str]] = None,
        estimate: Optional[str] = None,
    ) -> str:
        """
        Create a new task in a project.

        Args:
            workspace_id (str): The workspace ID
            project_id (str): The project ID
            name (str): Task name
            assignee_ids (List[str], optional): User IDs to assign
            estimate (str, optional): Time estimate as ISO 8601 duration, e.g. PT1H30M for 1.5 hours
        """
        client = api_client.with_api_key(api_key_from_context(ctx))
        task = await helper_create_task(
            client,
            workspace_id,
            project_id,
            name,
            assignee_ids=assignee_ids,
            estimate=estimate,
        )
        return format_json(task, heading="Task created")

    @mcp.tool()
    async def update_task(
        ctx: Context,
        workspace_id: str,
        project_id: str,
        task_id: str,
        name: Optional[str] = None,
        assignee_ids: Optional[List[str]] = None,
        estimate: Optional[str] = None,
        status: Optional[TASK_STATUSES] = None,
    ) -> str:
        """
        Update an existing task.

        Args:
            workspace_id (str): The workspace ID
            project_id (str): The project ID
            task_id (str): The task ID
            name (str, optional): New task name
            assignee_ids (List[str], optional): User IDs to assign
            estimate (str, optional): Time estimate
            status (str, optional): Task status, ACTIVE or DONE
        """
        client = api_client.with_api_key(api_key_from_context(ctx))
        task = await helper_update_task(
            client,
            workspace_id,
            project_id,
            task_id,
            name=name,
            assignee_ids=assignee_ids,
            estimate=estimate,
            status=status,
        )
        return format_json(task, heading="Task updated")

    @mcp.tool()
    async def delete_task(ctx: Context, workspace_id: str, project_id: str, task_id: str) -> str:
        """Delete a task. This cannot be undone."""
        client = api_client.with_api_key(api_key_from_context(ctx))
        await helper_delete_task(client, workspace_id, project_id, task_id)
        return deleted_message("Task", task_id)
