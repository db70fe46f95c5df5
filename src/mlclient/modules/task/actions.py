"""Task actions: get, delete and search."""

from __future__ import annotations

from pydantic import Field

from mlclient.core.action import ActionRequest, ActionResponse, ActionType
from mlclient.modules.search.schemas import DeleteResponse, SearchResponse

from .schemas import MLTask


class MLTaskGetRequest(ActionRequest):
    """Request to fetch a task."""

    task_id: str = Field(min_length=1, description="Task to fetch")


class MLTaskGetResponse(ActionResponse):
    """Response carrying a task."""

    ml_task: MLTask = Field(description="The task")


class MLTaskDeleteRequest(ActionRequest):
    """Request to delete a task."""

    task_id: str = Field(min_length=1, description="Task to delete")


ML_TASK_GET_ACTION = ActionType("cluster:admin/opensearch/ml/tasks/get", MLTaskGetResponse)
ML_TASK_DELETE_ACTION = ActionType("cluster:admin/opensearch/ml/tasks/delete", DeleteResponse)
ML_TASK_SEARCH_ACTION = ActionType("cluster:admin/opensearch/ml/tasks/search", SearchResponse)
