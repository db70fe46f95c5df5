"""Model actions: get, delete, search, register and deploy."""

from __future__ import annotations

from pydantic import Field

from mlclient.core.action import ActionRequest, ActionResponse, ActionType
from mlclient.modules.search.schemas import DeleteResponse, SearchResponse
from mlclient.modules.task.schemas import MLTaskType

from .schemas import MLModel, MLRegisterModelInput


class MLModelGetRequest(ActionRequest):
    """Request to fetch a model."""

    model_id: str = Field(min_length=1, description="Model to fetch")
    return_content: bool = Field(default=False, description="Include serialized model content")


class MLModelGetResponse(ActionResponse):
    """Response carrying a model."""

    ml_model: MLModel = Field(description="The model")


class MLModelDeleteRequest(ActionRequest):
    """Request to delete a model."""

    model_id: str = Field(min_length=1, description="Model to delete")


class MLRegisterModelRequest(ActionRequest):
    """Request to register a model."""

    register_model_input: MLRegisterModelInput


class MLRegisterModelResponse(ActionResponse):
    """Registration acknowledgement; registration runs as a task."""

    task_id: str | None = Field(default=None, description="Registration task")
    status: str | None = Field(default=None, description="Task status")
    model_id: str | None = Field(default=None, description="Registered model, when known up front")


class MLDeployModelRequest(ActionRequest):
    """Request to deploy a model to nodes."""

    model_id: str = Field(min_length=1, description="Model to deploy")
    model_node_ids: list[str] | None = Field(default=None, description="Target nodes, all eligible nodes if unset")
    async_task: bool = Field(default=False, alias="async", description="Return before deployment finishes")


class MLDeployModelResponse(ActionResponse):
    """Deployment acknowledgement."""

    task_id: str | None = Field(default=None, description="Deployment task")
    task_type: MLTaskType = Field(default=MLTaskType.DEPLOY_MODEL)
    status: str | None = Field(default=None, description="Task status, e.g. CREATED or COMPLETED")


ML_MODEL_GET_ACTION = ActionType("cluster:admin/opensearch/ml/models/get", MLModelGetResponse)
ML_MODEL_DELETE_ACTION = ActionType("cluster:admin/opensearch/ml/models/delete", DeleteResponse)
ML_MODEL_SEARCH_ACTION = ActionType("cluster:admin/opensearch/ml/models/search", SearchResponse)
ML_REGISTER_MODEL_ACTION = ActionType("cluster:admin/opensearch/ml/register_model", MLRegisterModelResponse)
ML_DEPLOY_MODEL_ACTION = ActionType("cluster:admin/opensearch/ml/deploy_model", MLDeployModelResponse)
