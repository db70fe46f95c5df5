"""Shared test stubs: bare requests and an in-memory ML node."""

from __future__ import annotations

from typing import Any
from urllib.parse import urlencode

from starlette.requests import Request

from mlclient.core import ActionRegistry
from mlclient.modules.connector import ML_CREATE_CONNECTOR_ACTION, MLCreateConnectorRequest, MLCreateConnectorResponse
from mlclient.modules.ml import (
    ML_PREDICTION_TASK_ACTION,
    ML_TRAIN_AND_PREDICT_TASK_ACTION,
    ML_TRAINING_TASK_ACTION,
    MLPredictionOutput,
    MLPredictionTaskRequest,
    MLTaskResponse,
    MLTrainingOutput,
    MLTrainingTaskRequest,
)
from mlclient.modules.model import (
    ML_DEPLOY_MODEL_ACTION,
    ML_MODEL_DELETE_ACTION,
    ML_MODEL_GET_ACTION,
    ML_MODEL_SEARCH_ACTION,
    ML_REGISTER_MODEL_ACTION,
    MLDeployModelRequest,
    MLModel,
    MLModelDeleteRequest,
    MLModelGetRequest,
    MLModelGetResponse,
    MLModelState,
    MLRegisterModelRequest,
)
from mlclient.modules.model_group import ML_REGISTER_MODEL_GROUP_ACTION, MLRegisterModelGroupRequest
from mlclient.modules.search import DeleteResponse, SearchHit, SearchHits, SearchRequest, SearchResponse
from mlclient.modules.task import (
    ML_TASK_DELETE_ACTION,
    ML_TASK_GET_ACTION,
    ML_TASK_SEARCH_ACTION,
    MLTask,
    MLTaskDeleteRequest,
    MLTaskGetRequest,
    MLTaskState,
    MLTaskType,
)


def make_request(
    path_params: dict[str, str] | None = None,
    query: dict[str, str] | None = None,
    headers: dict[str, str] | None = None,
) -> Request:
    """Build a bare Starlette request with the given path params, query string and headers."""
    scope = {
        "type": "http",
        "method": "POST",
        "path": "/",
        "query_string": urlencode(query or {}).encode(),
        "headers": [(key.lower().encode(), value.encode()) for key, value in (headers or {}).items()],
        "path_params": path_params or {},
    }
    return Request(scope)


class InMemoryMLNode:
    """ML node stub answering every action from in-memory state.

    Handlers return a mix of typed responses, other models and plain dicts so
    callers exercise every decoding path. The last request per action is kept
    in `requests`.
    """

    def __init__(self) -> None:
        self.models: dict[str, MLModel] = {}
        self.tasks: dict[str, MLTask] = {}
        self.requests: dict[str, Any] = {}
        self._counter = 0

    def _next_id(self, prefix: str) -> str:
        self._counter += 1
        return f"{prefix}-{self._counter}"

    def registry(self) -> ActionRegistry:
        """Build a registry with a handler for every action."""
        registry = ActionRegistry()

        @registry.register(ML_TRAINING_TASK_ACTION)
        async def train(request: MLTrainingTaskRequest) -> MLTaskResponse:
            self.requests[ML_TRAINING_TASK_ACTION.name] = request
            if request.async_task:
                task_id = self._next_id("task")
                self.tasks[task_id] = MLTask(
                    task_id=task_id,
                    task_type=MLTaskType.TRAINING,
                    function_name=request.ml_input.algorithm,
                    state=MLTaskState.CREATED,
                    is_async=True,
                )
                return MLTaskResponse(output=MLTrainingOutput(task_id=task_id, status="CREATED"))
            model_id = self._next_id("model")
            self.models[model_id] = MLModel(
                model_id=model_id,
                algorithm=request.ml_input.algorithm,
                model_state=MLModelState.TRAINED,
                content="c2VyaWFsaXplZA==",
            )
            return MLTaskResponse(output=MLTrainingOutput(model_id=model_id, status="COMPLETED"))

        @registry.register(ML_PREDICTION_TASK_ACTION)
        def predict(request: MLPredictionTaskRequest) -> dict[str, Any]:
            self.requests[ML_PREDICTION_TASK_ACTION.name] = request
            if request.model_id not in self.models:
                raise LookupError(f"Failed to find model {request.model_id}")
            rows = len(request.ml_input.input_dataset.data_frame)
            return {
                "output": {
                    "output_type": "PREDICTION",
                    "status": "COMPLETED",
                    "prediction_result": {"columns": ["ClusterID"], "data": [[0] for _ in range(rows)]},
                }
            }

        @registry.register(ML_TRAIN_AND_PREDICT_TASK_ACTION)
        async def train_and_predict(request: MLTrainingTaskRequest) -> MLTaskResponse:
            self.requests[ML_TRAIN_AND_PREDICT_TASK_ACTION.name] = request
            rows = len(request.ml_input.input_dataset.data_frame)
            result = {"columns": ["ClusterID"], "data": [[1] for _ in range(rows)]}
            return MLTaskResponse(output=MLPredictionOutput(status="COMPLETED", prediction_result=result))

        @registry.register(ML_MODEL_GET_ACTION)
        async def get_model(request: MLModelGetRequest) -> MLModelGetResponse:
            self.requests[ML_MODEL_GET_ACTION.name] = request
            model = self.models.get(request.model_id)
            if model is None:
                raise LookupError(f"Failed to find model {request.model_id}")
            if not request.return_content:
                model = model.model_copy(update={"content": None})
            return MLModelGetResponse(ml_model=model)

        @registry.register(ML_MODEL_DELETE_ACTION)
        async def delete_model(request: MLModelDeleteRequest) -> dict[str, Any]:
            self.requests[ML_MODEL_DELETE_ACTION.name] = request
            found = self.models.pop(request.model_id, None) is not None
            result = "deleted" if found else "not_found"
            return {"_index": ".plugins-ml-model", "_id": request.model_id, "result": result}

        @registry.register(ML_MODEL_SEARCH_ACTION)
        async def search_models(request: SearchRequest) -> SearchResponse:
            self.requests[ML_MODEL_SEARCH_ACTION.name] = request
            hits = [
                SearchHit(id=model_id, index=".plugins-ml-model", source=model.model_dump(mode="json"))
                for model_id, model in self.models.items()
            ]
            return SearchResponse(took=1, hits=SearchHits(total=len(hits), hits=hits))

        @registry.register(ML_REGISTER_MODEL_ACTION)
        async def register_model(request: MLRegisterModelRequest) -> dict[str, Any]:
            self.requests[ML_REGISTER_MODEL_ACTION.name] = request
            return {"task_id": self._next_id("task"), "status": "CREATED"}

        @registry.register(ML_DEPLOY_MODEL_ACTION)
        async def deploy_model(request: MLDeployModelRequest) -> dict[str, Any]:
            self.requests[ML_DEPLOY_MODEL_ACTION.name] = request
            return {"task_id": self._next_id("task"), "status": "COMPLETED"}

        @registry.register(ML_REGISTER_MODEL_GROUP_ACTION)
        async def register_model_group(request: MLRegisterModelGroupRequest) -> dict[str, Any]:
            self.requests[ML_REGISTER_MODEL_GROUP_ACTION.name] = request
            return {"model_group_id": self._next_id("group")}

        @registry.register(ML_CREATE_CONNECTOR_ACTION)
        async def create_connector(request: MLCreateConnectorRequest) -> MLCreateConnectorResponse:
            self.requests[ML_CREATE_CONNECTOR_ACTION.name] = request
            return MLCreateConnectorResponse(connector_id=self._next_id("connector"), status="CREATED")

        @registry.register(ML_TASK_GET_ACTION)
        async def get_task(request: MLTaskGetRequest) -> dict[str, Any]:
            self.requests[ML_TASK_GET_ACTION.name] = request
            task = self.tasks.get(request.task_id)
            if task is None:
                raise LookupError(f"Failed to find task {request.task_id}")
            return {"ml_task": task.model_dump()}

        @registry.register(ML_TASK_DELETE_ACTION)
        async def delete_task(request: MLTaskDeleteRequest) -> DeleteResponse:
            self.requests[ML_TASK_DELETE_ACTION.name] = request
            self.tasks.pop(request.task_id, None)
            return DeleteResponse(index=".plugins-ml-task", id=request.task_id)

        @registry.register(ML_TASK_SEARCH_ACTION)
        async def search_tasks(request: SearchRequest) -> SearchResponse:
            self.requests[ML_TASK_SEARCH_ACTION.name] = request
            hits = [SearchHit(id=task_id, index=".plugins-ml-task") for task_id in self.tasks]
            return SearchResponse(took=1, hits=SearchHits(total=len(hits), hits=hits))

        return registry
