"""REST endpoints of the ML plugin surface."""

from __future__ import annotations

from typing import Any

from fastapi import Body, Depends, Request
from pydantic import BaseModel, Field

from mlclient.client import MachineLearningClient
from mlclient.core.api.dependencies import get_cluster_service, get_ml_client, get_settings
from mlclient.core.api.router import Router
from mlclient.core.cluster import ClusterService
from mlclient.core.logging import get_logger
from mlclient.core.settings import Settings
from mlclient.modules.connector import MLCreateConnectorInput, MLCreateConnectorResponse
from mlclient.modules.ml import MLInput, MLOutput
from mlclient.modules.model import (
    ML_MODEL_INDEX,
    MLDeployModelResponse,
    MLModel,
    MLRegisterModelInput,
    MLRegisterModelResponse,
)
from mlclient.modules.model_group import MLRegisterModelGroupInput, MLRegisterModelGroupResponse
from mlclient.modules.search import DeleteResponse, SearchRequest, SearchResponse, SearchSourceBuilder
from mlclient.modules.task import ML_TASK_INDEX, MLTask

from .utils import (
    PARAMETER_MODEL_ID,
    PARAMETER_TASK_ID,
    get_algorithm,
    get_all_nodes,
    get_parameter_id,
    get_source_context,
    is_async,
    is_return_content,
)

logger = get_logger(__name__)


class NodesResponse(BaseModel):
    """Data nodes eligible to run ML work."""

    nodes: list[str] = Field(description="Data node ids")


def _search_request(
    request: Request,
    body: dict[str, Any] | None,
    index: str,
    settings: Settings,
) -> SearchRequest:
    search_source = SearchSourceBuilder.parse(body)
    source_context = get_source_context(request, search_source, settings)
    return SearchRequest(indices=[index], source=search_source.model_copy(update={"fetch_source": source_context}))


class MLRestRouter(Router):
    """Router translating REST calls into ML client operations."""

    def __init__(
        self,
        prefix: str,
        tags: list[str],
        client_factory: Any = get_ml_client,
        cluster_service_factory: Any = get_cluster_service,
        settings_factory: Any = get_settings,
        **kwargs: Any,
    ) -> None:
        """Initialize with dependency factories for the client, cluster view and settings."""
        self.client_factory = client_factory
        self.cluster_service_factory = cluster_service_factory
        self.settings_factory = settings_factory
        super().__init__(prefix=prefix, tags=tags, **kwargs)

    def _register_routes(self) -> None:
        """Register train/predict, model, model group, task, connector and node routes."""
        self._register_task_routes()
        self._register_model_routes()
        self._register_admin_routes()

    def _register_task_routes(self) -> None:
        client_factory = self.client_factory

        @self.router.post("/_train/{algorithm}", response_model=MLOutput, summary="Train a model")
        async def train(
            request: Request,
            body: dict[str, Any] | None = Body(default=None),
            client: MachineLearningClient = Depends(client_factory),
        ) -> MLOutput:
            algorithm = get_algorithm(request)
            async_task = is_async(request)
            ml_input = MLInput.parse(algorithm, body)
            logger.info("rest.train", algorithm=algorithm, async_task=async_task)
            return await client.train(ml_input, async_task)

        @self.router.post("/_predict/{algorithm}/{model_id}", response_model=MLOutput, summary="Predict with a model")
        async def predict(
            request: Request,
            body: dict[str, Any] | None = Body(default=None),
            client: MachineLearningClient = Depends(client_factory),
        ) -> MLOutput:
            algorithm = get_algorithm(request)
            model_id = get_parameter_id(request, PARAMETER_MODEL_ID)
            ml_input = MLInput.parse(algorithm, body)
            logger.info("rest.predict", algorithm=algorithm, model_id=model_id)
            return await client.predict(model_id, ml_input)

        @self.router.post("/_train_predict/{algorithm}", response_model=MLOutput, summary="Train and predict")
        async def train_and_predict(
            request: Request,
            body: dict[str, Any] | None = Body(default=None),
            client: MachineLearningClient = Depends(client_factory),
        ) -> MLOutput:
            algorithm = get_algorithm(request)
            ml_input = MLInput.parse(algorithm, body)
            logger.info("rest.train_and_predict", algorithm=algorithm)
            return await client.train_and_predict(ml_input)

    def _register_model_routes(self) -> None:
        client_factory = self.client_factory
        settings_factory = self.settings_factory

        @self.router.post("/models/_search", response_model=SearchResponse, summary="Search models")
        async def search_models(
            request: Request,
            body: dict[str, Any] | None = Body(default=None),
            client: MachineLearningClient = Depends(client_factory),
            settings: Settings = Depends(settings_factory),
        ) -> SearchResponse:
            return await client.search_model(_search_request(request, body, ML_MODEL_INDEX, settings))

        @self.router.post("/models/_register", response_model=MLRegisterModelResponse, summary="Register a model")
        async def register_model(
            register_input: MLRegisterModelInput,
            client: MachineLearningClient = Depends(client_factory),
        ) -> MLRegisterModelResponse:
            logger.info("rest.register_model", name=register_input.model_name)
            return await client.register(register_input)

        @self.router.get("/models/{model_id}", response_model=MLModel, summary="Get a model")
        async def get_model(
            request: Request,
            client: MachineLearningClient = Depends(client_factory),
        ) -> MLModel:
            model_id = get_parameter_id(request, PARAMETER_MODEL_ID)
            return await client.get_model(model_id, is_return_content(request))

        @self.router.delete("/models/{model_id}", response_model=DeleteResponse, summary="Delete a model")
        async def delete_model(
            request: Request,
            client: MachineLearningClient = Depends(client_factory),
        ) -> DeleteResponse:
            model_id = get_parameter_id(request, PARAMETER_MODEL_ID)
            logger.info("rest.delete_model", model_id=model_id)
            return await client.delete_model(model_id)

        @self.router.post("/models/{model_id}/_deploy", response_model=MLDeployModelResponse, summary="Deploy a model")
        async def deploy_model(
            request: Request,
            client: MachineLearningClient = Depends(client_factory),
        ) -> MLDeployModelResponse:
            model_id = get_parameter_id(request, PARAMETER_MODEL_ID)
            logger.info("rest.deploy_model", model_id=model_id)
            return await client.deploy(model_id)

    def _register_admin_routes(self) -> None:
        client_factory = self.client_factory
        cluster_service_factory = self.cluster_service_factory
        settings_factory = self.settings_factory

        @self.router.post(
            "/model_groups/_register",
            response_model=MLRegisterModelGroupResponse,
            summary="Register a model group",
        )
        async def register_model_group(
            register_input: MLRegisterModelGroupInput,
            client: MachineLearningClient = Depends(client_factory),
        ) -> MLRegisterModelGroupResponse:
            logger.info("rest.register_model_group", name=register_input.name)
            return await client.register_model_group(register_input)

        @self.router.post("/tasks/_search", response_model=SearchResponse, summary="Search tasks")
        async def search_tasks(
            request: Request,
            body: dict[str, Any] | None = Body(default=None),
            client: MachineLearningClient = Depends(client_factory),
            settings: Settings = Depends(settings_factory),
        ) -> SearchResponse:
            return await client.search_task(_search_request(request, body, ML_TASK_INDEX, settings))

        @self.router.get("/tasks/{task_id}", response_model=MLTask, summary="Get a task")
        async def get_task(
            request: Request,
            client: MachineLearningClient = Depends(client_factory),
        ) -> MLTask:
            return await client.get_task(get_parameter_id(request, PARAMETER_TASK_ID))

        @self.router.delete("/tasks/{task_id}", response_model=DeleteResponse, summary="Delete a task")
        async def delete_task(
            request: Request,
            client: MachineLearningClient = Depends(client_factory),
        ) -> DeleteResponse:
            task_id = get_parameter_id(request, PARAMETER_TASK_ID)
            logger.info("rest.delete_task", task_id=task_id)
            return await client.delete_task(task_id)

        @self.router.post(
            "/connectors/_create",
            response_model=MLCreateConnectorResponse,
            summary="Create a connector",
        )
        async def create_connector(
            connector_input: MLCreateConnectorInput,
            client: MachineLearningClient = Depends(client_factory),
        ) -> MLCreateConnectorResponse:
            logger.info("rest.create_connector", name=connector_input.name)
            return await client.create_connector(connector_input)

        @self.router.get("/_nodes", response_model=NodesResponse, summary="List data nodes")
        async def list_nodes(
            cluster_service: ClusterService = Depends(cluster_service_factory),
        ) -> NodesResponse:
            return NodesResponse(nodes=get_all_nodes(cluster_service))
