"""Interface of the machine learning client facade."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from mlclient.modules.connector import MLCreateConnectorInput, MLCreateConnectorResponse
from mlclient.modules.ml import MLInput, MLOutput, RunArguments
from mlclient.modules.model import MLDeployModelResponse, MLModel, MLRegisterModelInput, MLRegisterModelResponse
from mlclient.modules.model_group import MLRegisterModelGroupInput, MLRegisterModelGroupResponse
from mlclient.modules.search import DeleteResponse, SearchRequest, SearchResponse
from mlclient.modules.task import MLTask


class MachineLearningClient(Protocol):
    """Typed operations against an ML node."""

    async def predict(self, model_id: str | None, ml_input: MLInput | None) -> MLOutput:
        """Predict with a trained model."""
        ...

    async def train(self, ml_input: MLInput | None, async_task: bool = False) -> MLOutput:
        """Train a model; async training returns a task id instead of a model id."""
        ...

    async def train_and_predict(self, ml_input: MLInput | None) -> MLOutput:
        """Train on the input and predict on it in one step."""
        ...

    async def run(self, ml_input: MLInput | None, args: RunArguments | Mapping[str, Any]) -> MLOutput:
        """Run train, predict or train-and-predict as selected by the arguments."""
        ...

    async def get_model(self, model_id: str, return_content: bool = False) -> MLModel:
        """Fetch a model."""
        ...

    async def delete_model(self, model_id: str) -> DeleteResponse:
        """Delete a model."""
        ...

    async def search_model(self, search_request: SearchRequest) -> SearchResponse:
        """Search models."""
        ...

    async def register_model_group(self, register_input: MLRegisterModelGroupInput) -> MLRegisterModelGroupResponse:
        """Register a model group."""
        ...

    async def get_task(self, task_id: str) -> MLTask:
        """Fetch a task."""
        ...

    async def delete_task(self, task_id: str) -> DeleteResponse:
        """Delete a task."""
        ...

    async def search_task(self, search_request: SearchRequest) -> SearchResponse:
        """Search tasks."""
        ...

    async def register(self, register_input: MLRegisterModelInput) -> MLRegisterModelResponse:
        """Register a model."""
        ...

    async def deploy(self, model_id: str) -> MLDeployModelResponse:
        """Deploy a model."""
        ...

    async def create_connector(self, connector_input: MLCreateConnectorInput) -> MLCreateConnectorResponse:
        """Create a connector to an external service."""
        ...
