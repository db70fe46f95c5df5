"""Client facade turning typed calls into dispatched action requests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from mlclient.core.action import ActionRequest, ActionResponse, ActionType
from mlclient.core.client import Client
from mlclient.core.exceptions import InvalidArgumentError
from mlclient.core.logging import get_logger
from mlclient.modules.connector import (
    ML_CREATE_CONNECTOR_ACTION,
    MLCreateConnectorInput,
    MLCreateConnectorRequest,
    MLCreateConnectorResponse,
)
from mlclient.modules.ml import (
    ML_PREDICTION_TASK_ACTION,
    ML_TRAIN_AND_PREDICT_TASK_ACTION,
    ML_TRAINING_TASK_ACTION,
    MLInput,
    MLOutput,
    MLPredictionTaskRequest,
    MLTrainingTaskRequest,
    RunAction,
    RunArguments,
    convert_argument_to_ml_parameter,
)
from mlclient.modules.model import (
    ML_DEPLOY_MODEL_ACTION,
    ML_MODEL_DELETE_ACTION,
    ML_MODEL_GET_ACTION,
    ML_MODEL_SEARCH_ACTION,
    ML_REGISTER_MODEL_ACTION,
    MLDeployModelRequest,
    MLDeployModelResponse,
    MLModel,
    MLModelDeleteRequest,
    MLModelGetRequest,
    MLRegisterModelInput,
    MLRegisterModelRequest,
    MLRegisterModelResponse,
)
from mlclient.modules.model_group import (
    ML_REGISTER_MODEL_GROUP_ACTION,
    MLRegisterModelGroupInput,
    MLRegisterModelGroupRequest,
    MLRegisterModelGroupResponse,
)
from mlclient.modules.search import DeleteResponse, SearchRequest, SearchResponse
from mlclient.modules.task import (
    ML_TASK_DELETE_ACTION,
    ML_TASK_GET_ACTION,
    ML_TASK_SEARCH_ACTION,
    MLTask,
    MLTaskDeleteRequest,
    MLTaskGetRequest,
)

logger = get_logger(__name__)


def _validate_ml_input(ml_input: MLInput | None, require_input: bool) -> MLInput:
    """Check the input and, when required, its dataset are present."""
    if ml_input is None:
        raise InvalidArgumentError("ML Input can't be null")
    if require_input and ml_input.input_dataset is None:
        raise InvalidArgumentError("input data set can't be null")
    return ml_input


class MachineLearningNodeClient:
    """Machine learning client dispatching every operation through a node client.

    Each operation validates its input, builds one request, executes it against
    the named action and decodes the result. Failures from the dispatch primitive
    propagate unchanged. The facade holds no mutable state, so one instance can
    serve concurrent calls.

    Usage:
        ml_client = MachineLearningNodeClient(NodeClient(registry))
        output = await ml_client.predict(model_id, ml_input)
    """

    def __init__(self, client: Client) -> None:
        """Initialize with the dispatch primitive."""
        self.client = client

    async def _execute[ResponseT: ActionResponse](
        self,
        action: ActionType[ResponseT],
        request: ActionRequest,
    ) -> ResponseT:
        """Dispatch a request and decode the raw result into the action's response type."""
        logger.debug("ml_client.dispatch", action=action.name)
        raw = await self.client.execute(action, request)
        return action.decode(raw)

    # --------------------------------------------------------------------- Train / predict

    async def predict(self, model_id: str | None, ml_input: MLInput | None) -> MLOutput:
        """Predict with a trained model."""
        ml_input = _validate_ml_input(ml_input, True)
        request = MLPredictionTaskRequest(model_id=model_id, ml_input=ml_input, dispatch_task=True)
        response = await self._execute(ML_PREDICTION_TASK_ACTION, request)
        return response.output

    async def train_and_predict(self, ml_input: MLInput | None) -> MLOutput:
        """Train on the input and predict on it in one step."""
        ml_input = _validate_ml_input(ml_input, True)
        request = MLTrainingTaskRequest(ml_input=ml_input, dispatch_task=True)
        response = await self._execute(ML_TRAIN_AND_PREDICT_TASK_ACTION, request)
        return response.output

    async def train(self, ml_input: MLInput | None, async_task: bool = False) -> MLOutput:
        """Train a model; async training returns a task id instead of a model id."""
        ml_input = _validate_ml_input(ml_input, True)
        request = MLTrainingTaskRequest(ml_input=ml_input, async_task=async_task, dispatch_task=True)
        response = await self._execute(ML_TRAINING_TASK_ACTION, request)
        return response.output

    async def run(self, ml_input: MLInput | None, args: RunArguments | Mapping[str, Any]) -> MLOutput:
        """Run train, predict or train-and-predict as selected by the arguments.

        The algorithm and parameters found in the arguments replace those of the
        input on a copy; the caller's input is left untouched.
        """
        run_args = args if isinstance(args, RunArguments) else RunArguments.from_mapping(args)

        if run_args.action is RunAction.PREDICT and run_args.model_id is None:
            raise InvalidArgumentError("The model ID is required for prediction.")

        ml_input = _validate_ml_input(ml_input, False)

        algorithm = run_args.algorithm or ml_input.algorithm
        parameters = run_args.parameters
        if parameters is None:
            parameters = convert_argument_to_ml_parameter(run_args.parameter_values, algorithm)

        # Parameters always follow the algorithm, never the input's old schema
        if algorithm is not ml_input.algorithm:
            ml_input = ml_input.model_copy(update={"algorithm": algorithm, "parameters": parameters})
        elif parameters is not None:
            ml_input = ml_input.model_copy(update={"parameters": parameters})

        match run_args.action:
            case RunAction.TRAIN:
                return await self.train(ml_input, run_args.async_task)
            case RunAction.PREDICT:
                return await self.predict(run_args.model_id, ml_input)
            case RunAction.TRAIN_AND_PREDICT:
                return await self.train_and_predict(ml_input)
            case _:
                raise InvalidArgumentError("Unsupported action.")

    # --------------------------------------------------------------------- Models

    async def get_model(self, model_id: str, return_content: bool = False) -> MLModel:
        """Fetch a model."""
        request = MLModelGetRequest(model_id=model_id, return_content=return_content)
        response = await self._execute(ML_MODEL_GET_ACTION, request)
        return response.ml_model

    async def delete_model(self, model_id: str) -> DeleteResponse:
        """Delete a model."""
        return await self._execute(ML_MODEL_DELETE_ACTION, MLModelDeleteRequest(model_id=model_id))

    async def search_model(self, search_request: SearchRequest) -> SearchResponse:
        """Search models."""
        return await self._execute(ML_MODEL_SEARCH_ACTION, search_request)

    async def register(self, register_input: MLRegisterModelInput) -> MLRegisterModelResponse:
        """Register a model."""
        request = MLRegisterModelRequest(register_model_input=register_input)
        return await self._execute(ML_REGISTER_MODEL_ACTION, request)

    async def deploy(self, model_id: str) -> MLDeployModelResponse:
        """Deploy a model to all eligible nodes."""
        request = MLDeployModelRequest(model_id=model_id, async_task=False)
        return await self._execute(ML_DEPLOY_MODEL_ACTION, request)

    # --------------------------------------------------------------------- Model groups and connectors

    async def register_model_group(self, register_input: MLRegisterModelGroupInput) -> MLRegisterModelGroupResponse:
        """Register a model group."""
        request = MLRegisterModelGroupRequest(register_model_group_input=register_input)
        return await self._execute(ML_REGISTER_MODEL_GROUP_ACTION, request)

    async def create_connector(self, connector_input: MLCreateConnectorInput) -> MLCreateConnectorResponse:
        """Create a connector to an external service."""
        request = MLCreateConnectorRequest(create_connector_input=connector_input)
        return await self._execute(ML_CREATE_CONNECTOR_ACTION, request)

    # --------------------------------------------------------------------- Tasks

    async def get_task(self, task_id: str) -> MLTask:
        """Fetch a task."""
        response = await self._execute(ML_TASK_GET_ACTION, MLTaskGetRequest(task_id=task_id))
        return response.ml_task

    async def delete_task(self, task_id: str) -> DeleteResponse:
        """Delete a task."""
        return await self._execute(ML_TASK_DELETE_ACTION, MLTaskDeleteRequest(task_id=task_id))

    async def search_task(self, search_request: SearchRequest) -> SearchResponse:
        """Search tasks."""
        return await self._execute(ML_TASK_SEARCH_ACTION, search_request)
