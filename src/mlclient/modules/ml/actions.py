"""Train and predict actions with their request and response schemas."""

from __future__ import annotations

from pydantic import Field

from mlclient.core.action import ActionRequest, ActionResponse, ActionType

from .schemas import MLInput, MLOutput


class MLTaskResponse(ActionResponse):
    """Response of the train, predict and train-and-predict actions."""

    output: MLOutput = Field(description="Algorithm output")


class MLPredictionTaskRequest(ActionRequest):
    """Request to predict with a trained model."""

    model_id: str | None = Field(default=None, description="Model to predict with")
    ml_input: MLInput = Field(description="Algorithm and input data")
    dispatch_task: bool = Field(default=True, description="Let the node dispatch the task to a worker node")


class MLTrainingTaskRequest(ActionRequest):
    """Request to train, or to train and predict in one step."""

    ml_input: MLInput = Field(description="Algorithm, parameters and training data")
    async_task: bool = Field(default=False, alias="async", description="Return a task id instead of waiting")
    dispatch_task: bool = Field(default=True, description="Let the node dispatch the task to a worker node")


ML_PREDICTION_TASK_ACTION = ActionType("cluster:admin/opensearch/ml/predict", MLTaskResponse)
ML_TRAINING_TASK_ACTION = ActionType("cluster:admin/opensearch/ml/train", MLTaskResponse)
ML_TRAIN_AND_PREDICT_TASK_ACTION = ActionType("cluster:admin/opensearch/ml/trainAndPredict", MLTaskResponse)
