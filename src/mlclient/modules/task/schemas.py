"""Task schemas: state, type and the task record."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from mlclient.modules.ml.parameters import FunctionName
from mlclient.modules.ml.schemas import MLInputDataType

ML_TASK_INDEX = ".plugins-ml-task"


class MLTaskState(StrEnum):
    """Execution state of a task."""

    CREATED = "CREATED"
    RUNNING = "RUNNING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    CANCELLED = "CANCELLED"
    COMPLETED_WITH_ERROR = "COMPLETED_WITH_ERROR"


class MLTaskType(StrEnum):
    """Kind of work a task performs."""

    TRAINING = "TRAINING"
    PREDICTION = "PREDICTION"
    TRAINING_AND_PREDICTION = "TRAINING_AND_PREDICTION"
    EXECUTION = "EXECUTION"
    REGISTER_MODEL = "REGISTER_MODEL"
    DEPLOY_MODEL = "DEPLOY_MODEL"


class MLTask(BaseModel):
    """Task identity and status as stored by the ML node."""

    task_id: str | None = Field(default=None, description="Task identifier")
    model_id: str | None = Field(default=None, description="Model the task produced or used")
    task_type: MLTaskType | None = None
    function_name: FunctionName | None = None
    state: MLTaskState | None = None
    input_type: MLInputDataType | None = None
    progress: float | None = Field(default=None, ge=0, le=1)
    output_index: str | None = None
    worker_nodes: list[str] = Field(default_factory=list, description="Nodes running the task")
    create_time: datetime | None = None
    last_update_time: datetime | None = None
    error: str | None = None
    is_async: bool = Field(default=False, description="Whether the task was submitted asynchronously")

    model_config = ConfigDict(from_attributes=True)

    @property
    def is_done(self) -> bool:
        """Whether the task reached a terminal state."""
        return self.state in (
            MLTaskState.COMPLETED,
            MLTaskState.FAILED,
            MLTaskState.CANCELLED,
            MLTaskState.COMPLETED_WITH_ERROR,
        )
