"""Task module - task records and the get/delete/search task actions."""

from .actions import (
    ML_TASK_DELETE_ACTION,
    ML_TASK_GET_ACTION,
    ML_TASK_SEARCH_ACTION,
    MLTaskDeleteRequest,
    MLTaskGetRequest,
    MLTaskGetResponse,
)
from .schemas import ML_TASK_INDEX, MLTask, MLTaskState, MLTaskType

__all__ = [
    "ML_TASK_DELETE_ACTION",
    "ML_TASK_GET_ACTION",
    "ML_TASK_INDEX",
    "ML_TASK_SEARCH_ACTION",
    "MLTask",
    "MLTaskDeleteRequest",
    "MLTaskGetRequest",
    "MLTaskGetResponse",
    "MLTaskState",
    "MLTaskType",
]
