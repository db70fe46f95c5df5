"""Model module - model records, registration input and the model actions."""

from .actions import (
    ML_DEPLOY_MODEL_ACTION,
    ML_MODEL_DELETE_ACTION,
    ML_MODEL_GET_ACTION,
    ML_MODEL_SEARCH_ACTION,
    ML_REGISTER_MODEL_ACTION,
    MLDeployModelRequest,
    MLDeployModelResponse,
    MLModelDeleteRequest,
    MLModelGetRequest,
    MLModelGetResponse,
    MLRegisterModelRequest,
    MLRegisterModelResponse,
)
from .schemas import (
    ML_MODEL_INDEX,
    MODEL_CONTENT_FIELD,
    OLD_MODEL_CONTENT_FIELD,
    MLModel,
    MLModelFormat,
    MLModelState,
    MLRegisterModelInput,
)

__all__ = [
    "ML_DEPLOY_MODEL_ACTION",
    "ML_MODEL_DELETE_ACTION",
    "ML_MODEL_GET_ACTION",
    "ML_MODEL_INDEX",
    "ML_MODEL_SEARCH_ACTION",
    "ML_REGISTER_MODEL_ACTION",
    "MLDeployModelRequest",
    "MLDeployModelResponse",
    "MLModel",
    "MLModelDeleteRequest",
    "MLModelFormat",
    "MLModelGetRequest",
    "MLModelGetResponse",
    "MLModelState",
    "MLRegisterModelInput",
    "MLRegisterModelRequest",
    "MLRegisterModelResponse",
    "MODEL_CONTENT_FIELD",
    "OLD_MODEL_CONTENT_FIELD",
]
