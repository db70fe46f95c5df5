"""Model group module."""

from .schemas import (
    ML_REGISTER_MODEL_GROUP_ACTION,
    AccessMode,
    MLRegisterModelGroupInput,
    MLRegisterModelGroupRequest,
    MLRegisterModelGroupResponse,
)

__all__ = [
    "AccessMode",
    "ML_REGISTER_MODEL_GROUP_ACTION",
    "MLRegisterModelGroupInput",
    "MLRegisterModelGroupRequest",
    "MLRegisterModelGroupResponse",
]
