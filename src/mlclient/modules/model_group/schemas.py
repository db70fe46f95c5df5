"""Model group schemas and the register-model-group action."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field, model_validator

from mlclient.core.action import ActionRequest, ActionResponse, ActionType


class AccessMode(StrEnum):
    """Who may use a model group or connector."""

    PUBLIC = "public"
    PRIVATE = "private"
    RESTRICTED = "restricted"


class MLRegisterModelGroupInput(BaseModel):
    """Specification of a model group to register."""

    name: str = Field(min_length=1, description="Group name")
    description: str | None = None
    backend_roles: list[str] | None = Field(default=None, description="Roles granted access in restricted mode")
    access_mode: AccessMode | None = None
    add_all_backend_roles: bool | None = Field(default=None, description="Grant access to all of the caller's roles")

    @model_validator(mode="after")
    def _check_backend_roles(self) -> MLRegisterModelGroupInput:
        if self.backend_roles and self.add_all_backend_roles:
            raise ValueError("You can't specify backend roles and add all backend roles to true at same time.")
        return self


class MLRegisterModelGroupRequest(ActionRequest):
    """Request to register a model group."""

    register_model_group_input: MLRegisterModelGroupInput


class MLRegisterModelGroupResponse(ActionResponse):
    """Registration acknowledgement."""

    model_group_id: str = Field(description="Registered group")
    status: str = Field(default="CREATED")


ML_REGISTER_MODEL_GROUP_ACTION = ActionType(
    "cluster:admin/opensearch/ml/register_model_group",
    MLRegisterModelGroupResponse,
)
