"""Model schemas for lookup, registration and deployment."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from mlclient.modules.ml.parameters import FunctionName

ML_MODEL_INDEX = ".plugins-ml-model"

# Source fields holding serialized model content
OLD_MODEL_CONTENT_FIELD = "content"
MODEL_CONTENT_FIELD = "model_content"


class MLModelState(StrEnum):
    """Lifecycle state of a model."""

    REGISTERING = "REGISTERING"
    REGISTERED = "REGISTERED"
    DEPLOYING = "DEPLOYING"
    DEPLOYED = "DEPLOYED"
    PARTIALLY_DEPLOYED = "PARTIALLY_DEPLOYED"
    UNDEPLOYED = "UNDEPLOYED"
    DEPLOY_FAILED = "DEPLOY_FAILED"
    TRAINED = "TRAINED"


class MLModelFormat(StrEnum):
    """Serialization format of uploaded model files."""

    TORCH_SCRIPT = "TORCH_SCRIPT"
    ONNX = "ONNX"


class MLModel(BaseModel):
    """Model identity and metadata as stored by the ML node."""

    model_id: str | None = Field(default=None, description="Model identifier")
    name: str | None = Field(default=None, description="Model name")
    algorithm: FunctionName | None = Field(default=None, description="Algorithm the model was built with")
    version: str | None = Field(default=None, description="Model version within its group")
    model_group_id: str | None = Field(default=None, description="Owning model group")
    model_state: MLModelState | None = Field(default=None, description="Lifecycle state")
    model_format: MLModelFormat | None = None
    description: str | None = None
    content: str | None = Field(default=None, description="Serialized model content, base64")
    connector_id: str | None = None
    created_time: datetime | None = None
    last_updated_time: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class MLRegisterModelInput(BaseModel):
    """Specification of a model to register."""

    function_name: FunctionName = Field(default=FunctionName.TEXT_EMBEDDING, description="Algorithm of the model")
    model_name: str = Field(min_length=1, alias="name", description="Model name")
    version: str | None = Field(default=None, description="Model version")
    model_group_id: str | None = Field(default=None, description="Group to register the model into")
    description: str | None = None
    url: str | None = Field(default=None, description="Where the node downloads the model file from")
    model_format: MLModelFormat | None = None
    model_configuration: dict[str, Any] | None = Field(default=None, alias="model_config")
    model_content_hash_value: str | None = None
    connector_id: str | None = Field(default=None, description="Existing connector of a remote model")
    connector: dict[str, Any] | None = Field(default=None, description="Inline connector of a remote model")
    deploy_model: bool = Field(default=False, description="Deploy right after registration")
    model_node_ids: list[str] | None = Field(default=None, description="Nodes to deploy to")

    model_config = ConfigDict(populate_by_name=True)
