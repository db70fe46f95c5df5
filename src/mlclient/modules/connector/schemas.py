"""Connector schemas and the create-connector action."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

from mlclient.core.action import ActionRequest, ActionResponse, ActionType
from mlclient.modules.model_group.schemas import AccessMode


class ConnectorProtocol(StrEnum):
    """Wire protocols a connector can speak to an external service."""

    HTTP = "http"
    AWS_SIGV4 = "aws_sigv4"


class ConnectorAction(BaseModel):
    """One call a connector knows how to make."""

    action_type: str = Field(description="e.g. PREDICT")
    method: str = Field(default="POST")
    url: str
    headers: dict[str, str] | None = None
    request_body: str | None = None
    pre_process_function: str | None = None
    post_process_function: str | None = None


class MLCreateConnectorInput(BaseModel):
    """Configuration of an external-service connector."""

    name: str = Field(min_length=1, description="Connector name")
    description: str | None = None
    version: str | None = None
    protocol: ConnectorProtocol = Field(description="Protocol used to reach the service")
    parameters: dict[str, Any] | None = Field(default=None, description="Values substituted into actions")
    credential: dict[str, str] | None = Field(default=None, description="Secrets, encrypted by the node")
    actions: list[ConnectorAction] = Field(default_factory=list)
    backend_roles: list[str] | None = None
    access_mode: AccessMode | None = None
    add_all_backend_roles: bool | None = None


class MLCreateConnectorRequest(ActionRequest):
    """Request to create a connector."""

    create_connector_input: MLCreateConnectorInput


class MLCreateConnectorResponse(ActionResponse):
    """Creation acknowledgement."""

    connector_id: str = Field(description="Created connector")
    status: str | None = None


ML_CREATE_CONNECTOR_ACTION = ActionType("cluster:admin/opensearch/ml/create_connector", MLCreateConnectorResponse)
