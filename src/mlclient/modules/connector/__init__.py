"""Connector module."""

from .schemas import (
    ML_CREATE_CONNECTOR_ACTION,
    ConnectorAction,
    ConnectorProtocol,
    MLCreateConnectorInput,
    MLCreateConnectorRequest,
    MLCreateConnectorResponse,
)

__all__ = [
    "ConnectorAction",
    "ConnectorProtocol",
    "ML_CREATE_CONNECTOR_ACTION",
    "MLCreateConnectorInput",
    "MLCreateConnectorRequest",
    "MLCreateConnectorResponse",
]
