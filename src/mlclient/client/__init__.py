"""Client facade for ML node actions."""

from .node_client import MachineLearningNodeClient
from .protocol import MachineLearningClient

__all__ = ["MachineLearningClient", "MachineLearningNodeClient"]
