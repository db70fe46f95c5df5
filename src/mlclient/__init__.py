"""mlclient - typed client facade and REST surface for ML node actions."""

# Client facade
from mlclient.client import MachineLearningClient, MachineLearningNodeClient

# Core framework
from mlclient.core import (
    ActionListener,
    ActionNotFoundError,
    ActionRegistry,
    ActionRequest,
    ActionResponse,
    ActionType,
    Client,
    ClusterService,
    DiscoveryNode,
    InvalidArgumentError,
    MLClientError,
    NodeClient,
    NodeRole,
    Settings,
    StaticClusterService,
    ThreadContext,
    notify,
    wrap,
)

# ML feature
from mlclient.modules.ml import (
    FunctionName,
    KMeansParams,
    MLInput,
    MLOutput,
    MLPredictionOutput,
    MLTrainingOutput,
    PandasDataFrame,
    RunArguments,
)

# Model, task and search features
from mlclient.modules.model import MLModel, MLRegisterModelInput
from mlclient.modules.search import SearchRequest, SearchResponse, SearchSourceBuilder
from mlclient.modules.task import MLTask

__all__ = [
    # Client facade
    "MachineLearningClient",
    "MachineLearningNodeClient",
    # Core framework
    "ActionType",
    "ActionRequest",
    "ActionResponse",
    "Client",
    "NodeClient",
    "ActionRegistry",
    "ActionListener",
    "notify",
    "wrap",
    "ThreadContext",
    "ClusterService",
    "DiscoveryNode",
    "NodeRole",
    "StaticClusterService",
    "Settings",
    "MLClientError",
    "InvalidArgumentError",
    "ActionNotFoundError",
    # ML feature
    "FunctionName",
    "KMeansParams",
    "MLInput",
    "MLOutput",
    "MLPredictionOutput",
    "MLTrainingOutput",
    "PandasDataFrame",
    "RunArguments",
    # Model, task and search
    "MLModel",
    "MLRegisterModelInput",
    "MLTask",
    "SearchRequest",
    "SearchResponse",
    "SearchSourceBuilder",
]
