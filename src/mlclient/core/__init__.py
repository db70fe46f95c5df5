"""Core dispatch framework - actions, clients, listeners, context and cluster view."""

from .action import ActionRequest, ActionResponse, ActionType
from .client import ActionHandler, ActionRegistry, Client, NodeClient
from .cluster import ClusterService, ClusterState, DiscoveryNode, DiscoveryNodes, NodeRole, StaticClusterService
from .context import USER_INFO_TRANSIENT, ThreadContext
from .exceptions import ActionAlreadyRegisteredError, ActionNotFoundError, InvalidArgumentError, MLClientError
from .listener import ActionListener, FunctionalActionListener, NotifyOnceListener, notify, wrap
from .settings import Settings

__all__ = [
    # Actions
    "ActionType",
    "ActionRequest",
    "ActionResponse",
    # Dispatch
    "Client",
    "NodeClient",
    "ActionRegistry",
    "ActionHandler",
    # Listeners
    "ActionListener",
    "FunctionalActionListener",
    "NotifyOnceListener",
    "notify",
    "wrap",
    # Context
    "ThreadContext",
    "USER_INFO_TRANSIENT",
    # Cluster
    "ClusterService",
    "ClusterState",
    "DiscoveryNode",
    "DiscoveryNodes",
    "NodeRole",
    "StaticClusterService",
    # Errors
    "MLClientError",
    "InvalidArgumentError",
    "ActionNotFoundError",
    "ActionAlreadyRegisteredError",
    # Settings
    "Settings",
]
