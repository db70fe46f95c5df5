"""Minimal read-only view of cluster membership."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from enum import StrEnum
from typing import Protocol

from pydantic import BaseModel, Field


class NodeRole(StrEnum):
    """Roles a cluster node can hold."""

    CLUSTER_MANAGER = "cluster_manager"
    DATA = "data"
    INGEST = "ingest"
    ML = "ml"
    COORDINATING = "coordinating"


class DiscoveryNode(BaseModel):
    """A cluster member."""

    id: str = Field(description="Unique node identifier")
    name: str | None = Field(default=None, description="Human-readable node name")
    address: str | None = Field(default=None, description="Transport address")
    roles: frozenset[NodeRole] = Field(default_factory=frozenset, description="Roles held by the node")

    @property
    def is_data_node(self) -> bool:
        """Whether the node holds data."""
        return NodeRole.DATA in self.roles


class DiscoveryNodes:
    """Collection of cluster members keyed by node id."""

    def __init__(self, nodes: Iterable[DiscoveryNode] = ()) -> None:
        """Initialize from an iterable of nodes."""
        self._nodes: dict[str, DiscoveryNode] = {node.id: node for node in nodes}

    @property
    def data_nodes(self) -> Mapping[str, DiscoveryNode]:
        """Data-carrying nodes keyed by id."""
        return {node_id: node for node_id, node in self._nodes.items() if node.is_data_node}

    def get(self, node_id: str) -> DiscoveryNode | None:
        """Return a node by id or None."""
        return self._nodes.get(node_id)

    def __iter__(self) -> Iterator[DiscoveryNode]:
        return iter(self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)


class ClusterState:
    """Snapshot of cluster membership."""

    def __init__(self, nodes: DiscoveryNodes, cluster_name: str = "mlclient") -> None:
        """Initialize with the current nodes."""
        self._nodes = nodes
        self.cluster_name = cluster_name

    def nodes(self) -> DiscoveryNodes:
        """Return the nodes of this snapshot."""
        return self._nodes


class ClusterService(Protocol):
    """Provides the current cluster state."""

    def state(self) -> ClusterState:
        """Return the current cluster state."""
        ...


class StaticClusterService:
    """Cluster service returning a fixed, replaceable state."""

    def __init__(self, nodes: Iterable[DiscoveryNode] = (), cluster_name: str = "mlclient") -> None:
        """Initialize with a fixed set of nodes."""
        self._state = ClusterState(DiscoveryNodes(nodes), cluster_name=cluster_name)

    def state(self) -> ClusterState:
        """Return the current cluster state."""
        return self._state

    def update(self, nodes: Iterable[DiscoveryNode]) -> None:
        """Replace the node set."""
        self._state = ClusterState(DiscoveryNodes(nodes), cluster_name=self._state.cluster_name)
