"""Tests for the cluster membership view."""

from __future__ import annotations

from mlclient.core import DiscoveryNode, NodeRole, StaticClusterService


def test_data_nodes(cluster_service: StaticClusterService) -> None:
    """Test only data nodes are listed as data nodes."""
    nodes = cluster_service.state().nodes()

    assert len(nodes) == 2
    assert list(nodes.data_nodes) == ["node-data-1"]
    assert nodes.get("node-manager-1") is not None
    assert nodes.get("missing") is None


def test_update_replaces_nodes(cluster_service: StaticClusterService) -> None:
    """Test updating the node set."""
    cluster_service.update([DiscoveryNode(id="a", roles=frozenset({NodeRole.DATA}))])

    state = cluster_service.state()
    assert [node.id for node in state.nodes()] == ["a"]
    assert state.cluster_name == "mlclient"


def test_is_data_node() -> None:
    """Test the data role check."""
    assert DiscoveryNode(id="a", roles=frozenset({NodeRole.DATA})).is_data_node
    assert not DiscoveryNode(id="b").is_data_node
