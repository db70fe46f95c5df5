"""Shared fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from mlclient.core.api.dependencies import set_cluster_service, set_ml_client, set_settings
from mlclient.core.cluster import DiscoveryNode, NodeRole, StaticClusterService
from mlclient.modules.ml import DataFrameInputDataset, FunctionName, MLInput, PandasDataFrame


@pytest.fixture(autouse=True)
def reset_globals() -> Iterator[None]:
    """Reset global dependencies between tests."""
    yield
    set_ml_client(None)
    set_cluster_service(None)
    set_settings(None)


@pytest.fixture
def data_frame() -> PandasDataFrame:
    """Two-column frame with three rows."""
    return PandasDataFrame(columns=["k1", "k2"], data=[[1.0, 2.0], [1.1, 2.1], [9.0, 9.5]])


@pytest.fixture
def kmeans_input(data_frame: PandasDataFrame) -> MLInput:
    """K-means input over the inline data frame."""
    return MLInput(algorithm=FunctionName.KMEANS, input_dataset=DataFrameInputDataset(data_frame=data_frame))


@pytest.fixture
def cluster_service() -> StaticClusterService:
    """Cluster with one data node and one cluster-manager-only node."""
    return StaticClusterService(
        [
            DiscoveryNode(id="node-data-1", name="data-1", roles=frozenset({NodeRole.DATA, NodeRole.ML})),
            DiscoveryNode(id="node-manager-1", name="manager-1", roles=frozenset({NodeRole.CLUSTER_MANAGER})),
        ]
    )
