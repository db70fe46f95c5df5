"""FastAPI dependency injection for the ML client, cluster view and settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mlclient.core.cluster import ClusterService, StaticClusterService
from mlclient.core.settings import Settings

if TYPE_CHECKING:
    from mlclient.client import MachineLearningClient

# Global ML client - should be initialized at app startup
_ml_client: MachineLearningClient | None = None

# Global cluster view - should be initialized at app startup
_cluster_service: ClusterService | None = None

_settings: Settings | None = None


def set_ml_client(client: MachineLearningClient | None) -> None:
    """Set the global ML client."""
    global _ml_client
    _ml_client = client


def get_ml_client() -> MachineLearningClient:
    """Get the global ML client."""
    if _ml_client is None:
        raise RuntimeError("ML client not initialized. Call set_ml_client() during app startup.")
    return _ml_client


def set_cluster_service(cluster_service: ClusterService | None) -> None:
    """Set the global cluster view."""
    global _cluster_service
    _cluster_service = cluster_service


def get_cluster_service() -> ClusterService:
    """Get the global cluster view, an empty cluster when none was set."""
    if _cluster_service is None:
        return StaticClusterService()
    return _cluster_service


def set_settings(settings: Settings | None) -> None:
    """Set the global settings."""
    global _settings
    _settings = settings


def get_settings() -> Settings:
    """Get the global settings, loading them from the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings
