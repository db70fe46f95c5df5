"""Service builder wiring the ML client and REST surface into a FastAPI app."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Self

from fastapi import FastAPI

from mlclient.client import MachineLearningClient
from mlclient.core.api.dependencies import (
    get_cluster_service,
    get_ml_client,
    set_cluster_service,
    set_ml_client,
)
from mlclient.core.api.routers.health import HealthCheck, cluster_health_check
from mlclient.core.api.service_builder import BaseServiceBuilder
from mlclient.core.cluster import ClusterService, StaticClusterService
from mlclient.core.logging import get_logger
from mlclient.core.settings import Settings
from mlclient.rest import MLRestRouter

logger = get_logger(__name__)


@dataclass(slots=True)
class _MLOptions:
    """Internal ML options for MLServiceBuilder."""

    client: MachineLearningClient
    cluster_service: ClusterService = field(default_factory=StaticClusterService)
    prefix: str | None = None
    tags: list[str] = field(default_factory=lambda: ["ML"])


class MLServiceBuilder(BaseServiceBuilder):
    """Service builder exposing an ML client over the plugin REST surface.

    Usage:
        app = (
            MLServiceBuilder(info=ServiceInfo(display_name="ML"))
            .with_logging()
            .with_health()
            .with_ml(MachineLearningNodeClient(node_client), cluster_service=cluster)
            .build()
        )
    """

    def __init__(self, **kwargs: Any) -> None:
        """Initialize service builder with ML-specific state."""
        super().__init__(**kwargs)
        self._ml_options: _MLOptions | None = None

    def with_ml(
        self,
        client: MachineLearningClient,
        *,
        cluster_service: ClusterService | None = None,
        settings: Settings | None = None,
        prefix: str | None = None,
        tags: list[str] | None = None,
    ) -> Self:
        """Enable the ML REST endpoints backed by the given client.

        The prefix defaults to the settings' base_uri (/_plugins/_ml).
        """
        self._ml_options = _MLOptions(
            client=client,
            cluster_service=cluster_service or StaticClusterService(),
            prefix=prefix,
            tags=list(tags) if tags else ["ML"],
        )
        if settings is not None:
            self.with_settings(settings)
        return self

    # --------------------------------------------------------------------- Extension point implementations

    def _validate_module_configuration(self) -> None:
        """Validate ML configuration."""
        if self._ml_options is not None and self._ml_options.client is None:
            raise ValueError("ML endpoints require a client. Pass one to `with_ml(...)`.")

    def _register_module_routers(self, app: FastAPI) -> None:
        """Register the ML REST router."""
        if self._ml_options is None:
            return

        ml_options = self._ml_options
        prefix = ml_options.prefix if ml_options.prefix is not None else app.state.settings.base_uri
        client = ml_options.client
        cluster_service = ml_options.cluster_service

        async def _client_dependency() -> MachineLearningClient:
            return client

        async def _cluster_dependency() -> ClusterService:
            return cluster_service

        app.include_router(MLRestRouter.create(prefix=prefix, tags=ml_options.tags))
        app.dependency_overrides[get_ml_client] = _client_dependency
        app.dependency_overrides[get_cluster_service] = _cluster_dependency

    def _health_checks(self, checks: dict[str, HealthCheck]) -> dict[str, HealthCheck]:
        """Add a cluster check when the ML endpoints are enabled."""
        if self._ml_options is None or "cluster" in checks:
            return checks
        return {**checks, "cluster": cluster_health_check(self._ml_options.cluster_service)}

    async def _on_module_startup(self, app: FastAPI) -> None:
        if self._ml_options is None:
            return
        set_ml_client(self._ml_options.client)
        set_cluster_service(self._ml_options.cluster_service)
        app.state.ml_client = self._ml_options.client
        data_nodes = len(self._ml_options.cluster_service.state().nodes().data_nodes)
        logger.info("ml.enabled", data_nodes=data_nodes)

    async def _on_module_shutdown(self, app: FastAPI) -> None:
        if self._ml_options is None:
            return
        set_ml_client(None)
        set_cluster_service(None)
        app.state.ml_client = None
