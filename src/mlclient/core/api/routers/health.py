"""Health check router."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from enum import StrEnum

from pydantic import BaseModel, Field

from mlclient.core.cluster import ClusterService

from ..router import Router


class HealthState(StrEnum):
    """Health state of a check or of the whole service."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


HealthCheck = Callable[[], Awaitable[tuple[HealthState, str | None]]]

_SEVERITY = {HealthState.HEALTHY: 0, HealthState.DEGRADED: 1, HealthState.UNHEALTHY: 2}


class CheckResult(BaseModel):
    """Outcome of one health check."""

    state: HealthState = Field(description="Health state of this check")
    message: str | None = Field(default=None, description="Optional detail")


class HealthStatus(BaseModel):
    """Overall health response."""

    status: HealthState = Field(description="Worst state across all checks")
    checks: dict[str, CheckResult] | None = Field(default=None, description="Per-check results, if any are configured")


async def _run_check(check: HealthCheck) -> CheckResult:
    try:
        state, message = await check()
    except Exception as e:
        return CheckResult(state=HealthState.UNHEALTHY, message=f"Check failed: {e}")
    return CheckResult(state=state, message=message)


def cluster_health_check(cluster_service: ClusterService) -> HealthCheck:
    """Check that reports degraded while the cluster has no data nodes."""

    async def check_cluster() -> tuple[HealthState, str | None]:
        data_nodes = cluster_service.state().nodes().data_nodes
        if not data_nodes:
            return (HealthState.DEGRADED, "No data nodes in cluster state")
        return (HealthState.HEALTHY, None)

    return check_cluster


class HealthRouter(Router):
    """Router exposing a single health endpoint."""

    def __init__(
        self,
        prefix: str,
        tags: list[str],
        checks: dict[str, HealthCheck] | None = None,
        **kwargs: object,
    ) -> None:
        """Initialize with named health checks."""
        self.checks = dict(checks or {})
        super().__init__(prefix=prefix, tags=tags, **kwargs)

    def _register_routes(self) -> None:
        checks = self.checks

        @self.router.get("", summary="Health check", response_model=HealthStatus, response_model_exclude_none=True)
        async def health_check() -> HealthStatus:
            if not checks:
                return HealthStatus(status=HealthState.HEALTHY)

            names = list(checks)
            results = await asyncio.gather(*(_run_check(checks[name]) for name in names))
            overall = max((result.state for result in results), key=_SEVERITY.__getitem__)
            return HealthStatus(status=overall, checks=dict(zip(names, results)))
