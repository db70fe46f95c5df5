"""Core routers."""

from .health import CheckResult, HealthCheck, HealthRouter, HealthState, HealthStatus, cluster_health_check

__all__ = [
    "CheckResult",
    "HealthCheck",
    "HealthRouter",
    "HealthState",
    "HealthStatus",
    "cluster_health_check",
]
