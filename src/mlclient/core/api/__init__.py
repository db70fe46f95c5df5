"""FastAPI framework layer - routers, middleware, utilities."""

from .dependencies import (
    get_cluster_service,
    get_ml_client,
    get_settings,
    set_cluster_service,
    set_ml_client,
    set_settings,
)
from .middleware import (
    RequestLoggingMiddleware,
    action_not_found_handler,
    add_error_handlers,
    add_logging_middleware,
    invalid_argument_handler,
    validation_error_handler,
)
from .router import Router
from .routers import CheckResult, HealthCheck, HealthRouter, HealthState, HealthStatus, cluster_health_check
from .service_builder import BaseServiceBuilder, ServiceInfo
from .utilities import run_app

__all__ = [
    # Base router class
    "Router",
    # Service builder
    "BaseServiceBuilder",
    "ServiceInfo",
    # Dependencies
    "get_ml_client",
    "set_ml_client",
    "get_cluster_service",
    "set_cluster_service",
    "get_settings",
    "set_settings",
    # Middleware
    "RequestLoggingMiddleware",
    "add_error_handlers",
    "add_logging_middleware",
    "invalid_argument_handler",
    "validation_error_handler",
    "action_not_found_handler",
    # Health
    "HealthRouter",
    "HealthState",
    "HealthStatus",
    "HealthCheck",
    "CheckResult",
    "cluster_health_check",
    # Utilities
    "run_app",
]
