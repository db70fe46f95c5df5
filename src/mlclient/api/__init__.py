"""FastAPI service assembly for the ML client."""

from mlclient.core.api import (
    BaseServiceBuilder,
    HealthRouter,
    HealthState,
    HealthStatus,
    Router,
    ServiceInfo,
    add_error_handlers,
    add_logging_middleware,
    run_app,
)
from mlclient.core.logging import (
    add_request_context,
    clear_request_context,
    configure_logging,
    get_logger,
    reset_request_context,
)
from mlclient.rest import MLRestRouter

from .service_builder import MLServiceBuilder

__all__ = [
    # Base classes
    "Router",
    # Routers
    "HealthRouter",
    "HealthStatus",
    "HealthState",
    "MLRestRouter",
    # Middleware
    "add_error_handlers",
    "add_logging_middleware",
    # Logging
    "configure_logging",
    "get_logger",
    "add_request_context",
    "clear_request_context",
    "reset_request_context",
    # Builders
    "BaseServiceBuilder",
    "MLServiceBuilder",
    "ServiceInfo",
    # Utilities
    "run_app",
]
