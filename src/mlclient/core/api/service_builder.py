"""Base service builder for FastAPI applications without ML module dependencies."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncContextManager, AsyncIterator, Awaitable, Callable, Self

from fastapi import APIRouter, FastAPI
from pydantic import BaseModel, ConfigDict

from mlclient.core.logging import configure_logging, get_logger
from mlclient.core.settings import Settings

from .dependencies import set_settings
from .middleware import add_error_handlers, add_logging_middleware
from .routers import HealthRouter
from .routers.health import HealthCheck

logger = get_logger(__name__)

type LifecycleHook = Callable[[FastAPI], Awaitable[None]]


class ServiceInfo(BaseModel):
    """Service metadata for the FastAPI application."""

    display_name: str
    version: str = "1.0.0"
    summary: str | None = None
    description: str | None = None
    contact: dict[str, str] | None = None
    license_info: dict[str, str] | None = None

    model_config = ConfigDict(extra="forbid")


class BaseServiceBuilder:
    """Fluent builder for the core app: error handlers, logging, health and info."""

    def __init__(
        self,
        *,
        info: ServiceInfo,
        settings: Settings | None = None,
        include_error_handlers: bool = True,
        include_logging: bool = False,
    ) -> None:
        """Initialize base service builder with core options."""
        if info.description is None and info.summary is not None:
            self.info = info.model_copy(update={"description": info.summary})
        else:
            self.info = info
        self._settings = settings
        self._include_error_handlers = include_error_handlers
        self._include_logging = include_logging
        self._health_options: tuple[str, list[str], dict[str, HealthCheck]] | None = None
        self._custom_routers: list[APIRouter] = []
        self._dependency_overrides: dict[Callable[..., object], Callable[..., object]] = {}
        self._startup_hooks: list[LifecycleHook] = []
        self._shutdown_hooks: list[LifecycleHook] = []

    # --------------------------------------------------------------------- Fluent configuration

    def with_settings(self, settings: Settings) -> Self:
        """Use explicit settings instead of the environment."""
        self._settings = settings
        return self

    def with_logging(self, enabled: bool = True) -> Self:
        """Enable structured logging with request tracing."""
        self._include_logging = enabled
        return self

    def with_health(
        self,
        *,
        prefix: str = "/api/v1/health",
        tags: list[str] | None = None,
        checks: dict[str, HealthCheck] | None = None,
    ) -> Self:
        """Add health check endpoint with optional custom checks."""
        self._health_options = (prefix, list(tags) if tags is not None else ["health"], dict(checks or {}))
        return self

    def include_router(self, router: APIRouter) -> Self:
        """Include a custom router."""
        self._custom_routers.append(router)
        return self

    def override_dependency(self, dependency: Callable[..., object], override: Callable[..., object]) -> Self:
        """Override a dependency for testing or customization."""
        self._dependency_overrides[dependency] = override
        return self

    def on_startup(self, hook: LifecycleHook) -> Self:
        """Register a startup hook."""
        self._startup_hooks.append(hook)
        return self

    def on_shutdown(self, hook: LifecycleHook) -> Self:
        """Register a shutdown hook."""
        self._shutdown_hooks.append(hook)
        return self

    # --------------------------------------------------------------------- Build mechanics

    def build(self) -> FastAPI:
        """Build and configure the FastAPI application."""
        self._validate_configuration()
        self._validate_module_configuration()

        settings = self._settings or Settings.from_env()
        set_settings(settings)

        app = FastAPI(
            title=self.info.display_name,
            description=self.info.summary or self.info.description or "",
            version=self.info.version,
            lifespan=self._build_lifespan(),
        )
        app.state.settings = settings

        if self._include_error_handlers:
            add_error_handlers(app)

        if self._include_logging:
            add_logging_middleware(app)

        if self._health_options:
            prefix, tags, checks = self._health_options
            app.include_router(HealthRouter.create(prefix=prefix, tags=tags, checks=self._health_checks(checks)))

        self._register_module_routers(app)

        for router in self._custom_routers:
            app.include_router(router)

        for dependency, override in self._dependency_overrides.items():
            app.dependency_overrides[dependency] = override

        self._install_info_endpoint(app, info=self.info)
        return app

    # --------------------------------------------------------------------- Extension points

    def _validate_module_configuration(self) -> None:
        """Extension point for module-specific validation (override in subclasses)."""
        pass

    def _register_module_routers(self, app: FastAPI) -> None:
        """Extension point for registering module-specific routers (override in subclasses)."""
        pass

    def _health_checks(self, checks: dict[str, HealthCheck]) -> dict[str, HealthCheck]:
        """Extension point for adding module health checks (override in subclasses)."""
        return checks

    async def _on_module_startup(self, app: FastAPI) -> None:
        """Extension point run before the startup hooks (override in subclasses)."""
        pass

    async def _on_module_shutdown(self, app: FastAPI) -> None:
        """Extension point run after the shutdown hooks (override in subclasses)."""
        pass

    # --------------------------------------------------------------------- Core helpers

    def _validate_configuration(self) -> None:
        """Validate core configuration."""
        if self._health_options:
            _, _, checks = self._health_options
            for name in checks:
                if not name.replace("_", "").replace("-", "").isalnum():
                    raise ValueError(
                        f"Health check name '{name}' contains invalid characters. "
                        "Only alphanumeric characters, underscores, and hyphens are allowed."
                    )

    def _build_lifespan(self) -> Callable[[FastAPI], AsyncContextManager[None]]:
        """Build lifespan context manager for app startup/shutdown."""
        include_logging = self._include_logging
        explicit_settings = self._settings
        startup_hooks = list(self._startup_hooks)
        shutdown_hooks = list(self._shutdown_hooks)

        @asynccontextmanager
        async def lifespan(app: FastAPI) -> AsyncIterator[None]:
            if include_logging:
                if explicit_settings is not None:
                    configure_logging(level=explicit_settings.log_level, log_format=explicit_settings.log_format)
                else:
                    configure_logging()

            await self._on_module_startup(app)
            for hook in startup_hooks:
                await hook(app)
            logger.info("service.started", name=self.info.display_name, version=self.info.version)
            try:
                yield
            finally:
                for hook in shutdown_hooks:
                    await hook(app)
                await self._on_module_shutdown(app)
                logger.info("service.stopped", name=self.info.display_name)

        return lifespan

    @staticmethod
    def _install_info_endpoint(app: FastAPI, *, info: ServiceInfo) -> None:
        """Install service info endpoint."""
        info_type = type(info)

        @app.get("/api/v1/info", include_in_schema=False, response_model=info_type)
        async def get_info() -> ServiceInfo:
            return info

    # --------------------------------------------------------------------- Convenience

    @classmethod
    def create(cls, *, info: ServiceInfo, **kwargs: Any) -> FastAPI:
        """Create and build a FastAPI application in one call."""
        return cls(info=info, **kwargs).build()
