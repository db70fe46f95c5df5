"""Helpers reading parameters, headers and context of inbound REST requests."""

from __future__ import annotations

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from mlclient.core.client import Client
from mlclient.core.cluster import ClusterService
from mlclient.core.context import USER_INFO_TRANSIENT
from mlclient.core.exceptions import InvalidArgumentError
from mlclient.core.logging import get_logger
from mlclient.core.settings import DEFAULT_DASHBOARDS_USER_AGENT, DEFAULT_UI_METADATA_EXCLUDE, Settings
from mlclient.modules.model.schemas import MODEL_CONTENT_FIELD, OLD_MODEL_CONTENT_FIELD
from mlclient.modules.search.schemas import FetchSourceContext, SearchSourceBuilder

from .user import User

logger = get_logger(__name__)

PARAMETER_ALGORITHM = "algorithm"
PARAMETER_ASYNC = "async"
PARAMETER_MODEL_ID = "model_id"
PARAMETER_TASK_ID = "task_id"
PARAMETER_RETURN_CONTENT = "return_content"
PARAMETER_NODE_IDS = "node_ids"

OPENSEARCH_DASHBOARDS_USER_AGENT = DEFAULT_DASHBOARDS_USER_AGENT
UI_METADATA_EXCLUDE: tuple[str, ...] = DEFAULT_UI_METADATA_EXCLUDE


def _param(request: Request, name: str) -> str | None:
    """Read a path parameter, falling back to the query string."""
    value = request.path_params.get(name)
    if value is None:
        value = request.query_params.get(name)
    return value


def _param_as_boolean(request: Request, name: str, default: bool) -> bool:
    value = _param(request, name)
    if value is None or value == "":
        return default
    lowered = value.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise InvalidArgumentError(f"Failed to parse value [{value}] as only [true] or [false] are allowed for {name}")


def get_algorithm(request: Request) -> str:
    """Return the required algorithm parameter, upper-cased."""
    algorithm = _param(request, PARAMETER_ALGORITHM)
    if not algorithm:
        raise InvalidArgumentError("Request should contain algorithm!")
    return algorithm.upper()


def is_async(request: Request) -> bool:
    """Return the async flag, false when absent."""
    return _param_as_boolean(request, PARAMETER_ASYNC, False)


def is_return_content(request: Request) -> bool:
    """Return the return_content flag, false when absent."""
    return _param_as_boolean(request, PARAMETER_RETURN_CONTENT, False)


def get_parameter_id(request: Request, param_name: str) -> str:
    """Return a required identifier parameter."""
    value = _param(request, param_name)
    if not value:
        raise InvalidArgumentError(f"Request should contain {param_name}")
    return value


def _is_dashboards_request(request: Request, dashboards_user_agent: str) -> bool:
    user_agent = request.headers.get("user-agent")
    return user_agent is not None and dashboards_user_agent in user_agent


def get_source_context(
    request: Request,
    search_source: SearchSourceBuilder,
    settings: Settings | None = None,
) -> FetchSourceContext:
    """Compute the source includes/excludes of a search.

    UI metadata is only useful to the dashboards UI, so callers other than the
    dashboards client get the UI metadata fields excluded in addition to anything
    they excluded themselves.
    """
    dashboards_user_agent = settings.dashboards_user_agent if settings else OPENSEARCH_DASHBOARDS_USER_AGENT
    ui_metadata_exclude = list(settings.ui_metadata_exclude if settings else UI_METADATA_EXCLUDE)
    from_dashboards = _is_dashboards_request(request, dashboards_user_agent)

    fetch_source = search_source.fetch_source
    if fetch_source is None:
        if from_dashboards:
            return FetchSourceContext(fetch_source=True)
        return FetchSourceContext(fetch_source=True, includes=[], excludes=ui_metadata_exclude)

    includes = list(fetch_source.includes)
    excludes = list(fetch_source.excludes)
    if from_dashboards:
        return FetchSourceContext(fetch_source=True, includes=includes, excludes=excludes)
    if not excludes:
        return FetchSourceContext(fetch_source=True, includes=includes, excludes=ui_metadata_exclude)

    merged = excludes + [field for field in ui_metadata_exclude if field not in excludes]
    return FetchSourceContext(fetch_source=True, includes=includes, excludes=merged)


def get_fetch_source_context(return_content: bool) -> FetchSourceContext:
    """Source context for model lookups, leaving out model content unless requested."""
    if return_content:
        return FetchSourceContext(fetch_source=True)
    return FetchSourceContext(fetch_source=True, excludes=[OLD_MODEL_CONTENT_FIELD, MODEL_CONTENT_FIELD])


def split_comma_separated_param(request: Request, param_name: str) -> list[str] | None:
    """Split a comma-delimited parameter; None when the parameter is absent."""
    value = _param(request, param_name)
    if value is None:
        return None
    return value.split(",")


def get_string_param(request: Request, param_name: str) -> str | None:
    """Return an optional string parameter."""
    return _param(request, param_name)


def get_user_context(client: Client) -> User | None:
    """Resolve the user of the current request from the client's thread context."""
    user_string = client.thread_context.get_transient(USER_INFO_TRANSIENT)
    logger.debug("rest.user_context", present=user_string is not None)
    return User.parse(user_string)


def get_all_nodes(cluster_service: ClusterService) -> list[str]:
    """Return the ids of all data nodes in the current cluster state."""
    data_nodes = cluster_service.state().nodes().data_nodes
    return [node.id for node in data_nodes.values()]


def on_failure(status_code: int, error_message: str, exc: BaseException | None = None) -> JSONResponse:
    """Log a failed REST call and build its error response."""
    logger.error(
        "rest.request_failed",
        status=status_code,
        reason=error_message,
        error_type=type(exc).__name__ if exc else None,
    )
    error: dict[str, Any] = {"reason": error_message}
    if exc is not None:
        error["type"] = type(exc).__name__
        error["details"] = str(exc)
    return JSONResponse(status_code=status_code, content={"error": error, "status": status_code})
