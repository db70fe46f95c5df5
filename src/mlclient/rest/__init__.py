"""REST surface: request parameter helpers and the ML router."""

from .router import MLRestRouter, NodesResponse
from .user import User
from .utils import (
    OPENSEARCH_DASHBOARDS_USER_AGENT,
    PARAMETER_ALGORITHM,
    PARAMETER_ASYNC,
    PARAMETER_MODEL_ID,
    PARAMETER_NODE_IDS,
    PARAMETER_RETURN_CONTENT,
    PARAMETER_TASK_ID,
    UI_METADATA_EXCLUDE,
    get_algorithm,
    get_all_nodes,
    get_fetch_source_context,
    get_parameter_id,
    get_source_context,
    get_string_param,
    get_user_context,
    is_async,
    is_return_content,
    on_failure,
    split_comma_separated_param,
)

__all__ = [
    # Router
    "MLRestRouter",
    "NodesResponse",
    # User
    "User",
    # Parameter names
    "PARAMETER_ALGORITHM",
    "PARAMETER_ASYNC",
    "PARAMETER_MODEL_ID",
    "PARAMETER_TASK_ID",
    "PARAMETER_RETURN_CONTENT",
    "PARAMETER_NODE_IDS",
    "OPENSEARCH_DASHBOARDS_USER_AGENT",
    "UI_METADATA_EXCLUDE",
    # Helpers
    "get_algorithm",
    "is_async",
    "is_return_content",
    "get_parameter_id",
    "get_source_context",
    "get_fetch_source_context",
    "split_comma_separated_param",
    "get_string_param",
    "get_user_context",
    "get_all_nodes",
    "on_failure",
]
