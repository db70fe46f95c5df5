"""Tests for REST request parameter helpers."""

from __future__ import annotations

import json

import pytest

from mlclient.core import InvalidArgumentError, NodeClient, StaticClusterService, ThreadContext
from mlclient.core.context import USER_INFO_TRANSIENT
from mlclient.core.settings import Settings
from mlclient.modules.search import FetchSourceContext, SearchSourceBuilder
from mlclient.rest.utils import (
    OPENSEARCH_DASHBOARDS_USER_AGENT,
    PARAMETER_ALGORITHM,
    PARAMETER_ASYNC,
    PARAMETER_MODEL_ID,
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

from _stubs import make_request

DASHBOARDS_HEADERS = {"User-Agent": f"{OPENSEARCH_DASHBOARDS_USER_AGENT}/2.11.0"}


def test_get_algorithm_upper_cases() -> None:
    """Test algorithm path parameter is returned upper-cased."""
    request = make_request(path_params={PARAMETER_ALGORITHM: "kmeans"})
    assert get_algorithm(request) == "KMEANS"


def test_get_algorithm_from_query_string() -> None:
    """Test algorithm falls back to the query string."""
    request = make_request(query={PARAMETER_ALGORITHM: "linear_regression"})
    assert get_algorithm(request) == "LINEAR_REGRESSION"


@pytest.mark.parametrize("path_params", [{}, {PARAMETER_ALGORITHM: ""}])
def test_get_algorithm_missing_raises(path_params: dict[str, str]) -> None:
    """Test missing or empty algorithm is an invalid argument."""
    with pytest.raises(InvalidArgumentError, match="Request should contain algorithm!"):
        get_algorithm(make_request(path_params=path_params))


def test_is_async_defaults_to_false() -> None:
    """Test absent async flag is false."""
    assert is_async(make_request()) is False


def test_is_async_true() -> None:
    """Test async=true is parsed."""
    assert is_async(make_request(query={PARAMETER_ASYNC: "true"})) is True
    assert is_async(make_request(path_params={PARAMETER_ASYNC: "false"})) is False


def test_is_async_rejects_garbage() -> None:
    """Test unparseable async flag is an invalid argument."""
    with pytest.raises(InvalidArgumentError, match="async"):
        is_async(make_request(query={PARAMETER_ASYNC: "maybe"}))


@pytest.mark.parametrize("value", ["1", "yes", "on", "0"])
def test_is_async_accepts_only_true_or_false(value: str) -> None:
    """Test flags other than true/false are rejected."""
    with pytest.raises(InvalidArgumentError, match=r"only \[true\] or \[false\] are allowed for async"):
        is_async(make_request(query={PARAMETER_ASYNC: value}))


def test_is_return_content() -> None:
    """Test return_content flag."""
    assert is_return_content(make_request()) is False
    assert is_return_content(make_request(query={"return_content": "TRUE"})) is True


def test_get_parameter_id() -> None:
    """Test identifier parameter is returned as-is."""
    request = make_request(path_params={PARAMETER_MODEL_ID: "model-1"})
    assert get_parameter_id(request, PARAMETER_MODEL_ID) == "model-1"


@pytest.mark.parametrize("path_params", [{}, {PARAMETER_MODEL_ID: ""}])
def test_get_parameter_id_missing_raises(path_params: dict[str, str]) -> None:
    """Test missing or empty identifier names the parameter."""
    with pytest.raises(InvalidArgumentError, match="Request should contain model_id"):
        get_parameter_id(make_request(path_params=path_params), PARAMETER_MODEL_ID)


def test_source_context_empty_excludes_gets_ui_metadata_excluded() -> None:
    """Test a caller without excludes gets the default exclusion set."""
    search_source = SearchSourceBuilder(fetch_source=FetchSourceContext(includes=["name"]))
    context = get_source_context(make_request(), search_source)
    assert context.includes == ["name"]
    assert context.excludes == list(UI_METADATA_EXCLUDE)


def test_source_context_merges_excludes() -> None:
    """Test a caller's excludes are merged with the default exclusion set."""
    search_source = SearchSourceBuilder(fetch_source=FetchSourceContext(excludes=["b"]))
    context = get_source_context(make_request(), search_source)
    assert len(context.excludes) == 2
    assert set(context.excludes) == {"b", *UI_METADATA_EXCLUDE}


def test_source_context_merge_does_not_duplicate() -> None:
    """Test excludes already containing the default set are not duplicated."""
    search_source = SearchSourceBuilder(fetch_source=FetchSourceContext(excludes=["ui_metadata", "b"]))
    context = get_source_context(make_request(), search_source)
    assert context.excludes == ["ui_metadata", "b"]


def test_source_context_dashboards_keeps_excludes() -> None:
    """Test the dashboards client gets its own excludes unchanged."""
    search_source = SearchSourceBuilder(fetch_source=FetchSourceContext(includes=["name"], excludes=["b"]))
    context = get_source_context(make_request(headers=DASHBOARDS_HEADERS), search_source)
    assert context.includes == ["name"]
    assert context.excludes == ["b"]


def test_source_context_dashboards_empty_excludes() -> None:
    """Test the dashboards client without excludes gets no excludes."""
    search_source = SearchSourceBuilder(fetch_source=FetchSourceContext())
    context = get_source_context(make_request(headers=DASHBOARDS_HEADERS), search_source)
    assert context.excludes == []


def test_source_context_without_fetch_source() -> None:
    """Test a search without _source still yields a context for both kinds of callers."""
    search_source = SearchSourceBuilder()

    context = get_source_context(make_request(), search_source)
    assert context is not None
    assert context.includes == []
    assert context.excludes == list(UI_METADATA_EXCLUDE)

    dashboards_context = get_source_context(make_request(headers=DASHBOARDS_HEADERS), search_source)
    assert dashboards_context is not None
    assert dashboards_context.fetch_source is True
    assert dashboards_context.excludes == []


def test_source_context_uses_settings() -> None:
    """Test the user agent and exclusion set come from settings when given."""
    settings = Settings(dashboards_user_agent="MyUI", ui_metadata_exclude=["ui_metadata", "owner"])
    search_source = SearchSourceBuilder()

    context = get_source_context(make_request(headers={"User-Agent": "curl/8.0"}), search_source, settings)
    assert context.excludes == ["ui_metadata", "owner"]

    ui_context = get_source_context(make_request(headers={"User-Agent": "MyUI 1.0"}), search_source, settings)
    assert ui_context.excludes == []


def test_fetch_source_context_excludes_model_content() -> None:
    """Test model content is excluded unless requested."""
    assert get_fetch_source_context(False).excludes == ["content", "model_content"]
    assert get_fetch_source_context(True).excludes == []


def test_split_comma_separated_param() -> None:
    """Test a comma-separated parameter yields one element per token."""
    request = make_request(query={"node_ids": "a,b,c"})
    assert split_comma_separated_param(request, "node_ids") == ["a", "b", "c"]


def test_split_comma_separated_param_absent() -> None:
    """Test an absent parameter yields None rather than failing."""
    assert split_comma_separated_param(make_request(), "node_ids") is None


def test_get_string_param() -> None:
    """Test optional string parameter."""
    assert get_string_param(make_request(query={"name": "x"}), "name") == "x"
    assert get_string_param(make_request(), "name") is None


def test_get_all_nodes_returns_data_nodes(cluster_service: StaticClusterService) -> None:
    """Test node enumeration returns one id per data node."""
    node_ids = get_all_nodes(cluster_service)
    assert len(node_ids) == 1
    assert node_ids == ["node-data-1"]


def test_get_all_nodes_empty_cluster() -> None:
    """Test an empty cluster yields no node ids."""
    assert get_all_nodes(StaticClusterService()) == []


def test_get_user_context() -> None:
    """Test the user is resolved from the client's thread context."""
    thread_context = ThreadContext("test_user_context")
    thread_context.put_transient(USER_INFO_TRANSIENT, "myuser||myrole")
    client = NodeClient(thread_context=thread_context)

    user = get_user_context(client)

    assert user is not None
    assert user.name == "myuser"
    assert user.backend_roles == []
    assert user.roles == ["myrole"]


def test_get_user_context_absent() -> None:
    """Test no user info yields None."""
    client = NodeClient(thread_context=ThreadContext("test_user_context_absent"))
    assert get_user_context(client) is None


def test_on_failure_renders_error() -> None:
    """Test failure response shape."""
    response = on_failure(400, "Request should contain algorithm!", InvalidArgumentError("bad"))

    assert response.status_code == 400
    body = json.loads(response.body)
    assert body["status"] == 400
    assert body["error"]["reason"] == "Request should contain algorithm!"
    assert body["error"]["type"] == "InvalidArgumentError"
