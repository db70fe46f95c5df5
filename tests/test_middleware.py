"""Tests for error handlers and request logging middleware."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from mlclient.core import ActionNotFoundError, InvalidArgumentError
from mlclient.core.api.middleware import REQUEST_ID_HEADER, add_error_handlers, add_logging_middleware


class Payload(BaseModel):
    """Request body with one required field."""

    name: str


def build_app() -> FastAPI:
    """App with one route per error kind."""
    app = FastAPI()
    add_error_handlers(app)
    add_logging_middleware(app)

    @app.get("/invalid")
    async def invalid() -> None:
        raise InvalidArgumentError("Request should contain algorithm!")

    @app.get("/missing-action")
    async def missing_action() -> None:
        raise ActionNotFoundError("cluster:admin/opensearch/ml/predict")

    @app.get("/model-validation")
    async def model_validation() -> None:
        Payload.model_validate({})

    @app.post("/body")
    async def body(payload: Payload) -> dict[str, str]:
        return {"name": payload.name}

    @app.get("/boom")
    async def boom() -> None:
        raise RuntimeError("boom")

    @app.get("/ok")
    async def ok() -> dict[str, str]:
        return {"status": "ok"}

    return app


def test_invalid_argument_returns_400() -> None:
    """Test invalid arguments map to 400 with the error shape."""
    response = TestClient(build_app()).get("/invalid")

    assert response.status_code == 400
    data = response.json()
    assert data["status"] == 400
    assert data["error"]["reason"] == "Request should contain algorithm!"
    assert data["error"]["type"] == "InvalidArgumentError"


def test_action_not_found_returns_501() -> None:
    """Test unregistered actions map to 501."""
    response = TestClient(build_app()).get("/missing-action")

    assert response.status_code == 501
    assert response.json()["error"]["reason"] == "Action 'cluster:admin/opensearch/ml/predict' not found in registry"


def test_model_validation_error_returns_400() -> None:
    """Test pydantic validation errors raised in handlers map to 400."""
    response = TestClient(build_app()).get("/model-validation")

    assert response.status_code == 400
    assert "name" in response.json()["error"]["reason"]


def test_request_validation_error_returns_400() -> None:
    """Test invalid request bodies map to 400."""
    response = TestClient(build_app()).post("/body", json={})

    assert response.status_code == 400
    assert response.json()["error"]["type"] == "RequestValidationError"


def test_unhandled_error_returns_500() -> None:
    """Test other failures map to 500."""
    client = TestClient(build_app(), raise_server_exceptions=False)
    response = client.get("/boom")

    assert response.status_code == 500
    assert response.json()["error"]["reason"] == "Failed to process the request"


def test_request_id_generated() -> None:
    """Test a request id is generated and returned."""
    response = TestClient(build_app()).get("/ok")

    assert response.status_code == 200
    assert len(response.headers[REQUEST_ID_HEADER]) == 26


def test_request_id_propagated() -> None:
    """Test an inbound request id is echoed back."""
    response = TestClient(build_app()).get("/ok", headers={REQUEST_ID_HEADER: "req-123"})
    assert response.headers[REQUEST_ID_HEADER] == "req-123"
