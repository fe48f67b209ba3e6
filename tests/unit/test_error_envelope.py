"""
Unit tests for the JSON error body produced at the API boundary
"""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from kidmap.core.error_handlers import ErrorHandler, setup_error_handlers
from kidmap.core.exceptions import (
    AuthenticationError,
    NetworkError,
    NotFoundError,
    ValidationError,
)


@pytest.fixture
def error_client():
    app = FastAPI()
    setup_error_handlers(app)

    @app.get("/network")
    async def network():
        raise NetworkError("HTTP error! status: 504")

    @app.get("/missing")
    async def missing():
        raise NotFoundError("Favorite not found", details={"place_id": "9"})

    @app.get("/invalid")
    async def invalid():
        raise ValidationError("Unknown place type 'zoo'")

    @app.get("/auth")
    async def auth():
        raise AuthenticationError()

    @app.get("/boom")
    async def boom():
        raise RuntimeError("database password is hunter2")

    @app.get("/typed")
    async def typed(limit: int):
        return {"limit": limit}

    return TestClient(app, raise_server_exceptions=False)


@pytest.mark.parametrize("path,status,code", [
    ("/network", 502, "NETWORK_ERROR"),
    ("/missing", 404, "NOT_FOUND"),
    ("/invalid", 422, "VALIDATION_ERROR"),
    ("/auth", 401, "UNAUTHORIZED"),
])
def test_domain_errors_map_to_status(error_client, path, status, code):
    response = error_client.get(path)

    assert response.status_code == status
    body = response.json()
    assert body["error_code"] == code
    assert body["message"]
    assert "timestamp" in body


def test_details_are_carried(error_client):
    body = error_client.get("/missing").json()
    assert body["message"] == "Favorite not found"
    assert body["details"] == {"place_id": "9"}


def test_unexpected_error_hides_internals(error_client):
    response = error_client.get("/boom")

    assert response.status_code == 500
    body = response.json()
    assert body["error_code"] == "INTERNAL_SERVER_ERROR"
    assert "hunter2" not in response.text


def test_request_validation_lists_fields(error_client):
    response = error_client.get("/typed", params={"limit": "many"})

    assert response.status_code == 422
    fields = [e["field"] for e in response.json()["details"]["validation_errors"]]
    assert fields == ["query.limit"]


def test_unknown_route_uses_same_shape(error_client):
    body = error_client.get("/nope").json()
    assert body["error_code"] == "NOT_FOUND"
    assert body["message"] == "Not Found"


def test_error_statistics_count_per_code():
    handler = ErrorHandler()
    handler._track_error("NOT_FOUND")
    handler._track_error("NOT_FOUND")
    handler._track_error("NETWORK_ERROR")

    stats = handler.get_error_statistics()

    assert stats["error_counts"] == {"NOT_FOUND": 2, "NETWORK_ERROR": 1}
    assert stats["total_errors"] == 3
