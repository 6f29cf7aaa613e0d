"""
Tests for middleware components.

This module tests:
- RequestIDMiddleware (correlation ID tracking)
- LoggingMiddleware (request/response logging)
- JSONContentTypeMiddleware (415 for non-JSON bodies)

Tests follow AAA (Arrange, Act, Assert) pattern.
"""

import logging
import uuid

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from store_api.middleware.content_type import JSONContentTypeMiddleware
from store_api.middleware.request_context import LoggingMiddleware, RequestIDMiddleware


def _app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(JSONContentTypeMiddleware)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/test")
    async def read_endpoint(request: Request):
        return {"request_id": request.state.request_id}

    @app.post("/test")
    async def write_endpoint(payload: dict):
        return payload

    @app.get("/boom")
    async def failing_endpoint():
        raise RuntimeError("boom")

    return app


class TestRequestIDMiddleware:
    """Tests for request ID correlation middleware."""

    def test_request_id_generated_when_missing(self):
        """
        Test that request ID is generated when not provided.

        Arrange: App with RequestIDMiddleware
        Act: Make request without X-Request-ID header
        Assert: Response has X-Request-ID header with valid UUID
        """
        # Arrange
        client = TestClient(_app())

        # Act
        response = client.get("/test")

        # Assert
        assert response.status_code == 200
        request_id = response.headers["X-Request-ID"]
        uuid.UUID(request_id)
        assert response.json()["request_id"] == request_id

    def test_request_id_propagated(self):
        client = TestClient(_app())

        response = client.get("/test", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"
        assert response.json()["request_id"] == "abc-123"


class TestLoggingMiddleware:
    """Tests for request/response logging middleware."""

    def test_logs_start_and_completion(self, caplog):
        # Arrange
        client = TestClient(_app())

        # Act
        with caplog.at_level(logging.INFO, logger="store_api.middleware.request_context"):
            client.get("/test", headers={"X-Request-ID": "req-1"})

        # Assert
        messages = [r.getMessage() for r in caplog.records]
        assert "Request started" in messages
        assert "Request completed" in messages
        completed = next(r for r in caplog.records if r.getMessage() == "Request completed")
        assert completed.status_code == 200
        assert completed.request_id == "req-1"
        assert completed.latency_ms >= 0

    def test_logs_failures(self, caplog):
        # Arrange
        client = TestClient(_app(), raise_server_exceptions=False)

        # Act
        with caplog.at_level(logging.INFO, logger="store_api.middleware.request_context"):
            response = client.get("/boom")

        # Assert
        assert response.status_code == 500
        failed = next(r for r in caplog.records if r.getMessage().startswith("Request failed"))
        assert failed.exception_type == "RuntimeError"


class TestJSONContentTypeMiddleware:
    """Tests for the JSON content-type check."""

    @pytest.mark.parametrize("content_type", [
        "application/json",
        "application/json; charset=utf-8",
        "Application/JSON",
    ])
    def test_json_accepted(self, content_type):
        client = TestClient(_app())

        response = client.post("/test", content=b'{"a": 1}', headers={"Content-Type": content_type})

        assert response.status_code == 200
        assert response.json() == {"a": 1}

    @pytest.mark.parametrize("content_type", ["text/plain", "application/x-www-form-urlencoded", None])
    def test_other_media_types_rejected(self, content_type):
        """
        Test that body-carrying requests must be JSON.

        Arrange: App with JSONContentTypeMiddleware
        Act: POST with a non-JSON (or missing) Content-Type
        Assert: 415 with a detail message
        """
        # Arrange
        client = TestClient(_app())
        headers = {"Content-Type": content_type} if content_type else {}

        # Act
        response = client.post("/test", content=b'{"a": 1}', headers=headers)

        # Assert
        assert response.status_code == 415
        assert response.json() == {"detail": "Content-Type must be application/json"}

    def test_reads_are_not_checked(self):
        client = TestClient(_app())

        response = client.get("/test", headers={"Content-Type": "text/plain"})

        assert response.status_code == 200
