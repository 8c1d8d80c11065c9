"""Unit tests for RFC 7807 exception handlers.

Tests cover:
- ProblemDetails serialization omits empty optional fields
- HTTP errors mapped to type slugs and titles
- Validation errors list field errors
- StreamingUnsupportedError mapped to 500 and logged
- Unhandled exceptions mapped to 500 without leaking internals

Architecture:
- Handlers registered on a minimal FastAPI app, driven by TestClient
"""

from unittest.mock import MagicMock, patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.domain.errors import StreamingUnsupportedError
from src.presentation.routers.errors import (
    ErrorDetail,
    ProblemDetails,
    register_exception_handlers,
)


@pytest.fixture
def error_app():
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/unsupported")
    async def unsupported():
        raise StreamingUnsupportedError()

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret internals")

    @app.get("/items/{item_id}")
    async def item(item_id: int):
        return {"item_id": item_id}

    return app


@pytest.fixture
def mock_error_logger():
    logger = MagicMock()
    with patch(
        "src.presentation.routers.errors.exception_handlers.get_logger",
        return_value=logger,
    ):
        yield logger


@pytest.mark.unit
class TestProblemDetails:
    """Test the Problem Details schema."""

    def test_optional_fields_omitted_when_empty(self):
        problem = ProblemDetails(
            type="/errors/not-found",
            title="Resource Not Found",
            status=404,
            detail="Not Found",
            instance="/missing",
        )

        assert problem.model_dump(exclude_none=True) == {
            "type": "/errors/not-found",
            "title": "Resource Not Found",
            "status": 404,
            "detail": "Not Found",
            "instance": "/missing",
        }

    def test_errors_serialized(self):
        problem = ProblemDetails(
            type="/errors/validation-failed",
            title="Validation Failed",
            status=422,
            detail="Request validation failed.",
            instance="/items/x",
            errors=[ErrorDetail(field="path.item_id", code="int_parsing", message="bad")],
        )

        assert problem.model_dump()["errors"] == [
            {"field": "path.item_id", "code": "int_parsing", "message": "bad"}
        ]


@pytest.mark.unit
class TestExceptionHandlers:
    """Test handler mapping."""

    def test_not_found(self, error_app):
        response = TestClient(error_app).get("/missing")

        assert response.status_code == 404
        assert response.json()["type"] == "/errors/not-found"
        assert response.json()["title"] == "Resource Not Found"

    def test_validation_error_lists_fields(self, error_app):
        response = TestClient(error_app).get("/items/abc")

        assert response.status_code == 422
        data = response.json()
        assert data["type"] == "/errors/validation-failed"
        assert data["errors"][0]["field"] == "path.item_id"

    def test_streaming_unsupported(self, error_app, mock_error_logger):
        response = TestClient(error_app).get("/unsupported")

        assert response.status_code == 500
        data = response.json()
        assert data["type"] == "/errors/streaming-unsupported"
        assert data["title"] == "Streaming Unsupported"
        assert data["detail"] == "streaming unsupported"
        mock_error_logger.error.assert_called_once()
        assert mock_error_logger.error.call_args.args[0] == "Streaming unsupported"

    def test_unhandled_exception_hides_details(self, error_app, mock_error_logger):
        client = TestClient(error_app, raise_server_exceptions=False)

        response = client.get("/boom")

        assert response.status_code == 500
        data = response.json()
        assert data["type"] == "/errors/internal-server-error"
        assert "secret internals" not in data["detail"]
        error = mock_error_logger.error.call_args.kwargs["error"]
        assert isinstance(error, RuntimeError)
