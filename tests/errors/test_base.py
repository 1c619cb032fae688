# tests/errors/test_base.py
"""Tests for app/errors/base.py module."""

from unittest.mock import MagicMock

import orjson
import pytest

from app.errors import BaseAppError, ErrorKind, ForbiddenError, create_exception_handler
from app.monitoring import bind_request_id, clear_context


def mock_request() -> MagicMock:
    request = MagicMock()
    request.client.host = "192.168.1.1"
    request.url.path = "/api/test"
    request.method = "GET"
    return request


class TestBaseAppError:
    """Tests for BaseAppError exception."""

    def test_default_values(self) -> None:
        """Test default initialization values."""
        error = BaseAppError()
        assert error.detail == "Internal Server Error"
        assert error.status_code == 500
        assert error.kind is ErrorKind.INTERNAL

    def test_custom_values(self) -> None:
        """Test custom initialization values."""
        error = BaseAppError(detail="Custom error", status_code=400)
        assert error.detail == "Custom error"
        assert error.status_code == 400

    def test_str_representation(self) -> None:
        """Test string representation returns message."""
        assert str(BaseAppError(detail="Test error")) == "Test error"


class TestCreateExceptionHandler:
    """Tests for create_exception_handler factory function."""

    @pytest.mark.asyncio
    async def test_expected_error(self) -> None:
        """Expected errors render their message and log at info level."""
        logger = MagicMock()
        handler = create_exception_handler(logger)

        response = await handler(mock_request(), ForbiddenError("Not yours"))

        assert response.status_code == 403
        assert orjson.loads(response.body) == {"success": False, "message": "Not yours"}
        logger.info.assert_called_once()
        logger.error.assert_not_called()

    @pytest.mark.asyncio
    async def test_internal_app_error(self) -> None:
        """Internal application errors keep their message and are logged as errors."""
        logger = MagicMock()
        handler = create_exception_handler(logger)

        response = await handler(mock_request(), BaseAppError("Database Error"))

        assert response.status_code == 500
        assert orjson.loads(response.body)["message"] == "Database Error"
        logger.error.assert_called_once()

    @pytest.mark.asyncio
    async def test_unexpected_exception_hides_detail(self) -> None:
        """Arbitrary exceptions never leak their text."""
        logger = MagicMock()
        handler = create_exception_handler(logger)

        response = await handler(mock_request(), RuntimeError("secret internals"))

        assert response.status_code == 500
        assert orjson.loads(response.body) == {
            "success": False,
            "message": "Internal Server Error",
        }
        assert logger.error.call_args.kwargs["error"] == "secret internals"

    @pytest.mark.asyncio
    async def test_internal_error_logs_request_id(self) -> None:
        """The failing request's id is attached to the error log."""
        logger = MagicMock()
        handler = create_exception_handler(logger)
        bind_request_id("req-42")
        try:
            await handler(mock_request(), RuntimeError("boom"))
        finally:
            clear_context()

        assert logger.error.call_args.kwargs["request_id"] == "req-42"
