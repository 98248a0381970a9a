"""Unit tests for centralized error handler."""

import logging
import pytest
from unittest.mock import MagicMock

from src.ui.utils.error_handler import handle_error, get_server_message, get_user_message
from src.services.exceptions import (
    ApiConnectionError,
    ApiResponseError,
    MalformedResponseError,
    ValidationError,
)


class TestGetUserMessage:
    """Tests for exception to user message mapping."""

    def test_server_message_preferred(self):
        exc = ApiResponseError(409, server_message="A material with this name exists", url="/m")
        assert get_user_message(exc, "Failed to create material") == (
            "A material with this name exists"
        )

    def test_fallback_when_server_silent(self):
        exc = ApiResponseError(500)
        assert get_user_message(exc, "Failed to create material") == "Failed to create material"

    def test_connection_error_uses_fallback(self):
        exc = ApiConnectionError("http://localhost:5000/api/materials", OSError("refused"))
        msg = get_user_message(exc, "Failed to load materials")
        assert msg == "Failed to load materials"
        assert "localhost" not in msg  # No technical details

    def test_malformed_response_uses_fallback(self):
        exc = MalformedResponseError("response has no 'material' field")
        assert get_user_message(exc, "Failed to update material") == "Failed to update material"

    def test_generic_exception_without_fallback(self):
        msg = get_user_message(RuntimeError("boom"))
        assert msg == "An unexpected error occurred."
        assert "boom" not in msg


class TestGetServerMessage:
    """Tests for server message extraction."""

    def test_api_response_error(self):
        assert get_server_message(ApiResponseError(400, server_message="Bad name")) == "Bad name"

    def test_empty_server_message(self):
        assert get_server_message(ApiResponseError(400, server_message="")) is None

    def test_other_errors(self):
        assert get_server_message(ValidationError(["name is required"])) is None


class TestHandleError:
    """Tests for handle_error logging and notification."""

    def test_notifies_user(self):
        notify = MagicMock()
        message = handle_error(
            ApiResponseError(422, server_message="Name too long"),
            "Create material",
            "Failed to create material",
            notify,
        )
        assert message == "Name too long"
        notify.assert_called_once_with("Name too long")

    def test_without_notify(self):
        assert handle_error(ApiResponseError(500), "Delete material", "Failed") == "Failed"

    def test_service_error_logged_without_traceback(self, caplog):
        with caplog.at_level(logging.ERROR, logger="src.ui.utils.error_handler"):
            handle_error(ApiResponseError(404, url="http://x/materials/9"), "Delete material")

        assert "Delete material failed: ApiResponseError" in caplog.text
        record = caplog.records[-1]
        assert record.exc_info is None
        assert record.error_data["http_status_code"] == 404

    def test_unexpected_error_logged_with_traceback(self, caplog):
        with caplog.at_level(logging.ERROR, logger="src.ui.utils.error_handler"):
            handle_error(KeyError("id"), "Load materials")

        assert "Load materials failed with unexpected error: KeyError" in caplog.text
        assert caplog.records[-1].exc_info is not None
