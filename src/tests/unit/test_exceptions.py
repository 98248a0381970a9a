"""Unit tests for service exception classes."""

import pytest

from src.services.exceptions import (
    ApiConnectionError,
    ApiResponseError,
    MalformedResponseError,
    ServiceError,
    ValidationError,
)


class TestServiceError:
    """Tests for the base exception."""

    def test_default_status(self):
        exc = ServiceError("something broke")
        assert exc.http_status_code == 500
        assert str(exc) == "something broke"

    def test_status_override(self):
        assert ServiceError("x", http_status_code=418).http_status_code == 418

    @pytest.mark.parametrize(
        "exc",
        [
            ApiConnectionError("http://host/api"),
            ApiResponseError(400),
            MalformedResponseError("bad"),
            ValidationError(["bad"]),
        ],
    )
    def test_hierarchy(self, exc):
        assert isinstance(exc, ServiceError)


class TestApiConnectionError:
    def test_message_includes_cause(self):
        cause = OSError("connection refused")
        exc = ApiConnectionError("http://host/api/materials", cause)
        assert exc.http_status_code == 503
        assert exc.original_error is cause
        assert str(exc) == "Could not reach http://host/api/materials: connection refused"

    def test_message_without_cause(self):
        assert str(ApiConnectionError("http://host")) == "Could not reach http://host"


class TestApiResponseError:
    def test_status_and_message(self):
        exc = ApiResponseError(404, server_message="Material not found", url="http://h/materials/3")
        assert exc.status_code == 404
        assert exc.http_status_code == 404
        assert str(exc) == "HTTP 404 from http://h/materials/3: Material not found"

    def test_without_url_or_message(self):
        exc = ApiResponseError(500)
        assert exc.server_message is None
        assert str(exc) == "HTTP 500"


class TestPayloadErrors:
    def test_malformed_response(self):
        exc = MalformedResponseError("response has no 'materials' field")
        assert exc.http_status_code == 502
        assert exc.detail == "response has no 'materials' field"
        assert "Malformed API response" in str(exc)

    def test_validation_error_joins_messages(self):
        exc = ValidationError(["name is required", "name too long"])
        assert exc.http_status_code == 400
        assert exc.errors == ["name is required", "name too long"]
        assert str(exc) == "Validation failed: name is required; name too long"
