"""Service layer exception classes for Materials Admin.

This module defines all custom exceptions raised by the API client and the
material service to provide consistent error handling across the application.

Exception Hierarchy:
    ServiceError (base)
    ├── ApiConnectionError
    ├── ApiResponseError
    ├── MalformedResponseError
    └── ValidationError
"""

from typing import Optional


class ServiceError(Exception):
    """Base exception for all service layer errors.

    All service-specific exceptions should inherit from this class.

    Args:
        message: Technical description of the failure
        http_status_code: Closest HTTP status for the failure category
    """

    http_status_code = 500

    def __init__(self, message: str = "", http_status_code: Optional[int] = None):
        self.message = message
        if http_status_code is not None:
            self.http_status_code = http_status_code
        super().__init__(message)


class ApiConnectionError(ServiceError):
    """Raised when the API cannot be reached (connection refused, DNS, timeout).

    Args:
        url: The URL that was requested
        original_error: The underlying transport exception

    Example:
        >>> raise ApiConnectionError("http://localhost:5000/api/materials", err)
        ApiConnectionError: Could not reach http://localhost:5000/api/materials: ...
    """

    http_status_code = 503

    def __init__(self, url: str, original_error: Optional[Exception] = None):
        self.url = url
        self.original_error = original_error
        detail = f": {original_error}" if original_error else ""
        super().__init__(f"Could not reach {url}{detail}")


class ApiResponseError(ServiceError):
    """Raised when the API answers with a non-2xx status.

    Args:
        status_code: HTTP status code returned by the server
        server_message: Human-readable message from the error body, if any
        url: The URL that was requested
    """

    def __init__(self, status_code: int, server_message: Optional[str] = None, url: str = ""):
        self.status_code = status_code
        self.server_message = server_message
        self.url = url
        text = f"HTTP {status_code} from {url}" if url else f"HTTP {status_code}"
        if server_message:
            text = f"{text}: {server_message}"
        super().__init__(text, http_status_code=status_code)


class MalformedResponseError(ServiceError):
    """Raised when a response body is not JSON or lacks the expected envelope.

    Args:
        detail: What was wrong with the payload
    """

    http_status_code = 502

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Malformed API response: {detail}")


class ValidationError(ServiceError):
    """Raised when data validation fails before any request is sent."""

    http_status_code = 400

    def __init__(self, errors: list):
        self.errors = errors
        error_msg = "; ".join(errors)
        super().__init__(f"Validation failed: {error_msg}")
