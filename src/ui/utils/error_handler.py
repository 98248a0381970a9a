"""Centralized error handler for UI layer.

Provides consistent error messages and logging across UI components.
Prefers the message the server put in its error body; otherwise falls back
to a localized generic message for the attempted operation, while keeping
technical details in the log for debugging.
"""

import logging
from typing import Callable, Optional

from src.services.exceptions import ApiResponseError, ServiceError

logger = logging.getLogger(__name__)


def handle_error(
    exception: Exception,
    operation: str = "Operation",
    fallback_message: str = "",
    notify: Optional[Callable[[str], None]] = None,
) -> str:
    """Handle an exception: log it and optionally notify the user.

    This is the primary entry point for error handling in the UI layer.

    Args:
        exception: The caught exception to handle
        operation: Description of what was being attempted (e.g., "Create material")
        fallback_message: Localized message used when the server supplied none
        notify: Callable that displays the message to the user (optional)

    Returns:
        The user-facing message

    Example:
        try:
            service.create(draft)
        except Exception as e:
            handle_error(e, "Create material", get_string("create_error"), notifier.error)
    """
    message = get_user_message(exception, fallback_message)

    _log_error(exception, operation)

    if notify is not None:
        notify(message)

    return message


def get_server_message(exception: Exception) -> Optional[str]:
    """Return the human-readable message from the server's error body, if any."""
    if isinstance(exception, ApiResponseError):
        return exception.server_message or None
    return None


def get_user_message(exception: Exception, fallback_message: str = "") -> str:
    """Convert an exception to the message shown to the user.

    Args:
        exception: The exception to convert
        fallback_message: Message used when the server supplied none

    Returns:
        Server-supplied message, else the fallback, else a generic text
    """
    server_message = get_server_message(exception)
    if server_message:
        return server_message
    if fallback_message:
        return fallback_message
    return "An unexpected error occurred."


def _log_error(exception: Exception, operation: str) -> None:
    """Log technical error details for debugging.

    Uses ERROR level for ServiceError subclasses and logs the full stack
    trace for unexpected exceptions.
    """
    if isinstance(exception, ServiceError):
        log_data = {
            "operation": operation,
            "exception_type": exception.__class__.__name__,
            "http_status_code": exception.http_status_code,
        }
        logger.error(
            f"{operation} failed: {exception.__class__.__name__}: {exception}",
            extra={"error_data": log_data},
        )
    else:
        logger.error(
            f"{operation} failed with unexpected error: {exception.__class__.__name__}",
            exc_info=exception,
        )
