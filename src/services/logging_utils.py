"""Service layer logging utilities.

Provides structured logging functions for API operations, enabling a
consistent log format and context across the material service.

Usage:
    from src.services.logging_utils import get_service_logger, log_operation

    logger = get_service_logger(__name__)

    log_operation(
        logger,
        operation="create_material",
        outcome="success",
        material_id=7,
    )
"""

import logging
from typing import Any


def get_service_logger(name: str) -> logging.Logger:
    """
    Get a logger configured for service operations.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        Logger instance with the 'materials_admin.services' prefix.

    Example:
        >>> logger = get_service_logger(__name__)
        >>> logger.name
        'materials_admin.services.material_service'
    """
    if "." in name:
        name = name.split(".")[-1]
    return logging.getLogger(f"materials_admin.services.{name}")


def log_operation(
    logger: logging.Logger,
    operation: str,
    outcome: str,
    level: int = logging.INFO,
    **context: Any,
) -> None:
    """
    Log a service operation with structured context.

    The context is passed via the 'extra' parameter for structured logging.

    Args:
        logger: Logger instance to use
        operation: Operation name (e.g., "get_all_materials", "delete_material")
        outcome: Outcome description (e.g., "success", "error")
        level: Log level (default: INFO). Use DEBUG for verbose/frequent logs.
        **context: Additional context fields (material_id, count, error, ...)
    """
    extra = {
        "operation": operation,
        "outcome": outcome,
        **context,
    }
    logger.log(level, f"{operation}: {outcome}", extra=extra)
