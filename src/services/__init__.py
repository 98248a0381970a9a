"""Services package - remote API access for Materials Admin.

Architecture:
- ApiClient: requests-based JSON client, maps failures to ServiceError
- MaterialService: material CRUD against the REST API
- Exceptions: consistent error handling via the ServiceError hierarchy

Usage:
    from src.services import MaterialService

    service = MaterialService()
    materials = service.get_all()
"""

from .api_client import ApiClient
from .exceptions import (
    ApiConnectionError,
    ApiResponseError,
    MalformedResponseError,
    ServiceError,
    ValidationError,
)
from .material_service import MaterialService

__all__ = [
    "ApiClient",
    "MaterialService",
    "ServiceError",
    "ApiConnectionError",
    "ApiResponseError",
    "MalformedResponseError",
    "ValidationError",
]
