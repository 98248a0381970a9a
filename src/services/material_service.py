"""
Material Service - remote CRUD operations for materials.

This service is the client side of the materials REST API:
- get_all: GET /materials -> {"materials": [...]}
- create: POST /materials -> {"material": {...}}
- update: PUT /materials/<id> -> {"material": {...}}
- delete: DELETE /materials/<id>

Envelopes are unwrapped and payloads parsed into Material objects here, so
callers receive domain objects or a ServiceError, never raw JSON.
"""

from typing import Any, List, Optional
from urllib.parse import quote

from src.models.material import Material, MaterialDraft
from src.services.api_client import ApiClient
from src.services.exceptions import MalformedResponseError, ValidationError
from src.services.logging_utils import get_service_logger, log_operation
from src.utils.constants import MATERIAL_KEY, MATERIALS_ENDPOINT, MATERIALS_KEY

logger = get_service_logger(__name__)


def _parse_material(data: Any) -> Material:
    if not isinstance(data, dict):
        raise MalformedResponseError(f"expected a material object, got {type(data).__name__}")
    try:
        return Material.from_dict(data)
    except ValueError as e:
        raise MalformedResponseError(str(e)) from e


def _unwrap(payload: Any, key: str) -> Any:
    if not isinstance(payload, dict) or key not in payload:
        raise MalformedResponseError(f"response has no '{key}' field")
    return payload[key]


def _validate_name(name: str) -> None:
    if not name or not name.strip():
        raise ValidationError(["Material name cannot be empty"])


class MaterialService:
    """
    Remote material operations over an ApiClient.

    Every method either returns the server-acknowledged result or raises a
    ServiceError subclass.
    """

    def __init__(self, client: Optional[ApiClient] = None):
        """
        Initialize the service.

        Args:
            client: API client (defaults to one built from configuration)
        """
        self.client = client or ApiClient.from_config()

    def _material_path(self, material_id: Any) -> str:
        return f"{MATERIALS_ENDPOINT}/{quote(str(material_id), safe='')}"

    def get_all(self) -> List[Material]:
        """
        Fetch the full material collection in server order.

        Returns:
            List of Material objects

        Raises:
            ServiceError: On transport, HTTP or payload errors
        """
        payload = self.client.get(MATERIALS_ENDPOINT)
        items = _unwrap(payload, MATERIALS_KEY)
        if not isinstance(items, list):
            raise MalformedResponseError(f"'{MATERIALS_KEY}' is not a list")

        materials = [_parse_material(item) for item in items]
        log_operation(logger, "get_all_materials", "success", count=len(materials))
        return materials

    def create(self, draft: MaterialDraft) -> Material:
        """
        Create a material.

        Args:
            draft: Name and active flag of the new material

        Returns:
            The created Material with its server-assigned id

        Raises:
            ValidationError: If the name is blank (no request is sent)
            ServiceError: On transport, HTTP or payload errors
        """
        _validate_name(draft.name)
        payload = self.client.post(MATERIALS_ENDPOINT, json=draft.to_dict())
        material = _parse_material(_unwrap(payload, MATERIAL_KEY))
        log_operation(logger, "create_material", "success", material_id=material.id)
        return material

    def update(self, material_id: Any, material: Material) -> Material:
        """
        Replace a material with the edited version.

        Args:
            material_id: Id of the material to update
            material: Full edited material

        Returns:
            The Material as stored by the server

        Raises:
            ValidationError: If the name is blank (no request is sent)
            ServiceError: On transport, HTTP or payload errors
        """
        _validate_name(material.name)
        payload = self.client.put(self._material_path(material_id), json=material.to_dict())
        updated = _parse_material(_unwrap(payload, MATERIAL_KEY))
        log_operation(logger, "update_material", "success", material_id=material_id)
        return updated

    def delete(self, material_id: Any) -> None:
        """
        Delete a material. The server also deletes its alloys.

        Args:
            material_id: Id of the material to delete

        Raises:
            ServiceError: On transport or HTTP errors
        """
        self.client.delete(self._material_path(material_id))
        log_operation(logger, "delete_material", "success", material_id=material_id)
