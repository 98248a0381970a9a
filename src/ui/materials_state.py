"""
State container and command handlers for the Materials screen.

MaterialsPageState owns everything the screen displays and implements the
four operations against the material service:

- load: fetch the full collection (on mount and on refresh)
- create: validate draft -> create -> append server result
- edit: validate owned copy -> update -> replace matching id
- delete: confirm -> delete -> remove matching id

The material list is never mutated in place; every successful command
assigns a new list, and a failed command leaves the old one untouched.
Nothing here imports a widget toolkit, so the whole flow is testable
without a Tk root. The view (MaterialsTab) subscribes with add_listener()
and re-renders after every state change.

Each dialog follows the same state machine:

    CLOSED -> OPEN -> SUBMITTING -> CLOSED  (success)
                                 -> OPEN    (failure, input preserved)

Submitting is only entered from OPEN, so a second submit while a request
is in flight is ignored.
"""

import logging
from enum import Enum
from typing import Any, Callable, List, Optional, Protocol

from src.models.material import Material, MaterialDraft
from src.services.material_service import MaterialService
from src.ui.utils.background import ImmediateTaskRunner, TaskRunner
from src.ui.utils.error_handler import handle_error
from src.utils.strings import get_string

logger = logging.getLogger(__name__)


class DialogState(Enum):
    """Lifecycle of a create/edit/delete dialog."""

    CLOSED = "closed"
    OPEN = "open"
    SUBMITTING = "submitting"


class Notifier(Protocol):
    """Delivers operation outcomes to the user."""

    def success(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...


def filter_materials(materials: List[Material], search_term: str) -> List[Material]:
    """
    Case-insensitive substring filter on material names.

    Args:
        materials: Materials in display order
        search_term: Text typed in the search box

    Returns:
        Matching materials, order preserved. An empty term matches everything.
    """
    needle = search_term.lower()
    return [material for material in materials if needle in material.name.lower()]


class MaterialsPageState:
    """
    Materials screen state and command handlers.

    Attributes:
        materials: Materials in server order
        search_term: Current search box text
        is_loading: True while the collection is being fetched
        is_submitting: True while a create/update/delete request is in flight
        new_material: Draft bound to the create dialog
        selected_material: Edit/delete target (an owned copy while editing)
        create_state: Create dialog state
        edit_state: Edit dialog state
        delete_state: Delete confirmation state
    """

    def __init__(
        self,
        service: MaterialService,
        notifier: Notifier,
        runner: Optional[TaskRunner] = None,
        language: Optional[str] = None,
    ):
        """
        Initialize the page state.

        Args:
            service: Material service used for all remote calls
            notifier: Receives success and error messages
            runner: Executes service calls (default: inline)
            language: Message language override (default: configured language)
        """
        self.service = service
        self.notifier = notifier
        self.runner: TaskRunner = runner or ImmediateTaskRunner()
        self.language = language

        self.materials: List[Material] = []
        self.search_term = ""
        self.is_loading = False
        self.is_submitting = False

        self.new_material = MaterialDraft()
        self.selected_material: Optional[Material] = None

        self.create_state = DialogState.CLOSED
        self.edit_state = DialogState.CLOSED
        self.delete_state = DialogState.CLOSED

        self._listeners: List[Callable[["MaterialsPageState"], None]] = []
        # Bumped by every applied create/update/delete
        self._list_version = 0

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def add_listener(self, listener: Callable[["MaterialsPageState"], None]) -> None:
        """Register a callback invoked after every state change."""
        self._listeners.append(listener)

    def _changed(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def _text(self, key: str, **kwargs: Any) -> str:
        return get_string(key, self.language, **kwargs)

    # ------------------------------------------------------------------
    # Loader
    # ------------------------------------------------------------------

    def load(self) -> bool:
        """
        Fetch the full material list and replace the local one.

        A list fetched before a create/update/delete was applied is stale;
        it is discarded and fetched again instead of overwriting that change.

        Returns:
            False if a load is already in flight (the call is ignored)
        """
        if self.is_loading:
            return False
        self.is_loading = True
        self._changed()
        self._fetch()
        return True

    def _fetch(self) -> None:
        version = self._list_version
        self.runner.submit(
            self.service.get_all,
            lambda materials: self._on_load_success(materials, version),
            self._on_load_error,
        )

    def _on_load_success(self, materials: List[Material], version: int) -> None:
        if version != self._list_version:
            logger.debug("Material list changed while loading, fetching again")
            self._fetch()
            return
        try:
            self.materials = list(materials)
            logger.debug(f"Loaded {len(self.materials)} material(s)")
        finally:
            self.is_loading = False
            self._changed()

    def _on_load_error(self, error: Exception) -> None:
        try:
            handle_error(error, "Load materials")
        finally:
            self.is_loading = False
            self._changed()
        self.notifier.error(self._text("load_error"))

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    @property
    def filtered_materials(self) -> List[Material]:
        """Materials whose name contains the search term, ignoring case."""
        return filter_materials(self.materials, self.search_term)

    def set_search_term(self, search_term: str) -> None:
        self.search_term = search_term
        self._changed()

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def open_create(self) -> None:
        if self.create_state is DialogState.CLOSED:
            self.create_state = DialogState.OPEN
            self._changed()

    def update_draft(self, name: Optional[str] = None, is_active: Optional[bool] = None) -> None:
        """Apply form input to the create draft."""
        if name is not None:
            self.new_material.name = name
        if is_active is not None:
            self.new_material.is_active = is_active
        self._changed()

    @property
    def can_submit_create(self) -> bool:
        """Whether the create dialog's save control is enabled."""
        return self.create_state is DialogState.OPEN and bool(self.new_material.name.strip())

    def submit_create(self) -> bool:
        """
        Validate the draft and send the create request.

        Returns:
            True if a request was started
        """
        if self.create_state is not DialogState.OPEN:
            return False

        if not self.new_material.name.strip():
            self.notifier.error(self._text("name_required"))
            return False

        draft = MaterialDraft(name=self.new_material.name, is_active=self.new_material.is_active)
        self.create_state = DialogState.SUBMITTING
        self.is_submitting = True
        self._changed()

        self.runner.submit(
            lambda: self.service.create(draft),
            self._on_create_success,
            self._on_create_error,
        )
        return True

    def _on_create_success(self, material: Material) -> None:
        try:
            if any(existing.id == material.id for existing in self.materials):
                # A load that finished first already brought the new row
                self.materials = [
                    material if existing.id == material.id else existing
                    for existing in self.materials
                ]
            else:
                self.materials = [*self.materials, material]
            self._list_version += 1
            self.create_state = DialogState.CLOSED
            self.new_material = MaterialDraft()
        finally:
            self.is_submitting = False
            self._changed()
        self.notifier.success(self._text("create_success"))

    def _on_create_error(self, error: Exception) -> None:
        try:
            self.create_state = DialogState.OPEN
            message = handle_error(error, "Create material", self._text("create_error"))
        finally:
            self.is_submitting = False
            self._changed()
        self.notifier.error(message)

    def cancel_create(self) -> bool:
        """
        Close the create dialog and reset the draft.

        Returns:
            False if a request is in flight (the dialog stays open)
        """
        if self.create_state is DialogState.SUBMITTING:
            return False
        self.create_state = DialogState.CLOSED
        self.new_material = MaterialDraft()
        self._changed()
        return True

    # ------------------------------------------------------------------
    # Edit
    # ------------------------------------------------------------------

    def open_edit(self, material: Material) -> None:
        """Open the edit dialog on an owned copy of the row."""
        if self.edit_state is not DialogState.CLOSED:
            return
        self.selected_material = material.copy()
        self.edit_state = DialogState.OPEN
        self._changed()

    def update_selected(self, name: Optional[str] = None, is_active: Optional[bool] = None) -> None:
        """Apply form input to the material being edited."""
        if self.selected_material is None:
            return
        if name is not None:
            self.selected_material.name = name
        if is_active is not None:
            self.selected_material.is_active = is_active
        self._changed()

    @property
    def can_submit_edit(self) -> bool:
        """Whether the edit dialog's update control is enabled."""
        return (
            self.edit_state is DialogState.OPEN
            and self.selected_material is not None
            and bool(self.selected_material.name.strip())
        )

    def submit_edit(self) -> bool:
        """
        Validate the edited copy and send the update request.

        Returns:
            True if a request was started
        """
        if self.edit_state is not DialogState.OPEN:
            return False

        if self.selected_material is None or not self.selected_material.name.strip():
            self.notifier.error(self._text("name_required"))
            return False

        target = self.selected_material.copy()
        self.edit_state = DialogState.SUBMITTING
        self.is_submitting = True
        self._changed()

        self.runner.submit(
            lambda: self.service.update(target.id, target),
            lambda updated: self._on_edit_success(target.id, updated),
            self._on_edit_error,
        )
        return True

    def _on_edit_success(self, material_id: Any, updated: Material) -> None:
        try:
            self.materials = [
                updated if material.id == material_id else material
                for material in self.materials
            ]
            self._list_version += 1
            self.edit_state = DialogState.CLOSED
            self.selected_material = None
        finally:
            self.is_submitting = False
            self._changed()
        self.notifier.success(self._text("update_success"))

    def _on_edit_error(self, error: Exception) -> None:
        try:
            self.edit_state = DialogState.OPEN
            message = handle_error(error, "Update material", self._text("update_error"))
        finally:
            self.is_submitting = False
            self._changed()
        self.notifier.error(message)

    def cancel_edit(self) -> bool:
        """Close the edit dialog, discarding the copy."""
        if self.edit_state is DialogState.SUBMITTING:
            return False
        self.edit_state = DialogState.CLOSED
        self.selected_material = None
        self._changed()
        return True

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    def open_delete(self, material: Material) -> None:
        """Open the delete confirmation for a row."""
        if self.delete_state is not DialogState.CLOSED:
            return
        self.selected_material = material
        self.delete_state = DialogState.OPEN
        self._changed()

    def confirm_delete(self) -> bool:
        """
        Send the delete request for the selected material.

        Returns:
            True if a request was started
        """
        if self.delete_state is not DialogState.OPEN or self.selected_material is None:
            return False

        material_id = self.selected_material.id
        self.delete_state = DialogState.SUBMITTING
        self.is_submitting = True
        self._changed()

        self.runner.submit(
            lambda: self.service.delete(material_id),
            lambda _result: self._on_delete_success(material_id),
            self._on_delete_error,
        )
        return True

    def _on_delete_success(self, material_id: Any) -> None:
        try:
            self.materials = [
                material for material in self.materials if material.id != material_id
            ]
            self._list_version += 1
            self.delete_state = DialogState.CLOSED
            self.selected_material = None
        finally:
            self.is_submitting = False
            self._changed()
        self.notifier.success(self._text("delete_success"))

    def _on_delete_error(self, error: Exception) -> None:
        try:
            self.delete_state = DialogState.OPEN
            message = handle_error(error, "Delete material", self._text("delete_error"))
        finally:
            self.is_submitting = False
            self._changed()
        self.notifier.error(message)

    def cancel_delete(self) -> bool:
        """Close the delete confirmation without deleting."""
        if self.delete_state is DialogState.SUBMITTING:
            return False
        self.delete_state = DialogState.CLOSED
        self.selected_material = None
        self._changed()
        return True
