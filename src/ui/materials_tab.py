"""
Materials tab for Materials Admin.

Provides the CRUD interface for managing materials:
- Viewing all materials in a live-filtered table
- Adding new materials
- Editing a material's name and active flag
- Deleting materials (and, server-side, their alloys)

All behaviour lives in MaterialsPageState; this module only binds widgets
to it and re-renders whenever it changes.
"""

import customtkinter as ctk
from typing import Optional

from src.models.material import Material
from src.services.material_service import MaterialService
from src.ui.dialogs.delete_material_dialog import DeleteMaterialDialog
from src.ui.forms.material_form import MaterialFormDialog
from src.ui.materials_state import DialogState, MaterialsPageState
from src.ui.utils.background import BackgroundTaskRunner
from src.ui.widgets.data_table import MaterialDataTable
from src.ui.widgets.dialogs import MessageBoxNotifier
from src.ui.widgets.search_bar import SearchBar
from src.utils.constants import PADDING_LARGE, PADDING_MEDIUM
from src.utils.strings import get_string


class MaterialsTab(ctk.CTkFrame):
    """
    Materials management tab with full CRUD capabilities.

    Service calls run on a background thread; results are applied on the
    Tk main loop, so the table and search stay usable while a request is
    in flight.
    """

    def __init__(
        self,
        parent,
        service: Optional[MaterialService] = None,
        language: Optional[str] = None,
    ):
        """
        Initialize the materials tab.

        Args:
            parent: Parent widget
            service: Material service (defaults to one built from configuration)
            language: Optional language override for all text
        """
        super().__init__(parent)

        self.language = language
        self.page_state = MaterialsPageState(
            service or MaterialService(),
            MessageBoxNotifier(self, language),
            runner=BackgroundTaskRunner(self),
            language=language,
        )

        self.create_dialog: Optional[MaterialFormDialog] = None
        self.edit_dialog: Optional[MaterialFormDialog] = None
        self.delete_dialog: Optional[DeleteMaterialDialog] = None

        self._rendered_materials = None
        self._rendered_term = None
        self._showing_loading = False

        # Configure grid
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=0)  # Header
        self.grid_rowconfigure(1, weight=0)  # Search bar
        self.grid_rowconfigure(2, weight=1)  # Table card
        self.grid_rowconfigure(3, weight=0)  # Status bar

        # Create UI components
        self._create_header()
        self._create_search_bar()
        self._create_table_card()
        self._create_status_bar()

        self.page_state.add_listener(self._render)

        # Load initial data
        self.page_state.load()

        self.grid(row=0, column=0, sticky="nsew", padx=10, pady=10)

    def _text(self, key: str, **kwargs) -> str:
        return get_string(key, self.language, **kwargs)

    def _create_header(self):
        """Create the page title and action buttons."""
        header_frame = ctk.CTkFrame(self, fg_color="transparent")
        header_frame.grid(row=0, column=0, sticky="ew", padx=PADDING_LARGE, pady=(PADDING_LARGE, PADDING_MEDIUM))
        header_frame.grid_columnconfigure(0, weight=1)

        title_label = ctk.CTkLabel(
            header_frame,
            text=self._text("page_title"),
            font=ctk.CTkFont(size=22, weight="bold"),
            anchor="w",
        )
        title_label.grid(row=0, column=0, sticky="w")

        self.refresh_button = ctk.CTkButton(
            header_frame,
            text=self._text("refresh"),
            command=self.refresh,
            width=120,
            fg_color="gray",
            hover_color="darkgray",
        )
        self.refresh_button.grid(row=0, column=1, padx=PADDING_MEDIUM)

        add_button = ctk.CTkButton(
            header_frame,
            text=self._text("add_material"),
            command=self.page_state.open_create,
            width=180,
        )
        add_button.grid(row=0, column=2)

    def _create_search_bar(self):
        """Create the search bar."""
        self.search_bar = SearchBar(
            self,
            search_callback=self.page_state.set_search_term,
            placeholder=self._text("search_placeholder"),
        )
        self.search_bar.grid(row=1, column=0, sticky="ew", padx=PADDING_LARGE, pady=PADDING_MEDIUM)

    def _create_table_card(self):
        """Create the card holding the loading indicator and the table."""
        card = ctk.CTkFrame(self)
        card.grid(row=2, column=0, sticky="nsew", padx=PADDING_LARGE, pady=PADDING_MEDIUM)
        card.grid_columnconfigure(0, weight=1)
        card.grid_rowconfigure(1, weight=1)

        card_title = ctk.CTkLabel(
            card,
            text=self._text("table_title"),
            font=ctk.CTkFont(size=16, weight="bold"),
            anchor="w",
        )
        card_title.grid(row=0, column=0, sticky="w", padx=PADDING_MEDIUM, pady=PADDING_MEDIUM)

        self.loading_bar = ctk.CTkProgressBar(card, mode="indeterminate")

        self.data_table = MaterialDataTable(
            card,
            on_edit=self.page_state.open_edit,
            on_delete=self.page_state.open_delete,
            language=self.language,
        )
        self.data_table.grid(row=1, column=0, sticky="nsew", padx=PADDING_MEDIUM, pady=(0, PADDING_MEDIUM))

    def _create_status_bar(self):
        """Create status bar for displaying info."""
        self.status_frame = ctk.CTkFrame(self, height=30)
        self.status_frame.grid(row=3, column=0, sticky="ew", padx=PADDING_LARGE, pady=(0, PADDING_LARGE))
        self.status_frame.grid_columnconfigure(0, weight=1)

        self.status_label = ctk.CTkLabel(
            self.status_frame,
            text=self._text("ready"),
            anchor="w",
        )
        self.status_label.grid(row=0, column=0, sticky="w", padx=PADDING_MEDIUM, pady=5)

    def refresh(self):
        """Reload the materials list from the server."""
        self.page_state.load()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _render(self, state: MaterialsPageState):
        """Bring every widget in line with the page state."""
        self._render_table(state)
        self._render_status(state)
        self._sync_create_dialog(state)
        self._sync_edit_dialog(state)
        self._sync_delete_dialog(state)

    def _render_table(self, state: MaterialsPageState):
        if state.is_loading:
            if not self._showing_loading:
                self._showing_loading = True
                self.data_table.grid_remove()
                self.loading_bar.grid(row=1, column=0, sticky="ew", padx=PADDING_LARGE, pady=40)
                self.loading_bar.start()
            self.refresh_button.configure(state="disabled")
            return

        if self._showing_loading:
            self._showing_loading = False
            self.loading_bar.stop()
            self.loading_bar.grid_remove()
            self.data_table.grid()
        self.refresh_button.configure(state="normal")

        # Rows are rebuilt only when the list or the filter actually changed
        if state.materials is self._rendered_materials and state.search_term == self._rendered_term:
            return
        self._rendered_materials = state.materials
        self._rendered_term = state.search_term
        self.data_table.set_data(state.filtered_materials)

    def _render_status(self, state: MaterialsPageState):
        if state.is_loading:
            text = self._text("loading")
        else:
            text = self._text(
                "loaded",
                shown=len(state.filtered_materials),
                total=len(state.materials),
            )
        self.status_label.configure(text=text)

    def _sync_create_dialog(self, state: MaterialsPageState):
        if state.create_state is DialogState.CLOSED:
            self.create_dialog = self._close(self.create_dialog)
            return

        if self.create_dialog is None:
            self.create_dialog = MaterialFormDialog(
                self,
                title=self._text("dialog_add_title"),
                submit_text=self._text("save"),
                on_change=self._on_draft_change,
                on_submit=state.submit_create,
                on_cancel=state.cancel_create,
                name=state.new_material.name,
                is_active=state.new_material.is_active,
                language=self.language,
            )
        self.create_dialog.update_controls(
            can_submit=bool(state.new_material.name.strip()),
            is_submitting=state.create_state is DialogState.SUBMITTING,
        )

    def _sync_edit_dialog(self, state: MaterialsPageState):
        if state.edit_state is DialogState.CLOSED:
            self.edit_dialog = self._close(self.edit_dialog)
            return

        if self.edit_dialog is None and state.selected_material is not None:
            self.edit_dialog = MaterialFormDialog(
                self,
                title=self._text("dialog_edit_title"),
                submit_text=self._text("update"),
                on_change=self._on_edit_change,
                on_submit=state.submit_edit,
                on_cancel=state.cancel_edit,
                name=state.selected_material.name,
                is_active=state.selected_material.is_active,
                language=self.language,
            )
        if self.edit_dialog is not None:
            selected: Optional[Material] = state.selected_material
            self.edit_dialog.update_controls(
                can_submit=selected is not None and bool(selected.name.strip()),
                is_submitting=state.edit_state is DialogState.SUBMITTING,
            )

    def _sync_delete_dialog(self, state: MaterialsPageState):
        if state.delete_state is DialogState.CLOSED:
            self.delete_dialog = self._close(self.delete_dialog)
            return

        if self.delete_dialog is None and state.selected_material is not None:
            self.delete_dialog = DeleteMaterialDialog(
                self,
                material_name=state.selected_material.name,
                on_confirm=state.confirm_delete,
                on_cancel=state.cancel_delete,
                language=self.language,
            )
        if self.delete_dialog is not None:
            self.delete_dialog.update_controls(
                is_submitting=state.delete_state is DialogState.SUBMITTING,
            )

    @staticmethod
    def _close(dialog):
        if dialog is not None and dialog.winfo_exists():
            dialog.grab_release()
            dialog.destroy()
        return None

    def _on_draft_change(self, name: str, is_active: bool):
        self.page_state.update_draft(name=name, is_active=is_active)

    def _on_edit_change(self, name: str, is_active: bool):
        self.page_state.update_selected(name=name, is_active=is_active)
