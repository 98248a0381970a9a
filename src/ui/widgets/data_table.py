"""
Data table widget for displaying tabular data.

Provides a scrollable table with column headers, double-click handling
and an empty-state row, plus the materials table with status badges and per-row
edit/delete actions.
"""

import customtkinter as ctk
from typing import List, Tuple, Callable, Optional, Any

from src.ui.utils.formatting import format_status, material_row_values
from src.utils.constants import (
    BADGE_ACTIVE_COLORS,
    BADGE_ACTIVE_TEXT,
    BADGE_INACTIVE_COLORS,
    BADGE_INACTIVE_TEXT,
    COLOR_ERROR,
    MATERIAL_COLUMN_WIDTHS,
)
from src.utils.strings import get_string


class DataTable(ctk.CTkFrame):
    """
    Reusable data table widget with scrolling.

    Displays tabular data with column headers and reports row double-clicks.
    Subclasses supply the cell text through _get_row_values().
    """

    def __init__(
        self,
        parent,
        columns: List[Tuple[str, int]],
        on_row_double_click: Optional[Callable[[Any], None]] = None,
        empty_message: str = "",
    ):
        """
        Initialize the data table.

        Args:
            parent: Parent widget
            columns: List of (column_name, width) tuples
            on_row_double_click: Callback for row double-click (receives row data)
            empty_message: Text shown in place of rows when there is no data
        """
        super().__init__(parent)

        self.columns = columns
        self.on_row_double_click = on_row_double_click
        self.empty_message = empty_message
        self.data = []

        # Configure grid
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self._create_header()
        self._create_data_frame()

    def _create_header(self):
        """Create the table header row."""
        header_frame = ctk.CTkFrame(self, fg_color=("gray85", "gray25"))
        header_frame.grid(row=0, column=0, sticky="ew")

        for i, (col_name, col_width) in enumerate(self.columns):
            header_label = ctk.CTkLabel(
                header_frame,
                text=col_name,
                width=col_width,
                font=ctk.CTkFont(weight="bold"),
            )
            header_label.grid(row=0, column=i, padx=5, pady=8, sticky="w")

    def _create_data_frame(self):
        """Create the scrollable frame for data rows."""
        self.scrollable_frame = ctk.CTkScrollableFrame(self)
        self.scrollable_frame.grid(row=1, column=0, sticky="nsew")

        for i, (_, col_width) in enumerate(self.columns):
            self.scrollable_frame.grid_columnconfigure(i, minsize=col_width)

    def set_data(self, data: List[Any]):
        """
        Set the table data and refresh the display.

        Args:
            data: List of data items to display
        """
        self.data = list(data)
        self._refresh_rows()

    def _refresh_rows(self):
        """Refresh the data rows."""
        for widget in self.scrollable_frame.winfo_children():
            widget.destroy()

        if not self.data and self.empty_message:
            self._create_empty_row()
            return

        for row_index, row_data in enumerate(self.data):
            self._create_row(row_index, row_data)

    def _create_empty_row(self):
        """Show the empty-state message across all columns."""
        total_width = sum(width for _, width in self.columns)
        empty_label = ctk.CTkLabel(
            self.scrollable_frame,
            text=self.empty_message,
            width=total_width,
            text_color="gray",
        )
        empty_label.grid(row=0, column=0, columnspan=len(self.columns), pady=30)

    def _create_row(self, row_index: int, row_data: Any):
        """
        Create a data row.

        Args:
            row_index: Index of the row
            row_data: Data for the row
        """
        row_frame = ctk.CTkFrame(self.scrollable_frame, fg_color="transparent")
        row_frame.grid(row=row_index, column=0, columnspan=len(self.columns), sticky="ew")

        row_values = self._get_row_values(row_index, row_data)

        for col_index, (col_value, (_, col_width)) in enumerate(zip(row_values, self.columns)):
            cell_label = ctk.CTkLabel(
                row_frame,
                text=str(col_value),
                width=col_width,
                anchor="w",
            )
            cell_label.grid(row=0, column=col_index, padx=5, pady=4, sticky="w")
            self._bind_row_events(cell_label, row_index)

        self._bind_row_events(row_frame, row_index)
        return row_frame

    def _bind_row_events(self, widget, row_index: int):
        """Route double-clicks on a row widget to the row handler."""
        widget.bind(
            "<Double-Button-1>", lambda e, idx=row_index: self._on_row_double_click_event(idx)
        )

    def _get_row_values(self, row_index: int, row_data: Any) -> List[str]:
        """
        Cell text for the leading plain-text columns of a row.

        Args:
            row_index: Position of the row
            row_data: Row data object

        Returns:
            List of string values, one per text column
        """
        raise NotImplementedError

    def _on_row_double_click_event(self, row_index: int):
        """
        Handle row double-click event.

        Args:
            row_index: Index of double-clicked row
        """
        if self.on_row_double_click and row_index < len(self.data):
            self.on_row_double_click(self.data[row_index])


class MaterialDataTable(DataTable):
    """
    Materials table: row number, name, alloy count, status badge, actions.

    Double-clicking a row opens it for editing.
    """

    def __init__(
        self,
        parent,
        on_edit: Callable[[Any], None],
        on_delete: Callable[[Any], None],
        language: Optional[str] = None,
    ):
        """
        Initialize the materials table.

        Args:
            parent: Parent widget
            on_edit: Called with the material whose edit action was pressed
            on_delete: Called with the material whose delete action was pressed
            language: Optional language override for cell text
        """
        self.on_edit = on_edit
        self.on_delete = on_delete
        self.language = language

        widths = MATERIAL_COLUMN_WIDTHS
        columns = [
            (get_string("col_index", language), widths["index"]),
            (get_string("col_name", language), widths["name"]),
            (get_string("col_alloys", language), widths["alloys"]),
            (get_string("col_status", language), widths["status"]),
            (get_string("col_actions", language), widths["actions"]),
        ]
        super().__init__(
            parent,
            columns=columns,
            on_row_double_click=on_edit,
            empty_message=get_string("no_materials", language),
        )

    def _get_row_values(self, row_index: int, row_data: Any) -> List[str]:
        """
        Row number, name and alloy count (status and actions are drawn separately).

        Args:
            row_index: Position in the filtered list
            row_data: Material object

        Returns:
            List of formatted values
        """
        return material_row_values(row_index, row_data, self.language)

    def _create_row(self, row_index: int, row_data: Any):
        """Create a row with a status badge and edit/delete buttons."""
        row_frame = super()._create_row(row_index, row_data)

        badge_colors = BADGE_ACTIVE_COLORS if row_data.is_active else BADGE_INACTIVE_COLORS
        badge_text = BADGE_ACTIVE_TEXT if row_data.is_active else BADGE_INACTIVE_TEXT

        status_badge = ctk.CTkLabel(
            row_frame,
            text=format_status(row_data, self.language),
            fg_color=badge_colors,
            text_color=badge_text,
            corner_radius=10,
            width=80,
            font=ctk.CTkFont(size=12, weight="bold"),
        )
        status_badge.grid(row=0, column=3, padx=5, pady=4, sticky="w")
        self._bind_row_events(status_badge, row_index)

        actions_frame = ctk.CTkFrame(row_frame, fg_color="transparent")
        actions_frame.grid(row=0, column=4, padx=5, pady=2, sticky="w")

        edit_button = ctk.CTkButton(
            actions_frame,
            text=get_string("edit", self.language),
            width=70,
            height=26,
            fg_color="transparent",
            border_width=1,
            text_color=("gray10", "gray90"),
            command=lambda material=row_data: self.on_edit(material),
        )
        edit_button.grid(row=0, column=0, padx=(0, 5))

        delete_button = ctk.CTkButton(
            actions_frame,
            text=get_string("delete", self.language),
            width=70,
            height=26,
            fg_color="transparent",
            border_width=1,
            text_color=COLOR_ERROR,
            hover_color=("#FEE2E2", "#450A0A"),
            command=lambda material=row_data: self.on_delete(material),
        )
        delete_button.grid(row=0, column=1)

        return row_frame
