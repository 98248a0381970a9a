"""
Delete confirmation dialog for materials.

Warns that deleting a material also deletes every alloy that references it.
Like the form dialog, it stays open until its owner closes it.
"""

import tkinter as tk
import customtkinter as ctk
from typing import Callable, Optional

from src.utils.constants import COLOR_ERROR, COLOR_WARNING, PADDING_LARGE, PADDING_MEDIUM
from src.utils.strings import get_string


class DeleteMaterialDialog(ctk.CTkToplevel):
    """Confirmation dialog shown before a material is deleted."""

    def __init__(
        self,
        parent,
        material_name: str,
        on_confirm: Callable[[], None],
        on_cancel: Callable[[], None],
        language: Optional[str] = None,
    ):
        """
        Initialize the dialog.

        Args:
            parent: Parent window
            material_name: Name of the material about to be deleted
            on_confirm: Called when the delete button is pressed
            on_cancel: Called on Cancel or when the window is closed
            language: Optional language override
        """
        super().__init__(parent)

        self.on_confirm = on_confirm
        self.on_cancel = on_cancel
        self.language = language
        self.confirm_text = get_string("confirm_delete", language)

        self.title(get_string("dialog_delete_title", language))
        self.geometry("460x240")
        self.resizable(False, False)

        self.transient(parent)
        self.protocol("WM_DELETE_WINDOW", self.on_cancel)

        self.grid_columnconfigure(0, weight=1)

        # Warning banner
        warning_frame = ctk.CTkFrame(self, fg_color=("#FFFBEB", "#451A03"))
        warning_frame.grid(row=0, column=0, sticky="ew", padx=PADDING_LARGE, pady=(PADDING_LARGE, PADDING_MEDIUM))
        warning_frame.grid_columnconfigure(1, weight=1)

        icon_label = ctk.CTkLabel(warning_frame, text="⚠", text_color=COLOR_WARNING, font=ctk.CTkFont(size=20))
        icon_label.grid(row=0, column=0, padx=PADDING_MEDIUM, pady=PADDING_MEDIUM)

        question_label = ctk.CTkLabel(
            warning_frame,
            text=get_string("delete_question", language),
            anchor="w",
            wraplength=360,
        )
        question_label.grid(row=0, column=1, sticky="w", pady=PADDING_MEDIUM)

        cascade_label = ctk.CTkLabel(
            self,
            text=get_string("delete_cascade", language, name=material_name),
            anchor="w",
            justify="left",
            wraplength=410,
            text_color="gray",
        )
        cascade_label.grid(row=1, column=0, sticky="ew", padx=PADDING_LARGE, pady=PADDING_MEDIUM)

        button_frame = ctk.CTkFrame(self, fg_color="transparent")
        button_frame.grid(row=2, column=0, sticky="ew", padx=PADDING_LARGE, pady=PADDING_LARGE)
        button_frame.grid_columnconfigure((0, 1), weight=1)

        self.cancel_button = ctk.CTkButton(
            button_frame,
            text=get_string("cancel", language),
            command=self.on_cancel,
            width=150,
            fg_color="gray",
            hover_color="darkgray",
        )
        self.cancel_button.grid(row=0, column=0, padx=PADDING_MEDIUM)

        self.confirm_button = ctk.CTkButton(
            button_frame,
            text=self.confirm_text,
            command=self.on_confirm,
            width=150,
            fg_color="darkred",
            hover_color=COLOR_ERROR,
        )
        self.confirm_button.grid(row=0, column=1, padx=PADDING_MEDIUM)

        self.after(10, self._grab)

    def _grab(self):
        """Make the dialog modal once it is mapped."""
        try:
            self.grab_set()
        except tk.TclError:
            self.after(50, self._grab)

    def update_controls(self, is_submitting: bool):
        """Disable the delete button while the request is in flight."""
        self.confirm_button.configure(
            state="disabled" if is_submitting else "normal",
            text=f"{self.confirm_text}..." if is_submitting else self.confirm_text,
        )
