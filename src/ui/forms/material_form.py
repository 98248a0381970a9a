"""
Material form dialog for adding and editing materials.

The dialog does not save anything itself. It reports input changes, submit
and cancel to its owner and stays open until the owner closes it, so a
failed request leaves the user's input in place for a retry.
"""

import tkinter as tk
import customtkinter as ctk
from typing import Callable, Optional

from src.utils.constants import (
    FORM_FIELD_WIDTH_LARGE,
    PADDING_MEDIUM,
    PADDING_LARGE,
)
from src.utils.strings import get_string


class MaterialFormDialog(ctk.CTkToplevel):
    """
    Dialog for creating or editing a material.

    Provides a name entry and an active switch.
    """

    def __init__(
        self,
        parent,
        title: str,
        submit_text: str,
        on_change: Callable[[str, bool], None],
        on_submit: Callable[[], None],
        on_cancel: Callable[[], None],
        name: str = "",
        is_active: bool = True,
        language: Optional[str] = None,
    ):
        """
        Initialize the material form dialog.

        Args:
            parent: Parent window
            title: Dialog title
            submit_text: Label of the submit button ("Save" / "Update")
            on_change: Called with (name, is_active) whenever an input changes
            on_submit: Called when the submit button is pressed
            on_cancel: Called on Cancel or when the window is closed
            name: Initial name
            is_active: Initial active flag
            language: Optional language override
        """
        super().__init__(parent)

        self.on_change = on_change
        self.on_submit = on_submit
        self.on_cancel = on_cancel
        self.language = language
        self.submit_text = submit_text

        # Configure window
        self.title(title)
        self.geometry("440x260")
        self.resizable(False, False)

        # Center on parent
        self.transient(parent)
        self.protocol("WM_DELETE_WINDOW", self._cancel)

        self.grid_columnconfigure(0, weight=1)

        self._create_form_fields(name, is_active)
        self._create_buttons()

        self.after(10, self._grab)

    def _grab(self):
        """Make the dialog modal once it is mapped."""
        try:
            self.grab_set()
        except tk.TclError:
            # Window not viewable yet on some platforms; retry shortly
            self.after(50, self._grab)
            return
        self.name_entry.focus()

    def _create_form_fields(self, name: str, is_active: bool):
        """Create the name entry and the active switch."""
        form_frame = ctk.CTkFrame(self, fg_color="transparent")
        form_frame.grid(row=0, column=0, sticky="nsew", padx=PADDING_LARGE, pady=PADDING_LARGE)
        form_frame.grid_columnconfigure(0, weight=1)

        name_label = ctk.CTkLabel(
            form_frame,
            text=get_string("name_label", self.language),
            anchor="w",
            font=ctk.CTkFont(weight="bold"),
        )
        name_label.grid(row=0, column=0, sticky="w", pady=(0, 5))

        # Traced variable: typing, paste and cut all report the new name
        self.name_var = ctk.StringVar(value=name)
        self.name_entry = ctk.CTkEntry(
            form_frame,
            width=FORM_FIELD_WIDTH_LARGE,
            textvariable=self.name_var,
        )
        self.name_entry.grid(row=1, column=0, sticky="ew", pady=(0, PADDING_MEDIUM))
        self.name_var.trace_add("write", lambda *args: self._changed())
        self.name_entry.bind("<Return>", lambda e: self.on_submit())

        self.active_var = ctk.BooleanVar(value=is_active)
        self.active_switch = ctk.CTkSwitch(
            form_frame,
            text=get_string("active_label", self.language),
            variable=self.active_var,
            onvalue=True,
            offvalue=False,
            command=self._changed,
        )
        self.active_switch.grid(row=2, column=0, sticky="w", pady=PADDING_MEDIUM)

    def _create_buttons(self):
        """Create dialog buttons."""
        button_frame = ctk.CTkFrame(self, fg_color="transparent")
        button_frame.grid(row=1, column=0, sticky="ew", padx=PADDING_LARGE, pady=(0, PADDING_LARGE))
        button_frame.grid_columnconfigure((0, 1), weight=1)

        self.cancel_button = ctk.CTkButton(
            button_frame,
            text=get_string("cancel", self.language),
            command=self._cancel,
            width=150,
            fg_color="gray",
            hover_color="darkgray",
        )
        self.cancel_button.grid(row=0, column=0, padx=PADDING_MEDIUM)

        self.submit_button = ctk.CTkButton(
            button_frame,
            text=self.submit_text,
            command=self.on_submit,
            width=150,
        )
        self.submit_button.grid(row=0, column=1, padx=PADDING_MEDIUM)

    def _changed(self):
        """Report the current inputs to the owner."""
        self.on_change(self.name_var.get(), bool(self.active_var.get()))

    def _cancel(self):
        self.on_cancel()

    def update_controls(self, can_submit: bool, is_submitting: bool):
        """
        Enable or disable the submit button.

        Args:
            can_submit: Whether the current input may be submitted
            is_submitting: Whether a request is in flight
        """
        self.submit_button.configure(
            state="normal" if can_submit and not is_submitting else "disabled",
            text=f"{self.submit_text}..." if is_submitting else self.submit_text,
        )
