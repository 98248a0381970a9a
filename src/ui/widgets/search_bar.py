"""
Search bar widget for filtering data.

Provides a live search entry: the callback fires on every keystroke.
"""

import customtkinter as ctk
from typing import Callable


class SearchBar(ctk.CTkFrame):
    """
    Reusable live search bar.

    Calls search_callback with the raw entry text after each key release,
    so filtering tracks the entry without debouncing.
    """

    def __init__(
        self,
        parent,
        search_callback: Callable[[str], None],
        placeholder: str = "Search...",
        width: int = 320,
    ):
        """
        Initialize the search bar.

        Args:
            parent: Parent widget
            search_callback: Callback function(search_term)
            placeholder: Placeholder text for search entry
            width: Entry width in pixels
        """
        super().__init__(parent, fg_color="transparent")

        self.search_callback = search_callback

        self.grid_columnconfigure(0, weight=1)

        self.search_entry = ctk.CTkEntry(
            self,
            placeholder_text=f"🔍 {placeholder}",
            height=35,
            width=width,
        )
        self.search_entry.grid(row=0, column=0, sticky="w")
        self.search_entry.bind("<KeyRelease>", lambda e: self._on_search())
        self.search_entry.bind("<Return>", lambda e: self._on_search())

    def _on_search(self):
        """Report the current entry text."""
        self.search_callback(self.search_entry.get())

