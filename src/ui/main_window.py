"""
Main application window for Materials Admin.

Provides the main window with tabbed navigation and menu bar.
"""

import tkinter as tk
import customtkinter as ctk
from tkinter import messagebox
from typing import Optional

from src.services.material_service import MaterialService
from src.ui.materials_tab import MaterialsTab
from src.ui.widgets.dialogs import ask_confirmation
from src.utils.config import get_config
from src.utils.constants import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    MIN_WINDOW_HEIGHT,
    MIN_WINDOW_WIDTH,
)
from src.utils.strings import get_string


class MainWindow(ctk.CTk):
    """
    Main application window.

    Contains the tabbed interface and a menu bar.
    """

    def __init__(self, service: Optional[MaterialService] = None):
        """
        Initialize the main window.

        Args:
            service: Material service shared by the tabs (optional)
        """
        super().__init__()

        self.service = service or MaterialService()

        # Window configuration
        self.title(f"{APP_NAME} - v{APP_VERSION}")
        self.geometry(f"{DEFAULT_WINDOW_WIDTH}x{DEFAULT_WINDOW_HEIGHT}")
        self.minsize(MIN_WINDOW_WIDTH, MIN_WINDOW_HEIGHT)

        # Configure grid layout
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)

        self._create_menu_bar()
        self._create_tabs()

        self.protocol("WM_DELETE_WINDOW", self._on_exit)

    def _create_menu_bar(self):
        """Create the native tkinter menu bar."""
        self.menu_bar = tk.Menu(self)
        self.config(menu=self.menu_bar)

        # File menu
        file_menu = tk.Menu(self.menu_bar, tearoff=0)
        file_menu.add_command(label="Refresh", command=self._refresh_all_tabs)
        file_menu.add_separator()
        file_menu.add_command(label="Exit", command=self._on_exit)
        self.menu_bar.add_cascade(label="File", menu=file_menu)

        # Help menu
        help_menu = tk.Menu(self.menu_bar, tearoff=0)
        help_menu.add_command(label="About", command=self._show_about)
        self.menu_bar.add_cascade(label="Help", menu=help_menu)

    def _create_tabs(self):
        """Create the tabbed interface."""
        self.tabview = ctk.CTkTabview(self, corner_radius=10)
        self.tabview.grid(row=0, column=0, padx=10, pady=(0, 10), sticky="nsew")

        materials_name = get_string("page_title")
        self.tabview.add(materials_name)

        materials_frame = self.tabview.tab(materials_name)
        materials_frame.grid_columnconfigure(0, weight=1)
        materials_frame.grid_rowconfigure(0, weight=1)
        self.materials_tab = MaterialsTab(materials_frame, service=self.service)

        self.tabview.set(materials_name)

    def _refresh_all_tabs(self):
        """Reload data in every tab."""
        self.materials_tab.refresh()

    def _show_about(self):
        """Show the About dialog."""
        config = get_config()
        messagebox.showinfo(
            "About",
            f"{APP_NAME}\nVersion {APP_VERSION}\n\n"
            f"Environment: {config.environment}\n"
            f"API: {config.api_base_url}",
            parent=self,
        )

    def _on_exit(self):
        """Handle application exit."""
        if ask_confirmation(
            "Exit",
            "Are you sure you want to exit the application?",
            parent=self,
        ):
            self.service.client.close()
            self.destroy()
