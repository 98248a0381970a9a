"""
Message box notifications for Materials Admin.

MessageBoxNotifier is the desktop implementation of the page state's
notifier: every success or error becomes a modal message box with a
localized title.
"""

from tkinter import messagebox
from typing import Optional

from src.utils.strings import get_string


class MessageBoxNotifier:
    """
    Shows operation outcomes as message boxes over a parent widget.

    Args:
        parent: Widget the message boxes are centered on
        language: Optional language override for the titles
    """

    def __init__(self, parent, language: Optional[str] = None):
        self.parent = parent
        self.language = language

    def success(self, message: str) -> None:
        messagebox.showinfo(get_string("success_title", self.language), message, parent=self.parent)

    def error(self, message: str) -> None:
        messagebox.showerror(get_string("error_title", self.language), message, parent=self.parent)


def ask_confirmation(title: str, message: str, parent=None) -> bool:
    """
    Ask a yes/no question.

    Returns:
        True if the user answered yes
    """
    return bool(messagebox.askyesno(title, message, parent=parent))
