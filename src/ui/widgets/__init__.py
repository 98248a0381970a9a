"""
Widget exports for the UI package.
"""

from src.ui.widgets.data_table import DataTable, MaterialDataTable
from src.ui.widgets.search_bar import SearchBar
from src.ui.widgets.dialogs import MessageBoxNotifier, ask_confirmation

__all__ = [
    "DataTable",
    "MaterialDataTable",
    "SearchBar",
    "MessageBoxNotifier",
    "ask_confirmation",
]
