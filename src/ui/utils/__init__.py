"""UI utility functions."""

from src.ui.utils.background import BackgroundTaskRunner, ImmediateTaskRunner, TaskRunner
from src.ui.utils.error_handler import handle_error, get_user_message, get_server_message
from src.ui.utils.formatting import material_row_values

__all__ = [
    "BackgroundTaskRunner",
    "ImmediateTaskRunner",
    "TaskRunner",
    "handle_error",
    "get_user_message",
    "get_server_message",
    "material_row_values",
]
