"""
Main entry point for the Materials Admin application.

This module configures logging and appearance from the environment,
builds the API client, and launches the main window.
"""

import logging
import sys
import traceback
import customtkinter as ctk

from src.services.api_client import ApiClient
from src.services.material_service import MaterialService
from src.ui.main_window import MainWindow
from src.utils.config import get_config

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str) -> None:
    """
    Configure root logging.

    Args:
        level: Log level name (e.g. "INFO")
    """
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


def main():
    """
    Main application entry point.

    Configures the application and launches the main window.
    """
    config = get_config()
    configure_logging(config.log_level)
    logger = logging.getLogger(__name__)

    # Set CustomTkinter appearance
    ctk.set_appearance_mode(config.ui_appearance)
    ctk.set_default_color_theme(config.ui_theme)

    logger.info(f"Starting {config.app_name} v{config.app_version}")
    logger.info(f"Environment: {config.environment}")
    logger.info(f"API base URL: {config.api_base_url}")

    service = MaterialService(ApiClient.from_config(config))

    # Create and run main window
    try:
        app = MainWindow(service=service)
        app.mainloop()

    except Exception as e:
        print(f"ERROR: Application crashed: {e}")
        traceback.print_exc()
        sys.exit(1)

    logger.info("Application closed successfully")
    sys.exit(0)


if __name__ == "__main__":
    main()
