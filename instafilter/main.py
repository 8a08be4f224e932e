"""
Instafilter - Main Entry Point

Run this to start the GUI application.
"""

import locale
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import QApplication

from .oiio import OiioAdapter, OiioFilterEngine
from .processing import FilterCatalog
from .services import Settings

LOG_DIR = Path.home() / ".instafilter" / "logs"


def setup_logging(console_level: str = "INFO", log_dir: Optional[Path] = LOG_DIR) -> None:
    """Configure root logging: DEBUG to a log file, console_level to stderr."""
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, console_level, logging.INFO))
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f'instafilter_{datetime.now().strftime("%Y%m%d_%H%M%S")}.log'
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        logging.info(f"Logging to {log_file}")


def setup_collation() -> None:
    """Use the user's collation locale for sorting display names."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logging.warning(f"System collation locale unavailable, using code-point order: {e}")


def main():
    """Launch the application."""
    settings = Settings()
    setup_logging(settings.get_log_level())
    logging.info(f"OpenImageIO version: {OiioAdapter.get_oiio_version()}")
    setup_collation()

    # Build the catalog once; everything else receives it
    catalog = FilterCatalog.build(OiioFilterEngine())

    app = QApplication(sys.argv)
    app.setApplicationName("Instafilter")

    from .ui.main_window import MainWindow
    window = MainWindow(catalog, settings)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
