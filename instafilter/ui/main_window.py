"""
Main application window (Qt 6).

Image view with open/save on the left, filter browser and parameter
sliders on the right. Filter controls stay disabled until a photo is
loaded.
"""

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QPushButton,
    QFileDialog,
    QMessageBox,
)

from ..oiio import OiioAdapter
from ..processing import FilterCatalog
from ..services import FilterState, Settings
from .widgets import FilterPanel, ImageView

logger = logging.getLogger(__name__)

INITIAL_FILTER = "CISepiaTone"
IMAGE_FILTER = "Изображения (*.jpg *.jpeg *.png *.tif *.tiff *.exr *.bmp)"


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, catalog: FilterCatalog, settings: Optional[Settings] = None):
        super().__init__()
        self.setWindowTitle("Instafilter")
        self.setGeometry(100, 100, 1200, 800)

        # Settings
        self.settings = settings or Settings()

        # State
        self.state = FilterState(catalog, settings=self.settings)
        self.state.add_listener(self._on_image_rendered)

        self._build_ui()
        if INITIAL_FILTER in catalog:
            self.filter_panel.filter_browser.select_filter(INITIAL_FILTER)
        self._update_enabled()

    def _build_ui(self) -> None:
        """Build the main UI layout."""
        central = QWidget()
        self.setCentralWidget(central)

        main_layout = QHBoxLayout(central)

        left_panel = QWidget()
        left_layout = QVBoxLayout(left_panel)
        self.image_view = ImageView()
        left_layout.addWidget(self.image_view, 1)

        btn_layout = QHBoxLayout()
        self.btn_open = QPushButton("Открыть…")
        self.btn_open.clicked.connect(self._on_open_image)
        self.btn_save = QPushButton("Сохранить…")
        self.btn_save.clicked.connect(self._on_save_image)
        btn_layout.addWidget(self.btn_open)
        btn_layout.addStretch()
        btn_layout.addWidget(self.btn_save)
        left_layout.addLayout(btn_layout)
        main_layout.addWidget(left_panel, 3)

        self.filter_panel = FilterPanel(self.state)
        main_layout.addWidget(self.filter_panel, 2)

        main_layout.setContentsMargins(10, 10, 10, 10)
        main_layout.setSpacing(10)

    def _update_enabled(self) -> None:
        has_image = self.state.has_image()
        self.filter_panel.setEnabled(has_image)
        self.btn_save.setEnabled(self.state.processed_image is not None)

    def _on_image_rendered(self, image) -> None:
        self.image_view.set_pixels(OiioAdapter.to_display_array(image))
        self._update_enabled()

    def _on_open_image(self) -> None:
        """Pick and load an input photo."""
        start_dir = self.settings.get_input_dir() or str(Path.home())
        path, _ = QFileDialog.getOpenFileName(self, "Выберите фото", start_dir, IMAGE_FILTER)
        if not path:
            return

        self.settings.set_input_dir(str(Path(path).parent))
        image = OiioAdapter.load_image(path)
        if image is None:
            QMessageBox.warning(self, "Ошибка", f"Не удалось открыть файл:\n{path}")
            return

        self.state.load_image(image)
        self._update_enabled()

    def _on_save_image(self) -> None:
        """Save the processed image."""
        if self.state.processed_image is None:
            return

        start_dir = self.settings.get_output_dir() or self.settings.get_input_dir() or str(Path.home())
        path, _ = QFileDialog.getSaveFileName(
            self, "Сохранить изображение", str(Path(start_dir) / "instafilter.png"), IMAGE_FILTER
        )
        if not path:
            return

        self.settings.set_output_dir(str(Path(path).parent))
        if not OiioAdapter.save_image(self.state.processed_image, path):
            QMessageBox.warning(self, "Ошибка", f"Не удалось сохранить файл:\n{path}")
