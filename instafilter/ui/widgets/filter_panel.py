"""
Filter panel combining the filter browser and the parameter editor.
"""

from PySide6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QSplitter,
)
from PySide6.QtCore import Qt

from ...services import FilterState
from .filter_browser import FilterBrowser
from .parameter_editor import ParameterEditor


class FilterPanel(QWidget):
    """Browser on top, sliders below; both wired to a FilterState."""

    def __init__(self, state: FilterState):
        super().__init__()
        self.state = state
        self._build_ui()

    def _build_ui(self) -> None:
        """Build the filter panel UI."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        splitter = QSplitter(Qt.Orientation.Vertical)

        self.filter_browser = FilterBrowser(self.state.catalog)
        self.filter_browser.filter_selected.connect(self._on_filter_selected)
        splitter.addWidget(self.filter_browser)

        self.param_editor = ParameterEditor()
        self.param_editor.parameter_changed.connect(self._on_parameter_changed)
        splitter.addWidget(self.param_editor)

        splitter.setSizes([350, 200])
        layout.addWidget(splitter, 1)

    def _on_filter_selected(self, identifier: str) -> None:
        """Handle filter selection from browser."""
        if self.state.select_filter(identifier):
            self.param_editor.set_filter(self.state.current_descriptor, self.state.session.values())

    def _on_parameter_changed(self, key: str, value: float) -> None:
        """Handle slider changes."""
        self.state.set_parameter(key, value)
