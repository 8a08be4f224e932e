"""
Slider list for the active filter's parameters.

One QSlider per ParameterSpec. Sliders work in whole step positions;
ParameterSpec converts between positions and values, so a slider can
never produce an out-of-range value.
"""

from typing import Dict, Optional, Tuple
from PySide6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QSlider,
    QScrollArea,
)
from PySide6.QtCore import Qt, Signal

from ...core import FilterDescriptor, ParameterSpec


def format_value(spec: ParameterSpec, value: float) -> str:
    if spec.step >= 1:
        return f"{value:.0f}"
    if spec.step >= 0.1:
        return f"{value:.1f}"
    return f"{value:.2f}"


class ParameterEditor(QWidget):
    """Edit parameter values for the selected filter."""

    # Signal: (parameter key, new value)
    parameter_changed = Signal(str, float)

    def __init__(self):
        super().__init__()
        self.descriptor: Optional[FilterDescriptor] = None
        self.sliders: Dict[str, Tuple[QSlider, QLabel, ParameterSpec]] = {}
        self._build_ui()

    def _build_ui(self) -> None:
        """Build the parameter editor UI."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)

        self.params_widget = QWidget()
        self.params_layout = QVBoxLayout(self.params_widget)
        self.params_layout.setContentsMargins(5, 5, 5, 5)

        scroll.setWidget(self.params_widget)
        layout.addWidget(scroll, 1)

        self.no_filter_label = QLabel("Фильтр не выбран")
        self.no_filter_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.no_filter_label)

    def set_filter(self, descriptor: Optional[FilterDescriptor], values: Optional[Dict[str, float]] = None) -> None:
        """Rebuild sliders for a filter, positioned at the given values (defaults otherwise)."""
        self.descriptor = descriptor
        self.sliders.clear()
        self._clear_layout(self.params_layout)

        if descriptor is None:
            self.no_filter_label.show()
            return

        self.no_filter_label.hide()
        values = values or {}

        if not descriptor.parameters:
            self.params_layout.addWidget(QLabel("(Нет параметров)"))
            self.params_layout.addStretch()
            return

        for spec in descriptor.parameters:
            self._add_slider(spec, values.get(spec.key, spec.default))

        self.params_layout.addStretch()

    def _add_slider(self, spec: ParameterSpec, value: float) -> None:
        slider = QSlider(Qt.Orientation.Horizontal)
        slider.setRange(0, spec.slider_steps())
        slider.setValue(spec.index_of(value))

        value_label = QLabel(format_value(spec, value))
        value_label.setMinimumWidth(48)

        slider.valueChanged.connect(
            lambda index, key=spec.key: self._on_slider_moved(key, index)
        )

        row = QHBoxLayout()
        row.addWidget(QLabel(spec.title), 0)
        row.addWidget(slider, 1)
        row.addWidget(value_label, 0)
        self.params_layout.addLayout(row)

        self.sliders[spec.key] = (slider, value_label, spec)

    def _clear_layout(self, layout) -> None:
        """Recursively clear all widgets and sublayouts from a layout."""
        while layout.count():
            item = layout.takeAt(0)
            if item is None:
                break

            widget = item.widget()
            if widget is not None:
                widget.setParent(None)
                widget.deleteLater()
                continue

            sublayout = item.layout()
            if sublayout is not None:
                self._clear_layout(sublayout)
                sublayout.deleteLater()

    def _on_slider_moved(self, key: str, index: int) -> None:
        """Handle slider movement."""
        slider, value_label, spec = self.sliders[key]
        value = spec.value_at(index)
        value_label.setText(format_value(spec, value))
        self.parameter_changed.emit(key, value)

    def set_value(self, key: str, value: float) -> bool:
        """Move a slider (emits parameter_changed). Returns False for unknown keys."""
        if key not in self.sliders:
            return False
        slider, _, spec = self.sliders[key]
        slider.setValue(spec.index_of(value))
        return True

    def current_values(self) -> Dict[str, float]:
        """Values currently shown by the sliders."""
        return {
            key: spec.value_at(slider.value())
            for key, (slider, _, spec) in self.sliders.items()
        }
