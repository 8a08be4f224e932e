"""UI widgets module."""
from .filter_browser import FilterBrowser
from .parameter_editor import ParameterEditor
from .filter_panel import FilterPanel
from .image_view import ImageView

__all__ = [
    "FilterBrowser",
    "ParameterEditor",
    "FilterPanel",
    "ImageView",
]
