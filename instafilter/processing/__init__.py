"""
Processing system for Instafilter.

Builds the filter catalog from the image engine, resolves each filter's
adjustable parameters, tracks the active session and pushes its values
into the engine for rendering.
"""

from .engine import (
    FilterEngine,
    FilterHandle,
    RenderTarget,
    INPUT_IMAGE_KEY,
    INPUT_INTENSITY_KEY,
    INPUT_RADIUS_KEY,
    INPUT_SCALE_KEY,
    INPUT_CENTER_KEY,
    INPUT_ANGLE_KEY,
    INPUT_BRIGHTNESS_KEY,
    INPUT_CONTRAST_KEY,
    INPUT_SATURATION_KEY,
    INPUT_LEVELS_KEY,
    INPUT_EV_KEY,
    INPUT_COLOR_KEY,
)
from .parameters import (
    ParameterKind,
    PARAMETER_KINDS,
    COLOR_INTENSITY_KEY,
    resolve_parameters,
    radius_upper_bound,
)
from .catalog import FilterCatalog, CatalogEntry, CATALOG_SOURCES, display_sort_key
from .session import FilterSession
from .applier import ProcessingApplier

__all__ = [
    "FilterEngine",
    "FilterHandle",
    "RenderTarget",
    "ParameterKind",
    "PARAMETER_KINDS",
    "COLOR_INTENSITY_KEY",
    "resolve_parameters",
    "radius_upper_bound",
    "FilterCatalog",
    "CatalogEntry",
    "CATALOG_SOURCES",
    "display_sort_key",
    "FilterSession",
    "ProcessingApplier",
    # Engine keys
    "INPUT_IMAGE_KEY",
    "INPUT_INTENSITY_KEY",
    "INPUT_RADIUS_KEY",
    "INPUT_SCALE_KEY",
    "INPUT_CENTER_KEY",
    "INPUT_ANGLE_KEY",
    "INPUT_BRIGHTNESS_KEY",
    "INPUT_CONTRAST_KEY",
    "INPUT_SATURATION_KEY",
    "INPUT_LEVELS_KEY",
    "INPUT_EV_KEY",
    "INPUT_COLOR_KEY",
]
