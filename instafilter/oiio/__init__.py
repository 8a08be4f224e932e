"""OpenImageIO engine and file access."""
from .adapter import OiioAdapter, OiioFilter, OiioFilterEngine
from .operations import FilterOperation, OPERATION_REGISTRY

__all__ = [
    "OiioAdapter",
    "OiioFilter",
    "OiioFilterEngine",
    "FilterOperation",
    "OPERATION_REGISTRY",
]
