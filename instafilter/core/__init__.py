"""Core data types and name translation."""
from .types import (
    FilterCategory,
    SkipReason,
    Point2D,
    ParameterSpec,
    FilterDescriptor,
    SkippedFilter,
)
from .translations import translate, split_camel_case, format_filter_name

__all__ = [
    "FilterCategory",
    "SkipReason",
    "Point2D",
    "ParameterSpec",
    "FilterDescriptor",
    "SkippedFilter",
    "translate",
    "split_camel_case",
    "format_filter_name",
]
