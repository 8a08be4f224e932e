"""
Active filter session.

Tracks which catalog filter is selected and the current value of each of
its parameters. Selecting a filter always starts over from that filter's
defaults.
"""

import logging
from typing import Dict, Optional

from ..core import FilterDescriptor

logger = logging.getLogger(__name__)


class FilterSession:
    """Selected filter plus current parameter values."""

    def __init__(self):
        self._descriptor: Optional[FilterDescriptor] = None
        self._values: Dict[str, float] = {}

    @property
    def descriptor(self) -> Optional[FilterDescriptor]:
        return self._descriptor

    @property
    def filter_id(self) -> Optional[str]:
        return self._descriptor.identifier if self._descriptor else None

    def select_filter(self, descriptor: FilterDescriptor) -> "FilterSession":
        """Switch to a filter and reset every value to its default."""
        self._descriptor = descriptor
        self._values.clear()
        for spec in descriptor.parameters:
            self._values[spec.key] = spec.default
        logger.debug(f"Selected {descriptor.identifier} with {len(self._values)} parameters")
        return self

    def set_parameter(self, key: str, value: float) -> bool:
        """Store a value for a parameter of the selected filter. Returns success.

        Values are stored as given; range enforcement belongs to the control
        that produced them.
        """
        if self._descriptor is None or self._descriptor.parameter(key) is None:
            logger.warning(f"Ignoring value for unknown parameter {key!r} (filter: {self.filter_id})")
            return False
        self._values[key] = float(value)
        return True

    def current_value(self, key: str) -> float:
        """Stored value, falling back to the parameter default."""
        if key in self._values:
            return self._values[key]
        if self._descriptor is not None:
            spec = self._descriptor.parameter(key)
            if spec is not None:
                return spec.default
        return 0.0

    def values(self) -> Dict[str, float]:
        """Copy of the current key -> value mapping."""
        return dict(self._values)

    def __len__(self) -> int:
        return len(self._values)
