"""
Core data types for Instafilter.

All catalog types use frozen @dataclass and Enum so that a built catalog
is an immutable value that can be shared freely between the session,
the applier and the UI.
"""

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Tuple


class FilterCategory(Enum):
    """Catalog grouping shown in the filter browser."""
    COLOR = "Цвет"
    DISTORTION = "Искажения"
    STYLIZE = "Стилизация"
    BLUR = "Размытие"
    LIGHT = "Освещение"
    OTHER = "Другое"

    @property
    def title(self) -> str:
        return self.value


class SkipReason(Enum):
    """Why a source entry did not make it into the catalog."""
    UNSUPPORTED_IDENTIFIER = auto()
    NO_IMAGE_INPUT = auto()


@dataclass(frozen=True)
class Point2D:
    """Vector value for point-typed filter inputs."""
    x: float
    y: float


@dataclass(frozen=True)
class ParameterSpec:
    """A user-facing numeric control derived from a filter input."""
    key: str
    title: str
    default: float
    lower: float
    upper: float
    step: float = 0.01

    def __post_init__(self):
        if self.step <= 0:
            raise ValueError(f"{self.key}: step must be > 0, got {self.step}")
        if not (self.lower <= self.default <= self.upper):
            raise ValueError(
                f"{self.key}: default {self.default} outside [{self.lower}, {self.upper}]"
            )

    @property
    def range(self) -> Tuple[float, float]:
        """Closed (lower, upper) interval."""
        return self.lower, self.upper

    def contains(self, value: float) -> bool:
        return self.lower <= value <= self.upper

    def clamp(self, value: float) -> float:
        return min(max(value, self.lower), self.upper)

    def _default_index(self) -> int:
        below = int(math.floor((self.default - self.lower) / self.step + 1e-9))
        # Extra position for lower when it is off the default-aligned grid
        off_grid = (self.default - below * self.step) - self.lower > 1e-9
        return below + (1 if off_grid else 0)

    def slider_steps(self) -> int:
        """Highest slider position.

        Positions sit on a grid of whole steps through the default, so the
        default is always exactly reachable. Bounds that fall between grid
        points get a position of their own at either end.
        """
        above = int(math.floor((self.upper - self.default) / self.step + 1e-9))
        off_grid = self.upper - (self.default + above * self.step) > 1e-9
        return max(1, self._default_index() + above + (1 if off_grid else 0))

    def value_at(self, index: int) -> float:
        """Value for a slider position in [0, slider_steps()]."""
        index = min(max(index, 0), self.slider_steps())
        return self.clamp(self.default + (index - self._default_index()) * self.step)

    def index_of(self, value: float) -> int:
        """Nearest slider position for a value (clamped into range)."""
        value = self.clamp(value)
        if value <= self.lower:
            return 0
        if value >= self.upper:
            return self.slider_steps()
        index = self._default_index() + int(round((value - self.default) / self.step))
        return min(max(index, 0), self.slider_steps())


@dataclass(frozen=True, eq=False)
class FilterDescriptor:
    """Catalog entry: identifier, display name, category and parameters.

    Equality and hashing use the identifier only; two descriptors for the
    same identifier are the same catalog entry.
    """
    identifier: str
    display_name: str
    category: FilterCategory
    parameters: Tuple[ParameterSpec, ...] = field(default_factory=tuple)

    def __eq__(self, other) -> bool:
        if not isinstance(other, FilterDescriptor):
            return NotImplemented
        return self.identifier == other.identifier

    def __hash__(self) -> int:
        return hash(self.identifier)

    def parameter(self, key: str) -> Optional[ParameterSpec]:
        """Find a parameter spec by key."""
        for spec in self.parameters:
            if spec.key == key:
                return spec
        return None

    def parameter_keys(self) -> list[str]:
        return [spec.key for spec in self.parameters]


@dataclass(frozen=True)
class SkippedFilter:
    """A source entry excluded at catalog build time."""
    identifier: str
    reason: SkipReason

    def __str__(self) -> str:
        return f"[{self.reason.name}] {self.identifier}"
