"""
Parameter kinds and schema resolution.

Each ParameterKind describes one user-adjustable input: which engine key
reveals it, which key the session stores it under, and its title,
default, range and step. Resolution walks PARAMETER_KINDS in order and
keeps every kind whose probe key the filter supports.
"""

import math
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from ..core import ParameterSpec
from .engine import (
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

# Session-only key; the engine's color input is not a scalar.
COLOR_INTENSITY_KEY = "colorIntensity"

BLUR_RADIUS_MAX = 50.0
DISTORTION_RADIUS_MAX = 200.0


def radius_upper_bound(filter_identifier: str) -> float:
    """Blur filters need finer radius control than distortions."""
    if "Blur" in filter_identifier:
        return BLUR_RADIUS_MAX
    return DISTORTION_RADIUS_MAX


@dataclass(frozen=True)
class ParameterKind:
    """One recognized parameter kind."""
    name: str
    probe_key: str
    title: str
    default: float
    lower: float
    upper: float
    step: float = 0.01
    exposed_key: Optional[str] = None
    upper_rule: Optional[Callable[[str], float]] = None

    @property
    def key(self) -> str:
        """Key under which the session stores the value."""
        return self.exposed_key or self.probe_key

    def build(self, filter_identifier: str) -> ParameterSpec:
        upper = self.upper_rule(filter_identifier) if self.upper_rule else self.upper
        return ParameterSpec(
            key=self.key,
            title=self.title,
            default=self.default,
            lower=self.lower,
            upper=upper,
            step=self.step,
        )


# Checked in this order; the order is the slider display order.
PARAMETER_KINDS = (
    ParameterKind("intensity", INPUT_INTENSITY_KEY, "Интенсивность", 0.5, 0.0, 1.0),
    ParameterKind(
        "radius", INPUT_RADIUS_KEY, "Радиус", 10.0, 0.0, DISTORTION_RADIUS_MAX,
        step=0.5, upper_rule=radius_upper_bound,
    ),
    ParameterKind("scale", INPUT_SCALE_KEY, "Масштаб", 5.0, 0.0, 10.0, step=0.1),
    ParameterKind("center", INPUT_CENTER_KEY, "Центр", 150.0, 0.0, 1000.0, step=1.0),
    ParameterKind("angle", INPUT_ANGLE_KEY, "Угол", 0.0, -math.pi, math.pi),
    ParameterKind("brightness", INPUT_BRIGHTNESS_KEY, "Яркость", 0.0, -1.0, 1.0),
    ParameterKind("contrast", INPUT_CONTRAST_KEY, "Контраст", 1.0, 0.25, 4.0),
    ParameterKind("saturation", INPUT_SATURATION_KEY, "Насыщенность", 1.0, 0.0, 2.0),
    ParameterKind("levels", INPUT_LEVELS_KEY, "Уровни", 6.0, 2.0, 30.0, step=1.0),
    ParameterKind("exposure", INPUT_EV_KEY, "Экспозиция", 0.0, -10.0, 10.0, step=0.1),
    ParameterKind(
        "color_intensity", INPUT_COLOR_KEY, "Интенсивность цвета", 1.0, 0.0, 1.0,
        exposed_key=COLOR_INTENSITY_KEY,
    ),
)


def resolve_parameters(filter_identifier: str, supported_keys: Iterable[str]) -> List[ParameterSpec]:
    """Ordered parameter specs for a filter's supported input keys."""
    keys = set(supported_keys)
    return [
        kind.build(filter_identifier)
        for kind in PARAMETER_KINDS
        if kind.probe_key in keys
    ]
