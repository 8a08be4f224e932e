"""
Interfaces to the external image-processing engine.

The registry never touches pixels. It talks to an engine through these
protocols; ``instafilter.oiio`` provides the OpenImageIO implementation
and the tests provide an in-memory fake.
"""

from typing import Any, Optional, Protocol, Set, Union

from ..core import Point2D

# Engine input keys
INPUT_IMAGE_KEY = "inputImage"
INPUT_INTENSITY_KEY = "inputIntensity"
INPUT_RADIUS_KEY = "inputRadius"
INPUT_SCALE_KEY = "inputScale"
INPUT_CENTER_KEY = "inputCenter"
INPUT_ANGLE_KEY = "inputAngle"
INPUT_BRIGHTNESS_KEY = "inputBrightness"
INPUT_CONTRAST_KEY = "inputContrast"
INPUT_SATURATION_KEY = "inputSaturation"
INPUT_LEVELS_KEY = "inputLevels"
INPUT_EV_KEY = "inputEV"
INPUT_COLOR_KEY = "inputColor"

InputValue = Union[float, Point2D]


class FilterHandle(Protocol):
    """A live filter instance owned by the engine."""

    def supported_input_keys(self) -> Set[str]:
        ...

    def set_input(self, key: str, value: InputValue) -> None:
        ...

    def set_input_image(self, image: Any) -> None:
        ...

    def render_output(self) -> Optional[Any]:
        """Rendered raster, or None when inputs are incomplete."""
        ...

    def reset(self) -> None:
        """Drop every input back to the engine's own defaults."""
        ...


class FilterEngine(Protocol):
    """Factory for filter handles."""

    def instantiate_filter(self, identifier: str) -> Optional[FilterHandle]:
        """Return a new handle, or None if the identifier is unknown."""
        ...


class RenderTarget(Protocol):
    """Receives rendered images for display."""

    def publish(self, image: Any) -> None:
        ...
