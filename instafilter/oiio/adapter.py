"""
OpenImageIO adapter - the image engine behind the filter catalog.

Provides filter handles for the identifiers in OPERATION_REGISTRY, plus
image loading, saving and conversion to 8-bit display pixels.
"""

import logging
from typing import Any, Dict, Optional, Set

import numpy as np
import OpenImageIO as oiio

from ..processing.engine import INPUT_IMAGE_KEY
from .operations import FilterOperation, OPERATION_REGISTRY

logger = logging.getLogger(__name__)


class OiioFilter:
    """Live filter instance: current input values plus the input image."""

    def __init__(self, operation: FilterOperation):
        self.operation = operation
        self.values: Dict[str, Any] = dict(operation.defaults)
        self.input_image: Optional[oiio.ImageBuf] = None

    @property
    def identifier(self) -> str:
        return self.operation.identifier

    def supported_input_keys(self) -> Set[str]:
        return set(self.operation.input_keys)

    def set_input(self, key: str, value: Any) -> None:
        if key == INPUT_IMAGE_KEY:
            self.set_input_image(value)
            return
        if key not in self.operation.input_keys:
            raise KeyError(f"{self.identifier} has no input {key!r}")
        self.values[key] = value

    def set_input_image(self, image: Optional[oiio.ImageBuf]) -> None:
        self.input_image = image

    def reset(self) -> None:
        """Back to the state of a newly instantiated filter."""
        self.values = dict(self.operation.defaults)
        self.input_image = None

    def render_output(self) -> Optional[oiio.ImageBuf]:
        """Render with the current inputs. None if the image is missing or rendering failed."""
        if self.operation.takes_image and self.input_image is None:
            return None
        try:
            return self.operation.render(self.input_image, dict(self.values))
        except Exception as e:
            logger.error(f"Failed to render {self.identifier}: {e}")
            return None


class OiioFilterEngine:
    """Instantiates OiioFilter handles by engine identifier."""

    def __init__(self, registry: Optional[Dict[str, FilterOperation]] = None):
        self.registry = registry if registry is not None else OPERATION_REGISTRY

    def instantiate_filter(self, identifier: str) -> Optional[OiioFilter]:
        operation = self.registry.get(identifier)
        if operation is None:
            return None
        return OiioFilter(operation)

    def supported_identifiers(self) -> list[str]:
        return sorted(self.registry)


class OiioAdapter:
    """Thin wrapper for OIIO file and pixel access."""

    @staticmethod
    def load_image(filepath: str) -> Optional[oiio.ImageBuf]:
        """
        Read an image as a 3-channel float buffer.
        Returns None if the file cannot be read.
        """
        buf = oiio.ImageBuf(filepath)
        if buf.has_error or not buf.read(0, 0, True, oiio.FLOAT):
            logger.error(f"Error reading {filepath}: {buf.geterror()}")
            return None

        nchannels = buf.spec().nchannels
        if nchannels >= 3:
            order = (0, 1, 2)
        else:
            # Grey (+alpha) -> RGB
            order = (0, 0, 0)
        if nchannels != 3:
            buf = oiio.ImageBufAlgo.channels(buf, order)
            if buf.has_error:
                logger.error(f"Error converting channels of {filepath}: {buf.geterror()}")
                return None

        logger.info(f"Loaded {filepath} ({buf.spec().width}x{buf.spec().height}, {nchannels} channels)")
        return buf

    @staticmethod
    def save_image(buf: oiio.ImageBuf, filepath: str) -> bool:
        """Write a buffer to disk. Format follows the file extension."""
        if not buf.write(filepath):
            logger.error(f"Error writing {filepath}: {buf.geterror()}")
            return False
        logger.info(f"Saved {filepath}")
        return True

    @staticmethod
    def to_display_array(buf: oiio.ImageBuf) -> np.ndarray:
        """8-bit (height, width, channels) pixels covering the buffer's data window."""
        pixels = buf.get_pixels(oiio.FLOAT, buf.roi)
        return np.ascontiguousarray(np.round(np.clip(pixels, 0.0, 1.0) * 255.0).astype(np.uint8))

    @staticmethod
    def get_oiio_version() -> str:
        """Return OIIO version string."""
        return str(getattr(oiio, "__version__", "unknown"))
