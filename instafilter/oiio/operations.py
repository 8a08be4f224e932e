"""
Filter operations backed by OpenImageIO.

Each supported engine identifier maps to a FilterOperation: the input keys
it declares, the values the engine uses until told otherwise, and the
function that renders it. Spatial filters go through ImageBufAlgo; per-pixel
colour transforms work on the float RGB array via numpy.

Input buffers are always 3-channel float (see OiioAdapter.load_image).
"""

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, FrozenSet, Optional

import numpy as np
import OpenImageIO as oiio

from ..core import Point2D
from ..processing.engine import (
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

# Not a slider; engine-only input
INPUT_POWER_KEY = "inputPower"

LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114], dtype=np.float32)

SEPIA_MATRIX = np.array([
    [0.393, 0.769, 0.189],
    [0.349, 0.686, 0.168],
    [0.272, 0.534, 0.131],
], dtype=np.float32)

GENERATOR_SIZE = (256, 256)

Operation = Callable[[Optional[oiio.ImageBuf], Dict[str, Any]], oiio.ImageBuf]


@dataclass(frozen=True)
class FilterOperation:
    """Declared inputs, engine defaults and render function for one identifier."""
    identifier: str
    input_keys: FrozenSet[str]
    defaults: Dict[str, Any] = field(default_factory=dict)
    render: Optional[Operation] = None

    @property
    def takes_image(self) -> bool:
        return INPUT_IMAGE_KEY in self.input_keys


OPERATION_REGISTRY: Dict[str, FilterOperation] = {}


def register_operation(identifier: str, inputs: tuple = (), image: bool = True, **defaults: Any):
    """Decorator registering a render function under an engine identifier."""
    def decorator(func: Operation) -> Operation:
        keys = set(inputs)
        if image:
            keys.add(INPUT_IMAGE_KEY)
        OPERATION_REGISTRY[identifier] = FilterOperation(
            identifier=identifier,
            input_keys=frozenset(keys),
            defaults=dict(defaults),
            render=func,
        )
        return func
    return decorator


# ============================================================================
# HELPERS
# ============================================================================

def to_array(buf: oiio.ImageBuf) -> np.ndarray:
    """Float pixels of a 2D buffer as (height, width, channels)."""
    return buf.get_pixels(oiio.FLOAT)


def from_array(pixels: np.ndarray) -> oiio.ImageBuf:
    """New float ImageBuf holding the given (height, width, channels) array."""
    height, width, nchannels = pixels.shape
    buf = oiio.ImageBuf(oiio.ImageSpec(width, height, nchannels, oiio.FLOAT))
    buf.set_pixels(buf.roi, np.ascontiguousarray(pixels, dtype=np.float32))
    return buf


def checked(result: oiio.ImageBuf, what: str) -> oiio.ImageBuf:
    if result is None or result.has_error:
        detail = result.geterror() if result is not None else ""
        raise RuntimeError(f"{what} failed {detail}".strip())
    return result


def luminance(rgb: np.ndarray) -> np.ndarray:
    return rgb @ LUMA_WEIGHTS


def map_rgb(src: oiio.ImageBuf, func: Callable[[np.ndarray], np.ndarray]) -> oiio.ImageBuf:
    """Apply a per-pixel numpy transform and clip into [0, 1]."""
    rgb = to_array(src)
    return from_array(np.clip(func(rgb), 0.0, 1.0))


def center_of(value: Any) -> Point2D:
    if isinstance(value, Point2D):
        return value
    return Point2D(float(value), float(value))


def hue_matrix(angle: float) -> np.ndarray:
    """RGB rotation about the grey axis."""
    c, s = math.cos(angle), math.sin(angle)
    return np.array([
        [0.299 + 0.701 * c + 0.168 * s, 0.587 - 0.587 * c + 0.330 * s, 0.114 - 0.114 * c - 0.497 * s],
        [0.299 - 0.299 * c - 0.328 * s, 0.587 + 0.413 * c + 0.035 * s, 0.114 - 0.114 * c + 0.292 * s],
        [0.299 - 0.300 * c + 1.250 * s, 0.587 - 0.588 * c - 1.050 * s, 0.114 + 0.886 * c - 0.203 * s],
    ], dtype=np.float32)


# ============================================================================
# COLOR
# ============================================================================

@register_operation("CISepiaTone", (INPUT_INTENSITY_KEY,), inputIntensity=1.0)
def sepia_tone(src, params):
    intensity = float(params[INPUT_INTENSITY_KEY])
    return map_rgb(src, lambda rgb: rgb + (rgb @ SEPIA_MATRIX.T - rgb) * intensity)


@register_operation(
    "CIColorControls",
    (INPUT_BRIGHTNESS_KEY, INPUT_CONTRAST_KEY, INPUT_SATURATION_KEY),
    inputBrightness=0.0, inputContrast=1.0, inputSaturation=1.0,
)
def color_controls(src, params):
    brightness = float(params[INPUT_BRIGHTNESS_KEY])
    contrast = float(params[INPUT_CONTRAST_KEY])
    saturation = float(params[INPUT_SATURATION_KEY])

    def transform(rgb):
        grey = luminance(rgb)[..., np.newaxis]
        rgb = grey + (rgb - grey) * saturation
        rgb = rgb + brightness
        return (rgb - 0.5) * contrast + 0.5

    return map_rgb(src, transform)


@register_operation("CIExposureAdjust", (INPUT_EV_KEY,), inputEV=0.5)
def exposure_adjust(src, params):
    gain = 2.0 ** float(params[INPUT_EV_KEY])
    return map_rgb(src, lambda rgb: rgb * gain)


@register_operation("CIGammaAdjust", (INPUT_POWER_KEY,), inputPower=0.75)
def gamma_adjust(src, params):
    power = float(params[INPUT_POWER_KEY])
    return map_rgb(src, lambda rgb: np.power(np.clip(rgb, 0.0, None), power))


@register_operation("CIHueAdjust", (INPUT_ANGLE_KEY,), inputAngle=0.0)
def hue_adjust(src, params):
    matrix = hue_matrix(float(params[INPUT_ANGLE_KEY]))
    return map_rgb(src, lambda rgb: rgb @ matrix.T)


@register_operation("CIColorInvert")
def color_invert(src, params):
    return checked(oiio.ImageBufAlgo.invert(src), "invert")


@register_operation("CIColorPosterize", (INPUT_LEVELS_KEY,), inputLevels=6.0)
def color_posterize(src, params):
    steps = max(float(params[INPUT_LEVELS_KEY]), 2.0) - 1.0
    return map_rgb(src, lambda rgb: np.round(rgb * steps) / steps)


@register_operation(
    "CIColorMonochrome",
    (INPUT_COLOR_KEY, INPUT_INTENSITY_KEY),
    inputColor=(0.6, 0.45, 0.3), inputIntensity=1.0,
)
def color_monochrome(src, params):
    tint = np.asarray(params[INPUT_COLOR_KEY], dtype=np.float32)
    intensity = float(params[INPUT_INTENSITY_KEY])

    def transform(rgb):
        toned = luminance(rgb)[..., np.newaxis] * tint
        return rgb + (toned - rgb) * intensity

    return map_rgb(src, transform)


@register_operation("CIPhotoEffectMono")
def photo_effect_mono(src, params):
    return map_rgb(src, lambda rgb: np.repeat(luminance(rgb)[..., np.newaxis], 3, axis=2))


@register_operation("CIPhotoEffectNoir")
def photo_effect_noir(src, params):
    def transform(rgb):
        grey = (luminance(rgb) - 0.5) * 1.4 + 0.45
        return np.repeat(grey[..., np.newaxis], 3, axis=2)

    return map_rgb(src, transform)


# ============================================================================
# BLUR & SHARPEN
# ============================================================================

def _convolve(src: oiio.ImageBuf, kernel_name: str, radius: float) -> oiio.ImageBuf:
    if radius <= 0:
        return from_array(to_array(src))
    width = 2.0 * radius + 1.0
    # Separable: horizontal pass, then vertical
    result = src
    for kw, kh in ((width, 1.0), (1.0, width)):
        kernel = checked(oiio.ImageBufAlgo.make_kernel(kernel_name, kw, kh), "make_kernel")
        result = checked(oiio.ImageBufAlgo.convolve(result, kernel), f"{kernel_name} convolve")
    return result


@register_operation("CIGaussianBlur", (INPUT_RADIUS_KEY,), inputRadius=10.0)
def gaussian_blur(src, params):
    return _convolve(src, "gaussian", float(params[INPUT_RADIUS_KEY]))


@register_operation("CIBoxBlur", (INPUT_RADIUS_KEY,), inputRadius=10.0)
def box_blur(src, params):
    return _convolve(src, "box", float(params[INPUT_RADIUS_KEY]))


@register_operation("CIMedianFilter")
def median_filter(src, params):
    return checked(oiio.ImageBufAlgo.median_filter(src, 3, 3), "median_filter")


@register_operation(
    "CIUnsharpMask",
    (INPUT_RADIUS_KEY, INPUT_INTENSITY_KEY),
    inputRadius=2.5, inputIntensity=0.5,
)
def unsharp_mask(src, params):
    width = max(2.0 * float(params[INPUT_RADIUS_KEY]), 1.0)
    contrast = 2.0 * float(params[INPUT_INTENSITY_KEY])
    return checked(
        oiio.ImageBufAlgo.unsharp_mask(src, "gaussian", width, contrast, 0.0),
        "unsharp_mask",
    )


# ============================================================================
# STYLIZE & LIGHT
# ============================================================================

@register_operation(
    "CIPixellate",
    (INPUT_CENTER_KEY, INPUT_SCALE_KEY),
    inputCenter=Point2D(150.0, 150.0), inputScale=8.0,
)
def pixellate(src, params):
    block = max(int(round(float(params[INPUT_SCALE_KEY]))), 1)
    center = center_of(params[INPUT_CENTER_KEY])
    pixels = to_array(src)
    height, width = pixels.shape[:2]

    def sample_positions(size, offset):
        offset = int(offset) % block
        positions = ((np.arange(size) - offset) // block) * block + offset
        return np.clip(positions, 0, size - 1)

    rows = sample_positions(height, center.y)
    cols = sample_positions(width, center.x)
    return from_array(pixels[rows][:, cols])


@register_operation(
    "CIVignette",
    (INPUT_INTENSITY_KEY, INPUT_RADIUS_KEY),
    inputIntensity=0.0, inputRadius=1.0,
)
def vignette(src, params):
    intensity = float(params[INPUT_INTENSITY_KEY])
    radius = float(params[INPUT_RADIUS_KEY])
    pixels = to_array(src)
    height, width = pixels.shape[:2]

    ys, xs = np.mgrid[0:height, 0:width].astype(np.float32)
    cy, cx = (height - 1) / 2.0, (width - 1) / 2.0
    outer = max(math.hypot(cx, cy), 1.0)
    inner = min(radius / 200.0, 1.0) * outer
    dist = np.hypot(xs - cx, ys - cy)
    falloff = np.clip((dist - inner) / max(outer - inner, 1e-6), 0.0, 1.0) ** 2
    factor = 1.0 - intensity * falloff
    return from_array(np.clip(pixels * factor[..., np.newaxis], 0.0, 1.0))


@register_operation("CIEdges", (INPUT_INTENSITY_KEY,), inputIntensity=1.0)
def edges(src, params):
    kernel = checked(oiio.ImageBufAlgo.make_kernel("laplacian", 3, 3), "make_kernel")
    response = checked(oiio.ImageBufAlgo.convolve(src, kernel, normalize=False), "laplacian convolve")
    gain = 10.0 * float(params[INPUT_INTENSITY_KEY])
    return from_array(np.clip(np.abs(to_array(response)) * gain, 0.0, 1.0))


# ============================================================================
# GENERATORS
# ============================================================================

@register_operation("CIRandomGenerator", image=False)
def random_generator(src, params):
    width, height = GENERATOR_SIZE
    rng = np.random.default_rng()
    return from_array(rng.random((height, width, 3), dtype=np.float32))
