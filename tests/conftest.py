"""
Pytest fixtures for Instafilter tests
"""

import os

import pytest

from instafilter.core import FilterCategory
from instafilter.processing import FilterCatalog

# Qt widget tests run headless
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeHandle:
    """In-memory FilterHandle that records what it was given."""

    def __init__(self, identifier, keys, renders=True):
        self.identifier = identifier
        self.keys = set(keys)
        self.renders = renders
        self.inputs = {}
        self.image = None
        self.render_calls = 0
        self.reset_calls = 0

    def supported_input_keys(self):
        return set(self.keys)

    def set_input(self, key, value):
        if key not in self.keys:
            raise KeyError(key)
        self.inputs[key] = value

    def set_input_image(self, image):
        self.image = image

    def reset(self):
        self.inputs.clear()
        self.image = None
        self.reset_calls += 1

    def render_output(self):
        self.render_calls += 1
        if not self.renders or self.image is None:
            return None
        return ("rendered", self.identifier, self.image, dict(self.inputs))


class FakeEngine:
    """FilterEngine over a fixed identifier -> input keys table."""

    def __init__(self, filters):
        self.filters = dict(filters)
        self.handles = {}

    def instantiate_filter(self, identifier):
        if identifier not in self.filters:
            return None
        handle = FakeHandle(identifier, self.filters[identifier])
        self.handles[identifier] = handle
        return handle


class RecordingTarget:
    """RenderTarget that keeps everything published to it."""

    def __init__(self):
        self.images = []

    def publish(self, image):
        self.images.append(image)


FAKE_FILTERS = {
    "CISepiaTone": {"inputImage", "inputIntensity"},
    "CIGaussianBlur": {"inputImage", "inputRadius"},
    "CITwirlDistortion": {"inputImage", "inputCenter", "inputRadius", "inputAngle"},
    "CIColorControls": {"inputImage", "inputBrightness", "inputContrast", "inputSaturation"},
    "CIColorMonochrome": {"inputImage", "inputColor", "inputIntensity"},
    "CIColorInvert": {"inputImage"},
    "CIRandomGenerator": set(),
}

FAKE_SOURCES = (
    ("CISepiaTone", FilterCategory.COLOR),
    ("CIGaussianBlur", FilterCategory.BLUR),
    ("CITwirlDistortion", FilterCategory.DISTORTION),
    ("CIColorControls", FilterCategory.COLOR),
    ("CIColorMonochrome", FilterCategory.COLOR),
    ("CIColorInvert", FilterCategory.COLOR),
    ("CIRandomGenerator", FilterCategory.OTHER),
    ("CIMissingFilter", FilterCategory.OTHER),
)


@pytest.fixture
def fake_engine():
    return FakeEngine(FAKE_FILTERS)


@pytest.fixture
def catalog(fake_engine):
    return FilterCatalog.build(fake_engine, sources=FAKE_SOURCES)


@pytest.fixture
def target():
    return RecordingTarget()
