"""
Tests for the FilterState service.
"""

import pytest

from instafilter.services import FilterState, Settings


@pytest.fixture
def state(catalog):
    return FilterState(catalog)


class TestSelection:
    """Test filter selection through the service."""

    def test_select_known_filter(self, state):
        assert state.select_filter("CIGaussianBlur") is True
        assert state.current_descriptor.identifier == "CIGaussianBlur"

    def test_select_unknown_filter(self, state):
        assert state.select_filter("CIMissingFilter") is False
        assert state.current_descriptor is None

    def test_select_without_image_renders_nothing(self, state):
        state.select_filter("CISepiaTone")
        assert state.processed_image is None

    def test_select_attaches_loaded_image(self, state, catalog):
        state.load_image("photo")
        state.select_filter("CIGaussianBlur")
        assert catalog.handle("CIGaussianBlur").image == "photo"
        assert state.processed_image[1] == "CIGaussianBlur"

    def test_eager_defaults_pushed(self, state, catalog):
        state.load_image("photo")
        state.select_filter("CIGaussianBlur")
        assert catalog.handle("CIGaussianBlur").inputs == {"inputRadius": 10.0}

    def test_lazy_defaults_not_pushed(self, catalog):
        state = FilterState(catalog, apply_defaults_on_select=False)
        state.load_image("photo")
        state.select_filter("CIGaussianBlur")

        handle = catalog.handle("CIGaussianBlur")
        assert handle.inputs == {}
        assert state.processed_image is not None

        state.set_parameter("inputRadius", 20.0)
        assert handle.inputs == {"inputRadius": 20.0}

    def test_lazy_reselect_renders_fresh_filter(self, catalog):
        state = FilterState(catalog, apply_defaults_on_select=False)
        state.load_image("photo")
        state.select_filter("CIGaussianBlur")
        state.set_parameter("inputRadius", 40.0)
        state.select_filter("CISepiaTone")
        state.select_filter("CIGaussianBlur")

        assert state.session.values() == {"inputRadius": 10.0}
        assert catalog.handle("CIGaussianBlur").inputs == {}
        assert state.processed_image == ("rendered", "CIGaussianBlur", "photo", {})

    def test_selection_resets_handle(self, state, catalog):
        state.select_filter("CISepiaTone")
        state.select_filter("CISepiaTone")
        assert catalog.handle("CISepiaTone").reset_calls == 2

    def test_eager_reselect_pushes_defaults_only(self, state, catalog):
        state.load_image("photo")
        state.select_filter("CITwirlDistortion")
        state.set_parameter("inputAngle", 1.5)
        state.select_filter("CIGaussianBlur")
        state.select_filter("CITwirlDistortion")

        assert catalog.handle("CITwirlDistortion").inputs["inputAngle"] == 0.0

    def test_mode_from_settings(self, catalog, tmp_path):
        settings = Settings(tmp_path / "settings.ini")
        settings.set_apply_defaults_on_select(False)
        assert FilterState(catalog, settings=settings).apply_defaults_on_select is False

    def test_reset_on_switch(self, state):
        state.select_filter("CITwirlDistortion")
        state.set_parameter("inputRadius", 30.0)
        state.select_filter("CIGaussianBlur")
        assert state.session.current_value("inputRadius") == 10.0


class TestParameters:
    """Test slider events through the service."""

    def test_set_parameter_rerenders(self, state, catalog):
        state.load_image("photo")
        state.select_filter("CISepiaTone")
        state.set_parameter("inputIntensity", 0.25)

        assert catalog.handle("CISepiaTone").inputs["inputIntensity"] == 0.25
        assert state.processed_image[3] == {"inputIntensity": 0.25}

    def test_unknown_parameter(self, state):
        state.select_filter("CISepiaTone")
        assert state.set_parameter("inputRadius", 1.0) is False

    def test_set_parameter_without_filter(self, state):
        assert state.set_parameter("inputIntensity", 1.0) is False


class TestImageAndListeners:
    """Test image loading and render notifications."""

    def test_load_image_without_filter(self, state):
        assert state.load_image("photo") is None
        assert state.has_image()
        assert state.processed_image is None

    def test_load_image_renders_current_filter(self, state):
        state.select_filter("CIColorInvert")
        state.load_image("photo")
        assert state.processed_image == ("rendered", "CIColorInvert", "photo", {})

    def test_listeners_notified(self, state):
        received = []
        state.add_listener(received.append)
        state.select_filter("CISepiaTone")
        state.load_image("photo")
        assert len(received) == 1

    def test_remove_listener(self, state):
        received = []
        state.add_listener(received.append)
        assert state.remove_listener(received.append) is True
        assert state.remove_listener(received.append) is False
        state.select_filter("CISepiaTone")
        state.load_image("photo")
        assert received == []
