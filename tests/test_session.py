"""
Tests for the active filter session.
"""

import pytest

from instafilter.processing import FilterSession


@pytest.fixture
def session():
    return FilterSession()


class TestSelectFilter:
    """Test selecting filters."""

    def test_empty_session(self, session):
        assert session.descriptor is None
        assert session.filter_id is None
        assert session.values() == {}

    def test_populates_defaults(self, session, catalog):
        session.select_filter(catalog.get("CIColorControls"))
        assert session.filter_id == "CIColorControls"
        assert session.values() == {
            "inputBrightness": 0.0,
            "inputContrast": 1.0,
            "inputSaturation": 1.0,
        }

    def test_returns_session(self, session, catalog):
        assert session.select_filter(catalog.get("CISepiaTone")) is session

    def test_reselect_is_idempotent(self, session, catalog):
        descriptor = catalog.get("CITwirlDistortion")
        first = session.select_filter(descriptor).values()
        session.set_parameter("inputAngle", 1.0)
        second = session.select_filter(descriptor).values()
        assert first == second

    def test_switch_resets_values(self, session, catalog):
        session.select_filter(catalog.get("CITwirlDistortion"))
        session.set_parameter("inputRadius", 30.0)

        session.select_filter(catalog.get("CIGaussianBlur"))
        assert session.current_value("inputRadius") == 10.0

    def test_switch_drops_unsupported_keys(self, session, catalog):
        session.select_filter(catalog.get("CIGaussianBlur"))
        session.set_parameter("inputRadius", 30.0)

        session.select_filter(catalog.get("CISepiaTone"))
        assert "inputRadius" not in session.values()
        assert session.current_value("inputRadius") == 0.0

    def test_filter_without_parameters(self, session, catalog):
        session.select_filter(catalog.get("CIColorInvert"))
        assert len(session) == 0


class TestSetParameter:
    """Test storing slider values."""

    def test_stores_value(self, session, catalog):
        session.select_filter(catalog.get("CISepiaTone"))
        assert session.set_parameter("inputIntensity", 0.8) is True
        assert session.current_value("inputIntensity") == 0.8

    def test_no_clamping(self, session, catalog):
        session.select_filter(catalog.get("CISepiaTone"))
        session.set_parameter("inputIntensity", 5.0)
        assert session.current_value("inputIntensity") == 5.0

    def test_unknown_key_rejected(self, session, catalog):
        session.select_filter(catalog.get("CISepiaTone"))
        assert session.set_parameter("inputRadius", 3.0) is False
        assert "inputRadius" not in session.values()

    def test_without_selection(self, session):
        assert session.set_parameter("inputIntensity", 0.1) is False

    def test_values_is_a_copy(self, session, catalog):
        session.select_filter(catalog.get("CISepiaTone"))
        values = session.values()
        values["inputIntensity"] = 99.0
        assert session.current_value("inputIntensity") == 0.5


class TestCurrentValue:
    """Test reading values with default fallback."""

    def test_falls_back_to_default(self, session, catalog):
        session.select_filter(catalog.get("CIGaussianBlur"))
        session._values.clear()
        assert session.current_value("inputRadius") == 10.0

    def test_unknown_key(self, session, catalog):
        session.select_filter(catalog.get("CIGaussianBlur"))
        assert session.current_value("inputNothing") == 0.0
