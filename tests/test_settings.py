"""
Tests for settings.ini persistence.
"""

import pytest

from instafilter.services import Settings


@pytest.fixture
def settings_path(tmp_path):
    return tmp_path / "config" / "settings.ini"


class TestSettingsDefaults:
    """Test a freshly created settings file."""

    def test_file_created(self, settings_path):
        Settings(settings_path)
        assert settings_path.exists()

    def test_defaults(self, settings_path):
        settings = Settings(settings_path)
        assert settings.get_input_dir() is None
        assert settings.get_output_dir() is None
        assert settings.get_apply_defaults_on_select() is True
        assert settings.get_log_level() == "INFO"


class TestSettingsPersistence:
    """Test values survive a reload."""

    def test_directories_round_trip(self, settings_path):
        settings = Settings(settings_path)
        settings.set_input_dir("/photos/in")
        settings.set_output_dir("/photos/out")

        reloaded = Settings(settings_path)
        assert reloaded.get_input_dir() == "/photos/in"
        assert reloaded.get_output_dir() == "/photos/out"

    def test_apply_defaults_flag(self, settings_path):
        Settings(settings_path).set_apply_defaults_on_select(False)
        assert Settings(settings_path).get_apply_defaults_on_select() is False

    def test_log_level_uppercased(self, settings_path):
        Settings(settings_path).set_log_level("debug")
        assert Settings(settings_path).get_log_level() == "DEBUG"


class TestSettingsParsing:
    """Test hand-edited settings files."""

    def test_invalid_boolean_falls_back(self, settings_path):
        settings_path.parent.mkdir(parents=True)
        settings_path.write_text("[preferences]\napply_defaults_on_select = maybe\n", encoding="utf-8")
        assert Settings(settings_path).get_apply_defaults_on_select() is True

    @pytest.mark.parametrize("raw,expected", [("no", False), ("off", False), ("1", True), ("yes", True)])
    def test_boolean_spellings(self, settings_path, raw, expected):
        settings_path.parent.mkdir(parents=True)
        settings_path.write_text(f"[preferences]\napply_defaults_on_select = {raw}\n", encoding="utf-8")
        assert Settings(settings_path).get_apply_defaults_on_select() is expected

    def test_missing_keys_use_fallbacks(self, settings_path):
        settings_path.parent.mkdir(parents=True)
        settings_path.write_text("[preferences]\n", encoding="utf-8")
        settings = Settings(settings_path)
        assert settings.get_input_dir() is None
        assert settings.get_log_level() == "INFO"
