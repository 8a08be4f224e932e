"""
Settings management for Instafilter.

Handles persistent storage of user preferences in settings.ini.
"""

from configparser import ConfigParser, Error as ConfigError
from pathlib import Path
from typing import Optional


class Settings:
    """Manages application settings via settings.ini."""

    # Default settings file location (user home)
    SETTINGS_FILE = Path.home() / ".instafilter" / "settings.ini"

    # Section and keys
    SECTION = "preferences"
    KEY_INPUT_DIR = "last_input_dir"
    KEY_OUTPUT_DIR = "last_output_dir"
    KEY_APPLY_DEFAULTS = "apply_defaults_on_select"
    KEY_LOG_LEVEL = "log_level"

    DEFAULT_LOG_LEVEL = "INFO"

    def __init__(self, path: Optional[Path] = None):
        """Initialize settings from file or create defaults."""
        self.path = Path(path) if path is not None else self.SETTINGS_FILE
        self.config = ConfigParser()
        self._load()

    def _load(self) -> None:
        """Load settings from file or create defaults."""
        if self.path.exists():
            self.config.read(self.path, encoding="utf-8")
        if not self.config.has_section(self.SECTION):
            self.config.add_section(self.SECTION)
            self.config.set(self.SECTION, self.KEY_INPUT_DIR, "")
            self.config.set(self.SECTION, self.KEY_OUTPUT_DIR, "")
            self.config.set(self.SECTION, self.KEY_APPLY_DEFAULTS, "true")
            self.config.set(self.SECTION, self.KEY_LOG_LEVEL, self.DEFAULT_LOG_LEVEL)
            self._save()

    def _save(self) -> None:
        """Save settings to file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            self.config.write(f)

    def _set(self, key: str, value: str) -> None:
        if not self.config.has_section(self.SECTION):
            self.config.add_section(self.SECTION)
        self.config.set(self.SECTION, key, value)
        self._save()

    def get_input_dir(self) -> Optional[str]:
        """Get last input directory."""
        val = self.config.get(self.SECTION, self.KEY_INPUT_DIR, fallback="")
        return val if val else None

    def set_input_dir(self, path: str) -> None:
        """Set and save last input directory."""
        self._set(self.KEY_INPUT_DIR, path)

    def get_output_dir(self) -> Optional[str]:
        """Get last output directory."""
        val = self.config.get(self.SECTION, self.KEY_OUTPUT_DIR, fallback="")
        return val if val else None

    def set_output_dir(self, path: str) -> None:
        """Set and save last output directory."""
        self._set(self.KEY_OUTPUT_DIR, path)

    def get_apply_defaults_on_select(self) -> bool:
        """Whether parameter defaults are pushed to a filter as soon as it is selected (default: True)."""
        try:
            return self.config.getboolean(self.SECTION, self.KEY_APPLY_DEFAULTS, fallback=True)
        except (ConfigError, ValueError):
            return True

    def set_apply_defaults_on_select(self, enabled: bool) -> None:
        self._set(self.KEY_APPLY_DEFAULTS, "true" if enabled else "false")

    def get_log_level(self) -> str:
        """Get console log level name (default: 'INFO')."""
        val = self.config.get(self.SECTION, self.KEY_LOG_LEVEL, fallback=self.DEFAULT_LOG_LEVEL)
        return val.strip().upper() or self.DEFAULT_LOG_LEVEL

    def set_log_level(self, level: str) -> None:
        self._set(self.KEY_LOG_LEVEL, level.upper())
