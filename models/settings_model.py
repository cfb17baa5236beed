"""Model for viewer configuration."""

import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

SETTINGS_ENV = "SPECIES_VIEWER_SETTINGS"
ASSETS_ENV = "SPECIES_VIEWER_ASSETS"
DEFAULT_SETTINGS_FILE = Path("settings") / "viewer.json"
DEFAULT_ASSET_ROOT = Path(__file__).resolve().parent.parent


class SettingsModel:
    """Read-only application settings.

    Values come from ``settings/viewer.json`` (or the file named by
    ``SPECIES_VIEWER_SETTINGS``) and fall back to defaults for anything
    missing or invalid. ``SPECIES_VIEWER_ASSETS`` overrides the asset root.
    """

    def __init__(self, settings_file=None, environ=None):
        environ = os.environ if environ is None else environ
        self._asset_root = DEFAULT_ASSET_ROOT
        self._notification_ms = 3000
        self._log_level = "INFO"
        self._window_width = 1100
        self._window_height = 760
        self._grid_columns = 4

        if settings_file is None:
            settings_file = environ.get(SETTINGS_ENV) or DEFAULT_SETTINGS_FILE
        self._settings_file = Path(settings_file)
        self._load_settings()

        assets_override = environ.get(ASSETS_ENV)
        if assets_override:
            self._asset_root = Path(assets_override)

    def _load_settings(self):
        """Load settings from file, keeping defaults on any problem."""
        if not self._settings_file.exists():
            return

        try:
            with open(self._settings_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(
                "Error loading settings from %s: %s. Using defaults.",
                self._settings_file,
                e,
            )
            return

        if not isinstance(data, dict):
            logger.warning(
                "Settings file %s is not a JSON object. Using defaults.",
                self._settings_file,
            )
            return

        if data.get("asset_root"):
            self._asset_root = Path(data["asset_root"])
        self._notification_ms = self._positive_int(
            data, "notification_ms", self._notification_ms
        )
        self._window_width = self._positive_int(data, "window_width", self._window_width)
        self._window_height = self._positive_int(
            data, "window_height", self._window_height
        )
        self._grid_columns = self._positive_int(data, "grid_columns", self._grid_columns)

        level = data.get("log_level")
        if isinstance(level, str) and level.upper() in (
            "DEBUG",
            "INFO",
            "WARNING",
            "ERROR",
            "CRITICAL",
        ):
            self._log_level = level.upper()
        elif level is not None:
            logger.warning("Ignoring invalid log_level %r", level)

        logger.info("Loaded settings from %s", self._settings_file)

    @staticmethod
    def _positive_int(data, key, default):
        value = data.get(key)
        if value is None:
            return default
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            logger.warning("Ignoring invalid %s %r", key, value)
            return default
        return value

    @property
    def settings_file(self):
        return self._settings_file

    @property
    def asset_root(self):
        """Directory holding the ``items`` and ``diagrams`` folders."""
        return self._asset_root

    @property
    def notification_ms(self):
        """How long the over-selection notification stays visible."""
        return self._notification_ms

    @property
    def log_level(self):
        return self._log_level

    @property
    def window_size(self):
        return self._window_width, self._window_height

    @property
    def grid_columns(self):
        return self._grid_columns
