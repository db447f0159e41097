"""
Showroom preferences stored in QSettings.

Holds the user's default layout pattern and lighting preset, the storage
directories for designs, uploads and user tiles, and the number of texture
loader threads. Missing or invalid stored values fall back to the defaults.

Usage:
    from tile_showroom.generators.textures.texture_settings import SHOWROOM_SETTINGS

    pattern = SHOWROOM_SETTINGS.get_default_pattern()
    SHOWROOM_SETTINGS.set_default_pattern("herringbone")

    designs_dir = SHOWROOM_SETTINGS.get_designs_dir()

    SHOWROOM_SETTINGS.reset_to_defaults()
"""

import logging
from pathlib import Path

from PyQt5.QtCore import QSettings

from .pattern_mapper import Pattern

logger = logging.getLogger(__name__)

SETTINGS_ORGANIZATION = "TileShowroom"
SETTINGS_APPLICATION = "Showroom"

DEFAULT_PATTERN = Pattern.STRAIGHT
DEFAULT_LIGHTING = "daylight"
DEFAULT_LOADER_WORKERS = 2

# Keys managed by this module; reset_to_defaults() clears exactly these.
SETTINGS_KEYS = [
    "defaults/pattern",
    "defaults/lighting",
    "storage/designs_dir",
    "storage/uploads_dir",
    "storage/tiles_dir",
    "textures/loader_workers",
]


def get_config_root() -> Path:
    """Base directory for showroom data: ~/.config/tile_showroom/"""
    return Path.home() / ".config" / "tile_showroom"


class ShowroomSettings:
    """Persistent showroom preferences stored in QSettings.

    Note: QSettings is accessed lazily to avoid issues with object lifetime
    in test environments where QApplication may not persist.
    """

    def __init__(self, organization: str = SETTINGS_ORGANIZATION,
                 application: str = SETTINGS_APPLICATION):
        self._organization = organization
        self._application = application
        self._settings = None

    def _get_settings(self) -> QSettings:
        """Get or create the QSettings instance.

        Creates a fresh QSettings if the underlying C++ object was deleted.
        """
        try:
            if self._settings is not None:
                # Will throw if the wrapped object was deleted
                self._settings.organizationName()
                return self._settings
        except RuntimeError:
            pass

        self._settings = QSettings(self._organization, self._application)
        return self._settings

    def _get_value(self, key: str, default: str = "") -> str:
        try:
            value = self._get_settings().value(key, default)
        except RuntimeError:
            return default
        return value if value not in (None, "") else default

    def _set_value(self, key: str, value) -> None:
        try:
            self._get_settings().setValue(key, value)
        except RuntimeError:
            logger.debug(f"QSettings unavailable, '{key}' not stored")

    # -- Defaults ---------------------------------------------------------

    def get_default_pattern(self) -> Pattern:
        """Layout pattern used when a tile is applied without one."""
        raw = self._get_value("defaults/pattern", DEFAULT_PATTERN.value)
        try:
            return Pattern.parse(raw)
        except ValueError:
            logger.warning(f"Ignoring invalid stored pattern '{raw}'")
            return DEFAULT_PATTERN

    def set_default_pattern(self, pattern) -> None:
        self._set_value("defaults/pattern", Pattern.parse(pattern).value)

    def get_default_lighting(self) -> str:
        """Lighting preset name selected for new sessions."""
        raw = str(self._get_value("defaults/lighting", DEFAULT_LIGHTING)).lower()
        from tile_showroom.generators.templates import LIGHTING_CATALOG
        if LIGHTING_CATALOG.get_preset(raw) is None:
            logger.warning(f"Ignoring invalid stored lighting preset '{raw}'")
            return DEFAULT_LIGHTING
        return raw

    def set_default_lighting(self, preset: str) -> None:
        """
        Raises:
            ValueError: If no lighting preset has this name
        """
        from tile_showroom.generators.templates import LIGHTING_CATALOG
        self._set_value("defaults/lighting", LIGHTING_CATALOG.require_preset(preset).name)

    # -- Storage ----------------------------------------------------------

    def _get_dir(self, key: str, default: Path) -> Path:
        return Path(self._get_value(key, str(default))).expanduser()

    def get_designs_dir(self) -> Path:
        return self._get_dir("storage/designs_dir", get_config_root() / "designs")

    def set_designs_dir(self, path) -> None:
        self._set_value("storage/designs_dir", str(path))

    def get_uploads_dir(self) -> Path:
        return self._get_dir("storage/uploads_dir", get_config_root() / "uploads")

    def set_uploads_dir(self, path) -> None:
        self._set_value("storage/uploads_dir", str(path))

    def get_tiles_dir(self) -> Path:
        return self._get_dir("storage/tiles_dir", get_config_root() / "tiles")

    def set_tiles_dir(self, path) -> None:
        self._set_value("storage/tiles_dir", str(path))

    # -- Texture loading --------------------------------------------------

    def get_loader_workers(self) -> int:
        """Number of background threads decoding texture images."""
        raw = self._get_value("textures/loader_workers", str(DEFAULT_LOADER_WORKERS))
        try:
            workers = int(raw)
        except (TypeError, ValueError):
            return DEFAULT_LOADER_WORKERS
        return workers if workers > 0 else DEFAULT_LOADER_WORKERS

    def set_loader_workers(self, workers: int) -> None:
        self._set_value("textures/loader_workers", int(workers))

    def reset_to_defaults(self) -> None:
        """Clear all stored preferences, reverting to defaults."""
        try:
            settings = self._get_settings()
            for key in SETTINGS_KEYS:
                settings.remove(key)
        except RuntimeError:
            # QSettings not available (no QApplication), ignore
            pass


# Global singleton instance
SHOWROOM_SETTINGS = ShowroomSettings()


__all__ = [
    'ShowroomSettings',
    'SHOWROOM_SETTINGS',
    'DEFAULT_PATTERN',
    'DEFAULT_LIGHTING',
    'DEFAULT_LOADER_WORKERS',
    'get_config_root',
]
