"""
------------------------------------------------------------------------------
Project:        SuratLog
File:           suratlog/config.py
Version:        1.0.0
Producer:       PPKK Registry Team
Description:    Manages application configuration using QSettings. Standardizes
                paths for configuration, exports and logs across platforms
                (XDG standards on Linux).
------------------------------------------------------------------------------
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from PyQt6.QtCore import QSettings, QStandardPaths

from suratlog.logger import get_logger

logger = get_logger("config")


class AppConfig:
    """
    Manages application configuration using QSettings.
    Singleton-like usage via a shared active profile.
    """

    KEY_EXPORT_DIR: str = "export_dir"
    KEY_EXPORT_PREFIX: str = "export_prefix"
    KEY_LOG_LEVEL: str = "log_level"
    KEY_LOG_COMPONENTS: str = "log_components"

    DEFAULT_EXPORT_PREFIX: str = "Laporan_Surat_PPKK"
    DEFAULT_LOG_LEVEL: str = "WARNING"

    APP_ID: str = "suratlog"
    _active_profile: Optional[str] = None

    def __init__(self, profile: Optional[str] = None) -> None:
        """
        Initializes the configuration manager.

        Args:
            profile: Optional profile name (e.g. 'dev', 'test').
                    If provided, all paths and settings are isolated (e.g. suratlog-dev).
        """
        if profile is None:
            profile = AppConfig._active_profile
        else:
            AppConfig._active_profile = profile

        self.profile = profile
        self.active_id = self.APP_ID
        if profile:
            self.active_id = f"{self.APP_ID}-{profile}"

        self.settings = QSettings(self.active_id, self.active_id)

    def get_data_dir(self) -> Path:
        """
        Returns the path to the application data directory.
        Forces a flat structure: ~/.local/share/suratlog[-profile]/
        """
        base_path = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.GenericDataLocation)
        data_dir = Path(base_path) / self.active_id
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def _get_setting(self, group: str, key: str, default: Any = None) -> Any:
        """
        Helper to retrieve a setting value from a specific group.

        Args:
            group: The configuration group name.
            key: The setting key.
            default: The default value if not found.

        Returns:
            The retrieved value or default.
        """
        if group:
            self.settings.beginGroup(group)
        val = self.settings.value(key, default)
        if group:
            self.settings.endGroup()
        return val

    def _set_setting(self, group: str, key: str, value: Any) -> None:
        """
        Helper to save a setting value into a specific group.

        Args:
            group: The configuration group name.
            key: The setting key.
            value: The value to save.
        """
        if isinstance(value, str):
            value = value.strip()

        if group:
            self.settings.beginGroup(group)
        self.settings.setValue(key, value)
        if group:
            self.settings.endGroup()

    def get_export_dir(self) -> Path:
        """
        Retrieves the directory where CSV reports are delivered.

        Returns:
            The configured directory, or '<data dir>/exports' if unset.
        """
        val = str(self._get_setting("Export", self.KEY_EXPORT_DIR, "") or "")
        if val:
            return Path(val)
        return self.get_data_dir() / "exports"

    def set_export_dir(self, path: str) -> None:
        """
        Saves the directory where CSV reports are delivered.

        Args:
            path: The directory path string.
        """
        self._set_setting("Export", self.KEY_EXPORT_DIR, str(path))

    def get_export_prefix(self) -> str:
        """Retrieves the report filename prefix."""
        val = str(self._get_setting("Export", self.KEY_EXPORT_PREFIX, "") or "")
        return val if val else self.DEFAULT_EXPORT_PREFIX

    def set_export_prefix(self, prefix: str) -> None:
        """Saves the report filename prefix."""
        self._set_setting("Export", self.KEY_EXPORT_PREFIX, prefix)

    def get_log_level(self) -> str:
        """Retrieves the global log level."""
        return str(self._get_setting("Logging", self.KEY_LOG_LEVEL, self.DEFAULT_LOG_LEVEL))

    def set_log_level(self, level: str) -> None:
        """Saves the global log level."""
        self._set_setting("Logging", self.KEY_LOG_LEVEL, level.upper())

    def get_log_components(self) -> Dict[str, str]:
        """Retrieves a dictionary of component-specific log levels."""
        raw = str(self._get_setting("Logging", self.KEY_LOG_COMPONENTS, "{}"))
        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning(f"Ignoring malformed log component settings: {raw!r}")
            return {}
        return parsed if isinstance(parsed, dict) else {}

    def set_log_components(self, components: Dict[str, str]) -> None:
        """Saves a dictionary of component-specific log levels."""
        self._set_setting("Logging", self.KEY_LOG_COMPONENTS, json.dumps(components))

    def get_log_file_path(self) -> Path:
        """Returns the absolute path to the log file."""
        return self.get_data_dir() / "app.log"
