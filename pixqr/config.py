"""
------------------------------------------------------------------------------
Project:        PixQR
File:           pixqr/config.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Manages configuration using QSettings: merchant defaults for
                generated payment codes and logging preferences. Environment
                variables override stored merchant values.
------------------------------------------------------------------------------
"""

import json
import os
from pathlib import Path
from typing import Any, Optional

from PyQt6.QtCore import QSettings, QStandardPaths


class AppConfig:
    """
    Manages PixQR configuration using QSettings.
    """

    KEY_PIX_KEY: str = "pix_key"
    KEY_MERCHANT_NAME: str = "merchant_name"
    KEY_MERCHANT_CITY: str = "merchant_city"
    KEY_EXPIRATION_MINUTES: str = "expiration_minutes"
    KEY_LOG_LEVEL: str = "log_level"
    KEY_LOG_COMPONENTS: str = "log_components"

    ENV_PIX_KEY: str = "PIX_KEY"
    ENV_MERCHANT_NAME: str = "PIX_MERCHANT_NAME"
    ENV_MERCHANT_CITY: str = "PIX_MERCHANT_CITY"
    ENV_EXPIRATION_MINUTES: str = "PIX_EXPIRATION_MINUTES"

    # Defaults
    DEFAULT_PIX_KEY: str = "test@pagamentos.com"
    DEFAULT_MERCHANT_NAME: str = "Sistema de Pagamentos"
    DEFAULT_MERCHANT_CITY: str = "SAO PAULO"
    DEFAULT_EXPIRATION_MINUTES: int = 30
    DEFAULT_LOG_LEVEL: str = "WARNING"

    APP_ID: str = "pixqr"

    def __init__(self, profile: Optional[str] = None) -> None:
        """
        Initializes the configuration manager.

        Args:
            profile: Optional profile name (e.g. 'dev', 'test').
                    If provided, settings are isolated (e.g. pixqr-dev).
        """
        self.profile = profile
        self.active_id = self.APP_ID
        if profile:
            self.active_id = f"{self.APP_ID}-{profile}"

        self.settings = QSettings(self.active_id, self.active_id)

    def get_data_dir(self) -> Path:
        """
        Returns the path to the application data directory.
        Forces a flat structure: ~/.local/share/pixqr[-profile]/
        """
        base_path = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.GenericDataLocation)
        data_dir = Path(base_path) / self.active_id
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def _get_setting(self, group: str, key: str, default: Any = None) -> Any:
        """
        Retrieves a setting value from a specific group.
        """
        self.settings.beginGroup(group)
        val = self.settings.value(key, default)
        self.settings.endGroup()
        return val

    def _set_setting(self, group: str, key: str, value: Any) -> None:
        """
        Saves a setting value into a specific group.
        """
        if isinstance(value, str):
            value = value.strip()

        self.settings.beginGroup(group)
        self.settings.setValue(key, value)
        self.settings.endGroup()

    def _get_merchant(self, env: str, key: str, default: str) -> str:
        override = os.environ.get(env)
        if override:
            return override
        return str(self._get_setting("Merchant", key, default))

    def get_pix_key(self) -> str:
        """Retrieves the beneficiary key used for generated codes."""
        return self._get_merchant(self.ENV_PIX_KEY, self.KEY_PIX_KEY, self.DEFAULT_PIX_KEY)

    def set_pix_key(self, key: str) -> None:
        self._set_setting("Merchant", self.KEY_PIX_KEY, key)

    def get_merchant_name(self) -> str:
        """Retrieves the merchant name printed into generated codes."""
        return self._get_merchant(self.ENV_MERCHANT_NAME, self.KEY_MERCHANT_NAME, self.DEFAULT_MERCHANT_NAME)

    def set_merchant_name(self, name: str) -> None:
        self._set_setting("Merchant", self.KEY_MERCHANT_NAME, name)

    def get_merchant_city(self) -> str:
        """Retrieves the merchant city printed into generated codes."""
        return self._get_merchant(self.ENV_MERCHANT_CITY, self.KEY_MERCHANT_CITY, self.DEFAULT_MERCHANT_CITY)

    def set_merchant_city(self, city: str) -> None:
        self._set_setting("Merchant", self.KEY_MERCHANT_CITY, city)

    def get_expiration_minutes(self) -> int:
        """
        Retrieves how long a generated code stays valid.
        Falls back to the default on unparsable values.
        """
        raw = os.environ.get(self.ENV_EXPIRATION_MINUTES) or self._get_setting(
            "Merchant", self.KEY_EXPIRATION_MINUTES, self.DEFAULT_EXPIRATION_MINUTES
        )
        try:
            minutes = int(raw)
        except (TypeError, ValueError):
            return self.DEFAULT_EXPIRATION_MINUTES
        return minutes if minutes > 0 else self.DEFAULT_EXPIRATION_MINUTES

    def set_expiration_minutes(self, minutes: int) -> None:
        self._set_setting("Merchant", self.KEY_EXPIRATION_MINUTES, int(minutes))

    def get_log_level(self) -> str:
        """Retrieves the global log level."""
        return str(self._get_setting("Logging", self.KEY_LOG_LEVEL, self.DEFAULT_LOG_LEVEL))

    def set_log_level(self, level: str) -> None:
        """Saves the global log level."""
        self._set_setting("Logging", self.KEY_LOG_LEVEL, level.upper())

    def get_log_components(self) -> dict:
        """Retrieves a dictionary of component-specific log levels."""
        raw = str(self._get_setting("Logging", self.KEY_LOG_COMPONENTS, "{}"))
        try:
            components = json.loads(raw)
        except json.JSONDecodeError:
            return {}
        return components if isinstance(components, dict) else {}

    def set_log_components(self, components: dict) -> None:
        """Saves a dictionary of component-specific log levels."""
        self._set_setting("Logging", self.KEY_LOG_COMPONENTS, json.dumps(components))

    def get_log_file_path(self) -> Path:
        """Returns the absolute path to the log file."""
        return self.get_data_dir() / "pixqr.log"
