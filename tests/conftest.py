import logging

import pytest
from PyQt6.QtCore import QSettings

from pixqr.config import AppConfig


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keeps QSettings, data dirs and PIX_* variables away from the real user environment."""
    settings_dir = tmp_path / "config"
    settings_dir.mkdir()
    for fmt in (QSettings.Format.NativeFormat, QSettings.Format.IniFormat):
        QSettings.setPath(fmt, QSettings.Scope.UserScope, str(settings_dir))

    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(settings_dir))
    for env in ("PIX_KEY", "PIX_MERCHANT_NAME", "PIX_MERCHANT_CITY", "PIX_EXPIRATION_MINUTES"):
        monkeypatch.delenv(env, raising=False)
    yield


@pytest.fixture(autouse=True)
def reset_logging():
    """Drops handlers added by setup_logging() so tests do not leak into each other."""
    yield
    root = logging.getLogger("pixqr")
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.NOTSET)
    for name in list(logging.root.manager.loggerDict):
        if name.startswith("pixqr."):
            logging.getLogger(name).setLevel(logging.NOTSET)


@pytest.fixture
def config():
    app_config = AppConfig(profile="test")
    app_config.settings.clear()
    return app_config
