"""
------------------------------------------------------------------------------
Project:        PixQR
File:           pixqr/logger.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Centralized logging for PixQR. Console/file output and
                component-specific levels under the 'pixqr' namespace.
------------------------------------------------------------------------------
"""

import logging
import sys
from pathlib import Path
from typing import Dict, Optional

# Root logger for the entire package
APP_LOGGER_NAME = "pixqr"

DEFAULT_FORMAT = "%(asctime)s [%(levelname).4s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[str] = None,
    component_levels: Optional[Dict[str, str]] = None
) -> None:
    """
    Sets up the package logging configuration.

    Args:
        level: The default logging level (DEBUG, INFO, WARNING, ERROR).
        log_file: Path to a file where logs should be saved.
        component_levels: Dict mapping component names (e.g. 'codec') to levels.
    """
    root = logging.getLogger(APP_LOGGER_NAME)

    # Re-setup must not stack handlers
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()

    root.setLevel(getattr(logging, level.upper(), logging.WARNING))

    formatter = logging.Formatter(DEFAULT_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_path), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    if component_levels:
        for component, cmp_level in component_levels.items():
            set_component_level(component, cmp_level)


def get_logger(name: str) -> logging.Logger:
    """
    Returns a logger instance for a specific component.
    Namespaced under 'pixqr.<name>'.
    """
    if name.startswith(APP_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{APP_LOGGER_NAME}.{name}")


def set_component_level(component: str, level: str) -> None:
    """
    Dynamically changes the log level for a specific component.
    Unknown level names are ignored.
    """
    numeric_level = getattr(logging, level.upper(), None)
    if isinstance(numeric_level, int):
        get_logger(component).setLevel(numeric_level)
