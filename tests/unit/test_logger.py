"""
------------------------------------------------------------------------------
Project:        PixQR
File:           tests/unit/test_logger.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Unit tests for the centralized logging system.
------------------------------------------------------------------------------
"""

import logging

from pixqr.logger import get_logger, set_component_level, setup_logging


def _flush():
    for handler in logging.getLogger("pixqr").handlers:
        handler.flush()


def test_logger_namespace():
    """Verify that get_logger returns a child of the pixqr root."""
    assert get_logger("codec").name == "pixqr.codec"
    assert get_logger("pixqr.service").name == "pixqr.service"


def test_logging_to_file(tmp_path):
    log_file = tmp_path / "app.log"
    setup_logging(level="DEBUG", log_file=str(log_file))

    get_logger("test").debug("Logging to file test message")
    _flush()

    assert "Logging to file test message" in log_file.read_text()


def test_setup_twice_does_not_duplicate_handlers(tmp_path):
    setup_logging(level="INFO", log_file=str(tmp_path / "a.log"))
    setup_logging(level="INFO", log_file=str(tmp_path / "a.log"))
    assert len(logging.getLogger("pixqr").handlers) == 2


def test_component_level_overrides(tmp_path):
    log_file = tmp_path / "component.log"
    setup_logging(level="INFO", log_file=str(log_file), component_levels={"codec": "DEBUG"})

    get_logger("codec.assembler").debug("CODEC DEBUG MESSAGE")
    get_logger("service").debug("SERVICE DEBUG MESSAGE")
    _flush()

    content = log_file.read_text()
    assert "CODEC DEBUG MESSAGE" in content
    assert "SERVICE DEBUG MESSAGE" not in content


def test_unknown_component_level_is_ignored():
    set_component_level("codec", "LOUD")
    assert get_logger("codec").level == logging.NOTSET


def test_quiet_default_mode(tmp_path):
    log_file = tmp_path / "quiet.log"
    setup_logging(level="WARNING", log_file=str(log_file))

    get_logger("service").info("THIS SHOULD NOT APPEAR")
    _flush()

    assert "THIS SHOULD NOT APPEAR" not in log_file.read_text()
