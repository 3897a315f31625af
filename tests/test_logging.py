"""Tests for logging and settings."""

import logging
from pathlib import Path

import pytest
from pythonjsonlogger.json import JsonFormatter

from osubuffer import config
from osubuffer.logging import configure_logging

LOGGING_YAML = Path(__file__).parent.parent / "logging.yaml"


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_configure_logging(restore_root_logger):
    """The shipped config installs a JSON formatter at the configured level."""
    configure_logging(str(LOGGING_YAML))

    formatters = [h.formatter for h in restore_root_logger.handlers]
    assert any(isinstance(f, JsonFormatter) for f in formatters)
    assert restore_root_logger.level == config.LOG_LEVEL


def test_configure_logging_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        configure_logging(str(tmp_path / "missing.yaml"))


def test_settings_defaults():
    assert config.BUFFER_INITIAL_CAPACITY > 0
    assert config.BUFFER_MAX_CAPACITY is None or config.BUFFER_MAX_CAPACITY > 0
