"""Tests for settings and logging setup."""

import logging

import pytest

from retrait.config import TraitSettings
from retrait.logging_config import DEFAULT_LOG_LEVEL, setup_logging


@pytest.fixture
def retrait_logger():
    """Yield the retrait logger and restore its state afterwards."""
    logger = logging.getLogger("retrait")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch):
    """Test the default settings."""
    monkeypatch.delenv("RETRAIT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("RETRAIT_WARN_ON_REATTACH", raising=False)
    settings = TraitSettings(_env_file=None)
    assert settings.log_level == "WARNING"
    assert settings.warn_on_reattach is False


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch):
    """Test that settings are read from RETRAIT_ environment variables."""
    monkeypatch.setenv("RETRAIT_LOG_LEVEL", "debug")
    monkeypatch.setenv("RETRAIT_WARN_ON_REATTACH", "true")
    settings = TraitSettings(_env_file=None)
    assert settings.log_level == "debug"
    assert settings.warn_on_reattach is True


def test_setup_logging_explicit_levels(retrait_logger: logging.Logger):
    """Test that explicit int and string levels are applied."""
    setup_logging(logging.INFO)
    assert retrait_logger.level == logging.INFO
    setup_logging("debug")
    assert retrait_logger.level == logging.DEBUG
    assert len(retrait_logger.handlers) == 1


def test_setup_logging_from_environment(retrait_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch):
    """Test that the level falls back to RETRAIT_LOG_LEVEL."""
    monkeypatch.setenv("RETRAIT_LOG_LEVEL", "ERROR")
    setup_logging()
    assert retrait_logger.level == logging.ERROR


def test_setup_logging_invalid_level(
    retrait_logger: logging.Logger,
    capsys: pytest.CaptureFixture[str],
):
    """Test that an invalid level name falls back to the default with a warning."""
    setup_logging("NOT_A_LEVEL")
    assert retrait_logger.level == DEFAULT_LOG_LEVEL
    assert "Invalid log level string 'NOT_A_LEVEL'" in capsys.readouterr().err
