"""
Settings and logging configuration tests
"""
import logging

import pytest

from greatcircle_core import GreatCircle, configure_logging
from greatcircle_core.config import DEFAULT_EARTH_RADIUS_KM, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("GREATCIRCLE_EARTH_RADIUS_KM", raising=False)
    monkeypatch.delenv("GREATCIRCLE_LOG_LEVEL", raising=False)

    settings = get_settings()
    assert settings.earth_radius_km == DEFAULT_EARTH_RADIUS_KM == 6372.8
    assert settings.log_level == "WARNING"


def test_settings_are_cached():
    assert get_settings() is get_settings()


def test_env_overrides_radius(monkeypatch):
    monkeypatch.setenv("GREATCIRCLE_EARTH_RADIUS_KM", "6371.0")

    assert get_settings().earth_radius_km == 6371.0
    assert GreatCircle().earth_radius == 6371.0
    # An explicit radius always wins over the environment
    assert GreatCircle(earth_radius=1.0).earth_radius == 1.0


def test_env_rejects_invalid_radius(monkeypatch):
    monkeypatch.setenv("GREATCIRCLE_EARTH_RADIUS_KM", "-5")

    with pytest.raises(ValueError):
        get_settings()


def test_env_log_level_is_normalized(monkeypatch):
    monkeypatch.setenv("GREATCIRCLE_LOG_LEVEL", " debug ")

    assert get_settings().log_level == "DEBUG"


def test_configure_logging_attaches_handler():
    logger = logging.getLogger("greatcircle_core")
    try:
        configure_logging("info")
        assert logger.level == logging.INFO
        assert any(isinstance(handler, logging.StreamHandler) for handler in logger.handlers)
        assert logger.propagate is False
    finally:
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True


def test_configure_logging_uses_settings_level(monkeypatch):
    monkeypatch.setenv("GREATCIRCLE_LOG_LEVEL", "error")
    logger = logging.getLogger("greatcircle_core")
    try:
        configure_logging()
        assert logger.level == logging.ERROR
    finally:
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
