import logging

import pytest

from chartspec import ConfigError, configure_logging, get_settings, reload_settings


@pytest.fixture(autouse=True)
def _restore_settings(monkeypatch):
    for name in ("CHARTSPEC_PLOTLY_JS", "CHARTSPEC_IMAGE_FORMAT", "CHARTSPEC_IMAGE_SCALE", "CHARTSPEC_LOG_LEVEL", "CHARTSPEC_BROWSER"):
        monkeypatch.delenv(name, raising=False)
    yield
    monkeypatch.undo()
    reload_settings()


def test_defaults():
    s = reload_settings()
    assert s.plotly_js == "cdn"
    assert s.image_format == "png"
    assert s.image_scale == 1.0
    assert s.log_level == "WARNING"
    assert s.browser is None
    assert get_settings() is s


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CHARTSPEC_PLOTLY_JS", "inline")
    monkeypatch.setenv("CHARTSPEC_IMAGE_FORMAT", "SVG")
    monkeypatch.setenv("CHARTSPEC_IMAGE_SCALE", "2.5")
    monkeypatch.setenv("CHARTSPEC_LOG_LEVEL", "debug")
    s = reload_settings()
    assert (s.plotly_js, s.image_format, s.image_scale, s.log_level) == ("inline", "svg", 2.5, "DEBUG")


@pytest.mark.parametrize("name,value", [
    ("CHARTSPEC_IMAGE_FORMAT", "bmp"),
    ("CHARTSPEC_IMAGE_SCALE", "big"),
    ("CHARTSPEC_IMAGE_SCALE", "0"),
    ("CHARTSPEC_LOG_LEVEL", "loud"),
])
def test_invalid_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigError):
        reload_settings()


def test_configure_logging_is_idempotent():
    logger = logging.getLogger("chartspec")
    before = list(logger.handlers)
    try:
        configure_logging("info")
        configure_logging("debug")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == max(len(before), 1)
    finally:
        logger.handlers = before
        logger.setLevel(logging.NOTSET)
