from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigError

load_dotenv()

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_IMAGE_FORMATS = ("png", "jpeg", "webp", "svg", "pdf", "eps")


@dataclass(frozen=True)
class Settings:
    plotly_js: str = "cdn"            # "cdn", "inline", or a script URL
    image_format: str = "png"
    image_scale: float = 1.0
    log_level: str = "WARNING"
    browser: Optional[str] = None     # name accepted by webbrowser.get()


def _load_settings() -> Settings:
    plotly_js = os.getenv("CHARTSPEC_PLOTLY_JS", "cdn").strip() or "cdn"

    image_format = os.getenv("CHARTSPEC_IMAGE_FORMAT", "png").strip().lower()
    if image_format not in _IMAGE_FORMATS:
        raise ConfigError(f"CHARTSPEC_IMAGE_FORMAT must be one of {_IMAGE_FORMATS}, got '{image_format}'")

    raw_scale = os.getenv("CHARTSPEC_IMAGE_SCALE", "1.0")
    try:
        image_scale = float(raw_scale)
    except ValueError as e:
        raise ConfigError(f"CHARTSPEC_IMAGE_SCALE must be a number, got '{raw_scale}'") from e
    if image_scale <= 0:
        raise ConfigError(f"CHARTSPEC_IMAGE_SCALE must be positive, got {image_scale}")

    log_level = os.getenv("CHARTSPEC_LOG_LEVEL", "WARNING").strip().upper()
    if log_level not in _LEVELS:
        raise ConfigError(f"CHARTSPEC_LOG_LEVEL must be one of {_LEVELS}, got '{log_level}'")

    browser = os.getenv("CHARTSPEC_BROWSER") or None

    return Settings(
        plotly_js=plotly_js,
        image_format=image_format,
        image_scale=image_scale,
        log_level=log_level,
        browser=browser,
    )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the process-wide settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        _settings = _load_settings()
    return _settings


def reload_settings() -> Settings:
    global _settings
    _settings = _load_settings()
    return _settings


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a stream handler to the ``chartspec`` logger. Opt-in; never run on import."""
    lvl = (level or get_settings().log_level).upper()
    logger = logging.getLogger("chartspec")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(lvl)
