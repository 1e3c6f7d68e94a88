from __future__ import annotations
import logging
import secrets
import string
import tempfile
import webbrowser
from pathlib import Path
from typing import Any, Dict, Optional, Union

import plotly.io as pio

from .config import get_settings
from .errors import ExportError

logger = logging.getLogger(__name__)

IMAGE_FORMATS = ("png", "jpeg", "webp", "svg", "pdf", "eps")

_ID_ALPHABET = string.ascii_letters + string.digits


def random_div_id(length: int = 20) -> str:
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(length))


def plotly_js_mode(local: bool = False) -> Union[bool, str]:
    """Translate CHARTSPEC_PLOTLY_JS into plotly.io's ``include_plotlyjs`` argument."""
    if local:
        return True
    mode = get_settings().plotly_js
    if mode == "inline":
        return True
    return mode


# ---------- HTML ----------

def render_html(
    fig: Dict[str, Any],
    config: Optional[Dict[str, Any]] = None,
    *,
    include_plotlyjs: Union[bool, str] = "cdn",
    full_html: bool = True,
    div_id: Optional[str] = None,
    post_script: Optional[str] = None,
) -> str:
    return pio.to_html(
        fig,
        config=config or {},
        include_plotlyjs=include_plotlyjs,
        full_html=full_html,
        div_id=div_id,
        post_script=post_script,
        validate=False,
    )


def static_image_script(format: str, width: int, height: int) -> str:
    """Script that swaps the live plot for a rendered <img> once plotly.js has drawn it."""
    if format == "jpg":
        format = "jpeg"
    if format not in ("png", "jpeg", "webp", "svg"):
        raise ExportError(f"browser image export supports png, jpeg, webp and svg, not '{format}'")
    return (
        "var gd = document.getElementById('{plot_id}');"
        f"Plotly.toImage(gd, {{format: '{format}', width: {int(width)}, height: {int(height)}}})"
        ".then(function (url) {"
        "var img = document.createElement('img');"
        "img.src = url;"
        "gd.parentNode.replaceChild(img, gd);"
        "});"
    )


def write_text(path: Union[str, Path], text: str) -> Path:
    path = Path(path)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        logger.error("failed to write %s: %s", path, e)
        raise ExportError(f"failed to write {path}: {e}") from e
    logger.debug("wrote %d bytes of html to %s", len(text), path)
    return path


def open_in_browser(html: str, browser: Optional[str] = None) -> Path:
    """Write ``html`` to a temp file and open it with the configured (or default) browser."""
    with tempfile.NamedTemporaryFile(
        "w", prefix="chartspec_", suffix=".html", delete=False, encoding="utf-8"
    ) as fh:
        fh.write(html)
        path = Path(fh.name)
    name = browser if browser is not None else get_settings().browser
    try:
        opener = webbrowser.get(name) if name else webbrowser.get()
    except webbrowser.Error as e:
        logger.error("no browser available to open %s: %s", path, e)
        raise ExportError(f"could not find a browser to open {path}; write_html/write_image still work") from e
    opener.open(path.as_uri())
    logger.debug("opened %s", path)
    return path


# ---------- Static images (kaleido) ----------

def _image_args(format: Optional[str], scale: Optional[float]) -> Dict[str, Any]:
    settings = get_settings()
    fmt = (format or settings.image_format).lower()
    if fmt == "jpg":
        fmt = "jpeg"
    if fmt not in IMAGE_FORMATS:
        raise ExportError(f"unsupported image format '{fmt}', expected one of {IMAGE_FORMATS}")
    return {"format": fmt, "scale": scale if scale is not None else settings.image_scale}


def to_image_bytes(
    fig: Dict[str, Any],
    *,
    format: Optional[str] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
    scale: Optional[float] = None,
) -> bytes:
    args = _image_args(format, scale)
    try:
        return pio.to_image(fig, width=width, height=height, validate=False, **args)
    except Exception as e:
        logger.error("static image export failed: %s", e)
        raise ExportError(f"static image export failed: {e}") from e


def write_image(
    fig: Dict[str, Any],
    path: Union[str, Path],
    *,
    format: Optional[str] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
    scale: Optional[float] = None,
) -> Path:
    path = Path(path)
    if format is None and path.suffix:
        format = path.suffix.lstrip(".")
    data = to_image_bytes(fig, format=format, width=width, height=height, scale=scale)
    try:
        path.write_bytes(data)
    except OSError as e:
        logger.error("failed to write %s: %s", path, e)
        raise ExportError(f"failed to write {path}: {e}") from e
    logger.debug("wrote %d byte image to %s", len(data), path)
    return path
