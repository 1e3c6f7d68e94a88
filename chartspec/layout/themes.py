from __future__ import annotations
import logging
from enum import Enum
from typing import Any, Dict, Optional

import plotly.io as pio

from ..base import SpecModel

logger = logging.getLogger(__name__)


class Template(SpecModel):
    """A plotly template: default layout values plus per-trace-type defaults."""

    layout: Optional[Dict[str, Any]] = None
    data: Optional[Dict[str, Any]] = None


class BuiltinTheme(str, Enum):
    plotly = "plotly"
    plotly_white = "plotly_white"
    plotly_dark = "plotly_dark"
    seaborn = "seaborn"
    ggplot2 = "ggplot2"
    simple_white = "simple_white"
    presentation = "presentation"
    none = "none"

    def build(self) -> Template:
        logger.debug("loading template %s", self.value)
        raw = pio.templates[self.value].to_plotly_json()
        return Template(layout=raw.get("layout") or None, data=raw.get("data") or None)
