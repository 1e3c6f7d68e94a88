from __future__ import annotations
from enum import Enum
from typing import Any, List, Optional

from pydantic import Field

from ..base import SpecModel
from ..color import Color
from ..common import DataArray, Dim, Font, Line, Marker, Mode, PlotType, Position
from .common import Trace


class Fill(str, Enum):
    none = "none"
    to_self = "toself"


class SelectionMarker(SpecModel):
    color: Optional[Color] = None
    opacity: Optional[float] = None
    size: Optional[Dim[int]] = None


class Selection(SpecModel):
    marker: Optional[SelectionMarker] = None


class ScatterMapbox(Trace):
    type: PlotType = PlotType.scattermapbox
    lat: Optional[DataArray] = None
    lon: Optional[DataArray] = None
    mode: Optional[Mode] = None
    text: Optional[Dim[str]] = None
    text_position: Optional[Dim[Position]] = Field(None, alias="textposition")
    text_template: Optional[Dim[str]] = Field(None, alias="texttemplate")
    text_font: Optional[Font] = Field(None, alias="textfont")
    subplot: Optional[str] = None
    marker: Optional[Marker] = None
    line: Optional[Line] = None
    below: Optional[str] = None
    selected_points: Optional[List[int]] = Field(None, alias="selectedpoints")
    selected: Optional[Selection] = None
    unselected: Optional[Selection] = None
    connect_gaps: Optional[bool] = Field(None, alias="connectgaps")
    fill: Optional[Fill] = None
    fill_color: Optional[Color] = Field(None, alias="fillcolor")

    @classmethod
    def new(cls, lat: Any, lon: Any, **fields: Any) -> "ScatterMapbox":
        return cls(lat=lat, lon=lon, **fields)
