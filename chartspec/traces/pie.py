from __future__ import annotations
from enum import Enum
from typing import Any, List, Optional

from pydantic import Field

from ..base import SpecModel
from ..color import Color
from ..common import DataArray, Dim, Domain, Font, Line, NumArray, PlotType, Title
from .common import Trace


class PieDirection(str, Enum):
    clockwise = "clockwise"
    counterclockwise = "counterclockwise"


class PieTextPosition(str, Enum):
    inside = "inside"
    outside = "outside"
    auto = "auto"
    none = "none"


class InsideTextOrientation(str, Enum):
    horizontal = "horizontal"
    radial = "radial"
    tangential = "tangential"
    auto = "auto"


class PieMarker(SpecModel):
    colors: Optional[List[Color]] = None
    line: Optional[Line] = None


class Pie(Trace):
    type: PlotType = PlotType.pie
    values: Optional[NumArray] = None
    labels: Optional[DataArray] = None
    label0: Optional[float] = None
    dlabel: Optional[float] = None
    domain: Optional[Domain] = None
    title: Optional[Title] = None
    hole: Optional[float] = Field(None, ge=0.0, le=1.0)
    pull: Optional[Dim[float]] = None
    sort: Optional[bool] = None
    direction: Optional[PieDirection] = None
    rotation: Optional[float] = None
    scale_group: Optional[str] = Field(None, alias="scalegroup")
    text: Optional[Dim[str]] = None
    text_info: Optional[str] = Field(None, alias="textinfo")
    text_position: Optional[Dim[PieTextPosition]] = Field(None, alias="textposition")
    text_template: Optional[Dim[str]] = Field(None, alias="texttemplate")
    text_font: Optional[Font] = Field(None, alias="textfont")
    inside_text_font: Optional[Font] = Field(None, alias="insidetextfont")
    outside_text_font: Optional[Font] = Field(None, alias="outsidetextfont")
    inside_text_orientation: Optional[InsideTextOrientation] = Field(None, alias="insidetextorientation")
    automargin: Optional[bool] = None
    marker: Optional[PieMarker] = None

    @classmethod
    def new(cls, values: Any, labels: Any = None, **fields: Any) -> "Pie":
        return cls(values=values, labels=labels, **fields)
