from __future__ import annotations
from enum import Enum
from typing import Any, Optional

from pydantic import Field

from ..base import SpecModel
from ..color import Color
from ..common import (
    Calendar, DataArray, Dim, ErrorData, Font, Line, Marker, Mode, PlotType, Position,
)
from .common import Trace


class ProjectionCoord(SpecModel):
    opacity: Optional[float] = None
    scale: Optional[float] = None
    show: Optional[bool] = None


class Projection(SpecModel):
    x: Optional[ProjectionCoord] = None
    y: Optional[ProjectionCoord] = None
    z: Optional[ProjectionCoord] = None


class SurfaceAxis(str, Enum):
    minus_one = "-1"
    zero = "0"
    one = "1"
    two = "2"


class Scatter3D(Trace):
    type: PlotType = PlotType.scatter3d
    x: Optional[DataArray] = None
    y: Optional[DataArray] = None
    z: Optional[DataArray] = None
    mode: Optional[Mode] = None
    text: Optional[Dim[str]] = None
    text_position: Optional[Dim[Position]] = Field(None, alias="textposition")
    text_template: Optional[Dim[str]] = Field(None, alias="texttemplate")
    text_font: Optional[Font] = Field(None, alias="textfont")
    x_hover_format: Optional[str] = Field(None, alias="xhoverformat")
    y_hover_format: Optional[str] = Field(None, alias="yhoverformat")
    z_hover_format: Optional[str] = Field(None, alias="zhoverformat")
    scene: Optional[str] = None
    marker: Optional[Marker] = None
    line: Optional[Line] = None
    error_x: Optional[ErrorData] = None
    error_y: Optional[ErrorData] = None
    error_z: Optional[ErrorData] = None
    connect_gaps: Optional[bool] = Field(None, alias="connectgaps")
    projection: Optional[Projection] = None
    surface_axis: Optional[SurfaceAxis] = Field(None, alias="surfaceaxis")
    surface_color: Optional[Color] = Field(None, alias="surfacecolor")
    x_calendar: Optional[Calendar] = Field(None, alias="xcalendar")
    y_calendar: Optional[Calendar] = Field(None, alias="ycalendar")
    z_calendar: Optional[Calendar] = Field(None, alias="zcalendar")

    @classmethod
    def new(cls, x: Any, y: Any, z: Any, **fields: Any) -> "Scatter3D":
        return cls(x=x, y=y, z=z, **fields)
