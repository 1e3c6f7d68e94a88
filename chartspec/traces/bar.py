from __future__ import annotations
from typing import Any, Optional

from pydantic import Field

from ..common import (
    Calendar, ConstrainText, DataArray, Dim, ErrorData, Font, Marker, Number,
    NumOrString, Orientation, PlotType, TextAnchor, TextPosition,
)
from .common import Trace


class Bar(Trace):
    type: PlotType = PlotType.bar
    x: Optional[DataArray] = None
    y: Optional[DataArray] = None
    width: Optional[Dim[Number]] = None
    offset: Optional[Dim[Number]] = None
    base: Optional[Dim[NumOrString]] = None
    text: Optional[Dim[str]] = None
    text_position: Optional[Dim[TextPosition]] = Field(None, alias="textposition")
    text_template: Optional[Dim[str]] = Field(None, alias="texttemplate")
    x_axis: Optional[str] = Field(None, alias="xaxis")
    y_axis: Optional[str] = Field(None, alias="yaxis")
    orientation: Optional[Orientation] = None
    alignment_group: Optional[str] = Field(None, alias="alignmentgroup")
    offset_group: Optional[str] = Field(None, alias="offsetgroup")
    marker: Optional[Marker] = None
    text_angle: Optional[float] = Field(None, alias="textangle")
    text_font: Optional[Font] = Field(None, alias="textfont")
    error_x: Optional[ErrorData] = None
    error_y: Optional[ErrorData] = None
    clip_on_axis: Optional[bool] = Field(None, alias="cliponaxis")
    constrain_text: Optional[ConstrainText] = Field(None, alias="constraintext")
    inside_text_anchor: Optional[TextAnchor] = Field(None, alias="insidetextanchor")
    inside_text_font: Optional[Font] = Field(None, alias="insidetextfont")
    outside_text_font: Optional[Font] = Field(None, alias="outsidetextfont")
    x_calendar: Optional[Calendar] = Field(None, alias="xcalendar")
    y_calendar: Optional[Calendar] = Field(None, alias="ycalendar")

    @classmethod
    def new(cls, x: Any, y: Any, **fields: Any) -> "Bar":
        return cls(x=x, y=y, **fields)
