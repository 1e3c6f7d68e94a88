from __future__ import annotations
from enum import Enum
from typing import Any, List, Optional

from pydantic import Field

from ..color import Color
from ..common import (
    Calendar, DataArray, Dim, ErrorData, Fill, Font, HoverOn, Line, Marker, Mode,
    NumOrString, Orientation, PlotType, Position,
)
from .common import ArrayTraces, Trace, trace_vectors_from


class GroupNorm(str, Enum):
    default = ""
    fraction = "fraction"
    percent = "percent"


class StackGaps(str, Enum):
    infer_zero = "infer zero"
    interpolate = "interpolate"


class Scatter(Trace):
    """Line / marker / text series on cartesian axes.

    ``web_gl_mode()`` switches the trace to the WebGL renderer (``scattergl``),
    which copes with far larger point counts.
    """

    type: PlotType = PlotType.scatter
    x: Optional[DataArray] = None
    x0: Optional[NumOrString] = None
    dx: Optional[float] = None
    y: Optional[DataArray] = None
    y0: Optional[NumOrString] = None
    dy: Optional[float] = None
    mode: Optional[Mode] = None
    text: Optional[Dim[str]] = None
    text_position: Optional[Dim[Position]] = Field(None, alias="textposition")
    text_template: Optional[Dim[str]] = Field(None, alias="texttemplate")
    x_axis: Optional[str] = Field(None, alias="xaxis")
    y_axis: Optional[str] = Field(None, alias="yaxis")
    orientation: Optional[Orientation] = None
    group_norm: Optional[GroupNorm] = Field(None, alias="groupnorm")
    stack_group: Optional[str] = Field(None, alias="stackgroup")
    marker: Optional[Marker] = None
    line: Optional[Line] = None
    text_font: Optional[Font] = Field(None, alias="textfont")
    error_x: Optional[ErrorData] = None
    error_y: Optional[ErrorData] = None
    clip_on_axis: Optional[bool] = Field(None, alias="cliponaxis")
    connect_gaps: Optional[bool] = Field(None, alias="connectgaps")
    fill: Optional[Fill] = None
    fill_color: Optional[Color] = Field(None, alias="fillcolor")
    hover_on: Optional[HoverOn] = Field(None, alias="hoveron")
    stack_gaps: Optional[StackGaps] = Field(None, alias="stackgaps")
    x_calendar: Optional[Calendar] = Field(None, alias="xcalendar")
    y_calendar: Optional[Calendar] = Field(None, alias="ycalendar")

    @classmethod
    def new(cls, x: Any, y: Any, **fields: Any) -> "Scatter":
        return cls(x=x, y=y, **fields)

    def web_gl_mode(self, on: bool = True) -> "Scatter":
        self.type = PlotType.scattergl if on else PlotType.scatter
        return self

    def to_traces(self, x: Any, matrix: Any, over: ArrayTraces = ArrayTraces.over_columns) -> List["Scatter"]:
        """One copy of this trace per column (or row) of ``matrix``, all sharing ``x``."""
        traces = []
        for ys in trace_vectors_from(matrix, over):
            traces.append(self.model_copy(deep=True).update(x=x, y=ys))
        return traces
