from __future__ import annotations
from enum import Enum
from typing import Any, List, Optional

from pydantic import Field

from ..color import Color
from ..common import (
    DataArray, Dim, Fill, Font, HoverOn, Line, Marker, Mode, NumOrString, PlotType, Position,
)
from .common import ArrayTraces, Trace, trace_vectors_from
from .scatter import GroupNorm, StackGaps


class ThetaUnit(str, Enum):
    radians = "radians"
    degrees = "degrees"
    gradians = "gradians"


class ScatterPolar(Trace):
    type: PlotType = PlotType.scatterpolar
    theta: Optional[DataArray] = None
    theta0: Optional[NumOrString] = None
    dtheta: Optional[float] = None
    r: Optional[DataArray] = None
    r0: Optional[NumOrString] = None
    dr: Optional[float] = None
    theta_unit: Optional[ThetaUnit] = Field(None, alias="thetaunit")
    mode: Optional[Mode] = None
    subplot: Optional[str] = None
    text: Optional[Dim[str]] = None
    text_position: Optional[Dim[Position]] = Field(None, alias="textposition")
    text_template: Optional[Dim[str]] = Field(None, alias="texttemplate")
    group_norm: Optional[GroupNorm] = Field(None, alias="groupnorm")
    stack_group: Optional[str] = Field(None, alias="stackgroup")
    selected_points: Optional[List[int]] = Field(None, alias="selectedpoints")
    marker: Optional[Marker] = None
    line: Optional[Line] = None
    text_font: Optional[Font] = Field(None, alias="textfont")
    clip_on_axis: Optional[bool] = Field(None, alias="cliponaxis")
    connect_gaps: Optional[bool] = Field(None, alias="connectgaps")
    fill: Optional[Fill] = None
    fill_color: Optional[Color] = Field(None, alias="fillcolor")
    hover_on: Optional[HoverOn] = Field(None, alias="hoveron")
    stack_gaps: Optional[StackGaps] = Field(None, alias="stackgaps")

    @classmethod
    def new(cls, theta: Any, r: Any, **fields: Any) -> "ScatterPolar":
        return cls(theta=theta, r=r, **fields)

    def web_gl_mode(self, on: bool = True) -> "ScatterPolar":
        self.type = PlotType.scatterpolargl if on else PlotType.scatterpolar
        return self

    def to_traces(self, theta: Any, matrix: Any, over: ArrayTraces = ArrayTraces.over_columns) -> List["ScatterPolar"]:
        return [self.model_copy(deep=True).update(theta=theta, r=rs) for rs in trace_vectors_from(matrix, over)]
