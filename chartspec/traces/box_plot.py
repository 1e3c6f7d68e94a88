from __future__ import annotations
from enum import Enum
from typing import Any, Optional

from pydantic import Field

from ..color import Color
from ..common import (
    Calendar, DataArray, Dim, Line, Marker, NumArray, Orientation, PlotType,
)
from .common import Trace


class BoxMean(Enum):
    """``true``/``false`` are sent as JSON booleans, the standard deviation variant as ``"sd"``."""
    true = True
    false = False
    standard_deviation = "sd"


class BoxPoints(Enum):
    all = "all"
    outliers = "outliers"
    suspected_outliers = "suspectedoutliers"
    false = False


class QuartileMethod(str, Enum):
    linear = "linear"
    exclusive = "exclusive"
    inclusive = "inclusive"


class BoxHoverOn(str, Enum):
    boxes = "boxes"
    points = "points"
    boxes_points = "boxes+points"


class BoxPlot(Trace):
    type: PlotType = PlotType.box
    x: Optional[DataArray] = None
    y: Optional[DataArray] = None
    width: Optional[float] = None
    text: Optional[Dim[str]] = None
    x_axis: Optional[str] = Field(None, alias="xaxis")
    y_axis: Optional[str] = Field(None, alias="yaxis")
    orientation: Optional[Orientation] = None
    alignment_group: Optional[str] = Field(None, alias="alignmentgroup")
    offset_group: Optional[str] = Field(None, alias="offsetgroup")
    marker: Optional[Marker] = None
    line: Optional[Line] = None
    box_mean: Optional[BoxMean] = Field(None, alias="boxmean")
    box_points: Optional[BoxPoints] = Field(None, alias="boxpoints")
    notched: Optional[bool] = None
    notch_width: Optional[float] = Field(None, alias="notchwidth")
    whisker_width: Optional[float] = Field(None, alias="whiskerwidth")
    q1: Optional[NumArray] = None
    median: Optional[NumArray] = None
    q3: Optional[NumArray] = None
    lower_fence: Optional[NumArray] = Field(None, alias="lowerfence")
    upper_fence: Optional[NumArray] = Field(None, alias="upperfence")
    notch_span: Optional[NumArray] = Field(None, alias="notchspan")
    mean: Optional[NumArray] = None
    standard_deviation: Optional[NumArray] = Field(None, alias="sd")
    quartile_method: Optional[QuartileMethod] = Field(None, alias="quartilemethod")
    fill_color: Optional[Color] = Field(None, alias="fillcolor")
    hover_on: Optional[BoxHoverOn] = Field(None, alias="hoveron")
    point_pos: Optional[float] = Field(None, alias="pointpos")
    jitter: Optional[float] = None
    x_calendar: Optional[Calendar] = Field(None, alias="xcalendar")
    y_calendar: Optional[Calendar] = Field(None, alias="ycalendar")

    @classmethod
    def new(cls, y: Any, **fields: Any) -> "BoxPlot":
        return cls(y=y, **fields)

    @classmethod
    def new_xy(cls, x: Any, y: Any, **fields: Any) -> "BoxPlot":
        return cls(x=x, y=y, **fields)
