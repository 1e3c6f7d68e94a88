from __future__ import annotations
from enum import Enum
from typing import Any, List, Optional

from pydantic import Field

from ..base import SpecModel
from ..color import Color
from ..common import Domain, Font, TickMode, Title
from .axis import AxisType, CategoryOrder, RangeMode, TicksDirection


class PolarDirection(str, Enum):
    clockwise = "clockwise"
    counter_clockwise = "counterclockwise"


class GridShape(str, Enum):
    circular = "circular"
    linear = "linear"


class RadialAxis(SpecModel):
    visible: Optional[bool] = None
    type: Optional[AxisType] = None
    auto_range: Optional[bool] = Field(None, alias="autorange")
    range_mode: Optional[RangeMode] = Field(None, alias="rangemode")
    range: Optional[List[Any]] = None
    angle: Optional[float] = None
    side: Optional[str] = None
    title: Optional[Title] = None
    tick_mode: Optional[TickMode] = Field(None, alias="tickmode")
    ticks: Optional[TicksDirection] = None
    tick_font: Optional[Font] = Field(None, alias="tickfont")
    show_grid: Optional[bool] = Field(None, alias="showgrid")
    grid_color: Optional[Color] = Field(None, alias="gridcolor")
    show_line: Optional[bool] = Field(None, alias="showline")
    line_color: Optional[Color] = Field(None, alias="linecolor")
    category_order: Optional[CategoryOrder] = Field(None, alias="categoryorder")


class AngularAxis(SpecModel):
    visible: Optional[bool] = None
    type: Optional[AxisType] = None
    rotation: Optional[float] = None
    direction: Optional[PolarDirection] = None
    period: Optional[float] = None
    tick_mode: Optional[TickMode] = Field(None, alias="tickmode")
    ticks: Optional[TicksDirection] = None
    tick_font: Optional[Font] = Field(None, alias="tickfont")
    show_grid: Optional[bool] = Field(None, alias="showgrid")
    grid_color: Optional[Color] = Field(None, alias="gridcolor")
    show_line: Optional[bool] = Field(None, alias="showline")
    line_color: Optional[Color] = Field(None, alias="linecolor")
    category_order: Optional[CategoryOrder] = Field(None, alias="categoryorder")


class LayoutPolar(SpecModel):
    domain: Optional[Domain] = None
    sector: Optional[List[float]] = None
    hole: Optional[float] = None
    background_color: Optional[Color] = Field(None, alias="bgcolor")
    radial_axis: Optional[RadialAxis] = Field(None, alias="radialaxis")
    angular_axis: Optional[AngularAxis] = Field(None, alias="angularaxis")
    grid_shape: Optional[GridShape] = Field(None, alias="gridshape")
