from __future__ import annotations
from enum import Enum
from typing import Any, Optional

from pydantic import Field

from ..base import SpecModel
from ..color import Color
from ..common import (
    Calendar, ColorBar, ColorScale, DataArray, Dim, Font, Line, NumOrString, PlotType,
)
from .common import Trace


class ContoursType(str, Enum):
    levels = "levels"
    constraint = "constraint"


class Coloring(str, Enum):
    fill = "fill"
    heatmap = "heatmap"
    lines = "lines"
    none = "none"


class Operation(str, Enum):
    equals = "="
    less_than = "<"
    less_than_or_equal = "<="
    greater_than = ">"
    greater_than_or_equal = ">="
    inside_inclusive = "[]"
    inside_exclusive = "()"
    inside_inclusive_exclusive = "[)"
    inside_exclusive_inclusive = "(]"
    outside_inclusive = "]["
    outside_exclusive = ")("
    outside_inclusive_exclusive = "]("
    outside_exclusive_inclusive = ")["


class Contours(SpecModel):
    type: Optional[ContoursType] = None
    start: Optional[float] = None
    end: Optional[float] = None
    size: Optional[float] = None
    coloring: Optional[Coloring] = None
    show_lines: Optional[bool] = Field(None, alias="showlines")
    show_labels: Optional[bool] = Field(None, alias="showlabels")
    label_font: Optional[Font] = Field(None, alias="labelfont")
    label_format: Optional[str] = Field(None, alias="labelformat")
    operation: Optional[Operation] = None
    value: Optional[float] = None


class Contour(Trace):
    type: PlotType = PlotType.contour
    x: Optional[DataArray] = None
    x0: Optional[NumOrString] = None
    dx: Optional[float] = None
    y: Optional[DataArray] = None
    y0: Optional[NumOrString] = None
    dy: Optional[float] = None
    z: Optional[DataArray] = None
    text: Optional[Dim[str]] = None
    x_axis: Optional[str] = Field(None, alias="xaxis")
    y_axis: Optional[str] = Field(None, alias="yaxis")
    line: Optional[Line] = None
    color_bar: Optional[ColorBar] = Field(None, alias="colorbar")
    color_axis: Optional[str] = Field(None, alias="coloraxis")
    auto_color_scale: Optional[bool] = Field(None, alias="autocolorscale")
    color_scale: Optional[ColorScale] = Field(None, alias="colorscale")
    show_scale: Optional[bool] = Field(None, alias="showscale")
    reverse_scale: Optional[bool] = Field(None, alias="reversescale")
    zauto: Optional[bool] = None
    zhover_format: Optional[str] = Field(None, alias="zhoverformat")
    zmax: Optional[float] = None
    zmid: Optional[float] = None
    zmin: Optional[float] = None
    auto_contour: Optional[bool] = Field(None, alias="autocontour")
    connect_gaps: Optional[bool] = Field(None, alias="connectgaps")
    contours: Optional[Contours] = None
    fill_color: Optional[Color] = Field(None, alias="fillcolor")
    hover_on_gaps: Optional[bool] = Field(None, alias="hoverongaps")
    n_contours: Optional[int] = Field(None, alias="ncontours")
    transpose: Optional[bool] = None
    x_calendar: Optional[Calendar] = Field(None, alias="xcalendar")
    y_calendar: Optional[Calendar] = Field(None, alias="ycalendar")

    @classmethod
    def new(cls, x: Any, y: Any, z: Any, **fields: Any) -> "Contour":
        return cls(x=x, y=y, z=z, **fields)

    @classmethod
    def new_z(cls, z: Any, **fields: Any) -> "Contour":
        return cls(z=z, **fields)
