from __future__ import annotations
from enum import Enum
from typing import Any, Optional

from pydantic import Field

from ..common import (
    Calendar, ColorBar, ColorScale, DataArray, Dim, NumOrString, PlotType,
)
from .common import Trace


class Smoothing(Enum):
    fast = "fast"
    best = "best"
    false = False


class HeatMap(Trace):
    type: PlotType = PlotType.heatmap
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
    color_bar: Optional[ColorBar] = Field(None, alias="colorbar")
    color_axis: Optional[str] = Field(None, alias="coloraxis")
    auto_color_scale: Optional[bool] = Field(None, alias="autocolorscale")
    color_scale: Optional[ColorScale] = Field(None, alias="colorscale")
    show_scale: Optional[bool] = Field(None, alias="showscale")
    reverse_scale: Optional[bool] = Field(None, alias="reversescale")
    connect_gaps: Optional[bool] = Field(None, alias="connectgaps")
    hover_on_gaps: Optional[bool] = Field(None, alias="hoverongaps")
    transpose: Optional[bool] = None
    x_gap: Optional[float] = Field(None, alias="xgap")
    y_gap: Optional[float] = Field(None, alias="ygap")
    zauto: Optional[bool] = None
    zhover_format: Optional[str] = Field(None, alias="zhoverformat")
    zmax: Optional[float] = None
    zmid: Optional[float] = None
    zmin: Optional[float] = None
    zsmooth: Optional[Smoothing] = None
    x_calendar: Optional[Calendar] = Field(None, alias="xcalendar")
    y_calendar: Optional[Calendar] = Field(None, alias="ycalendar")

    @classmethod
    def new(cls, x: Any, y: Any, z: Any, **fields: Any) -> "HeatMap":
        return cls(x=x, y=y, z=z, **fields)

    @classmethod
    def new_z(cls, z: Any, **fields: Any) -> "HeatMap":
        return cls(z=z, **fields)

    @classmethod
    def from_array(cls, z: Any, **fields: Any) -> "HeatMap":
        """``z`` is any 2-D array-like (numpy, pandas DataFrame values, nested lists)."""
        return cls(z=z, **fields)
