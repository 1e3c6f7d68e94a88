from __future__ import annotations
from typing import Any, List, Optional

from pydantic import Field

from ..base import SpecModel
from ..color import Color
from ..common import (
    Calendar, ColorBar, ColorScale, DataArray, Dim, PlotType,
)
from .common import Trace


class Lighting(SpecModel):
    ambient: Optional[float] = None
    diffuse: Optional[float] = None
    fresnel: Optional[float] = None
    roughness: Optional[float] = None
    specular: Optional[float] = None


class LightPosition(SpecModel):
    x: Optional[float] = None
    y: Optional[float] = None
    z: Optional[float] = None


class PlaneProject(SpecModel):
    x: Optional[bool] = None
    y: Optional[bool] = None
    z: Optional[bool] = None


class PlaneContours(SpecModel):
    color: Optional[Color] = None
    end: Optional[float] = None
    highlight: Optional[bool] = None
    highlight_width: Optional[int] = Field(None, alias="highlightwidth")
    highlight_color: Optional[Color] = Field(None, alias="highlightcolor")
    project: Optional[PlaneProject] = None
    show: Optional[bool] = None
    size: Optional[float] = None
    start: Optional[float] = None
    use_colormap: Optional[bool] = Field(None, alias="usecolormap")
    width: Optional[int] = None


class SurfaceContours(SpecModel):
    x: Optional[PlaneContours] = None
    y: Optional[PlaneContours] = None
    z: Optional[PlaneContours] = None


class Surface(Trace):
    type: PlotType = PlotType.surface
    x: Optional[DataArray] = None
    y: Optional[DataArray] = None
    z: Optional[DataArray] = None
    text: Optional[Dim[str]] = None
    scene: Optional[str] = None
    auto_color_scale: Optional[bool] = Field(None, alias="autocolorscale")
    cauto: Optional[bool] = None
    cmax: Optional[float] = None
    cmid: Optional[float] = None
    cmin: Optional[float] = None
    color_bar: Optional[ColorBar] = Field(None, alias="colorbar")
    color_axis: Optional[str] = Field(None, alias="coloraxis")
    color_scale: Optional[ColorScale] = Field(None, alias="colorscale")
    connect_gaps: Optional[bool] = Field(None, alias="connectgaps")
    contours: Optional[SurfaceContours] = None
    hide_surface: Optional[bool] = Field(None, alias="hidesurface")
    light_position: Optional[LightPosition] = Field(None, alias="lightposition")
    lighting: Optional[Lighting] = None
    reverse_scale: Optional[bool] = Field(None, alias="reversescale")
    show_scale: Optional[bool] = Field(None, alias="showscale")
    surface_color: Optional[List[Color]] = Field(None, alias="surfacecolor")
    x_calendar: Optional[Calendar] = Field(None, alias="xcalendar")
    y_calendar: Optional[Calendar] = Field(None, alias="ycalendar")
    z_calendar: Optional[Calendar] = Field(None, alias="zcalendar")

    @classmethod
    def new(cls, z: Any, **fields: Any) -> "Surface":
        return cls(z=z, **fields)

    @classmethod
    def from_array(cls, z: Any, x: Any = None, y: Any = None, **fields: Any) -> "Surface":
        return cls(x=x, y=y, z=z, **fields)
