from __future__ import annotations
from enum import Enum
from typing import Any, List, Optional

from pydantic import Field

from ..base import SpecModel
from ..color import Color
from ..common import (
    Calendar, ColorBar, ColorScale, DataArray, Dim, NumArray, PlotType,
)
from .common import Trace
from .surface import LightPosition


class IntensityMode(str, Enum):
    vertex = "vertex"
    cell = "cell"


class DelaunayAxis(str, Enum):
    x = "x"
    y = "y"
    z = "z"


class MeshContour(SpecModel):
    color: Optional[Color] = None
    show: Optional[bool] = None
    width: Optional[int] = None


class MeshLighting(SpecModel):
    ambient: Optional[float] = None
    diffuse: Optional[float] = None
    face_normals_epsilon: Optional[float] = Field(None, alias="facenormalsepsilon")
    fresnel: Optional[float] = None
    roughness: Optional[float] = None
    specular: Optional[float] = None
    vertex_normals_epsilon: Optional[float] = Field(None, alias="vertexnormalsepsilon")


class Mesh3D(Trace):
    """Triangulated mesh; ``i``/``j``/``k`` index the vertices of each triangle."""

    type: PlotType = PlotType.mesh3d
    x: Optional[DataArray] = None
    y: Optional[DataArray] = None
    z: Optional[DataArray] = None
    i: Optional[List[int]] = None
    j: Optional[List[int]] = None
    k: Optional[List[int]] = None
    scene: Optional[str] = None
    text: Optional[Dim[str]] = None
    color: Optional[Color] = None
    face_color: Optional[List[Color]] = Field(None, alias="facecolor")
    intensity: Optional[NumArray] = None
    intensity_mode: Optional[IntensityMode] = Field(None, alias="intensitymode")
    vertex_color: Optional[List[Color]] = Field(None, alias="vertexcolor")
    x_hover_format: Optional[str] = Field(None, alias="xhoverformat")
    y_hover_format: Optional[str] = Field(None, alias="yhoverformat")
    z_hover_format: Optional[str] = Field(None, alias="zhoverformat")
    color_axis: Optional[str] = Field(None, alias="coloraxis")
    color_bar: Optional[ColorBar] = Field(None, alias="colorbar")
    auto_color_scale: Optional[bool] = Field(None, alias="autocolorscale")
    color_scale: Optional[ColorScale] = Field(None, alias="colorscale")
    show_scale: Optional[bool] = Field(None, alias="showscale")
    reverse_scale: Optional[bool] = Field(None, alias="reversescale")
    cauto: Optional[bool] = None
    cmax: Optional[float] = None
    cmid: Optional[float] = None
    cmin: Optional[float] = None
    alpha_hull: Optional[float] = Field(None, alias="alphahull")
    delaunay_axis: Optional[DelaunayAxis] = Field(None, alias="delaunayaxis")
    contour: Optional[MeshContour] = None
    flat_shading: Optional[bool] = Field(None, alias="flatshading")
    lighting: Optional[MeshLighting] = None
    light_position: Optional[LightPosition] = Field(None, alias="lightposition")
    x_calendar: Optional[Calendar] = Field(None, alias="xcalendar")
    y_calendar: Optional[Calendar] = Field(None, alias="ycalendar")
    z_calendar: Optional[Calendar] = Field(None, alias="zcalendar")

    @classmethod
    def new(cls, x: Any, y: Any, z: Any, i: Any = None, j: Any = None, k: Any = None, **fields: Any) -> "Mesh3D":
        return cls(x=x, y=y, z=z, i=i, j=j, k=k, **fields)
