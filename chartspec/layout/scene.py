from __future__ import annotations
from enum import Enum
from typing import List, Optional

from pydantic import Field

from ..base import SpecModel
from ..color import Color
from ..common import Domain
from .annotation import Annotation
from .axis import Axis
from .modes import DragMode3D, HoverMode


class AspectMode(str, Enum):
    auto = "auto"
    cube = "cube"
    data = "data"
    manual = "manual"


class AspectRatio(SpecModel):
    x: Optional[float] = None
    y: Optional[float] = None
    z: Optional[float] = None


class CameraCenter(SpecModel):
    x: Optional[float] = None
    y: Optional[float] = None
    z: Optional[float] = None


class Eye(SpecModel):
    x: Optional[float] = None
    y: Optional[float] = None
    z: Optional[float] = None


class Up(SpecModel):
    x: Optional[float] = None
    y: Optional[float] = None
    z: Optional[float] = None


class CameraProjectionType(str, Enum):
    perspective = "perspective"
    orthographic = "orthographic"


class CameraProjection(SpecModel):
    type: Optional[CameraProjectionType] = None


class Camera(SpecModel):
    center: Optional[CameraCenter] = None
    eye: Optional[Eye] = None
    up: Optional[Up] = None
    projection: Optional[CameraProjection] = None


class LayoutScene(SpecModel):
    """A 3-D subplot; traces attach with ``scene="scene"``, ``"scene2"``, ..."""

    background_color: Optional[Color] = Field(None, alias="bgcolor")
    camera: Optional[Camera] = None
    aspect_mode: Optional[AspectMode] = Field(None, alias="aspectmode")
    aspect_ratio: Optional[AspectRatio] = Field(None, alias="aspectratio")
    x_axis: Optional[Axis] = Field(None, alias="xaxis")
    y_axis: Optional[Axis] = Field(None, alias="yaxis")
    z_axis: Optional[Axis] = Field(None, alias="zaxis")
    drag_mode: Optional[DragMode3D] = Field(None, alias="dragmode")
    hover_mode: Optional[HoverMode] = Field(None, alias="hovermode")
    annotations: Optional[List[Annotation]] = None
    domain: Optional[Domain] = None
