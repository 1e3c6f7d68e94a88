from __future__ import annotations
from enum import Enum
from typing import Any, List, Optional, Tuple, Union

import numpy as np
from pydantic import Field, field_validator

from ..base import TraceModel
from ..common import (
    DataArray, Dim, HoverInfo, Label, LegendGroupTitle, NumOrString, PlotType, Visible,
)


# A pixel is (r, g, b) or (r, g, b, a); the channel meaning follows ``color_model``.
PixelColor = Union[Tuple[int, int, int], Tuple[int, int, int, float]]


class ColorModel(str, Enum):
    rgb = "rgb"
    rgba = "rgba"
    rgba256 = "rgba256"
    hsl = "hsl"
    hsla = "hsla"


class ZSmooth(Enum):
    fast = "fast"
    false = False


class Image(TraceModel):
    """Raster image. ``z`` is a row-major grid of pixels."""

    type: PlotType = PlotType.image
    name: Optional[str] = None
    visible: Optional[Visible] = None
    opacity: Optional[float] = None
    z: Optional[List[List[PixelColor]]] = None
    source: Optional[str] = None
    x0: Optional[NumOrString] = None
    y0: Optional[NumOrString] = None
    dx: Optional[float] = None
    dy: Optional[float] = None
    legend_rank: Optional[int] = Field(None, alias="legendrank")
    legend_group_title: Optional[LegendGroupTitle] = Field(None, alias="legendgrouptitle")
    text: Optional[Dim[str]] = None
    hover_text: Optional[Dim[str]] = Field(None, alias="hovertext")
    hover_info: Optional[HoverInfo] = Field(None, alias="hoverinfo")
    hover_template: Optional[Dim[str]] = Field(None, alias="hovertemplate")
    hover_label: Optional[Label] = Field(None, alias="hoverlabel")
    custom_data: Optional[DataArray] = Field(None, alias="customdata")
    x_axis: Optional[str] = Field(None, alias="xaxis")
    y_axis: Optional[str] = Field(None, alias="yaxis")
    color_model: Optional[ColorModel] = Field(None, alias="colormodel")
    z_max: Optional[List[float]] = Field(None, alias="zmax")
    z_min: Optional[List[float]] = Field(None, alias="zmin")
    z_smooth: Optional[ZSmooth] = Field(None, alias="zsmooth")
    ui_revision: Optional[NumOrString] = Field(None, alias="uirevision")

    @field_validator("z", mode="before")
    @classmethod
    def _pixels(cls, v):
        if isinstance(v, np.ndarray):
            if v.ndim != 3 or v.shape[2] not in (3, 4):
                raise ValueError(f"image array must have shape (h, w, 3|4), got {v.shape}")
            return v.tolist()
        return v

    @classmethod
    def new(cls, z: Any, color_model: Optional[ColorModel] = None, **fields: Any) -> "Image":
        if color_model is not None:
            fields["color_model"] = color_model
        return cls(z=z, **fields)

    @classmethod
    def from_array(cls, pixels: Any, **fields: Any) -> "Image":
        """(h, w, 3) arrays default to ``rgb``, (h, w, 4) to ``rgba``."""
        arr = np.asarray(pixels)
        if "color_model" not in fields and arr.ndim == 3:
            fields["color_model"] = ColorModel.rgba if arr.shape[2] == 4 else ColorModel.rgb
        return cls(z=arr, **fields)
