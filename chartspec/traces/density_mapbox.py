from __future__ import annotations
from typing import Any, Optional

from pydantic import Field

from ..common import ColorBar, ColorScale, DataArray, Dim, NumArray, PlotType
from .common import Trace


class DensityMapbox(Trace):
    type: PlotType = PlotType.densitymapbox
    lat: Optional[DataArray] = None
    lon: Optional[DataArray] = None
    z: Optional[NumArray] = None
    radius: Optional[Dim[float]] = None
    text: Optional[Dim[str]] = None
    subplot: Optional[str] = None
    below: Optional[str] = None
    auto_color_scale: Optional[bool] = Field(None, alias="autocolorscale")
    color_axis: Optional[str] = Field(None, alias="coloraxis")
    color_bar: Optional[ColorBar] = Field(None, alias="colorbar")
    color_scale: Optional[ColorScale] = Field(None, alias="colorscale")
    reverse_scale: Optional[bool] = Field(None, alias="reversescale")
    show_scale: Optional[bool] = Field(None, alias="showscale")
    zauto: Optional[bool] = None
    zmax: Optional[float] = None
    zmid: Optional[float] = None
    zmin: Optional[float] = None

    @classmethod
    def new(cls, lat: Any, lon: Any, z: Any, **fields: Any) -> "DensityMapbox":
        return cls(lat=lat, lon=lon, z=z, **fields)
