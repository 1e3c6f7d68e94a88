from __future__ import annotations
from enum import Enum
from typing import Optional

from pydantic import Field

from ..base import SpecModel
from ..common import Domain


class Center(SpecModel):
    lat: Optional[float] = None
    lon: Optional[float] = None

    @classmethod
    def new(cls, lat: float, lon: float) -> "Center":
        return cls(lat=lat, lon=lon)


class MapboxStyle(str, Enum):
    carto_darkmatter = "carto-darkmatter"
    carto_positron = "carto-positron"
    open_street_map = "open-street-map"
    stamen_terrain = "stamen-terrain"
    stamen_toner = "stamen-toner"
    stamen_watercolor = "stamen-watercolor"
    white_bg = "white-bg"
    basic = "basic"
    streets = "streets"
    outdoors = "outdoors"
    light = "light"
    dark = "dark"
    satellite = "satellite"
    satellite_streets = "satellite-streets"


class Mapbox(SpecModel):
    access_token: Optional[str] = Field(None, alias="accesstoken")
    bearing: Optional[float] = None
    center: Optional[Center] = None
    domain: Optional[Domain] = None
    pitch: Optional[float] = None
    style: Optional[MapboxStyle] = None
    zoom: Optional[float] = None
