from __future__ import annotations
from enum import Enum
from typing import Optional

from ..base import SpecModel
from ..color import Color
from ..common import Domain
from .axis import Axis
from .mapbox import Center


class ProjectionType(str, Enum):
    equirectangular = "equirectangular"
    mercator = "mercator"
    orthographic = "orthographic"
    natural_earth = "natural earth"
    kavrayskiy7 = "kavrayskiy7"
    miller = "miller"
    robinson = "robinson"
    eckert4 = "eckert4"
    azimuthal_equal_area = "azimuthal equal area"
    azimuthal_equidistant = "azimuthal equidistant"
    conic_equal_area = "conic equal area"
    conic_conformal = "conic conformal"
    conic_equidistant = "conic equidistant"
    gnomonic = "gnomonic"
    stereographic = "stereographic"
    mollweide = "mollweide"
    hammer = "hammer"
    transverse_mercator = "transverse mercator"
    albers_usa = "albers usa"
    winkel_tripel = "winkel tripel"
    aitoff = "aitoff"
    sinusoidal = "sinusoidal"


class Rotation(SpecModel):
    lat: Optional[float] = None
    lon: Optional[float] = None
    roll: Optional[float] = None


class Projection(SpecModel):
    type: Optional[ProjectionType] = None
    rotation: Optional[Rotation] = None
    scale: Optional[float] = None


class LayoutGeo(SpecModel):
    center: Optional[Center] = None
    domain: Optional[Domain] = None
    projection: Optional[Projection] = None
    showocean: Optional[bool] = None
    oceancolor: Optional[Color] = None
    showland: Optional[bool] = None
    landcolor: Optional[Color] = None
    showlakes: Optional[bool] = None
    lakecolor: Optional[Color] = None
    showcountries: Optional[bool] = None
    countrycolor: Optional[Color] = None
    showcoastlines: Optional[bool] = None
    coastlinewidth: Optional[float] = None
    lonaxis: Optional[Axis] = None
    lataxis: Optional[Axis] = None
    fitbounds: Optional[str] = None
