from __future__ import annotations
from enum import Enum
from typing import Annotated, Any, List, Optional, Tuple, TypeVar, Union

import numpy as np
from pydantic import BeforeValidator, Field, model_validator

from .base import SpecModel
from .color import Color


# ---------- Dimensions & data arrays ----------

T = TypeVar("T")

# A trace attribute applied uniformly (scalar) or per data point (vector).
Dim = Union[T, List[T]]
# Table cell styling additionally allows one value per cell.
MatrixDim = Union[T, List[T], List[List[T]]]

NumOrString = Union[int, float, str]
Number = Union[int, float]


class DimKind(str, Enum):
    scalar = "scalar"
    vector = "vector"
    matrix = "matrix"


def dim_kind(value: Any) -> DimKind:
    if isinstance(value, (list, tuple)):
        if value and all(isinstance(v, (list, tuple)) for v in value):
            return DimKind.matrix
        return DimKind.vector
    return DimKind.scalar


def _plain(v: Any) -> Any:
    if isinstance(v, np.generic):
        return v.item()
    if isinstance(v, (list, tuple)):
        return [_plain(i) for i in v]
    return v


def as_list(value: Any) -> Any:
    """numpy arrays, pandas Series/Index and tuples become plain python lists."""
    if value is None:
        return None
    if hasattr(value, "tolist") and not isinstance(value, (str, bytes)):
        return value.tolist()
    if isinstance(value, (list, tuple)):
        return _plain(value)
    return value


DataArray = Annotated[List[Any], BeforeValidator(as_list)]
NumArray = Annotated[List[Optional[Number]], BeforeValidator(as_list)]
StrArray = Annotated[List[str], BeforeValidator(as_list)]
Matrix = Annotated[List[List[Any]], BeforeValidator(as_list)]


# ---------- Enums ----------

class PlotType(str, Enum):
    scatter = "scatter"
    scattergl = "scattergl"
    scatter3d = "scatter3d"
    scattermapbox = "scattermapbox"
    scattergeo = "scattergeo"
    scatterpolar = "scatterpolar"
    scatterpolargl = "scatterpolargl"
    bar = "bar"
    box = "box"
    candlestick = "candlestick"
    contour = "contour"
    heatmap = "heatmap"
    histogram = "histogram"
    histogram2dcontour = "histogram2dcontour"
    image = "image"
    mesh3d = "mesh3d"
    ohlc = "ohlc"
    sankey = "sankey"
    surface = "surface"
    densitymapbox = "densitymapbox"
    table = "table"
    pie = "pie"


class Visible(Enum):
    true = True
    false = False
    legend_only = "legendonly"


class HoverInfo(str, Enum):
    x = "x"
    y = "y"
    z = "z"
    x_y = "x+y"
    x_z = "x+z"
    y_z = "y+z"
    x_y_z = "x+y+z"
    text = "text"
    name = "name"
    all = "all"
    none = "none"
    skip = "skip"


class TextPosition(str, Enum):
    inside = "inside"
    outside = "outside"
    auto = "auto"
    none = "none"


class ConstrainText(str, Enum):
    inside = "inside"
    outside = "outside"
    both = "both"
    none = "none"


class Orientation(str, Enum):
    a = "a"
    v = "v"
    h = "h"
    r = "r"
    t = "t"


class Fill(str, Enum):
    to_zero_y = "tozeroy"
    to_zero_x = "tozerox"
    to_next_y = "tonexty"
    to_next_x = "tonextx"
    to_self = "toself"
    to_next = "tonext"
    none = "none"


class Calendar(str, Enum):
    gregorian = "gregorian"
    chinese = "chinese"
    coptic = "coptic"
    discworld = "discworld"
    ethiopian = "ethiopian"
    hebrew = "hebrew"
    islamic = "islamic"
    julian = "julian"
    mayan = "mayan"
    nanakshahi = "nanakshahi"
    nepali = "nepali"
    persian = "persian"
    jalali = "jalali"
    taiwan = "taiwan"
    thai = "thai"
    ummalqura = "ummalqura"


class Mode(str, Enum):
    lines = "lines"
    markers = "markers"
    text = "text"
    lines_markers = "lines+markers"
    lines_text = "lines+text"
    markers_text = "markers+text"
    lines_markers_text = "lines+markers+text"
    none = "none"


class Ticks(str, Enum):
    outside = "outside"
    inside = "inside"
    none = ""


class Position(str, Enum):
    top_left = "top left"
    top_center = "top center"
    top_right = "top right"
    middle_left = "middle left"
    middle_center = "middle center"
    middle_right = "middle right"
    bottom_left = "bottom left"
    bottom_center = "bottom center"
    bottom_right = "bottom right"
    inside = "inside"
    outside = "outside"


class MarkerSymbol(str, Enum):
    circle = "circle"
    circle_open = "circle-open"
    circle_dot = "circle-dot"
    circle_open_dot = "circle-open-dot"
    square = "square"
    square_open = "square-open"
    square_dot = "square-dot"
    square_open_dot = "square-open-dot"
    diamond = "diamond"
    diamond_open = "diamond-open"
    diamond_dot = "diamond-dot"
    diamond_open_dot = "diamond-open-dot"
    cross = "cross"
    cross_open = "cross-open"
    cross_dot = "cross-dot"
    cross_open_dot = "cross-open-dot"
    x = "x"
    x_open = "x-open"
    x_dot = "x-dot"
    x_open_dot = "x-open-dot"
    triangle_up = "triangle-up"
    triangle_up_open = "triangle-up-open"
    triangle_up_dot = "triangle-up-dot"
    triangle_up_open_dot = "triangle-up-open-dot"
    triangle_down = "triangle-down"
    triangle_down_open = "triangle-down-open"
    triangle_down_dot = "triangle-down-dot"
    triangle_down_open_dot = "triangle-down-open-dot"
    triangle_left = "triangle-left"
    triangle_left_open = "triangle-left-open"
    triangle_left_dot = "triangle-left-dot"
    triangle_left_open_dot = "triangle-left-open-dot"
    triangle_right = "triangle-right"
    triangle_right_open = "triangle-right-open"
    triangle_right_dot = "triangle-right-dot"
    triangle_right_open_dot = "triangle-right-open-dot"
    triangle_ne = "triangle-ne"
    triangle_ne_open = "triangle-ne-open"
    triangle_ne_dot = "triangle-ne-dot"
    triangle_ne_open_dot = "triangle-ne-open-dot"
    triangle_se = "triangle-se"
    triangle_se_open = "triangle-se-open"
    triangle_se_dot = "triangle-se-dot"
    triangle_se_open_dot = "triangle-se-open-dot"
    triangle_sw = "triangle-sw"
    triangle_sw_open = "triangle-sw-open"
    triangle_sw_dot = "triangle-sw-dot"
    triangle_sw_open_dot = "triangle-sw-open-dot"
    triangle_nw = "triangle-nw"
    triangle_nw_open = "triangle-nw-open"
    triangle_nw_dot = "triangle-nw-dot"
    triangle_nw_open_dot = "triangle-nw-open-dot"
    pentagon = "pentagon"
    pentagon_open = "pentagon-open"
    pentagon_dot = "pentagon-dot"
    pentagon_open_dot = "pentagon-open-dot"
    hexagon = "hexagon"
    hexagon_open = "hexagon-open"
    hexagon_dot = "hexagon-dot"
    hexagon_open_dot = "hexagon-open-dot"
    hexagon2 = "hexagon2"
    hexagon2_open = "hexagon2-open"
    hexagon2_dot = "hexagon2-dot"
    hexagon2_open_dot = "hexagon2-open-dot"
    octagon = "octagon"
    octagon_open = "octagon-open"
    octagon_dot = "octagon-dot"
    octagon_open_dot = "octagon-open-dot"
    star = "star"
    star_open = "star-open"
    star_dot = "star-dot"
    star_open_dot = "star-open-dot"
    hexagram = "hexagram"
    hexagram_open = "hexagram-open"
    hexagram_dot = "hexagram-dot"
    hexagram_open_dot = "hexagram-open-dot"
    star_triangle_up = "star-triangle-up"
    star_triangle_up_open = "star-triangle-up-open"
    star_triangle_up_dot = "star-triangle-up-dot"
    star_triangle_up_open_dot = "star-triangle-up-open-dot"
    star_triangle_down = "star-triangle-down"
    star_triangle_down_open = "star-triangle-down-open"
    star_triangle_down_dot = "star-triangle-down-dot"
    star_triangle_down_open_dot = "star-triangle-down-open-dot"
    star_square = "star-square"
    star_square_open = "star-square-open"
    star_square_dot = "star-square-dot"
    star_square_open_dot = "star-square-open-dot"
    star_diamond = "star-diamond"
    star_diamond_open = "star-diamond-open"
    star_diamond_dot = "star-diamond-dot"
    star_diamond_open_dot = "star-diamond-open-dot"
    diamond_tall = "diamond-tall"
    diamond_tall_open = "diamond-tall-open"
    diamond_tall_dot = "diamond-tall-dot"
    diamond_tall_open_dot = "diamond-tall-open-dot"
    diamond_wide = "diamond-wide"
    diamond_wide_open = "diamond-wide-open"
    diamond_wide_dot = "diamond-wide-dot"
    diamond_wide_open_dot = "diamond-wide-open-dot"
    hourglass = "hourglass"
    hourglass_open = "hourglass-open"
    bowtie = "bowtie"
    bowtie_open = "bowtie-open"
    circle_cross = "circle-cross"
    circle_cross_open = "circle-cross-open"
    circle_x = "circle-x"
    circle_x_open = "circle-x-open"
    square_cross = "square-cross"
    square_cross_open = "square-cross-open"
    square_x = "square-x"
    square_x_open = "square-x-open"
    diamond_cross = "diamond-cross"
    diamond_cross_open = "diamond-cross-open"
    diamond_x = "diamond-x"
    diamond_x_open = "diamond-x-open"
    cross_thin = "cross-thin"
    cross_thin_open = "cross-thin-open"
    x_thin = "x-thin"
    x_thin_open = "x-thin-open"
    asterisk = "asterisk"
    asterisk_open = "asterisk-open"
    hash = "hash"
    hash_open = "hash-open"
    hash_dot = "hash-dot"
    hash_open_dot = "hash-open-dot"
    y_up = "y-up"
    y_up_open = "y-up-open"
    y_down = "y-down"
    y_down_open = "y-down-open"
    y_left = "y-left"
    y_left_open = "y-left-open"
    y_right = "y-right"
    y_right_open = "y-right-open"
    line_ew = "line-ew"
    line_ew_open = "line-ew-open"
    line_ns = "line-ns"
    line_ns_open = "line-ns-open"
    line_ne = "line-ne"
    line_ne_open = "line-ne-open"
    line_nw = "line-nw"
    line_nw_open = "line-nw-open"


class TickMode(str, Enum):
    auto = "auto"
    linear = "linear"
    array = "array"


class DashType(str, Enum):
    solid = "solid"
    dot = "dot"
    dash = "dash"
    long_dash = "longdash"
    dash_dot = "dashdot"
    long_dash_dot = "longdashdot"


class ColorScalePalette(str, Enum):
    greys = "Greys"
    yl_gn_bu = "YlGnBu"
    greens = "Greens"
    yl_or_rd = "YlOrRd"
    bluered = "Bluered"
    rd_bu = "RdBu"
    reds = "Reds"
    blues = "Blues"
    picnic = "Picnic"
    rainbow = "Rainbow"
    portland = "Portland"
    jet = "Jet"
    hot = "Hot"
    blackbody = "Blackbody"
    earth = "Earth"
    electric = "Electric"
    viridis = "Viridis"
    cividis = "Cividis"


# Either a named palette or explicit ``[[fraction, color], ...]`` stops.
ColorScale = Union[ColorScalePalette, List[Tuple[float, Color]]]


class LineShape(str, Enum):
    linear = "linear"
    spline = "spline"
    hv = "hv"
    vh = "vh"
    hvh = "hvh"
    vhv = "vhv"


class GradientType(str, Enum):
    radial = "radial"
    horizontal = "horizontal"
    vertical = "vertical"
    none = "none"


class SizeMode(str, Enum):
    diameter = "diameter"
    area = "area"


class ThicknessMode(str, Enum):
    fraction = "fraction"
    pixels = "pixels"


class Anchor(str, Enum):
    auto = "auto"
    left = "left"
    center = "center"
    right = "right"
    top = "top"
    middle = "middle"
    bottom = "bottom"


class TextAnchor(str, Enum):
    start = "start"
    middle = "middle"
    end = "end"


class ExponentFormat(str, Enum):
    none = "none"
    small_e = "e"
    capital_e = "E"
    power = "power"
    si = "SI"
    b = "B"


class Show(str, Enum):
    all = "all"
    first = "first"
    last = "last"
    none = "none"


class Side(str, Enum):
    right = "right"
    top = "top"
    bottom = "bottom"
    left = "left"
    top_left = "top left"


class AxisSide(str, Enum):
    top = "top"
    bottom = "bottom"
    left = "left"
    right = "right"


class Reference(str, Enum):
    container = "container"
    paper = "paper"


class PatternShape(str, Enum):
    none = ""
    horizontal_line = "-"
    vertical_line = "|"
    right_diagonal_line = "/"
    left_diagonal_line = "\\"
    cross = "+"
    diagonal_cross = "x"
    dot = "."


class PatternFillMode(str, Enum):
    replace = "replace"
    overlay = "overlay"


class ErrorType(str, Enum):
    percent = "percent"
    constant = "constant"
    sqrt = "sqrt"
    data = "data"


class HoverOn(str, Enum):
    points = "points"
    fills = "fills"
    points_fills = "points+fills"


class Align(str, Enum):
    left = "left"
    center = "center"
    right = "right"
    auto = "auto"


# ---------- Shared records ----------

class Domain(SpecModel):
    column: Optional[int] = None
    row: Optional[int] = None
    x: Optional[Tuple[float, float]] = None
    y: Optional[Tuple[float, float]] = None


class Font(SpecModel):
    family: Optional[str] = None
    size: Optional[Number] = None
    color: Optional[Color] = None


class Pad(SpecModel):
    t: Optional[int] = None
    b: Optional[int] = None
    l: Optional[int] = None


class Title(SpecModel):
    """Accepts a bare string as shorthand for ``Title(text=...)``."""

    text: Optional[str] = None
    font: Optional[Font] = None
    side: Optional[Side] = None
    x_ref: Optional[Reference] = Field(None, alias="xref")
    y_ref: Optional[Reference] = Field(None, alias="yref")
    x: Optional[float] = None
    y: Optional[float] = None
    x_anchor: Optional[Anchor] = Field(None, alias="xanchor")
    y_anchor: Optional[Anchor] = Field(None, alias="yanchor")
    pad: Optional[Pad] = None

    @model_validator(mode="before")
    @classmethod
    def _from_text(cls, v):
        if isinstance(v, str):
            return {"text": v}
        return v


class LegendGroupTitle(SpecModel):
    text: Optional[str] = None
    font: Optional[Font] = None

    @model_validator(mode="before")
    @classmethod
    def _from_text(cls, v):
        if isinstance(v, str):
            return {"text": v}
        return v


class Label(SpecModel):
    """Hover label styling."""

    background_color: Optional[Dim[Color]] = Field(None, alias="bgcolor")
    border_color: Optional[Dim[Color]] = Field(None, alias="bordercolor")
    font: Optional[Font] = None
    align: Optional[Align] = None
    name_length: Optional[Dim[int]] = Field(None, alias="namelength")


class Line(SpecModel):
    width: Optional[Number] = None
    shape: Optional[LineShape] = None
    smoothing: Optional[float] = None
    dash: Optional[Union[DashType, str]] = None
    simplify: Optional[bool] = None
    color: Optional[Dim[Color]] = None
    cauto: Optional[bool] = None
    cmin: Optional[float] = None
    cmax: Optional[float] = None
    cmid: Optional[float] = None
    color_scale: Optional[ColorScale] = Field(None, alias="colorscale")
    auto_color_scale: Optional[bool] = Field(None, alias="autocolorscale")
    reverse_scale: Optional[bool] = Field(None, alias="reversescale")
    outlier_color: Optional[Color] = Field(None, alias="outliercolor")
    outlier_width: Optional[int] = Field(None, alias="outlierwidth")


class Gradient(SpecModel):
    type: Optional[GradientType] = None
    color: Optional[Dim[Color]] = None


class TickFormatStop(SpecModel):
    enabled: bool = True
    dtick_range: Optional[List[NumOrString]] = Field(None, alias="dtickrange")
    value: Optional[str] = None
    name: Optional[str] = None
    template_item_name: Optional[str] = Field(None, alias="templateitemname")


class ColorBar(SpecModel):
    background_color: Optional[Color] = Field(None, alias="bgcolor")
    border_color: Optional[Color] = Field(None, alias="bordercolor")
    border_width: Optional[int] = Field(None, alias="borderwidth")
    dtick: Optional[float] = None
    exponent_format: Optional[ExponentFormat] = Field(None, alias="exponentformat")
    len: Optional[Number] = None
    len_mode: Optional[ThicknessMode] = Field(None, alias="lenmode")
    n_ticks: Optional[int] = Field(None, alias="nticks")
    orientation: Optional[Orientation] = None
    outline_color: Optional[Color] = Field(None, alias="outlinecolor")
    outline_width: Optional[int] = Field(None, alias="outlinewidth")
    separate_thousands: Optional[bool] = Field(None, alias="separatethousands")
    show_exponent: Optional[Show] = Field(None, alias="showexponent")
    show_tick_labels: Optional[bool] = Field(None, alias="showticklabels")
    show_tick_prefix: Optional[Show] = Field(None, alias="showtickprefix")
    show_tick_suffix: Optional[Show] = Field(None, alias="showticksuffix")
    thickness: Optional[int] = None
    thickness_mode: Optional[ThicknessMode] = Field(None, alias="thicknessmode")
    tick_angle: Optional[float] = Field(None, alias="tickangle")
    tick_color: Optional[Color] = Field(None, alias="tickcolor")
    tick_font: Optional[Font] = Field(None, alias="tickfont")
    tick_format: Optional[str] = Field(None, alias="tickformat")
    tick_format_stops: Optional[List[TickFormatStop]] = Field(None, alias="tickformatstops")
    tick_len: Optional[int] = Field(None, alias="ticklen")
    tick_mode: Optional[TickMode] = Field(None, alias="tickmode")
    tick_prefix: Optional[str] = Field(None, alias="tickprefix")
    tick_suffix: Optional[str] = Field(None, alias="ticksuffix")
    tick_text: Optional[List[str]] = Field(None, alias="ticktext")
    tick_vals: Optional[NumArray] = Field(None, alias="tickvals")
    tick_width: Optional[int] = Field(None, alias="tickwidth")
    tick0: Optional[float] = None
    ticks: Optional[Ticks] = None
    title: Optional[Title] = None
    x: Optional[float] = None
    x_anchor: Optional[Anchor] = Field(None, alias="xanchor")
    x_pad: Optional[float] = Field(None, alias="xpad")
    y: Optional[float] = None
    y_anchor: Optional[Anchor] = Field(None, alias="yanchor")
    y_pad: Optional[float] = Field(None, alias="ypad")


class Pattern(SpecModel):
    shape: Optional[Dim[PatternShape]] = None
    fill_mode: Optional[PatternFillMode] = Field(None, alias="fillmode")
    background_color: Optional[Dim[Color]] = Field(None, alias="bgcolor")
    foreground_color: Optional[Dim[Color]] = Field(None, alias="fgcolor")
    foreground_opacity: Optional[float] = Field(None, alias="fgopacity")
    size: Optional[Dim[Number]] = None
    solidity: Optional[Dim[float]] = None


class Marker(SpecModel):
    symbol: Optional[Dim[MarkerSymbol]] = None
    opacity: Optional[Dim[float]] = None
    size: Optional[Dim[Number]] = None
    max_displayed: Optional[int] = Field(None, alias="maxdisplayed")
    size_ref: Optional[float] = Field(None, alias="sizeref")
    size_min: Optional[float] = Field(None, alias="sizemin")
    size_mode: Optional[SizeMode] = Field(None, alias="sizemode")
    line: Optional[Line] = None
    gradient: Optional[Gradient] = None
    color: Optional[Dim[Color]] = None
    colors: Optional[List[Color]] = None
    cauto: Optional[bool] = None
    cmin: Optional[float] = None
    cmax: Optional[float] = None
    cmid: Optional[float] = None
    color_scale: Optional[ColorScale] = Field(None, alias="colorscale")
    auto_color_scale: Optional[bool] = Field(None, alias="autocolorscale")
    reverse_scale: Optional[bool] = Field(None, alias="reversescale")
    show_scale: Optional[bool] = Field(None, alias="showscale")
    color_bar: Optional[ColorBar] = Field(None, alias="colorbar")
    outlier_color: Optional[Color] = Field(None, alias="outliercolor")
    pattern: Optional[Pattern] = None


class ErrorData(SpecModel):
    type: ErrorType
    array: Optional[NumArray] = None
    visible: Optional[bool] = None
    symmetric: Optional[bool] = None
    array_minus: Optional[NumArray] = Field(None, alias="arrayminus")
    value: Optional[float] = None
    value_minus: Optional[float] = Field(None, alias="valueminus")
    trace_ref: Optional[int] = Field(None, alias="traceref")
    trace_ref_minus: Optional[int] = Field(None, alias="tracerefminus")
    copy_y_style: Optional[bool] = Field(None, alias="copy_ystyle")
    color: Optional[Color] = None
    thickness: Optional[float] = None
    width: Optional[float] = None


class Direction(SpecModel):
    """Styling of increasing/decreasing segments in financial traces."""

    line: Optional[Line] = None
    fill_color: Optional[Color] = Field(None, alias="fillcolor")
