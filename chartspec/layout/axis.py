from __future__ import annotations
from enum import Enum
from typing import Any, List, Optional

from pydantic import Field

from ..base import SpecModel
from ..color import Color
from ..common import (
    Anchor, AxisSide, Calendar, ColorBar, ColorScale, DashType, ExponentFormat, Font,
    NumOrString, Show, TickFormatStop, TickMode, Title,
)


class AxisType(str, Enum):
    default = "-"
    linear = "linear"
    log = "log"
    date = "date"
    category = "category"
    multi_category = "multicategory"


class AxisConstrain(str, Enum):
    range = "range"
    domain = "domain"


class ConstrainDirection(str, Enum):
    left = "left"
    center = "center"
    right = "right"
    top = "top"
    middle = "middle"
    bottom = "bottom"


class RangeMode(str, Enum):
    normal = "normal"
    to_zero = "tozero"
    non_negative = "nonnegative"


class TicksDirection(str, Enum):
    outside = "outside"
    inside = "inside"


class TicksPosition(str, Enum):
    labels = "labels"
    boundaries = "boundaries"


class SpikeMode(str, Enum):
    to_axis = "toaxis"
    across = "across"
    marker = "marker"
    to_axis_across = "toaxis+across"
    to_axis_marker = "toaxis+marker"
    across_marker = "across+marker"
    to_axis_across_marker = "toaxis+across+marker"


class SpikeSnap(str, Enum):
    data = "data"
    cursor = "cursor"
    hovered_data = "hovered data"


class CategoryOrder(str, Enum):
    trace = "trace"
    category_ascending = "category ascending"
    category_descending = "category descending"
    array = "array"
    total_ascending = "total ascending"
    total_descending = "total descending"
    min_ascending = "min ascending"
    min_descending = "min descending"
    max_ascending = "max ascending"
    max_descending = "max descending"
    sum_ascending = "sum ascending"
    sum_descending = "sum descending"
    mean_ascending = "mean ascending"
    mean_descending = "mean descending"
    geometric_mean_ascending = "geometric mean ascending"
    geometric_mean_descending = "geometric mean descending"
    median_ascending = "median ascending"
    median_descending = "median descending"


class SliderRangeMode(str, Enum):
    auto = "auto"
    fixed = "fixed"
    match = "match"


class RangeSliderYAxis(SpecModel):
    range_mode: Optional[SliderRangeMode] = Field(None, alias="rangemode")
    range: Optional[List[NumOrString]] = None


class RangeSlider(SpecModel):
    background_color: Optional[Color] = Field(None, alias="bgcolor")
    border_color: Optional[Color] = Field(None, alias="bordercolor")
    border_width: Optional[int] = Field(None, alias="borderwidth")
    auto_range: Optional[bool] = Field(None, alias="autorange")
    range: Optional[List[NumOrString]] = None
    thickness: Optional[float] = None
    visible: Optional[bool] = None
    y_axis: Optional[RangeSliderYAxis] = Field(None, alias="yaxis")


class SelectorStep(str, Enum):
    month = "month"
    year = "year"
    day = "day"
    hour = "hour"
    minute = "minute"
    second = "second"
    all = "all"


class StepMode(str, Enum):
    backward = "backward"
    to_date = "todate"


class SelectorButton(SpecModel):
    visible: Optional[bool] = None
    step: Optional[SelectorStep] = None
    step_mode: Optional[StepMode] = Field(None, alias="stepmode")
    count: Optional[int] = None
    label: Optional[str] = None
    name: Optional[str] = None
    template_item_name: Optional[str] = Field(None, alias="templateitemname")


class RangeSelector(SpecModel):
    visible: Optional[bool] = None
    buttons: Optional[List[SelectorButton]] = None
    x: Optional[float] = None
    x_anchor: Optional[Anchor] = Field(None, alias="xanchor")
    y: Optional[float] = None
    y_anchor: Optional[Anchor] = Field(None, alias="yanchor")
    font: Optional[Font] = None
    background_color: Optional[Color] = Field(None, alias="bgcolor")
    active_color: Optional[Color] = Field(None, alias="activecolor")
    border_color: Optional[Color] = Field(None, alias="bordercolor")
    border_width: Optional[int] = Field(None, alias="borderwidth")


class RangeBreak(SpecModel):
    """e.g. ``RangeBreak(bounds=["sat", "mon"])`` hides weekends on a date axis."""

    bounds: Optional[List[NumOrString]] = None
    pattern: Optional[NumOrString] = None
    values: Optional[List[NumOrString]] = None
    dvalue: Optional[int] = None
    enabled: Optional[bool] = None


class ColorAxis(SpecModel):
    cauto: Optional[bool] = None
    cmin: Optional[float] = None
    cmax: Optional[float] = None
    cmid: Optional[float] = None
    color_scale: Optional[ColorScale] = Field(None, alias="colorscale")
    auto_color_scale: Optional[bool] = Field(None, alias="autocolorscale")
    reverse_scale: Optional[bool] = Field(None, alias="reversescale")
    show_scale: Optional[bool] = Field(None, alias="showscale")
    color_bar: Optional[ColorBar] = Field(None, alias="colorbar")


class Axis(SpecModel):
    visible: Optional[bool] = None
    color: Optional[Color] = None
    title: Optional[Title] = None
    type: Optional[AxisType] = None
    auto_range: Optional[bool] = Field(None, alias="autorange")
    range_breaks: Optional[List[RangeBreak]] = Field(None, alias="rangebreaks")
    range_mode: Optional[RangeMode] = Field(None, alias="rangemode")
    range: Optional[List[Any]] = None
    fixed_range: Optional[bool] = Field(None, alias="fixedrange")
    constrain: Optional[AxisConstrain] = None
    constrain_toward: Optional[ConstrainDirection] = Field(None, alias="constraintoward")
    tick_mode: Optional[TickMode] = Field(None, alias="tickmode")
    n_ticks: Optional[int] = Field(None, alias="nticks")
    scale_anchor: Optional[str] = Field(None, alias="scaleanchor")
    scale_ratio: Optional[float] = Field(None, alias="scaleratio")
    tick0: Optional[NumOrString] = None
    dtick: Optional[NumOrString] = None
    matches: Optional[str] = None
    tick_values: Optional[List[Any]] = Field(None, alias="tickvals")
    tick_text: Optional[List[str]] = Field(None, alias="ticktext")
    ticks: Optional[TicksDirection] = None
    ticks_on: Optional[TicksPosition] = Field(None, alias="tickson")
    mirror: Optional[bool] = None
    tick_length: Optional[int] = Field(None, alias="ticklen")
    tick_width: Optional[int] = Field(None, alias="tickwidth")
    tick_color: Optional[Color] = Field(None, alias="tickcolor")
    show_tick_labels: Optional[bool] = Field(None, alias="showticklabels")
    auto_margin: Optional[bool] = Field(None, alias="automargin")
    show_spikes: Optional[bool] = Field(None, alias="showspikes")
    spike_color: Optional[Color] = Field(None, alias="spikecolor")
    spike_thickness: Optional[int] = Field(None, alias="spikethickness")
    spike_dash: Optional[DashType] = Field(None, alias="spikedash")
    spike_mode: Optional[SpikeMode] = Field(None, alias="spikemode")
    spike_snap: Optional[SpikeSnap] = Field(None, alias="spikesnap")
    tick_font: Optional[Font] = Field(None, alias="tickfont")
    tick_angle: Optional[float] = Field(None, alias="tickangle")
    tick_prefix: Optional[str] = Field(None, alias="tickprefix")
    show_tick_prefix: Optional[Show] = Field(None, alias="showtickprefix")
    tick_suffix: Optional[str] = Field(None, alias="ticksuffix")
    show_tick_suffix: Optional[Show] = Field(None, alias="showticksuffix")
    show_exponent: Optional[Show] = Field(None, alias="showexponent")
    exponent_format: Optional[ExponentFormat] = Field(None, alias="exponentformat")
    separate_thousands: Optional[bool] = Field(None, alias="separatethousands")
    tick_format: Optional[str] = Field(None, alias="tickformat")
    tick_format_stops: Optional[List[TickFormatStop]] = Field(None, alias="tickformatstops")
    hover_format: Optional[str] = Field(None, alias="hoverformat")
    show_line: Optional[bool] = Field(None, alias="showline")
    line_color: Optional[Color] = Field(None, alias="linecolor")
    line_width: Optional[int] = Field(None, alias="linewidth")
    show_grid: Optional[bool] = Field(None, alias="showgrid")
    grid_color: Optional[Color] = Field(None, alias="gridcolor")
    grid_width: Optional[int] = Field(None, alias="gridwidth")
    zero_line: Optional[bool] = Field(None, alias="zeroline")
    zero_line_color: Optional[Color] = Field(None, alias="zerolinecolor")
    zero_line_width: Optional[int] = Field(None, alias="zerolinewidth")
    show_dividers: Optional[bool] = Field(None, alias="showdividers")
    divider_color: Optional[Color] = Field(None, alias="dividercolor")
    divider_width: Optional[int] = Field(None, alias="dividerwidth")
    anchor: Optional[str] = None
    side: Optional[AxisSide] = None
    overlaying: Optional[str] = None
    domain: Optional[List[float]] = None
    position: Optional[float] = None
    range_slider: Optional[RangeSlider] = Field(None, alias="rangeslider")
    range_selector: Optional[RangeSelector] = Field(None, alias="rangeselector")
    calendar: Optional[Calendar] = None
    category_order: Optional[CategoryOrder] = Field(None, alias="categoryorder")
    category_array: Optional[List[NumOrString]] = Field(None, alias="categoryarray")


def axis_key(letter: str, index: int) -> str:
    """Layout key of an axis: ``xaxis`` for index 1, ``xaxis{n}`` after that."""
    if letter not in ("x", "y", "z"):
        raise ValueError(f"axis letter must be x, y or z, got '{letter}'")
    if index < 1:
        raise ValueError(f"axis index starts at 1, got {index}")
    return f"{letter}axis" if index == 1 else f"{letter}axis{index}"


def axis_ref(letter: str, index: int) -> str:
    """Trace-level reference to an axis: ``x`` for index 1, ``x{n}`` after that."""
    if index < 1:
        raise ValueError(f"axis index starts at 1, got {index}")
    return letter if index == 1 else f"{letter}{index}"
