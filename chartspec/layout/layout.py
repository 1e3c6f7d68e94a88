from __future__ import annotations
import logging
import re
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator, model_serializer, model_validator

from ..base import LayoutModel, Relayout, SpecModel, _dump_field
from ..color import Color
from ..common import Calendar, ColorScale, Font, Label, Orientation, Title
from ..errors import ChartSpecError
from .annotation import Annotation
from .axis import Axis, ColorAxis, axis_key
from .geo import LayoutGeo
from .grid import LayoutGrid
from .legend import Legend
from .mapbox import Mapbox
from .modes import (
    BarMode, BarNorm, BoxMode, ClickMode, DragMode, HoverMode, SelectDirection,
    UniformTextMode, ViolinMode, WaterfallMode,
)
from .polar import LayoutPolar
from .scene import LayoutScene
from .shape import ActiveShape, NewShape, Shape
from .slider import Slider
from .themes import BuiltinTheme, Template
from .update_menu import UpdateMenu

logger = logging.getLogger(__name__)


class Margin(SpecModel):
    l: Optional[int] = None
    r: Optional[int] = None
    t: Optional[int] = None
    b: Optional[int] = None
    pad: Optional[int] = None
    auto_expand: Optional[bool] = Field(None, alias="autoexpand")


class LayoutColorScale(SpecModel):
    sequential: Optional[ColorScale] = None
    sequential_minus: Optional[ColorScale] = Field(None, alias="sequentialminus")
    diverging: Optional[ColorScale] = None


class ModeBar(SpecModel):
    orientation: Optional[Orientation] = None
    background_color: Optional[Color] = Field(None, alias="bgcolor")
    color: Optional[Color] = None
    active_color: Optional[Color] = Field(None, alias="activecolor")


class UniformText(SpecModel):
    mode: Optional[UniformTextMode] = None
    min_size: Optional[int] = Field(None, alias="minsize")


_AXIS_KEY = re.compile(r"^[xyz]axis([2-8])?$")
# keys read back into the overflow map, e.g. "xaxis9" or "yaxis_custom"
_OVERFLOW_KEY = re.compile(r"^[xyz]axis\w*$")


class Layout(LayoutModel):
    title: Optional[Title] = None
    show_legend: Optional[bool] = Field(None, alias="showlegend")
    legend: Optional[Legend] = None
    margin: Optional[Margin] = None
    auto_size: Optional[bool] = Field(None, alias="autosize")
    width: Optional[int] = None
    height: Optional[int] = None
    font: Optional[Font] = None
    uniform_text: Optional[UniformText] = Field(None, alias="uniformtext")
    separators: Optional[str] = None
    paper_background_color: Optional[Color] = Field(None, alias="paper_bgcolor")
    plot_background_color: Optional[Color] = Field(None, alias="plot_bgcolor")
    color_scale: Optional[LayoutColorScale] = Field(None, alias="colorscale")
    colorway: Optional[List[Color]] = None
    color_axis: Optional[ColorAxis] = Field(None, alias="coloraxis")
    mode_bar: Optional[ModeBar] = Field(None, alias="modebar")
    hover_mode: Optional[HoverMode] = Field(None, alias="hovermode")
    click_mode: Optional[ClickMode] = Field(None, alias="clickmode")
    drag_mode: Optional[DragMode] = Field(None, alias="dragmode")
    select_direction: Optional[SelectDirection] = Field(None, alias="selectdirection")
    hover_distance: Optional[int] = Field(None, alias="hoverdistance")
    spike_distance: Optional[int] = Field(None, alias="spikedistance")
    hover_label: Optional[Label] = Field(None, alias="hoverlabel")
    template: Optional[Template] = None
    grid: Optional[LayoutGrid] = None
    calendar: Optional[Calendar] = None
    x_axis: Optional[Axis] = Field(None, alias="xaxis")
    y_axis: Optional[Axis] = Field(None, alias="yaxis")
    z_axis: Optional[Axis] = Field(None, alias="zaxis")
    x_axis2: Optional[Axis] = Field(None, alias="xaxis2")
    y_axis2: Optional[Axis] = Field(None, alias="yaxis2")
    z_axis2: Optional[Axis] = Field(None, alias="zaxis2")
    x_axis3: Optional[Axis] = Field(None, alias="xaxis3")
    y_axis3: Optional[Axis] = Field(None, alias="yaxis3")
    z_axis3: Optional[Axis] = Field(None, alias="zaxis3")
    x_axis4: Optional[Axis] = Field(None, alias="xaxis4")
    y_axis4: Optional[Axis] = Field(None, alias="yaxis4")
    z_axis4: Optional[Axis] = Field(None, alias="zaxis4")
    x_axis5: Optional[Axis] = Field(None, alias="xaxis5")
    y_axis5: Optional[Axis] = Field(None, alias="yaxis5")
    z_axis5: Optional[Axis] = Field(None, alias="zaxis5")
    x_axis6: Optional[Axis] = Field(None, alias="xaxis6")
    y_axis6: Optional[Axis] = Field(None, alias="yaxis6")
    z_axis6: Optional[Axis] = Field(None, alias="zaxis6")
    x_axis7: Optional[Axis] = Field(None, alias="xaxis7")
    y_axis7: Optional[Axis] = Field(None, alias="yaxis7")
    z_axis7: Optional[Axis] = Field(None, alias="zaxis7")
    x_axis8: Optional[Axis] = Field(None, alias="xaxis8")
    y_axis8: Optional[Axis] = Field(None, alias="yaxis8")
    z_axis8: Optional[Axis] = Field(None, alias="zaxis8")
    scene: Optional[LayoutScene] = None
    geo: Optional[LayoutGeo] = None
    polar: Optional[LayoutPolar] = None
    mapbox: Optional[Mapbox] = None
    annotations: Optional[List[Annotation]] = None
    shapes: Optional[List[Shape]] = None
    new_shape: Optional[NewShape] = Field(None, alias="newshape")
    active_shape: Optional[ActiveShape] = Field(None, alias="activeshape")
    box_mode: Optional[BoxMode] = Field(None, alias="boxmode")
    box_gap: Optional[float] = Field(None, alias="boxgap")
    box_group_gap: Optional[float] = Field(None, alias="boxgroupgap")
    bar_mode: Optional[BarMode] = Field(None, alias="barmode")
    bar_norm: Optional[BarNorm] = Field(None, alias="barnorm")
    bar_gap: Optional[float] = Field(None, alias="bargap")
    bar_group_gap: Optional[float] = Field(None, alias="bargroupgap")
    violin_mode: Optional[ViolinMode] = Field(None, alias="violinmode")
    violin_gap: Optional[float] = Field(None, alias="violingap")
    violin_group_gap: Optional[float] = Field(None, alias="violingroupgap")
    waterfall_mode: Optional[WaterfallMode] = Field(None, alias="waterfallmode")
    waterfall_gap: Optional[float] = Field(None, alias="waterfallgap")
    waterfall_group_gap: Optional[float] = Field(None, alias="waterfallgroupgap")
    pie_colorway: Optional[List[Color]] = Field(None, alias="piecolorway")
    extend_pie_colors: Optional[bool] = Field(None, alias="extendpiecolors")
    sunburst_colorway: Optional[List[Color]] = Field(None, alias="sunburstcolorway")
    extend_sunburst_colors: Optional[bool] = Field(None, alias="extendsunburstcolors")
    update_menus: Optional[List[UpdateMenu]] = Field(None, alias="updatemenus")
    sliders: Optional[List[Slider]] = None

    # axes whose key is not one of the fixed slots above, e.g. "xaxis9"
    extra_axes: Dict[str, Axis] = Field(default_factory=dict, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def _collect_extra_axes(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        known = cls._layout_keys()
        extra = {
            k: v for k, v in data.items()
            if isinstance(k, str) and k not in known and _OVERFLOW_KEY.match(k)
        }
        if not extra:
            return data
        data = {k: v for k, v in data.items() if k not in extra}
        data["extra_axes"] = {**(data.get("extra_axes") or {}), **extra}
        return data

    @classmethod
    def _layout_keys(cls) -> set:
        keys = set(cls.model_fields)
        keys.update(info.alias for info in cls.model_fields.values() if info.alias)
        return keys

    @classmethod
    def _check_overflow_name(cls, name: str) -> None:
        if name in cls._layout_keys():
            raise ChartSpecError(f"'{name}' is a layout attribute, not a free axis name")

    @field_validator("template", mode="before")
    @classmethod
    def _theme_to_template(cls, v: Any) -> Any:
        if isinstance(v, str):
            return BuiltinTheme(v).build()
        return v

    @model_serializer(mode="wrap")
    def _serialize(self, handler):
        data = handler(self)
        for key, axis in self.extra_axes.items():
            data[key] = axis.to_dict()
        return data

    # ---------- Named axes ----------

    def axis_by_name(self, name: str, axis: Axis) -> "Layout":
        """Place ``axis`` under layout key ``name``; fixed slots first, overflow map otherwise."""
        slot = _AXIS_SLOTS.get(name)
        if slot is not None:
            setattr(self, slot, axis)
        else:
            self._check_overflow_name(name)
            self.extra_axes[name] = Axis.model_validate(axis)
        return self

    def set_x_axis(self, index: int, axis: Axis) -> "Layout":
        return self.axis_by_name(axis_key("x", index), axis)

    def set_y_axis(self, index: int, axis: Axis) -> "Layout":
        return self.axis_by_name(axis_key("y", index), axis)

    def set_z_axis(self, index: int, axis: Axis) -> "Layout":
        return self.axis_by_name(axis_key("z", index), axis)

    def get_axis(self, name: str) -> Optional[Axis]:
        slot = _AXIS_SLOTS.get(name)
        if slot is not None:
            return getattr(self, slot)
        return self.extra_axes.get(name)

    def axes(self) -> Dict[str, Axis]:
        """Every axis that is set, keyed by its layout key."""
        out = {key: getattr(self, slot) for key, slot in _AXIS_SLOTS.items() if getattr(self, slot) is not None}
        out.update(self.extra_axes)
        return out

    @classmethod
    def modify_axis_by_name(cls, name: str, axis: Axis) -> Relayout:
        if name in _AXIS_SLOTS:
            return Relayout({name: _dump_field(cls, _AXIS_SLOTS[name], axis, False)})
        cls._check_overflow_name(name)
        return Relayout({name: Axis.model_validate(axis).to_dict()})


_AXIS_SLOTS: Dict[str, str] = {
    info.alias: name
    for name, info in Layout.model_fields.items()
    if info.alias and _AXIS_KEY.match(info.alias)
}
