from __future__ import annotations
from enum import Enum
from typing import Optional

from pydantic import Field

from ..base import SpecModel
from ..color import Color
from ..common import Anchor, Font, Label, NumOrString


class VAlign(str, Enum):
    top = "top"
    middle = "middle"
    bottom = "bottom"


class HAlign(str, Enum):
    left = "left"
    center = "center"
    right = "right"


class ArrowSide(str, Enum):
    end = "end"
    start = "start"
    start_end = "end+start"
    none = "none"


class ClickToShow(Enum):
    false = False
    on_off = "onoff"
    on_out = "onout"


class Annotation(SpecModel):
    visible: Optional[bool] = None
    text: Optional[str] = None
    text_angle: Optional[float] = Field(None, alias="textangle")
    font: Optional[Font] = None
    width: Optional[float] = None
    height: Optional[float] = None
    opacity: Optional[float] = None
    align: Optional[HAlign] = None
    valign: Optional[VAlign] = None
    background_color: Optional[Color] = Field(None, alias="bgcolor")
    border_color: Optional[Color] = Field(None, alias="bordercolor")
    border_pad: Optional[float] = Field(None, alias="borderpad")
    border_width: Optional[float] = Field(None, alias="borderwidth")
    show_arrow: Optional[bool] = Field(None, alias="showarrow")
    arrow_color: Optional[Color] = Field(None, alias="arrowcolor")
    arrow_head: Optional[int] = Field(None, alias="arrowhead")
    start_arrow_head: Optional[int] = Field(None, alias="startarrowhead")
    arrow_side: Optional[ArrowSide] = Field(None, alias="arrowside")
    arrow_size: Optional[float] = Field(None, alias="arrowsize")
    start_arrow_size: Optional[float] = Field(None, alias="startarrowsize")
    arrow_width: Optional[float] = Field(None, alias="arrowwidth")
    stand_off: Optional[float] = Field(None, alias="standoff")
    start_stand_off: Optional[float] = Field(None, alias="startstandoff")
    ax: Optional[NumOrString] = None
    ay: Optional[NumOrString] = None
    ax_ref: Optional[str] = Field(None, alias="axref")
    ay_ref: Optional[str] = Field(None, alias="ayref")
    x_ref: Optional[str] = Field(None, alias="xref")
    x: Optional[NumOrString] = None
    x_anchor: Optional[Anchor] = Field(None, alias="xanchor")
    x_shift: Optional[float] = Field(None, alias="xshift")
    y_ref: Optional[str] = Field(None, alias="yref")
    y: Optional[NumOrString] = None
    y_anchor: Optional[Anchor] = Field(None, alias="yanchor")
    y_shift: Optional[float] = Field(None, alias="yshift")
    click_to_show: Optional[ClickToShow] = Field(None, alias="clicktoshow")
    x_click: Optional[NumOrString] = Field(None, alias="xclick")
    y_click: Optional[NumOrString] = Field(None, alias="yclick")
    hover_text: Optional[str] = Field(None, alias="hovertext")
    hover_label: Optional[Label] = Field(None, alias="hoverlabel")
    capture_events: Optional[bool] = Field(None, alias="captureevents")
    name: Optional[str] = None
    template_item_name: Optional[str] = Field(None, alias="templateitemname")
