from __future__ import annotations
from enum import Enum
from typing import Optional

from pydantic import Field

from ..base import SpecModel
from ..color import Color
from ..common import Anchor, Font, Orientation, Title
from .annotation import VAlign


class TraceOrder(str, Enum):
    reversed = "reversed"
    grouped = "grouped"
    reversed_grouped = "reversed+grouped"
    normal = "normal"


class ItemSizing(str, Enum):
    trace = "trace"
    constant = "constant"


class ItemClick(Enum):
    toggle = "toggle"
    toggle_others = "toggleothers"
    false = False


class GroupClick(str, Enum):
    toggle_item = "toggleitem"
    toggle_group = "togglegroup"


class Legend(SpecModel):
    background_color: Optional[Color] = Field(None, alias="bgcolor")
    border_color: Optional[Color] = Field(None, alias="bordercolor")
    border_width: Optional[int] = Field(None, alias="borderwidth")
    font: Optional[Font] = None
    orientation: Optional[Orientation] = None
    trace_order: Optional[TraceOrder] = Field(None, alias="traceorder")
    trace_group_gap: Optional[int] = Field(None, alias="tracegroupgap")
    item_sizing: Optional[ItemSizing] = Field(None, alias="itemsizing")
    item_click: Optional[ItemClick] = Field(None, alias="itemclick")
    item_double_click: Optional[ItemClick] = Field(None, alias="itemdoubleclick")
    x: Optional[float] = None
    x_anchor: Optional[Anchor] = Field(None, alias="xanchor")
    y: Optional[float] = None
    y_anchor: Optional[Anchor] = Field(None, alias="yanchor")
    valign: Optional[VAlign] = None
    title: Optional[Title] = None
    group_click: Optional[GroupClick] = Field(None, alias="groupclick")
    item_width: Optional[int] = Field(None, alias="itemwidth")
