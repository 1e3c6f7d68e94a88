from __future__ import annotations
import logging
from enum import Enum
from typing import Any, List, Optional

from pydantic import Field, model_serializer

from ..base import SpecModel
from ..color import Color
from ..common import Anchor, Font, Pad
from .controls import ControlMethod, DeltaCollector, method_and_args

logger = logging.getLogger(__name__)

ButtonMethod = ControlMethod


class Button(SpecModel):
    args: Optional[Any] = None
    args2: Optional[Any] = None
    execute: Optional[bool] = None
    label: Optional[str] = None
    method: Optional[ButtonMethod] = None
    name: Optional[str] = None
    template_item_name: Optional[str] = Field(None, alias="templateitemname")
    visible: Optional[bool] = None

    @model_serializer(mode="wrap")
    def _serialize(self, handler):
        data = handler(self)
        # "skip" carries an explicit null args
        if self.method is not None and "args" not in data:
            data = {"args": None, **data}
        return data


class ButtonBuilder:
    """Assemble a Button from restyle/relayout deltas; the method is inferred on build()."""

    def __init__(self):
        self._fields = {}
        self._deltas = DeltaCollector()

    def label(self, label: str) -> "ButtonBuilder":
        self._fields["label"] = label
        return self

    def name(self, name: str) -> "ButtonBuilder":
        self._fields["name"] = name
        return self

    def args2(self, args2: Any) -> "ButtonBuilder":
        self._fields["args2"] = args2
        return self

    def execute(self, execute: bool) -> "ButtonBuilder":
        self._fields["execute"] = execute
        return self

    def template_item_name(self, template_item_name: str) -> "ButtonBuilder":
        self._fields["template_item_name"] = template_item_name
        return self

    def visible(self, visible: bool) -> "ButtonBuilder":
        self._fields["visible"] = visible
        return self

    def push_restyle(self, delta: Any) -> "ButtonBuilder":
        self._deltas.push_restyle(delta)
        return self

    def push_relayout(self, delta: Any) -> "ButtonBuilder":
        self._deltas.push_relayout(delta)
        return self

    def build(self) -> Button:
        self._deltas.raise_latched()
        method, args = method_and_args(self._deltas.restyles, self._deltas.relayouts)
        logger.debug("built button %r with method %s", self._fields.get("label"), method.value)
        return Button(method=method, args=args, **self._fields)


class UpdateMenuType(str, Enum):
    dropdown = "dropdown"
    buttons = "buttons"


class UpdateMenuDirection(str, Enum):
    left = "left"
    right = "right"
    up = "up"
    down = "down"


class UpdateMenu(SpecModel):
    active: Optional[int] = None
    background_color: Optional[Color] = Field(None, alias="bgcolor")
    border_color: Optional[Color] = Field(None, alias="bordercolor")
    border_width: Optional[int] = Field(None, alias="borderwidth")
    buttons: Optional[List[Button]] = None
    direction: Optional[UpdateMenuDirection] = None
    font: Optional[Font] = None
    name: Optional[str] = None
    pad: Optional[Pad] = None
    show_active: Optional[bool] = Field(None, alias="showactive")
    template_item_name: Optional[str] = Field(None, alias="templateitemname")
    type: Optional[UpdateMenuType] = None
    visible: Optional[bool] = None
    x: Optional[float] = None
    x_anchor: Optional[Anchor] = Field(None, alias="xanchor")
    y: Optional[float] = None
    y_anchor: Optional[Anchor] = Field(None, alias="yanchor")
