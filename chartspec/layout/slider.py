from __future__ import annotations
import logging
from enum import Enum
from typing import Any, List, Optional

from pydantic import Field, model_serializer
from pydantic_core import PydanticSerializationError, to_jsonable_python

from ..base import SpecModel
from ..color import Color
from ..common import Anchor, Font, NumOrString, Pad
from ..errors import ChartSpecError, ControlBuilderError, ControlErrorKind
from .animation import Animation, AnimationEasing
from .controls import ControlMethod, DeltaCollector, method_and_args

logger = logging.getLogger(__name__)

SliderMethod = ControlMethod
SliderTransitionEasing = AnimationEasing


class SliderStep(SpecModel):
    args: Optional[Any] = None
    args2: Optional[Any] = None
    execute: Optional[bool] = None
    label: Optional[str] = None
    method: Optional[SliderMethod] = None
    name: Optional[str] = None
    template_item_name: Optional[str] = Field(None, alias="templateitemname")
    visible: Optional[bool] = None
    value: Optional[Any] = None

    @model_serializer(mode="wrap")
    def _serialize(self, handler):
        data = handler(self)
        if self.method is not None and "args" not in data:
            data = {"args": None, **data}
        return data


class SliderStepBuilder:
    """Like ButtonBuilder, plus a step value and an optional animation taking precedence."""

    def __init__(self):
        self._fields = {}
        self._deltas = DeltaCollector()
        self._animation: Optional[Animation] = None

    def label(self, label: str) -> "SliderStepBuilder":
        self._fields["label"] = label
        return self

    def name(self, name: str) -> "SliderStepBuilder":
        self._fields["name"] = name
        return self

    def execute(self, execute: bool) -> "SliderStepBuilder":
        self._fields["execute"] = execute
        return self

    def template_item_name(self, template_item_name: str) -> "SliderStepBuilder":
        self._fields["template_item_name"] = template_item_name
        return self

    def visible(self, visible: bool) -> "SliderStepBuilder":
        self._fields["visible"] = visible
        return self

    def value(self, value: NumOrString) -> "SliderStepBuilder":
        if self._deltas.error is not None:
            return self
        try:
            self._fields["value"] = to_jsonable_python(value)
        except (PydanticSerializationError, TypeError, ValueError) as e:
            self._deltas.latch(ControlBuilderError(ControlErrorKind.value_serialization_error, str(e)))
        return self

    def animation(self, animation: Animation) -> "SliderStepBuilder":
        self._animation = animation
        return self

    def push_restyle(self, delta: Any) -> "SliderStepBuilder":
        self._deltas.push_restyle(delta)
        return self

    def push_relayout(self, delta: Any) -> "SliderStepBuilder":
        self._deltas.push_relayout(delta)
        return self

    def build(self) -> SliderStep:
        self._deltas.raise_latched()
        if self._animation is not None:
            try:
                method, args = SliderMethod.animate, self._animation.to_dict()
            except (ChartSpecError, PydanticSerializationError) as e:
                raise ControlBuilderError(ControlErrorKind.animation_serialization_error, str(e)) from e
        else:
            method, args = method_and_args(self._deltas.restyles, self._deltas.relayouts)
        logger.debug("built slider step %r with method %s", self._fields.get("label"), method.value)
        return SliderStep(method=method, args=args, **self._fields)


class SliderCurrentValueXAnchor(str, Enum):
    left = "left"
    center = "center"
    right = "right"


class SliderCurrentValue(SpecModel):
    font: Optional[Font] = None
    offset: Optional[int] = None
    prefix: Optional[str] = None
    suffix: Optional[str] = None
    visible: Optional[bool] = None
    x_anchor: Optional[SliderCurrentValueXAnchor] = Field(None, alias="xanchor")


class SliderTransition(SpecModel):
    duration: Optional[int] = None
    easing: Optional[SliderTransitionEasing] = None


class Slider(SpecModel):
    active: Optional[int] = None
    active_background_color: Optional[Color] = Field(None, alias="activebgcolor")
    background_color: Optional[Color] = Field(None, alias="bgcolor")
    border_color: Optional[Color] = Field(None, alias="bordercolor")
    border_width: Optional[int] = Field(None, alias="borderwidth")
    current_value: Optional[SliderCurrentValue] = Field(None, alias="currentvalue")
    font: Optional[Font] = None
    length: Optional[float] = Field(None, alias="len")
    minor_tick_length: Optional[int] = Field(None, alias="minorticklen")
    name: Optional[str] = None
    pad: Optional[Pad] = None
    steps: Optional[List[SliderStep]] = None
    template_item_name: Optional[str] = Field(None, alias="templateitemname")
    tick_color: Optional[Color] = Field(None, alias="tickcolor")
    tick_length: Optional[int] = Field(None, alias="ticklen")
    tick_width: Optional[int] = Field(None, alias="tickwidth")
    transition: Optional[SliderTransition] = None
    visible: Optional[bool] = None
    x: Optional[float] = None
    x_anchor: Optional[Anchor] = Field(None, alias="xanchor")
    y: Optional[float] = None
    y_anchor: Optional[Anchor] = Field(None, alias="yanchor")
