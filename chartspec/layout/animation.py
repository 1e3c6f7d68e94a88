from __future__ import annotations
from enum import Enum
from typing import List, Optional

from pydantic import Field, PrivateAttr, SerializeAsAny, model_serializer

from ..base import LayoutModel, SpecModel, TraceModel


class AnimationMode(str, Enum):
    immediate = "immediate"
    next = "next"
    after_all = "afterall"


class AnimationDirection(str, Enum):
    forward = "forward"
    reverse = "reverse"


class TransitionOrdering(str, Enum):
    layout_first = "layout first"
    traces_first = "traces first"


class AnimationEasing(str, Enum):
    linear = "linear"
    quad = "quad"
    cubic = "cubic"
    sin = "sin"
    exp = "exp"
    circle = "circle"
    elastic = "elastic"
    back = "back"
    bounce = "bounce"
    linear_in = "linear-in"
    quad_in = "quad-in"
    cubic_in = "cubic-in"
    sin_in = "sin-in"
    exp_in = "exp-in"
    circle_in = "circle-in"
    elastic_in = "elastic-in"
    back_in = "back-in"
    bounce_in = "bounce-in"
    linear_out = "linear-out"
    quad_out = "quad-out"
    cubic_out = "cubic-out"
    sin_out = "sin-out"
    exp_out = "exp-out"
    circle_out = "circle-out"
    elastic_out = "elastic-out"
    back_out = "back-out"
    bounce_out = "bounce-out"
    linear_in_out = "linear-in-out"
    quad_in_out = "quad-in-out"
    cubic_in_out = "cubic-in-out"
    sin_in_out = "sin-in-out"
    exp_in_out = "exp-in-out"
    circle_in_out = "circle-in-out"
    elastic_in_out = "elastic-in-out"
    back_in_out = "back-in-out"
    bounce_in_out = "bounce-in-out"


class FrameSettings(SpecModel):
    duration: Optional[int] = None
    redraw: Optional[bool] = None


class TransitionSettings(SpecModel):
    duration: Optional[int] = None
    easing: Optional[AnimationEasing] = None
    ordering: Optional[TransitionOrdering] = None


class AnimationOptions(SpecModel):
    frame: Optional[FrameSettings] = None
    transition: Optional[TransitionSettings] = None
    mode: Optional[AnimationMode] = None
    direction: Optional[AnimationDirection] = None
    fromcurrent: Optional[bool] = None


_PAUSE = [None]


class Animation(SpecModel):
    """Arguments of ``Plotly.animate``: serializes to ``[frames, options]``.

    ``frames`` is ``None`` to play every frame, a list of frame names or group
    names to play a subset, or ``[None]`` to pause the running animation.
    Only ``pause()`` produces the ``[None]`` selector.
    """

    selection: Optional[List[str]] = None
    options: AnimationOptions = Field(default_factory=AnimationOptions)
    _paused: bool = PrivateAttr(default=False)

    @classmethod
    def all_frames(cls) -> "Animation":
        return cls()

    @classmethod
    def frames(cls, names: List[str]) -> "Animation":
        return cls(selection=list(names))

    @classmethod
    def pause(cls) -> "Animation":
        anim = cls(
            options=AnimationOptions(
                mode=AnimationMode.immediate,
                frame=FrameSettings(duration=0, redraw=False),
                transition=TransitionSettings(duration=0),
            ),
        )
        anim._paused = True
        return anim

    def with_options(self, options: AnimationOptions) -> "Animation":
        self.options = options
        return self

    def is_pause(self) -> bool:
        return self._paused

    @model_serializer
    def _serialize(self):
        selection = list(_PAUSE) if self._paused else self.selection
        return [selection, self.options.to_dict()]


class Frame(SpecModel):
    """A named animation frame: trace and layout values the plot morphs towards."""

    group: Optional[str] = None
    name: Optional[str] = None
    traces: Optional[List[int]] = None
    baseframe: Optional[str] = None
    data: Optional[List[SerializeAsAny[TraceModel]]] = None
    layout: Optional[SerializeAsAny[LayoutModel]] = None
