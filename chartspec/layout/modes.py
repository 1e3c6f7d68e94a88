from __future__ import annotations
from enum import Enum


class BoxMode(str, Enum):
    group = "group"
    overlay = "overlay"


class BarMode(str, Enum):
    stack = "stack"
    group = "group"
    overlay = "overlay"
    relative = "relative"


class BarNorm(str, Enum):
    empty = ""
    fraction = "fraction"
    percent = "percent"


class ClickMode(str, Enum):
    event = "event"
    select = "select"
    event_select = "event+select"
    none = "none"


class ViolinMode(str, Enum):
    group = "group"
    overlay = "overlay"


class WaterfallMode(str, Enum):
    group = "group"
    overlay = "overlay"


class UniformTextMode(Enum):
    false = False
    hide = "hide"
    show = "show"


class HoverMode(Enum):
    x = "x"
    y = "y"
    closest = "closest"
    false = False
    x_unified = "x unified"
    y_unified = "y unified"


class DragMode(Enum):
    zoom = "zoom"
    pan = "pan"
    select = "select"
    lasso = "lasso"
    draw_closed_path = "drawclosedpath"
    draw_open_path = "drawopenpath"
    draw_line = "drawline"
    draw_rect = "drawrect"
    draw_circle = "drawcircle"
    orbit = "orbit"
    turntable = "turntable"
    false = False


class DragMode3D(Enum):
    zoom = "zoom"
    pan = "pan"
    turntable = "turntable"
    orbit = "orbit"
    false = False


class SelectDirection(str, Enum):
    horizontal = "h"
    vertical = "v"
    diagonal = "d"
    any = "any"
