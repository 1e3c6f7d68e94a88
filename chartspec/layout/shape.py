from __future__ import annotations
from enum import Enum
from typing import Optional, Union

from pydantic import Field

from ..base import SpecModel
from ..color import Color
from ..common import DashType, NumOrString


class ShapeType(str, Enum):
    circle = "circle"
    rect = "rect"
    path = "path"
    line = "line"


class ShapeLayer(str, Enum):
    below = "below"
    above = "above"


class ShapeSizeMode(str, Enum):
    scaled = "scaled"
    pixel = "pixel"


class FillRule(str, Enum):
    even_odd = "evenodd"
    non_zero = "nonzero"


class DrawDirection(str, Enum):
    ortho = "ortho"
    horizontal = "horizontal"
    vertical = "vertical"
    diagonal = "diagonal"


class ShapeLine(SpecModel):
    color: Optional[Color] = None
    width: Optional[float] = None
    # a DashType or a px dash list such as "5px,10px,2px,2px"
    dash: Optional[Union[DashType, str]] = None


class Shape(SpecModel):
    visible: Optional[bool] = None
    type: Optional[ShapeType] = None
    layer: Optional[ShapeLayer] = None
    x_ref: Optional[str] = Field(None, alias="xref")
    x_size_mode: Optional[ShapeSizeMode] = Field(None, alias="xsizemode")
    x_anchor: Optional[NumOrString] = Field(None, alias="xanchor")
    x0: Optional[NumOrString] = None
    x1: Optional[NumOrString] = None
    y_ref: Optional[str] = Field(None, alias="yref")
    y_size_mode: Optional[ShapeSizeMode] = Field(None, alias="ysizemode")
    y_anchor: Optional[NumOrString] = Field(None, alias="yanchor")
    y0: Optional[NumOrString] = None
    y1: Optional[NumOrString] = None
    path: Optional[str] = None
    opacity: Optional[float] = None
    line: Optional[ShapeLine] = None
    fill_color: Optional[Color] = Field(None, alias="fillcolor")
    fill_rule: Optional[FillRule] = Field(None, alias="fillrule")
    editable: Optional[bool] = None
    name: Optional[str] = None
    template_item_name: Optional[str] = Field(None, alias="templateitemname")


class NewShape(SpecModel):
    """Defaults applied to shapes the user draws in the browser."""

    line: Optional[ShapeLine] = None
    fill_color: Optional[Color] = Field(None, alias="fillcolor")
    fill_rule: Optional[FillRule] = Field(None, alias="fillrule")
    opacity: Optional[float] = None
    layer: Optional[ShapeLayer] = None
    draw_direction: Optional[DrawDirection] = Field(None, alias="drawdirection")


class ActiveShape(SpecModel):
    fill_color: Optional[Color] = Field(None, alias="fillcolor")
    opacity: Optional[float] = None
