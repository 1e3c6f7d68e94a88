from __future__ import annotations
import re
from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, model_serializer


__all__ = ["NamedColor", "Rgb", "Rgba", "Color"]

_HEX = re.compile(r"^#?([0-9a-fA-F]{6})$")


class NamedColor(str, Enum):
    """CSS colour keywords understood by plotly.js."""
    alice_blue = "aliceblue"
    antique_white = "antiquewhite"
    aqua = "aqua"
    aquamarine = "aquamarine"
    azure = "azure"
    beige = "beige"
    bisque = "bisque"
    black = "black"
    blanched_almond = "blanchedalmond"
    blue = "blue"
    blue_violet = "blueviolet"
    brown = "brown"
    burly_wood = "burlywood"
    cadet_blue = "cadetblue"
    chartreuse = "chartreuse"
    chocolate = "chocolate"
    coral = "coral"
    cornflower_blue = "cornflowerblue"
    corn_silk = "cornsilk"
    crimson = "crimson"
    cyan = "cyan"
    dark_blue = "darkblue"
    dark_cyan = "darkcyan"
    dark_goldenrod = "darkgoldenrod"
    dark_gray = "darkgray"
    dark_green = "darkgreen"
    dark_grey = "darkgrey"
    dark_khaki = "darkkhaki"
    dark_magenta = "darkmagenta"
    dark_olive_green = "darkolivegreen"
    dark_orange = "darkorange"
    dark_orchid = "darkorchid"
    dark_red = "darkred"
    dark_salmon = "darksalmon"
    dark_sea_green = "darkseagreen"
    dark_slate_blue = "darkslateblue"
    dark_slate_gray = "darkslategray"
    dark_slate_grey = "darkslategrey"
    dark_turquoise = "darkturquoise"
    dark_violet = "darkviolet"
    deep_pink = "deeppink"
    deep_sky_blue = "deepskyblue"
    dim_gray = "dimgray"
    dim_grey = "dimgrey"
    dodger_blue = "dodgerblue"
    fire_brick = "firebrick"
    floral_white = "floralwhite"
    forest_green = "forestgreen"
    fuchsia = "fuchsia"
    gainsboro = "gainsboro"
    ghost_white = "ghostwhite"
    gold = "gold"
    goldenrod = "goldenrod"
    gray = "gray"
    green = "green"
    green_yellow = "greenyellow"
    grey = "grey"
    honeydew = "honeydew"
    hot_pink = "hotpink"
    indian_red = "indianred"
    indigo = "indigo"
    ivory = "ivory"
    khaki = "khaki"
    lavender = "lavender"
    lavender_blush = "lavenderblush"
    lawn_green = "lawngreen"
    lemon_chiffon = "lemonchiffon"
    light_blue = "lightblue"
    light_coral = "lightcoral"
    light_cyan = "lightcyan"
    light_goldenrod_yellow = "lightgoldenrodyellow"
    light_gray = "lightgray"
    light_green = "lightgreen"
    light_grey = "lightgrey"
    light_pink = "lightpink"
    light_salmon = "lightsalmon"
    light_sea_green = "lightseagreen"
    light_sky_blue = "lightskyblue"
    light_slate_gray = "lightslategray"
    light_slate_grey = "lightslategrey"
    light_steel_blue = "lightsteelblue"
    light_yellow = "lightyellow"
    lime = "lime"
    lime_green = "limegreen"
    linen = "linen"
    magenta = "magenta"
    maroon = "maroon"
    medium_aquamarine = "mediumaquamarine"
    medium_blue = "mediumblue"
    medium_orchid = "mediumorchid"
    medium_purple = "mediumpurple"
    medium_sea_green = "mediumseagreen"
    medium_slate_blue = "mediumslateblue"
    medium_spring_green = "mediumspringgreen"
    medium_turquoise = "mediumturquoise"
    medium_violet_red = "mediumvioletred"
    midnight_blue = "midnightblue"
    mint_cream = "mintcream"
    misty_rose = "mistyrose"
    moccasin = "moccasin"
    navajo_white = "navajowhite"
    navy = "navy"
    old_lace = "oldlace"
    olive = "olive"
    olive_drab = "olivedrab"
    orange = "orange"
    orange_red = "orangered"
    orchid = "orchid"
    pale_goldenrod = "palegoldenrod"
    pale_green = "palegreen"
    pale_turquoise = "paleturquoise"
    pale_violet_red = "palevioletred"
    papaya_whip = "papayawhip"
    peach_puff = "peachpuff"
    peru = "peru"
    pink = "pink"
    plum = "plum"
    powder_blue = "powderblue"
    purple = "purple"
    rebecca_purple = "rebeccapurple"
    red = "red"
    rosy_brown = "rosybrown"
    royal_blue = "royalblue"
    saddle_brown = "saddlebrown"
    salmon = "salmon"
    sandy_brown = "sandybrown"
    sea_green = "seagreen"
    seashell = "seashell"
    sienna = "sienna"
    silver = "silver"
    sky_blue = "skyblue"
    slate_blue = "slateblue"
    slate_gray = "slategray"
    slate_grey = "slategrey"
    snow = "snow"
    spring_green = "springgreen"
    steel_blue = "steelblue"
    tan = "tan"
    teal = "teal"
    thistle = "thistle"
    tomato = "tomato"
    turquoise = "turquoise"
    violet = "violet"
    wheat = "wheat"
    white = "white"
    white_smoke = "whitesmoke"
    yellow = "yellow"
    yellow_green = "yellowgreen"
    transparent = "transparent"


class Rgb(BaseModel):
    model_config = ConfigDict(frozen=True)

    r: int = Field(..., ge=0, le=255)
    g: int = Field(..., ge=0, le=255)
    b: int = Field(..., ge=0, le=255)

    def __init__(self, r: int, g: int, b: int, **kw):
        super().__init__(r=r, g=g, b=b, **kw)

    @classmethod
    def from_hex(cls, value: str) -> "Rgb":
        m = _HEX.match(value.strip())
        if not m:
            raise ValueError(f"Invalid hex color: {value}")
        h = m.group(1)
        return cls(int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))

    def css(self) -> str:
        return f"rgb({self.r}, {self.g}, {self.b})"

    @model_serializer
    def _serialize(self) -> str:
        return self.css()

    def __str__(self) -> str:
        return self.css()


class Rgba(BaseModel):
    model_config = ConfigDict(frozen=True)

    r: int = Field(..., ge=0, le=255)
    g: int = Field(..., ge=0, le=255)
    b: int = Field(..., ge=0, le=255)
    a: float = Field(..., ge=0.0, le=1.0)

    def __init__(self, r: int, g: int, b: int, a: float, **kw):
        super().__init__(r=r, g=g, b=b, a=a, **kw)

    def css(self) -> str:
        return f"rgba({self.r}, {self.g}, {self.b}, {self.a})"

    @model_serializer
    def _serialize(self) -> str:
        return self.css()

    def __str__(self) -> str:
        return self.css()


# Numbers are mapped through a colorscale by plotly.js; strings pass through (hex, hsl(), ...).
Color = Union[NamedColor, Rgb, Rgba, float, int, str]