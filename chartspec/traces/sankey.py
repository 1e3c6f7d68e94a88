from __future__ import annotations
from enum import Enum
from typing import Any, List, Optional

from pydantic import Field

from ..base import SpecModel, TraceModel
from ..color import Color
from ..common import (
    DataArray, Dim, Domain, Font, HoverInfo, Label, LegendGroupTitle, Orientation, PlotType,
)


class Arrangement(str, Enum):
    snap = "snap"
    perpendicular = "perpendicular"
    freeform = "freeform"
    fixed = "fixed"


class SankeyLine(SpecModel):
    color: Optional[Dim[Color]] = None
    width: Optional[float] = None


class Node(SpecModel):
    color: Optional[Dim[Color]] = None
    hover_info: Optional[HoverInfo] = Field(None, alias="hoverinfo")
    hover_label: Optional[Label] = Field(None, alias="hoverlabel")
    hover_template: Optional[Dim[str]] = Field(None, alias="hovertemplate")
    label: Optional[List[str]] = None
    line: Optional[SankeyLine] = None
    pad: Optional[int] = None
    thickness: Optional[int] = None
    x: Optional[List[float]] = None
    y: Optional[List[float]] = None


class Link(SpecModel):
    color: Optional[Dim[Color]] = None
    hover_info: Optional[HoverInfo] = Field(None, alias="hoverinfo")
    hover_label: Optional[Label] = Field(None, alias="hoverlabel")
    hover_template: Optional[Dim[str]] = Field(None, alias="hovertemplate")
    line: Optional[SankeyLine] = None
    source: Optional[List[int]] = None
    target: Optional[List[int]] = None
    value: Optional[DataArray] = None
    label: Optional[List[str]] = None


class Sankey(TraceModel):
    """Flow diagram: ``node`` labels plus ``link`` source/target/value triplets."""

    type: PlotType = PlotType.sankey
    name: Optional[str] = None
    visible: Optional[bool] = None
    arrangement: Optional[Arrangement] = None
    domain: Optional[Domain] = None
    ids: Optional[List[str]] = None
    hover_info: Optional[HoverInfo] = Field(None, alias="hoverinfo")
    hover_label: Optional[Label] = Field(None, alias="hoverlabel")
    legend_group_title: Optional[LegendGroupTitle] = Field(None, alias="legendgrouptitle")
    legend_rank: Optional[int] = Field(None, alias="legendrank")
    link: Optional[Link] = None
    node: Optional[Node] = None
    orientation: Optional[Orientation] = None
    selected_points: Optional[List[int]] = Field(None, alias="selectedpoints")
    text_font: Optional[Font] = Field(None, alias="textfont")
    value_format: Optional[str] = Field(None, alias="valueformat")
    value_suffix: Optional[str] = Field(None, alias="valuesuffix")

    @classmethod
    def new(cls, **fields: Any) -> "Sankey":
        return cls(**fields)
