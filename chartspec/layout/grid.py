from __future__ import annotations
from enum import Enum
from typing import List, Optional

from pydantic import Field

from ..base import SpecModel


class RowOrder(str, Enum):
    top_to_bottom = "top to bottom"
    bottom_to_top = "bottom to top"


class GridPattern(str, Enum):
    independent = "independent"
    coupled = "coupled"


class GridXSide(str, Enum):
    bottom = "bottom"
    bottom_plot = "bottom plot"
    top_plot = "top plot"
    top = "top"


class GridYSide(str, Enum):
    left = "left"
    left_plot = "left plot"
    right_plot = "right plot"
    right = "right"


class GridDomain(SpecModel):
    x: Optional[List[float]] = None
    y: Optional[List[float]] = None


class LayoutGrid(SpecModel):
    rows: Optional[int] = None
    row_order: Optional[RowOrder] = Field(None, alias="roworder")
    columns: Optional[int] = None
    sub_plots: Optional[List[str]] = Field(None, alias="subplots")
    x_axes: Optional[List[str]] = Field(None, alias="xaxes")
    y_axes: Optional[List[str]] = Field(None, alias="yaxes")
    pattern: Optional[GridPattern] = None
    x_gap: Optional[float] = Field(None, alias="xgap")
    y_gap: Optional[float] = Field(None, alias="ygap")
    domain: Optional[GridDomain] = None
    x_side: Optional[GridXSide] = Field(None, alias="xside")
    y_side: Optional[GridYSide] = Field(None, alias="yside")
