from __future__ import annotations
from enum import Enum
from typing import Any, List, Optional

import numpy as np
from pydantic import Field

from ..base import TraceModel
from ..common import (
    DataArray, Dim, HoverInfo, Label, LegendGroupTitle, NumOrString, PlotType, Visible,
)


class ArrayTraces(str, Enum):
    """How a 2-D array is split into one data vector per trace."""
    over_columns = "over_columns"
    over_rows = "over_rows"


def trace_vectors_from(matrix: Any, over: ArrayTraces) -> List[List[Any]]:
    arr = np.asarray(matrix)
    if arr.ndim != 2:
        raise ValueError(f"expected a 2-D array, got {arr.ndim} dimension(s)")
    if ArrayTraces(over) == ArrayTraces.over_columns:
        arr = arr.T
    return [row.tolist() for row in arr]


class Trace(TraceModel):
    """Fields shared by the series-style chart kinds; ``type`` is overridden per subclass."""

    type: PlotType
    name: Optional[str] = None
    visible: Optional[Visible] = None
    show_legend: Optional[bool] = Field(None, alias="showlegend")
    legend_group: Optional[str] = Field(None, alias="legendgroup")
    legend_group_title: Optional[LegendGroupTitle] = Field(None, alias="legendgrouptitle")
    legend_rank: Optional[int] = Field(None, alias="legendrank")
    opacity: Optional[float] = None
    ids: Optional[List[str]] = None
    meta: Optional[NumOrString] = None
    custom_data: Optional[DataArray] = Field(None, alias="customdata")
    hover_info: Optional[HoverInfo] = Field(None, alias="hoverinfo")
    hover_label: Optional[Label] = Field(None, alias="hoverlabel")
    hover_template: Optional[Dim[str]] = Field(None, alias="hovertemplate")
    hover_text: Optional[Dim[str]] = Field(None, alias="hovertext")
    ui_revision: Optional[NumOrString] = Field(None, alias="uirevision")
