from __future__ import annotations
from enum import Enum
from typing import Any, List, Optional

from pydantic import Field

from ..base import SpecModel
from ..common import (
    Calendar, DataArray, Dim, ErrorData, Marker, NumOrString, Orientation, PlotType,
)
from .common import ArrayTraces, Trace, trace_vectors_from


class Bins(SpecModel):
    start: Optional[NumOrString] = None
    end: Optional[NumOrString] = None
    size: Optional[NumOrString] = None

    @classmethod
    def new(cls, start: NumOrString, end: NumOrString, size: NumOrString) -> "Bins":
        return cls(start=start, end=end, size=size)


class HistDirection(str, Enum):
    increasing = "increasing"
    decreasing = "decreasing"


class CurrentBin(str, Enum):
    include = "include"
    exclude = "exclude"
    half = "half"


class Cumulative(SpecModel):
    enabled: Optional[bool] = None
    direction: Optional[HistDirection] = None
    current_bin: Optional[CurrentBin] = Field(None, alias="currentbin")


class HistFunc(str, Enum):
    count = "count"
    sum = "sum"
    average = "avg"
    minimum = "min"
    maximum = "max"


class HistNorm(str, Enum):
    default = ""
    percent = "percent"
    probability = "probability"
    density = "density"
    probability_density = "probability density"


class Histogram(Trace):
    """Binning is performed by plotly.js; only the binning parameters are carried here."""

    type: PlotType = PlotType.histogram
    x: Optional[DataArray] = None
    y: Optional[DataArray] = None
    text: Optional[Dim[str]] = None
    x_axis: Optional[str] = Field(None, alias="xaxis")
    y_axis: Optional[str] = Field(None, alias="yaxis")
    orientation: Optional[Orientation] = None
    alignment_group: Optional[str] = Field(None, alias="alignmentgroup")
    offset_group: Optional[str] = Field(None, alias="offsetgroup")
    bin_group: Optional[str] = Field(None, alias="bingroup")
    auto_bin_x: Optional[bool] = Field(None, alias="autobinx")
    auto_bin_y: Optional[bool] = Field(None, alias="autobiny")
    n_bins_x: Optional[int] = Field(None, alias="nbinsx")
    n_bins_y: Optional[int] = Field(None, alias="nbinsy")
    x_bins: Optional[Bins] = Field(None, alias="xbins")
    y_bins: Optional[Bins] = Field(None, alias="ybins")
    cumulative: Optional[Cumulative] = None
    hist_func: Optional[HistFunc] = Field(None, alias="histfunc")
    hist_norm: Optional[HistNorm] = Field(None, alias="histnorm")
    marker: Optional[Marker] = None
    error_x: Optional[ErrorData] = None
    error_y: Optional[ErrorData] = None
    x_calendar: Optional[Calendar] = Field(None, alias="xcalendar")
    y_calendar: Optional[Calendar] = Field(None, alias="ycalendar")

    @classmethod
    def new(cls, x: Any, **fields: Any) -> "Histogram":
        return cls(x=x, **fields)

    @classmethod
    def new_xy(cls, x: Any, y: Any, **fields: Any) -> "Histogram":
        return cls(x=x, y=y, **fields)

    @classmethod
    def new_vertical(cls, y: Any, **fields: Any) -> "Histogram":
        return cls(y=y, **fields)

    def to_traces(self, matrix: Any, over: ArrayTraces = ArrayTraces.over_columns) -> List["Histogram"]:
        return [self.model_copy(deep=True).update(x=xs) for xs in trace_vectors_from(matrix, over)]
