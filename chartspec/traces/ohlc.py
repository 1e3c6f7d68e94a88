from __future__ import annotations
from typing import Any, Optional

from pydantic import Field

from ..common import Calendar, DataArray, Dim, Direction, Line, NumArray, PlotType
from .common import Trace


class Ohlc(Trace):
    type: PlotType = PlotType.ohlc
    x: Optional[DataArray] = None
    open: Optional[NumArray] = None
    high: Optional[NumArray] = None
    low: Optional[NumArray] = None
    close: Optional[NumArray] = None
    text: Optional[Dim[str]] = None
    x_axis: Optional[str] = Field(None, alias="xaxis")
    y_axis: Optional[str] = Field(None, alias="yaxis")
    line: Optional[Line] = None
    increasing: Optional[Direction] = None
    decreasing: Optional[Direction] = None
    tick_width: Optional[float] = Field(None, alias="tickwidth")
    x_calendar: Optional[Calendar] = Field(None, alias="xcalendar")

    @classmethod
    def new(cls, x: Any, open: Any, high: Any, low: Any, close: Any, **fields: Any) -> "Ohlc":
        return cls(x=x, open=open, high=high, low=low, close=close, **fields)
