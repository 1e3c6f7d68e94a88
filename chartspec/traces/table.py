from __future__ import annotations
from enum import Enum
from typing import Any, List, Optional

from pydantic import Field

from ..base import SpecModel, TraceModel
from ..color import Color
from ..common import DataArray, Domain, Matrix, MatrixDim, PlotType, Visible


class Align(str, Enum):
    left = "left"
    center = "center"
    right = "right"


class FontStyle(str, Enum):
    normal = "normal"
    italic = "italic"


class TextCase(str, Enum):
    normal = "normal"
    word_caps = "word caps"
    upper = "upper"
    lower = "lower"


class TextVariant(str, Enum):
    normal = "normal"
    small_caps = "small-caps"
    all_small_caps = "all-small-caps"
    all_petite_caps = "all-petite-caps"


class LinePosition(str, Enum):
    under = "under"
    over = "over"
    through = "through"
    under_over = "under+over"
    under_through = "under+through"
    over_through = "over+through"
    under_over_through = "under+over+through"


# Table styling accepts a scalar, one value per column, or one value per cell.

class TableLine(SpecModel):
    color: Optional[MatrixDim[Color]] = None
    width: Optional[MatrixDim[float]] = None


class TableFill(SpecModel):
    color: Optional[MatrixDim[Color]] = None


class TableFont(SpecModel):
    color: Optional[MatrixDim[Color]] = None
    family: Optional[MatrixDim[str]] = None
    size: Optional[MatrixDim[float]] = None
    style: Optional[MatrixDim[FontStyle]] = None
    text_case: Optional[MatrixDim[TextCase]] = Field(None, alias="textcase")
    variant: Optional[MatrixDim[TextVariant]] = None
    weight: Optional[MatrixDim[float]] = None
    line_position: Optional[MatrixDim[LinePosition]] = Field(None, alias="lineposition")


class Header(SpecModel):
    values: Optional[DataArray] = None
    format: Optional[MatrixDim[str]] = None
    prefix: Optional[MatrixDim[str]] = None
    suffix: Optional[MatrixDim[str]] = None
    height: Optional[float] = None
    align: Optional[MatrixDim[Align]] = None
    line: Optional[TableLine] = None
    fill: Optional[TableFill] = None
    font: Optional[TableFont] = None

    @classmethod
    def new(cls, values: Any, **fields: Any) -> "Header":
        return cls(values=values, **fields)


class Cells(SpecModel):
    """``values[m][n]`` is the ``n``-th row of column ``m``."""

    values: Optional[Matrix] = None
    format: Optional[MatrixDim[str]] = None
    prefix: Optional[MatrixDim[str]] = None
    suffix: Optional[MatrixDim[str]] = None
    height: Optional[float] = None
    align: Optional[MatrixDim[Align]] = None
    line: Optional[TableLine] = None
    fill: Optional[TableFill] = None
    font: Optional[TableFont] = None

    @classmethod
    def new(cls, values: Any, **fields: Any) -> "Cells":
        return cls(values=values, **fields)


class Table(TraceModel):
    type: PlotType = PlotType.table
    name: Optional[str] = None
    visible: Optional[Visible] = None
    domain: Optional[Domain] = None
    column_order: Optional[List[int]] = Field(None, alias="columnorder")
    column_width: Optional[float] = Field(None, alias="columnwidth")
    header: Optional[Header] = None
    cells: Optional[Cells] = None

    @classmethod
    def new(cls, header: Header, cells: Cells, **fields: Any) -> "Table":
        return cls(header=header, cells=cells, **fields)
