from __future__ import annotations
import logging
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from .base import TraceModel
from .common import Anchor
from .errors import SubplotError
from .layout import Annotation, Axis, GridPattern, Layout, LayoutGrid, RowOrder, axis_key, axis_ref
from .plot import Plot

logger = logging.getLogger(__name__)

# smallest share of the figure a single row or column may shrink to
MIN_SUBPLOT_FRACTION = 0.12


class StartCell(str, Enum):
    top_left = "top-left"
    bottom_left = "bottom-left"


def clamp_spacing(requested: Optional[float], n: int) -> float:
    """Largest usable gap between ``n`` subplots that keeps each at MIN_SUBPLOT_FRACTION."""
    if n <= 1:
        return 0.0
    req = max(requested or 0.0, 0.0)
    limit = max(1.0 - n * MIN_SUBPLOT_FRACTION, 0.0) / (n - 1)
    if req > limit:
        logger.warning("subplot spacing %.4f too large for %d subplots, clamped to %.4f", req, n, limit)
        return limit
    return req


def subplot_size(spacing: float, n: int) -> float:
    return (1.0 - (n - 1) * spacing) / n


class SubplotsBuilder:
    """Lays a rows x cols grid of cartesian subplots into one Layout.

    Axis numbering starts at the bottom-left cell and runs left to right, then
    upwards. With ``StartCell.top_left`` (the default) row 1 is the top row;
    with ``StartCell.bottom_left`` row 1 is the bottom row.
    """

    def __init__(self, rows: int, cols: int):
        if rows < 1 or cols < 1:
            raise SubplotError(f"a subplot grid needs at least one row and column, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self._start_cell = StartCell.top_left
        self._horizontal_spacing: Optional[float] = None
        self._vertical_spacing: Optional[float] = None
        self._shared_xaxes = False
        self._shared_yaxes = False
        self._subplot_titles: List[str] = []
        self._x_axis_titles: List[str] = []
        self._y_axis_titles: List[str] = []
        self._x_title_at: Dict[Tuple[int, int], str] = {}
        self._y_title_at: Dict[Tuple[int, int], str] = {}
        self._base_layout = Layout()
        self._traces: List[TraceModel] = []
        self._index_by_cell: Dict[Tuple[int, int], int] = {}
        self._layout = Layout()
        self._recompute()

    # ---------- Options ----------

    def start_cell(self, start_cell: StartCell) -> "SubplotsBuilder":
        self._start_cell = StartCell(start_cell)
        return self._recompute()

    def horizontal_spacing(self, spacing: float) -> "SubplotsBuilder":
        self._horizontal_spacing = spacing
        return self._recompute()

    def vertical_spacing(self, spacing: float) -> "SubplotsBuilder":
        self._vertical_spacing = spacing
        return self._recompute()

    def spacing(self, horizontal: float, vertical: float) -> "SubplotsBuilder":
        self._horizontal_spacing = horizontal
        self._vertical_spacing = vertical
        return self._recompute()

    def shared_xaxes(self, shared: bool = True) -> "SubplotsBuilder":
        self._shared_xaxes = shared
        return self._recompute()

    def shared_yaxes(self, shared: bool = True) -> "SubplotsBuilder":
        self._shared_yaxes = shared
        return self._recompute()

    def subplot_titles(self, titles: Sequence[str]) -> "SubplotsBuilder":
        self._subplot_titles = list(titles)
        return self._recompute()

    def x_axis_titles(self, titles: Sequence[str]) -> "SubplotsBuilder":
        self._x_axis_titles = list(titles)
        return self._recompute()

    def y_axis_titles(self, titles: Sequence[str]) -> "SubplotsBuilder":
        self._y_axis_titles = list(titles)
        return self._recompute()

    def x_title_at(self, row: int, col: int, title: str) -> "SubplotsBuilder":
        self._check_cell(row, col)
        self._x_title_at[(row, col)] = title
        return self._recompute()

    def y_title_at(self, row: int, col: int, title: str) -> "SubplotsBuilder":
        self._check_cell(row, col)
        self._y_title_at[(row, col)] = title
        return self._recompute()

    def layout(self, base: Layout) -> "SubplotsBuilder":
        """Start from ``base``; grid axes are set on a copy and title annotations appended after its own."""
        self._base_layout = base.model_copy(deep=True)
        return self._recompute()

    # ---------- Geometry ----------

    def _check_cell(self, row: int, col: int) -> None:
        if not (1 <= row <= self.rows and 1 <= col <= self.cols):
            raise SubplotError(f"cell ({row}, {col}) is outside the {self.rows}x{self.cols} grid")

    def _bottom_row(self) -> int:
        return self.rows if self._start_cell == StartCell.top_left else 1

    def _rows_bottom_up(self) -> List[int]:
        rows = list(range(1, self.rows + 1))
        return rows[::-1] if self._start_cell == StartCell.top_left else rows

    def axis_index(self, row: int, col: int) -> int:
        self._check_cell(row, col)
        return self._index_by_cell[(row, col)]

    def domain(self, row: int, col: int) -> Tuple[List[float], List[float]]:
        """(x domain, y domain) of a cell."""
        idx = self.axis_index(row, col)
        layout = self._layout
        return (
            list(layout.get_axis(axis_key("x", idx)).domain),
            list(layout.get_axis(axis_key("y", idx)).domain),
        )

    def _recompute(self) -> "SubplotsBuilder":
        hs = clamp_spacing(self._horizontal_spacing, self.cols)
        vs = clamp_spacing(self._vertical_spacing, self.rows)
        w = subplot_size(hs, self.cols)
        h = subplot_size(vs, self.rows)

        layout = self._base_layout.model_copy(deep=True)
        index_by_cell: Dict[Tuple[int, int], int] = {}
        for r in self._rows_bottom_up():
            for c in range(1, self.cols + 1):
                index_by_cell[(r, c)] = len(index_by_cell) + 1

        bottom = self._bottom_row()
        for (r, c), idx in index_by_cell.items():
            x0 = (c - 1) * (w + hs)
            if self._start_cell == StartCell.top_left:
                y0 = (self.rows - r) * (h + vs)
            else:
                y0 = (r - 1) * (h + vs)
            x = Axis(domain=[x0, x0 + w])
            y = Axis(domain=[y0, y0 + h])

            if self._shared_xaxes and r != bottom:
                x.matches = axis_ref("x", index_by_cell[(bottom, c)])
            if self._shared_yaxes and c > 1:
                y.matches = axis_ref("y", index_by_cell[(r, 1)])

            if (r, c) in self._x_title_at:
                x.title = self._x_title_at[(r, c)]
            elif r == bottom and c <= len(self._x_axis_titles):
                x.title = self._x_axis_titles[c - 1]
            if (r, c) in self._y_title_at:
                y.title = self._y_title_at[(r, c)]
            elif c == 1 and r <= len(self._y_axis_titles):
                y.title = self._y_axis_titles[r - 1]

            layout.set_x_axis(idx, x).set_y_axis(idx, y)

        layout.grid = LayoutGrid(
            rows=self.rows,
            columns=self.cols,
            pattern=GridPattern.independent,
            row_order=RowOrder.top_to_bottom if self._start_cell == StartCell.top_left else RowOrder.bottom_to_top,
        )

        if self._subplot_titles:
            titles = []
            for i, text in enumerate(self._subplot_titles[: self.rows * self.cols]):
                idx = index_by_cell[(1 + i // self.cols, 1 + i % self.cols)]
                titles.append(Annotation(
                    x_ref=f"{axis_ref('x', idx)} domain",
                    y_ref=f"{axis_ref('y', idx)} domain",
                    x=0.5,
                    y=1.0,
                    x_anchor=Anchor.center,
                    y_anchor=Anchor.bottom,
                    text=text,
                    show_arrow=False,
                ))
            layout.annotations = list(self._base_layout.annotations or []) + titles

        self._index_by_cell = index_by_cell
        self._layout = layout
        return self

    # ---------- Traces ----------

    def add_trace(self, trace: TraceModel, row: int, col: int) -> "SubplotsBuilder":
        idx = self.axis_index(row, col)
        fields = type(trace).model_fields
        if "x_axis" not in fields or "y_axis" not in fields:
            raise SubplotError(f"{trace.trace_type()} traces are not drawn on cartesian axes")
        placed = trace.model_copy(deep=True).update(x_axis=axis_ref("x", idx), y_axis=axis_ref("y", idx))
        self._traces.append(placed)
        logger.debug("placed %s trace in cell (%d, %d) on axes %d", placed.trace_type(), row, col, idx)
        return self

    def build(self) -> Plot:
        plot = Plot().add_traces(self._traces)
        plot.set_layout(self._layout.model_copy(deep=True))
        return plot
