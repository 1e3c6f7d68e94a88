from __future__ import annotations
import logging
from typing import Any, List, Optional, Sequence, Type, Union

import pandas as pd

from .base import TraceModel
from .errors import ChartSpecError
from .traces import Cells, Header, Scatter, Table

logger = logging.getLogger(__name__)


def _column(s: pd.Series) -> List[Any]:
    # missing values become null so plotly draws a gap
    return s.astype(object).where(s.notna(), None).tolist()


def _require_columns(df: pd.DataFrame, columns: Sequence[Optional[str]]) -> None:
    missing = [c for c in columns if c is not None and c not in df.columns]
    if missing:
        raise ChartSpecError(f"columns not found in frame: {missing}")


def traces_from_dataframe(
    df: pd.DataFrame,
    x: Optional[str],
    y: Union[str, List[str]],
    by: Optional[str] = None,
    kind: Type[TraceModel] = Scatter,
    **fields: Any,
) -> List[TraceModel]:
    """One trace per ``y`` column, or one per group of ``by`` when ``y`` is a single column.

    ``fields`` are applied to every trace (e.g. ``mode=Mode.lines``).
    """
    ys = [y] if isinstance(y, str) else list(y)
    if by is not None and len(ys) != 1:
        raise ChartSpecError("group by a column only with a single y column")
    _require_columns(df, [x, by, *ys])
    if "x" not in kind.model_fields or "y" not in kind.model_fields:
        raise ChartSpecError(f"{kind.__name__} traces have no x/y data to fill from columns")

    traces: List[TraceModel] = []
    if by is not None:
        ycol = ys[0]
        for cat, g in df.groupby(by, dropna=False, sort=False):
            traces.append(kind(
                x=_column(g[x]) if x else None,
                y=_column(g[ycol]),
                name=str(cat),
                **fields,
            ))
    else:
        for ycol in ys:
            traces.append(kind(x=_column(df[x]) if x else None, y=_column(df[ycol]), name=str(ycol), **fields))
    logger.debug("built %d %s trace(s) from a %d-row frame", len(traces), kind.__name__, len(df))
    return traces


def table_from_dataframe(df: pd.DataFrame, **fields: Any) -> Table:
    """A Table trace with the frame's column names as header and its columns as cells."""
    header = Header.new([str(c) for c in df.columns])
    cells = Cells.new([_column(df[c]) for c in df.columns])
    return Table.new(header, cells, **fields)
