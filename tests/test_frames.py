import math

import pandas as pd
import pytest

from chartspec import Bar, ChartSpecError, Mode, Pie, Scatter, table_from_dataframe, traces_from_dataframe


@pytest.fixture
def df():
    return pd.DataFrame({
        "day": [1, 2, 3, 1, 2],
        "city": ["a", "a", "a", "b", "b"],
        "temp": [10.0, float("nan"), 12.5, 20.0, 21.0],
        "rain": [0.1, 0.0, 0.3, 0.5, 0.2],
    })


def test_group_by_category_keeps_first_seen_order(df):
    traces = traces_from_dataframe(df, "day", "temp", by="city", mode=Mode.lines)
    assert [t.name for t in traces] == ["a", "b"]
    assert all(isinstance(t, Scatter) for t in traces)
    assert traces[1].to_dict() == {"type": "scatter", "name": "b", "mode": "lines", "x": [1, 2], "y": [20.0, 21.0]}


def test_missing_values_become_null(df):
    (trace,) = traces_from_dataframe(df, "day", "temp")
    assert trace.to_dict()["y"][1] is None
    assert not any(isinstance(v, float) and math.isnan(v) for v in trace.to_dict()["y"])
    trace.to_json()


def test_one_trace_per_y_column(df):
    traces = traces_from_dataframe(df, "day", ["temp", "rain"], kind=Bar)
    assert [t.name for t in traces] == ["temp", "rain"]
    assert all(t.trace_type() == "bar" for t in traces)


def test_bad_columns(df):
    with pytest.raises(ChartSpecError, match="snow"):
        traces_from_dataframe(df, "day", "snow")
    with pytest.raises(ChartSpecError):
        traces_from_dataframe(df, "day", ["temp", "rain"], by="city")


def test_table(df):
    d = table_from_dataframe(df[["city", "rain"]]).to_dict()
    assert d["type"] == "table"
    assert d["header"]["values"] == ["city", "rain"]
    assert d["cells"]["values"] == [["a", "a", "a", "b", "b"], [0.1, 0.0, 0.3, 0.5, 0.2]]


def test_kind_without_xy_is_rejected(df):
    with pytest.raises(ChartSpecError, match="Pie"):
        traces_from_dataframe(df, "day", "temp", kind=Pie)
