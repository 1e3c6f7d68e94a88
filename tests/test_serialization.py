import json
import math

import numpy as np
import pytest
from pydantic import ValidationError

from chartspec import (
    Bar, BoxMean, BoxPlot, BoxPoints, Configuration, DisplayModeBar, DimKind, Font, Layout,
    Marker, Mode, NamedColor, Plot, Rgb, Rgba, Scatter, SerializationError, Visible, dim_kind,
)
from chartspec.configuration import DoubleClick, ModeBarButtonName, PlotGLPixelRatio
from chartspec.traces import ArrayTraces, HeatMap, Image, Pie, Table, Header, Cells


def test_plot_end_to_end_json():
    plot = Plot()
    plot.add_trace(Scatter.new([1, 2, 3, 4], [10, 15, 13, 17]).update(mode=Mode.markers))
    assert plot.to_json() == (
        '{"data":[{"type":"scatter","x":[1,2,3,4],"y":[10,15,13,17],"mode":"markers"}],'
        '"layout":{},"config":{}}'
    )


def test_unset_fields_are_omitted():
    d = Bar.new(["a", "b"], [1, 2]).to_dict()
    assert d == {"type": "bar", "x": ["a", "b"], "y": [1, 2]}
    assert "name" not in d and "marker" not in d


def test_wire_aliases_and_python_names_both_accepted():
    t = Scatter.new([1], [2]).update(show_legend=False, hovertemplate="%{y}")
    d = t.to_dict()
    assert d["showlegend"] is False
    assert d["hovertemplate"] == "%{y}"


def test_boolean_like_enums_serialize_as_json_booleans():
    box = BoxPlot.new([1, 2, 3]).update(box_points=BoxPoints.false, box_mean=BoxMean.false)
    d = box.to_dict()
    assert d["boxpoints"] is False
    assert d["boxmean"] is False
    assert BoxPlot.new([1]).update(box_mean=BoxMean.true).to_dict()["boxmean"] is True
    assert BoxPlot.new([1]).update(box_mean=BoxMean.standard_deviation).to_dict()["boxmean"] == "sd"
    assert Scatter.new([1], [1]).update(visible=Visible.legend_only).to_dict()["visible"] == "legendonly"


def test_configuration_camel_case_and_false_variants():
    cfg = Configuration(
        display_mode_bar=DisplayModeBar.false,
        double_click=DoubleClick.false,
        plot_gl_pixel_ratio=PlotGLPixelRatio.two,
        mode_bar_buttons_to_remove=[ModeBarButtonName.zoom_in_2d, ModeBarButtonName.to_image],
        display_logo=False,
        plotly_server_url="https://example.org",
        scroll_zoom=True,
    )
    assert cfg.to_dict() == {
        "scrollZoom": True,
        "displayModeBar": False,
        "modeBarButtonsToRemove": ["zoomIn2d", "toImage"],
        "plotlyServerURL": "https://example.org",
        "displaylogo": False,
        "doubleClick": False,
        "plotGlPixelRatio": 2,
    }
    assert Configuration(display_mode_bar=DisplayModeBar.hover).to_dict() == {"displayModeBar": "hover"}


def test_nan_is_rejected_with_serialization_error():
    plot = Plot().add_trace(Scatter.new([1, 2], [1.0, float("nan")]))
    with pytest.raises(SerializationError):
        plot.to_json()
    with pytest.raises(SerializationError):
        Scatter.new([1], [math.inf]).to_json()


def test_colors():
    font = Font(color=Rgb(255, 0, 0))
    assert font.to_dict() == {"color": "rgb(255, 0, 0)"}
    assert Font(color=Rgba(0, 0, 0, 0.5)).to_dict() == {"color": "rgba(0, 0, 0, 0.5)"}
    assert Font(color=NamedColor.dark_orange).to_dict() == {"color": "darkorange"}
    assert Font(color="#123456").to_dict() == {"color": "#123456"}
    assert Rgb.from_hex("#ff8000") == Rgb(255, 128, 0)
    with pytest.raises(ValidationError):
        Rgb(256, 0, 0)
    with pytest.raises(ValidationError):
        Rgba(0, 0, 0, 1.5)


def test_marker_color_vector():
    m = Marker(color=[Rgb(1, 2, 3), "red"], size=[4, 5])
    assert m.to_dict() == {"size": [4, 5], "color": ["rgb(1, 2, 3)", "red"]}


def test_dim_kind():
    assert dim_kind(3) == DimKind.scalar
    assert dim_kind([1, 2]) == DimKind.vector
    assert dim_kind([[1], [2]]) == DimKind.matrix


def test_numpy_input_becomes_plain_lists():
    t = Scatter.new(np.arange(3), np.array([1.5, 2.5, 3.5]))
    d = json.loads(t.to_json())
    assert d["x"] == [0, 1, 2]
    assert d["y"] == [1.5, 2.5, 3.5]


def test_to_traces_splits_matrix():
    template = Scatter(mode=Mode.lines)
    traces = template.to_traces([0, 1], np.array([[1, 2, 3], [4, 5, 6]]), ArrayTraces.over_columns)
    assert [t.y for t in traces] == [[1, 4], [2, 5], [3, 6]]
    assert all(t.mode == Mode.lines for t in traces)
    rows = template.to_traces([0, 1, 2], [[1, 2, 3], [4, 5, 6]], ArrayTraces.over_rows)
    assert [t.y for t in rows] == [[1, 2, 3], [4, 5, 6]]


def test_web_gl_mode_switches_type():
    assert Scatter.new([1], [1]).web_gl_mode().to_dict()["type"] == "scattergl"


def test_other_trace_kinds_carry_their_type_first():
    for trace, kind in [
        (HeatMap.new_z([[1, 2], [3, 4]]), "heatmap"),
        (Pie.new([1, 2], ["a", "b"]), "pie"),
        (Table.new(Header.new(["a"]), Cells.new([[1, 2]])), "table"),
        (Image.new([[[0, 0, 0]]]), "image"),
    ]:
        d = trace.to_dict()
        assert next(iter(d)) == "type"
        assert d["type"] == kind


def test_assignment_is_validated():
    t = Scatter.new([1], [1])
    with pytest.raises(ValidationError):
        t.mode = "not-a-mode"
    with pytest.raises(AttributeError):
        t.update(no_such_field=1)


def test_layout_title_shorthand():
    assert Layout(title="Hello").to_dict() == {"title": {"text": "Hello"}}
