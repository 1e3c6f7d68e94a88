import itertools

import pytest

from chartspec import (
    MIN_SUBPLOT_FRACTION, Annotation, Layout, Pie, Scatter, StartCell, SubplotError, SubplotsBuilder,
)
from chartspec.subplots import clamp_spacing


@pytest.mark.parametrize("rows,cols", [(1, 1), (2, 3), (3, 2), (4, 4)])
def test_zero_spacing_tiles_unit_square(rows, cols):
    sb = SubplotsBuilder(rows, cols)
    area = 0.0
    rects = []
    for r, c in itertools.product(range(1, rows + 1), range(1, cols + 1)):
        (x0, x1), (y0, y1) = sb.domain(r, c)
        assert x1 - x0 == pytest.approx(1 / cols)
        assert y1 - y0 == pytest.approx(1 / rows)
        area += (x1 - x0) * (y1 - y0)
        rects.append((round(x0, 9), round(y0, 9)))
    assert area == pytest.approx(1.0)
    assert len(set(rects)) == rows * cols


def test_spacing_is_clamped_not_rejected():
    assert clamp_spacing(0.5, 5) == pytest.approx(0.1)
    assert clamp_spacing(0.05, 5) == pytest.approx(0.05)
    assert clamp_spacing(0.3, 1) == 0.0
    assert clamp_spacing(-0.2, 3) == 0.0
    sb = SubplotsBuilder(1, 5).horizontal_spacing(0.5)
    (x0, x1), _ = sb.domain(1, 2)
    assert x1 - x0 == pytest.approx(MIN_SUBPLOT_FRACTION)
    assert x0 == pytest.approx(0.22)


def test_clamp_logs_warning(caplog):
    with caplog.at_level("WARNING", logger="chartspec.subplots"):
        SubplotsBuilder(1, 5).horizontal_spacing(0.5)
    assert any("clamped" in r.message for r in caplog.records)


def test_axis_numbering_starts_bottom_left():
    top = SubplotsBuilder(2, 2)
    assert [top.axis_index(2, 1), top.axis_index(2, 2), top.axis_index(1, 1), top.axis_index(1, 2)] == [1, 2, 3, 4]
    bottom = SubplotsBuilder(2, 2).start_cell(StartCell.bottom_left)
    assert [bottom.axis_index(1, 1), bottom.axis_index(1, 2), bottom.axis_index(2, 1)] == [1, 2, 3]


def test_row_one_is_on_top_for_top_left():
    sb = SubplotsBuilder(2, 1).vertical_spacing(0.1)
    _, (top0, top1) = sb.domain(1, 1)
    _, (bot0, bot1) = sb.domain(2, 1)
    assert bot0 == pytest.approx(0.0)
    assert top1 == pytest.approx(1.0)
    assert top0 - bot1 == pytest.approx(0.1)

    flipped = SubplotsBuilder(2, 1).start_cell(StartCell.bottom_left)
    assert flipped.domain(1, 1)[1][0] == pytest.approx(0.0)


def test_grid_record():
    d = SubplotsBuilder(2, 3).build().to_dict()["layout"]["grid"]
    assert d == {"rows": 2, "roworder": "top to bottom", "columns": 3, "pattern": "independent"}
    d = SubplotsBuilder(2, 3).start_cell(StartCell.bottom_left).build().to_dict()["layout"]["grid"]
    assert d["roworder"] == "bottom to top"


def test_shared_axes_match_anchor():
    layout = SubplotsBuilder(2, 2).shared_xaxes().shared_yaxes().build().layout()
    # bottom row anchors x, first column anchors y
    assert layout.x_axis.matches is None
    assert layout.x_axis2.matches is None
    assert layout.x_axis3.matches == "x"
    assert layout.x_axis4.matches == "x2"
    assert layout.y_axis.matches is None
    assert layout.y_axis2.matches == "y"
    assert layout.y_axis4.matches == "y3"
    assert layout.x_axis3.domain is not None


def test_subplot_titles_follow_base_annotations():
    base = Layout(annotations=[Annotation(text="base")])
    layout = SubplotsBuilder(2, 2).layout(base).subplot_titles(["a", "b", "c", "d"]).build().layout()
    notes = [a.to_dict() for a in layout.annotations]
    assert notes[0] == {"text": "base"}
    assert notes[1] == {
        "text": "a",
        "showarrow": False,
        "xref": "x3 domain",
        "x": 0.5,
        "xanchor": "center",
        "yref": "y3 domain",
        "y": 1.0,
        "yanchor": "bottom",
    }
    assert [n["text"] for n in notes] == ["base", "a", "b", "c", "d"]
    assert notes[3]["xref"] == "x domain"
    assert base.annotations[0].text == "base" and len(base.annotations) == 1


def test_axis_titles():
    layout = (
        SubplotsBuilder(2, 2)
        .x_axis_titles(["left", "right"])
        .y_axis_titles(["upper", "lower"])
        .x_title_at(2, 2, "override")
        .build()
        .layout()
    )
    assert layout.x_axis.title.text == "left"
    assert layout.x_axis2.title.text == "override"
    assert layout.x_axis3.title is None
    assert layout.y_axis3.title.text == "upper"
    assert layout.y_axis.title.text == "lower"


def test_add_trace_sets_axis_refs():
    trace = Scatter.new([1], [2])
    plot = SubplotsBuilder(2, 2).add_trace(trace, 1, 2).add_trace(trace, 2, 1).build()
    data = plot.to_dict()["data"]
    assert (data[0]["xaxis"], data[0]["yaxis"]) == ("x4", "y4")
    assert (data[1]["xaxis"], data[1]["yaxis"]) == ("x", "y")
    assert trace.x_axis is None


def test_out_of_range_and_non_cartesian():
    sb = SubplotsBuilder(2, 2)
    with pytest.raises(SubplotError):
        sb.add_trace(Scatter.new([1], [1]), 3, 1)
    with pytest.raises(SubplotError):
        sb.add_trace(Pie.new([1, 2]), 1, 1)
    with pytest.raises(SubplotError):
        SubplotsBuilder(0, 2)
