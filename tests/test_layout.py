import pytest

from chartspec import Axis, BuiltinTheme, ChartSpecError, Layout, Relayout, axis_key, axis_ref
from chartspec.layout import (
    Annotation, BarMode, HoverMode, Legend, Margin, Shape, ShapeLine, ShapeType, UniformText,
    UniformTextMode,
)


def test_axis_key_and_ref():
    assert axis_key("x", 1) == "xaxis"
    assert axis_key("y", 3) == "yaxis3"
    assert axis_key("z", 8) == "zaxis8"
    assert axis_ref("x", 1) == "x"
    assert axis_ref("y", 4) == "y4"
    with pytest.raises(ValueError):
        axis_key("w", 1)
    with pytest.raises(ValueError):
        axis_key("x", 0)


@pytest.mark.parametrize("letter", ["x", "y", "z"])
def test_fixed_axis_slots(letter):
    layout = Layout()
    for i in range(1, 9):
        getattr(layout, f"set_{letter}_axis")(i, Axis(n_ticks=i))
    d = layout.to_dict()
    for i in range(1, 9):
        assert d[axis_key(letter, i)] == {"nticks": i}
    assert layout.extra_axes == {}


def test_overflow_axes_serialize_as_siblings():
    layout = Layout(title="t").set_x_axis(2, Axis(title="second"))
    layout.set_x_axis(9, Axis(title="ninth"))
    layout.axis_by_name("yaxis_custom", Axis(visible=False))
    d = layout.to_dict()
    assert d["xaxis2"] == {"title": {"text": "second"}}
    assert d["xaxis9"] == {"title": {"text": "ninth"}}
    assert d["yaxis_custom"] == {"visible": False}
    assert list(d)[-2:] == ["xaxis9", "yaxis_custom"]
    assert layout.get_axis("xaxis9").title.text == "ninth"
    assert layout.get_axis("xaxis2") is layout.x_axis2
    assert set(layout.axes()) == {"xaxis2", "xaxis9", "yaxis_custom"}


def test_axis_by_name_prefers_fixed_slot():
    layout = Layout().axis_by_name("yaxis3", Axis(range=[0, 1]))
    assert layout.y_axis3.range == [0, 1]
    assert "yaxis3" not in layout.extra_axes


def test_overflow_names_cannot_shadow_layout_keys():
    layout = Layout(width=100)
    for name in ("width", "x_axis", "barmode", "extra_axes"):
        with pytest.raises(ChartSpecError):
            layout.axis_by_name(name, Axis(title="t"))
        with pytest.raises(ChartSpecError):
            Layout.modify_axis_by_name(name, Axis(title="t"))
    assert layout.to_dict() == {"width": 100}
    assert layout.extra_axes == {}


def test_overflow_axes_read_back():
    layout = Layout(title="t").set_x_axis(9, Axis(title="ninth"))
    layout.axis_by_name("yaxis_custom", Axis(visible=False))
    again = Layout.model_validate(layout.to_dict())
    assert again.get_axis("xaxis9").title.text == "ninth"
    assert again.get_axis("yaxis_custom").visible is False
    assert again.to_dict() == layout.to_dict()
    assert Layout(**{"xaxis12": {"matches": "x"}}).extra_axes["xaxis12"].matches == "x"


def test_layout_relayout_deltas():
    assert Layout.modify_title("X") == {"title": {"text": "X"}}
    assert Layout.modify_width(20) == {"width": 20}
    assert Layout.modify_bar_mode(BarMode.stack) == {"barmode": "stack"}
    assert Layout.modify_hover_mode(HoverMode.false) == {"hovermode": False}
    assert isinstance(Layout.modify_x_axis2(Axis(visible=False)), Relayout)
    assert Layout.modify_x_axis2(Axis(visible=False)) == {"xaxis2": {"visible": False}}
    assert Layout.modify_axis_by_name("xaxis12", Axis(matches="x")) == {"xaxis12": {"matches": "x"}}
    assert not hasattr(Layout, "modify_extra_axes")


def test_layout_sub_records():
    layout = Layout(
        margin=Margin(l=10, r=10, auto_expand=False),
        legend=Legend(x=1.0, y_anchor="top"),
        uniform_text=UniformText(mode=UniformTextMode.false, min_size=8),
        shapes=[Shape(type=ShapeType.rect, x0=0, x1=1, y0=0, y1=1, line=ShapeLine(width=2))],
        annotations=[Annotation(text="note", show_arrow=False)],
    )
    d = layout.to_dict()
    assert d["margin"] == {"l": 10, "r": 10, "autoexpand": False}
    assert d["legend"] == {"x": 1.0, "yanchor": "top"}
    assert d["uniformtext"] == {"mode": False, "minsize": 8}
    assert d["shapes"][0]["type"] == "rect"
    assert d["annotations"] == [{"text": "note", "showarrow": False}]


def test_theme_builds_template_from_plotly():
    template = BuiltinTheme.plotly_dark.build()
    assert "paper_bgcolor" in template.layout
    layout = Layout(template="plotly_white")
    assert "template" in layout.to_dict()
    assert layout.template.layout is not None
