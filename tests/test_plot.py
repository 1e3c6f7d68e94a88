import json

import plotly.graph_objects as go
import plotly.io as pio
import pytest

from chartspec import (
    Bar, Configuration, ExportError, Frame, Layout, Mode, Plot, Scatter, SerializationError,
    SubplotsBuilder, reload_settings,
)
from chartspec import export


def _plot():
    plot = Plot()
    plot.add_trace(Scatter.new([1, 2, 3], [4, 5, 6]).update(mode=Mode.lines, name="a"))
    plot.add_trace(Bar.new(["x", "y"], [1, 2]))
    plot.set_layout(Layout(title="demo", width=400))
    plot.set_configuration(Configuration(responsive=True))
    return plot


def test_add_trace_stores_a_copy():
    trace = Scatter.new([1], [1])
    plot = Plot().add_trace(trace)
    trace.update(name="changed")
    assert "name" not in plot.to_dict()["data"][0]
    assert len(plot.data()) == 1


def test_document_shape():
    d = _plot().to_dict()
    assert list(d) == ["data", "layout", "config"]
    assert d["layout"] == {"title": {"text": "demo"}, "width": 400}
    assert d["config"] == {"responsive": True}


def test_frames_only_when_added():
    plot = _plot().add_frame(Frame(name="f1", data=[Scatter.new([1], [9])], layout=Layout(width=10)))
    frames = plot.to_dict()["frames"]
    assert frames == [{"name": "f1", "data": [{"type": "scatter", "x": [1], "y": [9]}], "layout": {"width": 10}}]


def test_equality_is_json_equality_and_copy_is_deep():
    a = _plot()
    b = a.copy()
    assert a == b
    b.layout().width = 500
    assert a != b


def test_from_json_round_trip():
    plot = _plot().add_frame(Frame(name="f", data=[Bar.new([1], [2])]))
    again = Plot.from_json(plot.to_json())
    assert again == plot
    assert isinstance(again.data()[1], Bar)


def test_from_json_round_trip_with_overflow_axes():
    grid = SubplotsBuilder(3, 3).subplot_titles([str(i) for i in range(9)])
    grid.add_trace(Scatter.new([1], [1]), 1, 3)
    plot = grid.build()
    assert "xaxis9" in plot.to_dict()["layout"]
    again = Plot.from_json(plot.to_json())
    assert again == plot
    assert again.layout().get_axis("yaxis9").domain == plot.layout().get_axis("yaxis9").domain
    assert again.data()[0].x_axis == "x9"


def test_from_json_errors():
    with pytest.raises(SerializationError):
        Plot.from_json("{not json")
    with pytest.raises(SerializationError):
        Plot.from_json('{"data": [{"type": "nope"}]}')
    with pytest.raises(SerializationError):
        Plot.from_json('{"data": [{"type": "scatter", "mode": 3}]}')


def test_html_documents(monkeypatch):
    monkeypatch.delenv("CHARTSPEC_PLOTLY_JS", raising=False)
    reload_settings()
    html = _plot().to_html()
    assert "<html>" in html
    assert "cdn.plot.ly" in html
    assert '"responsive": true' in html or '"responsive":true' in html

    inline = _plot().to_inline_html("my-plot")
    assert 'id="my-plot"' in inline
    assert "<html>" not in inline

    static = _plot().to_static_image_html("jpg", 640, 480)
    assert "Plotly.toImage" in static
    assert "format: 'jpeg'" in static
    assert "{plot_id}" not in static


def test_local_plotly_embeds_the_library():
    html = _plot().use_local_plotly().to_html()
    assert len(html) > 1_000_000


def test_random_div_ids():
    ids = {export.random_div_id() for _ in range(50)}
    assert len(ids) == 50
    assert all(len(i) == 20 and i.isalnum() for i in ids)


def test_write_html(tmp_path):
    path = _plot().write_html(tmp_path / "plot.html")
    assert path.read_text(encoding="utf-8").startswith("<html>")
    with pytest.raises(ExportError):
        _plot().write_html(tmp_path / "missing" / "plot.html")


def test_image_export_failure_is_wrapped(monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("no renderer")
    monkeypatch.setattr(pio, "to_image", boom)
    with pytest.raises(ExportError):
        _plot().to_image(format="png")
    with pytest.raises(ExportError):
        _plot().to_image(format="bmp")


def test_write_image_infers_format(monkeypatch, tmp_path):
    seen = {}

    def fake(fig, **kwargs):
        seen.update(kwargs)
        return b"<svg/>"
    monkeypatch.setattr(pio, "to_image", fake)
    path = _plot().write_image(tmp_path / "out.svg", width=300, height=200)
    assert path.read_bytes() == b"<svg/>"
    assert seen["format"] == "svg"
    assert seen["width"] == 300


def test_notebook_display():
    bundle = _plot()._repr_mimebundle_()
    assert set(bundle) == {"application/vnd.plotly.v1+json", "text/html"}
    assert bundle["application/vnd.plotly.v1+json"]["config"] == {"responsive": True}
    json.dumps(bundle["application/vnd.plotly.v1+json"])


def test_to_plotly_figure():
    fig = _plot().to_plotly_figure()
    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 2
    assert fig.layout.width == 400
