from __future__ import annotations
import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Type, Union

import plotly.graph_objects as go
from pydantic import ValidationError

from . import export
from .base import TraceModel, dumps
from .configuration import Configuration
from .errors import SerializationError
from .layout import Frame, Layout

logger = logging.getLogger(__name__)


class Traces:
    """Ordered, type-erased collection of traces."""

    def __init__(self, traces: Optional[Iterable[TraceModel]] = None):
        self._traces: List[TraceModel] = list(traces or [])

    def push(self, trace: TraceModel) -> None:
        self._traces.append(trace)

    def __len__(self) -> int:
        return len(self._traces)

    def __iter__(self) -> Iterator[TraceModel]:
        return iter(self._traces)

    def __getitem__(self, index: int) -> TraceModel:
        return self._traces[index]

    def to_list(self) -> List[Any]:
        return [t.to_dict() for t in self._traces]

    def to_json(self) -> str:
        return dumps(self.to_list())


def _trace_registry() -> Dict[str, Type[TraceModel]]:
    registry: Dict[str, Type[TraceModel]] = {}
    pending = list(TraceModel.__subclasses__())
    while pending:
        cls = pending.pop()
        pending.extend(cls.__subclasses__())
        field = cls.model_fields.get("type")
        if field is None or field.default is None:
            continue
        registry[getattr(field.default, "value", field.default)] = cls
    # WebGL variants of scatter-style traces share their SVG class
    for gl, base in (("scattergl", "scatter"), ("scatterpolargl", "scatterpolar")):
        if base in registry:
            registry.setdefault(gl, registry[base])
    return registry


def trace_from_dict(raw: Dict[str, Any]) -> TraceModel:
    kind = raw.get("type", "scatter")
    cls = _trace_registry().get(kind)
    if cls is None:
        raise SerializationError(f"unknown trace type '{kind}'")
    return cls.model_validate(raw)


class Plot:
    """A figure: traces, layout, config and optional animation frames."""

    def __init__(self):
        self._traces = Traces()
        self._layout = Layout()
        self._configuration = Configuration()
        self._frames: List[Frame] = []
        self._local_plotly = False

    # ---------- Building ----------

    def add_trace(self, trace: TraceModel) -> "Plot":
        self._traces.push(trace.model_copy(deep=True))
        logger.debug("added %s trace (%d total)", trace.trace_type(), len(self._traces))
        return self

    def add_traces(self, traces: Iterable[TraceModel]) -> "Plot":
        for t in traces:
            self.add_trace(t)
        return self

    def set_layout(self, layout: Layout) -> "Plot":
        self._layout = layout
        return self

    def set_configuration(self, configuration: Configuration) -> "Plot":
        self._configuration = configuration
        return self

    def add_frame(self, frame: Frame) -> "Plot":
        self._frames.append(frame)
        logger.debug("added frame %r (%d total)", frame.name, len(self._frames))
        return self

    def add_frames(self, frames: Iterable[Frame]) -> "Plot":
        for f in frames:
            self.add_frame(f)
        return self

    def use_local_plotly(self) -> "Plot":
        """Embed plotly.js in generated HTML instead of referencing it."""
        self._local_plotly = True
        return self

    def data(self) -> Traces:
        return self._traces

    def layout(self) -> Layout:
        return self._layout

    def configuration(self) -> Configuration:
        return self._configuration

    def frames(self) -> List[Frame]:
        return self._frames

    def copy(self) -> "Plot":
        return copy.deepcopy(self)

    # ---------- Serialization ----------

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "data": self._traces.to_list(),
            "layout": self._layout.to_dict(),
            "config": self._configuration.to_dict(),
        }
        if self._frames:
            out["frames"] = [f.to_dict() for f in self._frames]
        return out

    def to_json(self) -> str:
        return dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "Plot":
        try:
            raw = json.loads(text)
        except ValueError as e:
            raise SerializationError(f"invalid plot JSON: {e}") from e
        if not isinstance(raw, dict):
            raise SerializationError("plot JSON must be an object")
        try:
            plot = cls()
            for t in raw.get("data") or []:
                plot._traces.push(trace_from_dict(t))
            plot._layout = Layout.model_validate(raw.get("layout") or {})
            plot._configuration = Configuration.model_validate(raw.get("config") or {})
            for f in raw.get("frames") or []:
                data = [trace_from_dict(t) for t in f.get("data") or []]
                layout = Layout.model_validate(f["layout"]) if f.get("layout") is not None else None
                plot._frames.append(Frame.model_validate({**f, "data": data or None, "layout": layout}))
        except ValidationError as e:
            raise SerializationError(f"plot JSON does not match the chart schema: {e}") from e
        return plot

    def _figure_dict(self) -> Dict[str, Any]:
        fig = self.to_dict()
        fig.pop("config")
        # NaN/inf must fail here rather than leak into the rendered page
        dumps(fig)
        return fig

    def to_plotly_figure(self) -> go.Figure:
        return go.Figure(self._figure_dict(), skip_invalid=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Plot):
            return NotImplemented
        return self.to_json() == other.to_json()

    __hash__ = None

    # ---------- HTML ----------

    def _html(self, **kwargs: Any) -> str:
        return export.render_html(
            self._figure_dict(),
            self._configuration.to_dict(),
            include_plotlyjs=export.plotly_js_mode(self._local_plotly),
            **kwargs,
        )

    def to_html(self) -> str:
        """Standalone HTML document."""
        return self._html()

    def to_inline_html(self, div_id: Optional[str] = None) -> str:
        """A ``<div>`` plus script for embedding in an existing page; plotly.js must already be loaded."""
        return export.render_html(
            self._figure_dict(),
            self._configuration.to_dict(),
            include_plotlyjs=False,
            full_html=False,
            div_id=div_id or export.random_div_id(),
        )

    def to_static_image_html(self, format: str = "png", width: int = 800, height: int = 600) -> str:
        """Document that renders the plot once and replaces it with an image of the given format."""
        div_id = export.random_div_id()
        return self._html(div_id=div_id, post_script=export.static_image_script(format, width, height))

    def write_html(self, path: Union[str, Path]) -> Path:
        return export.write_text(path, self.to_html())

    def show(self, browser: Optional[str] = None) -> Path:
        return export.open_in_browser(self.to_html(), browser)

    def show_image(self, format: str = "png", width: int = 800, height: int = 600) -> Path:
        return export.open_in_browser(self.to_static_image_html(format, width, height))

    # ---------- Static images ----------

    def to_image(
        self,
        format: Optional[str] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        scale: Optional[float] = None,
    ) -> bytes:
        return export.to_image_bytes(self._figure_dict(), format=format, width=width, height=height, scale=scale)

    def write_image(
        self,
        path: Union[str, Path],
        format: Optional[str] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        scale: Optional[float] = None,
    ) -> Path:
        return export.write_image(
            self._figure_dict(), path, format=format, width=width, height=height, scale=scale
        )

    # ---------- Notebook display ----------

    def _repr_html_(self) -> str:
        return export.render_html(
            self._figure_dict(),
            self._configuration.to_dict(),
            include_plotlyjs="cdn",
            full_html=False,
            div_id=export.random_div_id(),
        )

    def _repr_mimebundle_(self, include=None, exclude=None) -> Dict[str, Any]:
        return {
            "application/vnd.plotly.v1+json": {**self._figure_dict(), "config": self._configuration.to_dict()},
            "text/html": self._repr_html_(),
        }
