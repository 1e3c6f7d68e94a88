"""Typed plotly.js chart specifications: traces, layout, config, update controls and subplots."""

from .base import Relayout, Restyle, SpecModel, TraceModel, LayoutModel, dumps
from .color import Color, NamedColor, Rgb, Rgba
from .common import (
    DimKind, Domain, ErrorData, Font, Label, Line, Marker, Mode, Pad, PlotType, Title, Visible,
    dim_kind,
)
from .config import Settings, configure_logging, get_settings, reload_settings
from .configuration import (
    Configuration, DisplayModeBar, DoubleClick, ImageButtonFormats, ModeBarButtonName,
    PlotGLPixelRatio, ToImageButtonOptions,
)
from .errors import (
    ChartSpecError, ConfigError, ControlBuilderError, ControlErrorKind, ExportError,
    SerializationError, SubplotError,
)
from .frames import table_from_dataframe, traces_from_dataframe
from .layout import (
    Animation, AnimationOptions, Annotation, Axis, BuiltinTheme, Button, ButtonBuilder,
    ButtonMethod, Frame, Layout, Legend, Margin, Slider, SliderStep, SliderStepBuilder,
    Template, UpdateMenu, axis_key, axis_ref,
)
from .plot import Plot, Traces
from .subplots import MIN_SUBPLOT_FRACTION, StartCell, SubplotsBuilder
from .traces import (
    ArrayTraces, Bar, BoxMean, BoxPlot, BoxPoints, Candlestick, Contour, DensityMapbox, HeatMap,
    Histogram, Image, Mesh3D, Ohlc, Pie, Sankey, Scatter, Scatter3D, ScatterMapbox,
    ScatterPolar, Surface, Table,
)

__version__ = "0.1.0"
