from .common import ArrayTraces, Trace
from .scatter import Scatter, GroupNorm, StackGaps
from .bar import Bar
from .box_plot import BoxPlot, BoxMean, BoxPoints, BoxHoverOn, QuartileMethod
from .histogram import (
    Histogram, Bins, Cumulative, CurrentBin, HistDirection, HistFunc, HistNorm,
)
from .contour import Contour, Contours, ContoursType, Coloring, Operation
from .heat_map import HeatMap, Smoothing
from .surface import (
    Surface, Lighting, LightPosition, PlaneContours, PlaneProject, SurfaceContours,
)
from .sankey import Sankey, Arrangement, Link, Node, SankeyLine
from .table import (
    Table, Header, Cells, TableFill, TableFont, TableLine, Align,
    FontStyle, LinePosition, TextCase, TextVariant,
)
from .image import Image, ColorModel, PixelColor, ZSmooth
from .scatter_mapbox import ScatterMapbox, Selection, SelectionMarker
from .density_mapbox import DensityMapbox
from .candlestick import Candlestick
from .ohlc import Ohlc
from .scatter3d import Scatter3D, Projection, ProjectionCoord, SurfaceAxis
from .scatter_polar import ScatterPolar, ThetaUnit
from .mesh3d import Mesh3D, DelaunayAxis, IntensityMode, MeshContour, MeshLighting
from .pie import Pie, PieDirection, PieMarker, PieTextPosition, InsideTextOrientation
