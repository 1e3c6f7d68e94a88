from .animation import (
    Animation, AnimationDirection, AnimationEasing, AnimationMode, AnimationOptions, Frame,
    FrameSettings, TransitionOrdering, TransitionSettings,
)
from .annotation import Annotation, ArrowSide, ClickToShow, HAlign, VAlign
from .axis import (
    Axis, AxisConstrain, AxisType, CategoryOrder, ColorAxis, ConstrainDirection, RangeBreak,
    RangeMode, RangeSelector, RangeSlider, RangeSliderYAxis, SelectorButton, SelectorStep,
    SliderRangeMode, SpikeMode, SpikeSnap, StepMode, TicksDirection, TicksPosition, axis_key,
    axis_ref,
)
from .controls import ControlMethod
from .geo import LayoutGeo, Projection, ProjectionType, Rotation
from .grid import GridDomain, GridPattern, GridXSide, GridYSide, LayoutGrid, RowOrder
from .layout import Layout, LayoutColorScale, Margin, ModeBar, UniformText
from .legend import GroupClick, ItemClick, ItemSizing, Legend, TraceOrder
from .mapbox import Center, Mapbox, MapboxStyle
from .modes import (
    BarMode, BarNorm, BoxMode, ClickMode, DragMode, DragMode3D, HoverMode, SelectDirection,
    UniformTextMode, ViolinMode, WaterfallMode,
)
from .polar import AngularAxis, GridShape, LayoutPolar, PolarDirection, RadialAxis
from .scene import (
    AspectMode, AspectRatio, Camera, CameraCenter, CameraProjection, CameraProjectionType, Eye,
    LayoutScene, Up,
)
from .shape import ActiveShape, DrawDirection, FillRule, NewShape, Shape, ShapeLayer, ShapeLine, ShapeSizeMode, ShapeType
from .slider import (
    Slider, SliderCurrentValue, SliderCurrentValueXAnchor, SliderMethod, SliderStep,
    SliderStepBuilder, SliderTransition, SliderTransitionEasing,
)
from .themes import BuiltinTheme, Template
from .update_menu import Button, ButtonBuilder, ButtonMethod, UpdateMenu, UpdateMenuDirection, UpdateMenuType
