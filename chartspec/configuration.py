from __future__ import annotations
from enum import Enum, IntEnum
from typing import List, Optional

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from .base import SpecModel


class ImageButtonFormats(str, Enum):
    png = "png"
    svg = "svg"
    jpeg = "jpeg"
    webp = "webp"


class ToImageButtonOptions(SpecModel):
    format: Optional[ImageButtonFormats] = None
    filename: Optional[str] = None
    height: Optional[int] = None
    width: Optional[int] = None
    scale: Optional[float] = None


class ModeBarButtonName(str, Enum):
    zoom_2d = "zoom2d"
    pan_2d = "pan2d"
    select_2d = "select2d"
    lasso_2d = "lasso2d"
    zoom_in_2d = "zoomIn2d"
    zoom_out_2d = "zoomOut2d"
    auto_scale_2d = "autoScale2d"
    reset_scale_2d = "resetScale2d"
    zoom_3d = "zoom3d"
    pan_3d = "pan3d"
    orbit_rotation = "orbitRotation"
    table_rotation = "tableRotation"
    handle_drag_3d = "handleDrag3d"
    reset_camera_default_3d = "resetCameraDefault3d"
    reset_camera_last_save_3d = "resetCameraLastSave3d"
    hover_closest_3d = "hoverClosest3d"
    hover_closest_cartesian = "hoverClosestCartesian"
    hover_compare_cartesian = "hoverCompareCartesian"
    zoom_in_geo = "zoomInGeo"
    zoom_out_geo = "zoomOutGeo"
    reset_geo = "resetGeo"
    hover_closest_geo = "hoverClosestGeo"
    hover_closest_gl_2d = "hoverClosestGl2d"
    hover_closest_pie = "hoverClosestPie"
    toggle_hover = "toggleHover"
    reset_views = "resetViews"
    to_image = "toImage"
    send_data_to_cloud = "sendDataToCloud"
    toggle_spikelines = "toggleSpikelines"
    reset_view_mapbox = "resetViewMapbox"


class DisplayModeBar(Enum):
    true = True
    false = False
    hover = "hover"


class DoubleClick(Enum):
    false = False
    reset = "reset"
    auto_size = "autosize"
    reset_auto_size = "reset+autosize"


class PlotGLPixelRatio(IntEnum):
    one = 1
    two = 2
    three = 3
    four = 4


class Configuration(SpecModel):
    """The plotly.js ``config`` object; keys are camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel)

    typeset_math: Optional[bool] = None
    autosizable: Optional[bool] = None
    scroll_zoom: Optional[bool] = None
    fill_frame: Optional[bool] = None
    frame_margins: Optional[float] = None
    editable: Optional[bool] = None
    static_plot: Optional[bool] = None
    to_image_button_options: Optional[ToImageButtonOptions] = None
    display_mode_bar: Optional[DisplayModeBar] = None
    mode_bar_buttons_to_remove: Optional[List[ModeBarButtonName]] = None
    show_link: Optional[bool] = None
    plotly_server_url: Optional[str] = Field(None, alias="plotlyServerURL")
    topojson_url: Optional[str] = Field(None, alias="topojsonURL")
    link_text: Optional[str] = None
    mapbox_access_token: Optional[str] = None
    show_edit_in_chart_studio: Optional[bool] = None
    locale: Optional[str] = None
    display_logo: Optional[bool] = Field(None, alias="displaylogo")
    responsive: Optional[bool] = None
    double_click: Optional[DoubleClick] = None
    double_click_delay: Optional[int] = None
    show_axis_drag_handles: Optional[bool] = None
    show_axis_range_entry_boxes: Optional[bool] = None
    show_tips: Optional[bool] = None
    send_data: Optional[bool] = None
    watermark: Optional[bool] = None
    plot_gl_pixel_ratio: Optional[PlotGLPixelRatio] = None
    show_send_to_cloud: Optional[bool] = None
    queue_length: Optional[int] = None
