import json

import pytest
from pydantic import ValidationError

from chartspec import (
    Animation, Bar, ButtonBuilder, ControlBuilderError, ControlErrorKind, Layout, SliderStepBuilder,
    Visible, dumps,
)
from chartspec.layout import (
    AnimationEasing, AnimationMode, AnimationOptions, FrameSettings, Slider, TransitionSettings,
    UpdateMenu, UpdateMenuType,
)


def _visible():
    return Bar.modify_visible([Visible.true, Visible.false])


def test_restyle_delta_shape():
    assert _visible() == {"visible": [True, False]}
    assert Bar.modify_all_opacity(0.5) == {"opacity": 0.5}
    assert Bar.modify_text_position(["inside", "outside"]) == {"textposition": ["inside", "outside"]}


def test_button_skip_when_nothing_pushed():
    button = ButtonBuilder().build()
    assert button.to_dict() == {"args": None, "method": "skip"}
    assert json.loads(button.to_json()) == {"args": None, "method": "skip"}


def test_button_restyle_only():
    button = ButtonBuilder().push_restyle(_visible()).build()
    assert button.to_dict() == {"args": [{"visible": [True, False]}], "method": "restyle"}


def test_button_relayout_only():
    button = ButtonBuilder().push_relayout(Layout.modify_title("X")).build()
    assert button.to_dict() == {"args": [{"title": {"text": "X"}}], "method": "relayout"}


def test_button_update_merges_both():
    button = (
        ButtonBuilder()
        .label("Label")
        .name("Name")
        .template_item_name("Template")
        .visible(True)
        .push_restyle(_visible())
        .push_relayout(Layout.modify_title("Hello"))
        .push_relayout(Layout.modify_width(20))
        .build()
    )
    assert button.to_dict() == {
        "args": [{"visible": [True, False]}, {"title": {"text": "Hello"}, "width": 20}],
        "label": "Label",
        "method": "update",
        "name": "Name",
        "templateitemname": "Template",
        "visible": True,
    }


def test_later_pushes_win_per_key():
    button = ButtonBuilder().push_relayout({"width": 10}).push_relayout({"width": 30}).build()
    assert button.args == [{"width": 30}]


def test_invalid_restyle_object_latches():
    builder = ButtonBuilder().push_restyle(None).push_relayout(None)
    with pytest.raises(ControlBuilderError) as exc:
        builder.build()
    assert exc.value.kind == ControlErrorKind.invalid_restyle_object


def test_invalid_relayout_object():
    with pytest.raises(ControlBuilderError) as exc:
        ButtonBuilder().push_relayout([1, 2]).build()
    assert exc.value.kind == ControlErrorKind.invalid_relayout_object


def test_unserializable_delta():
    with pytest.raises(ControlBuilderError) as exc:
        ButtonBuilder().push_restyle({"x": object()}).build()
    assert exc.value.kind == ControlErrorKind.restyle_serialization_error


def test_animation_frame_selectors():
    assert Animation.all_frames().to_dict() == [None, {}]
    assert Animation.frames(["a", "b"]).to_dict() == [["a", "b"], {}]
    pause = Animation.pause()
    assert pause.is_pause()
    assert pause.to_dict() == [
        [None],
        {"frame": {"duration": 0, "redraw": False}, "transition": {"duration": 0}, "mode": "immediate"},
    ]
    assert dumps(pause.to_dict()).startswith("[[null],")
    assert dumps(Animation.all_frames().to_dict()).startswith("[null,")


def test_frame_selection_is_names_only():
    with pytest.raises(ValidationError):
        Animation.frames(["a", None])
    with pytest.raises(ValidationError):
        Animation(selection=[None])
    assert not Animation.frames(["a"]).is_pause()
    assert Animation.pause().model_copy(deep=True).to_dict()[0] == [None]


def test_animation_options():
    anim = Animation.frames(["f1"]).with_options(AnimationOptions(
        mode=AnimationMode.next,
        transition=TransitionSettings(duration=300, easing=AnimationEasing.cubic_in_out),
        frame=FrameSettings(duration=500, redraw=True),
        fromcurrent=True,
    ))
    assert anim.to_dict()[1] == {
        "frame": {"duration": 500, "redraw": True},
        "transition": {"duration": 300, "easing": "cubic-in-out"},
        "mode": "next",
        "fromcurrent": True,
    }


def test_slider_step_animate_takes_precedence():
    step = (
        SliderStepBuilder()
        .label("f1")
        .value(3)
        .push_restyle(_visible())
        .animation(Animation.frames(["f1"]))
        .build()
    )
    assert step.to_dict() == {"args": [["f1"], {}], "label": "f1", "method": "animate", "value": 3}


def test_slider_step_method_inference():
    assert SliderStepBuilder().build().to_dict() == {"args": None, "method": "skip"}
    step = SliderStepBuilder().push_relayout(Layout.modify_width(5)).build()
    assert step.to_dict() == {"args": [{"width": 5}], "method": "relayout"}


def test_slider_step_value_error_latches():
    with pytest.raises(ControlBuilderError) as exc:
        SliderStepBuilder().value(object()).push_restyle(None).build()
    assert exc.value.kind == ControlErrorKind.value_serialization_error


def test_menus_and_sliders_in_layout():
    layout = Layout(
        update_menus=[UpdateMenu(type=UpdateMenuType.buttons, buttons=[ButtonBuilder().label("a").build()])],
        sliders=[Slider(steps=[SliderStepBuilder().label("s").build()], active=0)],
    )
    d = layout.to_dict()
    assert d["updatemenus"] == [{"buttons": [{"args": None, "label": "a", "method": "skip"}], "type": "buttons"}]
    assert d["sliders"] == [{"active": 0, "steps": [{"args": None, "label": "s", "method": "skip"}]}]
