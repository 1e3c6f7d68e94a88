from pathlib import Path

import numpy as np
import pandas as pd

from chartspec import (
    Animation, AnimationOptions, Bar, ButtonBuilder, Frame, Layout, Mode, Plot, Scatter,
    SliderStepBuilder, Slider, SubplotsBuilder, UpdateMenu, configure_logging,
    traces_from_dataframe,
)
from chartspec.layout import BarMode, FrameSettings

configure_logging("INFO")
out = Path("out")
out.mkdir(exist_ok=True)

df = pd.DataFrame({
    "day": list(range(10)) * 2,
    "region": ["NA"] * 10 + ["EMEA"] * 10,
    "revenue": np.concatenate([np.linspace(10, 20, 10), np.linspace(5, 25, 10)]),
})

# Example 1: one line per region, with buttons switching line/marker mode
plot = Plot().add_traces(traces_from_dataframe(df, "day", "revenue", by="region", mode=Mode.lines))
buttons = [
    ButtonBuilder().label("Lines").push_restyle(Scatter.modify_all_mode(Mode.lines)).build(),
    ButtonBuilder().label("Markers").push_restyle(Scatter.modify_all_mode(Mode.markers)).build(),
]
plot.set_layout(Layout(title="Revenue by region", update_menus=[UpdateMenu(buttons=buttons)]))
plot.write_html(out / "revenue.html")
print(f"Wrote {out / 'revenue.html'}")

# Example 2: 2x2 subplots with shared x axes
grid = SubplotsBuilder(2, 2).shared_xaxes().subplot_titles(["a", "b", "c", "d"]).spacing(0.08, 0.12)
for i, (r, c) in enumerate([(1, 1), (1, 2), (2, 1), (2, 2)]):
    grid.add_trace(Bar.new(["x", "y", "z"], [i + 1, i + 2, i + 3]), r, c)
grid.build().write_html(out / "subplots.html")
print(f"Wrote {out / 'subplots.html'}")

# Example 3: animated bars driven by a slider
anim = Plot().add_trace(Bar.new(["a", "b"], [1, 1]))
steps = []
for k in range(1, 4):
    name = f"step{k}"
    anim.add_frame(Frame(name=name, data=[Bar.new(["a", "b"], [k, k * k])]))
    steps.append(
        SliderStepBuilder()
        .label(name)
        .animation(Animation.frames([name]).with_options(AnimationOptions(frame=FrameSettings(duration=300, redraw=True))))
        .build()
    )
anim.set_layout(Layout(bar_mode=BarMode.group, sliders=[Slider(steps=steps)]))
anim.write_html(out / "animation.html")
print(f"Wrote {out / 'animation.html'}")
