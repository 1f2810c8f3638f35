from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Literal, Sequence

from flot_html.expressions import ScriptAssignment, tick_prefix_formatter, tick_suffix_formatter, wrap_function

if TYPE_CHECKING:
    from flot_html.plot import Plot


AxisGroup = Literal["xaxes", "yaxes"]


class Side(str, Enum):
    RIGHT = "right"
    LEFT = "left"
    BOTTOM = "bottom"
    TOP = "top"


@dataclass
class Axis:
    """Handle on one slot of the plot's `xaxes`/`yaxes` array."""

    plot: "Plot"
    group: AxisGroup
    index: int

    @classmethod
    def attach(cls, plot: "Plot", group: AxisGroup, number: int) -> "Axis":
        if number < 1:
            raise ValueError("axis numbers start at 1")
        plot.guard.check(group[0] + "axis")
        plot._options.ensure_slot(group, index=number - 1)
        return cls(plot=plot, group=group, index=number - 1)

    @property
    def number(self) -> int:
        return self.index + 1

    def set_option(self, key: str, value: Any) -> "Axis":
        self.plot.guard.check("set_option")
        self.plot._options.set(self.group, self.index, key, value=value)
        return self

    def min(self, value: float) -> "Axis":
        return self.set_option("min", float(value))

    def max(self, value: float) -> "Axis":
        return self.set_option("max", float(value))

    def bounds(self, min: float | None = None, max: float | None = None) -> "Axis":
        if min is not None:
            self.min(min)
        if max is not None:
            self.max(max)
        return self

    def position(self, side: Side) -> "Axis":
        side = Side(side)
        if side is Side.RIGHT:
            # Secondary axes on the right share tick positions with axis 1.
            self.set_option("alignTicksWithAxis", 1)
        else:
            self.plot.guard.check("position")
            self.plot._options.remove(self.group, self.index, "alignTicksWithAxis")
        return self.set_option("position", side.value)

    def show(self, flag: bool = True) -> "Axis":
        return self.set_option("show", bool(flag))

    def color(self, color: str) -> "Axis":
        return self.set_option("color", color)

    def tick_color(self, color: str) -> "Axis":
        return self.set_option("tickColor", color)

    def time(self) -> "Axis":
        self.set_option("mode", "time")
        self.plot.time = True
        return self

    def time_format(self, fmt: str) -> "Axis":
        return self.set_option("timeformat", fmt)

    def tick_size(self, size: float | Sequence[Any]) -> "Axis":
        if isinstance(size, (list, tuple)):
            return self.set_option("tickSize", list(size))
        return self.set_option("tickSize", float(size))

    def tick_decimals(self, decimals: int) -> "Axis":
        return self.set_option("tickDecimals", int(decimals))

    def tick_values(self, values: Sequence[float]) -> "Axis":
        return self.set_option("ticks", [float(v) for v in values])

    def tick_values_and_labels(self, pairs: Sequence[tuple[float, str]]) -> "Axis":
        return self.set_option("ticks", [[float(v), str(label)] for v, label in pairs])

    def transform(self, expr: str) -> "Axis":
        return self._assign_function("transform", wrap_function(expr, ("v",)))

    def inverse_transform(self, expr: str) -> "Axis":
        return self._assign_function("inverseTransform", wrap_function(expr, ("v",)))

    def label_formatter(self, expr: str) -> "Axis":
        return self._assign_function("tickFormatter", wrap_function(expr, ("v", "axis")))

    def label_post(self, suffix: str) -> "Axis":
        return self.label_formatter(tick_suffix_formatter(suffix))

    def label_pre(self, prefix: str) -> "Axis":
        return self.label_formatter(tick_prefix_formatter(prefix))

    def _assign_function(self, key: str, source: str) -> "Axis":
        self.plot.guard.check(key)
        self.plot.add_script_assignment(ScriptAssignment(path=(self.group, self.index, key), source=source))
        return self
