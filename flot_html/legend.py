from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from flot_html.plot import Plot


class Corner(str, Enum):
    NONE = "none"
    TOP_RIGHT = "ne"
    TOP_LEFT = "nw"
    BOTTOM_RIGHT = "se"
    BOTTOM_LEFT = "sw"


LEGEND_SORT_ORDERS = ("ascending", "descending", "reverse")


@dataclass
class Legend:
    plot: "Plot"

    def set_option(self, key: str, value: Any) -> "Legend":
        self.plot.guard.check("legend." + key)
        self.plot._options.set("legend", key, value=value)
        return self

    def position(self, corner: Corner) -> "Legend":
        corner = Corner(corner)
        if corner is Corner.NONE:
            return self.hide()
        self.plot.guard.check("legend.position")
        self.plot._options.remove("legend", "show")
        return self.set_option("position", corner.value)

    def hide(self) -> "Legend":
        return self.set_option("show", False)

    def columns(self, count: int) -> "Legend":
        if count < 1:
            raise ValueError("legend columns must be >= 1")
        return self.set_option("noColumns", int(count))

    def margin(self, x: int, y: int | None = None) -> "Legend":
        if y is None:
            return self.set_option("margin", int(x))
        return self.set_option("margin", [int(x), int(y)])

    def background_color(self, color: str) -> "Legend":
        return self.set_option("backgroundColor", color)

    def background_opacity(self, opacity: float) -> "Legend":
        if not 0.0 <= opacity <= 1.0:
            raise ValueError("legend opacity must be in [0, 1]")
        return self.set_option("backgroundOpacity", float(opacity))

    def label_box_border_color(self, color: str) -> "Legend":
        return self.set_option("labelBoxBorderColor", color)

    def sorted(self, order: str | bool = True) -> "Legend":
        if isinstance(order, str) and order not in LEGEND_SORT_ORDERS:
            raise ValueError(f"legend sort order must be one of {LEGEND_SORT_ORDERS}")
        return self.set_option("sorted", order)
