from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from flot_html.plot import Plot


@dataclass
class Grid:
    plot: "Plot"

    def set_option(self, key: str, value: Any) -> "Grid":
        self.plot.guard.check("grid." + key)
        self.plot._options.set("grid", key, value=value)
        return self

    def show(self, flag: bool = True) -> "Grid":
        return self.set_option("show", bool(flag))

    def above_data(self, flag: bool = True) -> "Grid":
        return self.set_option("aboveData", bool(flag))

    def color(self, color: str) -> "Grid":
        return self.set_option("color", color)

    def background_color(self, color: str) -> "Grid":
        return self.set_option("backgroundColor", color)

    def background_gradient(self, top: str, bottom: str) -> "Grid":
        return self.set_option("backgroundColor", {"colors": [top, bottom]})

    def border_width(self, width: int) -> "Grid":
        return self.set_option("borderWidth", int(width))

    def border_color(self, color: str) -> "Grid":
        return self.set_option("borderColor", color)

    def margin(self, margin: int) -> "Grid":
        return self.set_option("margin", int(margin))

    def label_margin(self, margin: int) -> "Grid":
        return self.set_option("labelMargin", int(margin))

    def markings_color(self, color: str) -> "Grid":
        return self.set_option("markingsColor", color)

    def hoverable(self, flag: bool = True) -> "Grid":
        return self.set_option("hoverable", bool(flag))

    def clickable(self, flag: bool = True) -> "Grid":
        return self.set_option("clickable", bool(flag))
