from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Mapping

from flot_html.errors import ConfigPathError, MarkingError

if TYPE_CHECKING:
    from flot_html.plot import Plot


_PATH = ("grid", "markings")


@dataclass
class Markings:
    """Appends to `grid.markings`; styling calls target the newest marking."""

    plot: "Plot"

    @classmethod
    def attach(cls, plot: "Plot") -> "Markings":
        plot.guard.check("markings")
        plot._options.ensure(*_PATH, default=[])
        return cls(plot=plot)

    def add_marking(self, marking: Mapping[str, Any]) -> "Markings":
        self.plot.guard.check("add_marking")
        self.plot._options.append(*_PATH, value=marking)
        return self

    def vertical_area(self, x1: float, x2: float) -> "Markings":
        return self.add_marking({"xaxis": {"from": float(x1), "to": float(x2)}})

    def horizontal_area(self, y1: float, y2: float) -> "Markings":
        return self.add_marking({"yaxis": {"from": float(y1), "to": float(y2)}})

    def vertical_line(self, x: float) -> "Markings":
        return self.vertical_area(x, x)

    def horizontal_line(self, y: float) -> "Markings":
        return self.horizontal_area(y, y)

    def area(self, x1: float, x2: float, y1: float, y2: float) -> "Markings":
        return self.add_marking(
            {
                "xaxis": {"from": float(x1), "to": float(x2)},
                "yaxis": {"from": float(y1), "to": float(y2)},
            }
        )

    def color(self, color: str) -> "Markings":
        self._last("color")["color"] = color
        return self

    def line_width(self, width: int) -> "Markings":
        self._last("line_width")["lineWidth"] = int(width)
        return self

    def _last(self, operation: str) -> dict[str, Any]:
        self.plot.guard.check(operation)
        try:
            return self.plot._options.last(*_PATH)
        except ConfigPathError as exc:
            raise MarkingError(f"{operation}() needs a marking; add one first") from exc
