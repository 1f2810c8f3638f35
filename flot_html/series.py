from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from flot_html.adapters import normalize_points
from flot_html.config_tree import ConfigTree
from flot_html.errors import KindMismatchError
from flot_html.state import SealGuard


class SeriesKind(str, Enum):
    LINES = "lines"
    POINTS = "points"
    BARS = "bars"


BAR_ALIGNMENTS = ("left", "center", "right")


@dataclass
class Series:
    """One data trace; options for the kind live under the kind's own key."""

    kind: SeriesKind
    _config: ConfigTree = field(repr=False)
    guard: SealGuard = field(default_factory=SealGuard, repr=False)
    symbols: bool = False

    @classmethod
    def create(
        cls,
        kind: SeriesKind,
        label: str | None,
        data: Any,
        *,
        guard: SealGuard | None = None,
    ) -> "Series":
        config = ConfigTree()
        if label:
            config.set("label", value=label)
        config.set("data", value=normalize_points(data))
        config.set(kind.value, value={"show": True})
        return cls(kind=kind, _config=config, guard=guard or SealGuard())

    @property
    def label_text(self) -> str | None:
        return self._config.get("label")

    @property
    def points(self) -> list[list[float]]:
        return self._config.snapshot("data")

    def option(self, *path: str) -> Any:
        """Read-only lookup into the serialized series object."""

        return self._config.snapshot(*path)

    def to_dict(self) -> dict[str, Any]:
        return self._config.to_dict()

    def to_json(self) -> str:
        return self._config.to_json()

    def _set(self, operation: str, key: str, value: Any) -> "Series":
        self.guard.check(operation)
        self._config.set(key, value=value)
        return self

    def _set_kind_option(self, operation: str, key: str, value: Any, *only: SeriesKind) -> "Series":
        self.guard.check(operation)
        if only and self.kind not in only:
            raise KindMismatchError(operation, self.kind.value, [k.value for k in only])
        self._config.set(self.kind.value, key, value=value)
        return self

    def label(self, text: str | None) -> "Series":
        self.guard.check("label")
        if text:
            self._config.set("label", value=text)
        else:
            self._config.remove("label")
        return self

    def xaxis(self, which: int) -> "Series":
        if which < 1:
            raise ValueError("axis numbers start at 1")
        return self._set("xaxis", "xaxis", int(which))

    def yaxis(self, which: int) -> "Series":
        if which < 1:
            raise ValueError("axis numbers start at 1")
        return self._set("yaxis", "yaxis", int(which))

    def color(self, color: str) -> "Series":
        return self._set("color", "color", color)

    def shadow_size(self, size: int) -> "Series":
        return self._set("shadow_size", "shadowSize", int(size))

    def highlight_color(self, color: str) -> "Series":
        return self._set("highlight_color", "highlightColor", color)

    def fill(self, opacity: float) -> "Series":
        return self._set_kind_option("fill", "fill", float(opacity))

    def fill_color(self, color: str) -> "Series":
        return self._set_kind_option("fill_color", "fillColor", color)

    def line_width(self, size: int) -> "Series":
        return self._set_kind_option("line_width", "lineWidth", int(size))

    def radius(self, size: int) -> "Series":
        return self._set_kind_option("radius", "radius", int(size), SeriesKind.POINTS)

    def symbol(self, name: str) -> "Series":
        self._set_kind_option("symbol", "symbol", name, SeriesKind.POINTS)
        self.symbols = True
        return self

    def steps(self) -> "Series":
        return self._set_kind_option("steps", "steps", True, SeriesKind.LINES)

    def width(self, width: float) -> "Series":
        return self._set_kind_option("width", "barWidth", float(width), SeriesKind.BARS)

    def align(self, alignment: str) -> "Series":
        if alignment not in BAR_ALIGNMENTS:
            raise ValueError(f"bar alignment must be one of {BAR_ALIGNMENTS}")
        return self._set_kind_option("align", "align", alignment, SeriesKind.BARS)

    def horizontal(self) -> "Series":
        return self._set_kind_option("horizontal", "horizontal", True, SeriesKind.BARS)
