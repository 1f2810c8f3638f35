from __future__ import annotations

from dataclasses import dataclass, field
import html
from typing import Any, Literal

from flot_html.axis import Axis
from flot_html.config_tree import ConfigTree
from flot_html.expressions import ScriptAssignment
from flot_html.grid import Grid
from flot_html.legend import Corner, Legend
from flot_html.markings import Markings
from flot_html.series import Series, SeriesKind
from flot_html.state import SealGuard


DEFAULT_PLOT_SIZE = (800, 300)

BlockKind = Literal["text", "html"]


@dataclass(frozen=True)
class DescriptionBlock:
    kind: BlockKind
    content: str

    def render(self) -> str:
        if self.kind == "html":
            return self.content
        return f"<p>{html.escape(self.content)}</p>"


@dataclass
class Plot:
    index: int
    title: str = ""
    width: int = DEFAULT_PLOT_SIZE[0]
    height: int = DEFAULT_PLOT_SIZE[1]
    guard: SealGuard = field(default_factory=SealGuard, repr=False)
    _options: ConfigTree = field(default_factory=ConfigTree, repr=False)
    time: bool = False
    extra_symbols_enabled: bool = False
    _series: list[Series] = field(default_factory=list, repr=False)
    _blocks: list[DescriptionBlock] = field(default_factory=list, repr=False)
    _assignments: list[ScriptAssignment] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.index < 1:
            raise ValueError("plot index must be >= 1")
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be > 0")

    @property
    def placeholder(self) -> str:
        return f"plot{self.index}"

    @property
    def series(self) -> tuple[Series, ...]:
        return tuple(self._series)

    @property
    def blocks(self) -> tuple[DescriptionBlock, ...]:
        return tuple(self._blocks)

    @property
    def script_assignments(self) -> tuple[ScriptAssignment, ...]:
        return tuple(self._assignments)

    @property
    def symbols(self) -> bool:
        return self.extra_symbols_enabled or any(s.symbols for s in self._series)

    def option(self, *path: str | int) -> Any:
        """Copy of the options node at `path` (None when absent)."""

        return self._options.snapshot(*path)

    def options_dict(self) -> dict[str, Any]:
        return self._options.to_dict()

    def size(self, width: int, height: int) -> "Plot":
        self.guard.check("size")
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be > 0")
        self.width = int(width)
        self.height = int(height)
        return self

    def text(self, text: str) -> "Plot":
        self.guard.check("text")
        self._blocks.append(DescriptionBlock(kind="text", content=text.strip()))
        return self

    def html(self, markup: str) -> "Plot":
        self.guard.check("html")
        self._blocks.append(DescriptionBlock(kind="html", content=markup))
        return self

    def lines(self, label: str | None, data: Any) -> Series:
        return self._add_series(SeriesKind.LINES, label, data)

    def points(self, label: str | None, data: Any) -> Series:
        return self._add_series(SeriesKind.POINTS, label, data)

    def bars(self, label: str | None, data: Any) -> Series:
        return self._add_series(SeriesKind.BARS, label, data)

    def _add_series(self, kind: SeriesKind, label: str | None, data: Any) -> Series:
        self.guard.check(kind.value)
        series = Series.create(kind, label, data, guard=self.guard)
        self._series.append(series)
        return series

    def xaxis(self, number: int = 1) -> Axis:
        return Axis.attach(self, "xaxes", number)

    def yaxis(self, number: int = 1) -> Axis:
        return Axis.attach(self, "yaxes", number)

    def xaxis2(self) -> Axis:
        return self.xaxis(2)

    def yaxis2(self) -> Axis:
        return self.yaxis(2)

    def markings(self) -> Markings:
        return Markings.attach(self)

    def grid(self) -> Grid:
        self.guard.check("grid")
        return Grid(plot=self)

    def legend(self) -> Legend:
        self.guard.check("legend")
        return Legend(plot=self)

    def legend_pos(self, corner: Corner) -> "Plot":
        self.legend().position(corner)
        return self

    def extra_symbols(self) -> "Plot":
        self.guard.check("extra_symbols")
        self.extra_symbols_enabled = True
        return self

    def set_option(self, key: str, subkey: str, value: Any) -> "Plot":
        self.guard.check("set_option")
        self._options.set(key, subkey, value=value)
        return self

    def add_script_assignment(self, assignment: ScriptAssignment) -> None:
        self.guard.check("add_script_assignment")
        self._assignments = [a for a in self._assignments if a.path != assignment.path]
        self._assignments.append(assignment)

    def render_placeholder(self) -> str:
        parts: list[str] = []
        if self.title:
            parts.append(f"<h2>{html.escape(self.title)}</h2>\n")
        parts.append(f'<div id="{self.placeholder}" style="width:{self.width}px;height:{self.height}px"></div>\n')
        for block in self._blocks:
            parts.append(block.render() + "\n")
        return "".join(parts)

    def render_script(self) -> str:
        lines: list[str] = []
        names: list[str] = []
        for k, series in enumerate(self._series, start=1):
            name = f"{self.placeholder}_{k}"
            names.append(name)
            lines.append(f"var {name} = {series.to_json()};")
        options_name = f"{self.placeholder}_options"
        lines.append(f"var {options_name} = {self._options.to_json()};")
        for assignment in self._assignments:
            lines.append(assignment.render(options_name))
        lines.append(f'$.plot($("#{self.placeholder}"),[{",".join(names)}],{options_name});')
        return "\n".join(lines) + "\n"
