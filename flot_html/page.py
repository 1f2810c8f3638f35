from __future__ import annotations

import logging
from pathlib import Path

from flot_html.assets import AssetSources
from flot_html.emitter import render_document
from flot_html.plot import DEFAULT_PLOT_SIZE, Plot
from flot_html.state import PageState, SealGuard


LOGGER = logging.getLogger(__name__)


class Page:
    """Owns every plot of one HTML document.

    Plot and series handles stay valid and mutable until `render()` seals the
    page; after that every mutating call on any handle raises PageSealedError.
    """

    def __init__(self, title: str = "", *, default_size: tuple[int, int] = DEFAULT_PLOT_SIZE) -> None:
        width, height = default_size
        if width <= 0 or height <= 0:
            raise ValueError("default_size width/height must be > 0")
        self.title = title
        self.default_size = (int(width), int(height))
        self._guard = SealGuard()
        self._plots: list[Plot] = []
        self._count = 0
        self._rendered: tuple[Plot, ...] | None = None

    @property
    def state(self) -> PageState:
        return self._guard.state

    @property
    def sealed(self) -> bool:
        return self._guard.sealed

    @property
    def plots(self) -> tuple[Plot, ...]:
        if self._rendered is not None:
            return self._rendered
        return tuple(self._plots)

    def plot(self, title: str = "") -> Plot:
        self._guard.check("plot")
        self._count += 1
        width, height = self.default_size
        plot = Plot(index=self._count, title=title, width=width, height=height, guard=self._guard)
        self._plots.append(plot)
        return plot

    def to_html(self, *, assets: AssetSources | None = None) -> str:
        resolved = assets if assets is not None else AssetSources.from_env()
        return render_document(self.title, self.plots, resolved)

    def render(self, path: str | Path, *, assets: AssetSources | None = None) -> Path:
        self._guard.seal("render")
        self._rendered = tuple(self._plots)
        self._plots = []
        out = Path(path)
        document = self.to_html(assets=assets)
        out.write_text(document, encoding="utf-8")
        LOGGER.info("rendered %d plot(s) to %s", len(self._rendered), out)
        return out
