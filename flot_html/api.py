from __future__ import annotations

from flot_html.page import Page
from flot_html.plot import DEFAULT_PLOT_SIZE


def page(title: str = "", *, width: int | None = None, height: int | None = None) -> Page:
    default_w, default_h = DEFAULT_PLOT_SIZE
    if width is not None and width <= 0:
        raise ValueError("width must be > 0")
    if height is not None and height <= 0:
        raise ValueError("height must be > 0")
    return Page(title, default_size=(width or default_w, height or default_h))
