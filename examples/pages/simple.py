from __future__ import annotations

from flot_html import Page


def build_page() -> Page:
    page = Page("Lines and Points")

    p = page.plot("").size(500, 300)
    p.grid().color("red").background_gradient("#FFF", "#AAA")
    p.xaxis().tick_values_and_labels(
        [(0.0, "start"), (0.25, ""), (0.5, "middle"), (0.75, ""), (1.0, "end")]
    )
    p.lines("lines", [(0.0, 1.0), (1.0, 4.5)]).fill(0.3).line_width(0)
    p.points("points", [(0.5, 1.2), (0.8, 4.0)]).symbol("circle")
    p.text(
        """
        Any descriptive text will be HTML escaped, so <bold>text<bold>
        doesn't work
        """
    )
    return page
