from __future__ import annotations

from flot_html import Corner, Page, map_values


def build_page() -> Page:
    page = Page("Histogram")
    page.plot("Squares of Integers up to 9").legend_pos(Corner.TOP_LEFT).bars(
        "squares", map_values(range(10), lambda x: x * x)
    ).width(0.75)
    return page
