from __future__ import annotations

import math

from flot_html import Page, frange, map_values


def build_page() -> Page:
    page = Page("")
    p = page.plot("")
    p.yaxis().transform("Math.log(v+0.0001)").inverse_transform("Math.exp(v)").min(0.0).tick_values(
        [0.1, 1.0, 10.0, 100.0, 1000.0]
    )
    p.lines("", map_values(frange(0.1, 5.0, 0.05), math.exp))
    return page
