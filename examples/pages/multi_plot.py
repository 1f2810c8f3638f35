from __future__ import annotations

import math

from flot_html import Corner, Page, frange, map_pairs, zip_xy


def build_page() -> Page:
    page = Page()
    p = page.plot()
    p.legend_pos(Corner.NONE).extra_symbols().xaxis().bounds(-0.2, 1.3)
    p.markings().horizontal_line(0.5).color("red")
    p.lines("lines", [(0.0, 1.0), (1.0, 4.5)]).fill(0.3).line_width(0)
    p.points("points", [(0.5, 1.2), (0.8, 4.0)]).symbol("cross").radius(10).line_width(0)

    cs = page.plot()
    cs.markings().vertical_line(4.5).color("black")
    xvalues = list(frange(0.0, 8.0, 0.2))
    cs.lines("sin", ((x, math.sin(x)) for x in xvalues))
    cs.lines("cos", map_pairs(xvalues, math.cos)).color("green")
    cs.points("data", zip_xy([1, 2, 5], [0.5, 1.0, 0.5]))
    return page
