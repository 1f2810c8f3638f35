from __future__ import annotations

import numpy as np

from flot_html import Page, frange


def make_gaussian(xvalues: np.ndarray, mean: float, sigma: float) -> np.ndarray:
    s2 = 2.0 * sigma * sigma
    norm = 1.0 / np.sqrt(s2 * np.pi)
    return np.column_stack([xvalues, norm * np.exp(-((xvalues - mean) ** 2) / s2)])


def build_page() -> Page:
    page = Page()
    p = page.plot()
    xvalues = np.fromiter(frange(0.0, 10.0, 0.1), dtype=np.float64)
    p.lines("norm s=1.0", make_gaussian(xvalues, 5.0, 1.0))
    p.lines("norm s=0.7", make_gaussian(xvalues, 6.0, 0.5))
    return page
