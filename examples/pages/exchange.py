"""Two y-axes over time: exchange rate on the right, oil price on the left.

Reads `timestamp_seconds,value` CSV files; without paths a small built-in
sample is used.
"""

from __future__ import annotations

import csv
from pathlib import Path

from flot_html import Corner, Page, Side


_SAMPLE_RATES = [(1199145600.0, 1.47), (1201824000.0, 1.48), (1204329600.0, 1.55), (1207008000.0, 1.57)]
_SAMPLE_OIL = [(1199145600.0, 91.7), (1201824000.0, 92.9), (1204329600.0, 103.3), (1207008000.0, 109.1)]


def read_series(path: Path) -> list[tuple[float, float]]:
    rows: list[tuple[float, float]] = []
    with path.open(newline="", encoding="utf-8") as fh:
        for record in csv.reader(fh):
            if len(record) < 2:
                continue
            # Flot time axes expect milliseconds.
            rows.append((1000.0 * float(record[0]), float(record[1])))
    return rows


def build_page(rates_csv: Path | None = None, oil_csv: Path | None = None) -> Page:
    rates = read_series(rates_csv) if rates_csv is not None else [(1000.0 * t, v) for t, v in _SAMPLE_RATES]
    oil = read_series(oil_csv) if oil_csv is not None else [(1000.0 * t, v) for t, v in _SAMPLE_OIL]

    page = Page("")
    p = page.plot("Oil Price vs Euro exchange rate").legend_pos(Corner.BOTTOM_RIGHT).size(900, 400)
    p.xaxis().time()
    p.yaxis().min(0.0)
    p.yaxis2().position(Side.RIGHT).label_post("€")
    p.lines("dollar/euro exchange", rates).yaxis(2)
    p.lines("oil price", oil)
    return page
