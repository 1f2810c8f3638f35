from flot_html.adapters import frange, map_pairs, map_values, normalize_points, zip_xy
from flot_html.api import page
from flot_html.assets import AssetSources
from flot_html.axis import Axis, Side
from flot_html.config_tree import ConfigTree
from flot_html.errors import (
    ConfigPathError,
    FlotError,
    KindMismatchError,
    MarkingError,
    PageSealedError,
    PlotDataError,
)
from flot_html.grid import Grid
from flot_html.legend import Corner, Legend
from flot_html.markings import Markings
from flot_html.page import Page
from flot_html.plot import Plot
from flot_html.series import Series, SeriesKind
from flot_html.state import PageState

__all__ = [
    "AssetSources",
    "Axis",
    "ConfigPathError",
    "ConfigTree",
    "Corner",
    "FlotError",
    "Grid",
    "KindMismatchError",
    "Legend",
    "MarkingError",
    "Markings",
    "Page",
    "PageSealedError",
    "PageState",
    "Plot",
    "PlotDataError",
    "Series",
    "SeriesKind",
    "Side",
    "frange",
    "map_pairs",
    "map_values",
    "normalize_points",
    "page",
    "zip_xy",
]
