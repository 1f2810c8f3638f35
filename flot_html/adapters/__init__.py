from .normalize import frange, map_pairs, map_values, normalize_points, zip_xy

__all__ = [
    "frange",
    "map_pairs",
    "map_values",
    "normalize_points",
    "zip_xy",
]
