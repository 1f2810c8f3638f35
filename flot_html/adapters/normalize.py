from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any

import numpy as np

from flot_html.errors import PlotDataError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


Point = tuple[float, float]


def frange(start: float, stop: float, step: float) -> Iterator[float]:
    """Lazy float range, `stop` exclusive."""

    if step <= 0:
        raise ValueError("step must be > 0")
    value = float(start)
    end = float(stop)
    while value < end:
        yield value
        value += step


def zip_xy(xs: Iterable[Any], ys: Iterable[Any]) -> Iterator[Point]:
    pairs = zip(xs, ys, strict=True)
    while True:
        try:
            x, y = next(pairs)
        except StopIteration:
            return
        except ValueError as exc:
            raise PlotDataError("x and y length mismatch") from exc
        yield (_as_float(x, label="x"), _as_float(y, label="y"))


def map_pairs(xs: Iterable[Any], fn: Callable[[float], float]) -> Iterator[Point]:
    """Yield `(x, fn(x))` for every x."""

    for raw in xs:
        x = _as_float(raw, label="x")
        yield (x, float(fn(x)))


def map_values(xs: Iterable[Any], fn: Callable[[float], float]) -> Iterator[Point]:
    # Accepts one-shot iterators (ranges, generators) as well as sequences.
    return map_pairs(iter(xs), fn)


def normalize_points(data: Any) -> list[list[float]]:
    """Coerce point input into a list of `[x, y]` float pairs.

    Accepts an iterable of pairs, an (N, 2) numpy array, a pandas DataFrame
    with exactly two numeric columns, or an (N, 2) torch tensor.
    """

    if data is None:
        raise PlotDataError("point data is required")
    arr = _coerce_2d_numeric(data)
    return [[float(x), float(y)] for x, y in arr.tolist()]


def _coerce_2d_numeric(value: Any) -> np.ndarray:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return _check_pair_shape(tensor.to(torch.float64).numpy())

    if pd is not None and isinstance(value, pd.DataFrame):
        numeric_cols = [c for c in value.columns if _is_numeric_dtype(value[c])]
        if len(numeric_cols) != 2:
            raise PlotDataError("DataFrame input must contain exactly two numeric columns")
        return _coerce_ndarray(value[numeric_cols].to_numpy())

    if isinstance(value, np.ndarray):
        return _coerce_ndarray(value)

    if isinstance(value, (str, bytes, bytearray)):
        raise PlotDataError(f"unsupported point input type: {type(value)!r}")

    if isinstance(value, Iterable):
        rows: list[Sequence[Any]] = []
        for i, item in enumerate(value):
            if isinstance(item, (str, bytes, bytearray)) or not isinstance(item, Iterable):
                raise PlotDataError(f"point at index {i} is not an (x, y) pair: {item!r}")
            pair = tuple(item)
            if len(pair) != 2:
                raise PlotDataError(f"point at index {i} has {len(pair)} values, expected 2")
            rows.append(pair)
        if not rows:
            return np.empty((0, 2), dtype=np.float64)
        return _coerce_ndarray(np.asarray(rows, dtype=object))

    raise PlotDataError(f"unsupported point input type: {type(value)!r}")


def _is_numeric_dtype(series: Any) -> bool:
    if pd is None:
        return False
    try:
        return bool(pd.api.types.is_numeric_dtype(series))
    except Exception:
        return False


def _check_pair_shape(arr: np.ndarray) -> np.ndarray:
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise PlotDataError(f"point array must have shape (N, 2), got {arr.shape}")
    return arr


def _coerce_ndarray(arr: np.ndarray) -> np.ndarray:
    if arr.size == 0 and arr.ndim == 1:
        return np.empty((0, 2), dtype=np.float64)
    _check_pair_shape(arr)
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape, dtype=np.float64)
    for i, row in enumerate(arr.tolist()):
        out[i, 0] = _as_float(row[0], label="x", index=i)
        out[i, 1] = _as_float(row[1], label="y", index=i)
    return out


def _as_float(raw: Any, *, label: str, index: int | None = None) -> float:
    if raw is None:
        return float("nan")
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        where = f" at index {index}" if index is not None else ""
        raise PlotDataError(f"{label} contains non-numeric value{where}: {raw!r}") from exc
