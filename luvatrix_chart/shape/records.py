from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Callable, Hashable

import numpy as np

from luvatrix_chart.adapters import coerce_values
from luvatrix_chart.errors import ChartDataError

Accessor = Callable[[Any], Any]


@dataclass(frozen=True)
class ShapePoint:
    x: Any
    y: float | None
    y0: float | None = None
    key: Hashable | None = None


def field_accessor(name: str, position: int | None = None) -> Accessor:
    """Read `name` from a mapping or attribute, else `position` from a plain sequence."""

    def get(datum: Any) -> Any:
        if isinstance(datum, Mapping):
            return datum.get(name)
        if hasattr(datum, name):
            return getattr(datum, name)
        if (
            position is not None
            and isinstance(datum, Sequence)
            and not isinstance(datum, (str, bytes, bytearray))
            and len(datum) > position
        ):
            return datum[position]
        return None

    return get


def constant_or_accessor(value: Any, fallback: Accessor) -> Accessor:
    if value is None:
        return fallback
    if callable(value):
        return value
    return lambda _datum: value


def baseline_accessor(default: float = 0.0) -> Accessor:
    """The record's own `y0` when it carries one, else `default`."""

    y0 = field_accessor("y0", 2)

    def get(datum: Any) -> Any:
        value = y0(datum)
        return default if value is None else value

    return get


def points_from_arrays(x: Sequence[Any], y: Any, y0: Any = None, keys: Sequence[Hashable] | None = None) -> tuple[ShapePoint, ...]:
    """Zip column data into `ShapePoint` records. `None`/NaN y values stay missing."""

    y_arr = coerce_values(y, label="y")
    xs = list(x)
    if len(xs) != y_arr.size:
        raise ChartDataError(f"x and y length mismatch: {len(xs)} != {y_arr.size}")
    y0_arr = None
    if y0 is not None:
        y0_arr = coerce_values(y0, label="y0")
        if y0_arr.shape != y_arr.shape:
            raise ChartDataError(f"y and y0 length mismatch: {y_arr.size} != {y0_arr.size}")
    if keys is not None and len(keys) != y_arr.size:
        raise ChartDataError(f"keys and y length mismatch: {len(keys)} != {y_arr.size}")

    out: list[ShapePoint] = []
    for i, xv in enumerate(xs):
        out.append(
            ShapePoint(
                x=xv,
                y=_finite_or_none(y_arr[i]),
                y0=None if y0_arr is None else _finite_or_none(y0_arr[i]),
                key=None if keys is None else keys[i],
            )
        )
    return tuple(out)


def contiguous_runs(flags: Sequence[bool]) -> list[tuple[int, int]]:
    """Half-open `(start, stop)` index runs where `flags` is true."""

    idx = np.flatnonzero(np.asarray(flags, dtype=bool))
    if idx.size == 0:
        return []
    runs: list[tuple[int, int]] = []
    start = int(idx[0])
    prev = int(idx[0])
    for v in idx[1:]:
        iv = int(v)
        if iv == prev + 1:
            prev = iv
            continue
        runs.append((start, prev + 1))
        start = iv
        prev = iv
    runs.append((start, prev + 1))
    return runs


def _finite_or_none(value: float) -> float | None:
    return float(value) if np.isfinite(value) else None
