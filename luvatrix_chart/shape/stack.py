from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Callable, Hashable, Iterable, Sequence, Union

import numpy as np

from luvatrix_chart.adapters import normalize_named_series
from luvatrix_chart.errors import ChartConfigError, ChartDataError
from luvatrix_chart.shape.records import field_accessor

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class StackSeries:
    """One named series' values before stacking."""

    key: str
    values: tuple[float, ...]

    @property
    def total(self) -> float:
        return float(np.nansum(np.asarray(self.values, dtype=np.float64)))


@dataclass(frozen=True)
class StackPoint:
    """All series at one index: `(baseline, value)` per series, in input series order."""

    key: Hashable
    values: tuple[tuple[float, float], ...]
    data: Any = None


@dataclass(frozen=True)
class StackValue:
    """One series at one index, shaped for the area and bar generators."""

    y0: float
    y1: float
    key: Hashable
    data: Any = None

    @property
    def x(self) -> Hashable:
        return self.key

    @property
    def y(self) -> float:
        return self.y1


@dataclass(frozen=True)
class StackLayer:
    key: str
    index: int
    points: tuple[StackValue, ...]


@dataclass(frozen=True)
class StackResult:
    keys: tuple[str, ...]
    points: tuple[StackPoint, ...]
    order: tuple[int, ...]

    def layers(self) -> tuple[StackLayer, ...]:
        """Per-series view of the stack, in input series order."""

        return tuple(self.layer_at(i) for i in range(len(self.keys)))

    def layer_at(self, index: int) -> StackLayer:
        key = self.keys[index]
        points = tuple(
            StackValue(y0=p.values[index][0], y1=p.values[index][1], key=p.key, data=p.data) for p in self.points
        )
        return StackLayer(key=key, index=index, points=points)

    def layer(self, key: str) -> StackLayer:
        try:
            return self.layer_at(self.keys.index(key))
        except ValueError:
            raise KeyError(key) from None

    def extent(self) -> tuple[float, float]:
        """Lowest and highest edge over all pairs; `(0, 0)` when empty."""

        edges = [v for p in self.points for pair in p.values for v in pair]
        if not edges:
            return (0.0, 0.0)
        return (min(edges), max(edges))


OrderFn = Callable[[Sequence[StackSeries]], Sequence[int]]
OffsetFn = Callable[[np.ndarray, Sequence[int]], "tuple[np.ndarray, np.ndarray]"]


def order_none(series: Sequence[StackSeries]) -> list[int]:
    return list(range(len(series)))


def order_reverse(series: Sequence[StackSeries]) -> list[int]:
    return list(range(len(series)))[::-1]


def order_ascending(series: Sequence[StackSeries]) -> list[int]:
    """Smallest series total at the bottom; ties keep input order."""
    return sorted(range(len(series)), key=lambda i: series[i].total)


def order_descending(series: Sequence[StackSeries]) -> list[int]:
    return sorted(range(len(series)), key=lambda i: -series[i].total)


def offset_none(matrix: np.ndarray, order: Sequence[int]) -> tuple[np.ndarray, np.ndarray]:
    """Each series sits on the running sum of the series stacked before it."""

    ordered = matrix[list(order)]
    tops = np.cumsum(ordered, axis=0)
    bases = np.vstack([np.zeros((1, matrix.shape[1]), dtype=np.float64), tops[:-1]])
    y0 = np.empty_like(matrix)
    y1 = np.empty_like(matrix)
    y0[list(order)] = bases
    y1[list(order)] = tops
    return y0, y1


def offset_expand(matrix: np.ndarray, order: Sequence[int]) -> tuple[np.ndarray, np.ndarray]:
    """Like `offset_none`, normalized so every index stacks to a height of 1."""

    y0, y1 = offset_none(matrix, order)
    if matrix.shape[0] == 0:
        return y0, y1
    total = y1[list(order)[-1]].copy()
    degenerate = total == 0
    if np.any(degenerate):
        LOGGER.debug("expand stack: zero total at indices %s", np.flatnonzero(degenerate).tolist())
    safe = np.where(degenerate, 1.0, total)
    y0 = np.where(degenerate, 0.0, y0 / safe)
    y1 = np.where(degenerate, 0.0, y1 / safe)
    return y0, y1


def offset_diverging(matrix: np.ndarray, order: Sequence[int]) -> tuple[np.ndarray, np.ndarray]:
    """Positive values stack upward from 0, negative values downward from 0."""

    y0 = np.zeros_like(matrix)
    y1 = np.zeros_like(matrix)
    positive = np.zeros(matrix.shape[1], dtype=np.float64)
    negative = np.zeros(matrix.shape[1], dtype=np.float64)
    for i in order:
        row = matrix[i]
        base = np.where(row >= 0, positive, negative)
        y0[i] = base
        y1[i] = base + row
        positive = np.where(row > 0, positive + row, positive)
        negative = np.where(row < 0, negative + row, negative)
    return y0, y1


OFFSETS: dict[str, OffsetFn] = {
    "none": offset_none,
    "expand": offset_expand,
    "diverging": offset_diverging,
}

OffsetSpec = Union[str, OffsetFn]


class Stack:
    """Stacks per-key values of a list of records.

    `value(datum, key)` reads each series value; by default the key is looked
    up as a mapping key or attribute. Missing values count as 0. `index_key`
    labels each record (e.g. its date) and becomes the `key` of the
    resulting `StackPoint`; it defaults to the record position.
    """

    def __init__(
        self,
        keys: Iterable[str],
        *,
        value: Callable[[Any, str], Any] | None = None,
        index_key: Callable[[Any], Hashable] | None = None,
        offset: OffsetSpec = "none",
        order: OrderFn | None = None,
    ) -> None:
        self._keys = tuple(str(k) for k in keys)
        if len(set(self._keys)) != len(self._keys):
            raise ChartConfigError(f"stack keys must be unique: {list(self._keys)}")
        self._value = value or _attribute_value
        self._index_key = index_key
        self._offset = _resolve_offset(offset)
        self._order = order or order_none

    def stack(self, data: Iterable[Any]) -> StackResult:
        records = list(data)
        matrix = np.zeros((len(self._keys), len(records)), dtype=np.float64)
        for j, datum in enumerate(records):
            for i, key in enumerate(self._keys):
                matrix[i, j] = _as_float(self._value(datum, key))
        if self._index_key is None:
            labels: list[Hashable] = list(range(len(records)))
        else:
            labels = [self._index_key(d) for d in records]
        return _stack_matrix(self._keys, matrix, labels, records, self._offset, self._order)


def stack_series(
    series: Any,
    *,
    index: Sequence[Hashable] | None = None,
    offset: OffsetSpec = "none",
    order: OrderFn | None = None,
) -> StackResult:
    """Stack named value series of equal length.

    `series` may be a mapping of key to values, a sequence of `StackSeries` or
    `(key, values)` pairs, or a pandas DataFrame. Lengths must all match.
    """

    pairs = normalize_named_series(series)
    keys = tuple(k for k, _ in pairs)
    if len(set(keys)) != len(keys):
        raise ChartConfigError(f"stack keys must be unique: {list(keys)}")
    lengths = {k: int(v.size) for k, v in pairs}
    if len(set(lengths.values())) > 1:
        raise ChartConfigError(f"stack series lengths differ: {lengths}")
    n = next(iter(lengths.values()), 0)
    if index is None:
        labels: list[Hashable] = list(range(n))
    else:
        labels = list(index)
        if len(labels) != n:
            raise ChartConfigError(f"stack index has {len(labels)} labels for {n} values")

    matrix = np.zeros((len(pairs), n), dtype=np.float64)
    for i, (_, values) in enumerate(pairs):
        matrix[i] = np.where(np.isfinite(values), values, 0.0)
    return _stack_matrix(keys, matrix, labels, None, _resolve_offset(offset), order or order_none)


def _stack_matrix(
    keys: tuple[str, ...],
    matrix: np.ndarray,
    labels: Sequence[Hashable],
    records: Sequence[Any] | None,
    offset: OffsetFn,
    order_fn: OrderFn,
) -> StackResult:
    m, n = matrix.shape
    if m == 0 or n == 0:
        return StackResult(keys=keys, points=(), order=tuple(range(m)))

    inputs = [StackSeries(key=k, values=tuple(float(v) for v in matrix[i])) for i, k in enumerate(keys)]
    order = tuple(int(i) for i in order_fn(inputs))
    if sorted(order) != list(range(m)):
        raise ChartConfigError(f"stack order must be a permutation of 0..{m - 1}: {list(order)}")

    y0, y1 = offset(matrix, order)
    points = tuple(
        StackPoint(
            key=labels[j],
            values=tuple((float(y0[i, j]), float(y1[i, j])) for i in range(m)),
            data=None if records is None else records[j],
        )
        for j in range(n)
    )
    return StackResult(keys=keys, points=points, order=order)


def _resolve_offset(offset: OffsetSpec) -> OffsetFn:
    if callable(offset):
        return offset
    try:
        return OFFSETS[offset]
    except KeyError:
        raise ChartConfigError(f"unknown stack offset `{offset}`; expected one of: {', '.join(OFFSETS)}") from None


def _attribute_value(datum: Any, key: str) -> Any:
    return field_accessor(key)(datum)


def _as_float(value: Any) -> float:
    if value is None:
        return 0.0
    try:
        out = float(value)
    except (TypeError, ValueError) as exc:
        raise ChartDataError(f"stack value is not numeric: {value!r}") from exc
    return out if np.isfinite(out) else 0.0
