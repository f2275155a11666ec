from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
import logging
import math
from numbers import Real
from typing import Any, Callable, Generic, Iterable, TypeVar

from luvatrix_chart.config import DEFAULT_CHART_DEFAULTS, ChartDefaults
from luvatrix_chart.errors import ChartConfigError
from luvatrix_chart.shape.records import Accessor, field_accessor

LOGGER = logging.getLogger(__name__)

TAU = 2.0 * math.pi

T = TypeVar("T")


@dataclass(frozen=True)
class ArcData(Generic[T]):
    """Angular extent of one pie slice.

    `start_angle..end_angle` covers the slice itself; the pad that follows it
    is not included. Angles are radians, 0 at 12 o'clock, clockwise.
    """

    data: T
    index: int
    value: float
    start_angle: float
    end_angle: float
    pad_angle: float = 0.0

    @property
    def span(self) -> float:
        return self.end_angle - self.start_angle


class Pie(Generic[T]):
    """Lays out slices around a circle, proportional to each datum's value.

    Slices follow input order unless `sort` (a key function over the data) is
    given; `reverse` flips the layout order (sorted or input). The returned
    list is always in input order so `arcs[i]` belongs to `data[i]`. Each
    slice is followed by `pad_angle`, so the slice spans add up to the full
    sweep minus `n * pad_angle`.
    """

    def __init__(
        self,
        *,
        value: Callable[[T], Any] | None = None,
        sort: Callable[[T], Any] | None = None,
        reverse: bool = False,
        pad_angle: float = 0.0,
        start_angle: float | None = None,
        end_angle: float | None = None,
        defaults: ChartDefaults = DEFAULT_CHART_DEFAULTS,
    ) -> None:
        if start_angle is None:
            start_angle = defaults.pie_start_angle
        if not math.isfinite(pad_angle) or pad_angle < 0:
            raise ChartConfigError(f"pad_angle must be a finite number >= 0: {pad_angle}")
        if not math.isfinite(start_angle):
            raise ChartConfigError(f"start_angle must be finite: {start_angle}")
        if end_angle is not None and not math.isfinite(end_angle):
            raise ChartConfigError(f"end_angle must be finite: {end_angle}")
        self._value: Accessor = value or _default_value
        self._sort = sort
        self._reverse = reverse
        self._pad_angle = float(pad_angle)
        self._start_angle = float(start_angle)
        self._end_angle = self._start_angle + TAU if end_angle is None else float(end_angle)

    def arcs(self, data: Iterable[T]) -> list[ArcData[T]]:
        items = list(data)
        n = len(items)
        if n == 0:
            return []

        values = [self._clean_value(self._value(d), i) for i, d in enumerate(items)]
        total = sum(values)
        sweep = self._end_angle - self._start_angle
        direction = -1.0 if sweep < 0 else 1.0
        pad = min(abs(sweep) / n, self._pad_angle)
        free = sweep - direction * n * pad
        if total > 0:
            k = free / total
        else:
            LOGGER.debug("pie total is zero; all %d slices have zero span", n)
            k = 0.0

        order = list(range(n))
        if self._sort is not None:
            order.sort(key=lambda i: self._sort(items[i]), reverse=self._reverse)
        elif self._reverse:
            order.reverse()

        out: list[ArcData[T] | None] = [None] * n
        angle = self._start_angle
        for i in order:
            end = angle + values[i] * k
            out[i] = ArcData(
                data=items[i],
                index=i,
                value=values[i],
                start_angle=angle,
                end_angle=end,
                pad_angle=pad,
            )
            angle = end + direction * pad
        return [a for a in out if a is not None]

    @staticmethod
    def _clean_value(raw: Any, index: int) -> float:
        try:
            value = float(raw)
        except (TypeError, ValueError):
            LOGGER.warning("pie value at index %d is not numeric (%r); using 0", index, raw)
            return 0.0
        if not math.isfinite(value) or value < 0:
            LOGGER.warning("pie value at index %d is %r; using 0", index, raw)
            return 0.0
        return value


def _default_value(datum: Any) -> Any:
    if isinstance(datum, (Real, Decimal)):
        return datum
    return field_accessor("value", 1)(datum)
