from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Hashable, Iterable, Literal, Sequence

from luvatrix_chart.errors import ChartConfigError
from luvatrix_chart.scale.band import DiscreteScale
from luvatrix_chart.scale.base import Scale
from luvatrix_chart.shape.records import Accessor, baseline_accessor, constant_or_accessor, field_accessor
from luvatrix_chart.shape.stack import StackResult

Orientation = Literal["vertical", "horizontal"]


@dataclass(frozen=True)
class BarRect:
    x: float
    y: float
    width: float
    height: float
    index: int
    key: Hashable | None = None

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px <= self.x + self.width and self.y <= py <= self.y + self.height


class Bar:
    """Rectangles for categories on a band scale against values on a value scale.

    With `series_count > 1` each bar takes the `series_index`-th slice of the
    band, so several `Bar`s sharing one band scale render as a grouped bar
    chart. `orientation="horizontal"` places bands on the y axis.
    """

    def __init__(
        self,
        band_scale: DiscreteScale,
        value_scale: Scale[Any],
        *,
        category: Accessor | None = None,
        value: Accessor | None = None,
        baseline: Accessor | float | None = None,
        series_index: int = 0,
        series_count: int = 1,
        orientation: Orientation = "vertical",
        key: Hashable | None = None,
    ) -> None:
        if series_count < 1:
            raise ChartConfigError(f"series_count must be >= 1: {series_count}")
        if not 0 <= series_index < series_count:
            raise ChartConfigError(f"series_index must be within [0, {series_count}): {series_index}")
        if orientation not in ("vertical", "horizontal"):
            raise ChartConfigError(f"orientation must be `vertical` or `horizontal`: {orientation!r}")
        self._band = band_scale
        self._value_scale = value_scale
        self._category = category or field_accessor("x", 0)
        self._value = value or field_accessor("y", 1)
        self._baseline = constant_or_accessor(baseline, baseline_accessor(0.0))
        self._series_index = series_index
        self._series_count = series_count
        self._orientation = orientation
        self._key = key

    @property
    def slice_width(self) -> float:
        return self._band.bandwidth() / self._series_count

    def generate(self, data: Iterable[Any]) -> tuple[BarRect | None, ...]:
        """One rectangle per datum, `None` where the category or value is missing."""

        sub = self.slice_width
        offset = self._series_index * sub
        out: list[BarRect | None] = []
        for i, datum in enumerate(data):
            start = self._band.tick(self._category(datum))
            top = self._value_scale.tick(self._value(datum))
            base = self._value_scale.tick(self._baseline(datum))
            if start is None or top is None or base is None:
                out.append(None)
                continue
            lo = min(float(top), float(base))
            extent = abs(float(top) - float(base))
            if self._orientation == "vertical":
                rect = BarRect(x=float(start) + offset, y=lo, width=sub, height=extent, index=i, key=self._key)
            else:
                rect = BarRect(x=lo, y=float(start) + offset, width=extent, height=sub, index=i, key=self._key)
            out.append(rect)
        return tuple(out)


def grouped_bars(
    band_scale: DiscreteScale,
    value_scale: Scale[Any],
    series: Mapping[Hashable, Sequence[Any]] | Sequence[tuple[Hashable, Sequence[Any]]],
    *,
    category: Accessor | None = None,
    value: Accessor | None = None,
    baseline: Accessor | float | None = None,
    orientation: Orientation = "vertical",
) -> dict[Hashable, tuple[BarRect | None, ...]]:
    """Side-by-side bars: each series gets its own slice of every band, in series order."""

    items = list(series.items()) if isinstance(series, Mapping) else list(series)
    keys = [key for key, _ in items]
    if len(set(keys)) != len(keys):
        raise ChartConfigError(f"grouped bar series keys must be unique: {keys}")
    out: dict[Hashable, tuple[BarRect | None, ...]] = {}
    for i, (key, data) in enumerate(items):
        bar = Bar(
            band_scale,
            value_scale,
            category=category,
            value=value,
            baseline=baseline,
            series_index=i,
            series_count=len(items),
            orientation=orientation,
            key=key,
        )
        out[key] = bar.generate(data)
    return out


def stacked_bars(
    band_scale: DiscreteScale,
    value_scale: Scale[Any],
    stack: StackResult,
    *,
    orientation: Orientation = "vertical",
) -> dict[str, tuple[BarRect | None, ...]]:
    """Bars spanning each layer's `(baseline, value)` pair, one full-width slice per category."""

    out: dict[str, tuple[BarRect | None, ...]] = {}
    for layer in stack.layers():
        bar = Bar(band_scale, value_scale, orientation=orientation, key=layer.key)
        out[layer.key] = bar.generate(layer.points)
    return out


def sub_band_index(offset: float, bandwidth: float, series_count: int) -> int | None:
    """Which grouped sub-bar an offset from the band start falls into."""

    if series_count < 1 or bandwidth <= 0 or offset < 0 or offset > bandwidth:
        return None
    return min(series_count - 1, int(offset // (bandwidth / series_count)))
