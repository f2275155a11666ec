from __future__ import annotations

from dataclasses import dataclass, field, replace
import math
from typing import Any, Hashable, Sequence

from luvatrix_chart.config import DEFAULT_CHART_DEFAULTS, ChartDefaults
from luvatrix_chart.errors import ChartConfigError
from luvatrix_chart.scale.base import Scale

# Index-space slack so a tick sitting exactly on a band start never floors
# into the previous band.
_INDEX_EPS = 1e-9


@dataclass(frozen=True)
class BandLayout:
    start: float
    step: float
    bandwidth: float
    count: int
    reverse: bool

    def position(self, index: int) -> float:
        if self.reverse:
            index = self.count - 1 - index
        return self.start + self.step * index


def layout_bands(
    count: int,
    range_: tuple[float, float],
    *,
    cells: float,
    inner: float,
    outer: float,
    align: float,
    round_: bool,
) -> BandLayout:
    """Distribute `count` bands over `range_`.

    `cells` is the number of steps the range is divided into; whatever the
    step does not cover (rounding slack, or the floor on a zero denominator) is
    distributed by `align`.
    """

    r0, r1 = range_
    lo, hi = (r0, r1) if r0 <= r1 else (r1, r0)
    reverse = r1 < r0
    if count == 0:
        return BandLayout(start=lo, step=0.0, bandwidth=0.0, count=0, reverse=reverse)

    width = hi - lo
    step = width / max(1.0, cells)
    if round_:
        step = float(math.floor(step))
    leftover = width - step * max(0.0, cells)
    start = lo + outer * step + align * leftover
    bandwidth = step * (1.0 - inner)
    if round_:
        start = float(math.floor(start + 0.5))
        bandwidth = float(math.floor(bandwidth + 0.5))
    return BandLayout(start=start, step=step, bandwidth=bandwidth, count=count, reverse=reverse)


class DiscreteScale(Scale[Hashable]):
    """Shared lookups for scales that place categories at uniform steps."""

    domain: tuple[Hashable, ...]
    _index: dict[Hashable, int]
    _layout: BandLayout

    def tick(self, value: Hashable) -> float | None:
        try:
            index = self._index.get(value)
        except TypeError:
            return None
        if index is None:
            return None
        return self._layout.position(index)

    def tick_at(self, index: int) -> float | None:
        if not 0 <= index < self._layout.count:
            return None
        return self._layout.position(index)

    def center(self, value: Hashable) -> float | None:
        pos = self.tick(value)
        if pos is None:
            return None
        return pos + self._layout.bandwidth / 2.0

    def bandwidth(self) -> float:
        return self._layout.bandwidth

    def step(self) -> float:
        return self._layout.step

    def index_of(self, value: Hashable) -> int | None:
        try:
            return self._index.get(value)
        except TypeError:
            return None

    def least_index(self, tick: float) -> int:
        layout = self._layout
        if layout.count == 0 or layout.step <= 0 or not math.isfinite(tick):
            return 0
        gap = layout.step - layout.bandwidth
        cell = math.floor((float(tick) - layout.start + gap / 2.0) / layout.step + _INDEX_EPS)
        cell = min(layout.count - 1, max(0, cell))
        if layout.reverse:
            return layout.count - 1 - cell
        return cell

    def least_index_with_domain(self, tick: float, domain: Sequence[Any] = ()) -> tuple[int, float]:
        if self._layout.count == 0 or not math.isfinite(tick):
            return (0, 0.0)
        index = self.least_index(tick)
        return (index, float(tick) - self._layout.position(index))

    def _init_layout(self, *, cells: float, inner: float, outer: float, align: float, round_: bool) -> None:
        domain = tuple(self.domain)
        index: dict[Hashable, int] = {}
        for i, value in enumerate(domain):
            try:
                if value in index:
                    raise ChartConfigError(f"duplicate category in scale domain: {value!r}")
                index[value] = i
            except TypeError as exc:
                raise ChartConfigError(f"scale categories must be hashable: {value!r}") from exc
        rng = tuple(float(v) for v in self.range)
        if len(rng) != 2 or not all(math.isfinite(v) for v in rng):
            raise ChartConfigError("scale range must be two finite values")
        if not 0.0 <= align <= 1.0:
            raise ChartConfigError(f"align must be within [0, 1]: {align}")
        if not math.isfinite(outer) or outer < 0.0:
            raise ChartConfigError(f"outer padding must be a finite number >= 0: {outer}")
        object.__setattr__(self, "domain", domain)
        object.__setattr__(self, "range", rng)
        object.__setattr__(self, "_index", index)
        object.__setattr__(
            self,
            "_layout",
            layout_bands(len(domain), rng, cells=cells, inner=inner, outer=outer, align=align, round_=round_),
        )


@dataclass(frozen=True)
class BandScale(DiscreteScale):
    """Discrete categories mapped to equal-width bands.

    `tick` returns the band start; `bandwidth()` the band width. The step is
    `width / (n + 2 * padding_outer)`, so inner padding only narrows the band
    inside its step.
    """

    domain: tuple[Hashable, ...]
    range: tuple[float, float]
    padding_inner: float = DEFAULT_CHART_DEFAULTS.padding_inner
    padding_outer: float = DEFAULT_CHART_DEFAULTS.padding_outer
    align: float = DEFAULT_CHART_DEFAULTS.align
    round: bool = False
    _index: dict[Hashable, int] = field(init=False, repr=False, compare=False)
    _layout: BandLayout = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not math.isfinite(self.padding_inner) or not 0.0 <= self.padding_inner <= 1.0:
            raise ChartConfigError(f"padding_inner must be within [0, 1]: {self.padding_inner}")
        n = len(self.domain)
        self._init_layout(
            cells=n + 2.0 * self.padding_outer,
            inner=self.padding_inner,
            outer=self.padding_outer,
            align=self.align,
            round_=self.round,
        )

    @classmethod
    def from_defaults(
        cls,
        domain: Sequence[Hashable],
        range: tuple[float, float],
        defaults: ChartDefaults = DEFAULT_CHART_DEFAULTS,
        *,
        round: bool = False,
    ) -> "BandScale":
        """Band scale whose padding and alignment come from validated chart defaults."""
        return cls(
            tuple(domain),
            range,
            padding_inner=defaults.padding_inner,
            padding_outer=defaults.padding_outer,
            align=defaults.align,
            round=round,
        )

    def with_padding(self, inner: float | None = None, outer: float | None = None) -> "BandScale":
        return replace(
            self,
            padding_inner=self.padding_inner if inner is None else inner,
            padding_outer=self.padding_outer if outer is None else outer,
        )
