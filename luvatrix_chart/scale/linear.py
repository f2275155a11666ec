from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Any, Sequence

import numpy as np

from luvatrix_chart.errors import ChartConfigError
from luvatrix_chart.scale.base import Scale
from luvatrix_chart.scale.ticks import format_ticks, nice_extent, nice_ticks


@dataclass(frozen=True)
class LinearScale(Scale[float]):
    """Continuous mapping from `domain=(d0, d1)` onto `range=(r0, r1)`.

    Both ends may be given in either order; the mapping is a pure ratio so a
    reversed range (e.g. `(height, 0)` for a y axis) or a reversed domain flips
    the output without any special casing. Values outside the domain are
    extrapolated unless `clamp` is set.
    """

    domain: tuple[float, float]
    range: tuple[float, float]
    clamp: bool = False

    def __post_init__(self) -> None:
        if len(self.domain) != 2 or len(self.range) != 2:
            raise ChartConfigError("linear scale domain and range must have exactly two values")
        d0, d1 = (_finite(v, label="domain") for v in self.domain)
        r0, r1 = (_finite(v, label="range") for v in self.range)
        if d0 == d1:
            raise ChartConfigError(f"linear scale domain is degenerate: [{d0}, {d1}]")
        object.__setattr__(self, "domain", (d0, d1))
        object.__setattr__(self, "range", (r0, r1))

    @classmethod
    def from_values(
        cls,
        domain_values: Sequence[Any],
        range_values: Sequence[float],
        *,
        clamp: bool = False,
    ) -> "LinearScale":
        """Build a scale from the extent of arbitrary domain and range values.

        The domain spans `min..max` of `domain_values`. The range spans the min
        and max of `range_values`, oriented by which of the two comes first, so
        `[height, 10]` yields a downward-growing axis.
        """

        numeric = [_numeric(v, label="domain") for v in domain_values if v is not None]
        values = np.asarray(numeric, dtype=np.float64)
        values = values[np.isfinite(values)]
        if values.size == 0:
            raise ChartConfigError("linear scale needs at least one finite domain value")
        if len(range_values) == 0:
            raise ChartConfigError("linear scale needs at least one range value")

        rng = [_finite(v, label="range") for v in range_values]
        rmin = min(rng)
        rmax = max(rng)
        if rng.index(rmin) <= rng.index(rmax):
            r0, r1 = rmin, rmax
        else:
            r0, r1 = rmax, rmin
        return cls(domain=(float(values.min()), float(values.max())), range=(r0, r1), clamp=clamp)

    def tick(self, value: Any) -> float | None:
        if value is None:
            return None
        try:
            v = float(value)
        except (TypeError, ValueError):
            return None
        if not math.isfinite(v):
            return None
        d0, d1 = self.domain
        r0, r1 = self.range
        t = (v - d0) / (d1 - d0)
        if self.clamp:
            t = min(1.0, max(0.0, t))
        # Interpolating as a weighted sum keeps both endpoints exact.
        return r0 * (1.0 - t) + r1 * t

    def invert(self, tick: float) -> float | None:
        """Domain value rendered at `tick`; `None` when the range is a single point."""

        r0, r1 = self.range
        if r0 == r1 or not math.isfinite(tick):
            return None
        d0, d1 = self.domain
        t = (float(tick) - r0) / (r1 - r0)
        if self.clamp:
            t = min(1.0, max(0.0, t))
        return d0 * (1.0 - t) + d1 * t

    def least_index_with_domain(self, tick: float, domain: Sequence[Any]) -> tuple[int, float]:
        if len(domain) == 0:
            return (0, 0.0)
        positions = np.asarray([_or_nan(self.tick(v)) for v in domain], dtype=np.float64)
        distance = np.abs(positions - float(tick))
        distance[~np.isfinite(distance)] = np.inf
        if not np.any(np.isfinite(distance)):
            return (0, 0.0)
        index = int(np.argmin(distance))
        return (index, float(tick) - float(positions[index]))

    def ticks(self, count: int = 10) -> list[float]:
        """Round-number domain values suitable for axis ticks."""
        d0, d1 = self.domain
        return [float(v) for v in nice_ticks(d0, d1, count)]

    def tick_labels(self, count: int = 10) -> list[str]:
        d0, d1 = self.domain
        return format_ticks(nice_ticks(d0, d1, count))

    def nice(self, count: int = 10) -> "LinearScale":
        """Copy of this scale with the domain extended to round tick bounds."""
        d0, d1 = nice_extent(*self.domain, count)
        return LinearScale(domain=(d0, d1), range=self.range, clamp=self.clamp)


def _or_nan(value: float | None) -> float:
    return np.nan if value is None else value


def _numeric(value: Any, *, label: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ChartConfigError(f"linear scale {label} must be numeric: {value!r}") from exc


def _finite(value: Any, *, label: str) -> float:
    out = _numeric(value, label=label)
    if not math.isfinite(out):
        raise ChartConfigError(f"linear scale {label} must be finite: {value!r}")
    return out
