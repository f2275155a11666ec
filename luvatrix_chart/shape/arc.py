from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Any, Sequence

from luvatrix_chart.errors import ChartConfigError
from luvatrix_chart.shape.path import Path, PathBuilder, Point, polar
from luvatrix_chart.shape.pie import TAU, ArcData

LOGGER = logging.getLogger(__name__)

_FULL_CIRCLE_EPS = 1e-9


@dataclass(frozen=True)
class Arc:
    """Annular sector geometry for `ArcData` slices.

    `inner_radius == 0` draws a filled pie slice; `inner_radius ==
    outer_radius` draws nothing.
    """

    outer_radius: float
    inner_radius: float = 0.0

    def __post_init__(self) -> None:
        _check_radii(self.inner_radius, self.outer_radius)

    def path(
        self,
        arc: ArcData[Any],
        center: Point = (0.0, 0.0),
        *,
        inner_radius: float | None = None,
        outer_radius: float | None = None,
    ) -> Path:
        ri = self.inner_radius if inner_radius is None else inner_radius
        ro = self.outer_radius if outer_radius is None else outer_radius
        _check_radii(ri, ro)
        a0 = arc.start_angle
        a1 = arc.end_angle
        span = a1 - a0
        if ro <= 0 or ri == ro or span == 0:
            LOGGER.debug("arc %d has zero area (inner=%s outer=%s span=%s)", arc.index, ri, ro, span)
            return Path()

        cx, cy = float(center[0]), float(center[1])
        full = abs(span) >= TAU - _FULL_CIRCLE_EPS
        builder = PathBuilder()
        builder.move_to(polar(cx, cy, ro, a0))
        _sweep(builder, (cx, cy), ro, a0, a1, full)
        if ri > 0:
            builder.line_to(polar(cx, cy, ri, a1))
            _sweep(builder, (cx, cy), ri, a1, a0, full)
        else:
            builder.line_to((cx, cy))
        builder.close()
        return builder.build()

    def centroid(
        self,
        arc: ArcData[Any],
        center: Point = (0.0, 0.0),
    ) -> Point:
        """Midpoint of the sector (half-way in angle and radius), for labels."""

        r = (self.inner_radius + self.outer_radius) / 2.0
        a = (arc.start_angle + arc.end_angle) / 2.0
        return polar(float(center[0]), float(center[1]), r, a)

    def area(self, arc: ArcData[Any]) -> float:
        span = min(abs(arc.span), TAU)
        return 0.5 * span * (self.outer_radius**2 - self.inner_radius**2)

    def contains(self, arc: ArcData[Any], point: Point, center: Point = (0.0, 0.0)) -> bool:
        dx = float(point[0]) - float(center[0])
        dy = float(point[1]) - float(center[1])
        r = math.hypot(dx, dy)
        if self.inner_radius == self.outer_radius or not self.inner_radius <= r <= self.outer_radius:
            return False
        lo, hi = sorted((arc.start_angle, arc.end_angle))
        if hi - lo >= TAU:
            return True
        if hi == lo:
            return False
        # Screen angle of the point under the 12 o'clock clockwise convention.
        angle = math.atan2(dx, -dy) % TAU
        return (angle - lo) % TAU <= hi - lo

    def hit_test(self, arcs: Sequence[ArcData[Any]], point: Point, center: Point = (0.0, 0.0)) -> int | None:
        """Input index of the slice under `point`, or `None`."""

        for arc in arcs:
            if self.contains(arc, point, center):
                return arc.index
        return None


def _sweep(builder: PathBuilder, center: Point, radius: float, a0: float, a1: float, full: bool) -> None:
    if full:
        # A single arc cannot close on itself; split the circle in two.
        mid = (a0 + a1) / 2.0
        builder.arc_to(center, radius, a0, mid)
        builder.arc_to(center, radius, mid, a1)
    else:
        builder.arc_to(center, radius, a0, a1)


def _check_radii(inner: float, outer: float) -> None:
    if not (math.isfinite(inner) and math.isfinite(outer)):
        raise ChartConfigError(f"arc radii must be finite: inner={inner} outer={outer}")
    if inner < 0 or outer < 0:
        raise ChartConfigError(f"arc radii must be >= 0: inner={inner} outer={outer}")
    if inner > outer:
        raise ChartConfigError(f"arc inner_radius exceeds outer_radius: {inner} > {outer}")
