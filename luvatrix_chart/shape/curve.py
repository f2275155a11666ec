from __future__ import annotations

from typing import Sequence

from luvatrix_chart.config import CURVE_NAMES
from luvatrix_chart.errors import ChartConfigError
from luvatrix_chart.shape.path import PathBuilder, Point


def check_curve(curve: str) -> str:
    if curve not in CURVE_NAMES:
        raise ChartConfigError(f"unknown curve `{curve}`; expected one of: {', '.join(CURVE_NAMES)}")
    return curve


def trace(builder: PathBuilder, points: Sequence[Point], curve: str, *, connect: bool = False) -> None:
    """Append `points` to `builder` using the given interpolation.

    The first point is a `move_to`, or a `line_to` when `connect` is set (used
    to join an area's baseline onto its top line). Every input point is passed
    through; curves only add control geometry between them.
    """

    if not points:
        return
    if connect:
        builder.line_to(points[0])
    else:
        builder.move_to(points[0])
    if len(points) == 1:
        return

    if curve == "linear":
        for p in points[1:]:
            builder.line_to(p)
    elif curve == "step_after":
        for prev, p in zip(points[:-1], points[1:]):
            builder.line_to((p[0], prev[1]))
            builder.line_to(p)
    elif curve == "natural":
        n = len(points)
        for i in range(n - 1):
            p0 = points[i - 1] if i > 0 else points[0]
            p1 = points[i]
            p2 = points[i + 1]
            p3 = points[i + 2] if i + 2 < n else points[n - 1]
            # Catmull-Rom segment expressed as a cubic Bezier.
            c1 = (p1[0] + (p2[0] - p0[0]) / 6.0, p1[1] + (p2[1] - p0[1]) / 6.0)
            c2 = (p2[0] - (p3[0] - p1[0]) / 6.0, p2[1] - (p3[1] - p1[1]) / 6.0)
            builder.cubic_to(c1, c2, p2)
    else:
        raise ChartConfigError(f"unknown curve `{curve}`")
