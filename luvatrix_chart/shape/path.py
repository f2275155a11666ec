from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Union

import numpy as np

from luvatrix_chart.config import DEFAULT_CHART_DEFAULTS, ChartDefaults
from luvatrix_chart.errors import ChartConfigError

Point = tuple[float, float]


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True)
class CubicTo:
    c1x: float
    c1y: float
    c2x: float
    c2y: float
    x: float
    y: float


@dataclass(frozen=True)
class ArcTo:
    """Circular arc around `(cx, cy)` from `start_angle` to `end_angle`, ending at `(x, y)`.

    Angles use the chart convention: radians, 0 at 12 o'clock, clockwise on a
    y-down canvas.
    """

    cx: float
    cy: float
    radius: float
    start_angle: float
    end_angle: float
    x: float
    y: float


@dataclass(frozen=True)
class Close:
    pass


PathCommand = Union[MoveTo, LineTo, CubicTo, ArcTo, Close]


def polar(cx: float, cy: float, radius: float, angle: float) -> Point:
    return (cx + radius * math.sin(angle), cy - radius * math.cos(angle))


@dataclass(frozen=True)
class Path:
    commands: tuple[PathCommand, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.commands

    def to_svg(self) -> str:
        """Serialize as SVG path data (`d` attribute)."""

        parts: list[str] = []
        for cmd in self.commands:
            if isinstance(cmd, MoveTo):
                parts.append(f"M{_fmt(cmd.x)},{_fmt(cmd.y)}")
            elif isinstance(cmd, LineTo):
                parts.append(f"L{_fmt(cmd.x)},{_fmt(cmd.y)}")
            elif isinstance(cmd, CubicTo):
                parts.append(
                    f"C{_fmt(cmd.c1x)},{_fmt(cmd.c1y)},{_fmt(cmd.c2x)},{_fmt(cmd.c2y)},{_fmt(cmd.x)},{_fmt(cmd.y)}"
                )
            elif isinstance(cmd, ArcTo):
                span = cmd.end_angle - cmd.start_angle
                large = 1 if abs(span) > math.pi else 0
                sweep = 1 if span > 0 else 0
                r = _fmt(cmd.radius)
                parts.append(f"A{r},{r},0,{large},{sweep},{_fmt(cmd.x)},{_fmt(cmd.y)}")
            else:
                parts.append("Z")
        return "".join(parts)

    def flatten(
        self,
        segments: int | None = None,
        *,
        defaults: ChartDefaults = DEFAULT_CHART_DEFAULTS,
    ) -> list[np.ndarray]:
        """Approximate the path as polylines, one `(k, 2)` float64 array per subpath.

        Curves and arcs are sampled with `segments` steps each; a closed subpath
        repeats its first vertex at the end.
        """

        if segments is None:
            segments = defaults.arc_segments
        if segments < 1:
            raise ChartConfigError(f"segments must be >= 1: {segments}")
        polylines: list[np.ndarray] = []
        current: list[Point] = []
        steps = np.linspace(0.0, 1.0, segments + 1, dtype=np.float64)[1:]

        for cmd in self.commands:
            if isinstance(cmd, MoveTo):
                if len(current) > 0:
                    polylines.append(np.asarray(current, dtype=np.float64))
                current = [(cmd.x, cmd.y)]
            elif isinstance(cmd, LineTo):
                current.append((cmd.x, cmd.y))
            elif isinstance(cmd, CubicTo):
                x0, y0 = current[-1] if current else (cmd.x, cmd.y)
                t = steps
                u = 1.0 - t
                xs = u**3 * x0 + 3 * u**2 * t * cmd.c1x + 3 * u * t**2 * cmd.c2x + t**3 * cmd.x
                ys = u**3 * y0 + 3 * u**2 * t * cmd.c1y + 3 * u * t**2 * cmd.c2y + t**3 * cmd.y
                current.extend(zip(xs.tolist(), ys.tolist()))
            elif isinstance(cmd, ArcTo):
                angles = cmd.start_angle + (cmd.end_angle - cmd.start_angle) * steps
                xs = cmd.cx + cmd.radius * np.sin(angles)
                ys = cmd.cy - cmd.radius * np.cos(angles)
                current.extend(zip(xs.tolist(), ys.tolist()))
                # Land exactly on the recorded endpoint.
                current[-1] = (cmd.x, cmd.y)
            elif current:
                current.append(current[0])
                polylines.append(np.asarray(current, dtype=np.float64))
                current = []

        if len(current) > 0:
            polylines.append(np.asarray(current, dtype=np.float64))
        return polylines


class PathBuilder:
    """Accumulates path commands; `build()` freezes them into a `Path`."""

    def __init__(self) -> None:
        self._commands: list[PathCommand] = []

    def move_to(self, point: Point) -> None:
        self._commands.append(MoveTo(float(point[0]), float(point[1])))

    def line_to(self, point: Point) -> None:
        self._commands.append(LineTo(float(point[0]), float(point[1])))

    def cubic_to(self, c1: Point, c2: Point, point: Point) -> None:
        self._commands.append(
            CubicTo(float(c1[0]), float(c1[1]), float(c2[0]), float(c2[1]), float(point[0]), float(point[1]))
        )

    def arc_to(self, center: Point, radius: float, start_angle: float, end_angle: float) -> None:
        cx, cy = float(center[0]), float(center[1])
        x, y = polar(cx, cy, radius, end_angle)
        self._commands.append(ArcTo(cx, cy, float(radius), float(start_angle), float(end_angle), x, y))

    def close(self) -> None:
        self._commands.append(Close())

    def build(self) -> Path:
        return Path(tuple(self._commands))


def _fmt(value: float) -> str:
    out = f"{value:.4f}".rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out
