from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from luvatrix_chart.config import DEFAULT_CHART_DEFAULTS, ChartDefaults
from luvatrix_chart.scale.base import Scale
from luvatrix_chart.shape.curve import check_curve, trace
from luvatrix_chart.shape.path import Path, PathBuilder, Point
from luvatrix_chart.shape.records import Accessor, contiguous_runs, field_accessor


@dataclass(frozen=True)
class LineGeometry:
    """Pixel points of a line, one entry per input datum.

    `None` entries are gaps: the datum could not be placed, and the line
    breaks there instead of joining its neighbours.
    """

    points: tuple[Point | None, ...]
    curve: str = "linear"

    @property
    def gaps(self) -> tuple[int, ...]:
        return tuple(i for i, p in enumerate(self.points) if p is None)

    def segments(self) -> list[tuple[Point, ...]]:
        runs = contiguous_runs([p is not None for p in self.points])
        return [tuple(p for p in self.points[a:b] if p is not None) for a, b in runs]

    def path(self) -> Path:
        builder = PathBuilder()
        for segment in self.segments():
            trace(builder, segment, self.curve)
        return builder.build()


class Line:
    """Line generator: data records through an x and a y scale."""

    def __init__(
        self,
        x_scale: Scale[Any],
        y_scale: Scale[Any],
        *,
        x: Accessor | None = None,
        y: Accessor | None = None,
        curve: str | None = None,
        defaults: ChartDefaults = DEFAULT_CHART_DEFAULTS,
    ) -> None:
        self._x_scale = x_scale
        self._y_scale = y_scale
        self._x = x or field_accessor("x", 0)
        self._y = y or field_accessor("y", 1)
        self._curve = check_curve(defaults.curve if curve is None else curve)

    def generate(self, data: Iterable[Any]) -> LineGeometry:
        points: list[Point | None] = []
        for datum in data:
            px = self._x_scale.tick(self._x(datum))
            py = self._y_scale.tick(self._y(datum))
            if px is None or py is None:
                points.append(None)
                continue
            points.append((float(px), float(py)))
        return LineGeometry(points=tuple(points), curve=self._curve)

    def path(self, data: Iterable[Any]) -> Path:
        return self.generate(data).path()
