from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from luvatrix_chart.config import DEFAULT_CHART_DEFAULTS, ChartDefaults
from luvatrix_chart.scale.base import Scale
from luvatrix_chart.shape.curve import check_curve, trace
from luvatrix_chart.shape.path import Path, PathBuilder, Point
from luvatrix_chart.shape.records import (
    Accessor,
    baseline_accessor,
    constant_or_accessor,
    contiguous_runs,
    field_accessor,
)


@dataclass(frozen=True)
class AreaGeometry:
    """Top and baseline pixel points per datum; `None` in both marks a gap."""

    top: tuple[Point | None, ...]
    baseline: tuple[Point | None, ...]
    curve: str = "linear"

    def runs(self) -> list[tuple[int, int]]:
        return contiguous_runs([p is not None for p in self.top])

    def polygons(self) -> list[tuple[Point, ...]]:
        """One closed polygon per contiguous run: top forward, baseline reversed.

        The closing edge back to the first vertex is implied.
        """

        out: list[tuple[Point, ...]] = []
        for a, b in self.runs():
            top = [p for p in self.top[a:b] if p is not None]
            base = [p for p in self.baseline[a:b] if p is not None]
            out.append(tuple(top + base[::-1]))
        return out

    def path(self) -> Path:
        builder = PathBuilder()
        for a, b in self.runs():
            top = [p for p in self.top[a:b] if p is not None]
            base = [p for p in self.baseline[a:b] if p is not None]
            trace(builder, top, self.curve)
            trace(builder, base[::-1], self.curve, connect=True)
            builder.close()
        return builder.build()

    def outline(self) -> Path:
        """Stroke path along the top edge only."""

        builder = PathBuilder()
        for a, b in self.runs():
            trace(builder, [p for p in self.top[a:b] if p is not None], self.curve)
        return builder.build()


class Area:
    """Area generator between a top value `y1` and a baseline `y0`.

    `y0` may be a constant domain value or an accessor; by default it is the
    record's own `y0` (as produced by stacking) or 0.
    """

    def __init__(
        self,
        x_scale: Scale[Any],
        y_scale: Scale[Any],
        *,
        x: Accessor | None = None,
        y1: Accessor | None = None,
        y0: Accessor | float | None = None,
        curve: str | None = None,
        defaults: ChartDefaults = DEFAULT_CHART_DEFAULTS,
    ) -> None:
        self._x_scale = x_scale
        self._y_scale = y_scale
        self._x = x or field_accessor("x", 0)
        self._y1 = y1 or field_accessor("y", 1)
        self._y0 = constant_or_accessor(y0, baseline_accessor(0.0))
        self._curve = check_curve(defaults.curve if curve is None else curve)

    def generate(self, data: Iterable[Any]) -> AreaGeometry:
        top: list[Point | None] = []
        baseline: list[Point | None] = []
        for datum in data:
            px = self._x_scale.tick(self._x(datum))
            py1 = self._y_scale.tick(self._y1(datum))
            py0 = self._y_scale.tick(self._y0(datum))
            if px is None or py1 is None or py0 is None:
                top.append(None)
                baseline.append(None)
                continue
            top.append((float(px), float(py1)))
            baseline.append((float(px), float(py0)))
        return AreaGeometry(top=tuple(top), baseline=tuple(baseline), curve=self._curve)

    def path(self, data: Iterable[Any]) -> Path:
        return self.generate(data).path()
