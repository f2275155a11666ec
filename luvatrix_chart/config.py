from __future__ import annotations

from dataclasses import asdict, dataclass
import math
from typing import Any, Literal, Mapping

from luvatrix_chart.errors import ChartConfigError

CurveName = Literal["linear", "natural", "step_after"]

CURVE_NAMES: tuple[str, ...] = ("linear", "natural", "step_after")


@dataclass(frozen=True)
class ChartDefaults:
    """Default knobs shared by scale and shape constructors."""

    padding_inner: float = 0.0
    padding_outer: float = 0.0
    align: float = 0.5
    curve: str = "linear"
    # Radians, 0 at 12 o'clock, clockwise.
    pie_start_angle: float = 0.0
    arc_segments: int = 32


DEFAULT_CHART_DEFAULTS = ChartDefaults()


def validate_chart_defaults(overrides: Mapping[str, Any] | None = None) -> ChartDefaults:
    """Validate and merge caller overrides against the built-in defaults."""

    raw: dict[str, Any] = asdict(DEFAULT_CHART_DEFAULTS)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ChartConfigError(f"Unknown chart default: {key}")
            raw[key] = value

    for key in ("padding_inner", "padding_outer", "align", "pie_start_angle"):
        value = raw[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
            raise ChartConfigError(f"Default `{key}` must be a finite number")

    if not 0.0 <= float(raw["padding_inner"]) <= 1.0:
        raise ChartConfigError("Default `padding_inner` must be within [0, 1]")
    if float(raw["padding_outer"]) < 0.0:
        raise ChartConfigError("Default `padding_outer` must be >= 0")
    if not 0.0 <= float(raw["align"]) <= 1.0:
        raise ChartConfigError("Default `align` must be within [0, 1]")
    if raw["curve"] not in CURVE_NAMES:
        raise ChartConfigError(f"Default `curve` must be one of: {', '.join(CURVE_NAMES)}")
    segments = raw["arc_segments"]
    if isinstance(segments, bool) or not isinstance(segments, int) or segments < 2:
        raise ChartConfigError("Default `arc_segments` must be an integer >= 2")

    return ChartDefaults(
        padding_inner=float(raw["padding_inner"]),
        padding_outer=float(raw["padding_outer"]),
        align=float(raw["align"]),
        curve=str(raw["curve"]),
        pie_start_angle=float(raw["pie_start_angle"]),
        arc_segments=int(segments),
    )
