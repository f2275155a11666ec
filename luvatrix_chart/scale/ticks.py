from __future__ import annotations

import math

import numpy as np

# Mantissas a tick step may take, per decade.
_STEP_MANTISSAS = (1.0, 2.0, 5.0, 10.0)


def nice_ticks(vmin: float, vmax: float, count: int) -> np.ndarray:
    """Round-number tick values inside `[vmin, vmax]`, ordered like the bounds."""

    if count <= 0:
        raise ValueError("count must be > 0")
    lo, hi = sorted((float(vmin), float(vmax)))
    if lo == hi:
        return np.asarray([lo], dtype=np.float64)

    step = nice_step(lo, hi, count)
    first = math.ceil(lo / step)
    last = math.floor(hi / step)
    # Integer multiples of the step avoid accumulating drift along the axis.
    ticks = np.arange(first, last + 1, dtype=np.float64) * step
    ticks[np.abs(ticks) < step * 1e-9] = 0.0
    if vmin > vmax:
        ticks = ticks[::-1]
    return ticks


def nice_step(lo: float, hi: float, count: int) -> float:
    span = _round_to_mantissa(hi - lo, ceil=True)
    return _round_to_mantissa(span / max(count - 1, 1), ceil=False)


def nice_extent(vmin: float, vmax: float, count: int) -> tuple[float, float]:
    """Widen `[vmin, vmax]` outward to whole multiples of the nice step."""

    lo, hi = sorted((float(vmin), float(vmax)))
    if lo == hi:
        return (float(vmin), float(vmax))
    step = nice_step(lo, hi, count)
    lo = math.floor(lo / step) * step
    hi = math.ceil(hi / step) * step
    return (hi, lo) if vmin > vmax else (lo, hi)


def format_tick(value: float, *, step: float | None = None) -> str:
    """Axis label for `value`, showing as many decimals as `step` needs."""

    if not math.isfinite(value):
        return str(value)
    if step is not None and math.isfinite(step) and step > 0 and abs(value) < step * 1e-9:
        value = 0.0
    magnitude = abs(value)
    tiny_step = step is not None and abs(step) < 1e-4
    if magnitude != 0 and (magnitude >= 1e6 or magnitude < 1e-6 or tiny_step):
        return f"{value:.4e}"

    text = f"{value:.{_step_decimals(step)}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_ticks(ticks: np.ndarray) -> list[str]:
    if ticks.size == 0:
        return []
    if ticks.size == 1:
        return [format_tick(float(ticks[0]))]
    step = abs(float(ticks[1]) - float(ticks[0]))
    return [format_tick(float(v), step=step) for v in ticks]


def _round_to_mantissa(value: float, *, ceil: bool) -> float:
    """Snap `value` to 1, 2 or 5 times a power of ten.

    With `ceil` the result never undershoots `value` (used for the span);
    otherwise the nearest candidate wins (used for the step).
    """

    exponent = math.floor(math.log10(value))
    scale = 10.0**exponent
    mantissa = value / scale
    if ceil:
        chosen = next((m for m in _STEP_MANTISSAS if mantissa <= m), 10.0)
    else:
        # Cut-over points between neighbouring mantissas.
        thresholds = (1.5, 3.0, 7.0)
        chosen = next((m for m, t in zip(_STEP_MANTISSAS, thresholds) if mantissa < t), 10.0)
    return chosen * scale


def _step_decimals(step: float | None) -> int:
    if step is None:
        return 6
    if step <= 0 or not math.isfinite(step):
        return 6
    text = f"{step:.12f}".rstrip("0")
    return min(12, len(text.split(".")[1])) if "." in text else 0
