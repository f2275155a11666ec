from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np

from luvatrix_chart.errors import ChartDataError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]

_NUMERIC_KINDS = frozenset("iufb")


def coerce_values(value: Any, *, label: str = "values") -> np.ndarray:
    """Coerce a 1-D series into float64; `None` entries become NaN.

    Accepts plain sequences, numpy arrays, pandas Series and torch tensors.
    """

    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach().cpu()
        if tensor.ndim != 1:
            raise ChartDataError(f"{label} must be 1-D, got shape {tuple(tensor.shape)}")
        return tensor.to(torch.float64).numpy()

    if pd is not None and isinstance(value, pd.Series):
        arr = value.to_numpy()
    elif isinstance(value, np.ndarray):
        arr = value
    elif isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        arr = np.asarray(list(value), dtype=object)
    else:
        raise ChartDataError(f"unsupported {label} input type: {type(value)!r}")

    if arr.ndim != 1:
        raise ChartDataError(f"{label} must be 1-D, got shape {arr.shape}")
    if arr.dtype.kind in _NUMERIC_KINDS:
        return arr.astype(np.float64, copy=False)
    return _objects_to_float(arr, label=label)


def normalize_named_series(series: Any) -> list[tuple[str, np.ndarray]]:
    """Normalize named series input into `(key, values)` pairs in input order.

    Accepts a mapping of key to values, a sequence of `(key, values)` pairs or
    objects exposing `key`/`values`, or a pandas DataFrame whose numeric columns
    are the series.
    """

    if pd is not None and isinstance(series, pd.DataFrame):
        columns = [c for c in series.columns if pd.api.types.is_numeric_dtype(series[c])]
        if not columns:
            raise ChartDataError("DataFrame input must contain at least one numeric column")
        items: list[tuple[Any, Any]] = [(c, series[c]) for c in columns]
    elif isinstance(series, Mapping):
        items = list(series.items())
    elif isinstance(series, Sequence) and not isinstance(series, (str, bytes, bytearray)):
        items = [_series_entry(entry) for entry in series]
    else:
        raise ChartDataError(f"unsupported series input type: {type(series)!r}")

    return [(str(key), coerce_values(values, label=f"series `{key}`")) for key, values in items]


def _series_entry(entry: Any) -> tuple[Any, Any]:
    if hasattr(entry, "key") and hasattr(entry, "values"):
        return (entry.key, entry.values)
    if isinstance(entry, Sequence) and len(entry) == 2:
        return (entry[0], entry[1])
    raise ChartDataError(f"unsupported series entry: {entry!r}")


def _objects_to_float(arr: np.ndarray, *, label: str) -> np.ndarray:
    out = np.full(arr.shape[0], np.nan, dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            continue
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise ChartDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
