from luvatrix_chart.config import DEFAULT_CHART_DEFAULTS, ChartDefaults, validate_chart_defaults
from luvatrix_chart.errors import ChartConfigError, ChartDataError, ChartError
from luvatrix_chart.scale import BandScale, LinearScale, OrdinalScale, PointScale, Scale
from luvatrix_chart.shape import (
    Arc,
    ArcData,
    Area,
    Bar,
    BarRect,
    Line,
    Path,
    Pie,
    ShapePoint,
    Stack,
    StackPoint,
    StackResult,
    StackSeries,
    grouped_bars,
    stack_series,
    stacked_bars,
)

__all__ = [
    "Arc",
    "ArcData",
    "Area",
    "BandScale",
    "Bar",
    "BarRect",
    "ChartConfigError",
    "ChartDataError",
    "ChartDefaults",
    "ChartError",
    "DEFAULT_CHART_DEFAULTS",
    "Line",
    "LinearScale",
    "OrdinalScale",
    "Path",
    "Pie",
    "PointScale",
    "Scale",
    "ShapePoint",
    "Stack",
    "StackPoint",
    "StackResult",
    "StackSeries",
    "grouped_bars",
    "stack_series",
    "stacked_bars",
    "validate_chart_defaults",
]
