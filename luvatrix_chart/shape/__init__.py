from .arc import Arc
from .area import Area, AreaGeometry
from .bar import Bar, BarRect, grouped_bars, stacked_bars, sub_band_index
from .line import Line, LineGeometry
from .path import ArcTo, Close, CubicTo, LineTo, MoveTo, Path, PathBuilder
from .pie import ArcData, Pie
from .records import ShapePoint, points_from_arrays
from .stack import (
    Stack,
    StackLayer,
    StackPoint,
    StackResult,
    StackSeries,
    StackValue,
    order_ascending,
    order_descending,
    order_none,
    order_reverse,
    stack_series,
)

__all__ = [
    "Arc",
    "ArcData",
    "ArcTo",
    "Area",
    "AreaGeometry",
    "Bar",
    "BarRect",
    "Close",
    "CubicTo",
    "Line",
    "LineGeometry",
    "LineTo",
    "MoveTo",
    "Path",
    "PathBuilder",
    "Pie",
    "ShapePoint",
    "Stack",
    "StackLayer",
    "StackPoint",
    "StackResult",
    "StackSeries",
    "StackValue",
    "grouped_bars",
    "order_ascending",
    "order_descending",
    "order_none",
    "order_reverse",
    "points_from_arrays",
    "stack_series",
    "stacked_bars",
    "sub_band_index",
]
