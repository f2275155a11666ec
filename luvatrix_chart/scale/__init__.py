from .band import BandScale
from .base import Scale
from .linear import LinearScale
from .ordinal import OrdinalScale
from .point import PointScale

__all__ = [
    "BandScale",
    "LinearScale",
    "OrdinalScale",
    "PointScale",
    "Scale",
]
