"""Search bounds and coordinate systems for hexagon grids."""

from .bounds import RingBound, RectBound
from .systems import (
    HexCoordinateSystem,
    CubicSystem,
    AxialSystem,
    OffsetSystem,
    SpiralHexSystem,
)

__all__ = [
    "RingBound",
    "RectBound",
    "HexCoordinateSystem",
    "CubicSystem",
    "AxialSystem",
    "OffsetSystem",
    "SpiralHexSystem",
]
