"""Core types and errors for hexagon pathfinding."""

from .types import Axial, Cubic, Offset, SpiralHex, Coordinate, CostMap, Orientation
from .errors import (
    HexPathError,
    InvalidCoordinateError,
    InvalidCostError,
    MissingNodeError,
    OutOfBoundsError,
    UnreachableError,
    SearchLimitError,
)

__all__ = [
    "Axial",
    "Cubic",
    "Offset",
    "SpiralHex",
    "Coordinate",
    "CostMap",
    "Orientation",
    "HexPathError",
    "InvalidCoordinateError",
    "InvalidCostError",
    "MissingNodeError",
    "OutOfBoundsError",
    "UnreachableError",
    "SearchLimitError",
]
