"""
Coordinate systems as seen by the search engine.

The A* engine is written once against the HexCoordinateSystem capability.
Each subclass binds one addressing scheme to its search bound and exposes:

- ``validate(node)``: normalise a coordinate or raise InvalidCoordinateError
- ``contains(node)``: whether the coordinate lies inside the bound
- ``neighbors(node)``: legal neighbours inside the bound
- ``to_cubic`` / ``from_cubic`` / ``to_cubic_array``: conversions used for
  distance math
- ``distance(a, b)``: hop count between two coordinates

Axial and SpiralHex systems discover neighbours through the cubic system
rather than re-deriving offsets in their own space.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence

import numpy as np

from ..core.errors import InvalidCoordinateError
from ..core.types import Axial, Coordinate, Cubic, Offset, Orientation, SpiralHex
from ..geometry.conversions import (
    axial_to_cubic,
    axial_to_cubic_array,
    cubic_to_axial,
    cubic_to_offset,
    cubic_to_spiral_hex,
    offset_to_cubic,
    offset_to_cubic_array,
    spiral_hex_to_cubic,
    spiral_hex_to_cubic_array,
)
from ..geometry.cubic import cubic_distance, node_neighbours_cubic, validate_cubic
from ..geometry.offset import node_neighbours_offset
from .bounds import RectBound, RingBound


def _validate_pair(node: Any) -> tuple:
    try:
        a, b = node
        integral = int(a) == a and int(b) == b
    except (TypeError, ValueError, OverflowError):
        raise InvalidCoordinateError(node, "expected a pair of integers") from None
    if not integral:
        raise InvalidCoordinateError(node, "expected a pair of integers")
    return (int(a), int(b))


class HexCoordinateSystem(ABC):
    """Capability the A* engine needs from an addressing scheme."""

    name: str = "abstract"

    @abstractmethod
    def validate(self, node: Any) -> Coordinate:
        ...

    @abstractmethod
    def contains(self, node: Coordinate) -> bool:
        ...

    @abstractmethod
    def neighbors(self, node: Coordinate) -> List[Coordinate]:
        ...

    @abstractmethod
    def to_cubic(self, node: Coordinate) -> Cubic:
        ...

    @abstractmethod
    def from_cubic(self, node: Cubic) -> Coordinate:
        ...

    @property
    @abstractmethod
    def bound(self):
        ...

    def to_cubic_array(self, nodes: Sequence[Coordinate]) -> np.ndarray:
        """Cubic coordinates of ``nodes`` as an (n, 3) integer array."""
        return np.array([self.to_cubic(n) for n in nodes], dtype=np.int64).reshape(-1, 3)

    def distance(self, a: Coordinate, b: Coordinate) -> int:
        return cubic_distance(self.to_cubic(a), self.to_cubic(b))

    def to_dict(self) -> Dict[str, Any]:
        return {"system": self.name, "bound": self.bound.to_dict()}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.bound!r})"


class CubicSystem(HexCoordinateSystem):
    """Cubic ``(x, y, z)`` coordinates on a circular grid of rings."""

    name = "cubic"

    def __init__(self, count_rings: int):
        self._bound = RingBound(count_rings)

    @property
    def bound(self) -> RingBound:
        return self._bound

    def validate(self, node: Any) -> Cubic:
        return validate_cubic(node)

    def contains(self, node: Cubic) -> bool:
        return self._bound.contains(node)

    def neighbors(self, node: Cubic) -> List[Cubic]:
        return node_neighbours_cubic(node, self._bound.count_rings)

    def to_cubic(self, node: Cubic) -> Cubic:
        return node

    def from_cubic(self, node: Cubic) -> Cubic:
        return node

    def to_cubic_array(self, nodes: Sequence[Cubic]) -> np.ndarray:
        return np.asarray(nodes, dtype=np.int64).reshape(-1, 3)


class AxialSystem(HexCoordinateSystem):
    """Axial ``(q, r)`` coordinates on a circular grid of rings."""

    name = "axial"

    def __init__(self, count_rings: int):
        self._bound = RingBound(count_rings)

    @property
    def bound(self) -> RingBound:
        return self._bound

    def validate(self, node: Any) -> Axial:
        return _validate_pair(node)

    def contains(self, node: Axial) -> bool:
        return self._bound.contains(axial_to_cubic(node))

    def neighbors(self, node: Axial) -> List[Axial]:
        return [
            cubic_to_axial(n)
            for n in node_neighbours_cubic(axial_to_cubic(node), self._bound.count_rings)
        ]

    def to_cubic(self, node: Axial) -> Cubic:
        return axial_to_cubic(node)

    def from_cubic(self, node: Cubic) -> Axial:
        return cubic_to_axial(node)

    def to_cubic_array(self, nodes: Sequence[Axial]) -> np.ndarray:
        return axial_to_cubic_array(nodes)


class OffsetSystem(HexCoordinateSystem):
    """Offset ``(column, row)`` coordinates on a rectangular grid."""

    name = "offset"

    def __init__(
        self,
        orientation: Orientation,
        min_column: int,
        max_column: int,
        min_row: int,
        max_row: int,
    ):
        self.orientation = Orientation.from_value(orientation)
        self._bound = RectBound(min_column, max_column, min_row, max_row)

    @property
    def bound(self) -> RectBound:
        return self._bound

    def validate(self, node: Any) -> Offset:
        return _validate_pair(node)

    def contains(self, node: Offset) -> bool:
        return self._bound.contains(node)

    def neighbors(self, node: Offset) -> List[Offset]:
        b = self._bound
        return node_neighbours_offset(
            node, self.orientation, b.min_column, b.max_column, b.min_row, b.max_row
        )

    def to_cubic(self, node: Offset) -> Cubic:
        return offset_to_cubic(node, self.orientation)

    def from_cubic(self, node: Cubic) -> Offset:
        return cubic_to_offset(node, self.orientation)

    def to_cubic_array(self, nodes: Sequence[Offset]) -> np.ndarray:
        return offset_to_cubic_array(nodes, self.orientation)

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d["orientation"] = self.orientation.value
        return d

    def __repr__(self) -> str:
        return f"OffsetSystem({self.orientation.value}, {self._bound!r})"


class SpiralHexSystem(HexCoordinateSystem):
    """Single-index spiral coordinates on a circular grid of rings."""

    name = "spiral_hex"

    def __init__(self, count_rings: int):
        self._bound = RingBound(count_rings)

    @property
    def bound(self) -> RingBound:
        return self._bound

    def validate(self, node: Any) -> SpiralHex:
        try:
            integral = int(node) == node
        except (TypeError, ValueError, OverflowError):
            integral = False
        if not integral or isinstance(node, bool):
            raise InvalidCoordinateError(node, "expected an integer spiral index")
        if node < 0:
            raise InvalidCoordinateError(node, "spiral index must be >= 0")
        return int(node)

    def contains(self, node: SpiralHex) -> bool:
        return node >= 0 and self._bound.contains(spiral_hex_to_cubic(node))

    def neighbors(self, node: SpiralHex) -> List[SpiralHex]:
        return [
            cubic_to_spiral_hex(n)
            for n in node_neighbours_cubic(spiral_hex_to_cubic(node), self._bound.count_rings)
        ]

    def to_cubic(self, node: SpiralHex) -> Cubic:
        return spiral_hex_to_cubic(node)

    def from_cubic(self, node: Cubic) -> SpiralHex:
        return cubic_to_spiral_hex(node)

    def to_cubic_array(self, nodes: Sequence[SpiralHex]) -> np.ndarray:
        return spiral_hex_to_cubic_array(nodes)


__all__ = [
    "HexCoordinateSystem",
    "CubicSystem",
    "AxialSystem",
    "OffsetSystem",
    "SpiralHexSystem",
]
