"""
Search-space bounds for hexagon grids.

A bound decides whether a coordinate lies inside the declared grid. Two
shapes are supported:

- RingBound: a circular grid of ``count_rings`` rings around the origin,
  inclusive, checked on cubic coordinates.
- RectBound: a rectangular window of columns and rows, exclusive on all four
  edges, checked on Offset coordinates.
"""

from dataclasses import dataclass
from typing import Any, Dict, List

from ..core.types import Cubic, Offset
from ..geometry.cubic import ORIGIN, cubic_spiral


@dataclass(frozen=True)
class RingBound:
    """
    Circular search space of ``count_rings`` rings around the origin.
    
    ``count_rings`` is NOT the number of rings around the start or goal node;
    it is the total number of rings around the origin of the grid. A cell is
    inside when no absolute value of its cubic axes exceeds ``count_rings``.
    """
    count_rings: int
    
    def __post_init__(self):
        if self.count_rings < 0:
            raise ValueError(f"count_rings must be >= 0, got {self.count_rings}")
    
    def contains(self, node: Cubic) -> bool:
        return (
            abs(node[0]) <= self.count_rings
            and abs(node[1]) <= self.count_rings
            and abs(node[2]) <= self.count_rings
        )
    
    def cells(self) -> List[Cubic]:
        """All cubic cells inside the bound, centre first then ring by ring."""
        return cubic_spiral(ORIGIN, self.count_rings)
    
    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "ring", "count_rings": self.count_rings}
    
    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "RingBound":
        return cls(count_rings=int(d["count_rings"]))


@dataclass(frozen=True)
class RectBound:
    """
    Rectangular search space with exclusive edges.
    
    A 4x4 grid whose columns and rows run from 0 to 3 is declared as
    ``RectBound(min_column=-1, max_column=4, min_row=-1, max_row=4)``.
    """
    min_column: int
    max_column: int
    min_row: int
    max_row: int
    
    def contains(self, node: Offset) -> bool:
        return (
            self.min_column < node[0] < self.max_column
            and self.min_row < node[1] < self.max_row
        )
    
    def cells(self) -> List[Offset]:
        """All ``(column, row)`` cells inside the bound, column by column."""
        return [
            (col, row)
            for col in range(self.min_column + 1, self.max_column)
            for row in range(self.min_row + 1, self.max_row)
        ]
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "rect",
            "min_column": self.min_column,
            "max_column": self.max_column,
            "min_row": self.min_row,
            "max_row": self.max_row,
        }
    
    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "RectBound":
        return cls(
            min_column=int(d["min_column"]),
            max_column=int(d["max_column"]),
            min_row=int(d["min_row"]),
            max_row=int(d["max_row"]),
        )


__all__ = [
    "RingBound",
    "RectBound",
]
