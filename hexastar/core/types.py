"""
Coordinate types and hexagon layout orientations.

Coordinates are plain hashable values so they can key a cost map directly:

- Axial ``(q, r)``
- Cubic ``(x, y, z)`` with ``x + y + z == 0``
- Offset ``(column, row)``, meaningful only together with an Orientation
- SpiralHex ``index``, a non-negative int
"""

from enum import Enum
from typing import Hashable, Mapping, Tuple, Union


Axial = Tuple[int, int]
Cubic = Tuple[int, int, int]
Offset = Tuple[int, int]
SpiralHex = int

Coordinate = Hashable
CostMap = Mapping[Coordinate, float]


class Orientation(str, Enum):
    """
    Layout of an Offset grid.
    
    Flat-top layouts shift every odd column half a cell up or down; pointy-top
    layouts shift every odd row half a cell right or left. The origin sits at
    the bottom left, columns grow to the east and rows grow to the north.
    
    Flat-top odd columns moved up::
    
              ___
          ___/ O \\
         / E \\___/
         \\___/
    
    Flat-top odd columns moved down::
    
          ___
         / E \\___
         \\___/ O \\
             \\___/
    """
    FLAT_TOP_ODD_UP = "flat_top_odd_up"
    FLAT_TOP_ODD_DOWN = "flat_top_odd_down"
    POINTY_TOP_ODD_RIGHT = "pointy_top_odd_right"
    POINTY_TOP_ODD_LEFT = "pointy_top_odd_left"
    
    @property
    def is_flat_top(self) -> bool:
        return self in (Orientation.FLAT_TOP_ODD_UP, Orientation.FLAT_TOP_ODD_DOWN)
    
    @classmethod
    def from_value(cls, value: Union["Orientation", str]) -> "Orientation":
        """Accept an Orientation, its value (``"flat_top_odd_up"``) or its name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            pass
        try:
            return cls[str(value).upper()]
        except KeyError:
            raise ValueError(
                f"Unknown orientation {value!r}. "
                f"Supported: {[o.value for o in cls]}"
            ) from None


__all__ = [
    "Axial",
    "Cubic",
    "Offset",
    "SpiralHex",
    "Coordinate",
    "CostMap",
    "Orientation",
]
