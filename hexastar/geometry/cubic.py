r"""
Cubic hexagon geometry.

Cubic coordinates address a hexagon through three axes ``(x, y, z)`` with
``x + y + z == 0``. They are the canonical form for neighbour, ring and
distance math because only they carry enough information for all three.

Directions are listed clockwise starting from north::

              _______
             /       \
     _______/    N    \_______
    /       \         /       \
   /   NW    \_______/   NE    \
   \         /       \         /
    \_______/ (x,y,z) \_______/
    /       \         /       \
   /   SW    \_______/   SE    \
   \         /       \         /
    \_______/    S    \_______/
            \         /
             \_______/

    N  = (0, -1, 1)     S  = (0, 1, -1)
    NE = (1, -1, 0)     SW = (-1, 1, 0)
    SE = (1, 0, -1)     NW = (-1, 0, 1)
"""

from typing import Callable, List, Optional, Sequence

import numpy as np

from ..core.errors import InvalidCoordinateError
from ..core.types import Cubic


ORIGIN: Cubic = (0, 0, 0)

# Clockwise from north; opposite directions sum to zero
CUBIC_DIRECTIONS: np.ndarray = np.array(
    [
        (0, -1, 1),   # north
        (1, -1, 0),   # north-east
        (1, 0, -1),   # south-east
        (0, 1, -1),   # south
        (-1, 1, 0),   # south-west
        (-1, 0, 1),   # north-west
    ],
    dtype=np.int64,
)
CUBIC_DIRECTIONS.setflags(write=False)

NORTH, NORTH_EAST, SOUTH_EAST, SOUTH, SOUTH_WEST, NORTH_WEST = range(6)

_DIRECTION_TUPLES: List[Cubic] = [tuple(int(v) for v in d) for d in CUBIC_DIRECTIONS]


def validate_cubic(node: Sequence[int]) -> Cubic:
    """
    Check that ``node`` is a cubic coordinate and return it as a tuple.
    
    Raises
    ------
    InvalidCoordinateError
        If ``node`` does not have three integer axes summing to zero
    """
    try:
        x, y, z = node
        integral = all(int(v) == v for v in (x, y, z))
    except (TypeError, ValueError, OverflowError):
        raise InvalidCoordinateError(node, "expected (x, y, z)") from None
    if not integral:
        raise InvalidCoordinateError(node, "axes must be integers")
    if x + y + z != 0:
        raise InvalidCoordinateError(node, "x + y + z must be 0")
    return (int(x), int(y), int(z))


def cubic_direction(index: int) -> Cubic:
    """Unit step for direction ``index`` (0 = north, clockwise)."""
    return _DIRECTION_TUPLES[index % 6]


def cubic_add(a: Cubic, b: Cubic, scale: int = 1) -> Cubic:
    return (a[0] + b[0] * scale, a[1] + b[1] * scale, a[2] + b[2] * scale)


def cubic_distance(start: Cubic, end: Cubic) -> int:
    """
    Number of hops between two cubic coordinates.
    
    This equals ``(|dx| + |dy| + |dz|) / 2``, which is the ring the end node
    sits on when the start node is taken as the centre.
    """
    return (
        abs(start[0] - end[0]) + abs(start[1] - end[1]) + abs(start[2] - end[2])
    ) // 2


def cubic_distances(nodes: np.ndarray, end: Cubic) -> np.ndarray:
    """
    Vectorised cubic distance from every row of ``nodes`` to ``end``.
    
    Parameters
    ----------
    nodes : np.ndarray
        Integer array of shape (n, 3)
    end : tuple
        Target cubic coordinate
        
    Returns
    -------
    np.ndarray
        Integer array of shape (n,)
    """
    nodes = np.asarray(nodes, dtype=np.int64).reshape(-1, 3)
    return np.abs(nodes - np.asarray(end, dtype=np.int64)).sum(axis=1) // 2


def node_neighbours_cubic(
    source: Cubic,
    count_rings: Optional[int] = None,
    contains: Optional[Callable[[Cubic], bool]] = None,
) -> List[Cubic]:
    """
    Find the neighbouring nodes of ``source`` in a cubic grid.
    
    The grid is a circular arrangement of ``count_rings`` rings around the
    origin; ``count_rings`` is inclusive, so a neighbour is kept only when
    the absolute value of each of its axes is at most ``count_rings``.
    Pass ``contains`` instead to apply any other bound. With neither, all six
    neighbours are returned.
    
    Neighbours are returned clockwise starting from north.
    """
    neighbours = []
    for d in _DIRECTION_TUPLES:
        n = (source[0] + d[0], source[1] + d[1], source[2] + d[2])
        if count_rings is not None and (
            abs(n[0]) > count_rings or abs(n[1]) > count_rings or abs(n[2]) > count_rings
        ):
            continue
        if contains is not None and not contains(n):
            continue
        neighbours.append(n)
    return neighbours


def cubic_ring(center: Cubic, radius: int) -> List[Cubic]:
    """
    Enumerate the ring of cells at exactly ``radius`` hops from ``center``.
    
    Radius 0 is the centre alone. Otherwise the walk starts ``radius`` steps
    south-west of the centre and follows the six faces clockwise (north,
    north-east, south-east, south, south-west, north-west), taking ``radius``
    steps along each and recording the cell reached after every step. The
    starting corner is therefore the last member.
    
    Parameters
    ----------
    center : tuple
        Cubic centre of the ring
    radius : int
        Ring number, >= 0
        
    Returns
    -------
    List[tuple]
        ``6 * radius`` cubic coordinates (1 for radius 0)
    """
    if radius < 0:
        raise ValueError(f"Ring radius must be >= 0, got {radius}")
    if radius == 0:
        return [tuple(center)]
    
    ring = []
    node = cubic_add(center, cubic_direction(SOUTH_WEST), radius)
    for d in _DIRECTION_TUPLES:
        for _ in range(radius):
            node = cubic_add(node, d)
            ring.append(node)
    return ring


def cubic_spiral(center: Cubic, radius: int) -> List[Cubic]:
    """Every cell within ``radius`` hops of ``center``, ring by ring."""
    cells = []
    for k in range(radius + 1):
        cells.extend(cubic_ring(center, k))
    return cells


__all__ = [
    "ORIGIN",
    "CUBIC_DIRECTIONS",
    "NORTH",
    "NORTH_EAST",
    "SOUTH_EAST",
    "SOUTH",
    "SOUTH_WEST",
    "NORTH_WEST",
    "validate_cubic",
    "cubic_direction",
    "cubic_add",
    "cubic_distance",
    "cubic_distances",
    "node_neighbours_cubic",
    "cubic_ring",
    "cubic_spiral",
]
