r"""
Neighbour discovery in Offset grids.

In an Offset grid the step to a neighbour depends on the orientation and on
the parity of the column (flat-top) or row (pointy-top) being expanded. The
eight resulting delta lists are held in a single lookup table indexed by
``(orientation, parity)``.

Flat-top deltas run clockwise from north: N, NE, SE, S, SW, NW.
Pointy-top deltas run clockwise from north-east: NE, E, SE, SW, W, NW.
In both cases slot ``i`` is the cubic direction ``i`` of
:data:`hexastar.geometry.cubic.CUBIC_DIRECTIONS`.

For example, flat-top with odd columns shifted up::

             _______
            /       \
    _______/  (1,1)  \_______
   /       \         /       \
  /  (0,1)  \_______/  (2,1)  \
  \         /       \         /
   \_______/  (1,0)  \_______/
   /       \         /       \
  /  (0,0)  \_______/  (2,0)  \
  \         /       \         /
   \_______/         \_______/

From the even column (0,0) north-east is (1,0), but from the odd column
(1,0) north-east is (2,1).
"""

from typing import Dict, List, Tuple

import numpy as np

from ..core.types import Offset, Orientation


EVEN, ODD = 0, 1

_O = Orientation

# (orientation, parity) -> six (d_column, d_row) steps
OFFSET_NEIGHBOUR_DELTAS: Dict[Tuple[Orientation, int], np.ndarray] = {
    (_O.FLAT_TOP_ODD_UP, EVEN): np.array([(0, 1), (1, 0), (1, -1), (0, -1), (-1, -1), (-1, 0)]),
    (_O.FLAT_TOP_ODD_UP, ODD): np.array([(0, 1), (1, 1), (1, 0), (0, -1), (-1, 0), (-1, 1)]),
    (_O.FLAT_TOP_ODD_DOWN, EVEN): np.array([(0, 1), (1, 1), (1, 0), (0, -1), (-1, 0), (-1, 1)]),
    (_O.FLAT_TOP_ODD_DOWN, ODD): np.array([(0, 1), (1, 0), (1, -1), (0, -1), (-1, -1), (-1, 0)]),
    (_O.POINTY_TOP_ODD_RIGHT, EVEN): np.array([(0, 1), (1, 0), (0, -1), (-1, -1), (-1, 0), (-1, 1)]),
    (_O.POINTY_TOP_ODD_RIGHT, ODD): np.array([(1, 1), (1, 0), (1, -1), (0, -1), (-1, 0), (0, 1)]),
    (_O.POINTY_TOP_ODD_LEFT, EVEN): np.array([(1, 1), (1, 0), (1, -1), (0, -1), (-1, 0), (0, 1)]),
    (_O.POINTY_TOP_ODD_LEFT, ODD): np.array([(0, 1), (1, 0), (0, -1), (-1, -1), (-1, 0), (-1, 1)]),
}
for _deltas in OFFSET_NEIGHBOUR_DELTAS.values():
    _deltas.setflags(write=False)

_DELTA_TUPLES: Dict[Tuple[Orientation, int], List[Tuple[int, int]]] = {
    key: [(int(dc), int(dr)) for dc, dr in deltas]
    for key, deltas in OFFSET_NEIGHBOUR_DELTAS.items()
}


def offset_parity(node: Offset, orientation: Orientation) -> int:
    """Parity of the shifted axis: the column for flat-top, the row for pointy-top."""
    orientation = Orientation.from_value(orientation)
    axis = node[0] if orientation.is_flat_top else node[1]
    return axis & 1


def offset_deltas(orientation: Orientation, parity: int) -> List[Tuple[int, int]]:
    """Neighbour steps for ``orientation`` and ``parity`` (0 even, 1 odd)."""
    return list(_DELTA_TUPLES[(Orientation.from_value(orientation), parity & 1)])


def node_neighbours_offset(
    source: Offset,
    orientation: Orientation,
    min_column: int,
    max_column: int,
    min_row: int,
    max_row: int,
) -> List[Offset]:
    r"""
    Find the neighbouring nodes of ``source`` in an Offset grid.

    The grid is a rectangle whose edges are given by ``min_column``,
    ``max_column``, ``min_row`` and ``max_row``; all four are exclusive. Most
    nodes discover six neighbours but those lining the boundary discover
    fewer. Consider::

              ___
          ___/   \___
         /   \___/   \
         \___/   \___/
         /   \___/   \
         \___/   \___/

    Expanding the bottom left node discovers only two neighbours.
    """
    orientation = Orientation.from_value(orientation)
    col, row = source
    neighbours = []
    for dc, dr in _DELTA_TUPLES[(orientation, offset_parity(source, orientation))]:
        c, r = col + dc, row + dr
        if min_column < c < max_column and min_row < r < max_row:
            neighbours.append((c, r))
    return neighbours


__all__ = [
    "EVEN",
    "ODD",
    "OFFSET_NEIGHBOUR_DELTAS",
    "offset_parity",
    "offset_deltas",
    "node_neighbours_offset",
]
