r"""
A* pathfinding on an Offset grid.

Offset coordinates are ``(column, row)`` pairs on a rectangular grid with
the origin at the bottom left. Every other column (flat-top) or row
(pointy-top) is shifted by half a cell; the Orientation names which::

    FLAT_TOP_ODD_UP             FLAT_TOP_ODD_DOWN
              ___                   ___
          ___/1,0\                 /0,0\___
         /0,0\___/                 \___/1,0\
         \___/                         \___/

POINTY_TOP_ODD_RIGHT and POINTY_TOP_ODD_LEFT shift odd rows half a cell east
or west instead.

The grid's edges are exclusive, so a 4x4 grid whose columns and rows run from
0 to 3 is searched with ``min_column = min_row = -1`` and
``max_column = max_row = 4``.
"""

from typing import List, Optional, Union

from hexastar_policies import SearchPolicy

from ...core.types import CostMap, Offset, Orientation
from ...spatial.systems import OffsetSystem
from .astar_hex import find_path


def astar_path(
    start: Offset,
    costs: CostMap,
    goal: Offset,
    min_column: int,
    max_column: int,
    min_row: int,
    max_row: int,
    orientation: Union[Orientation, str],
    policy: Optional[SearchPolicy] = None,
) -> List[Offset]:
    """
    Cheapest path from ``start`` to ``goal`` on a rectangular Offset grid.

    Parameters
    ----------
    start : tuple
        Start node ``(column, row)``
    costs : mapping
        Complexity of every traversable ``(column, row)`` node
    goal : tuple
        Goal node ``(column, row)``
    min_column, max_column, min_row, max_row : int
        Exclusive edges of the searchable grid
    orientation : Orientation or str
        Layout of the grid
    policy : SearchPolicy, optional
        Search limits and scoring options

    Returns
    -------
    List[tuple]
        Nodes from start to goal inclusive
    """
    system = OffsetSystem(orientation, min_column, max_column, min_row, max_row)
    return find_path(system, start, goal, costs, policy).path


__all__ = ["astar_path"]
