r"""
A* pathfinding on a Cubic grid.

Cubic coordinates label a hexagon with three axes ``(x, y, z)`` that always
sum to zero. Pointy-top layouts use the same math with the grid rotated by
30 degrees::

              _______
             /   0   \
     _______/         \_______
    /  -1   \ 1    -1 /   1   \
   /         \_______/         \
   \ 1     0 /   x   \ 0    -1 /
    \_______/         \_______/
    /  -1   \ y     z /   1   \
   /         \_______/         \
   \ 0     1 /   0   \ -1    0 /
    \_______/         \_______/
            \ -1    1 /
             \_______/
"""

from typing import List, Optional

from hexastar_policies import SearchPolicy

from ...core.types import CostMap, Cubic
from ...spatial.systems import CubicSystem
from .astar_hex import find_path


def astar_path(
    start: Cubic,
    costs: CostMap,
    goal: Cubic,
    count_rings: int,
    policy: Optional[SearchPolicy] = None,
) -> List[Cubic]:
    """
    Cheapest path from ``start`` to ``goal`` on a circular Cubic grid.

    Parameters
    ----------
    start : tuple
        Start node ``(x, y, z)``
    costs : mapping
        Complexity of every traversable ``(x, y, z)`` node
    goal : tuple
        Goal node ``(x, y, z)``
    count_rings : int
        Rings around the origin ``(0, 0, 0)`` making up the grid, inclusive.
        This is not a radius around the start or goal.
    policy : SearchPolicy, optional
        Search limits and scoring options

    Returns
    -------
    List[tuple]
        Nodes from start to goal inclusive
    """
    return find_path(CubicSystem(count_rings), start, goal, costs, policy).path


__all__ = ["astar_path"]
