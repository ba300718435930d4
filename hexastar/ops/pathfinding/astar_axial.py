r"""
A* pathfinding on an Axial grid.

Axial coordinates use ``q`` for the column and ``r`` for a diagonal row.
Pointy-top layouts use the same math with the grid rotated by 30 degrees,
which makes ``r`` horizontal and ``q`` diagonal::

              _______
             /   0   \
     _______/         \_______
    /  -1   \      -1 /   1   \
   /         \_______/         \
   \       0 /   q   \      -1 /
    \_______/         \_______/
    /  -1   \       r /   1   \
   /         \_______/         \
   \       1 /   0   \       0 /
    \_______/         \_______/
            \       1 /
             \_______/

Neighbours are found by converting to Cubic and back.
"""

from typing import List, Optional

from hexastar_policies import SearchPolicy

from ...core.types import Axial, CostMap
from ...spatial.systems import AxialSystem
from .astar_hex import find_path


def astar_path(
    start: Axial,
    costs: CostMap,
    goal: Axial,
    count_rings: int,
    policy: Optional[SearchPolicy] = None,
) -> List[Axial]:
    """
    Cheapest path from ``start`` to ``goal`` on a circular Axial grid.

    ``count_rings`` is the number of rings around the origin ``(0, 0)``,
    inclusive, not a radius around either endpoint.
    """
    return find_path(AxialSystem(count_rings), start, goal, costs, policy).path


__all__ = ["astar_path"]
