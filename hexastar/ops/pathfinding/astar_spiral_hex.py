r"""
A* pathfinding on a SpiralHex grid.

SpiralHex coordinates label every cell with one index. The origin is 0 and
each ring continues the count clockwise from its north-most cell::

              _______
             /       \
     _______/    1    \_______
    /       \         /       \
   /    6    \_______/    2    \
   \         /       \         /
    \_______/    0    \_______/
    /       \         /       \
   /    5    \_______/    3    \
   \         /       \         /
    \_______/    4    \_______/
            \         /
             \_______/

Ring 2 then runs from 7 (due north of 1) round to 18. Neighbours are found by
converting to Cubic and back.
"""

from typing import List, Optional

from hexastar_policies import SearchPolicy

from ...core.types import CostMap, SpiralHex
from ...spatial.systems import SpiralHexSystem
from .astar_hex import find_path


def astar_path(
    start: SpiralHex,
    costs: CostMap,
    goal: SpiralHex,
    count_rings: int,
    policy: Optional[SearchPolicy] = None,
) -> List[SpiralHex]:
    """
    Cheapest path from ``start`` to ``goal`` on a circular SpiralHex grid.

    Parameters
    ----------
    start : int
        Start index
    costs : mapping
        Complexity of every traversable index
    goal : int
        Goal index
    count_rings : int
        Rings around the origin ``0`` making up the grid, inclusive
    policy : SearchPolicy, optional
        Search limits and scoring options

    Returns
    -------
    List[int]
        Indices from start to goal inclusive

    Raises
    ------
    InvalidCoordinateError
        If start or goal is a negative or non-integer key of ``costs``
    """
    return find_path(SpiralHexSystem(count_rings), start, goal, costs, policy).path


__all__ = ["astar_path"]
