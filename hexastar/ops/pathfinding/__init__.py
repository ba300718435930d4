"""
Pathfinding operations for hexagon grids.

One generic A* engine (``find_path``) plus an ``astar_path`` entry point per
coordinate system, importable as modules:

    from hexastar.ops.pathfinding import astar_cubic
    path = astar_cubic.astar_path(start, costs, goal, count_rings=2)
"""

from .astar_hex import (
    find_path,
    path_cost,
    PathfindingResult,
)
from . import astar_axial, astar_cubic, astar_offset, astar_spiral_hex

__all__ = [
    "find_path",
    "path_cost",
    "PathfindingResult",
    "astar_axial",
    "astar_cubic",
    "astar_offset",
    "astar_spiral_hex",
]
