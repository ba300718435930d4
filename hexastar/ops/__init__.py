"""
Operations on hexagon grids.

For full API access, import from specific submodules:
    - hexastar.ops.pathfinding: A* search per coordinate system
    - hexastar.ops.graph: networkx export of cost maps
"""

from .pathfinding import find_path, path_cost, PathfindingResult
from .graph import build_cost_graph

__all__ = [
    "find_path",
    "path_cost",
    "PathfindingResult",
    "build_cost_graph",
]
