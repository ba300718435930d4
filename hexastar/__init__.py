"""
hexastar - A* pathfinding on weighted hexagon grids.

Finds the cheapest route between two hexagons of a grid whose cells each
carry a traversal cost. Four addressing schemes are supported: Axial, Cubic,
Offset (with an Orientation) and SpiralHex.

Main Entry Points:
    - hexastar.ops.pathfinding.astar_cubic.astar_path()
    - hexastar.ops.pathfinding.astar_axial.astar_path()
    - hexastar.ops.pathfinding.astar_offset.astar_path()
    - hexastar.ops.pathfinding.astar_spiral_hex.astar_path()
    - find_path(): generic search returning a PathfindingResult

Example:
    >>> from hexastar.ops.pathfinding import astar_cubic
    >>> costs = {(0, 0, 0): 1, (0, -1, 1): 1, (0, -2, 2): 1}
    >>> astar_cubic.astar_path((0, 0, 0), costs, (0, -2, 2), count_rings=2)
    [(0, 0, 0), (0, -1, 1), (0, -2, 2)]
"""

__version__ = "0.1.0"

from .core import (
    Orientation,
    HexPathError,
    InvalidCoordinateError,
    InvalidCostError,
    MissingNodeError,
    OutOfBoundsError,
    UnreachableError,
    SearchLimitError,
)
from .spatial import (
    RingBound,
    RectBound,
    HexCoordinateSystem,
    CubicSystem,
    AxialSystem,
    OffsetSystem,
    SpiralHexSystem,
)
from .ops import find_path, path_cost, PathfindingResult, build_cost_graph

__all__ = [
    "__version__",
    "Orientation",
    "HexPathError",
    "InvalidCoordinateError",
    "InvalidCostError",
    "MissingNodeError",
    "OutOfBoundsError",
    "UnreachableError",
    "SearchLimitError",
    "RingBound",
    "RectBound",
    "HexCoordinateSystem",
    "CubicSystem",
    "AxialSystem",
    "OffsetSystem",
    "SpiralHexSystem",
    "find_path",
    "path_cost",
    "PathfindingResult",
    "build_cost_graph",
]
