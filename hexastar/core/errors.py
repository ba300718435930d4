"""
Error types raised by hexagon geometry and search operations.

Every failure surfaces as a subclass of HexPathError so callers can catch
the whole family at once. None of them is worth retrying: the search is
deterministic and the same inputs always fail the same way.
"""

from typing import Any, Optional


class HexPathError(Exception):
    """Base class for hexastar errors."""
    pass


# =============================================================================
# Input Errors
# =============================================================================

class InvalidCoordinateError(HexPathError, ValueError):
    """
    Raised when a value is not a valid coordinate of its system.
    
    Examples are a cubic triple whose axes do not sum to zero or a
    negative spiral index.
    """
    
    def __init__(self, coordinate: Any, reason: str):
        self.coordinate = coordinate
        self.reason = reason
        super().__init__(f"Invalid coordinate {coordinate!r}: {reason}")


class InvalidCostError(HexPathError, ValueError):
    """Raised when a cost map holds a negative or non-finite complexity."""
    
    def __init__(self, node: Any, cost: Any):
        self.node = node
        self.cost = cost
        super().__init__(
            f"Node {node!r} has cost {cost!r}; costs must be finite and non-negative"
        )


class MissingNodeError(HexPathError):
    """
    Raised when a node is absent from the cost map.
    
    ``role`` is ``"start"`` or ``"goal"`` for a search and ``"path"`` when
    pricing an existing path.
    """
    
    def __init__(self, role: str, node: Any):
        self.role = role
        self.node = node
        super().__init__(f"Node data does not contain {role} node {node!r}")


class OutOfBoundsError(HexPathError):
    """Raised when the start or goal node lies outside the search bound."""
    
    def __init__(self, role: str, node: Any, bound: Any):
        self.role = role
        self.node = node
        self.bound = bound
        super().__init__(
            f"{role.capitalize()} node {node!r} is outside of searchable grid {bound!r}"
        )


# =============================================================================
# Search Errors
# =============================================================================

class UnreachableError(HexPathError):
    """
    Raised when the frontier is exhausted before the goal is reached.
    
    The goal is walled off by cells missing from the cost map or by the
    edge of the search bound.
    """
    
    def __init__(self, start: Any, goal: Any, nodes_explored: int = 0):
        self.start = start
        self.goal = goal
        self.nodes_explored = nodes_explored
        super().__init__(
            f"No path from {start!r} to {goal!r} "
            f"({nodes_explored} nodes explored)"
        )


class SearchLimitError(HexPathError):
    """Raised when a search spends its expansion or time budget."""
    
    def __init__(self, reason: str, nodes_explored: int = 0, limit: Optional[float] = None):
        self.reason = reason
        self.nodes_explored = nodes_explored
        self.limit = limit
        super().__init__(
            f"A* search stopped: {reason} ({nodes_explored} nodes explored)"
        )


__all__ = [
    "HexPathError",
    "InvalidCoordinateError",
    "InvalidCostError",
    "MissingNodeError",
    "OutOfBoundsError",
    "UnreachableError",
    "SearchLimitError",
]
