"""
Test A* on a two-ring Axial grid.

The axial map is the cubic scenario with every key converted, so the route
must be the converted cubic route.
"""

import pytest

from hexastar.core.errors import MissingNodeError, OutOfBoundsError
from hexastar.geometry.conversions import cubic_to_axial
from hexastar.ops.pathfinding import astar_axial


CUBIC_COSTS = {
    (0, 0, 0): 1,
    (0, -1, 1): 1,
    (1, -1, 0): 15,
    (1, 0, -1): 14,
    (0, 1, -1): 2,
    (-1, 1, 0): 6,
    (-1, 0, 1): 7,
    (0, -2, 2): 1,
    (1, -2, 1): 14,
    (2, -2, 0): 1,
    (2, -1, -1): 1,
    (2, 0, -2): 1,
    (1, 1, -2): 1,
    (0, 2, -2): 1,
    (-1, 2, -1): 3,
    (-2, 2, 0): 1,
    (-2, 1, 1): 8,
    (-2, 0, 2): 1,
    (-1, -1, 2): 2,
}


def create_axial_costs():
    """Cubic scenario costs keyed by axial (q, r)."""
    return {cubic_to_axial(node): cost for node, cost in CUBIC_COSTS.items()}


class TestAStarAxial:
    """A* over axial coordinates."""
    
    def test_cheapest_path(self):
        """Test that the axial route is the converted cubic route."""
        cubic_path = [(0, 0, 0), (0, 1, -1), (1, 1, -2), (2, 0, -2), (2, -1, -1), (2, -2, 0)]
        path = astar_axial.astar_path((0, 0), create_axial_costs(), (2, 0), 2)
        assert path == [cubic_to_axial(n) for n in cubic_path]
    
    def test_missing_goal_raises(self):
        """Test that a goal node absent from the cost map is rejected."""
        with pytest.raises(MissingNodeError) as exc_info:
            astar_axial.astar_path((0, 0), create_axial_costs(), (5, 5), 2)
        assert exc_info.value.role == "goal"
    
    def test_goal_outside_rings_raises(self):
        """Test that a goal beyond count_rings is rejected."""
        with pytest.raises(OutOfBoundsError) as exc_info:
            astar_axial.astar_path((0, 0), create_axial_costs(), (2, 0), 1)
        assert exc_info.value.role == "goal"
