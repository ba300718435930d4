"""
Test A* on a two-ring SpiralHex grid.

Index k of this map carries the cost of the cubic cell it converts to in the
cubic scenario, so the route is the same walk around the expensive cells.
"""

import pytest

from hexastar import find_path
from hexastar.core.errors import InvalidCoordinateError, MissingNodeError
from hexastar.ops.pathfinding import astar_spiral_hex
from hexastar.spatial.systems import SpiralHexSystem


def create_spiral_costs():
    """Cost map of spiral indices 0..18."""
    return {
        0: 1,
        1: 1,
        2: 15,
        3: 14,
        4: 2,
        5: 6,
        6: 7,
        7: 1,
        8: 14,
        9: 1,
        10: 1,
        11: 1,
        12: 1,
        13: 1,
        14: 3,
        15: 1,
        16: 8,
        17: 1,
        18: 2,
    }


class TestAStarSpiralHex:
    """A* over spiral indices."""
    
    def test_cheapest_path(self):
        """Test the route from the origin to index 9."""
        path = astar_spiral_hex.astar_path(0, create_spiral_costs(), 9, 2)
        assert path == [0, 4, 12, 11, 10, 9]
    
    def test_cost(self):
        """Test that the spiral route costs the same as the cubic one."""
        result = find_path(SpiralHexSystem(2), 0, 9, create_spiral_costs())
        assert result.cost == pytest.approx(6.0)
    
    def test_start_equals_goal(self):
        """Test that a search from a node to itself is the node alone."""
        result = find_path(SpiralHexSystem(2), 4, 4, create_spiral_costs())
        assert result.path == [4]
        assert result.cost == 0.0
        assert result.nodes_explored == 0
    
    def test_missing_start_raises(self):
        """Test that a start index absent from the cost map is rejected."""
        with pytest.raises(MissingNodeError):
            astar_spiral_hex.astar_path(42, create_spiral_costs(), 9, 2)
    
    def test_integral_float_endpoints(self):
        """Test that float indices such as 0.0 and 3.0 are searched as 0 and 3."""
        costs = {i: 1.0 for i in range(19)}
        path = astar_spiral_hex.astar_path(0.0, costs, 3.0, 2)
        
        assert path == [0, 3]
        assert all(type(node) is int for node in path)
    
    def test_negative_index_key_raises(self):
        """Test that a negative index in the cost map is rejected."""
        costs = create_spiral_costs()
        costs[-1] = 1
        with pytest.raises(InvalidCoordinateError):
            astar_spiral_hex.astar_path(-1, costs, 9, 2)
