"""
Test A* on a two-ring Cubic grid.

The cost map below has a single cheapest route from the origin to (2, -2, 0)
that swings south and east around the expensive north-east cells.
"""

import networkx as nx
import pytest

from hexastar import find_path
from hexastar.core.errors import MissingNodeError
from hexastar.ops.graph import build_cost_graph
from hexastar.ops.pathfinding import astar_cubic
from hexastar.spatial.systems import CubicSystem


def create_cubic_costs():
    """Cost map of the 19 cells within two rings of the origin."""
    return {
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


EXPECTED_PATH = [(0, 0, 0), (0, 1, -1), (1, 1, -2), (2, 0, -2), (2, -1, -1), (2, -2, 0)]


class TestAStarCubic:
    """A* over cubic coordinates."""
    
    def test_cheapest_path(self):
        """Test that the route avoids the expensive north-east cells."""
        path = astar_cubic.astar_path((0, 0, 0), create_cubic_costs(), (2, -2, 0), 2)
        assert path == EXPECTED_PATH
    
    def test_path_cost_and_statistics(self):
        """Test that find_path reports the half-cost total of the route."""
        result = find_path(CubicSystem(2), (0, 0, 0), (2, -2, 0), create_cubic_costs())
        
        assert result.path == EXPECTED_PATH
        assert result.cost == pytest.approx(6.0)
        assert result.nodes_explored > 0
        assert result.metadata["system"] == "cubic"
    
    def test_matches_dijkstra(self):
        """Test that the A* cost equals networkx's Dijkstra distance."""
        costs = create_cubic_costs()
        graph = build_cost_graph(CubicSystem(2), costs)
        expected = nx.dijkstra_path_length(graph, (0, 0, 0), (2, -2, 0))
        
        result = find_path(CubicSystem(2), (0, 0, 0), (2, -2, 0), costs)
        assert result.cost == pytest.approx(expected)
    
    def test_every_step_is_a_neighbour(self):
        """Test that consecutive path nodes are one hop apart."""
        system = CubicSystem(2)
        path = astar_cubic.astar_path((-2, 0, 2), create_cubic_costs(), (2, 0, -2), 2)
        assert path[0] == (-2, 0, 2) and path[-1] == (2, 0, -2)
        for a, b in zip(path, path[1:]):
            assert system.distance(a, b) == 1
    
    def test_missing_start_raises(self):
        """Test that a start node absent from the cost map is rejected."""
        with pytest.raises(MissingNodeError) as exc_info:
            astar_cubic.astar_path((3, -3, 0), create_cubic_costs(), (2, -2, 0), 2)
        assert exc_info.value.role == "start"
