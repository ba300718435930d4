"""
Tests for ring enumeration and hop distance on cubic coordinates.
"""

import math

import pytest
import numpy as np

from hexastar.core.errors import InvalidCoordinateError
from hexastar.geometry.cubic import (
    ORIGIN,
    cubic_distance,
    cubic_distances,
    cubic_ring,
    cubic_spiral,
    validate_cubic,
)


class TestCubicRing:
    """Ring enumeration around a centre."""
    
    def test_ring_zero_is_centre(self):
        """Test that radius 0 yields the centre alone."""
        assert cubic_ring((1, -2, 1), 0) == [(1, -2, 1)]
    
    @pytest.mark.parametrize("radius", [1, 2, 3, 4])
    def test_ring_size_and_distance(self, radius):
        """Test that ring k has 6k distinct members all k hops from the centre."""
        center = (1, -2, 1)
        ring = cubic_ring(center, radius)
        assert len(ring) == 6 * radius
        assert len(set(ring)) == 6 * radius
        for node in ring:
            assert sum(node) == 0
            assert cubic_distance(center, node) == radius
    
    def test_ring_walk_order(self):
        """Test that the walk starts one step north of the south-west corner."""
        ring = cubic_ring(ORIGIN, 1)
        assert ring == [
            (-1, 0, 1),
            (0, -1, 1),
            (1, -1, 0),
            (1, 0, -1),
            (0, 1, -1),
            (-1, 1, 0),
        ]
    
    def test_negative_radius_rejected(self):
        """Test that a negative radius raises ValueError."""
        with pytest.raises(ValueError):
            cubic_ring(ORIGIN, -1)
    
    def test_spiral_size(self):
        """Test that a spiral of radius r holds 1 + 3r(r + 1) cells."""
        for radius in range(4):
            cells = cubic_spiral(ORIGIN, radius)
            assert len(cells) == 1 + 3 * radius * (radius + 1)
            assert cells[0] == ORIGIN


class TestCubicDistance:
    """Hop distance between cubic coordinates."""
    
    def test_distance_symmetric_with_zero_diagonal(self):
        """Test that distance is symmetric and zero from a node to itself."""
        cells = cubic_spiral(ORIGIN, 2)
        for a in cells:
            assert cubic_distance(a, a) == 0
            for b in cells:
                assert cubic_distance(a, b) == cubic_distance(b, a)
    
    def test_distance_known_values(self):
        """Test distances on hand-computed pairs."""
        assert cubic_distance(ORIGIN, (2, -2, 0)) == 2
        assert cubic_distance((0, 1, -1), (2, -2, 0)) == 3
    
    def test_vectorised_distance_matches_scalar(self):
        """Test that the array form agrees with the scalar form."""
        cells = cubic_spiral(ORIGIN, 3)
        goal = (1, -3, 2)
        expected = np.array([cubic_distance(c, goal) for c in cells])
        np.testing.assert_array_equal(cubic_distances(np.array(cells), goal), expected)


class TestValidateCubic:
    """The x + y + z == 0 invariant."""
    
    def test_valid_node_returned_as_int_tuple(self):
        """Test that a valid list is normalised to a tuple of ints."""
        assert validate_cubic([1, -1, 0]) == (1, -1, 0)
        assert validate_cubic((1.0, -1.0, 0.0)) == (1, -1, 0)
    
    @pytest.mark.parametrize("node", [
        (1, 1, 1), (1.5, -1.5, 0), (1, 2), "abc", None, (math.inf, -math.inf, 0),
    ])
    def test_invalid_nodes_rejected(self, node):
        """Test that malformed triples raise InvalidCoordinateError."""
        with pytest.raises(InvalidCoordinateError):
            validate_cubic(node)
    
    def test_invalid_coordinate_is_value_error(self):
        """Test that InvalidCoordinateError can be caught as ValueError."""
        with pytest.raises(ValueError):
            validate_cubic((0, 0, 1))
