"""
Tests for the HexCoordinateSystem implementations used by the search engine.
"""

import math

import numpy as np
import pytest

from hexastar.core.errors import InvalidCoordinateError
from hexastar.core.types import Orientation
from hexastar.geometry.conversions import cubic_to_axial, cubic_to_spiral_hex
from hexastar.spatial.bounds import RectBound, RingBound
from hexastar.spatial.systems import (
    AxialSystem,
    CubicSystem,
    HexCoordinateSystem,
    OffsetSystem,
    SpiralHexSystem,
)


class TestCubicSystem:
    """Cubic coordinates on a ring bound."""
    
    def test_bound_and_neighbours(self):
        """Test that neighbours stay inside the ring bound."""
        system = CubicSystem(1)
        assert isinstance(system.bound, RingBound)
        assert len(system.neighbors((0, 0, 0))) == 6
        assert len(system.neighbors((1, -1, 0))) == 3
    
    def test_validate_rejects_bad_sum(self):
        """Test that validate enforces x + y + z == 0."""
        with pytest.raises(InvalidCoordinateError):
            CubicSystem(2).validate((1, 0, 0))
    
    def test_abstract_system_cannot_be_built(self):
        """Test that the capability itself is abstract."""
        with pytest.raises(TypeError):
            HexCoordinateSystem()


class TestAxialSystem:
    """Axial coordinates routed through cubic neighbour discovery."""
    
    def test_neighbours_match_cubic(self):
        """Test that axial neighbours are the converted cubic neighbours."""
        axial = AxialSystem(2)
        cubic = CubicSystem(2)
        for node in cubic.bound.cells():
            expected = [cubic_to_axial(n) for n in cubic.neighbors(node)]
            assert axial.neighbors(cubic_to_axial(node)) == expected
    
    def test_contains(self):
        """Test that the ring bound is checked on the converted coordinate."""
        system = AxialSystem(1)
        assert system.contains((1, -1))
        assert not system.contains((1, 1))
    
    def test_validate_rejects_non_integers(self):
        """Test that a fractional axial pair is rejected."""
        with pytest.raises(InvalidCoordinateError):
            AxialSystem(1).validate((0, 0.5))
    
    def test_validate_rejects_infinite_axes(self):
        """Test that an infinite axis is rejected rather than overflowing."""
        with pytest.raises(InvalidCoordinateError):
            AxialSystem(1).validate((math.inf, 0))
    
    def test_distance(self):
        """Test that distance is measured in hops."""
        assert AxialSystem(3).distance((0, 0), (2, 1)) == 3


class TestOffsetSystem:
    """Offset coordinates on a rectangular bound."""
    
    def test_orientation_from_string(self):
        """Test that an orientation name or value is accepted."""
        assert OffsetSystem("flat_top_odd_down", -1, 4, -1, 4).orientation is (
            Orientation.FLAT_TOP_ODD_DOWN
        )
        assert OffsetSystem("POINTY_TOP_ODD_RIGHT", -1, 4, -1, 4).orientation is (
            Orientation.POINTY_TOP_ODD_RIGHT
        )
    
    def test_to_dict_records_orientation_and_bound(self):
        """Test that to_dict names the system, bound and orientation."""
        system = OffsetSystem(Orientation.FLAT_TOP_ODD_UP, -1, 4, -1, 4)
        d = system.to_dict()
        assert d["system"] == "offset"
        assert d["orientation"] == "flat_top_odd_up"
        assert RectBound.from_dict(d["bound"]) == system.bound
    
    def test_heuristic_distances(self):
        """Test hop counts between offset cells on a flat-top odd-up grid."""
        system = OffsetSystem(Orientation.FLAT_TOP_ODD_UP, -1, 5, -1, 5)
        assert system.distance((2, 2), (4, 4)) == 3
        assert system.distance((2, 4), (4, 2)) == 3
    
    def test_cubic_array_matches_scalar(self):
        """Test that batch conversion agrees with per-node conversion."""
        system = OffsetSystem(Orientation.POINTY_TOP_ODD_LEFT, -1, 4, -1, 4)
        nodes = system.bound.cells()
        expected = np.array([system.to_cubic(n) for n in nodes])
        np.testing.assert_array_equal(system.to_cubic_array(nodes), expected)


class TestSpiralHexSystem:
    """Single-index spiral coordinates."""
    
    def test_neighbours_of_origin(self):
        """Test that the origin's neighbours are 1..6 in clockwise order."""
        assert SpiralHexSystem(1).neighbors(0) == [1, 2, 3, 4, 5, 6]
    
    def test_neighbours_match_cubic(self):
        """Test that spiral neighbours are the converted cubic neighbours."""
        spiral = SpiralHexSystem(2)
        cubic = CubicSystem(2)
        for node in cubic.bound.cells():
            expected = [cubic_to_spiral_hex(n) for n in cubic.neighbors(node)]
            assert spiral.neighbors(cubic_to_spiral_hex(node)) == expected
    
    def test_contains(self):
        """Test that indices past the last ring are outside."""
        system = SpiralHexSystem(2)
        assert system.contains(18)
        assert not system.contains(19)
        assert not system.contains(-1)
    
    @pytest.mark.parametrize("node", [-1, 1.5, "3", True, None, math.inf, math.nan])
    def test_validate_rejects_bad_indices(self, node):
        """Test that negative, fractional, boolean and non-numeric indices are rejected."""
        with pytest.raises(InvalidCoordinateError):
            SpiralHexSystem(2).validate(node)
    
    def test_validate_normalises_integral_float(self):
        """Test that 3.0 is accepted as index 3."""
        assert SpiralHexSystem(2).validate(3.0) == 3
