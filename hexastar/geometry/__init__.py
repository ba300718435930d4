"""
Hexagon coordinate geometry.

Conversions between Axial, Cubic, Offset and SpiralHex addressing, plus
neighbour, ring and distance math on the canonical cubic form.
"""

from .cubic import (
    ORIGIN,
    CUBIC_DIRECTIONS,
    validate_cubic,
    cubic_direction,
    cubic_distance,
    cubic_distances,
    node_neighbours_cubic,
    cubic_ring,
    cubic_spiral,
)
from .conversions import (
    axial_to_cubic,
    cubic_to_axial,
    axial_to_cubic_array,
    offset_to_cubic,
    cubic_to_offset,
    offset_to_cubic_array,
    ring_start_index,
    spiral_ring,
    spiral_hex_to_cubic,
    cubic_to_spiral_hex,
    spiral_hex_to_cubic_array,
)
from .offset import (
    OFFSET_NEIGHBOUR_DELTAS,
    offset_parity,
    offset_deltas,
    node_neighbours_offset,
)

__all__ = [
    "ORIGIN",
    "CUBIC_DIRECTIONS",
    "validate_cubic",
    "cubic_direction",
    "cubic_distance",
    "cubic_distances",
    "node_neighbours_cubic",
    "cubic_ring",
    "cubic_spiral",
    "axial_to_cubic",
    "cubic_to_axial",
    "axial_to_cubic_array",
    "offset_to_cubic",
    "cubic_to_offset",
    "offset_to_cubic_array",
    "ring_start_index",
    "spiral_ring",
    "spiral_hex_to_cubic",
    "cubic_to_spiral_hex",
    "spiral_hex_to_cubic_array",
    "OFFSET_NEIGHBOUR_DELTAS",
    "offset_parity",
    "offset_deltas",
    "node_neighbours_offset",
]
