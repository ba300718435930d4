"""
Conversions between hexagon coordinate systems.

Every conversion is a closed-form transform to or from the canonical cubic
form, and every pair is a mutual inverse:

- Axial ``(q, r)``: ``x = q``, ``z = r``, ``y = -x - z``
- Offset ``(column, row)``: a parity correction on the shifted axis that
  depends on the Orientation
- SpiralHex ``index``: ring lookup followed by a rotation that aligns the
  spiral ordering of a ring with its cubic ring walk

Scalar functions take and return tuples; the ``*_array`` variants convert
numpy arrays of shape (n, 2) or (n, 3) in a single vectorised pass.
"""

from typing import Iterable

import numpy as np

from ..core.errors import InvalidCoordinateError
from ..core.types import Axial, Cubic, Offset, Orientation, SpiralHex
from .cubic import ORIGIN, cubic_distance, cubic_ring, validate_cubic


# =============================================================================
# Axial
# =============================================================================

def axial_to_cubic(node: Axial) -> Cubic:
    """Convert ``(q, r)`` where ``q`` is the column and ``r`` the row."""
    q, r = node
    return (q, -q - r, r)


def cubic_to_axial(node: Cubic) -> Axial:
    x, _, z = validate_cubic(node)
    return (x, z)


def axial_to_cubic_array(nodes: np.ndarray) -> np.ndarray:
    nodes = np.asarray(nodes, dtype=np.int64).reshape(-1, 2)
    q, r = nodes[:, 0], nodes[:, 1]
    return np.stack([q, -q - r, r], axis=1)


# =============================================================================
# Offset
# =============================================================================

def offset_to_cubic(node: Offset, orientation: Orientation) -> Cubic:
    """
    Convert Offset ``(column, row)`` to Cubic for the given orientation.

    Flat-top layouts keep ``x = column`` and correct the row by the column
    parity; pointy-top layouts keep ``z = row`` and correct the column by the
    row parity. The sign of the correction selects which half of the columns
    (or rows) is shifted.
    """
    orientation = Orientation.from_value(orientation)
    col, row = node
    if orientation is Orientation.FLAT_TOP_ODD_UP:
        x = col
        z = row - (col - (col & 1)) // 2
    elif orientation is Orientation.FLAT_TOP_ODD_DOWN:
        x = col
        z = row - (col + (col & 1)) // 2
    elif orientation is Orientation.POINTY_TOP_ODD_RIGHT:
        z = row
        x = col - (row - (row & 1)) // 2
    else:
        z = row
        x = col - (row + (row & 1)) // 2
    return (x, -x - z, z)


def cubic_to_offset(node: Cubic, orientation: Orientation) -> Offset:
    """Inverse of :func:`offset_to_cubic`."""
    orientation = Orientation.from_value(orientation)
    x, _, z = validate_cubic(node)
    if orientation is Orientation.FLAT_TOP_ODD_UP:
        return (x, z + (x - (x & 1)) // 2)
    if orientation is Orientation.FLAT_TOP_ODD_DOWN:
        return (x, z + (x + (x & 1)) // 2)
    if orientation is Orientation.POINTY_TOP_ODD_RIGHT:
        return (x + (z - (z & 1)) // 2, z)
    return (x + (z + (z & 1)) // 2, z)


def offset_to_cubic_array(nodes: np.ndarray, orientation: Orientation) -> np.ndarray:
    """Vectorised :func:`offset_to_cubic` over an (n, 2) array of ``(column, row)``."""
    orientation = Orientation.from_value(orientation)
    nodes = np.asarray(nodes, dtype=np.int64).reshape(-1, 2)
    col, row = nodes[:, 0], nodes[:, 1]
    if orientation is Orientation.FLAT_TOP_ODD_UP:
        x = col
        z = row - (col - (col & 1)) // 2
    elif orientation is Orientation.FLAT_TOP_ODD_DOWN:
        x = col
        z = row - (col + (col & 1)) // 2
    elif orientation is Orientation.POINTY_TOP_ODD_RIGHT:
        z = row
        x = col - (row - (row & 1)) // 2
    else:
        z = row
        x = col - (row + (row & 1)) // 2
    return np.stack([x, -x - z, z], axis=1)


# =============================================================================
# Spiral hex
# =============================================================================

def ring_start_index(ring: int) -> int:
    """Spiral index of the first (north-most) cell of ``ring``."""
    if ring == 0:
        return 0
    return 3 * (ring - 1) * ring + 1


def spiral_ring(index: SpiralHex) -> int:
    """
    Ring number holding spiral ``index``.

    Ring 0 is ``{0}`` and ring k >= 1 holds the ``6k`` indices starting at
    ``3(k-1)k + 1``, so the ring is the last k whose start does not exceed
    ``index``.
    """
    if index < 0:
        raise InvalidCoordinateError(index, "spiral index must be >= 0")
    ring = 0
    while ring_start_index(ring + 1) <= index:
        ring += 1
    return ring


def _ring_rotation(ring: int) -> int:
    # the cubic ring walk ends on its south-west corner, the spiral starts north
    return 2 * ring - 1


def spiral_hex_to_cubic(index: SpiralHex) -> Cubic:
    """
    Convert a spiral index to Cubic coordinates around the origin.

    The spiral runs clockwise from the north-most cell of each ring::

                  _______
                 /       \\
         _______/    1    \\_______
        /       \\         /       \\
       /    6    \\_______/    2    \\
       \\         /       \\         /
        \\_______/    0    \\_______/
        /       \\         /       \\
       /    5    \\_______/    3    \\
       \\         /       \\         /
        \\_______/    4    \\_______/
                \\         /
                 \\_______/

    Position ``p`` inside ring ``k`` lines up with index
    ``(p + 2k - 1) mod 6k`` of :func:`cubic_ring`.
    """
    ring = spiral_ring(index)
    if ring == 0:
        return ORIGIN
    members = cubic_ring(ORIGIN, ring)
    position = index - ring_start_index(ring)
    return members[(position + _ring_rotation(ring)) % len(members)]


def cubic_to_spiral_hex(node: Cubic) -> SpiralHex:
    """Inverse of :func:`spiral_hex_to_cubic`."""
    node = validate_cubic(node)
    ring = cubic_distance(node, ORIGIN)
    if ring == 0:
        return 0
    members = cubic_ring(ORIGIN, ring)
    cubic_position = members.index(node)
    position = (cubic_position - _ring_rotation(ring)) % len(members)
    return ring_start_index(ring) + position


def spiral_hex_to_cubic_array(indices: Iterable[SpiralHex]) -> np.ndarray:
    cells = [spiral_hex_to_cubic(int(i)) for i in np.asarray(indices).reshape(-1)]
    return np.array(cells, dtype=np.int64).reshape(-1, 3)


__all__ = [
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
]
