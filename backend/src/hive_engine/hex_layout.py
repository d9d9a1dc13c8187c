"""Hexagonal spiral tiling for hive visualization.

Positions spiral outward from the center in concentric rings of a
flat-topped hex grid. Ring 0 is the center; ring k holds 6k hexes, walked
as six sides of k steps starting at axial (q=0, r=-k). Axial coordinates
are converted to pixels with ``hex_size`` as the cell radius.
"""
import math
from typing import List, Tuple

from .constants import RING_DEPTH_STEP
from .records import CellPosition


# Walk order around a ring, starting from (0, -k)
RING_DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (1, 0), (0, 1), (-1, 1),
    (-1, 0), (0, -1), (1, -1),
)

SQRT3 = math.sqrt(3)


def axial_to_pixel(
    q: int,
    r: int,
    center_x: float,
    center_y: float,
    hex_size: float
) -> Tuple[float, float]:
    """Convert axial hex coordinates to pixel coordinates."""
    x = center_x + hex_size * (3 / 2 * q)
    y = center_y + hex_size * (SQRT3 / 2 * q + SQRT3 * r)
    return x, y


def ring_for_index(index: int) -> int:
    """Ring number holding the ``index``-th position of the spiral."""
    if index <= 0:
        return 0
    ring = 0
    last_index = 0  # Last index covered by rings 0..ring
    while last_index < index:
        ring += 1
        last_index += 6 * ring
    return ring


def generate_hex_positions(
    count: int,
    center_x: float,
    center_y: float,
    hex_size: float
) -> List[CellPosition]:
    """
    Generate exactly ``count`` positions spiraling outward from the center.

    Stops mid-ring once ``count`` is reached. Identical arguments always
    yield the identical ordered list.
    """
    positions: List[CellPosition] = []
    if count <= 0:
        return positions

    positions.append(CellPosition(x=center_x, y=center_y, z=0.0))

    ring = 1
    while len(positions) < count:
        q, r = 0, -ring
        depth = ring * RING_DEPTH_STEP

        for dq, dr in RING_DIRECTIONS:
            for _ in range(ring):
                if len(positions) >= count:
                    break
                x, y = axial_to_pixel(q, r, center_x, center_y, hex_size)
                positions.append(CellPosition(x=x, y=y, z=depth))
                q += dq
                r += dr

        ring += 1

    return positions
