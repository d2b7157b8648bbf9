"""Hex disk traversal and axial to planar conversion.

Tiles are pointy-top hexagons. Planar space uses +X east and +Z south, so
"north" is -Z.
"""

import math
from typing import Iterator

from .types import AxialCoord

SQRT3 = math.sqrt(3.0)

# Edge sample directions in degrees, clockwise from north
EDGE_ANGLES: tuple[float, ...] = (0.0, 60.0, 120.0, 180.0, 240.0, 300.0)


def hex_cell_count(radius: int) -> int:
    """Number of cells in a hex disk of the given radius."""
    return 3 * radius * radius + 3 * radius + 1


def in_hex_disk(coord: AxialCoord, radius: int) -> bool:
    """Whether a coordinate lies within ``radius`` of the origin."""
    return (
        abs(coord.q) <= radius
        and abs(coord.r) <= radius
        and abs(coord.q + coord.r) <= radius
    )


def hex_disk(radius: int) -> Iterator[AxialCoord]:
    """Yield every coordinate of the hex disk.

    Order is q ascending, then r ascending within the bounds for that column.
    """
    for q in range(-radius, radius + 1):
        r_min = max(-radius, -q - radius)
        r_max = min(radius, radius - q)
        for r in range(r_min, r_max + 1):
            yield AxialCoord(q=q, r=r)


def axial_to_cartesian(coord: AxialCoord, size: float = 1.0) -> tuple[float, float]:
    """Planar (x, z) center of a tile.

    Args:
        coord: Axial coordinate of the tile.
        size: Circumscribed radius of a tile.

    Returns:
        Tuple of (x, z).
    """
    x = size * SQRT3 * coord.q + SQRT3 / 2.0 * size * coord.r
    z = size * 1.5 * coord.r
    return x, z


def edge_offsets(size: float = 1.0) -> tuple[tuple[float, float], ...]:
    """Offsets from a tile center to its six edge sample points."""
    offsets = []
    for angle in EDGE_ANGLES:
        theta = math.radians(angle)
        offsets.append((math.sin(theta) * size, -math.cos(theta) * size))
    return tuple(offsets)


def edge_sample_points(
    x: float, z: float, size: float = 1.0
) -> tuple[tuple[float, float], ...]:
    """Absolute planar points at which the edge slopes of a tile are sampled."""
    return tuple((x + dx, z + dz) for dx, dz in edge_offsets(size))
