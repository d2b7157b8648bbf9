"""Terrain classification of elevations and per-class statistics."""

import numpy as np
from numpy.typing import NDArray

from ..state import World
from ..terrain_types import ELEVATION_THRESHOLDS, TerrainClass

# Classes indexed by np.searchsorted over the threshold bounds
_BOUNDS = np.array([upper for upper, _ in ELEVATION_THRESHOLDS], dtype=np.float64)
_CLASSES: tuple[TerrainClass, ...] = tuple(
    terrain_class for _, terrain_class in ELEVATION_THRESHOLDS
) + (TerrainClass.MOUNTAIN,)


def classify_elevations(elevations: NDArray[np.float64]) -> list[TerrainClass]:
    """Classify many elevations at once.

    Matches ``classify_elevation`` element-wise: a value equal to a bound
    belongs to the class above it.
    """
    indices = np.searchsorted(_BOUNDS, np.asarray(elevations), side="right")
    return [_CLASSES[i] for i in indices.ravel()]


def count_terrain_classes(world: World) -> dict[TerrainClass, int]:
    """Count tiles of each class, including classes with no tiles."""
    counts = {terrain_class: 0 for terrain_class in TerrainClass}
    for tile in world.tiles.values():
        counts[tile.terrain_class] += 1
    return counts


def elevation_array(world: World) -> NDArray[np.float64]:
    """Elevations of every tile, in world iteration order."""
    return np.fromiter(
        (tile.elevation for tile in world.tiles.values()),
        dtype=np.float64,
        count=len(world),
    )
