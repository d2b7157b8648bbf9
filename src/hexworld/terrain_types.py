"""Terrain classes and the elevation thresholds that select them."""

from enum import Enum


class TerrainClass(str, Enum):
    """Terrain classification of a hex tile.

    LAKE is part of the domain but is never produced by
    ``classify_elevation``. Keep it so consumers can match on every variant.
    """

    OCEAN = "ocean"
    SEA = "sea"
    LAKE = "lake"
    LOWLAND = "lowland"
    PLATEAU = "plateau"
    MOUNTAIN = "mountain"

    @property
    def is_water(self) -> bool:
        """Whether this class is a body of water."""
        return self in _WATER_CLASSES


_WATER_CLASSES = frozenset({
    TerrainClass.OCEAN,
    TerrainClass.SEA,
    TerrainClass.LAKE,
})

# Upper bounds (exclusive) checked in order; anything above the last is mountain
# [0, 10) -> Ocean
# [10, 20) -> Sea
# [20, 128) -> LowLand
# [128, 224) -> Plateau
ELEVATION_THRESHOLDS: tuple[tuple[float, TerrainClass], ...] = (
    (10.0, TerrainClass.OCEAN),
    (20.0, TerrainClass.SEA),
    (128.0, TerrainClass.LOWLAND),
    (224.0, TerrainClass.PLATEAU),
)


def classify_elevation(elevation: float) -> TerrainClass:
    """Map an elevation to its terrain class."""
    for upper, terrain_class in ELEVATION_THRESHOLDS:
        if elevation < upper:
            return terrain_class
    return TerrainClass.MOUNTAIN
