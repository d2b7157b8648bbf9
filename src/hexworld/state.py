"""Generated world state: tiles and the hex map that owns them."""

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from pydantic import BaseModel, field_validator, model_validator

from .exceptions import IncompleteWorldError, TileNotFoundError
from .hexgrid import hex_cell_count, hex_disk, in_hex_disk
from .terrain_types import TerrainClass
from .types import AxialCoord

EdgeSlopes = tuple[float, float, float, float, float, float]


class Tile(BaseModel, frozen=True):
    """Immutable hex tile.

    ``edge_slopes[i]`` is the center elevation minus the elevation sampled one
    tile radius away at ``60 * i`` degrees clockwise from north. Positive
    values mean the ground drops towards that edge.
    """

    coord: AxialCoord
    terrain_class: TerrainClass
    elevation: float
    edge_slopes: EdgeSlopes


class World(BaseModel, frozen=True):
    """
    Immutable hex map of tiles keyed by axial coordinate.

    Holds exactly one tile for every coordinate of the hex disk of ``radius``.
    Validation rejects any other set of tiles, so a World can never be built
    partially.
    """

    radius: int
    tiles: Mapping[AxialCoord, Tile]

    @field_validator("tiles", mode="after")
    @classmethod
    def _freeze_tiles(cls, tiles: Mapping[AxialCoord, Tile]) -> Mapping[AxialCoord, Tile]:
        return MappingProxyType(dict(tiles))

    @model_validator(mode="after")
    def _check_hex_disk(self) -> "World":
        """Every key lies in the disk, matches its tile, and none is missing.

        Raises:
            IncompleteWorldError: If the tiles do not cover the hex disk.
        """
        for coord, tile in self.tiles.items():
            if not in_hex_disk(coord, self.radius):
                raise IncompleteWorldError(
                    f"Tile {coord} lies outside radius {self.radius}"
                )
            if tile.coord != coord:
                raise IncompleteWorldError(f"Tile {tile.coord} stored under {coord}")

        expected = hex_cell_count(self.radius)
        if len(self.tiles) != expected:
            missing = [c for c in hex_disk(self.radius) if c not in self.tiles]
            raise IncompleteWorldError(
                f"World of radius {self.radius} has {len(self.tiles)} of "
                f"{expected} tiles, missing {missing[:5]}"
            )
        return self

    @classmethod
    def from_tiles(cls, radius: int, tiles: Iterable[Tile]) -> "World":
        """Build a world from its tiles.

        Args:
            radius: Hex radius of the world.
            tiles: One tile per coordinate of the hex disk.

        Returns:
            World owning the given tiles.

        Raises:
            IncompleteWorldError: If a tile lies outside the disk, appears
                twice, or a coordinate of the disk has no tile.
        """
        index: dict[AxialCoord, Tile] = {}
        for tile in tiles:
            if tile.coord in index:
                raise IncompleteWorldError(f"Duplicate tile at {tile.coord}")
            index[tile.coord] = tile
        return cls(radius=radius, tiles=index)

    # --- Lookup ---

    def get_tile(self, coord: AxialCoord) -> Tile:
        """Get tile at coordinate.

        Raises:
            TileNotFoundError: If the coordinate is outside the world.
        """
        tile = self.tiles.get(coord)
        if tile is None:
            raise TileNotFoundError(
                f"No tile at {coord} in world of radius {self.radius}"
            )
        return tile

    def get(self, coord: AxialCoord, default: Tile | None = None) -> Tile | None:
        """Get tile at coordinate, or ``default``."""
        return self.tiles.get(coord, default)

    def __getitem__(self, coord: AxialCoord) -> Tile:
        return self.get_tile(coord)

    def __contains__(self, coord: object) -> bool:
        return coord in self.tiles

    def __len__(self) -> int:
        return len(self.tiles)

    # --- Iteration ---

    def coords(self) -> Iterator[AxialCoord]:
        """Iterate over every coordinate."""
        return iter(self.tiles)

    def items(self) -> Iterator[tuple[AxialCoord, Tile]]:
        """Iterate over (coordinate, tile) pairs."""
        return iter(self.tiles.items())
