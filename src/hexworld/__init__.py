"""Hexagonal terrain map generation."""

from .exceptions import HexWorldError, IncompleteWorldError, TileNotFoundError
from .hexgrid import (
    axial_to_cartesian,
    edge_offsets,
    edge_sample_points,
    hex_cell_count,
    hex_disk,
    in_hex_disk,
)
from .state import Tile, World
from .terrain import GeneratorConfig, WorldGenerator, generate_world
from .terrain_types import TerrainClass, classify_elevation
from .types import AxialCoord

__all__ = [
    # Types
    "AxialCoord",
    "TerrainClass",
    "classify_elevation",
    # State
    "Tile",
    "World",
    # Grid
    "axial_to_cartesian",
    "edge_offsets",
    "edge_sample_points",
    "hex_cell_count",
    "hex_disk",
    "in_hex_disk",
    # Generation
    "GeneratorConfig",
    "WorldGenerator",
    "generate_world",
    # Exceptions
    "HexWorldError",
    "IncompleteWorldError",
    "TileNotFoundError",
]
