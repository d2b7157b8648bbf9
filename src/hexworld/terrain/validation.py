"""Post-generation validation of hex worlds."""

import structlog

from ..hexgrid import hex_cell_count, hex_disk
from ..state import World
from ..terrain_types import TerrainClass
from .classification import classify_elevations, elevation_array

logger = structlog.get_logger()


class ValidationResult:
    """Result of world validation."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.passed = True

    def add_error(self, message: str) -> None:
        """Add validation error."""
        self.errors.append(message)
        self.passed = False

    def add_warning(self, message: str) -> None:
        """Add validation warning."""
        self.warnings.append(message)


def validate_world(world: World) -> ValidationResult:
    """Validate a generated world against its invariants.

    Args:
        world: World to check.

    Returns:
        ValidationResult with any errors/warnings.
    """
    result = ValidationResult()

    _check_completeness(world, result)
    _check_keys_match_coords(world, result)
    _check_classification(world, result)
    _check_elevation_floor(world, result)

    if result.passed:
        logger.info("world_validation_passed", radius=world.radius, tiles=len(world))
    else:
        logger.warning("world_validation_failed", error_count=len(result.errors))
        for error in result.errors:
            logger.error("world_validation_error", detail=error)

    for warning in result.warnings:
        logger.warning("world_validation_warning", detail=warning)

    return result


def _check_completeness(world: World, result: ValidationResult) -> None:
    """Every coordinate of the hex disk has a tile and nothing else does."""
    expected = hex_cell_count(world.radius)
    if len(world) != expected:
        result.add_error(f"Expected {expected} tiles, found {len(world)}")

    missing = [coord for coord in hex_disk(world.radius) if coord not in world]
    if missing:
        result.add_error(f"Missing {len(missing)} tiles, first at {missing[0]}")


def _check_keys_match_coords(world: World, result: ValidationResult) -> None:
    """Each tile is stored under its own coordinate."""
    for coord, tile in world.items():
        if tile.coord != coord:
            result.add_error(f"Tile {tile.coord} stored under {coord}")


def _check_classification(world: World, result: ValidationResult) -> None:
    """Each tile's class follows from its elevation, and no tile is a lake."""
    tiles = list(world.tiles.values())
    expected = classify_elevations(elevation_array(world))
    mismatched = [
        tile for tile, terrain_class in zip(tiles, expected)
        if tile.terrain_class != terrain_class
    ]
    if mismatched:
        first = mismatched[0]
        result.add_error(
            f"{len(mismatched)} tiles misclassified, first at {first.coord} "
            f"({first.terrain_class.value} at elevation {first.elevation:.2f})"
        )

    lakes = sum(1 for tile in tiles if tile.terrain_class == TerrainClass.LAKE)
    if lakes:
        result.add_error(f"{lakes} tiles classified as lake")


def _check_elevation_floor(world: World, result: ValidationResult) -> None:
    """Elevations are never negative; values past 256 are only worth a warning."""
    if len(world) == 0:
        return
    elevations = elevation_array(world)
    if elevations.min() < 0.0:
        result.add_error(f"Negative elevation {elevations.min():.2f}")
    above = int((elevations >= 256.0).sum())
    if above:
        result.add_warning(f"{above} tiles at or above elevation 256")
