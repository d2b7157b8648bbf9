"""Hex world generation orchestration."""

import time

import structlog

from ..hexgrid import axial_to_cartesian, edge_sample_points, hex_disk
from ..state import Tile, World
from ..terrain_types import TerrainClass, classify_elevation
from ..types import AxialCoord
from .classification import count_terrain_classes
from .config import GeneratorConfig
from .debug import DebugField, sample_debug_fields
from .elevation import ElevationModel
from .noise import NoiseBank, NoiseChannel

logger = structlog.get_logger()

# Rounding applied to edge sample points so shared hex vertices hit one key
EDGE_KEY_DIGITS = 9


class WorldGenerator:
    """Builds a hex world from a root seed and a radius.

    Construction derives the noise bank; ``generate`` is a pure computation
    and can be called any number of times with identical results.
    """

    def __init__(
        self,
        seed: int,
        radius: int,
        config: GeneratorConfig | None = None,
        noise: NoiseBank | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            seed: Root seed. Only the low 32 bits take part in derivation.
            radius: World radius in tiles; 0 gives a single tile.
            config: Noise and scale settings. Its own seed and radius are
                ignored in favour of the arguments.
            noise: Prebuilt noise bank to use instead of deriving one.
        """
        self.config = (config or GeneratorConfig()).model_copy(
            update={"seed": seed, "radius": radius}
        )
        self.seed = seed
        self.radius = radius
        self.tile_size = self.config.tile_size
        self.noise = noise or NoiseBank.from_seed(
            seed & 0xFFFFFFFF, radius, self.config.noise
        )
        self.elevation_model = ElevationModel(self.noise, self.config.scales)

        logger.debug(
            "generator_created",
            seed=seed,
            radius=radius,
            channel_seeds={c.value: s for c, s in self.noise.seeds.items()},
        )

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> "WorldGenerator":
        """Create a generator from a complete configuration."""
        return cls(config.seed, config.radius, config=config)

    def elevation(self, x: float, z: float) -> float:
        """Elevation at a planar location."""
        return self.elevation_model.elevation(x, z)

    def build_tile(
        self,
        coord: AxialCoord,
        edge_cache: dict[tuple[float, float], float] | None = None,
    ) -> Tile:
        """Sample, classify and package a single tile.

        Args:
            coord: Axial coordinate of the tile.
            edge_cache: Optional memo of edge sample elevations keyed by
                rounded planar point. Edge samples fall on hex vertices, and
                each vertex is shared by three tiles.
        """
        x, z = axial_to_cartesian(coord, self.tile_size)
        elevation = self.elevation(x, z)

        slopes = tuple(
            elevation - self._edge_elevation(sx, sz, edge_cache)
            for sx, sz in edge_sample_points(x, z, self.tile_size)
        )

        return Tile(
            coord=coord,
            terrain_class=classify_elevation(elevation),
            elevation=elevation,
            edge_slopes=slopes,
        )

    def _edge_elevation(
        self,
        x: float,
        z: float,
        edge_cache: dict[tuple[float, float], float] | None,
    ) -> float:
        if edge_cache is None:
            return self.elevation(x, z)
        key = (round(x, EDGE_KEY_DIGITS), round(z, EDGE_KEY_DIGITS))
        elevation = edge_cache.get(key)
        if elevation is None:
            elevation = self.elevation(x, z)
            edge_cache[key] = elevation
        return elevation

    def generate(self) -> World:
        """Generate the full world.

        Returns:
            World with one tile per coordinate of the hex disk.
        """
        start_time = time.perf_counter()
        edge_cache: dict[tuple[float, float], float] = {}
        world = World.from_tiles(
            self.radius,
            (self.build_tile(coord, edge_cache) for coord in hex_disk(self.radius)),
        )
        duration_ms = (time.perf_counter() - start_time) * 1000

        logger.info(
            "world_generated",
            seed=self.seed,
            radius=self.radius,
            tiles=len(world),
            edge_samples=len(edge_cache),
            duration_ms=round(duration_ms, 1),
        )
        _log_terrain_stats(world)
        return world

    def debug_fields(self) -> dict[NoiseChannel, DebugField]:
        """Raw noise of every channel over the world's hex footprint."""
        return sample_debug_fields(
            self.noise, self.radius, self.config.scales, self.tile_size
        )


def generate_world(seed: int, radius: int, config: GeneratorConfig | None = None) -> World:
    """Build a generator and run it once."""
    return WorldGenerator(seed, radius, config=config).generate()


def _log_terrain_stats(world: World) -> None:
    """Log per-class tile counts."""
    counts = count_terrain_classes(world)
    total = len(world)
    logger.info(
        "terrain_class_counts",
        **{
            terrain_class.value: f"{count} ({count / total:.1%})"
            for terrain_class, count in counts.items()
            if terrain_class is not TerrainClass.LAKE
        },
    )
