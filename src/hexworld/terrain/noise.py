"""Noise field bank for hex terrain generation.

Four independent fBm fields over OpenSimplex noise, one per channel, all
derived from a single root seed.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Protocol

import numpy as np
from numpy.typing import NDArray
from opensimplex import OpenSimplex

from .config import NoiseConfig

U32_MASK = 0xFFFFFFFF
SEED_MULTIPLIER = 0xAFB333FE


class NoiseChannel(str, Enum):
    """Noise channels, in seed derivation order."""

    CONTINENTALNESS = "continentalness"
    EROSION = "erosion"
    PEAKS = "peaks"
    TERRAIN = "terrain"


class NoiseField(Protocol):
    """Anything that maps a 2D point to a scalar in roughly [-1, 1]."""

    def sample(self, x: float, z: float) -> float: ...


class FractalNoise:
    """Fractal Brownian motion over OpenSimplex noise."""

    def __init__(self, seed: int, config: NoiseConfig | None = None) -> None:
        self.seed = seed
        self.config = config or NoiseConfig()
        self._simplex = OpenSimplex(seed=seed)

    def sample(self, x: float, z: float) -> float:
        """Sample fBm at a point.

        Returns:
            Noise value approximately in [-1, 1].
        """
        total = 0.0
        amplitude = 1.0
        frequency = self.config.frequency
        max_amplitude = 0.0

        for _ in range(self.config.octaves):
            total += amplitude * self._simplex.noise2(x * frequency, z * frequency)
            max_amplitude += amplitude
            amplitude *= self.config.persistence
            frequency *= self.config.lacunarity

        return total / max_amplitude

    def __repr__(self) -> str:
        return f"FractalNoise(seed={self.seed}, octaves={self.config.octaves})"


def sample_points(
    noise: NoiseField,
    points: Iterable[tuple[float, float]],
    scale: float = 1.0,
) -> NDArray[np.float64]:
    """Sample a field at many planar points, dividing each by ``scale`` first.

    OpenSimplex evaluates one point per call, so this collects scalar samples
    into an array rather than vectorizing the noise itself.
    """
    return np.fromiter(
        (noise.sample(x / scale, z / scale) for x, z in points),
        dtype=np.float64,
    )


def derive_channel_seeds(seed: int, radius: int) -> dict[NoiseChannel, int]:
    """Derive one 32-bit seed per channel from the root seed.

    ``base = seed * radius * 0xAFB333FE`` seeds a PRNG. Each channel then
    draws one 32-bit value ``d`` in channel order and gets ``base * d``. All
    products wrap at 32 bits.

    Args:
        seed: Root seed.
        radius: World radius.

    Returns:
        Mapping of channel to its seed.
    """
    base = (seed * radius * SEED_MULTIPLIER) & U32_MASK
    rng = np.random.default_rng(base)

    seeds: dict[NoiseChannel, int] = {}
    for channel in NoiseChannel:
        draw = int(rng.integers(0, 1 << 32, dtype=np.uint64))
        seeds[channel] = (base * draw) & U32_MASK
    return seeds


@dataclass(frozen=True)
class NoiseBank:
    """The four noise fields the elevation function reads."""

    continentalness: NoiseField
    erosion: NoiseField
    peaks: NoiseField
    terrain: NoiseField
    seeds: dict[NoiseChannel, int] = field(default_factory=dict)

    @classmethod
    def from_seed(
        cls, seed: int, radius: int, config: NoiseConfig | None = None
    ) -> "NoiseBank":
        """Build the bank for a root seed and world radius."""
        seeds = derive_channel_seeds(seed, radius)
        return cls(
            continentalness=FractalNoise(seeds[NoiseChannel.CONTINENTALNESS], config),
            erosion=FractalNoise(seeds[NoiseChannel.EROSION], config),
            peaks=FractalNoise(seeds[NoiseChannel.PEAKS], config),
            terrain=FractalNoise(seeds[NoiseChannel.TERRAIN], config),
            seeds=seeds,
        )

    def channel(self, channel: NoiseChannel) -> NoiseField:
        """Get the field for a channel."""
        return getattr(self, channel.value)
