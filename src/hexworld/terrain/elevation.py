"""Elevation function: coarse band selection plus fine terrain noise."""

from typing import NamedTuple

from .config import ChannelScales
from .noise import NoiseBank


class ElevationBand(NamedTuple):
    """Range of plausible elevation for a location."""

    min: int
    max: int

    @property
    def span(self) -> int:
        return self.max - self.min


DEEP_OCEAN = ElevationBand(0, 10)
SHALLOW_SEA = ElevationBand(10, 20)
SHARP_PEAK = ElevationBand(240, 256)
HIGHLAND = ElevationBand(80, 224)
LOWLAND = ElevationBand(20, 144)
INTERIOR_PLATEAU = ElevationBand(96, 208)

CONTINENT_OCEAN_MAX = 0.0
CONTINENT_SEA_MAX = 0.2
CONTINENT_INTERIOR_MIN = 0.9
EROSION_MOUNTAINOUS_MAX = -0.3
PEAK_RIDGE_MAX = 0.1


def remap_terrain(value: float) -> float:
    """Shift raw terrain noise before interpolating inside a band.

    NOTE: this is (t + 1) / 1, not the usual (t + 1) / 2. Noise in [-1, 1]
    lands in [0, 2], so elevations can exceed the band maximum by up to one
    band span. Existing worlds depend on it; changing the divisor changes the
    terrain for every seed.
    """
    return (value + 1.0) / 1.0


class ElevationModel:
    """Maps planar coordinates to elevation using a noise bank.

    Sampling is pure: the same coordinate always gives the same elevation.
    """

    def __init__(self, noise: NoiseBank, scales: ChannelScales | None = None) -> None:
        self.noise = noise
        self.scales = scales or ChannelScales()

    def elevation_range(self, x: float, z: float) -> ElevationBand:
        """Select the elevation band for a location.

        Decision tree over continentalness, erosion and peaks. Erosion and
        peaks are only sampled on land.
        """
        scales = self.scales
        continentalness = self.noise.continentalness.sample(
            x / scales.continentalness, z / scales.continentalness
        )

        if continentalness < CONTINENT_OCEAN_MAX:
            return DEEP_OCEAN
        if continentalness < CONTINENT_SEA_MAX:
            return SHALLOW_SEA

        erosion = self.noise.erosion.sample(x / scales.erosion, z / scales.erosion)
        if erosion < EROSION_MOUNTAINOUS_MAX:
            peaks = self.noise.peaks.sample(x / scales.peaks, z / scales.peaks)
            if abs(peaks) < PEAK_RIDGE_MAX:
                return SHARP_PEAK
            return HIGHLAND

        if continentalness < CONTINENT_INTERIOR_MIN:
            return LOWLAND
        return INTERIOR_PLATEAU

    def terrain_value(self, x: float, z: float) -> float:
        """Raw fine-scale terrain noise at a location."""
        return self.noise.terrain.sample(x / self.scales.terrain, z / self.scales.terrain)

    def elevation(self, x: float, z: float) -> float:
        """Elevation at a planar location."""
        band = self.elevation_range(x, z)
        terrain = remap_terrain(self.terrain_value(x, z))
        return terrain * band.span + band.min
