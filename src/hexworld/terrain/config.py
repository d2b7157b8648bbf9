"""Terrain generation configuration models."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, Field


class NoiseConfig(BaseModel):
    """fBm parameters shared by every noise channel."""

    octaves: int = Field(default=6, ge=1, description="Number of octaves for fBm")
    frequency: float = Field(default=1.0, description="Frequency of the first octave")
    lacunarity: float = Field(default=2.0, description="Frequency multiplier per octave")
    persistence: float = Field(default=0.5, description="Amplitude multiplier per octave")


class ChannelScales(BaseModel):
    """Divisors applied to planar coordinates before sampling each channel."""

    continentalness: float = Field(default=64.0, gt=0, description="Continent scale")
    erosion: float = Field(default=64.0, gt=0, description="Erosion scale")
    peaks: float = Field(default=16.0, gt=0, description="Peaks scale")
    terrain: float = Field(default=32.0, gt=0, description="Fine terrain scale")


class GeneratorConfig(BaseModel):
    """Complete hex world generation configuration."""

    seed: int = Field(default=42, ge=0, description="Root seed (unsigned 32-bit)")
    radius: int = Field(default=64, ge=0, description="World radius in tiles")
    tile_size: float = Field(
        default=1.0, gt=0, description="Circumscribed radius of a tile"
    )

    noise: NoiseConfig = Field(default_factory=NoiseConfig)
    scales: ChannelScales = Field(default_factory=ChannelScales)


def load_config(config_path: Path) -> GeneratorConfig:
    """Load generator configuration from a TOML file.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed GeneratorConfig.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
        pydantic.ValidationError: If values are out of range.
    """
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return GeneratorConfig.model_validate(data)
