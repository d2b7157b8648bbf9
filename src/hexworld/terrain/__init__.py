"""Procedural hex terrain generation package.

Layered noise fields select an elevation band per location, fine terrain
noise places the elevation inside it, and each hex tile records its
elevation, class and edge slopes.
"""

from .config import ChannelScales, GeneratorConfig, NoiseConfig, load_config
from .debug import DebugField, sample_debug_fields
from .elevation import ElevationBand, ElevationModel, remap_terrain
from .generator import WorldGenerator, generate_world
from .noise import FractalNoise, NoiseBank, NoiseChannel, derive_channel_seeds
from .validation import ValidationResult, validate_world

__all__ = [
    "ChannelScales",
    "DebugField",
    "ElevationBand",
    "ElevationModel",
    "FractalNoise",
    "GeneratorConfig",
    "NoiseBank",
    "NoiseChannel",
    "NoiseConfig",
    "ValidationResult",
    "WorldGenerator",
    "derive_channel_seeds",
    "generate_world",
    "load_config",
    "remap_terrain",
    "sample_debug_fields",
    "validate_world",
]
