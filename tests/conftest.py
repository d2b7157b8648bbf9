"""Shared test fixtures for hex world tests."""

import pytest

from hexworld.terrain.config import ChannelScales, GeneratorConfig
from hexworld.terrain.noise import NoiseBank


class ConstantNoise:
    """Noise field that returns the same value everywhere."""

    def __init__(self, value: float = 0.0) -> None:
        self.value = value

    def sample(self, x: float, z: float) -> float:
        return self.value


class RecordingNoise(ConstantNoise):
    """Constant noise field that remembers where it was sampled."""

    def __init__(self, value: float = 0.0) -> None:
        super().__init__(value)
        self.points: list[tuple[float, float]] = []

    def sample(self, x: float, z: float) -> float:
        self.points.append((x, z))
        return self.value


def make_bank(
    continentalness: float = 0.0,
    erosion: float = 0.0,
    peaks: float = 0.0,
    terrain: float = 0.0,
) -> NoiseBank:
    """Noise bank of constant fields."""
    return NoiseBank(
        continentalness=ConstantNoise(continentalness),
        erosion=ConstantNoise(erosion),
        peaks=ConstantNoise(peaks),
        terrain=ConstantNoise(terrain),
    )


@pytest.fixture
def flat_bank() -> NoiseBank:
    """Every channel constant at 0."""
    return make_bank()


@pytest.fixture
def unit_scale_config() -> GeneratorConfig:
    """Config whose channels sample planar coordinates unscaled."""
    return GeneratorConfig(
        scales=ChannelScales(continentalness=1, erosion=1, peaks=1, terrain=1)
    )


@pytest.fixture
def bank_factory():
    """Factory for noise banks of constant fields."""
    return make_bank


@pytest.fixture
def recording_noise():
    """Factory for constant fields that record their sample points."""
    return RecordingNoise
