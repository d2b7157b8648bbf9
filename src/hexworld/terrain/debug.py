"""Raw per-channel noise sampling over the hex footprint.

Lets visualization tools inspect each noise channel without going through
banding and classification.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from ..hexgrid import axial_to_cartesian, hex_disk
from ..types import AxialCoord
from .config import ChannelScales
from .noise import NoiseBank, NoiseChannel, sample_points


@dataclass(frozen=True)
class DebugField:
    """One noise channel sampled at every tile center."""

    channel: NoiseChannel
    coords: list[AxialCoord]
    centers: NDArray[np.float64]  # shape (n, 2): x, z
    values: NDArray[np.float64]  # shape (n,)

    def value_at(self, coord: AxialCoord) -> float:
        """Raw noise value at a tile."""
        return float(self.values[self.coords.index(coord)])

    def colors(self) -> NDArray[np.float32]:
        """RGBA color per tile: blue for negative values, red otherwise."""
        colors = np.zeros((len(self.values), 4), dtype=np.float32)
        negative = self.values < 0.0
        colors[negative, 2] = -self.values[negative]
        colors[~negative, 0] = self.values[~negative]
        colors[:, 3] = 1.0
        return colors


def sample_debug_fields(
    noise: NoiseBank,
    radius: int,
    scales: ChannelScales | None = None,
    tile_size: float = 1.0,
) -> dict[NoiseChannel, DebugField]:
    """Sample every channel at each tile center of the hex disk.

    Args:
        noise: Noise bank to sample.
        radius: World radius.
        scales: Per-channel coordinate divisors.
        tile_size: Circumscribed radius of a tile.

    Returns:
        Mapping of channel to its sampled field.
    """
    scales = scales or ChannelScales()
    coords = list(hex_disk(radius))
    centers = np.array(
        [axial_to_cartesian(coord, tile_size) for coord in coords],
        dtype=np.float64,
    ).reshape(-1, 2)

    fields: dict[NoiseChannel, DebugField] = {}
    for channel in NoiseChannel:
        scale = getattr(scales, channel.value)
        values = sample_points(noise.channel(channel), centers.tolist(), scale)
        fields[channel] = DebugField(
            channel=channel,
            coords=coords,
            centers=centers,
            values=values,
        )
    return fields
