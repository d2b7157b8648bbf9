"""Core types for hex world generation."""

from typing import Iterator

from pydantic import BaseModel

# Axial deltas to the six adjacent cells, east first, counter-clockwise
AXIAL_NEIGHBOR_DELTAS: tuple[tuple[int, int], ...] = (
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
)


class AxialCoord(BaseModel, frozen=True):
    """Immutable axial hex coordinate."""

    q: int
    r: int

    @property
    def s(self) -> int:
        """Third cube coordinate, so that q + r + s == 0."""
        return -self.q - self.r

    def __add__(self, other: "AxialCoord") -> "AxialCoord":
        return AxialCoord(q=self.q + other.q, r=self.r + other.r)

    def distance(self, other: "AxialCoord") -> int:
        """Hex distance to another coordinate."""
        dq = self.q - other.q
        dr = self.r - other.r
        return (abs(dq) + abs(dr) + abs(dq + dr)) // 2

    def neighbors(self) -> Iterator["AxialCoord"]:
        """Yield the six adjacent coordinates."""
        for dq, dr in AXIAL_NEIGHBOR_DELTAS:
            yield AxialCoord(q=self.q + dq, r=self.r + dr)

    def __hash__(self) -> int:
        return hash((self.q, self.r))

    def __str__(self) -> str:
        return f"({self.q}, {self.r})"

    def __repr__(self) -> str:
        return f"AxialCoord(q={self.q}, r={self.r})"


ORIGIN = AxialCoord(q=0, r=0)
