"""Tests for core types."""

from hexworld.types import AXIAL_NEIGHBOR_DELTAS, ORIGIN, AxialCoord


class TestAxialCoord:
    """Tests for AxialCoord."""

    def test_equal_coords_hash_equal(self) -> None:
        """Equal coordinates compare and hash equal."""
        a = AxialCoord(q=2, r=-1)
        b = AxialCoord(q=2, r=-1)
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_usable_as_dict_key(self) -> None:
        """A fresh instance finds an existing dict entry."""
        lookup = {AxialCoord(q=1, r=2): "tile"}
        assert lookup[AxialCoord(q=1, r=2)] == "tile"

    def test_cube_coordinate_sums_to_zero(self) -> None:
        """q + r + s is zero."""
        coord = AxialCoord(q=3, r=-5)
        assert coord.q + coord.r + coord.s == 0

    def test_add(self) -> None:
        """Addition is componentwise."""
        assert AxialCoord(q=1, r=2) + AxialCoord(q=-3, r=1) == AxialCoord(q=-2, r=3)

    def test_distance_to_self_is_zero(self) -> None:
        """A coordinate is at distance 0 from itself."""
        coord = AxialCoord(q=4, r=-2)
        assert coord.distance(coord) == 0

    def test_distance(self) -> None:
        """Distance counts hex steps."""
        assert ORIGIN.distance(AxialCoord(q=2, r=-1)) == 2
        assert ORIGIN.distance(AxialCoord(q=3, r=0)) == 3
        assert ORIGIN.distance(AxialCoord(q=-2, r=-1)) == 3
        assert AxialCoord(q=1, r=1).distance(AxialCoord(q=-1, r=-1)) == 4

    def test_neighbors_are_at_distance_one(self) -> None:
        """All six neighbors are one step away and distinct."""
        coord = AxialCoord(q=1, r=-2)
        neighbors = list(coord.neighbors())
        assert len(neighbors) == 6
        assert len(set(neighbors)) == 6
        assert all(coord.distance(n) == 1 for n in neighbors)

    def test_neighbor_deltas_cancel_out(self) -> None:
        """The neighbor deltas sum to zero."""
        assert sum(dq for dq, _ in AXIAL_NEIGHBOR_DELTAS) == 0
        assert sum(dr for _, dr in AXIAL_NEIGHBOR_DELTAS) == 0

    def test_str(self) -> None:
        """String form is (q, r)."""
        assert str(AxialCoord(q=1, r=-1)) == "(1, -1)"
