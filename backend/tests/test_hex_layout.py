"""Test hexagonal spiral tiling."""
import math
import pytest

from hive_engine.hex_layout import generate_hex_positions, ring_for_index, axial_to_pixel


def _distance(p, cx, cy):
    return math.hypot(p.x - cx, p.y - cy)


class TestGenerateHexPositions:
    """Test generate_hex_positions."""

    @pytest.mark.parametrize("count", [0, 1, 2, 6, 7, 8, 18, 19, 20, 37, 100])
    def test_exact_count(self, count):
        positions = generate_hex_positions(count, 0.0, 0.0, 10.0)
        assert len(positions) == count

    def test_negative_count_is_empty(self):
        assert generate_hex_positions(-3, 0.0, 0.0, 10.0) == []

    @pytest.mark.parametrize("count", [7, 19, 61, 200])
    def test_no_duplicate_coordinates(self, count):
        positions = generate_hex_positions(count, 100.0, 200.0, 12.5)
        coords = {(round(p.x, 6), round(p.y, 6)) for p in positions}
        assert len(coords) == count

    def test_first_position_is_center(self):
        positions = generate_hex_positions(3, 50.0, 80.0, 10.0)

        assert (positions[0].x, positions[0].y, positions[0].z) == (50.0, 80.0, 0.0)

    def test_first_ring_neighbours_center(self):
        """Ring 1 sits one hex step (sqrt(3) * size) from the center."""
        positions = generate_hex_positions(7, 0.0, 0.0, 10.0)

        for p in positions[1:]:
            assert _distance(p, 0.0, 0.0) == pytest.approx(10.0 * math.sqrt(3))
            assert p.z == pytest.approx(0.1)

    def test_ring_walk_starts_above_center(self):
        """Each ring starts at axial (0, -k)."""
        positions = generate_hex_positions(8, 0.0, 0.0, 10.0)

        assert positions[1].x == pytest.approx(0.0)
        assert positions[1].y == pytest.approx(-10.0 * math.sqrt(3))
        assert positions[7].x == pytest.approx(0.0)
        assert positions[7].y == pytest.approx(-20.0 * math.sqrt(3))

    def test_depth_grows_with_ring(self):
        positions = generate_hex_positions(19, 0.0, 0.0, 10.0)

        assert [p.z for p in positions[:1]] == [0.0]
        assert all(p.z == pytest.approx(0.1) for p in positions[1:7])
        assert all(p.z == pytest.approx(0.2) for p in positions[7:19])

    def test_stops_mid_ring(self):
        """A partial ring is a prefix of the full spiral."""
        partial = generate_hex_positions(10, 5.0, 5.0, 3.0)
        full = generate_hex_positions(19, 5.0, 5.0, 3.0)

        assert partial == full[:10]

    def test_deterministic(self):
        assert generate_hex_positions(50, 1.0, 2.0, 3.0) == generate_hex_positions(50, 1.0, 2.0, 3.0)


class TestRingForIndex:
    """Test ring lookup by spiral index."""

    @pytest.mark.parametrize("index,ring", [
        (0, 0), (1, 1), (6, 1), (7, 2), (18, 2), (19, 3), (36, 3), (37, 4),
    ])
    def test_ring_boundaries(self, index, ring):
        assert ring_for_index(index) == ring

    def test_matches_depth(self):
        positions = generate_hex_positions(40, 0.0, 0.0, 1.0)
        for index, p in enumerate(positions):
            assert p.z == pytest.approx(ring_for_index(index) * 0.1)


class TestAxialToPixel:
    """Test axial conversion."""

    def test_origin(self):
        assert axial_to_pixel(0, 0, 7.0, 9.0, 4.0) == (7.0, 9.0)

    def test_unit_q(self):
        x, y = axial_to_pixel(1, 0, 0.0, 0.0, 2.0)
        assert x == pytest.approx(3.0)
        assert y == pytest.approx(math.sqrt(3))
