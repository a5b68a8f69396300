"""Tests for vector math and tile rounding."""

import pytest

from blocksim.math_utils import Vector3, round_half_away, to_tile_coord


class TestRoundHalfAway:
    """Tests for round_half_away."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0.0, 0),
            (0.49, 0),
            (0.5, 1),
            (1.5, 2),
            (2.5, 3),
            (-0.5, -1),
            (-1.5, -2),
            (-0.49, 0),
            (3.7, 4),
            (-3.2, -3),
        ],
    )
    def test_rounding(self, value, expected):
        """Ties round away from zero."""
        assert round_half_away(value) == expected

    @pytest.mark.parametrize("value", [0.49999999999999994, -0.49999999999999994])
    def test_largest_double_below_half_rounds_to_zero(self, value):
        """Adding 0.5 to this value rounds up to 1.0; the result must still be 0."""
        assert round_half_away(value) == 0

    def test_differs_from_builtin_round(self):
        """Built-in round() is banker's rounding."""
        assert round(0.5) == 0
        assert round_half_away(0.5) == 1

    def test_to_tile_coord(self):
        """Each axis is rounded independently."""
        assert to_tile_coord(Vector3(0.5, -0.5, 1.49)) == (1, -1, 1)


class TestVector3:
    """Tests for Vector3 operations."""

    def test_arithmetic(self):
        """Operators return new vectors."""
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        assert a + b == Vector3(5, 7, 9)
        assert b - a == Vector3(3, 3, 3)
        assert a * 2 == Vector3(2, 4, 6)
        assert 2 * a == Vector3(2, 4, 6)
        assert -a == Vector3(-1, -2, -3)

    def test_products(self):
        x = Vector3(1, 0, 0)
        y = Vector3(0, 1, 0)
        assert x.dot(y) == 0
        assert x.cross(y) == Vector3(0, 0, 1)

    def test_length_and_normalize(self):
        """normalize() gives unit length and leaves zero as zero."""
        v = Vector3(3, 4, 0)
        assert v.length() == 5
        assert v.normalize() == Vector3(0.6, 0.8, 0)
        assert Vector3().normalize() == Vector3()

    def test_clamped(self):
        """Each component is clamped independently."""
        assert Vector3(5, -3, 0.2).clamped(-1, 1) == Vector3(1, -1, 0.2)

    def test_is_zero_is_exact(self):
        """is_zero has no tolerance."""
        assert Vector3().is_zero()
        assert not Vector3(1e-12, 0, 0).is_zero()

    def test_equality_tolerance(self):
        """Equality tolerates float noise but not other types."""
        assert Vector3(0.1 + 0.2, 0, 0) == Vector3(0.3, 0, 0)
        assert Vector3(1, 0, 0) != Vector3(1.1, 0, 0)
        assert Vector3(1, 2, 3) != (1, 2, 3)

    def test_copy_is_independent(self):
        v = Vector3(1, 2, 3)
        c = v.copy()
        c.x = 10
        assert v.x == 1
