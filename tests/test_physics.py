"""
Unit tests for the geometry helpers in world/physics.py.
"""

import math

import pytest

from world.physics import bounce, clamp, clamp_speed, distance, normalize


class TestDistanceAndClamp:
    def test_distance(self):
        assert distance(0, 0, 3, 4) == pytest.approx(5.0)
        assert distance(1, 1, 1, 1) == 0.0

    def test_clamp(self):
        assert clamp(1.5, 0.0, 1.0) == 1.0
        assert clamp(-0.2, 0.0, 1.0) == 0.0
        assert clamp(0.3, 0.0, 1.0) == 0.3


class TestNormalize:
    def test_rescales_to_length(self):
        vx, vy = normalize(3.0, 4.0, 0.5)
        assert math.hypot(vx, vy) == pytest.approx(0.5)
        assert vx == pytest.approx(0.3)
        assert vy == pytest.approx(0.4)

    def test_zero_vector_is_left_alone(self):
        vx, vy = normalize(0.0, 0.0, 0.5)
        assert (vx, vy) == (0.0, 0.0)
        assert not math.isnan(vx) and not math.isnan(vy)


class TestSpeed:
    def test_clamp_speed_rescales_fast_vectors(self):
        vx, vy = clamp_speed(3.0, 4.0, 0.2)
        assert math.hypot(vx, vy) == pytest.approx(0.2)
        # direction preserved
        assert vy / vx == pytest.approx(4.0 / 3.0)

    def test_clamp_speed_keeps_slow_vectors(self):
        assert clamp_speed(0.05, -0.05, 0.2) == (0.05, -0.05)

    def test_bounce_flips_only_offending_axis(self):
        assert bounce(-1.0, 50.0, -0.1, 0.1, 100, 100) == (0.1, 0.1)
        assert bounce(50.0, 101.0, 0.1, 0.1, 100, 100) == (0.1, -0.1)
        assert bounce(50.0, 50.0, 0.1, 0.1, 100, 100) == (0.1, 0.1)

    def test_bounce_edges_are_inside(self):
        assert bounce(0.0, 100.0, -0.1, 0.1, 100, 100) == (-0.1, 0.1)
