"""Unit tests for the Ray value type."""

import pytest

from core.ray import Ray
from core.vector import Vector3


class TestRay:
    def test_at_zero_is_origin(self):
        ray = Ray(Vector3(1, 2, 3), Vector3(4, 5, 6))
        assert ray.at(0) == ray.origin

    def test_at_is_linear(self):
        ray = Ray(Vector3(1, 2, 3), Vector3(0.5, -1, 2))
        p1 = ray.at(1.0)
        p3 = ray.at(3.0)
        assert p3.x == pytest.approx(ray.origin.x + 3 * (p1.x - ray.origin.x))
        assert p3.y == pytest.approx(ray.origin.y + 3 * (p1.y - ray.origin.y))
        assert p3.z == pytest.approx(ray.origin.z + 3 * (p1.z - ray.origin.z))

    def test_time_defaults_to_zero(self):
        assert Ray(Vector3(), Vector3(0, 0, 1)).time == 0.0
        assert Ray(Vector3(), Vector3(0, 0, 1), 0.25).time == 0.25
