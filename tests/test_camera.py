"""Unit tests for the thin-lens camera."""

import math

import pytest

from camera.camera import Camera
from core.vector import Point3, Vector3


def approx_vec(v, expected, abs_tol=1e-9):
    return (v.x == pytest.approx(expected[0], abs=abs_tol) and
            v.y == pytest.approx(expected[1], abs=abs_tol) and
            v.z == pytest.approx(expected[2], abs=abs_tol))


@pytest.fixture
def pinhole():
    """90 degree square camera at the origin looking down -z, focus at 1."""
    return Camera(Point3(0, 0, 0), Point3(0, 0, -1), Vector3(0, 1, 0),
                  vfov=90, aspect_ratio=1.0, aperture=0.0, focus_dist=1.0)


class TestCameraBasis:
    def test_orthonormal_basis(self, pinhole):
        assert approx_vec(pinhole.w, (0, 0, 1))
        assert approx_vec(pinhole.u, (1, 0, 0))
        assert approx_vec(pinhole.v, (0, 1, 0))

    def test_viewport(self, pinhole):
        assert pinhole.horizontal.length() == pytest.approx(2.0)
        assert pinhole.vertical.length() == pytest.approx(2.0)
        assert approx_vec(pinhole.lower_left_corner, (-1, -1, -1))

    def test_aspect_ratio_widens_viewport(self):
        cam = Camera(Point3(0, 0, 0), Point3(0, 0, -1), Vector3(0, 1, 0),
                     vfov=90, aspect_ratio=2.0, aperture=0.0, focus_dist=1.0)
        assert cam.horizontal.length() == pytest.approx(2 * cam.vertical.length())

    def test_lens_radius(self):
        cam = Camera(Point3(0, 0, 0), Point3(0, 0, -1), Vector3(0, 1, 0),
                     vfov=40, aspect_ratio=1.5, aperture=0.4, focus_dist=3.0)
        assert cam.lens_radius == pytest.approx(0.2)


class TestGetRay:
    def test_pinhole_origin(self, pinhole, rng):
        for s, t in ((0, 0), (0.5, 0.5), (1, 1), (0.2, 0.9)):
            assert pinhole.get_ray(s, t, rng).origin == Point3(0, 0, 0)

    def test_center_ray_points_at_target(self, pinhole, rng):
        ray = pinhole.get_ray(0.5, 0.5, rng)
        assert approx_vec(ray.direction, (0, 0, -1))

    def test_corner_rays(self, pinhole, rng):
        assert approx_vec(pinhole.get_ray(0, 0, rng).direction, (-1, -1, -1))
        assert approx_vec(pinhole.get_ray(1, 1, rng).direction, (1, 1, -1))

    def test_lens_rays_converge_on_focus_plane(self, rng):
        cam = Camera(Point3(0, 0, 0), Point3(0, 0, -1), Vector3(0, 1, 0),
                     vfov=60, aspect_ratio=1.0, aperture=2.0, focus_dist=5.0)
        target = cam.lower_left_corner + cam.horizontal * 0.3 + cam.vertical * 0.7
        for _ in range(50):
            ray = cam.get_ray(0.3, 0.7, rng)
            # Origin stays within the lens disk
            assert (ray.origin - cam.origin).length() < cam.lens_radius + 1e-12
            assert ray.origin.z == pytest.approx(0.0)
            # and every ray passes through the same point on the focus plane
            assert approx_vec(ray.at(1.0), (target.x, target.y, target.z))

    def test_look_at_direction(self, rng):
        look_from = Point3(13, 2, 3)
        cam = Camera(look_from, Point3(0, 0, 0), Vector3(0, 1, 0),
                     vfov=20, aspect_ratio=1.5, aperture=0.0, focus_dist=10.0)
        direction = cam.get_ray(0.5, 0.5, rng).direction.normalize()
        expected = (-look_from).normalize()
        assert approx_vec(direction, (expected.x, expected.y, expected.z))
        assert math.isclose(cam.w.length(), 1.0)
