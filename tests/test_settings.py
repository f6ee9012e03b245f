"""Unit tests for RenderSettings validation and camera construction."""

import pytest

from core.errors import ConfigurationError
from core.vector import Point3, Vector3
from renderer.settings import RenderSettings


class TestDefaults:
    def test_default_image(self):
        settings = RenderSettings()
        assert settings.image_width == 400
        assert settings.image_height == 266
        assert settings.samples_per_pixel == 20
        assert settings.max_depth == 50
        assert settings.look_from == Point3(13, 2, 3)

    def test_defaults_are_valid(self):
        assert RenderSettings().validate() is not None

    def test_set_size_pins_height(self):
        settings = RenderSettings()
        settings.set_size(300, 100)
        assert settings.image_height == 100
        assert settings.aspect_ratio == pytest.approx(3.0)

    def test_make_camera(self):
        settings = RenderSettings(aperture=0.4, focus_dist=5.0, vfov=30)
        cam = settings.make_camera()
        assert cam.lens_radius == pytest.approx(0.2)
        assert cam.focus_dist == 5.0
        assert cam.vfov == 30
        assert cam.aspect_ratio == pytest.approx(1.5)


class TestValidation:
    @pytest.mark.parametrize("overrides", [
        dict(image_width=1),
        dict(image_width=2, aspect_ratio=2.0),  # height would be 1
        dict(image_width=10, image_height=1),
        dict(samples_per_pixel=0),
        dict(max_depth=-1),
        dict(aspect_ratio=0),
        dict(vfov=0),
        dict(vfov=180),
        dict(aperture=-0.1),
        dict(focus_dist=0),
        dict(look_from=Point3(1, 1, 1), look_at=Point3(1, 1, 1)),
        dict(look_from=Point3(0, 10, 0), look_at=Point3(0, 0, 0), vup=Vector3(0, 1, 0)),
        dict(look_from=Point3(0, 0, 0), look_at=Point3(0, -5, 0)),
        dict(vup=Vector3(0, 0, 0)),
    ])
    def test_rejects(self, overrides):
        with pytest.raises(ConfigurationError):
            RenderSettings(**overrides).validate()

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            RenderSettings(image_width=0).validate()

    def test_two_by_two_is_allowed(self):
        RenderSettings(image_width=2, image_height=2).validate()

    def test_zero_depth_is_allowed(self):
        RenderSettings(max_depth=0).validate()

    def test_tilted_vup_is_allowed(self):
        settings = RenderSettings(look_from=Point3(0, 10, 0), look_at=Point3(0, 0, 0),
                                  vup=Vector3(0, 0, -1)).validate()
        assert settings.make_camera().u.length() == pytest.approx(1.0)

    def test_deep_paths_are_allowed(self):
        RenderSettings(max_depth=5000).validate()
