# renderer/settings.py
from typing import Optional
from core.errors import ConfigurationError
from core.vector import Point3, Vector3
from camera.camera import Camera


class RenderSettings:
    """
    Parameters consumed by the render loop and used to build its camera.
    The defaults reproduce the classic "random spheres" cover shot.
    """
    def __init__(self,
                 image_width: int = 400,
                 aspect_ratio: float = 3.0 / 2.0,
                 samples_per_pixel: int = 20,
                 max_depth: int = 50,
                 look_from: Point3 = None,
                 look_at: Point3 = None,
                 vup: Vector3 = None,
                 vfov: float = 20.0,
                 aperture: float = 0.1,
                 focus_dist: float = 10.0,
                 image_height: Optional[int] = None,
                 seed: Optional[int] = None,
                 verbose: bool = False):
        self.image_width = image_width
        self.aspect_ratio = aspect_ratio
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.look_from = look_from if look_from is not None else Point3(13, 2, 3)
        self.look_at = look_at if look_at is not None else Point3(0, 0, 0)
        self.vup = vup if vup is not None else Vector3(0, 1, 0)
        self.vfov = vfov
        self.aperture = aperture
        self.focus_dist = focus_dist
        # Explicit height wins over the one derived from the aspect ratio.
        self._image_height = image_height
        self.seed = seed
        self.verbose = verbose

    @property
    def image_height(self) -> int:
        if self._image_height is not None:
            return self._image_height
        return int(self.image_width / self.aspect_ratio)

    def set_size(self, width: int, height: int):
        """Pins both dimensions and makes the aspect ratio follow them."""
        self.image_width = width
        self._image_height = height
        if height > 0:
            self.aspect_ratio = width / height

    def validate(self) -> "RenderSettings":
        if self.aspect_ratio <= 0:
            raise ConfigurationError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        # Pixel coordinates are divided by (width - 1) and (height - 1)
        if self.image_width < 2 or self.image_height < 2:
            raise ConfigurationError(
                f"Image must be at least 2x2 pixels, got {self.image_width}x{self.image_height}")
        if self.samples_per_pixel < 1:
            raise ConfigurationError(
                f"samples_per_pixel must be at least 1, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ConfigurationError(f"max_depth must not be negative, got {self.max_depth}")
        if not 0.0 < self.vfov < 180.0:
            raise ConfigurationError(f"vfov must be in (0, 180) degrees, got {self.vfov}")
        if self.aperture < 0:
            raise ConfigurationError(f"aperture must not be negative, got {self.aperture}")
        if self.focus_dist <= 0:
            raise ConfigurationError(f"focus_dist must be positive, got {self.focus_dist}")
        if (self.look_from - self.look_at).near_zero():
            raise ConfigurationError("look_from and look_at must be different points")
        # The camera basis needs a vup that is not along the view direction
        if self.vup.cross(self.look_from - self.look_at).near_zero():
            raise ConfigurationError(
                f"vup {tuple(self.vup)} is parallel to the view direction")
        return self

    def make_camera(self) -> Camera:
        return Camera(self.look_from, self.look_at, self.vup, self.vfov,
                      self.aspect_ratio, self.aperture, self.focus_dist)

    def __repr__(self) -> str:
        return (f"RenderSettings({self.image_width}x{self.image_height}, "
                f"spp={self.samples_per_pixel}, max_depth={self.max_depth})")
