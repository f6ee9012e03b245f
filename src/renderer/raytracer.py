# renderer/raytracer.py
import copy
import random
import sys
import numpy as np
from core.errors import ConfigurationError
from core.ray import Ray
from core.vector import Color
from geometry.hittable import Hittable
from camera.camera import Camera
from .settings import RenderSettings
from .tone_mapping import tone_map_kernel

# Lower bound on hit distances; keeps scattered rays off their own surface.
SHADOW_ACNE_EPSILON = 0.001
INFINITY = float("inf")

BLACK = Color(0.0, 0.0, 0.0)
SKY_WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)


def sky_color(ray: Ray) -> Color:
    """
    Vertical gradient from white (looking down) to pale blue (looking up).
    """
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return SKY_WHITE * (1.0 - t) + SKY_BLUE * t


def ray_color(ray: Ray, world: Hittable, depth: int, rng) -> Color:
    """
    Estimates the radiance carried back along ray.

    Each bounce consumes one unit of depth; when it runs out no more light
    is gathered and the path contributes black. The bounces are followed
    in a loop, multiplying attenuations, so max_depth is not tied to the
    interpreter's recursion limit.
    """
    throughput = Color(1.0, 1.0, 1.0)
    while depth > 0:
        rec = world.hit(ray, SHADOW_ACNE_EPSILON, INFINITY)
        if rec is None:
            return throughput * sky_color(ray)

        result = rec.material.scatter(ray, rec, rng)
        if result is None:
            return BLACK
        attenuation, ray = result
        throughput = throughput * attenuation
        depth -= 1
    return BLACK


class Renderer:
    """
    Owns the output buffers for one scene and camera and re-renders them
    only when something changed since the last complete frame.

    pixels is a flat uint8 RGBA buffer, row-major, top row first.
    """
    def __init__(self, settings: RenderSettings, world: Hittable, camera: Camera = None):
        self.settings = settings.validate()
        self.world = world
        self.camera = camera if camera is not None else settings.make_camera()
        self.rng = random.Random(settings.seed)
        self.frame_number = 0
        self._allocate_buffers()
        self.needs_render = True

    @property
    def width(self) -> int:
        return self.settings.image_width

    @property
    def height(self) -> int:
        return self.settings.image_height

    def _allocate_buffers(self):
        self.pixels = np.zeros(self.width * self.height * 4, dtype=np.uint8)
        self.accumulation = np.zeros((self.height, self.width, 3), dtype=np.float64)

    def set_world(self, world: Hittable):
        self.world = world
        self.needs_render = True

    def set_camera(self, camera: Camera):
        self.camera = camera
        self.needs_render = True

    def set_settings(self, settings: RenderSettings):
        """
        Replaces the settings and rebuilds the camera from them.
        """
        settings.validate()
        resized = (settings.image_width != self.width or
                   settings.image_height != self.height)
        self.settings = settings
        self.camera = settings.make_camera()
        if resized:
            self._allocate_buffers()
        self.needs_render = True

    def resize(self, width: int, height: int):
        """
        Changes the output size. Buffers are only reallocated when the size
        actually differs; the camera follows the new aspect ratio. The
        settings passed in by the caller are left untouched.
        """
        if width == self.width and height == self.height:
            return
        if width < 2 or height < 2:
            raise ConfigurationError(f"Image must be at least 2x2 pixels, got {width}x{height}")
        self.settings = copy.copy(self.settings)
        self.settings.set_size(width, height)
        self.camera = self.settings.make_camera()
        self._allocate_buffers()
        self.needs_render = True

    def sample_pixel(self, i: int, j: int) -> Color:
        """
        Sums samples_per_pixel jittered radiance estimates for pixel column i
        and internal row j (row 0 is the bottom of the image).
        """
        width, height = self.width, self.height
        rng = self.rng
        max_depth = self.settings.max_depth
        r = g = b = 0.0
        for _ in range(self.settings.samples_per_pixel):
            u = (i + rng.random()) / (width - 1)
            v = (j + rng.random()) / (height - 1)
            color = ray_color(self.camera.get_ray(u, v, rng), self.world, max_depth, rng)
            r += color.x
            g += color.y
            b += color.z
        return Color(r, g, b)

    def render(self, force: bool = False) -> np.ndarray:
        """
        Renders a full frame into self.pixels and returns it. When nothing
        changed since the last frame the cached buffer is returned as is.
        """
        if not (self.needs_render or force):
            return self.pixels

        width, height = self.width, self.height
        verbose = self.settings.verbose
        if verbose:
            print(f"Rendering {width}x{height}, "
                  f"{self.settings.samples_per_pixel} samples per pixel, "
                  f"max depth {self.settings.max_depth}")

        accumulation = self.accumulation
        # Internal rows run bottom-up; the buffer is written top row first.
        for j in range(height - 1, -1, -1):
            if verbose:
                print(f"\rScanlines remaining: {j} ", end="", file=sys.stderr, flush=True)
            row = height - 1 - j
            for i in range(width):
                color = self.sample_pixel(i, j)
                accumulation[row, i, 0] = color.x
                accumulation[row, i, 1] = color.y
                accumulation[row, i, 2] = color.z

        tone_map_kernel(accumulation, self.settings.samples_per_pixel, self.pixels)
        self.frame_number += 1
        self.needs_render = False
        if verbose:
            print("\nDone.", file=sys.stderr)
        return self.pixels

    def pixel_at(self, col: int, row: int):
        """
        RGBA tuple of the rendered pixel at column col, row row (top row is 0).
        """
        base = (row * self.width + col) * 4
        return tuple(int(c) for c in self.pixels[base:base + 4])

    def image_array(self) -> np.ndarray:
        """
        The pixel buffer viewed as a (height, width, 4) array.
        """
        return self.pixels.reshape(self.height, self.width, 4)
