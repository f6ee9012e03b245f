"""Pytest configuration for raytracer tests.

Shared fixtures: a seeded random generator and a few small scenes.
"""

import random

import pytest

from core.vector import Color, Point3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.lambertian import Lambertian


class SequenceRng:
    """Generator stand-in that replays fixed values.

    uniform(a, b) and random() both pop from the same queue, so a test can
    steer rejection samplers and the Schlick draw exactly.
    """

    def __init__(self, values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0)

    def uniform(self, a, b):
        return self.values.pop(0)


@pytest.fixture
def rng():
    """A seeded generator so that every test run draws the same samples."""
    return random.Random(42)


@pytest.fixture
def ground_material():
    return Lambertian(Color(0.3, 0.3, 0.3))


@pytest.fixture
def ground_world(ground_material):
    """A single huge sphere whose top touches y = 0."""
    return HittableList([Sphere(Point3(0, -1000, 0), 1000, ground_material)])
