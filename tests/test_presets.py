"""Tests for the preset scenes and material presets."""

import random

from core.vector import Point3
from materials.dielectric import Dielectric
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.presets import DielectricPresets, MetalPresets
from scene.presets import random_scene, three_spheres_scene


class TestRandomScene:
    def test_ground_and_feature_spheres(self, rng):
        world = random_scene(rng)
        objects = list(world)
        ground = objects[0]
        assert ground.center == Point3(0, -1000, 0)
        assert ground.radius == 1000
        assert isinstance(ground.material, Lambertian)

        glass, diffuse, metal = objects[-3:]
        assert isinstance(glass.material, Dielectric) and glass.material.ir == 1.5
        assert isinstance(diffuse.material, Lambertian)
        assert isinstance(metal.material, Metal) and metal.material.fuzz == 0.0

    def test_small_spheres(self, rng):
        objects = list(random_scene(rng))[1:-3]
        # 22 x 22 grid minus the few cells too close to the metal sphere
        assert 400 < len(objects) <= 484
        keep_clear = Point3(4, 0.2, 0)
        for sphere in objects:
            assert sphere.radius == 0.2
            assert sphere.center.y == 0.2
            assert (sphere.center - keep_clear).length() > 0.9
            material = sphere.material
            if isinstance(material, Metal):
                assert 0.0 <= material.fuzz <= 0.5
                assert all(0.5 <= c <= 1.0 for c in material.albedo)

    def test_same_seed_same_scene(self):
        a = [s.center for s in random_scene(random.Random(5))]
        b = [s.center for s in random_scene(random.Random(5))]
        assert a == b


class TestThreeSpheres:
    def test_layout(self):
        objects = list(three_spheres_scene())
        assert len(objects) == 5
        # The hollow glass sphere shares its material with the outer shell
        assert objects[2].material is objects[3].material
        assert objects[3].radius < 0
        assert objects[2].material.ir == DielectricPresets.glass().ir


class TestMaterialPresets:
    def test_presets(self):
        assert isinstance(MetalPresets.gold(), Metal)
        assert MetalPresets.chrome().fuzz == 0.0
        assert DielectricPresets.glass().ir == 1.5
        assert DielectricPresets.water().ir == 1.33
        assert DielectricPresets.diamond().ir == 2.42
        assert MetalPresets.brushed_metal().fuzz == 0.3
