# scene/presets.py
from core.vector import Color, Point3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.presets import DielectricPresets


def random_scene(rng) -> HittableList:
    """
    A large grey ground sphere covered in a grid of small random spheres,
    with three big feature spheres (glass, diffuse, metal) in the middle.
    """
    world = HittableList()

    ground_material = Lambertian(Color(0.5, 0.5, 0.5))
    world.add(Sphere(Point3(0, -1000, 0), 1000, ground_material))

    keep_clear = Point3(4, 0.2, 0)
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Point3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())

            if (center - keep_clear).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                # diffuse
                albedo = Color.random(rng) * Color.random(rng)
                sphere_material = Lambertian(albedo)
            elif choose_mat < 0.95:
                # metal
                albedo = Color.random(rng, 0.5, 1)
                fuzz = rng.uniform(0, 0.5)
                sphere_material = Metal(albedo, fuzz)
            else:
                # glass
                sphere_material = DielectricPresets.glass()
            world.add(Sphere(center, 0.2, sphere_material))

    world.add(Sphere(Point3(0, 1, 0), 1.0, DielectricPresets.glass()))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Point3(4, 1, 0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))

    return world


def three_spheres_scene() -> HittableList:
    """
    Diffuse, hollow glass and metal spheres side by side on a yellow ground.
    Best viewed from (-2, 2, 1) towards (0, 0, -1).
    """
    material_ground = Lambertian(Color(0.8, 0.8, 0.0))
    material_center = Lambertian(Color(0.1, 0.2, 0.5))
    material_left = DielectricPresets.glass()
    material_right = Metal(Color(0.8, 0.6, 0.2), 0.0)

    return HittableList([
        Sphere(Point3(0.0, -100.5, -1.0), 100.0, material_ground),
        Sphere(Point3(0.0, 0.0, -1.0), 0.5, material_center),
        Sphere(Point3(-1.0, 0.0, -1.0), 0.5, material_left),
        # Negative radius: same glass, inward normals, makes the sphere hollow
        Sphere(Point3(-1.0, 0.0, -1.0), -0.45, material_left),
        Sphere(Point3(1.0, 0.0, -1.0), 0.5, material_right),
    ])
