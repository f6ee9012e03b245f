# materials/metal.py
from typing import Optional, Tuple
import xml.etree.ElementTree as ET
from core.ray import Ray
from core.vector import Color
from core.utils import clamp, reflect, random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material, color_from_xml, color_to_xml, float_attribute


class Metal(Material):
    """
    Metal material with reflective properties. fuzz is clamped to [0, 1];
    0 is a perfect mirror.
    """
    tag = "Metal"

    def __init__(self, albedo: Color, fuzz: float = 0.0):
        self.albedo = albedo
        self.fuzz = clamp(fuzz, 0.0, 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Color, Ray]]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        scattered = Ray(rec.p, reflected + random_in_unit_sphere(rng) * self.fuzz, ray_in.time)

        if scattered.direction.dot(rec.normal) > 0:
            return self.albedo, scattered

        return None  # Absorb the ray if it is scattered below the surface

    def to_xml(self) -> ET.Element:
        element = ET.Element(self.tag, Fuzz=repr(self.fuzz))
        element.append(color_to_xml(self.albedo))
        return element

    @classmethod
    def from_xml(cls, element: ET.Element) -> "Metal":
        return cls(color_from_xml(element), float_attribute(element, "Fuzz"))

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"
