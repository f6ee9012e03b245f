# materials/lambertian.py
from typing import Tuple
import xml.etree.ElementTree as ET
from core.ray import Ray
from core.vector import Color
from core.utils import random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material, color_from_xml, color_to_xml


class Lambertian(Material):
    """
    Lambertian diffuse material. Scatters along normal + random unit vector,
    which approximates a cosine distribution; it never absorbs.
    """
    tag = "Lambertian"

    def __init__(self, albedo: Color):
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Tuple[Color, Ray]:
        scatter_direction = rec.normal + random_unit_vector(rng)

        # If scatter_direction is degenerate, just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        scattered = Ray(rec.p, scatter_direction, ray_in.time)
        return self.albedo, scattered

    def to_xml(self) -> ET.Element:
        element = ET.Element(self.tag)
        element.append(color_to_xml(self.albedo))
        return element

    @classmethod
    def from_xml(cls, element: ET.Element) -> "Lambertian":
        return cls(color_from_xml(element))

    def __repr__(self) -> str:
        return f"Lambertian({self.albedo!r})"
