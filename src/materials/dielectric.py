# src/materials/dielectric.py
import math
from typing import Tuple
import xml.etree.ElementTree as ET
from core.ray import Ray
from core.vector import Color
from core.utils import reflect, refract, schlick_reflectance
from geometry.hittable import HitRecord
from materials.material import Material, float_attribute


class Dielectric(Material):
    """
    Clear dielectric (glass, water). Chooses between reflection and
    refraction with Schlick's approximation and always scatters.
    """
    tag = "Dielectric"

    def __init__(self, ir: float):
        self.ir = ir  # Index of refraction

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Tuple[Color, Ray]:
        attenuation = Color(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Entering the material from outside or leaving it
        refraction_ratio = 1.0 / self.ir if rec.front_face else self.ir

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = refraction_ratio * sin_theta > 1.0

        if cannot_refract or schlick_reflectance(cos_theta, refraction_ratio) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, refraction_ratio)

        return attenuation, Ray(rec.p, direction, ray_in.time)

    def to_xml(self) -> ET.Element:
        return ET.Element(self.tag, Ir=repr(self.ir))

    @classmethod
    def from_xml(cls, element: ET.Element) -> "Dielectric":
        return cls(float_attribute(element, "Ir"))

    def __repr__(self) -> str:
        return f"Dielectric({self.ir})"
