# materials/material.py
from typing import Optional, Tuple
import xml.etree.ElementTree as ET
from core.errors import SceneFormatError
from core.ray import Ray
from core.vector import Color
from geometry.hittable import HitRecord


class Material:
    """
    Abstract material class. Subclasses must implement scatter() and the
    XML round trip used by scene files.
    """
    # Element name used when the material is written to a scene file.
    tag = None

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Color, Ray]]:
        """
        Computes the attenuation and the scattered ray.
        Returns a tuple (attenuation, scattered_ray) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def to_xml(self) -> ET.Element:
        raise NotImplementedError("to_xml() must be implemented by subclasses.")

    @classmethod
    def from_xml(cls, element: ET.Element) -> "Material":
        raise NotImplementedError("from_xml() must be implemented by subclasses.")


def float_attribute(element: ET.Element, name: str) -> float:
    """
    Reads a numeric attribute, raising SceneFormatError if absent or malformed.
    """
    value = element.get(name)
    if value is None:
        raise SceneFormatError(f"<{element.tag}> is missing attribute {name!r}")
    try:
        return float(value)
    except ValueError:
        raise SceneFormatError(
            f"<{element.tag}> attribute {name!r} is not a number: {value!r}") from None


def color_to_xml(color: Color) -> ET.Element:
    return ET.Element("Color", r=repr(color.x), g=repr(color.y), b=repr(color.z))


def color_from_xml(parent: ET.Element) -> Color:
    element = parent.find("Color")
    if element is None:
        raise SceneFormatError(f"<{parent.tag}> has no <Color> child")
    return Color(float_attribute(element, "r"),
                 float_attribute(element, "g"),
                 float_attribute(element, "b"))
