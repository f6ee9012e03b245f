# materials/factory.py
import xml.etree.ElementTree as ET
from core.errors import SceneFormatError, UnsupportedMaterialError
from materials.material import Material
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.dielectric import Dielectric

MATERIAL_KINDS = {
    Lambertian.tag: Lambertian,
    Metal.tag: Metal,
    Dielectric.tag: Dielectric,
}

# Wrapper element whose first child is the actual material.
WRAPPER_TAG = "Material"


def material_from_xml(element: ET.Element) -> Material:
    """
    Builds a material from its XML element.

    Accepts either the material element itself (<Metal Fuzz=..>) or a
    <Material> wrapper holding it as first child.

    Raises:
        UnsupportedMaterialError: If the tag is not a known material kind.
        SceneFormatError: If the element is missing required data.
    """
    if element.tag == WRAPPER_TAG:
        children = list(element)
        if not children:
            raise SceneFormatError("<Material> element is empty")
        element = children[0]

    material_class = MATERIAL_KINDS.get(element.tag)
    if material_class is None:
        raise UnsupportedMaterialError(element.tag)
    return material_class.from_xml(element)


def material_to_xml(material: Material, wrapped: bool = False) -> ET.Element:
    element = material.to_xml()
    if not wrapped:
        return element
    wrapper = ET.Element(WRAPPER_TAG)
    wrapper.append(element)
    return wrapper
