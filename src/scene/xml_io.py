# scene/xml_io.py
"""
Reading and writing scenes as XML documents:

    <Scene>
      <Sphere radius="0.5">
        <Center x="0" y="0" z="-1"/>
        <Material><Lambertian><Color r="0.1" g="0.2" b="0.5"/></Lambertian></Material>
      </Sphere>
    </Scene>

Loading is all or nothing: any bad sphere or material aborts the load.
"""
import xml.etree.ElementTree as ET
from core.errors import SceneFormatError
from core.vector import Point3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.factory import material_from_xml, material_to_xml
from materials.material import float_attribute

SCENE_TAG = "Scene"
SPHERE_TAG = "Sphere"


def sphere_to_xml(sphere: Sphere) -> ET.Element:
    element = ET.Element(SPHERE_TAG, radius=repr(sphere.radius))
    c = sphere.center
    ET.SubElement(element, "Center", x=repr(c.x), y=repr(c.y), z=repr(c.z))
    element.append(material_to_xml(sphere.material, wrapped=True))
    return element


def sphere_from_xml(element: ET.Element) -> Sphere:
    center = element.find("Center")
    if center is None:
        raise SceneFormatError("<Sphere> has no <Center> child")
    material = element.find("Material")
    if material is None:
        raise SceneFormatError("<Sphere> has no <Material> child")
    return Sphere(Point3(float_attribute(center, "x"),
                         float_attribute(center, "y"),
                         float_attribute(center, "z")),
                  float_attribute(element, "radius"),
                  material_from_xml(material))


def scene_to_xml(world: HittableList) -> ET.Element:
    root = ET.Element(SCENE_TAG)
    for obj in world:
        if not isinstance(obj, Sphere):
            raise TypeError(f"Cannot serialize {type(obj).__name__} to a scene file")
        root.append(sphere_to_xml(obj))
    return root


def scene_from_xml(root: ET.Element) -> HittableList:
    if root.tag != SCENE_TAG:
        raise SceneFormatError(f"Expected <{SCENE_TAG}> root element, got <{root.tag}>")
    world = HittableList()
    for element in root:
        if element.tag != SPHERE_TAG:
            raise SceneFormatError(f"Unexpected element <{element.tag}> in scene")
        world.add(sphere_from_xml(element))
    return world


def save_scene(world: HittableList, path: str):
    tree = ET.ElementTree(scene_to_xml(world))
    ET.indent(tree)
    tree.write(path, encoding="utf-8", xml_declaration=True)


def load_scene(path: str) -> HittableList:
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as e:
        raise SceneFormatError(f"Cannot parse scene file {path}: {e}") from e
    return scene_from_xml(root)
