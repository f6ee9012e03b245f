from materials.material import Material
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.dielectric import Dielectric
from materials.factory import material_from_xml, material_to_xml

__all__ = ["Material", "Lambertian", "Metal", "Dielectric", "material_from_xml", "material_to_xml"]
