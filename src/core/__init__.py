from core.vector import Vector3, Point3, Color
from core.ray import Ray

__all__ = ["Vector3", "Point3", "Color", "Ray"]
