# core/utils.py
import math
from core.vector import Vector3

# Upper bound on rejection-sampling draws before giving up.
MAX_REJECTION_ATTEMPTS = 100


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def clamp(x: float, low: float, high: float) -> float:
    if x < low:
        return low
    if x > high:
        return high
    return x


def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    Falls back to the origin if no candidate is accepted.
    """
    for _ in range(MAX_REJECTION_ATTEMPTS):
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.length_squared() < 1.0:
            return p
    return Vector3(0.0, 0.0, 0.0)


def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    p = random_in_unit_sphere(rng)
    if p.near_zero():
        return Vector3(0.0, 1.0, 0.0)
    return p.normalize()


def random_in_hemisphere(normal: Vector3, rng) -> Vector3:
    """
    Returns a random point in the unit ball, flipped onto the side of normal.
    """
    in_unit_sphere = random_in_unit_sphere(rng)
    if in_unit_sphere.dot(normal) > 0.0:
        return in_unit_sphere
    return -in_unit_sphere


def random_in_unit_disk(rng) -> Vector3:
    """
    Returns a random point in the unit disk on the z=0 plane (lens sampling).
    """
    for _ in range(MAX_REJECTION_ATTEMPTS):
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0.0)
        if p.length_squared() < 1.0:
            return p
    return Vector3(0.0, 0.0, 0.0)


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with unit normal n
    using the vector form of Snell's law.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel


def schlick_reflectance(cosine: float, ref_idx: float) -> float:
    """
    Schlick's approximation of the Fresnel reflectance.
    """
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow(1.0 - cosine, 5)
