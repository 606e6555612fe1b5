from __future__ import annotations

import math
from typing import Tuple

Vector3 = Tuple[float, float, float]


def rot3(angle_rad: float, v: Vector3) -> Vector3:
    c = math.cos(angle_rad)
    s = math.sin(angle_rad)
    x, y, z = v
    return (c * x - s * y, s * x + c * y, z)


def rot1(angle_rad: float, v: Vector3) -> Vector3:
    c = math.cos(angle_rad)
    s = math.sin(angle_rad)
    x, y, z = v
    return (x, c * y - s * z, s * y + c * z)


def dot(a: Vector3, b: Vector3) -> float:
    return a[0]*b[0] + a[1]*b[1] + a[2]*b[2]


def sub(a: Vector3, b: Vector3) -> Vector3:
    return (a[0]-b[0], a[1]-b[1], a[2]-b[2])


def norm(a: Vector3) -> float:
    return math.sqrt(dot(a, a))


def orbital_plane_xy(a: float, e: float, E_rad: float) -> Tuple[float, float]:
    """
    Position in the orbital plane, origin at the focus, +x towards perihelion.
    """
    x = a * (math.cos(E_rad) - e)
    y = a * math.sqrt(1.0 - e * e) * math.sin(E_rad)
    return x, y


def to_heliocentric(
    a: float,
    e: float,
    inc_rad: float,
    argp_rad: float,
    long_node_rad: float,
    E_rad: float,
) -> Vector3:
    """
    Heliocentric position in scene axes from (a, e, I, w, node) and the
    eccentric anomaly E.

    Scene axes are ecliptic axes permuted so +y points to ecliptic north:
        scene x = ecliptic Y, scene y = ecliptic Z, scene z = ecliptic X
    """
    x_op, y_op = orbital_plane_xy(a, e, E_rad)

    # Radius and true anomaly
    r = math.sqrt(x_op * x_op + y_op * y_op)
    v = math.atan2(y_op, x_op)

    u = v + argp_rad
    cos_u = math.cos(u)
    sin_u = math.sin(u)
    cos_node = math.cos(long_node_rad)
    sin_node = math.sin(long_node_rad)
    cos_i = math.cos(inc_rad)

    z = r * (cos_node * cos_u - sin_node * sin_u * cos_i)
    y = r * (sin_u * math.sin(inc_rad))
    x = r * (sin_node * cos_u + cos_node * sin_u * cos_i)
    return (x, y, z)


def perifocal_to_ecliptic(r_pqw: Vector3, long_node_rad: float, inc_rad: float, argp_rad: float) -> Vector3:
    """
    Rotate a perifocal (PQW) vector into the heliocentric ecliptic frame.

    r_ecl = R3(node) * R1(inc) * R3(argp) * r_pqw
    """
    # Applied right to left: argument of perihelion, inclination, node
    r_temp = rot3(argp_rad, r_pqw)
    r_temp = rot1(inc_rad, r_temp)
    return rot3(long_node_rad, r_temp)


def ecliptic_to_scene(r_ecl: Vector3) -> Vector3:
    """Ecliptic (X, Y, Z) -> scene (Y, Z, X)."""
    x, y, z = r_ecl
    return (y, z, x)


def scene_to_ecliptic(r_scene: Vector3) -> Vector3:
    """Scene (x, y, z) -> ecliptic (z, x, y)."""
    x, y, z = r_scene
    return (z, x, y)
