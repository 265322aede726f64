from __future__ import annotations

import math
from typing import Tuple

Vector3 = Tuple[float, float, float]


def sin_deg(angle_deg: float) -> float:
    """
    Sine of an angle given in degrees.

    The argument is reduced modulo 360 exactly (fmod) before the single
    degree->radian conversion, so large accumulated angles keep their
    precision the way a half-turn sinpi(x/180) would.
    """
    return math.sin(math.radians(math.fmod(angle_deg, 360.0)))


def cos_deg(angle_deg: float) -> float:
    """Cosine of an angle given in degrees (see sin_deg)."""
    return math.cos(math.radians(math.fmod(angle_deg, 360.0)))


def dot(a: Vector3, b: Vector3) -> float:
    return a[0]*b[0] + a[1]*b[1] + a[2]*b[2]


def sub(a: Vector3, b: Vector3) -> Vector3:
    return (a[0]-b[0], a[1]-b[1], a[2]-b[2])


def scale(a: Vector3, k: float) -> Vector3:
    return (a[0]*k, a[1]*k, a[2]*k)


def norm(a: Vector3) -> float:
    return math.sqrt(dot(a, a))


def orbital_plane_to_ecliptic(r_orb: Vector3, argp_deg: float, inc_deg: float, node_deg: float) -> Vector3:
    """
    Rotate an orbital-plane position into the ecliptic frame.

    3-2-3 Euler sequence by argument of perihelion, inclination and
    ascending-node longitude. Only the first two columns of the rotation
    are used because motion stays in the orbital plane (z_p = 0).

    Args:
        r_orb: (x_p, y_p, z_p) in the orbital plane (AU), z_p ignored
        argp_deg: argument of perihelion w (degrees)
        inc_deg: inclination I (degrees)
        node_deg: longitude of the ascending node (degrees)

    Returns:
        (x, y, z) in the ecliptic frame (AU)
    """
    xp, yp, _zp = r_orb

    cw, sw = cos_deg(argp_deg), sin_deg(argp_deg)
    ci, si = cos_deg(inc_deg), sin_deg(inc_deg)
    cn, sn = cos_deg(node_deg), sin_deg(node_deg)

    x = (cw * cn - sw * sn * ci) * xp + (-sw * cn - cw * sn * ci) * yp
    y = (cw * sn + sw * cn * ci) * xp + (-sw * sn + cw * cn * ci) * yp
    z = sw * si * xp + cw * si * yp
    return (x, y, z)
