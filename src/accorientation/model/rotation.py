from __future__ import annotations

import logging
from math import cos, sin, pi

from accorientation.config import DEGENERACY_TOLERANCE
from accorientation.model.errors import DegenerateGeometryError
from accorientation.model.vector import Vector3

logger = logging.getLogger(__name__)


def deg2rad(degrees: float) -> float:
    return degrees * pi / 180


def project_onto(v1: Vector3, v2: Vector3) -> Vector3:
    """
    Component of `v1` parallel to `v2`.

    Args:
        v1: The vector to project.
        v2: The direction to project onto. Its length does not matter.

    Raises:
        DegenerateGeometryError: If `v2` has zero length.

    Returns:
        (v1·v2 / v2·v2) * v2, evaluated as (v1·u) u with u = v2 / |v2|
        so that squaring large components cannot overflow.
    """
    if v2.is_zero():
        msg = f"Cannot project {v1} onto zero-length vector."
        logger.debug(msg)
        raise DegenerateGeometryError(msg)
    u = v2.normalize()
    return u * v1.dot(u)


def rotate_toward(
    v1: Vector3,
    v2: Vector3,
    angle_deg: float,
    *,
    eps: float = DEGENERACY_TOLERANCE
) -> Vector3:
    """
    Rotate `v1` by `angle_deg` inside the plane spanned by `v1` and `v2`, toward `v2`.

    The plane gets an orthonormal basis by Gram-Schmidt:
      e1 = v1 / |v1|
      e2 = (v2 - (v2·e1) e1) / |v2 - (v2·e1) e1|
    and the result is |v1| cos(θ) e1 + |v1| sin(θ) e2, so the length of `v1` is kept.

    Args:
        v1: The vector to rotate.
        v2: Any vector in the target direction; it only fixes the plane and the sense.
        angle_deg: Rotation angle in degrees.
        eps: Relative tolerance below which `v2` counts as parallel to `v1`.

    Raises:
        DegenerateGeometryError: If `v1` is zero, or `v1` and `v2` are parallel
            (or antiparallel, or `v2` is zero), so the plane is undefined.

    Returns:
        The rotated vector.
    """
    e1 = v1.normalize()

    u2 = v2 - e1 * v2.dot(e1)
    if u2.magnitude <= eps * v2.magnitude:
        msg = f"Vectors {v1} and {v2} are collinear; rotation plane is undefined."
        logger.debug(msg)
        raise DegenerateGeometryError(msg)
    e2 = u2.normalize()

    v1_mag = v1.magnitude
    radians = deg2rad(angle_deg)
    return e1 * (v1_mag * cos(radians)) + e2 * (v1_mag * sin(radians))


def rotate_around(
    v1: Vector3,
    axis: Vector3,
    angle_deg: float,
    *,
    eps: float = DEGENERACY_TOLERANCE
) -> Vector3:
    """
    Rotate `v1` about `axis` by `angle_deg` (right-hand rule).

    Notes:
        - `v1` is split into the part parallel to the axis, which is kept, and
          the perpendicular part, which turns inside the plane normal to the axis:
          v_rot = v_par + v_perp cos(θ) + |v_perp| (w / |w|) sin(θ),  w = axis × v_perp
        - The axis length does not matter.

    Raises:
        DegenerateGeometryError: If `axis` is zero, or `v1` is zero or parallel to `axis`.
    """
    parallel = project_onto(v1, axis)
    perpendicular = v1 - parallel

    perpendicular_mag = perpendicular.magnitude
    if perpendicular_mag <= eps * v1.magnitude:
        msg = f"Vector {v1} is parallel to rotation axis {axis}."
        logger.debug(msg)
        raise DegenerateGeometryError(msg)

    w = axis.normalize().cross(perpendicular).normalize()

    radians = deg2rad(angle_deg)
    return parallel + perpendicular * cos(radians) + w * (perpendicular_mag * sin(radians))
