"""
Orientation Frame & Decomposition
=================================
This module derives a device orientation (UP, FRONT, RIGHT) from two
accelerometer readings and splits any other reading along that orientation.

Why is this file needed?
------------------------
1. Frame Building: The two readings (gravity at rest, gravity plus a forward
   push) are generally not perpendicular. Two 90° rotations turn them into a
   right-handed triad.
2. Decomposition: Once the frame is known, any measured vector is reported as
   signed magnitudes (UP/DOWN, FRONT/BACK, RIGHT/LEFT).

Classes:
    Frame: The (up, front, right) reference directions.
    AxisComponents: Projection of a vector onto each frame axis.
    AxisMagnitudes: Signed lengths of those projections.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Dict, TYPE_CHECKING

import numpy as np

from accorientation.config import FRAME_ROTATION_DEG
from accorientation.model.errors import DegenerateGeometryError
from accorientation.model.rotation import project_onto, rotate_around, rotate_toward
from accorientation.model.vector import Vector3

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def _unit_or_zero(v: Vector3) -> Vector3:
    return Vector3.zero() if v.is_zero() else v.normalize()


@dataclass(frozen=True)
class Frame:
    """
    Orientation triad. FRONT and RIGHT are perpendicular to UP and to each other;
    the lengths are not normalized.
    """
    up: Vector3
    front: Vector3
    right: Vector3

    @classmethod
    def default(cls) -> Frame:
        """Frame aligned with the device axes: UP=Z, FRONT=Y, RIGHT=X."""
        return cls(
            up=Vector3(0.0, 0.0, 1.0),
            front=Vector3(0.0, 1.0, 0.0),
            right=Vector3(1.0, 0.0, 0.0),
        )

    def unit(self) -> Frame:
        return Frame(
            up=_unit_or_zero(self.up),
            front=_unit_or_zero(self.front),
            right=_unit_or_zero(self.right),
        )

    def to_array(self) -> npt.NDArray[np.float64]:
        """Rows are UP, FRONT, RIGHT."""
        return np.vstack([self.up.to_array(), self.front.to_array(), self.right.to_array()])


@dataclass(frozen=True)
class AxisComponents:
    """Parallel projections of one vector onto the UP, FRONT and RIGHT axes."""
    up: Vector3
    front: Vector3
    right: Vector3

    def unit(self) -> AxisComponents:
        return AxisComponents(
            up=_unit_or_zero(self.up),
            front=_unit_or_zero(self.front),
            right=_unit_or_zero(self.right),
        )

    def total(self) -> Vector3:
        return self.up + self.front + self.right


@dataclass(frozen=True)
class AxisMagnitudes:
    """
    Signed magnitude along each frame axis.
    Positive means along the axis (UP, FRONT, RIGHT), negative means against it
    (DOWN, BACK, LEFT).
    """
    up: float
    front: float
    right: float

    def directions(self) -> Dict[str, float]:
        return {
            "UP" if self.up >= 0 else "DOWN": abs(self.up),
            "FRONT" if self.front >= 0 else "BACK": abs(self.front),
            "RIGHT" if self.right >= 0 else "LEFT": abs(self.right),
        }

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.up, self.front, self.right], dtype=np.float64)


def build_frame(v_up: Vector3, v_up_front: Vector3) -> Frame:
    """
    Find the FRONT and RIGHT directions of a device.

    Args:
        v_up: Reading with the device at rest (gravity only).
        v_up_front: Reading while the device accelerates forward.

    Raises:
        DegenerateGeometryError: If either reading is zero or they are collinear.

    Returns:
        The orientation frame. `up` is `v_up` itself; `front` and `right`
        have the same length as `v_up`.
    """
    # FRONT lies in the (up, up_front) plane, RIGHT = rotate UP about FRONT
    front = rotate_toward(v_up, v_up_front, FRAME_ROTATION_DEG)
    right = rotate_around(v_up, front, FRAME_ROTATION_DEG)

    frame = Frame(up=v_up, front=front, right=right)
    logger.debug(f"Built frame: {frame}")
    return frame


def decompose(v: Vector3, frame: Frame) -> AxisComponents:
    """Project `v` onto each axis of `frame`."""
    return AxisComponents(
        up=project_onto(v, frame.up),
        front=project_onto(v, frame.front),
        right=project_onto(v, frame.right),
    )


def _signed(axis: Vector3, component: Vector3) -> float:
    mag = component.magnitude
    return -mag if axis.is_opposite(component) else mag


def magnitudes(v: Vector3, frame: Frame) -> AxisMagnitudes:
    """
    Signed magnitude of `v` along each axis of `frame`.

    Raises:
        DegenerateGeometryError: If an axis of `frame` has zero length.
    """
    components = decompose(v, frame)
    return AxisMagnitudes(
        up=_signed(frame.up, components.up),
        front=_signed(frame.front, components.front),
        right=_signed(frame.right, components.right),
    )


def magnitudes_array(
    samples: npt.ArrayLike,
    frame: Frame
) -> npt.NDArray[np.float64]:
    """
    Vectorized `magnitudes` for a batch of readings.

    Args:
        samples: Array of shape (N, 3) with one (x, y, z) reading per row.
        frame: The orientation to decompose against.

    Raises:
        ValueError: If `samples` is not of shape (N, 3).
        DegenerateGeometryError: If an axis of `frame` has zero length.

    Returns:
        Array of shape (N, 3) with columns UP, FRONT, RIGHT.
    """
    arr = np.asarray(samples, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"Expected samples of shape (N, 3), got {arr.shape}.")

    if frame.up.is_zero() or frame.front.is_zero() or frame.right.is_zero():
        raise DegenerateGeometryError(f"Frame {frame} has a zero-length axis.")

    # signed length of the projection is v·(a/|a|)
    return arr @ frame.unit().to_array().T
