"""
Vector Primitives for the orientation kernel.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, TYPE_CHECKING
import numpy as np
import math

from accorientation.model.errors import DegenerateGeometryError

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector3:
    """
    A vector in 3D space representing direction and magnitude.
    Units and coordinate convention are whatever the measuring device uses.
    """
    x: float
    y: float
    z: float

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector3:
        if scalar == 0.0:
            raise DegenerateGeometryError("Cannot divide a vector by zero.")
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    @property
    def magnitude(self) -> float:
        # exact near the float limits, where squaring would overflow or underflow
        return math.hypot(self.x, self.y, self.z)

    def normalize(self) -> Vector3:
        """
        Unit vector in the same direction.

        Raises:
            DegenerateGeometryError: If the vector has zero length.
        """
        mag = self.magnitude
        if mag == 0.0:
            raise DegenerateGeometryError(f"Cannot normalize zero-length vector {self}.")
        return self / mag

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        # right-hand rule
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def is_opposite(self, other: Vector3) -> bool:
        """True when the two vectors are more than 90° apart (negative dot product)."""
        return self.dot(other) < 0

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0 and self.z == 0.0

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, values: npt.ArrayLike) -> Vector3:
        arr = np.asarray(values, dtype=np.float64).reshape(-1)
        if arr.shape != (3,):
            raise ValueError(f"Expected 3 components, got {arr.size}.")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    @classmethod
    def zero(cls) -> Vector3:
        return cls(0.0, 0.0, 0.0)
