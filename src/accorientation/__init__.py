"""
Accelerometer Orientation Kernel
================================
Builds an (UP, FRONT, RIGHT) frame from two accelerometer readings and splits
any reading into signed magnitudes along that frame.
"""
from accorientation.model.errors import DegenerateGeometryError
from accorientation.model.vector import Vector3
from accorientation.model.orientation import (
    AxisComponents,
    AxisMagnitudes,
    Frame,
    build_frame,
    decompose,
    magnitudes,
    magnitudes_array,
)

__all__ = [
    "AxisComponents",
    "AxisMagnitudes",
    "DegenerateGeometryError",
    "Frame",
    "Vector3",
    "build_frame",
    "decompose",
    "magnitudes",
    "magnitudes_array",
]
