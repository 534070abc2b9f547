"""
Configuration & Global Constants
================================
This module serves as the central registry for numerical constants, sample
readings and plot options.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (tolerances, angles) scattered
   throughout the kernel.
2. Reproducibility: The sample readings used by the command line demo live in
   one place, so the demo and the regression tests agree.

Exports:
    DEGENERACY_TOLERANCE (float): Relative length below which a vector counts as zero.
    FRAME_ROTATION_DEG (float): Angle used to derive FRONT and RIGHT from UP.
    SAMPLE_UP, SAMPLE_UP_FRONT, SAMPLE_ACCELERATION (Vector3): Demo readings.
    PlotConfig: Which vectors the orientation plot draws.
"""
from dataclasses import dataclass

from accorientation.model.vector import Vector3


# Global Constants
DEGENERACY_TOLERANCE: float = 1e-12
FRAME_ROTATION_DEG: float = 90.0

# Device at rest (gravity only)
SAMPLE_UP: Vector3 = Vector3(-16.0, -15.0, -975.0)
# Device accelerating forward (gravity + forward acceleration)
SAMPLE_UP_FRONT: Vector3 = Vector3(-185.0, 300.0, -910.0)
# Any measured acceleration
SAMPLE_ACCELERATION: Vector3 = Vector3(-500.0, 600.0, 400.0)


@dataclass
class PlotConfig:
    plot_orientation: bool = True
    plot_up_front: bool = False
    plot_acceleration_and_components: bool = True
    # Draw every vector with unit length, for a better visual comparison
    unit_scale: bool = True
    # Wireframe cube of the device body, axis-aligned in device coordinates
    plot_cube: bool = True
    # Cube edge relative to the frame axis length
    cube_size_ratio: float = 1.0
    # Draw in (RIGHT, FRONT, UP) coordinates so the orientation lines up with X, Y, Z
    adjust_plot_view: bool = True
