"""
Orientation Plot
================
Draws an orientation frame and, optionally, a measured vector split along it,
together with a wireframe cube standing for the device body.
"""
from __future__ import annotations

from itertools import product
from typing import Optional, TYPE_CHECKING

import matplotlib.pyplot as plt

from accorientation.config import PlotConfig
from accorientation.model.orientation import Frame, decompose
from accorientation.model.vector import Vector3

if TYPE_CHECKING:
    from matplotlib.figure import Figure
    from mpl_toolkits.mplot3d.axes3d import Axes3D


FRAME_COLORS = {"UP": "b", "FRONT": "g", "RIGHT": "r"}


def frame_coordinates(v: Vector3, frame: Frame) -> Vector3:
    """
    Express `v` in the orthonormal basis (RIGHT, FRONT, UP) of `frame`.

    Raises:
        DegenerateGeometryError: If an axis of `frame` has zero length.
    """
    return Vector3(
        v.dot(frame.right.normalize()),
        v.dot(frame.front.normalize()),
        v.dot(frame.up.normalize()),
    )


def cube_edges(edge: float) -> list[tuple[Vector3, Vector3]]:
    """The 12 edges of an axis-aligned cube centred on the origin."""
    half = edge / 2.0
    corners = [Vector3(x, y, z) for x, y, z in product((-half, half), repeat=3)]
    # corners one coordinate apart share an edge
    return [
        (a, b) for i, a in enumerate(corners) for b in corners[i + 1:]
        if sum(1 for p, q in zip(a, b) if p != q) == 1
    ]


def _draw_arrow(ax: Axes3D, v: Vector3, color: str, label: str, linestyle: str = "-") -> None:
    ax.quiver(0.0, 0.0, 0.0, v.x, v.y, v.z, color=color, linestyle=linestyle, arrow_length_ratio=0.1)
    # Label slightly beyond the tip
    ax.text(v.x * 1.05, v.y * 1.05, v.z * 1.05, label, color=color, fontsize=12, fontweight='bold')


def _scaled(v: Vector3, unit_scale: bool) -> Vector3:
    if not unit_scale or v.is_zero():
        return v
    return v.normalize()


def plot_orientation(
    frame: Frame,
    vector: Optional[Vector3] = None,
    up_front: Optional[Vector3] = None,
    config: Optional[PlotConfig] = None,
    ax: Optional[Axes3D] = None,
    show: bool = False
) -> Figure:
    """
    Plot the frame axes, the up-front reading and a vector with its axis components.

    Args:
        frame: The orientation to draw.
        vector: Optional measured vector, decomposed along `frame`.
        up_front: Optional up-front reading used to build `frame`.
        config: Which elements to draw. Defaults to `PlotConfig()`.
        ax: Existing 3D axes to draw into. A new figure is created if None.
        show: Call `plt.show()` before returning.

    Returns:
        The matplotlib figure holding the plot.
    """
    config = config or PlotConfig()

    if ax is None:
        fig = plt.figure(figsize=(8, 8))
        ax = fig.add_subplot(111, projection='3d')
    else:
        fig = ax.figure

    basis = frame

    def to_view(v: Vector3) -> Vector3:
        return frame_coordinates(v, basis) if config.adjust_plot_view else v

    drawn: list[Vector3] = []

    components = None
    if config.plot_acceleration_and_components and vector is not None:
        components = decompose(vector, frame)
        if config.unit_scale:
            components = components.unit()
    # Cube edge follows the drawn frame axis length
    cube_edge = config.cube_size_ratio * (1.0 if config.unit_scale else frame.up.magnitude)
    if config.unit_scale:
        # Before plotting, all vectors become unit vectors, for better scaling
        frame = frame.unit()

    if config.plot_cube:
        for start, end in cube_edges(cube_edge):
            a, b = to_view(start), to_view(end)
            ax.plot([a.x, b.x], [a.y, b.y], [a.z, b.z], color='gray', lw=1)
            drawn.append(a)

    if config.plot_orientation:
        for label, axis in (("UP", frame.up), ("FRONT", frame.front), ("RIGHT", frame.right)):
            v = to_view(axis)
            _draw_arrow(ax, v, FRAME_COLORS[label], label)
            drawn.append(v)

    if config.plot_up_front and up_front is not None:
        v = to_view(_scaled(up_front, config.unit_scale))
        _draw_arrow(ax, v, "k", "UP+FRONT", linestyle="--")
        drawn.append(v)

    if components is not None:
        v = to_view(_scaled(vector, config.unit_scale))
        _draw_arrow(ax, v, "m", "ACC")
        drawn.append(v)
        for label, component in (("UP", components.up), ("FRONT", components.front), ("RIGHT", components.right)):
            c = to_view(component)
            _draw_arrow(ax, c, FRAME_COLORS[label], f"acc {label}", linestyle=":")
            drawn.append(c)

    lim = 1.1 * max([1.0] + [v.magnitude for v in drawn])
    ax.set_xlim([-lim, lim])
    ax.set_ylim([-lim, lim])
    ax.set_zlim([-lim, lim])
    if config.adjust_plot_view:
        ax.set_xlabel('RIGHT')
        ax.set_ylabel('FRONT')
        ax.set_zlabel('UP')
    else:
        ax.set_xlabel('X')
        ax.set_ylabel('Y')
        ax.set_zlabel('Z')
    ax.set_title('Device Orientation')

    if show:
        plt.show()
    return fig
