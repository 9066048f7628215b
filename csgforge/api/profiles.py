"""Solids built from 2D boundaries: extrusions and lathe revolutions.

Every boundary (explicit points, path segments or a `Sketch` callback) is
treated as a closed polygon: the last point joins back to the first.
"""
import numpy as np

from . import mesh as _mesh
from .core import Solid, DEFAULT_COLOR, is_finite
from .primitives import FULL_TURN, _check_angle
from .sketch import Sketch, trace_path


def _check_height(label, height):
    if not is_finite(height) or height <= 0:
        raise ValueError(f"{label} height must be positive and finite (got {height})")


def _sketch_points(builder) -> np.ndarray:
    sketch = Sketch()
    builder(sketch)
    return sketch.points()


def _extruded(height, points, color) -> Solid:
    _check_height("Profile prism", height)
    return Solid(_mesh.extrude(points, float(height)), color)


def _revolved(points, angle, color) -> Solid:
    _check_angle("Revolution", angle)
    return Solid(_mesh.lathe(points, float(angle)), color)


# --- Extrusion ---

def profile_prism(height, builder, color=DEFAULT_COLOR) -> Solid:
    """
    Extrudes a profile drawn with a `Sketch` along the Y axis.

    Args:
        height (float): Extrusion distance, centered on the origin.
        builder (callable): Receives a fresh `Sketch` and draws the outline on it.
    """
    return _extruded(height, _sketch_points(builder), color)


def profile_prism_from_points(height, points, color=DEFAULT_COLOR) -> Solid:
    """Extrudes a polygon given as (x, z) points along the Y axis."""
    if len(points) < 3:
        raise ValueError("profile_prism_from_points requires at least 3 points")
    return _extruded(height, np.asarray(points, dtype=float), color)


def profile_prism_from_path(height, segments, color=DEFAULT_COLOR) -> Solid:
    """Extrudes the outline traced by `straight`/`curve` segments along the Y axis."""
    if not segments:
        raise ValueError("profile_prism_from_path requires at least one segment")
    return _extruded(height, trace_path(segments), color)


# --- Revolution ---

def revolution_solid(builder, angle=FULL_TURN, color=DEFAULT_COLOR) -> Solid:
    """
    Revolves a `Sketch` profile around the Y axis. Sketch x is the radius,
    sketch y the height.
    """
    return _revolved(_sketch_points(builder), angle, color)


def revolution_solid_from_points(points, angle=FULL_TURN, color=DEFAULT_COLOR) -> Solid:
    """
    Revolves a (radius, height) polygon around the Y axis.

    Args:
        points: At least 2 points; radii must be non-negative.
        angle (float, optional): Sweep in degrees. Below 360 the ends are capped.
    """
    if len(points) < 2:
        raise ValueError("revolution_solid_from_points requires at least 2 points")
    return _revolved(np.asarray(points, dtype=float), angle, color)


def revolution_solid_from_path(segments, angle=FULL_TURN, color=DEFAULT_COLOR) -> Solid:
    if not segments:
        raise ValueError("revolution_solid_from_path requires at least one segment")
    return _revolved(trace_path(segments), angle, color)
