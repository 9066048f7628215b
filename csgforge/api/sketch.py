import numpy as np
from dataclasses import dataclass
from typing import Union

from .core import is_finite

# Arc tessellation: one segment per 7.5 degrees of turn, never fewer than 2.
ARC_DEGREES_PER_SEGMENT = 7.5
ARC_MIN_SEGMENTS = 2
CURVE_DIVISIONS = 12


@dataclass(frozen=True)
class Straight:
    """Moves the cursor `length` units along the current heading."""
    length: float


@dataclass(frozen=True)
class Curve:
    """
    Turns the heading by `angle` degrees along an arc of `radius`.

    A positive angle turns right (clockwise), a negative one turns left. A
    zero radius turns in place and leaves a sharp corner.
    """
    radius: float
    angle: float


PathSegment = Union[Straight, Curve]


def straight(length) -> Straight:
    return Straight(length)


def curve(radius, angle) -> Curve:
    return Curve(radius, angle)


def arc_segments(angle) -> int:
    return max(ARC_MIN_SEGMENTS, int(np.ceil(abs(angle) / ARC_DEGREES_PER_SEGMENT)))


def trace_path(segments) -> np.ndarray:
    """
    Walks a list of path segments and returns the boundary points it visits.

    The cursor starts at (0, 0) facing +X, and that start point is the first
    row of the result. The path is not closed; consumers join the last point
    back to the first.

    Args:
        segments: Sequence of `Straight` and `Curve` values.

    Returns:
        np.ndarray: (N, 2) array of points.
    """
    x, y, heading = 0.0, 0.0, 0.0
    points = [(x, y)]

    for index, segment in enumerate(segments):
        if isinstance(segment, Straight):
            if not is_finite(segment.length) or segment.length <= 0:
                raise ValueError(f"Invalid straight segment at index {index}: length must be positive and finite (got {segment.length})")
            x += segment.length * np.cos(heading)
            y += segment.length * np.sin(heading)
            points.append((x, y))

        elif isinstance(segment, Curve):
            if not is_finite(segment.radius) or segment.radius < 0:
                raise ValueError(f"Invalid curve segment at index {index}: radius must be finite and non-negative (got {segment.radius})")
            if not is_finite(segment.angle):
                raise ValueError(f"Invalid curve segment at index {index}: angle must be finite (got {segment.angle})")
            turn = np.radians(float(segment.angle))
            if segment.angle == 0:
                continue
            if segment.radius == 0:
                heading -= turn
                continue

            r = float(segment.radius)
            side = 1.0 if turn > 0 else -1.0
            # The center sits to the right of the heading for right turns.
            cx = x + side * r * np.sin(heading)
            cy = y - side * r * np.cos(heading)
            start = np.arctan2(y - cy, x - cx)
            n = arc_segments(segment.angle)
            for k in range(1, n + 1):
                phi = start - turn * k / n
                points.append((cx + r * np.cos(phi), cy + r * np.sin(phi)))
            x, y = points[-1]
            heading -= turn

        else:
            raise TypeError(f"Unknown path segment at index {index}: {segment!r}")

    return np.array(points, dtype=float)


class Sketch:
    """
    A builder for 2D profiles using a pen-style interface.

    The pen moves sequentially (move_to, line_to, curve_to, arc_to, follow)
    and every call records boundary points. The resulting outline is treated
    as one closed polygon by the profile builders, so an explicit `close()`
    is optional.
    """

    def __init__(self, start=(0.0, 0.0)):
        """
        Starts a new sketch.

        Args:
            start (tuple): The starting (x, y) coordinates of the pen.
        """
        self._current_pos = np.array(start, dtype=float)
        self._start_pos = self._current_pos.copy()
        self._points = [self._current_pos.copy()]

    @property
    def position(self) -> np.ndarray:
        return self._current_pos.copy()

    def _add(self, point):
        point = np.array(point, dtype=float)
        if not np.allclose(point, self._current_pos):
            self._points.append(point)
        self._current_pos = point

    def move_to(self, x, y):
        """
        Moves the pen without drawing. Only valid before anything is drawn,
        since a sketch holds a single contour.
        """
        if len(self._points) > 1:
            raise ValueError("move_to() is only allowed before drawing; a sketch holds one contour.")
        self._current_pos = np.array([x, y], dtype=float)
        self._start_pos = self._current_pos.copy()
        self._points = [self._current_pos.copy()]
        return self

    def line_to(self, x, y):
        """Draws a straight line from the current position to (x, y)."""
        self._add((x, y))
        return self

    def curve_to(self, x, y, control):
        """
        Draws a Quadratic Bezier curve from current position to (x, y).

        Args:
            x (float): Target X coordinate (end point).
            y (float): Target Y coordinate (end point).
            control (tuple): The (cx, cy) control point influencing the curve.
        """
        p0 = self._current_pos.copy()
        p1 = np.array(control, dtype=float)
        p2 = np.array([x, y], dtype=float)
        for t in np.linspace(0.0, 1.0, CURVE_DIVISIONS + 1)[1:]:
            self._add((1 - t) ** 2 * p0 + 2 * (1 - t) * t * p1 + t ** 2 * p2)
        return self

    def arc_to(self, cx, cy, radius, start_angle, end_angle, clockwise=False):
        """
        Draws a circular arc around an absolute center. Angles are in degrees.
        If the arc does not begin at the pen, a straight line joins them.
        """
        sweep = end_angle - start_angle
        if clockwise and sweep > 0:
            sweep -= 360.0
        elif not clockwise and sweep < 0:
            sweep += 360.0
        n = arc_segments(sweep)
        for k in range(n + 1):
            phi = np.radians(start_angle + sweep * k / n)
            self._add((cx + radius * np.cos(phi), cy + radius * np.sin(phi)))
        return self

    def follow(self, segments):
        """Traces path segments starting from the pen, initially facing +X."""
        origin = self._current_pos.copy()
        for point in trace_path(segments)[1:]:
            self._add(origin + point)
        return self

    def close(self):
        """Returns the pen to the start of the contour."""
        self._add(self._start_pos)
        return self

    def points(self) -> np.ndarray:
        """The recorded boundary as an (N, 2) array."""
        return np.array(self._points, dtype=float)
