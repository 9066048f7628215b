import numpy as np
import trimesh
from abc import ABC, abstractmethod

from . import mesh as _mesh
from .core import Solid, DEFAULT_COLOR, is_finite
from .engine import evaluate, SUBTRACTION

# Round primitives get floor(radius * 8) segments, clamped to [16, 48].
SEGMENTS_PER_UNIT = 8
MIN_ROUND_SEGMENTS = 16
MAX_ROUND_SEGMENTS = 48

# The removed wedge gets one arc segment per 15 degrees, never fewer than 8.
WEDGE_DEGREES_PER_SEGMENT = 15.0
WEDGE_MIN_SEGMENTS = 8
FULL_TURN = 360.0


def round_segments(radius) -> int:
    """Deterministic tessellation density for a round shape of this radius."""
    return int(np.clip(np.floor(radius * SEGMENTS_PER_UNIT), MIN_ROUND_SEGMENTS, MAX_ROUND_SEGMENTS))


def _check_dimensions(label, **dims):
    shown = ', '.join(f"{name}: {value}" for name, value in dims.items())
    if not all(is_finite(v) for v in dims.values()):
        raise ValueError(f"{label} dimensions must be finite (got {shown})")
    if any(v <= 0 for v in dims.values()):
        raise ValueError(f"{label} dimensions must be positive (got {shown})")


def _check_top_radius(label, top_radius):
    if top_radius is None:
        return
    if not is_finite(top_radius):
        raise ValueError(f"{label} top_radius must be finite (got {top_radius})")
    if top_radius < 0:
        raise ValueError(f"{label} top_radius must be non-negative (got {top_radius})")


def _check_angle(label, angle):
    if not is_finite(angle) or angle <= 0:
        raise ValueError(f"{label} angle must be a finite value in (0, 360] degrees (got {angle})")


def _check_segments(label, segments):
    if segments is None:
        return
    if isinstance(segments, bool) or not isinstance(segments, (int, np.integer)) or segments < 3:
        raise ValueError(f"{label} segments must be an integer >= 3 (got {segments})")


def wedge_profile(angle, radius) -> np.ndarray:
    """
    2D outline of the pie slice covering [angle, 360) degrees, reaching out
    to twice `radius` so it fully contains the shape it cuts.
    """
    removed = FULL_TURN - angle
    n = max(WEDGE_MIN_SEGMENTS, int(np.ceil(removed / WEDGE_DEGREES_PER_SEGMENT)))
    reach = 2.0 * radius
    phis = np.radians(np.linspace(angle, FULL_TURN, n + 1))
    arc = np.column_stack([reach * np.cos(phis), reach * np.sin(phis)])
    return np.vstack([[0.0, 0.0], arc, [0.0, 0.0]])


class Primitive(ABC):
    """
    A validated description of one canonical shape centered at the origin.

    Subclasses validate their parameters on construction and know how to
    build their full 360 degree mesh. `build()` turns the description into
    a Solid; round variants cut away a wedge when their sweep angle is
    below a full turn.
    """

    angle = FULL_TURN

    def __init__(self, color: str = DEFAULT_COLOR):
        self.color = color

    @abstractmethod
    def to_mesh(self) -> trimesh.Trimesh:
        """Builds the full-turn mesh."""
        raise NotImplementedError

    @property
    def is_partial(self) -> bool:
        return self.angle < FULL_TURN

    def build(self) -> Solid:
        return Solid(self.to_mesh(), self.color)


class RoundPrimitive(Primitive):
    """A shape swept around Y, which a partial angle can cut."""

    @abstractmethod
    def cut_extent(self):
        """(radius, height) that a wedge must cover to cut this shape."""
        raise NotImplementedError

    def build(self) -> Solid:
        full = self.to_mesh()
        if not self.is_partial:
            return Solid(full, self.color)
        radius, height = self.cut_extent()
        # Extruded along Y and centered, like every round primitive.
        wedge = _mesh.extrude(wedge_profile(self.angle, radius), 2.0 * max(height, 2.0 * radius))
        return Solid(evaluate(full, wedge, SUBTRACTION), self.color)


class Box(Primitive):
    def __init__(self, width, height, depth, color=DEFAULT_COLOR):
        super().__init__(color)
        _check_dimensions("Cube", width=width, height=height, depth=depth)
        self.width, self.height, self.depth = float(width), float(height), float(depth)

    def to_mesh(self):
        return _mesh.box(self.width, self.height, self.depth)


class Cylinder(RoundPrimitive):
    """Cylinder along Y, optionally tapering to a different top radius."""

    label = "Cylinder"

    def __init__(self, radius, height, top_radius=None, angle=FULL_TURN, segments=None, color=DEFAULT_COLOR):
        super().__init__(color)
        _check_dimensions(self.label, radius=radius, height=height)
        _check_top_radius(self.label, top_radius)
        _check_angle(self.label, angle)
        _check_segments(self.label, segments)
        self.radius = float(radius)
        self.height = float(height)
        self.top_radius = self.radius if top_radius is None else float(top_radius)
        self.angle = float(angle)
        self.segments = segments if segments is not None else round_segments(max(self.radius, self.top_radius))

    def profile(self) -> np.ndarray:
        h = self.height / 2.0
        return np.array([[0.0, -h], [self.radius, -h], [self.top_radius, h], [0.0, h]])

    def to_mesh(self):
        return _mesh.lathe(self.profile(), FULL_TURN, self.segments)

    def cut_extent(self):
        return max(self.radius, self.top_radius), self.height


class Cone(Cylinder):
    label = "Cone"

    def __init__(self, radius, height, angle=FULL_TURN, segments=None, color=DEFAULT_COLOR):
        super().__init__(radius, height, top_radius=0.0, angle=angle, segments=segments, color=color)


class Prism(Cylinder):
    """Regular n-gon prism along Y. The first corner sits on +X."""

    label = "Prism"

    def __init__(self, sides, radius, height, top_radius=None, angle=FULL_TURN, color=DEFAULT_COLOR):
        if isinstance(sides, bool) or not is_finite(sides) or int(sides) != sides:
            raise ValueError(f"Prism sides must be an integer (got {sides})")
        if sides < 3:
            raise ValueError(f"Prism must have at least 3 sides (got {sides})")
        super().__init__(radius, height, top_radius=top_radius, angle=angle, segments=int(sides), color=color)
        self.sides = int(sides)


class Sphere(RoundPrimitive):
    def __init__(self, radius, angle=FULL_TURN, segments=None, color=DEFAULT_COLOR):
        super().__init__(color)
        if not is_finite(radius):
            raise ValueError(f"Sphere radius must be finite (got {radius})")
        if radius <= 0:
            raise ValueError(f"Sphere radius must be positive (got {radius})")
        _check_angle("Sphere", angle)
        _check_segments("Sphere", segments)
        self.radius = float(radius)
        self.angle = float(angle)
        self.segments = segments if segments is not None else round_segments(self.radius)

    def profile(self) -> np.ndarray:
        rings = max(2, self.segments // 2)
        theta = np.linspace(0.0, np.pi, rings + 1)
        points = np.column_stack([self.radius * np.sin(theta), -self.radius * np.cos(theta)])
        points[0, 0] = points[-1, 0] = 0.0
        return points

    def to_mesh(self):
        return _mesh.lathe(self.profile(), FULL_TURN, self.segments)

    def cut_extent(self):
        return self.radius, 2.0 * self.radius


# --- Factory functions ---

def cube(width, height, depth, color=DEFAULT_COLOR) -> Solid:
    """
    Creates a box centered at the origin.

    Args:
        width (float): Size along X.
        height (float): Size along Y.
        depth (float): Size along Z.
    """
    return Box(width, height, depth, color=color).build()


def cylinder(radius, height, top_radius=None, angle=FULL_TURN, color=DEFAULT_COLOR) -> Solid:
    """
    Creates a cylinder along the Y axis, centered at the origin.

    Args:
        radius (float): Bottom radius.
        height (float): Total height.
        top_radius (float, optional): Top radius, defaults to `radius`. Zero gives a cone.
        angle (float, optional): Sweep in degrees, measured from +X toward +Z.
    """
    return Cylinder(radius, height, top_radius=top_radius, angle=angle, color=color).build()


def sphere(radius, angle=FULL_TURN, segments=None, color=DEFAULT_COLOR) -> Solid:
    """
    Creates a sphere centered at the origin.

    Args:
        radius (float): The radius of the sphere.
        angle (float, optional): Sweep in degrees around the Y axis.
        segments (int, optional): Angular divisions, derived from the radius by default.
    """
    return Sphere(radius, angle=angle, segments=segments, color=color).build()


def cone(radius, height, angle=FULL_TURN, segments=None, color=DEFAULT_COLOR) -> Solid:
    """Creates a cone with its base at -height/2 and apex at +height/2."""
    return Cone(radius, height, angle=angle, segments=segments, color=color).build()


def prism(sides, radius, height, top_radius=None, angle=FULL_TURN, color=DEFAULT_COLOR) -> Solid:
    """
    Creates a regular polygonal prism along the Y axis.

    Args:
        sides (int): Number of sides, at least 3.
        radius (float): Circumradius of the bottom polygon.
        height (float): Total height.
        top_radius (float, optional): Circumradius of the top polygon.
        angle (float, optional): Sweep in degrees.
    """
    return Prism(sides, radius, height, top_radius=top_radius, angle=angle, color=color).build()


def triangle_prism(radius, height, color=DEFAULT_COLOR) -> Solid:
    return prism(3, radius, height, color=color)
