import numpy as np
import trimesh
from dataclasses import dataclass, field

from .mesh import empty_mesh, orient

DEFAULT_COLOR = 'gray'
BOUNDS_PRECISION = 2

# edge name -> (axis index, which side of the box sits on the origin plane)
EDGES = {
    'bottom': (1, 'min'),
    'top': (1, 'max'),
    'left': (0, 'min'),
    'right': (0, 'max'),
    'front': (2, 'min'),
    'back': (2, 'max'),
}


def is_finite(value) -> bool:
    """True for real, finite numbers. Booleans and None are rejected."""
    if value is None or isinstance(value, bool):
        return False
    try:
        return bool(np.isfinite(float(value)))
    except (TypeError, ValueError):
        return False


def _rotation_matrix(rx, ry, rz) -> np.ndarray:
    """Rx @ Ry @ Rz from angles in degrees."""
    ax, ay, az = np.radians([rx, ry, rz])
    cx, sx = np.cos(ax), np.sin(ax)
    cy, sy = np.cos(ay), np.sin(ay)
    cz, sz = np.cos(az), np.sin(az)
    rot_x = np.array([[1, 0, 0], [0, cx, -sx], [0, sx, cx]])
    rot_y = np.array([[cy, 0, sy], [0, 1, 0], [-sy, 0, cy]])
    rot_z = np.array([[cz, -sz, 0], [sz, cz, 0], [0, 0, 1]])
    return rot_x @ rot_y @ rot_z


@dataclass(frozen=True)
class Pose:
    """
    Accumulated placement of a solid's raw geometry.

    A local point p maps to the world as `position + R @ (scale * p)`, where
    R applies the Z rotation first, then Y, then X.
    """
    position: tuple = (0.0, 0.0, 0.0)
    rotation: tuple = (0.0, 0.0, 0.0)
    scale: tuple = (1.0, 1.0, 1.0)

    @property
    def is_identity(self) -> bool:
        return self == Pose()

    def matrix(self) -> np.ndarray:
        """Returns the 4x4 homogeneous transform T @ R @ S."""
        m = np.eye(4)
        m[:3, :3] = _rotation_matrix(*self.rotation) @ np.diag(self.scale)
        m[:3, 3] = self.position
        return m


@dataclass(frozen=True)
class Bounds:
    """World-space axis-aligned box, rounded to two decimals."""
    min: tuple
    max: tuple
    center: tuple = field(init=False)
    width: float = field(init=False)
    height: float = field(init=False)
    depth: float = field(init=False)

    def __post_init__(self):
        lo, hi = np.asarray(self.min, dtype=float), np.asarray(self.max, dtype=float)
        size = hi - lo
        center = (lo + hi) / 2.0
        # `+ 0.0` turns -0.0 into 0.0
        object.__setattr__(self, 'min', tuple(round(float(v), BOUNDS_PRECISION) + 0.0 for v in lo))
        object.__setattr__(self, 'max', tuple(round(float(v), BOUNDS_PRECISION) + 0.0 for v in hi))
        object.__setattr__(self, 'center', tuple(round(float(v), BOUNDS_PRECISION) + 0.0 for v in center))
        object.__setattr__(self, 'width', round(float(size[0]), BOUNDS_PRECISION) + 0.0)
        object.__setattr__(self, 'height', round(float(size[1]), BOUNDS_PRECISION) + 0.0)
        object.__setattr__(self, 'depth', round(float(size[2]), BOUNDS_PRECISION) + 0.0)


class Solid:
    """
    An immutable closed triangle mesh with a pose, a color tag and a
    negative flag.

    Every transform returns a new Solid. `move`, `rotate`, `scale` and `at`
    only create a new pose and share the (never mutated) mesh. `align` and
    `center` bake the pose into a fresh mesh, which costs a pass over the
    vertices.
    """

    def __init__(self, mesh: trimesh.Trimesh = None, color: str = DEFAULT_COLOR, negative: bool = False, pose: Pose = None):
        self._mesh = mesh if mesh is not None else empty_mesh()
        self.color = color
        self.is_negative = bool(negative)
        self.pose = pose or Pose()

    def __setattr__(self, name, value):
        if name in self.__dict__:
            raise AttributeError(f"Solid is immutable; '{name}' cannot be reassigned")
        super().__setattr__(name, value)

    def __repr__(self):
        sign = ', negative' if self.is_negative else ''
        return f"Solid({self.triangle_count} triangles, color={self.color!r}{sign})"

    def _replace(self, mesh=None, color=None, negative=None, pose=None) -> 'Solid':
        return Solid(
            self._mesh if mesh is None else mesh,
            self.color if color is None else color,
            self.is_negative if negative is None else negative,
            self.pose if pose is None else pose,
        )

    # --- Geometry access ---

    @property
    def mesh(self) -> trimesh.Trimesh:
        """A copy of the raw local-frame mesh; editing it leaves the solid unchanged."""
        return self._mesh.copy()

    @property
    def is_empty(self) -> bool:
        return len(self._mesh.faces) == 0

    @property
    def triangle_count(self) -> int:
        return len(self._mesh.faces)

    def world_mesh(self) -> trimesh.Trimesh:
        """Returns a new mesh with the pose applied to every vertex."""
        mesh = self._mesh.copy()
        if self.pose.is_identity or self.is_empty:
            return mesh
        matrix = self.pose.matrix()
        mesh.apply_transform(matrix)
        if np.linalg.det(matrix[:3, :3]) < 0:
            orient(mesh)
        return mesh

    def vertices(self) -> np.ndarray:
        """
        Flattened world-space triangle buffer.

        Nine float32 values per triangle: three vertices of (x, y, z).
        """
        if self.is_empty:
            return np.zeros(0, dtype=np.float32)
        return np.asarray(self.world_mesh().triangles, dtype=np.float32).reshape(-1)

    def bounds(self) -> Bounds:
        """World-space bounds of the local box mapped through the pose."""
        lo, hi = self._world_extents()
        return Bounds(tuple(lo), tuple(hi))

    def _world_extents(self):
        if self.is_empty:
            return np.zeros(3), np.zeros(3)
        lo, hi = self._mesh.bounds
        corners = np.array([[x, y, z] for x in (lo[0], hi[0]) for y in (lo[1], hi[1]) for z in (lo[2], hi[2])])
        world = trimesh.transformations.transform_points(corners, self.pose.matrix())
        return world.min(axis=0), world.max(axis=0)

    # --- Pose-only transforms ---

    def at(self, x, y, z) -> 'Solid':
        """Places the solid at an absolute position. All three coordinates are required."""
        for name, value in (('x', x), ('y', y), ('z', z)):
            if not is_finite(value):
                raise ValueError(f"at() requires finite coordinates (got {name}: {value})")
        return self._replace(pose=Pose((float(x), float(y), float(z)), self.pose.rotation, self.pose.scale))

    def move(self, x=0.0, y=0.0, z=0.0) -> 'Solid':
        """Translates relative to the current position. Non-finite values count as zero."""
        delta = [float(v) if is_finite(v) else 0.0 for v in (x, y, z)]
        position = tuple(p + d for p, d in zip(self.pose.position, delta))
        return self._replace(pose=Pose(position, self.pose.rotation, self.pose.scale))

    def rotate(self, x=0.0, y=0.0, z=0.0) -> 'Solid':
        """Adds per-axis rotation in degrees to the accumulated rotation."""
        for name, value in (('x', x), ('y', y), ('z', z)):
            if not is_finite(value):
                raise ValueError(f"rotate() requires finite angles (got {name}: {value})")
        rotation = tuple(r + float(d) for r, d in zip(self.pose.rotation, (x, y, z)))
        return self._replace(pose=Pose(self.pose.position, rotation, self.pose.scale))

    def scale(self, all=None, x=None, y=None, z=None) -> 'Solid':
        """
        Multiplies the accumulated scale.

        Args:
            all (float, optional): Uniform factor, applied before the per-axis ones.
            x, y, z (float, optional): Per-axis factors.
        """
        factors = np.array(self.pose.scale, dtype=float)
        for name, value in (('all', all), ('x', x), ('y', y), ('z', z)):
            if value is None:
                continue
            if not is_finite(value) or float(value) == 0.0:
                raise ValueError(f"Scale factors must be finite and non-zero (got {name}: {value})")
        if all is not None:
            factors *= float(all)
        for i, value in enumerate((x, y, z)):
            if value is not None:
                factors[i] *= float(value)
        return self._replace(pose=Pose(self.pose.position, self.pose.rotation, tuple(factors)))

    # --- Baking transforms ---

    def _baked(self, offset_of) -> 'Solid':
        """Bakes the pose, then shifts by `offset_of(lo, hi)` of the baked bounds."""
        mesh = self.world_mesh()
        if not self.is_empty:
            lo, hi = mesh.bounds
            mesh.apply_translation(offset_of(lo, hi))
        return self._replace(mesh=mesh, pose=Pose())

    def center(self, x=None, y=None, z=None) -> 'Solid':
        """
        Moves the solid so its bounding box is centered on the origin.

        With no arguments every axis is centered; otherwise only the axes
        passed as True are.
        """
        axes = (True, True, True) if x is None and y is None and z is None else (bool(x), bool(y), bool(z))
        return self._baked(lambda lo, hi: np.where(axes, -(lo + hi) / 2.0, 0.0))

    def align(self, edge: str) -> 'Solid':
        """
        Moves the solid so the named face of its bounding box lies on the
        origin plane: 'bottom' puts min y at 0, 'top' puts max y at 0, and
        likewise 'left'/'right' for x and 'front'/'back' for z.
        """
        if edge not in EDGES:
            raise ValueError(f"Invalid align edge '{edge}'. Use one of {list(EDGES)}.")
        axis, side = EDGES[edge]

        def offset_of(lo, hi):
            offset = np.zeros(3)
            offset[axis] = -(lo[axis] if side == 'min' else hi[axis])
            return offset

        return self._baked(offset_of)

    # --- Copies and tags ---

    def clone(self) -> 'Solid':
        """Returns an equal solid that owns an independent copy of the mesh."""
        return self._replace(mesh=self._mesh.copy())

    def set_negative(self, negative: bool = True) -> 'Solid':
        return self._replace(negative=bool(negative))

    def set_color(self, color: str) -> 'Solid':
        return self._replace(color=color)

    # --- Composition shortcuts ---

    def __or__(self, other):
        from .compositors import union
        return union(self, other)

    def __sub__(self, other):
        from .compositors import subtract
        return subtract(self, other)

    def __and__(self, other):
        from .compositors import intersect
        return intersect(self, other)

    def save(self, path, verbose=True):
        """Exports the world-space mesh to `.stl` or `.obj`."""
        from .io import save as save_func
        save_func(self, path, verbose=verbose)
