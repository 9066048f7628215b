import numpy as np

from .core import Solid, is_finite
from .compositors import merge
from .mesh import orient

MIRROR_AXES = {'X': 0, 'Y': 1, 'Z': 2}


def _check_count(name, value):
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 1:
        raise ValueError(f"{name} must be a positive integer (got {value})")


def _spacing(spacing, size) -> np.ndarray:
    values = np.asarray(spacing, dtype=float)
    if values.ndim == 0:
        values = np.full(size, float(values))
    if values.shape != (size,) or not np.all(np.isfinite(values)):
        raise ValueError(f"spacing must be a finite number or {size} finite numbers (got {spacing})")
    return values


def _replicate(solid, offsets) -> Solid:
    """Unions clones of `solid` moved to each offset; the negative flag carries over."""
    base = solid.set_negative(False)
    clones = [base.clone().move(*offset) for offset in offsets]
    return merge(clones).set_negative(solid.is_negative)


def grid_xyz(solid: Solid, cols: int, rows: int, levels: int, spacing=0.0) -> Solid:
    """
    Repeats a solid on a 3D lattice and unions the copies.

    Columns run along X, rows along Z and levels up Y. The pitch on each axis
    is the solid's extent plus the spacing, so a negative spacing overlaps
    neighbours. The first copy stays where the input is.

    Args:
        solid (Solid): The solid to repeat. It is not modified.
        cols, rows, levels (int): Copies along X, Z and Y.
        spacing (float or tuple): Gap, either uniform or as (x, y, z).
    """
    _check_count('cols', cols)
    _check_count('rows', rows)
    _check_count('levels', levels)
    gap = _spacing(spacing, 3)
    b = solid.bounds()
    pitch = np.array([b.width, b.height, b.depth]) + gap
    offsets = [
        (i * pitch[0], k * pitch[1], j * pitch[2])
        for k in range(levels) for j in range(rows) for i in range(cols)
    ]
    return _replicate(solid, offsets)


def grid_xy(solid: Solid, cols: int, rows: int, spacing=0.0) -> Solid:
    """Flat grid: `cols` along X and `rows` along Z. `spacing` is uniform or (x, z)."""
    sx, sz = _spacing(spacing, 2)
    return grid_xyz(solid, cols, rows, 1, (sx, 0.0, sz))


def grid_x(solid: Solid, cols: int, spacing=0.0) -> Solid:
    """A single row of `cols` copies along X."""
    sx, = _spacing(spacing, 1)
    return grid_xyz(solid, cols, 1, 1, (sx, 0.0, 0.0))


def circular_layout(solid: Solid, count: int, radius, start_angle=0.0, end_angle=360.0, rotate=True) -> list:
    """
    Places `count` copies evenly over [start_angle, end_angle) on a circle
    around the Y axis. Angles are in degrees, from +X toward +Z.

    With `rotate` each copy is turned about its own origin so its +X side
    faces outward; otherwise it keeps its orientation.

    Returns:
        list[Solid]: The placed copies, in angular order.
    """
    _check_count('count', count)
    for name, value in (('radius', radius), ('start_angle', start_angle), ('end_angle', end_angle)):
        if not is_finite(value):
            raise ValueError(f"{name} must be finite (got {value})")

    step = (end_angle - start_angle) / count
    placed = []
    for i in range(count):
        theta = start_angle + i * step
        clone = solid.clone()
        if rotate:
            clone = clone.rotate(y=-theta)
        rad = np.radians(theta)
        placed.append(clone.move(x=radius * np.cos(rad), z=radius * np.sin(rad)))
    return placed


def circular_array(solid: Solid, count: int, radius, start_angle=0.0, end_angle=360.0, rotate=True) -> Solid:
    """Unions the copies from `circular_layout`; the negative flag carries over."""
    copies = [s.set_negative(False) for s in circular_layout(solid, count, radius, start_angle, end_angle, rotate)]
    return merge(copies).set_negative(solid.is_negative)


def mirror(solid: Solid, axis: str) -> Solid:
    """
    Reflects a solid across the plane through the origin normal to `axis`.

    Args:
        axis (str): 'X', 'Y' or 'Z'.
    """
    if axis not in MIRROR_AXES:
        raise ValueError(f"Invalid mirror axis '{axis}'. Use one of {list(MIRROR_AXES)}.")
    reflection = np.eye(4)
    reflection[MIRROR_AXES[axis], MIRROR_AXES[axis]] = -1.0
    mesh = solid.world_mesh()
    mesh.apply_transform(reflection)
    return Solid(orient(mesh), solid.color, solid.is_negative)
