from .api.core import Solid, Pose, Bounds, DEFAULT_COLOR
from .api.engine import Evaluator, evaluate, ADDITION, SUBTRACTION, INTERSECTION
from .api.sketch import Sketch, Straight, Curve, straight, curve, trace_path
from .api.primitives import (
    cube, cylinder, sphere, cone, prism, triangle_prism,
    Primitive, RoundPrimitive, Box, Cylinder, Sphere, Cone, Prism,
)
from .api.profiles import (
    profile_prism, profile_prism_from_points, profile_prism_from_path,
    revolution_solid, revolution_solid_from_points, revolution_solid_from_path,
)
from .api.compositors import Composition, merge, union, subtract, intersect
from .api.operators import grid_x, grid_xy, grid_xyz, circular_layout, circular_array, mirror
from .api.cache import SolidCache
from .api.registry import Registry
from .api.io import save, generate_binary_stl, binary_stl_size_kb
