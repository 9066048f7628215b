"""Boolean evaluator adapter.

Dispatches add / subtract / intersect on two closed meshes to
:mod:`trimesh.boolean`, backed by the ``manifold3d`` engine. The evaluator is
treated as a black box: inputs are handed over as-is and failures are
re-raised as ``RuntimeError``.
"""
import trimesh

from .mesh import empty_mesh

ADDITION = 'union'
SUBTRACTION = 'difference'
INTERSECTION = 'intersection'

OPERATIONS = (ADDITION, SUBTRACTION, INTERSECTION)


def _is_empty(mesh) -> bool:
    return len(mesh.faces) == 0


class Evaluator:
    """Runs one boolean operation between two closed meshes."""

    def __init__(self, backend='manifold'):
        self.backend = backend

    def __call__(self, a: trimesh.Trimesh, b: trimesh.Trimesh, operation: str) -> trimesh.Trimesh:
        if operation not in OPERATIONS:
            raise ValueError(f"Unsupported boolean operation '{operation}'. Use one of {OPERATIONS}.")

        # empty operands never reach the engine
        if _is_empty(b):
            return a.copy() if operation != INTERSECTION else empty_mesh()
        if _is_empty(a):
            return b.copy() if operation == ADDITION else empty_mesh()

        func = getattr(trimesh.boolean, operation)
        try:
            result = func([a, b], engine=self.backend, check_volume=False)
        except Exception as exc:
            raise RuntimeError(f"Boolean {operation} failed in the '{self.backend}' engine: {exc}") from exc
        if result is None:
            return empty_mesh()
        return result


default_evaluator = Evaluator()


def evaluate(a, b, operation, evaluator=None):
    """Applies `operation` to meshes `a` and `b` with the given (or default) evaluator."""
    return (evaluator or default_evaluator)(a, b, operation)
