from functools import reduce

from .core import Solid
from .engine import evaluate, ADDITION, SUBTRACTION, INTERSECTION


class Composition:
    """
    An ordered list of solids waiting to be merged.

    Each entry keeps its own negative flag. Compositions can be nested by
    appending one to another; the entries are flattened in order.
    """

    def __init__(self, *items):
        self._solids = []
        self.append(*items)

    def append(self, *items) -> 'Composition':
        for item in items:
            if isinstance(item, Composition):
                self._solids.extend(item._solids)
            elif isinstance(item, Solid):
                self._solids.append(item)
            else:
                raise TypeError(f"Composition entries must be Solid or Composition (got {type(item).__name__})")
        return self

    @property
    def entries(self) -> list:
        """(solid, is_negative) pairs in merge order."""
        return [(s, s.is_negative) for s in self._solids]

    def __len__(self):
        return len(self._solids)

    def __iter__(self):
        return iter(self._solids)

    # --- Group transforms ---
    # Each returns a new Composition with every entry transformed the same way.

    def _map(self, func) -> 'Composition':
        return Composition(*[func(s) for s in self._solids])

    def move(self, x=0.0, y=0.0, z=0.0) -> 'Composition':
        return self._map(lambda s: s.move(x, y, z))

    def at(self, x, y, z) -> 'Composition':
        """Places every entry at the same absolute position."""
        return self._map(lambda s: s.at(x, y, z))

    def rotate(self, x=0.0, y=0.0, z=0.0) -> 'Composition':
        """Adds the same rotation to every entry, each about its own origin."""
        return self._map(lambda s: s.rotate(x, y, z))

    def to_solid(self) -> Solid:
        return merge(self._solids)


def _flatten(items) -> list:
    solids = []
    for item in items:
        if isinstance(item, Composition):
            solids.extend(item)
        elif isinstance(item, Solid):
            solids.append(item)
        else:
            raise TypeError(f"Expected Solid entries (got {type(item).__name__})")
    return solids


def _as_solid(item) -> Solid:
    if isinstance(item, Composition):
        return item.to_solid()
    if isinstance(item, Solid):
        return item
    raise TypeError(f"Expected a Solid or Composition (got {type(item).__name__})")


def merge(solids, evaluator=None) -> Solid:
    """
    Folds an ordered list of solids into one.

    The first solid is the starting geometry. Each later solid is added, or
    subtracted when it is negative. The result takes the first solid's color
    and is never negative.

    Raises:
        ValueError: if the list is empty or its first solid is negative.
    """
    solids = _flatten(solids)
    if not solids:
        raise ValueError("merge requires at least one solid")
    first = solids[0]
    if first.is_negative:
        raise ValueError("First solid in merge cannot be negative")

    def step(result, solid):
        operation = SUBTRACTION if solid.is_negative else ADDITION
        return evaluate(result, solid.world_mesh(), operation, evaluator)

    return Solid(reduce(step, solids[1:], first.world_mesh()), first.color)


def union(*solids, evaluator=None) -> Solid:
    """Adds all solids together, ignoring their negative flags."""
    solids = [_as_solid(s) for s in solids]
    if not solids:
        raise ValueError("union requires at least one solid")
    result = reduce(lambda acc, s: evaluate(acc, s.world_mesh(), ADDITION, evaluator), solids[1:], solids[0].world_mesh())
    return Solid(result, solids[0].color)


def subtract(base, *cuts, evaluator=None) -> Solid:
    """Removes every cut from `base`, ignoring negative flags."""
    base, cuts = _as_solid(base), [_as_solid(c) for c in cuts]
    result = reduce(lambda acc, s: evaluate(acc, s.world_mesh(), SUBTRACTION, evaluator), cuts, base.world_mesh())
    return Solid(result, base.color)


def intersect(a, b, evaluator=None) -> Solid:
    """Keeps the volume shared by `a` and `b`."""
    a, b = _as_solid(a), _as_solid(b)
    return Solid(evaluate(a.world_mesh(), b.world_mesh(), INTERSECTION, evaluator), a.color)
