import sys

from .core import Solid
from .compositors import Composition


class Registry:
    """
    Maps component names to zero-argument producers.

    Producers return either a Solid or a Composition; `build()` always
    hands back a single Solid. Export tooling discovers components through
    `names()`.
    """

    def __init__(self):
        self._producers = {}

    def __len__(self):
        return len(self._producers)

    def __contains__(self, name):
        return name in self._producers

    def add(self, producers: dict):
        """Registers every entry of a name -> producer mapping. Existing names are kept."""
        for name, producer in producers.items():
            if not callable(producer):
                raise TypeError(f"Producer for '{name}' must be callable")
            self._producers.setdefault(name, producer)
        return self

    def register(self, producer=None, *, name=None):
        """Decorator form of `add`. The function name is used unless `name` is given."""
        def decorate(fn):
            self.add({name or fn.__name__: fn})
            return fn
        if producer is None:
            return decorate
        return decorate(producer)

    def names(self) -> list:
        return sorted(self._producers)

    def get(self, name):
        if name not in self._producers:
            raise KeyError(f"Unknown component '{name}'. Available: {self.names()}")
        return self._producers[name]

    def build(self, name) -> Solid:
        result = self.get(name)()
        if isinstance(result, Composition):
            return result.to_solid()
        if not isinstance(result, Solid):
            raise TypeError(f"Component '{name}' returned {type(result).__name__}, expected Solid or Composition")
        return result

    def export(self, name, path, verbose=True):
        """Builds a component and saves it to `path`."""
        from .io import save
        if verbose:
            print(f"INFO: Building component '{name}'...", file=sys.stderr)
        save(self.build(name), path, verbose=verbose)
