import json
from functools import wraps

from .core import Solid


class SolidCache:
    """
    Memoizes solid constructors for one authoring session.

    Results are keyed by the constructor's name and its JSON-serialized
    arguments. The first call stores the result; every call, the first one
    included, hands back a clone so callers can transform their copy freely.
    Entries live until `clear()` or until a `with` block using the cache
    exits. Not thread-safe.

    Example:
        cache = SolidCache()

        @cache.cached
        def bolt(length):
            return cylinder(2, length)
    """

    def __init__(self):
        self._store = {}

    def __len__(self):
        return len(self._store)

    def __contains__(self, key):
        return key in self._store

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.clear()
        return False

    def clear(self):
        self._store.clear()

    @staticmethod
    def key(name, args=(), kwargs=None) -> tuple:
        try:
            payload = json.dumps([list(args), kwargs or {}], sort_keys=True)
        except TypeError as exc:
            raise TypeError(f"Arguments to cached function '{name}' must be JSON-serializable") from exc
        return name, payload

    def cached(self, function=None, *, name=None):
        """
        Decorator that memoizes a function returning a Solid.

        Args:
            name (str, optional): Cache name. Required for lambdas, otherwise
                the function's own name is used.
        """
        def decorate(fn):
            fn_name = name or getattr(fn, '__name__', '')
            if not fn_name or fn_name == '<lambda>':
                raise ValueError("Anonymous functions need an explicit cache name")

            @wraps(fn)
            def wrapper(*args, **kwargs):
                key = self.key(fn_name, args, kwargs)
                if key not in self._store:
                    result = fn(*args, **kwargs)
                    if not isinstance(result, Solid):
                        raise TypeError(f"Cached function '{fn_name}' must return a Solid (got {type(result).__name__})")
                    self._store[key] = result
                return self._store[key].clone()
            return wrapper

        if function is None:
            return decorate
        return decorate(function)
