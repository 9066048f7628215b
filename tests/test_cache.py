import pytest
from csgforge import SolidCache, cube, cylinder


def test_constructor_runs_once(cache):
    calls = []

    @cache.cached
    def block(size):
        calls.append(size)
        return cube(size, size, size)

    a, b = block(4), block(4)
    assert calls == [4]
    assert a is not b
    assert a.bounds() == b.bounds()
    assert len(cache) == 1

def test_every_call_returns_a_clone(cache):
    @cache.cached
    def post():
        return cylinder(1, 10)

    first = post()
    moved = first.move(x=50)
    again = post()
    assert again.bounds().center == (0, 0, 0)
    assert moved.bounds().center == (50, 0, 0)
    assert first.mesh is not again.mesh

def test_distinct_arguments_get_distinct_entries(cache):
    @cache.cached
    def block(w, h=1):
        return cube(w, h, 1)

    block(2)
    block(3)
    block(2, h=5)
    assert len(cache) == 3

def test_keyword_order_does_not_matter(cache):
    calls = []

    @cache.cached
    def block(w=1, h=1):
        calls.append((w, h))
        return cube(w, h, 1)

    block(w=2, h=3)
    block(h=3, w=2)
    assert len(calls) == 1

def test_lambda_requires_a_name(cache):
    with pytest.raises(ValueError, match="name"):
        cache.cached(lambda: cube(1, 1, 1))
    tile = cache.cached(lambda: cube(1, 1, 1), name='tile')
    assert tile().triangle_count == 12
    assert ('tile', '[[], {}]') in cache

def test_explicit_name_shares_entry(cache):
    calls = []

    def make():
        calls.append(1)
        return cube(1, 1, 1)

    first = cache.cached(make, name='shared')
    second = cache.cached(make, name='shared')
    first()
    second()
    assert len(calls) == 1

def test_wrapper_keeps_function_metadata(cache):
    @cache.cached
    def gear(teeth):
        """A gear."""
        return cylinder(teeth, 1)

    assert gear.__name__ == 'gear'
    assert gear.__doc__ == "A gear."

def test_non_serializable_arguments_raise(cache):
    @cache.cached
    def shaped(obj):
        return cube(1, 1, 1)

    with pytest.raises(TypeError, match="JSON"):
        shaped(object())

def test_non_solid_result_raises(cache):
    @cache.cached
    def broken():
        return 42

    with pytest.raises(TypeError):
        broken()

def test_caches_are_independent():
    calls = []

    def block():
        calls.append(1)
        return cube(1, 1, 1)

    SolidCache().cached(block)()
    SolidCache().cached(block)()
    assert len(calls) == 2

def test_context_manager_clears():
    with SolidCache() as session:
        session.cached(lambda: cube(1, 1, 1), name='c')()
        assert len(session) == 1
    assert len(session) == 0
