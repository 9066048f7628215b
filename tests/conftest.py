import pytest
import numpy as np
from csgforge import cube, SolidCache, Registry


@pytest.fixture
def unit_cube():
    return cube(10, 10, 10)


@pytest.fixture
def cache():
    with SolidCache() as session:
        yield session


@pytest.fixture
def registry():
    return Registry()


@pytest.fixture
def assert_closed():
    """Checks that a solid holds a non-empty, watertight, outward-facing mesh."""
    def _asserter(solid):
        mesh = solid.world_mesh()
        assert len(mesh.faces) > 0
        assert mesh.is_watertight, "Mesh has open edges"
        assert mesh.volume > 0, "Mesh normals point inward"
        assert len(solid.vertices()) % 9 == 0
    return _asserter


def volume(solid):
    return solid.world_mesh().volume


def regular_polygon_area(radius, sides):
    return 0.5 * sides * radius ** 2 * np.sin(2 * np.pi / sides)
