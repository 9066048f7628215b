import pytest
import numpy as np
from csgforge import (
    profile_prism, profile_prism_from_points, profile_prism_from_path,
    revolution_solid, revolution_solid_from_points, revolution_solid_from_path,
    straight, curve,
)
from conftest import volume, regular_polygon_area

SQUARE = [(0, 0), (10, 0), (10, 10), (0, 10)]
# (radius, height) outline of a plain cylinder of radius 5 and height 10
COLUMN = [(0, 0), (5, 0), (5, 10), (0, 10)]


# --- Extrusion ---

def test_square_extrusion(assert_closed):
    s = profile_prism_from_points(4, SQUARE)
    assert_closed(s)
    b = s.bounds()
    assert (b.width, b.height, b.depth) == (10, 4, 10)
    assert b.center == (5, 0, 5)
    assert s.triangle_count == 12
    assert volume(s) == pytest.approx(400)

def test_extrusion_maps_profile_y_to_z():
    s = profile_prism_from_points(2, [(0, 0), (4, 0), (0, 8)])
    b = s.bounds()
    assert (b.width, b.height, b.depth) == (4, 2, 8)
    assert volume(s) == pytest.approx(32)

def test_clockwise_and_explicitly_closed_profiles():
    clockwise = profile_prism_from_points(4, SQUARE[::-1])
    closed = profile_prism_from_points(4, SQUARE + [SQUARE[0]])
    assert volume(clockwise) == pytest.approx(400)
    assert volume(closed) == pytest.approx(400)

def test_collinear_points_are_dropped(assert_closed):
    s = profile_prism_from_points(4, [(0, 0), (5, 0), (10, 0), (10, 10), (0, 10)])
    assert_closed(s)
    assert s.triangle_count == 12

def test_concave_profile(assert_closed):
    l_shape = [(0, 0), (10, 0), (10, 2), (2, 2), (2, 10), (0, 10)]
    s = profile_prism_from_points(1, l_shape)
    assert_closed(s)
    assert volume(s) == pytest.approx(36)

def test_extrusion_validation():
    with pytest.raises(ValueError, match="at least 3 points"):
        profile_prism_from_points(4, [(0, 0), (1, 0)])
    with pytest.raises(ValueError, match="height"):
        profile_prism_from_points(0, SQUARE)
    with pytest.raises(ValueError, match="area"):
        profile_prism_from_points(4, [(0, 0), (5, 0), (10, 0)])

def test_extrusion_from_path_square():
    # right turns trace the square clockwise, below the X axis
    path = [straight(10), curve(0, 90), straight(10), curve(0, 90), straight(10)]
    s = profile_prism_from_path(5, path)
    b = s.bounds()
    assert b.min == (0, -2.5, -10)
    assert b.max == (10, 2.5, 0)
    assert volume(s) == pytest.approx(500)

def test_extrusion_from_path_with_arc(assert_closed):
    path = [straight(10), curve(5, -180), straight(10)]
    s = profile_prism_from_path(2, path)
    assert_closed(s)
    area = volume(s) / 2
    assert 100 < area < 100 + np.pi * 25 / 2

def test_extrusion_from_path_validation():
    with pytest.raises(ValueError, match="at least one segment"):
        profile_prism_from_path(5, [])
    with pytest.raises(ValueError, match="index 0"):
        profile_prism_from_path(5, [straight(-1)])

def test_extrusion_from_sketch():
    def draw(s):
        s.line_to(10, 0).line_to(10, 10).line_to(0, 10).close()
    from_sketch = profile_prism(4, draw)
    assert np.array_equal(from_sketch.vertices(), profile_prism_from_points(4, SQUARE).vertices())

def test_extrusion_with_curves(assert_closed):
    def draw(s):
        s.line_to(20, 0).arc_to(20, 5, 5, -90, 90).line_to(5, 10).curve_to(0, 0, control=(0, 10))
    assert_closed(profile_prism(2, draw))

def test_builds_are_independent():
    a = profile_prism_from_points(4, SQUARE)
    b = profile_prism_from_points(4, SQUARE)
    assert np.array_equal(a.vertices(), b.vertices())
    assert a.mesh is not b.mesh


# --- Revolution ---

def test_revolution_column(assert_closed):
    s = revolution_solid_from_points(COLUMN)
    assert_closed(s)
    b = s.bounds()
    assert (b.width, b.height, b.depth) == (10, 10, 10)
    assert b.min[1] == 0
    assert volume(s) == pytest.approx(regular_polygon_area(5, 24) * 10)

def test_partial_revolution_is_capped(assert_closed):
    s = revolution_solid_from_points(COLUMN, angle=90)
    assert_closed(s)
    assert s.bounds().min == (0, 0, 0)
    assert s.bounds().max == (5, 10, 5)
    assert volume(s) == pytest.approx(regular_polygon_area(5, 24) * 10 / 4)

def test_partial_revolution_density_grows_with_angle():
    small = revolution_solid_from_points(COLUMN, angle=30)
    large = revolution_solid_from_points(COLUMN, angle=300)
    assert small.triangle_count < large.triangle_count

def test_revolution_ring(assert_closed):
    # a profile away from the axis makes a torus-like ring with a hole
    ring = revolution_solid_from_points([(3, 0), (5, 0), (5, 2), (3, 2)])
    assert_closed(ring)
    assert volume(ring) == pytest.approx((regular_polygon_area(5, 24) - regular_polygon_area(3, 24)) * 2)

def test_revolution_partial_ring(assert_closed):
    assert_closed(revolution_solid_from_points([(3, 0), (5, 0), (5, 2), (3, 2)], angle=135))

def test_revolution_validation():
    with pytest.raises(ValueError, match="at least 2 points"):
        revolution_solid_from_points([(1, 0)])
    with pytest.raises(ValueError, match="non-negative"):
        revolution_solid_from_points([(0, 0), (-5, 0), (-5, 10), (0, 10)])
    with pytest.raises(ValueError, match="angle"):
        revolution_solid_from_points(COLUMN, angle=0)

def test_revolution_from_path():
    path = [straight(5), curve(0, -90), straight(10), curve(0, -90), straight(5)]
    from_path = revolution_solid_from_path(path)
    assert volume(from_path) == pytest.approx(volume(revolution_solid_from_points(COLUMN)))
    with pytest.raises(ValueError, match="at least one segment"):
        revolution_solid_from_path([])

def test_revolution_from_sketch(assert_closed):
    def draw(s):
        s.line_to(5, 0).curve_to(4, 15, control=(10, 8)).line_to(0, 15)
    vase = revolution_solid(draw)
    assert_closed(vase)
    assert vase.bounds().height == 15
    assert_closed(revolution_solid(draw, angle=180))
