import numpy as np
from csgforge import (
    profile_prism, profile_prism_from_points, profile_prism_from_path,
    revolution_solid_from_points, revolution_solid, straight, curve, merge,
)

def star(points=5, outer=10, inner=4):
    angles = np.radians(np.arange(points * 2) * 180 / points + 90)
    radii = np.where(np.arange(points * 2) % 2 == 0, outer, inner)
    return np.column_stack([radii * np.cos(angles), radii * np.sin(angles)])

def l_bracket():
    """An L-shaped bracket with a rounded inner corner, drawn with path segments."""
    return profile_prism_from_path(5, [
        straight(20),
        curve(0, -90),
        straight(5),
        curve(0, -90),
        straight(13),
        curve(2, 90),
        straight(13),
        curve(0, -90),
        straight(5),
    ])

def rounded_plate():
    """A plate outline drawn with the Sketch pen, including an arc and a Bezier."""
    def draw(s):
        s.move_to(0, 0).line_to(20, 0).arc_to(20, 5, 5, -90, 90).line_to(5, 10)
        s.curve_to(0, 0, control=(0, 10)).close()
    return profile_prism(2, draw)

def chess_pawn():
    """Lathe profile: x is the radius, y the height."""
    return revolution_solid_from_points([
        (0, 0), (8, 0), (8, 2), (6, 3), (3, 5), (2, 12),
        (4, 13), (2, 14), (3, 17), (2.5, 19), (0, 20),
    ])

def half_vase():
    def draw(s):
        s.move_to(0, 0).line_to(5, 0).curve_to(4, 15, control=(10, 8)).line_to(0, 15)
    return revolution_solid(draw, angle=180)

def main():
    parts = [
        profile_prism_from_points(3, star()),
        l_bracket(),
        rounded_plate(),
        chess_pawn(),
        half_vase(),
    ]
    return merge([p.align('bottom').move(x=i * 30) for i, p in enumerate(parts)])

if __name__ == "__main__":
    main().save("profiles.stl")
