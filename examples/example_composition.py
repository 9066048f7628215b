from csgforge import cube, cylinder, sphere, Composition, circular_array, circular_layout, grid_xy, mirror, merge

def flange():
    """
    A round plate with a ring of bolt holes. Negative solids are subtracted
    when the composition is merged; the first entry must be positive.
    """
    plate = cylinder(30, 5)
    bolt_hole = cylinder(3, 10).set_negative()
    center_hole = cylinder(10, 10).set_negative()
    return Composition(plate, circular_array(bolt_hole, count=6, radius=22), center_hole).to_solid()

def window_wall():
    """A wall with a 3x2 grid of window openings."""
    wall = cube(100, 60, 5).align('bottom')
    window = cube(20, 15, 10).set_negative()
    windows = grid_xy(window, cols=3, rows=1, spacing=(10, 0)).center().move(y=30)
    return merge([wall, windows])

def pearls():
    """Spheres around a circle, kept as separate solids."""
    return circular_layout(sphere(2), count=12, radius=15, rotate=False)

def twin_towers():
    tower = cube(5, 20, 5).align('bottom').move(x=10)
    return merge([tower, mirror(tower, 'X')])

if __name__ == "__main__":
    flange().save("flange.stl")
    window_wall().save("wall.stl")
    merge(pearls()).save("pearls.stl")
    twin_towers().save("towers.stl")
