from csgforge import cube, cylinder, sphere, cone, prism, triangle_prism, grid_x, merge

def main():
    """
    Lines up every primitive shape along the X axis, each one sitting on
    the ground plane.
    """
    shapes = [
        cube(10, 10, 10, color='red'),
        cylinder(5, 10, color='green'),
        cylinder(5, 10, top_radius=2, color='green'),
        sphere(5, color='blue'),
        cone(5, 10, color='orange'),
        prism(6, 5, 10, color='purple'),
        triangle_prism(5, 10, color='yellow'),
    ]
    placed = [s.align('bottom').move(x=i * 15) for i, s in enumerate(shapes)]
    return merge(placed)

def brick_row():
    """Ten bricks with a 1 unit gap between them."""
    return grid_x(cube(8, 4, 4), cols=10, spacing=1)

if __name__ == "__main__":
    main().save("primitives.stl")
    brick_row().save("bricks.obj")
