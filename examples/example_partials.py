from csgforge import cylinder, sphere, cone, prism, merge

def main():
    """
    Round shapes accept a sweep `angle` in degrees. Anything below 360 is
    cut with a wedge and comes out closed, with two flat faces.
    """
    pieces = [
        cylinder(5, 10, angle=90),
        cylinder(5, 10, top_radius=3, angle=270),
        sphere(5, angle=180),
        cone(5, 10, angle=120),
        prism(8, 5, 10, angle=200),
    ]
    return merge([p.move(x=i * 14) for i, p in enumerate(pieces)])

if __name__ == "__main__":
    main().save("partials.stl")
