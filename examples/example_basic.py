from csgforge import *

def main():
    """
    Demonstrates the basic concepts of solid modeling.

    This example shows how to:
    - Create primitive shapes like `cube` and `cylinder`.
    - Combine shapes using boolean operators: intersection (`&`),
      union (`|`), and difference (`-`).
    - Place shapes with `rotate` and `move`.
    """
    # A cube intersected with a sphere
    body = cube(15, 15, 15) & sphere(10)

    # Drill three holes, one along each axis
    hole = cylinder(4, 30)
    body = body - hole - hole.rotate(x=90) - hole.rotate(z=90)

    return body

if __name__ == "__main__":
    solid = main()
    print(f"Built {solid!r}, bounds {solid.bounds()}")
    solid.save("basic.stl")
