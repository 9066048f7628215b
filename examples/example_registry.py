import sys
from csgforge import Registry, SolidCache, cube, cylinder, Composition

registry = Registry()
cache = SolidCache()

@cache.cached
def post(height):
    return cylinder(1, height).align('bottom')

@registry.register
def table():
    top = cube(40, 2, 20).align('bottom').move(y=18)
    legs = [post(18).move(x=x, z=z) for x in (-18, 18) for z in (-8, 8)]
    return Composition(top, *legs)

@registry.register(name='table-with-hole')
def table_with_hole():
    return table().append(cylinder(3, 10).move(y=19).set_negative())

@registry.register(name='table-on-stage')
def table_on_stage():
    stage = cube(60, 4, 40).align('bottom')
    return Composition(stage, table().move(y=4).rotate(y=30))

if __name__ == "__main__":
    # usage: python example_registry.py [name] [path]
    if len(sys.argv) < 3:
        print("Available components:", ", ".join(registry.names()))
    else:
        registry.export(sys.argv[1], sys.argv[2])
