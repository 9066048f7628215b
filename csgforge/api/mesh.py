import numpy as np
import trimesh
import mapbox_earcut

EPSILON = 1e-9

# One lathe segment per 15 degrees of sweep, never fewer than 3.
REVOLUTION_DEGREES_PER_SEGMENT = 15.0
REVOLUTION_MIN_SEGMENTS = 3


def empty_mesh() -> trimesh.Trimesh:
    """Returns a mesh with no vertices and no faces."""
    return trimesh.Trimesh(vertices=np.zeros((0, 3)), faces=np.zeros((0, 3), dtype=np.int64), process=False)


def orient(mesh: trimesh.Trimesh) -> trimesh.Trimesh:
    """Flips the winding in place when the mesh encloses a negative volume."""
    if len(mesh.faces) and mesh.volume < 0:
        mesh.invert()
    return mesh


def closed_mesh(vertices, faces) -> trimesh.Trimesh:
    """Builds a trimesh from raw arrays and makes sure its normals point outward."""
    mesh = trimesh.Trimesh(
        vertices=np.asarray(vertices, dtype=float),
        faces=np.asarray(faces, dtype=np.int64).reshape(-1, 3),
    )
    return orient(mesh)


def signed_area(points) -> float:
    """Shoelace area of a 2D polygon; positive when counter-clockwise."""
    pts = np.asarray(points, dtype=float)
    x, y = pts[:, 0], pts[:, 1]
    return 0.5 * float(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y))


def clean_loop(points) -> np.ndarray:
    """
    Normalizes a 2D boundary into a simple closed loop.

    Consecutive duplicates are merged, a trailing point equal to the first is
    dropped, and points lying on the straight line between their neighbours
    are removed.
    """
    pts = [np.asarray(p, dtype=float) for p in np.asarray(points, dtype=float).reshape(-1, 2)]
    loop = []
    for p in pts:
        if not loop or np.linalg.norm(p - loop[-1]) > EPSILON:
            loop.append(p)
    while len(loop) > 1 and np.linalg.norm(loop[0] - loop[-1]) <= EPSILON:
        loop.pop()

    changed = True
    while changed and len(loop) >= 3:
        changed = False
        for i in range(len(loop)):
            prev, cur, nxt = loop[i - 1], loop[i], loop[(i + 1) % len(loop)]
            e1, e2 = cur - prev, nxt - cur
            cross = e1[0] * e2[1] - e1[1] * e2[0]
            if abs(cross) <= EPSILON * max(1.0, np.linalg.norm(e1) * np.linalg.norm(e2)):
                del loop[i]
                changed = True
                break
    return np.array(loop, dtype=float).reshape(-1, 2)


def _ccw_loop(points, label) -> np.ndarray:
    loop = clean_loop(points)
    if len(loop) < 3 or abs(signed_area(loop)) <= EPSILON:
        raise ValueError(f"{label} profile must enclose a non-zero area (got {len(loop)} distinct points)")
    if signed_area(loop) < 0:
        loop = loop[::-1].copy()
    return loop


def triangulate(points) -> np.ndarray:
    """
    Triangulates a simple counter-clockwise polygon with earcut.

    Returns an (M, 3) array of indices into `points`, every triangle wound
    counter-clockwise.
    """
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    rings = np.array([len(pts)], dtype=np.uint32)
    tris = np.asarray(mapbox_earcut.triangulate_float64(pts, rings), dtype=np.int64).reshape(-1, 3)
    if len(tris) == 0:
        raise ValueError("Polygon could not be triangulated; it may be self-intersecting")
    a, b, c = pts[tris[:, 0]], pts[tris[:, 1]], pts[tris[:, 2]]
    cross = (b[:, 0] - a[:, 0]) * (c[:, 1] - a[:, 1]) - (b[:, 1] - a[:, 1]) * (c[:, 0] - a[:, 0])
    flip = cross < 0
    tris[flip] = tris[flip][:, ::-1]
    return tris


def box(width, height, depth) -> trimesh.Trimesh:
    return trimesh.creation.box(extents=(width, height, depth))


def extrude(profile, height) -> trimesh.Trimesh:
    """
    Extrudes a closed 2D profile into a prism centered on the origin.

    The profile lies in the world XZ plane (profile x -> world x, profile
    y -> world z) and the extrusion runs along world Y, spanning
    [-height/2, height/2].
    """
    loop = _ccw_loop(profile, "Extrusion")
    n = len(loop)
    half = height / 2.0

    # Profile frame (px, py, e) maps to world (px, -e, py); that is a proper
    # rotation, so windings computed in the profile frame stay outward.
    bottom = [(x, half, y) for x, y in loop]
    top = [(x, -half, y) for x, y in loop]
    vertices = bottom + top

    faces = []
    for i in range(n):
        j = (i + 1) % n
        faces.append((i, j, n + j))
        faces.append((i, n + j, n + i))
    for a, b, c in triangulate(loop):
        faces.append((n + a, n + b, n + c))
        faces.append((c, b, a))
    return closed_mesh(vertices, faces)


def revolution_segments(angle) -> int:
    return max(REVOLUTION_MIN_SEGMENTS, int(np.ceil(angle / REVOLUTION_DEGREES_PER_SEGMENT)))


def lathe(profile, angle=360.0, segments=None) -> trimesh.Trimesh:
    """
    Sweeps a closed (radius, height) profile around the world Y axis.

    Angles run in the XZ plane from +X toward +Z. A sweep below 360 degrees
    gets flat caps at both ends so the result is always closed. Points on the
    axis collapse to a single pole vertex.

    Args:
        profile: (N, 2) points, x is the radius (>= 0) and y the height.
        angle (float): Sweep in degrees. Anything >= 360 is a full turn.
        segments (int, optional): Angular divisions. Defaults to one per 15
            degrees of sweep.
    """
    loop = _ccw_loop(profile, "Revolution")
    if np.any(loop[:, 0] < -EPSILON):
        raise ValueError(f"Revolution profile radius must be non-negative (got {loop[:, 0].min()})")

    full = angle >= 360.0
    sweep = 360.0 if full else float(angle)
    if segments is None:
        segments = revolution_segments(sweep)
    steps = segments if full else segments + 1
    phis = np.radians(np.linspace(0.0, sweep, segments + 1))[:steps]

    vertices, rings = [], []
    for r, y in loop:
        if r <= EPSILON:
            rings.append([len(vertices)] * steps)
            vertices.append((0.0, y, 0.0))
        else:
            start = len(vertices)
            vertices.extend((r * np.cos(phi), y, r * np.sin(phi)) for phi in phis)
            rings.append(list(range(start, start + steps)))

    faces = []
    count = len(loop)
    for i in range(count):
        a, b = rings[i], rings[(i + 1) % count]
        for k in range(segments):
            k1 = (k + 1) % steps
            for tri in ((a[k], b[k], b[k1]), (a[k], b[k1], a[k1])):
                # Triangles touching a pole twice are degenerate.
                if len(set(tri)) == 3:
                    faces.append(tri)

    if not full:
        first = [ring[0] for ring in rings]
        last = [ring[-1] for ring in rings]
        for tri in triangulate(loop):
            faces.append(tuple(first[j] for j in tri[::-1]))
            faces.append(tuple(last[j] for j in tri))
    return closed_mesh(vertices, faces)
