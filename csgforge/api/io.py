import numpy as np
import time
import struct
import sys
from pathlib import Path

STL_HEADER_BYTES = 80
STL_TRIANGLE_BYTES = 50
STL_DTYPE = np.dtype([('normal', ('<f', 3)), ('points', ('<f', (3, 3))), ('attr', '<H')])


def _triangles(vertices) -> np.ndarray:
    v = np.asarray(vertices, dtype=np.float32).reshape(-1)
    if v.size == 0:
        raise ValueError("Vertex buffer cannot be empty")
    if v.size % 9:
        raise ValueError(f"Vertex buffer length must be divisible by 9 (got {v.size})")
    return v.reshape(-1, 3, 3)


def binary_stl_size_kb(vertices) -> float:
    """Size of the binary STL for this buffer, in kilobytes."""
    count = len(np.asarray(vertices).reshape(-1)) // 9
    return (STL_HEADER_BYTES + 4 + STL_TRIANGLE_BYTES * count) / 1024


def generate_binary_stl(vertices) -> bytes:
    """
    Encodes a flat Y-up triangle buffer as binary STL.

    Coordinates are remapped (X, Y, Z) -> (X, -Z, Y) for Z-up slicers.
    Normals are left zeroed; readers recompute them from the winding.
    """
    points = _triangles(vertices)
    remapped = np.stack([points[..., 0], -points[..., 2], points[..., 1]], axis=-1)
    a = np.zeros(len(points), dtype=STL_DTYPE)
    a['points'] = remapped
    return b'\x00' * STL_HEADER_BYTES + struct.pack('<I', len(points)) + a.tobytes()


def _write_binary_stl(path, vertices):
    with open(path, 'wb') as fp:
        fp.write(generate_binary_stl(vertices))


def _write_obj(path, verts, faces):
    with open(path, 'w') as fp:
        for v in verts: fp.write(f"v {v[0]:.6f} {v[1]:.6f} {v[2]:.6f}\n")
        for f in faces + 1: fp.write(f"f {f[0]} {f[1]} {f[2]}\n")


def save(solid, path, verbose=True):
    """
    Writes a solid's world-space mesh to disk. The format follows the file
    suffix: '.stl' (binary) or '.obj'.
    """
    start = time.time()
    suffix = Path(path).suffix.lower()
    if suffix not in ('.stl', '.obj'):
        raise ValueError(f"Unsupported export format '{suffix}' for '{path}'. Use .stl or .obj.")
    if solid.is_empty:
        raise ValueError(f"Cannot save an empty solid to '{path}'")

    if verbose: print(f"INFO: Saving to '{path}'...", file=sys.stderr)
    if suffix == '.stl':
        vertices = solid.vertices()
        _write_binary_stl(path, vertices)
        size = f", {binary_stl_size_kb(vertices):.1f} KB"
    else:
        mesh = solid.world_mesh()
        _write_obj(path, mesh.vertices, mesh.faces)
        size = ""
    if verbose: print(f"SUCCESS: Saved {solid.triangle_count} triangles{size} in {time.time()-start:.2f}s.", file=sys.stderr)
