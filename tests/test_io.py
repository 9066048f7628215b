import struct
import pytest
import numpy as np
from csgforge import cube, cylinder, Solid, generate_binary_stl, binary_stl_size_kb, save
from csgforge.api.io import STL_DTYPE


def test_stl_layout(unit_cube):
    verts = unit_cube.vertices()
    stl = generate_binary_stl(verts)
    assert isinstance(stl, bytes)
    assert len(stl) == 84 + 50 * 12
    assert stl[:80] == b'\x00' * 80
    assert struct.unpack('<I', stl[80:84])[0] == len(verts) // 9

def test_stl_axis_remap():
    verts = cube(2, 4, 6).move(x=1, y=2, z=3).vertices()
    records = np.frombuffer(generate_binary_stl(verts), dtype=STL_DTYPE, offset=84)
    source = verts.reshape(-1, 3, 3)
    assert np.allclose(records['points'][..., 0], source[..., 0])
    assert np.allclose(records['points'][..., 1], -source[..., 2])
    assert np.allclose(records['points'][..., 2], source[..., 1])
    assert np.all(records['normal'] == 0)
    assert np.all(records['attr'] == 0)

def test_stl_is_z_up():
    records = np.frombuffer(generate_binary_stl(cube(1, 10, 1).vertices()), dtype=STL_DTYPE, offset=84)
    pts = records['points'].reshape(-1, 3)
    assert pts[:, 2].max() - pts[:, 2].min() == pytest.approx(10)

def test_stl_rejects_bad_buffers():
    with pytest.raises(ValueError, match="empty"):
        generate_binary_stl(np.zeros(0, dtype=np.float32))
    with pytest.raises(ValueError, match="divisible by 9"):
        generate_binary_stl(np.zeros(10, dtype=np.float32))

def test_stl_size_kb(unit_cube):
    verts = unit_cube.vertices()
    assert binary_stl_size_kb(verts) == pytest.approx((84 + 50 * 12) / 1024)
    assert binary_stl_size_kb(verts) * 1024 == len(generate_binary_stl(verts))

def test_save_stl(unit_cube, tmp_path, capsys):
    path = tmp_path / "cube.stl"
    save(unit_cube, str(path))
    assert path.read_bytes() == generate_binary_stl(unit_cube.vertices())
    err = capsys.readouterr().err
    assert "INFO: Saving to" in err
    assert "SUCCESS: Saved 12 triangles" in err

def test_save_obj(tmp_path):
    solid = cylinder(2, 4).move(y=10)
    path = tmp_path / "part.obj"
    solid.save(str(path), verbose=False)
    lines = path.read_text().splitlines()
    verts = [l for l in lines if l.startswith('v ')]
    faces = [l for l in lines if l.startswith('f ')]
    assert len(faces) == solid.triangle_count
    ys = [float(l.split()[2]) for l in verts]
    assert min(ys) == pytest.approx(8) and max(ys) == pytest.approx(12)

def test_save_rejects_unknown_format(unit_cube, tmp_path):
    with pytest.raises(ValueError, match="Unsupported export format"):
        save(unit_cube, str(tmp_path / "cube.step"))

def test_save_rejects_empty_solid(tmp_path):
    with pytest.raises(ValueError, match="empty"):
        save(Solid(), str(tmp_path / "none.stl"))
