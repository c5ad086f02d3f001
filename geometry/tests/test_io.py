"""Tests for geometry.io (meshio round trips)."""

import meshio
import numpy as np
import pytest

from geometry.io import _xyz, read_triangle_mesh, write_triangle_mesh
from geometry.primitives import create_open_cylinder, create_tetrahedron


class TestRoundTrip:
    def test_vtk(self, tmp_path):
        m = create_open_cylinder(resolution=5)
        path = write_triangle_mesh(m, str(tmp_path / "out" / "cyl.vtk"))
        back = read_triangle_mesh(path)
        np.testing.assert_allclose(back.vertices, m.vertices)
        np.testing.assert_array_equal(back.triangles, m.triangles)

    def test_normals_carried(self, tmp_path):
        m = create_tetrahedron()
        m.vertex_normals = m.vertices / np.linalg.norm(m.vertices, axis=1)[:, None]
        path = write_triangle_mesh(m, str(tmp_path / "tet.vtu"))
        back = read_triangle_mesh(path)
        assert back.has_vertex_normals()
        np.testing.assert_allclose(back.vertex_normals, m.vertex_normals)


class TestRead:
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_triangle_mesh(str(tmp_path / "nope.vtk"))

    def test_no_triangles(self, tmp_path):
        path = str(tmp_path / "lines.vtu")
        meshio.write(path, meshio.Mesh(points=np.zeros((2, 3)), cells=[("line", np.array([[0, 1]]))]))
        with pytest.raises(ValueError):
            read_triangle_mesh(path)

    def test_mixed_cells_keep_triangles(self, tmp_path):
        pts = np.array([[0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0]], dtype=float)
        cells = [("line", np.array([[0, 1]])), ("triangle", np.array([[0, 1, 2], [0, 2, 3]]))]
        path = str(tmp_path / "mixed.vtu")
        meshio.write(path, meshio.Mesh(points=pts, cells=cells))
        m = read_triangle_mesh(path)
        assert m.triangles.tolist() == [[0, 1, 2], [0, 2, 3]]

    def test_planar_points_padded(self):
        out = _xyz(np.array([[1.0, 2.0], [3.0, 4.0]]))
        np.testing.assert_array_equal(out, [[1, 2, 0], [3, 4, 0]])
