"""Tests for topology.builder and build_half_edge_mesh."""

import logging

import numpy as np
import pytest

from geometry.primitives import (
    create_open_cylinder,
    create_square,
    create_tetrahedron,
    create_triangle,
)
from geometry.triangle_mesh import TriangleMesh, as_triangle_source
from topology import (
    BuildError,
    DegenerateTriangleError,
    InvalidIndexError,
    NonManifoldEdgeError,
    NonManifoldVertexError,
    build_half_edge_mesh,
)
from topology.builder import compute_half_edges


def assert_invariants(m):
    """Structural invariants every well-formed store must satisfy."""
    hes = m.half_edges
    assert len(hes) == 3 * len(m.triangles)
    for h, he in enumerate(hes):
        n1 = hes[he.next]
        n2 = hes[n1.next]
        assert n2.next == h
        assert he.triangle_index == n1.triangle_index == n2.triangle_index == h // 3
        assert he.dst == n1.src
        if he.twin is not None:
            t = hes[he.twin]
            assert t.twin == h
            assert t.vertex_indices == (he.dst, he.src)

    for v, fan in enumerate(m.ordered_half_edge_from_vertex):
        expected = sorted(h for h, he in enumerate(hes) if he.src == v)
        assert sorted(fan) == expected
        assert len(set(fan)) == len(fan)
        if any(hes[h].is_boundary() for h in fan):
            assert hes[fan[0]].is_boundary()


# Fixtures

@pytest.fixture
def tetra():
    return build_half_edge_mesh(create_tetrahedron())


@pytest.fixture
def square():
    return build_half_edge_mesh(create_square())


# Concrete scenarios

class TestTetrahedron:
    def test_counts_and_twins(self, tetra):
        assert len(tetra.half_edges) == 12
        assert all(he.twin is not None for he in tetra.half_edges)
        assert_invariants(tetra)

    def test_no_boundaries(self, tetra):
        assert tetra.get_boundaries() == []
        assert tetra.boundary_half_edges_from_vertex(0) == []
        assert tetra.boundary_vertices_from_vertex(0) == []

    def test_closed_fan_starts_at_lowest_index(self, tetra):
        for v, fan in enumerate(tetra.ordered_half_edge_from_vertex):
            assert fan[0] == min(fan)
            assert len(fan) == 3


class TestSingleTriangle:
    def test_all_boundary(self):
        m = build_half_edge_mesh(create_triangle())
        assert len(m.half_edges) == 3
        assert all(he.is_boundary() for he in m.half_edges)
        assert m.get_boundaries() == [[0, 1, 2]]
        assert_invariants(m)

    def test_half_edge_layout(self):
        m = build_half_edge_mesh(create_triangle())
        assert [he.vertex_indices for he in m.half_edges] == [(0, 1), (1, 2), (2, 0)]
        assert [he.next for he in m.half_edges] == [1, 2, 0]
        assert [he.triangle_index for he in m.half_edges] == [0, 0, 0]


class TestSquare:
    def test_diagonal_twinned(self, square):
        hes = square.half_edges
        assert len(hes) == 6
        h02 = [h for h, he in enumerate(hes) if he.vertex_indices == (0, 2)][0]
        h20 = [h for h, he in enumerate(hes) if he.vertex_indices == (2, 0)][0]
        assert hes[h02].twin == h20
        assert hes[h20].twin == h02
        assert sum(1 for he in hes if he.is_boundary()) == 4
        assert_invariants(square)

    def test_single_loop(self, square):
        assert square.get_boundaries() == [[0, 1, 2, 3]]

    def test_ordered_fan_of_shared_vertex(self, square):
        # (0,1) is the boundary start, rotating CCW onto the diagonal (0,2)
        assert square.ordered_half_edge_from_vertex[0] == (0, 3)


class TestCylinder:
    @pytest.mark.parametrize("n", [3, 5, 8])
    def test_two_loops(self, n):
        m = build_half_edge_mesh(create_open_cylinder(resolution=n))
        loops = m.get_boundaries()
        assert len(loops) == 2
        assert [len(b) for b in loops] == [n, n]
        assert loops[0] == list(range(n))
        assert loops[1][0] == n
        assert sorted(loops[1]) == list(range(n, 2 * n))
        for loop in loops:
            assert loop[0] == min(loop)
        assert_invariants(m)


class TestEmpty:
    def test_empty_input(self):
        m = build_half_edge_mesh(TriangleMesh())
        assert not m.has_half_edges()
        assert m.get_boundaries() == []
        assert m.is_empty()

    def test_isolated_vertices_have_empty_fans(self):
        mesh = TriangleMesh(vertices=np.zeros((5, 3)), triangles=[[0, 1, 2]])
        m = build_half_edge_mesh(mesh)
        assert m.ordered_half_edge_from_vertex[3] == ()
        assert m.ordered_half_edge_from_vertex[4] == ()
        assert m.get_boundaries() == [[0, 1, 2]]


# Failures

class TestRejections:
    def test_nonmanifold_edge(self):
        mesh = TriangleMesh(vertices=np.zeros((5, 3)), triangles=[[0, 1, 2], [0, 1, 3], [0, 1, 4]])
        with pytest.raises(NonManifoldEdgeError) as exc:
            build_half_edge_mesh(mesh)
        assert exc.value.kind == "NonManifoldEdge"
        assert exc.value.context["edge"] == (0, 1)

    def test_inconsistent_orientation(self):
        mesh = TriangleMesh(vertices=np.zeros((4, 3)), triangles=[[0, 1, 2], [0, 3, 2]])
        with pytest.raises(NonManifoldEdgeError):
            build_half_edge_mesh(mesh)

    def test_degenerate_triangle(self):
        mesh = TriangleMesh(vertices=np.zeros((3, 3)), triangles=[[0, 1, 1]])
        with pytest.raises(DegenerateTriangleError) as exc:
            build_half_edge_mesh(mesh)
        assert exc.value.context["triangle"] == 0

    @pytest.mark.parametrize("tri", [[0, 1, 3], [-1, 1, 2]])
    def test_invalid_index(self, tri):
        mesh = TriangleMesh(vertices=np.zeros((3, 3)), triangles=[tri])
        with pytest.raises(InvalidIndexError):
            build_half_edge_mesh(mesh)

    def test_bowtie_vertex(self):
        # Two triangles touching only at vertex 0
        mesh = TriangleMesh(vertices=np.zeros((5, 3)), triangles=[[0, 1, 2], [0, 3, 4]])
        with pytest.raises(NonManifoldVertexError) as exc:
            build_half_edge_mesh(mesh)
        assert exc.value.context["vertex"] == 0

    def test_two_closed_fans_at_vertex(self):
        # Two tetrahedra glued at a single vertex
        t = [[0, 1, 2], [0, 2, 3], [0, 3, 1], [1, 3, 2]]
        t2 = [[0 if v == 0 else v + 3 for v in tri] for tri in t]
        mesh = TriangleMesh(vertices=np.zeros((7, 3)), triangles=t + t2)
        with pytest.raises(NonManifoldVertexError):
            build_half_edge_mesh(mesh)

    def test_failure_logged_with_kind(self, caplog):
        with caplog.at_level(logging.WARNING, logger="topology.builder"):
            with pytest.raises(BuildError):
                compute_half_edges(np.array([[0, 1, 1]]), 2)
        assert "DegenerateTriangle" in caplog.text

    def test_errors_share_base(self):
        assert issubclass(NonManifoldEdgeError, BuildError)
        assert "edge=" in str(NonManifoldEdgeError("x", {"edge": (0, 1)}))


class TestDeterminism:
    def test_rebuild_is_identical(self):
        src = create_open_cylinder(resolution=6)
        a = build_half_edge_mesh(src)
        b = build_half_edge_mesh(src)
        assert a.half_edges == b.half_edges
        assert a.ordered_half_edge_from_vertex == b.ordered_half_edge_from_vertex

    def test_compute_half_edges_without_positions(self):
        src = as_triangle_source(TriangleMesh(triangles=[[0, 1, 2]]), vertex_count=3)
        half_edges, ordered = compute_half_edges(src.triangles, src.vertex_count)
        assert len(half_edges) == 3
        assert ordered == ((0,), (1,), (2,))

    def test_source_does_not_alias_input(self):
        tris = np.array([[0, 1, 2]])
        mesh = TriangleMesh(vertices=np.zeros((3, 3)), triangles=tris)
        m = build_half_edge_mesh(mesh)
        mesh.triangles[0, 0] = 2
        assert m.triangles[0].tolist() == [0, 1, 2]
