# -*- coding: utf-8 -*-
# Edgexus/topology/mesh.py

"""
Project: Edgexus
Date: 10/19/2026

Purpose:
--------
The topology store: carried geometry (vertices, optional normals/colors), the triangle
list, the half-edge array and per-vertex CCW outgoing half-edges, plus the boundary and
one-ring queries and the disjoint-union operator.

Main Tasks:
-----------
   - build_half_edge_mesh / HalfEdgeTriangleMesh.create_from_triangle_mesh: builder entry.
   - Read accessors and predicates (has_half_edges, is_empty, ...).
   - Queries: boundary_half_edges_from_vertex, boundary_vertices_from_vertex,
     get_boundaries, is_boundary_vertex, one_ring_vertices, one_ring_triangles.
   - Composition: combined / `+` (new store), merge / `+=` (replaces receiver), clear.

Notes:
------
   - Immutable through the query surface: arrays are flagged read-only, half-edges and
     ordered lists are tuples. `clear` and `merge` are the only writers.
   - Queries never raise on a well-formed store; out-of-range vertex indices are the
     caller's responsibility.
"""

import logging
from typing import Any, List, Tuple
import numpy as np
from geometry.triangle_mesh import TriangleMesh, TriangleSource, as_triangle_source
from .builder import compute_half_edges
from .half_edge import HalfEdge
from .traversal import next_around_vertex, next_along_boundary

logger = logging.getLogger(__name__)


def _frozen(arr: np.ndarray) -> np.ndarray:
    out = np.array(arr, copy=True)
    out.flags.writeable = False
    return out


def _empty3(dtype=float) -> np.ndarray:
    return _frozen(np.empty((0, 3), dtype=dtype))


class HalfEdgeTriangleMesh:
    """
    Half-edge topology store over an indexed triangle mesh.

    Attributes
    ----------
    vertices : np.ndarray
        (N,3) positions carried from the source (may be (0,3) if only a count was given).
    vertex_normals, vertex_colors : np.ndarray
        (N,3) or (0,3); carried, not inspected.
    triangles : np.ndarray
        (M,3) int64 connectivity.
    triangle_normals : np.ndarray
        (M,3) copied verbatim if present, else (0,3).
    half_edges : tuple of HalfEdge
        Length 3M; half-edges of triangle i live at 3i, 3i+1, 3i+2.
    ordered_half_edge_from_vertex : tuple of tuple of int
        CCW outgoing half-edges per vertex; boundary vertices start on the boundary.
    """

    def __init__(self):
        self.clear()

    # --------------------
    # Construction
    # --------------------
    @classmethod
    def create_from_triangle_mesh(cls, mesh: Any) -> "HalfEdgeTriangleMesh":
        """Build a store from any triangle source (see `as_triangle_source`)."""
        return build_half_edge_mesh(mesh)

    def _assign(self, source: TriangleSource, half_edges, ordered) -> None:
        self._vertex_count = int(source.vertex_count)
        self.vertices = _frozen(source.vertices)
        self.vertex_normals = _frozen(source.vertex_normals)
        self.vertex_colors = _frozen(source.vertex_colors)
        self.triangles = _frozen(source.triangles)
        self.triangle_normals = _frozen(source.triangle_normals)
        self.half_edges: Tuple[HalfEdge, ...] = half_edges
        self.ordered_half_edge_from_vertex: Tuple[Tuple[int, ...], ...] = ordered

    def clear(self) -> "HalfEdgeTriangleMesh":
        """Return to the empty state, discarding all arrays."""
        self._vertex_count = 0
        self.vertices = _empty3()
        self.vertex_normals = _empty3()
        self.vertex_colors = _empty3()
        self.triangles = _empty3(np.int64)
        self.triangle_normals = _empty3()
        self.half_edges = ()
        self.ordered_half_edge_from_vertex = ()
        return self

    # --------------------
    # Accessors / predicates
    # --------------------
    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    def has_half_edges(self) -> bool:
        return len(self.half_edges) > 0

    def has_vertices(self) -> bool:
        return self._vertex_count > 0

    def has_triangles(self) -> bool:
        return len(self.triangles) > 0

    def has_vertex_normals(self) -> bool:
        return self.has_vertices() and len(self.vertex_normals) == self._vertex_count

    def has_vertex_colors(self) -> bool:
        return self.has_vertices() and len(self.vertex_colors) == self._vertex_count

    def has_triangle_normals(self) -> bool:
        return self.has_triangles() and len(self.triangle_normals) == len(self.triangles)

    def is_empty(self) -> bool:
        return not self.has_vertices()

    def to_triangle_mesh(self) -> TriangleMesh:
        """Copy the carried geometry back into a mutable TriangleMesh."""
        return TriangleMesh(
            vertices=self.vertices,
            triangles=self.triangles,
            vertex_normals=self.vertex_normals,
            vertex_colors=self.vertex_colors,
            triangle_normals=self.triangle_normals,
        )

    def _as_source(self) -> TriangleSource:
        return TriangleSource(
            vertex_count=self._vertex_count,
            triangles=self.triangles,
            triangle_normals=self.triangle_normals,
            vertices=self.vertices,
            vertex_normals=self.vertex_normals,
            vertex_colors=self.vertex_colors,
        )

    def __repr__(self):
        return "HalfEdgeTriangleMesh(vertices={}, triangles={}, half_edges={})".format(
            self._vertex_count, len(self.triangles), len(self.half_edges))

    # --------------------
    # Traversal
    # --------------------
    def next_half_edge_from_vertex(self, h: int):
        """CCW successor of `h` around src(h); None at a boundary."""
        return next_around_vertex(self.half_edges, h)

    def next_half_edge_on_boundary(self, h: int):
        """Successor of boundary half-edge `h` along its loop; None if `h` is interior."""
        return next_along_boundary(self.half_edges, h)

    # --------------------
    # Queries
    # --------------------
    def _fan(self, vertex: int) -> Tuple[int, ...]:
        if not 0 <= vertex < len(self.ordered_half_edge_from_vertex):
            return ()
        return self.ordered_half_edge_from_vertex[vertex]

    def _boundary_start(self, vertex: int):
        fan = self._fan(vertex)
        if not fan or not self.half_edges[fan[0]].is_boundary():
            return None
        return fan[0]

    def _walk_boundary(self, start: int) -> List[int]:
        loop = [start]
        cur = next_along_boundary(self.half_edges, start)
        while cur is not None and cur != start:
            loop.append(cur)
            cur = next_along_boundary(self.half_edges, cur)
        return loop

    def is_boundary_vertex(self, vertex: int) -> bool:
        return self._boundary_start(vertex) is not None

    def boundary_half_edges_from_vertex(self, vertex: int) -> List[int]:
        """
        Boundary loop through `vertex` as half-edge indices, starting with the boundary
        half-edge leaving `vertex`; [] if `vertex` is not on the boundary.
        """
        start = self._boundary_start(vertex)
        if start is None:
            return []
        return self._walk_boundary(start)

    def boundary_vertices_from_vertex(self, vertex: int) -> List[int]:
        """Same walk as `boundary_half_edges_from_vertex`, reporting each source vertex."""
        return [self.half_edges[h].src for h in self.boundary_half_edges_from_vertex(vertex)]

    def get_boundaries(self) -> List[List[int]]:
        """
        Every boundary loop exactly once, as vertex lists. Loops are ordered by, and
        start at, their lowest vertex index.
        """
        boundaries: List[List[int]] = []
        visited = np.zeros(len(self.half_edges), dtype=bool)
        for v in range(len(self.ordered_half_edge_from_vertex)):
            start = self._boundary_start(v)
            if start is None or visited[start]:
                continue
            loop = self._walk_boundary(start)
            visited[loop] = True
            boundaries.append([self.half_edges[h].src for h in loop])
        return boundaries

    def one_ring_triangles(self, vertex: int) -> List[int]:
        """Triangles incident to `vertex` in CCW fan order."""
        return [self.half_edges[h].triangle_index for h in self._fan(vertex)]

    def one_ring_vertices(self, vertex: int) -> List[int]:
        """
        Neighbours of `vertex` in CCW order. On an open fan the last neighbour is the
        source of the boundary half-edge entering `vertex`.
        """
        fan = self._fan(vertex)
        ring = [self.half_edges[h].dst for h in fan]
        if fan and self.half_edges[fan[0]].is_boundary():
            last = self.half_edges[fan[-1]]
            closing = self.half_edges[self.half_edges[last.next].next]
            ring.append(closing.src)
        return ring

    # --------------------
    # Composition
    # --------------------
    def combined(self, other: "HalfEdgeTriangleMesh") -> "HalfEdgeTriangleMesh":
        """Disjoint union A ⊕ B as a new store; neither operand is modified."""
        if other.is_empty():
            return build_half_edge_mesh(self._as_source())
        if self.is_empty():
            return build_half_edge_mesh(other._as_source())
        return build_half_edge_mesh(_concat_sources(self._as_source(), other._as_source()))

    def merge(self, other: "HalfEdgeTriangleMesh") -> "HalfEdgeTriangleMesh":
        """In-place disjoint union; the receiver changes only if the rebuild succeeds."""
        if other.is_empty():
            return self
        result = self.combined(other)
        self._assign(result._as_source(), result.half_edges, result.ordered_half_edge_from_vertex)
        return self

    def __add__(self, other):
        if not isinstance(other, HalfEdgeTriangleMesh):
            return NotImplemented
        return self.combined(other)

    def __iadd__(self, other):
        if not isinstance(other, HalfEdgeTriangleMesh):
            return NotImplemented
        return self.merge(other)


# -------------------------
# Helpers
# -------------------------
def _concat_attr(a: np.ndarray, a_n: int, b: np.ndarray, b_n: int) -> np.ndarray:
    """
    Concatenate a per-element attribute only when both sides carry it (or the left side
    has no elements yet); otherwise the attribute is dropped.
    """
    a_has = a_n > 0 and len(a) == a_n
    b_has = b_n > 0 and len(b) == b_n
    if (a_n == 0 or a_has) and b_has:
        return np.vstack((a.reshape(-1, 3), b))
    return np.empty((0, 3), dtype=float)


def _concat_sources(a: TriangleSource, b: TriangleSource) -> TriangleSource:
    """Concatenate two sources, rebasing b's vertex indices by a.vertex_count."""
    k = int(a.vertex_count)
    na, nb = int(a.vertex_count), int(b.vertex_count)
    ma, mb = len(a.triangles), len(b.triangles)

    if len(a.vertices) == na and len(b.vertices) == nb:
        vertices = np.vstack((a.vertices.reshape(-1, 3), b.vertices.reshape(-1, 3)))
    else:
        vertices = np.empty((0, 3), dtype=float)

    triangles = np.vstack((a.triangles.reshape(-1, 3), b.triangles.reshape(-1, 3) + k)).astype(np.int64)

    return TriangleSource(
        vertex_count=na + nb,
        triangles=triangles,
        triangle_normals=_concat_attr(a.triangle_normals, ma, b.triangle_normals, mb),
        vertices=vertices,
        vertex_normals=_concat_attr(a.vertex_normals, na, b.vertex_normals, nb),
        vertex_colors=_concat_attr(a.vertex_colors, na, b.vertex_colors, nb),
    )


def build_half_edge_mesh(source: Any) -> HalfEdgeTriangleMesh:
    """
    Build a HalfEdgeTriangleMesh from a triangle source.

    Parameters
    ----------
    source : Any
        TriangleMesh, TriangleSource, or any object accepted by `as_triangle_source`.

    Returns
    -------
    HalfEdgeTriangleMesh

    Raises
    ------
    BuildError
        InvalidIndexError, DegenerateTriangleError, NonManifoldEdgeError or
        NonManifoldVertexError; no store is produced.
    ValueError
        If the source arrays have inconsistent shapes.
    """
    src = as_triangle_source(source)
    half_edges, ordered = compute_half_edges(src.triangles, src.vertex_count)
    mesh = HalfEdgeTriangleMesh()
    mesh._assign(src, half_edges, ordered)
    logger.info(
        "[build_half_edge_mesh] %d vertices, %d triangles, %d half-edges.",
        mesh.vertex_count, len(mesh.triangles), len(mesh.half_edges),
    )
    return mesh
