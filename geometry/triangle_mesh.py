# -*- coding: utf-8 -*-
# Edgexus/geometry/triangle_mesh.py

"""
Project: Edgexus
Date: 10/19/2026

Purpose:
--------
Minimal geometric carrier for indexed triangle meshes and the read-only view the
half-edge builder consumes.

Main Tasks:
-----------
- TriangleMesh: mutable container (vertices, triangles, optional per-vertex normals and
  colors, optional per-triangle normals) with simple predicates and bounds.
- TriangleSource: frozen, validated view (vertex count + ordered triangles + carried
  attributes) built from any object exposing the same attribute names.
- as_triangle_source: duck-typed adapter, in the spirit of `mesh_from_reader`.

Notes:
------
- Absent optional attributes are stored as empty arrays, never None.
- The topology core only reads `vertex_count`, `triangles` and `triangle_normals`;
  positions, normals and colors are carried through untouched.
"""

from dataclasses import dataclass, field
from typing import Any, Optional
import numpy as np


def _empty3(dtype=float) -> np.ndarray:
    return np.empty((0, 3), dtype=dtype)


def _as_rows3(arr: Any, dtype, name: str) -> np.ndarray:
    """Coerce `arr` to a (K,3) array of `dtype`; None/empty -> (0,3)."""
    if arr is None:
        return _empty3(dtype)
    a = np.asarray(arr)
    if a.size == 0:
        return _empty3(dtype)
    if a.ndim != 2 or a.shape[1] != 3:
        raise ValueError(f"{name} must be a (K, 3) array, got shape {a.shape}.")
    return np.array(a, dtype=dtype, copy=True)


def _as_triangles(arr: Any) -> np.ndarray:
    """Coerce triangle connectivity to (M,3) int64, rejecting non-integral input."""
    if arr is None:
        return _empty3(np.int64)
    a = np.asarray(arr)
    if a.size == 0:
        return _empty3(np.int64)
    if a.ndim != 2 or a.shape[1] != 3:
        raise ValueError(f"triangles must be a (M, 3) array, got shape {a.shape}.")
    if not np.issubdtype(a.dtype, np.integer):
        if not np.all(np.isfinite(a)) or not np.all(np.equal(np.mod(a, 1), 0)):
            raise ValueError("triangles must contain integral vertex indices.")
    return np.array(a, dtype=np.int64, copy=True)


@dataclass
class TriangleMesh:
    """
    Mutable triangle mesh carrier: positions, connectivity and optional attributes.
    """
    vertices: np.ndarray = field(default_factory=_empty3)                       # (N,3)
    triangles: np.ndarray = field(default_factory=lambda: _empty3(np.int64))    # (M,3)
    vertex_normals: np.ndarray = field(default_factory=_empty3)                 # (N,3) or (0,3)
    vertex_colors: np.ndarray = field(default_factory=_empty3)                  # (N,3) or (0,3)
    triangle_normals: np.ndarray = field(default_factory=_empty3)               # (M,3) or (0,3)

    def __post_init__(self):
        self.vertices = _as_rows3(self.vertices, float, "vertices")
        self.triangles = _as_triangles(self.triangles)
        self.vertex_normals = _as_rows3(self.vertex_normals, float, "vertex_normals")
        self.vertex_colors = _as_rows3(self.vertex_colors, float, "vertex_colors")
        self.triangle_normals = _as_rows3(self.triangle_normals, float, "triangle_normals")

    # --------------------
    # Predicates
    # --------------------
    def has_vertices(self) -> bool:
        return len(self.vertices) > 0

    def has_triangles(self) -> bool:
        return self.has_vertices() and len(self.triangles) > 0

    def has_vertex_normals(self) -> bool:
        return self.has_vertices() and len(self.vertex_normals) == len(self.vertices)

    def has_vertex_colors(self) -> bool:
        return self.has_vertices() and len(self.vertex_colors) == len(self.vertices)

    def has_triangle_normals(self) -> bool:
        return self.has_triangles() and len(self.triangle_normals) == len(self.triangles)

    def is_empty(self) -> bool:
        return not self.has_vertices()

    # --------------------
    # Bounds (carried geometry)
    # --------------------
    def get_min_bound(self) -> np.ndarray:
        if not self.has_vertices():
            return np.zeros(3)
        return self.vertices.min(axis=0)

    def get_max_bound(self) -> np.ndarray:
        if not self.has_vertices():
            return np.zeros(3)
        return self.vertices.max(axis=0)

    def get_center(self) -> np.ndarray:
        if not self.has_vertices():
            return np.zeros(3)
        return self.vertices.mean(axis=0)


def _check_attr_len(arr: np.ndarray, n: int, name: str, owner: str) -> np.ndarray:
    """Optional per-element arrays must be empty or match their owner's length."""
    if len(arr) and len(arr) != n:
        raise ValueError(f"{name} has {len(arr)} rows but there are {n} {owner}.")
    return arr


@dataclass(frozen=True)
class TriangleSource:
    """
    Read-only view over a triangle mesh as consumed by the half-edge builder.

    Fields are normalized and validated on construction, so a source built by hand
    obeys the same shape rules as one produced by `as_triangle_source`.
    """
    vertex_count: int
    triangles: Any                  # (M,3) int64
    triangle_normals: Any = None    # (M,3) or (0,3)
    vertices: Any = None            # (N,3) or (0,3) when only a count was given
    vertex_normals: Any = None      # (N,3) or (0,3)
    vertex_colors: Any = None       # (N,3) or (0,3)

    def __post_init__(self):
        n = int(self.vertex_count)
        if n < 0:
            raise ValueError("vertex_count must be >= 0.")
        triangles = _as_triangles(self.triangles)
        vertices = _as_rows3(self.vertices, float, "vertices")
        if len(vertices) and len(vertices) != n:
            raise ValueError(f"vertex_count={n} disagrees with {len(vertices)} vertex positions.")
        m = int(len(triangles))

        object.__setattr__(self, "vertex_count", n)
        object.__setattr__(self, "triangles", triangles)
        object.__setattr__(self, "vertices", vertices)
        object.__setattr__(self, "triangle_normals", _check_attr_len(
            _as_rows3(self.triangle_normals, float, "triangle_normals"),
            m, "triangle_normals", "triangles"))
        object.__setattr__(self, "vertex_normals", _check_attr_len(
            _as_rows3(self.vertex_normals, float, "vertex_normals"),
            n, "vertex_normals", "vertices"))
        object.__setattr__(self, "vertex_colors", _check_attr_len(
            _as_rows3(self.vertex_colors, float, "vertex_colors"),
            n, "vertex_colors", "vertices"))


def as_triangle_source(obj: Any, vertex_count: Optional[int] = None) -> TriangleSource:
    """
    Wrap any mesh-like object into a validated TriangleSource.

    Parameters
    ----------
    obj : Any
        Object exposing `triangles` and `vertices` (and optionally `triangle_normals`,
        `vertex_normals`, `vertex_colors`). A TriangleSource is returned unchanged,
        having been validated when it was constructed.
    vertex_count : int, optional
        Explicit vertex count; defaults to `obj.vertex_count`, then `len(obj.vertices)`.
        Required when the object carries no vertex positions.

    Returns
    -------
    TriangleSource

    Raises
    ------
    ValueError
        If shapes are inconsistent or no vertex count can be determined.
    """
    if isinstance(obj, TriangleSource) and vertex_count is None:
        return obj

    vertices = getattr(obj, "vertices", None)
    if vertex_count is None:
        vertex_count = getattr(obj, "vertex_count", None)
        if callable(vertex_count):
            vertex_count = vertex_count()
    if vertex_count is None:
        vertex_count = len(_as_rows3(vertices, float, "vertices"))

    return TriangleSource(
        vertex_count=int(vertex_count),
        triangles=getattr(obj, "triangles", None),
        triangle_normals=getattr(obj, "triangle_normals", None),
        vertices=vertices,
        vertex_normals=getattr(obj, "vertex_normals", None),
        vertex_colors=getattr(obj, "vertex_colors", None),
    )
