# -*- coding: utf-8 -*-
# Edgexus/topology/__init__.py

"""
Project: Edgexus
Date: 10/19/2026

Modules:
--------
- half_edge:  HalfEdge record (src/dst pair, triangle, next, twin).
- traversal:  next_around_vertex / next_along_boundary primitives.
- builder:    triangle list -> half-edges + CCW outgoing fans, manifold checks.
- mesh:       HalfEdgeTriangleMesh store, boundary/one-ring queries, disjoint union.
- errors:     typed build errors (InvalidIndex, DegenerateTriangle, NonManifold*).
- checks:     report-all diagnostics over a raw triangle list.
- stats:      inventory and valence of a built store.
- export:     summary writers (JSON/CSV).
"""

from .errors import (
    BuildError,
    InvalidIndexError,
    DegenerateTriangleError,
    NonManifoldEdgeError,
    NonManifoldVertexError,
)
from .half_edge import HalfEdge
from .mesh import HalfEdgeTriangleMesh, build_half_edge_mesh

__all__ = [
    "BuildError",
    "InvalidIndexError",
    "DegenerateTriangleError",
    "NonManifoldEdgeError",
    "NonManifoldVertexError",
    "HalfEdge",
    "HalfEdgeTriangleMesh",
    "build_half_edge_mesh",
    "builder", "checks", "errors", "export", "half_edge", "mesh", "stats", "traversal",
]
