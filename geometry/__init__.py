# -*- coding: utf-8 -*-
# Edgexus/geometry/__init__.py

"""
Project: Edgexus
Date: 10/19/2026

Modules:
--------
- triangle_mesh: TriangleMesh carrier and the read-only TriangleSource view consumed
                 by the half-edge builder.
- primitives:    oriented demo meshes (triangle, square, tetrahedron, open cylinder).
- io:            meshio-backed read/write of triangle meshes.
"""

__all__ = ["triangle_mesh", "primitives", "io"]
