# -*- coding: utf-8 -*-
# Edgexus/geometry/primitives.py

"""
Project: Edgexus
Date: 10/19/2026

Purpose:
--------
Small, consistently oriented (outward, CCW) triangle meshes for demos and tests.

Main Tasks:
-----------
- create_triangle:       one triangle, one boundary loop of length 3.
- create_square:         unit square split along its (0,2) diagonal.
- create_tetrahedron:    closed surface, 4 triangles, 6 edges.
- create_open_cylinder:  tube with unglued top and bottom rings (two boundary loops).
"""

import numpy as np
from .triangle_mesh import TriangleMesh


def create_triangle() -> TriangleMesh:
    verts = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]])
    return TriangleMesh(vertices=verts, triangles=[[0, 1, 2]])


def create_square(size: float = 1.0) -> TriangleMesh:
    s = float(size)
    verts = np.array([[0.0, 0.0, 0.0], [s, 0.0, 0.0], [s, s, 0.0], [0.0, s, 0.0]])
    return TriangleMesh(vertices=verts, triangles=[[0, 1, 2], [0, 2, 3]])


def create_tetrahedron(radius: float = 1.0) -> TriangleMesh:
    """
    Regular tetrahedron with outward-facing triangles
    [(0,1,2), (0,2,3), (0,3,1), (1,3,2)].
    """
    r = float(radius)
    verts = r * np.array([
        [0.0, 0.0, 1.0],
        [np.sqrt(8.0 / 9.0), 0.0, -1.0 / 3.0],
        [-np.sqrt(2.0 / 9.0), np.sqrt(2.0 / 3.0), -1.0 / 3.0],
        [-np.sqrt(2.0 / 9.0), -np.sqrt(2.0 / 3.0), -1.0 / 3.0],
    ])
    tris = [[0, 1, 2], [0, 2, 3], [0, 3, 1], [1, 3, 2]]
    return TriangleMesh(vertices=verts, triangles=tris)


def create_open_cylinder(resolution: int = 8, radius: float = 1.0, height: float = 1.0) -> TriangleMesh:
    """
    Open tube: bottom ring 0..n-1 at z=0, top ring n..2n-1 at z=height, two triangles
    per side quad. Both rings are left unglued.

    Parameters
    ----------
    resolution : int
        Vertices per ring (n >= 3).
    radius, height : float
        Tube dimensions.

    Raises
    ------
    ValueError
        If resolution < 3.
    """
    n = int(resolution)
    if n < 3:
        raise ValueError("resolution must be >= 3.")
    theta = 2.0 * np.pi * np.arange(n) / n
    ring = np.stack([radius * np.cos(theta), radius * np.sin(theta), np.zeros(n)], axis=1)
    top = ring.copy()
    top[:, 2] = float(height)
    verts = np.vstack((ring, top))

    tris = []
    for i in range(n):
        a, b = i, (i + 1) % n
        c, d = n + i, n + (i + 1) % n
        tris.append([a, b, d])
        tris.append([a, d, c])
    return TriangleMesh(vertices=verts, triangles=tris)
