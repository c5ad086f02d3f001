# -*- coding: utf-8 -*-
# Edgexus/geometry/io.py

"""
Project: Edgexus
Date: 10/19/2026

Purpose:
--------
Read and write triangle meshes through `meshio`, so any format it understands (OBJ, PLY,
STL, VTK/VTU, Gmsh .msh, ...) can feed the half-edge builder.

Main Tasks:
-----------
    1) `read_triangle_mesh`: meshio.read -> TriangleMesh (triangle cells concatenated in
       file order; other cell types ignored; 2D points padded to XYZ).
    2) Carry per-point normals/colors when meshio exposes them under common names.
    3) `write_triangle_mesh`: TriangleMesh -> meshio.Mesh -> file.

Notes:
------
- Vertex indices are kept as stored in the file; no welding or de-duplication.
- A file without triangle cells is an error: there is nothing to build topology from.
"""

import os
import logging
from typing import Optional
import numpy as np
from .triangle_mesh import TriangleMesh

logger = logging.getLogger(__name__)

_NORMAL_KEYS = ("normals", "Normals", "normal")
_COLOR_KEYS = ("colors", "Colors", "RGB", "rgb")


def _xyz(points: np.ndarray) -> np.ndarray:
    pts = np.asarray(points, dtype=float)
    if pts.ndim != 2:
        raise ValueError(f"Points must be a 2D array, got shape {pts.shape}.")
    if pts.shape[1] == 3:
        return pts
    out = np.zeros((pts.shape[0], 3), dtype=float)
    k = min(pts.shape[1], 3)
    out[:, :k] = pts[:, :k]
    return out


def _point_attr(point_data: dict, keys, n: int) -> Optional[np.ndarray]:
    for k in keys:
        if k in point_data:
            arr = np.asarray(point_data[k], dtype=float)
            if arr.ndim == 2 and arr.shape == (n, 3):
                return arr
    return None


def read_triangle_mesh(path: str) -> TriangleMesh:
    """
    Load a triangle mesh file into a TriangleMesh.

    Parameters
    ----------
    path : str
        Mesh file readable by meshio.

    Returns
    -------
    TriangleMesh

    Raises
    ------
    FileNotFoundError
        If `path` does not exist.
    ValueError
        If the file holds no triangle cells.
    """
    import meshio

    if not os.path.exists(path):
        raise FileNotFoundError(f"[read_triangle_mesh] File not found: {path}")

    m = meshio.read(path)
    pts = _xyz(m.points)

    blocks = [np.asarray(cb.data, dtype=np.int64) for cb in m.cells if getattr(cb, "type", None) == "triangle"]
    if not blocks:
        raise ValueError(f"[read_triangle_mesh] No triangle cells in {path}")
    tris = np.vstack(blocks)

    point_data = getattr(m, "point_data", {}) or {}
    normals = _point_attr(point_data, _NORMAL_KEYS, len(pts))
    colors = _point_attr(point_data, _COLOR_KEYS, len(pts))

    logger.info("[read_triangle_mesh] %s: %d points, %d triangles.", path, len(pts), len(tris))
    return TriangleMesh(vertices=pts, triangles=tris, vertex_normals=normals, vertex_colors=colors)


def write_triangle_mesh(mesh: TriangleMesh, path: str, file_format: Optional[str] = None) -> str:
    """
    Write vertices/triangles (and per-vertex normals/colors if present) with meshio.

    Returns
    -------
    str
        Written file path.
    """
    import meshio

    folder = os.path.dirname(os.path.abspath(path))
    if folder and not os.path.exists(folder):
        os.makedirs(folder, exist_ok=True)

    point_data = {}
    if mesh.has_vertex_normals():
        point_data["normals"] = np.asarray(mesh.vertex_normals, dtype=float)
    if mesh.has_vertex_colors():
        point_data["colors"] = np.asarray(mesh.vertex_colors, dtype=float)

    out = meshio.Mesh(
        points=np.asarray(mesh.vertices, dtype=float),
        cells=[("triangle", np.asarray(mesh.triangles, dtype=np.int64))],
        point_data=point_data or None,
    )
    meshio.write(path, out, file_format=file_format)
    logger.info("[write_triangle_mesh] %s: %d points, %d triangles.", path, len(mesh.vertices), len(mesh.triangles))
    return path
