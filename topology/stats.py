# -*- coding: utf-8 -*-
# Edgexus/topology/stats.py

"""
Project: Edgexus
Date: 10/19/2026

Purpose:
--------
Compute basic topological statistics of a built half-edge mesh: global inventory and
per-vertex valence distribution.

Main Tasks:
-----------
    1) `inventory`:
        - Count vertices, triangles, half-edges, boundary half-edges and edges.
        - Boundary loops (count and lengths), Euler characteristic V - E + F, closedness.
    2) `valence`:
        - Outgoing half-edges per vertex (|OOE[v]|), summarized with min/max/mean/std
          and a histogram over referenced vertices.
    3) `summarize`: both of the above in one dict, ready for `export`.

Notes:
------
- Edges E = interior half-edge pairs + boundary half-edges.
- Histogram is returned as {valence: frequency}.
"""

from typing import Any, Dict
import numpy as np
from .mesh import HalfEdgeTriangleMesh


def inventory(m: HalfEdgeTriangleMesh) -> dict:
    """
    Build a global inventory of the store.

    Returns
    -------
    dict
        {
          "n_vertices", "n_triangles", "n_half_edges", "n_boundary_half_edges",
          "n_edges", "n_boundaries", "boundary_lengths", "euler_characteristic",
          "is_closed"
        }
    """
    n_he = len(m.half_edges)
    n_boundary = sum(1 for he in m.half_edges if he.is_boundary())
    n_edges = (n_he - n_boundary) // 2 + n_boundary
    loops = m.get_boundaries()
    n_v = m.vertex_count
    n_f = len(m.triangles)

    return {
        "n_vertices": n_v,
        "n_triangles": n_f,
        "n_half_edges": n_he,
        "n_boundary_half_edges": n_boundary,
        "n_edges": n_edges,
        "n_boundaries": len(loops),
        "boundary_lengths": [len(b) for b in loops],
        "euler_characteristic": n_v - n_edges + n_f,
        "is_closed": bool(n_he > 0 and n_boundary == 0),
    }


def valence(m: HalfEdgeTriangleMesh) -> dict:
    """
    Outgoing half-edge count per vertex, over vertices with at least one triangle.

    Returns zeros and an empty hist if no triangles exist.
    """
    counts = np.array([len(fan) for fan in m.ordered_half_edge_from_vertex], dtype=int)
    nonzero = counts[counts > 0]
    if nonzero.size == 0:
        return {"min": 0, "max": 0, "mean": 0.0, "std": 0.0, "hist": {}}

    unique, freq = np.unique(nonzero, return_counts=True)
    return {
        "min": int(nonzero.min()),
        "max": int(nonzero.max()),
        "mean": float(nonzero.mean()),
        "std": float(nonzero.std()),
        "hist": {int(u): int(f) for u, f in zip(unique, freq)},
    }


def summarize(m: HalfEdgeTriangleMesh) -> Dict[str, Any]:
    return {"inventory": inventory(m), "valence": valence(m)}
