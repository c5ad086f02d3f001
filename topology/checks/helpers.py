# -*- coding: utf-8 -*-
# Edgexus/topology/checks/helpers.py

"""
Project: Edgexus
Date: 10/19/2026

Purpose:
--------
Shared one-time precomputations (`precompute_cache`) used by all triangle-list checks,
so rules get fast, consistent access to connectivity without building half-edges.

Main Tasks:
-----------
- precompute_cache: build adjacency maps reused across rules:
    * valid_mask:        (M,) bool, triangles whose indices are all in range.
    * oriented_edges:    {(s,d): [half_edge_ids]} for valid triangles (h = 3*tri + k).
    * edge_triangles:    {(u,v): [tri_ids]} with u < v (undirected edges).
    * vertex_triangles:  {vertex: [tri_ids]} (vertex -> incident triangles).

Notes:
------
- Out-of-range and degenerate triangles are excluded from the adjacency maps; they are
  reported by their own rules.
- The cache is shared across all rules in a validation pass; rules must not mutate it.
"""

from typing import Any, Dict, List, Tuple
import numpy as np


def hash_edge(u: int, v: int) -> Tuple[int, int]:
    """Undirected edge key with sorted endpoints."""
    return (u, v) if u < v else (v, u)


def _valid_mask(triangles: np.ndarray, vertex_count: int) -> np.ndarray:
    """Triangles with all indices in range and three distinct vertices."""
    if len(triangles) == 0:
        return np.zeros(0, dtype=bool)
    in_range = ((triangles >= 0) & (triangles < vertex_count)).all(axis=1)
    distinct = (
        (triangles[:, 0] != triangles[:, 1])
        & (triangles[:, 1] != triangles[:, 2])
        & (triangles[:, 2] != triangles[:, 0])
    )
    return in_range & distinct


def precompute_cache(source, th: Dict[str, Any]) -> Dict[str, Any]:
    """
    Build all one-time structures needed by checks.
    """
    tris = np.asarray(source.triangles, dtype=np.int64).reshape(-1, 3)
    valid = _valid_mask(tris, int(source.vertex_count))

    oriented: Dict[Tuple[int, int], List[int]] = {}
    edge_tris: Dict[Tuple[int, int], List[int]] = {}
    vertex_tris: Dict[int, List[int]] = {}

    for i in np.nonzero(valid)[0].tolist():
        a, b, c = tris[i].tolist()
        for k, (s, d) in enumerate(((a, b), (b, c), (c, a))):
            oriented.setdefault((s, d), []).append(3 * i + k)
            edge_tris.setdefault(hash_edge(s, d), []).append(i)
        for n in (a, b, c):
            vertex_tris.setdefault(n, []).append(i)

    return {
        "triangles": tris,
        "valid_mask": valid,
        "oriented_edges": oriented,
        "edge_triangles": edge_tris,
        "vertex_triangles": vertex_tris,
    }


def count_fans(vertex: int, tri_ids: List[int], triangles: np.ndarray) -> int:
    """
    Number of edge-connected fans among the triangles around `vertex`.

    Two incident triangles belong to the same fan when they share an edge (vertex, w).
    A manifold vertex has exactly one fan.
    """
    parent = {t: t for t in tri_ids}

    def _find(t):
        while parent[t] != t:
            parent[t] = parent[parent[t]]
            t = parent[t]
        return t

    by_neighbor: Dict[int, int] = {}
    for t in tri_ids:
        for w in triangles[t].tolist():
            if w == vertex:
                continue
            first = by_neighbor.setdefault(w, t)
            if first != t:
                ra, rb = _find(first), _find(t)
                if ra != rb:
                    parent[rb] = ra

    return len({_find(t) for t in tri_ids})
