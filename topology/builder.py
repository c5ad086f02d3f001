# -*- coding: utf-8 -*-
# Edgexus/topology/builder.py

"""
Project: Edgexus
Date: 10/19/2026

Purpose:
--------
Turn an ordered triangle list into half-edge connectivity: the flat half-edge array
(three per triangle, in declared order) and the CCW-ordered outgoing half-edges of
every vertex. Rejects out-of-range indices, degenerate triangles and non-manifold
configurations.

Main Tasks:
-----------
   1) Validate indices (InvalidIndexError) and emit half-edges 3i, 3i+1, 3i+2 with
      pairs (a,b), (b,c), (c,a) and a 3-cycle of `next` (DegenerateTriangleError).
   2) Map each oriented pair to its half-edge; a repeat is a NonManifoldEdgeError.
   3) Pair twins by looking up the reversed pair.
   4) Walk each vertex's fan CCW from its boundary half-edge (if any, else the lowest
      index); a fan that misses outgoing half-edges is a NonManifoldVertexError.

Notes:
------
   - All-or-nothing: results are only returned when every step succeeded.
   - Deterministic: identical input gives identical indices and orderings.
   - Complexity O(M) expected for M triangles (dict lookups).
"""

import logging
from typing import Dict, List, Tuple
import numpy as np
from .errors import (
    BuildError,
    InvalidIndexError,
    DegenerateTriangleError,
    NonManifoldEdgeError,
    NonManifoldVertexError,
)
from .half_edge import HalfEdge
from .traversal import next_around_vertex

logger = logging.getLogger(__name__)


# -------------------------
# Steps
# -------------------------
def _validate_indices(triangles: np.ndarray, vertex_count: int) -> None:
    """Every vertex index must lie in [0, vertex_count)."""
    if len(triangles) == 0:
        return
    bad = np.nonzero(((triangles < 0) | (triangles >= vertex_count)).any(axis=1))[0]
    if bad.size:
        i = int(bad[0])
        raise InvalidIndexError(
            "Triangle references a vertex outside [0, N).",
            {"triangle": i, "vertices": tuple(int(v) for v in triangles[i]),
             "vertex_count": int(vertex_count), "n_bad": int(bad.size)},
        )


def _emit_half_edges(triangles: np.ndarray, vertex_count: int):
    """
    Emit (pairs, triangle ids, next ids) per half-edge and bucket them by source vertex.
    """
    pairs: List[Tuple[int, int]] = []
    from_vertex: List[List[int]] = [[] for _ in range(vertex_count)]
    for i, tri in enumerate(triangles.tolist()):
        a, b, c = tri
        if a == b or b == c or c == a:
            raise DegenerateTriangleError(
                "Triangle references the same vertex more than once.",
                {"triangle": i, "vertices": (a, b, c)},
            )
        base = 3 * i
        for k, (s, d) in enumerate(((a, b), (b, c), (c, a))):
            pairs.append((s, d))
            from_vertex[s].append(base + k)
    return pairs, from_vertex


def _index_oriented_edges(pairs: List[Tuple[int, int]]) -> Dict[Tuple[int, int], int]:
    """(src, dst) -> half-edge index; duplicates violate the manifold edge rule."""
    edge_to_he: Dict[Tuple[int, int], int] = {}
    for h, pair in enumerate(pairs):
        prev = edge_to_he.get(pair)
        if prev is not None:
            raise NonManifoldEdgeError(
                "Oriented edge claimed by more than one half-edge "
                "(duplicated or inconsistently oriented triangles).",
                {"edge": pair, "half_edges": (prev, h), "triangles": (prev // 3, h // 3)},
            )
        edge_to_he[pair] = h
    return edge_to_he


def _order_fan(half_edges: Tuple[HalfEdge, ...], vertex: int, outgoing: List[int]) -> Tuple[int, ...]:
    """
    CCW walk around `vertex` starting from its boundary half-edge (lowest index wins),
    or from its lowest-indexed outgoing half-edge on a closed fan.
    """
    if not outgoing:
        return ()
    start = outgoing[0]
    for h in outgoing:
        if half_edges[h].is_boundary():
            start = h
            break

    ordered = [start]
    cur = next_around_vertex(half_edges, start)
    while cur is not None and cur != start and len(ordered) <= len(outgoing):
        ordered.append(cur)
        cur = next_around_vertex(half_edges, cur)

    if len(ordered) != len(outgoing):
        raise NonManifoldVertexError(
            "Triangles around vertex do not form a single fan.",
            {"vertex": vertex, "outgoing": len(outgoing), "visited": len(ordered)},
        )
    return tuple(ordered)


# -------------------------
# Public API
# -------------------------
def compute_half_edges(triangles: np.ndarray, vertex_count: int):
    """
    Build half-edges and per-vertex CCW outgoing lists for a triangle list.

    Parameters
    ----------
    triangles : np.ndarray
        (M,3) integer connectivity; row order defines triangle indices, column order
        defines orientation.
    vertex_count : int
        Number of vertices N; all indices must lie in [0, N).

    Returns
    -------
    (tuple of HalfEdge, tuple of tuple of int)
        `half_edges` (length 3M) and `ordered_half_edge_from_vertex` (length N).

    Raises
    ------
    InvalidIndexError, DegenerateTriangleError, NonManifoldEdgeError, NonManifoldVertexError
    """
    triangles = np.asarray(triangles, dtype=np.int64).reshape(-1, 3)
    vertex_count = int(vertex_count)
    try:
        _validate_indices(triangles, vertex_count)
        pairs, from_vertex = _emit_half_edges(triangles, vertex_count)
        edge_to_he = _index_oriented_edges(pairs)

        half_edges = tuple(
            HalfEdge(
                vertex_indices=(s, d),
                triangle_index=h // 3,
                next=3 * (h // 3) + (h + 1) % 3,
                twin=edge_to_he.get((d, s)),
            )
            for h, (s, d) in enumerate(pairs)
        )

        ordered = tuple(
            _order_fan(half_edges, v, from_vertex[v]) for v in range(vertex_count)
        )
    except BuildError as e:
        logger.warning("[compute_half_edges] %s: %s", e.kind, e)
        raise

    logger.debug(
        "[compute_half_edges] %d vertices, %d triangles -> %d half-edges (%d boundary).",
        vertex_count, len(triangles), len(half_edges),
        sum(1 for he in half_edges if he.is_boundary()),
    )
    return half_edges, ordered
