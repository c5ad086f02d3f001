# -*- coding: utf-8 -*-
# Edgexus/topology/traversal.py

"""
Project: Edgexus
Date: 10/19/2026

Purpose:
--------
The two traversal primitives every higher-level query is expressed with. Both are pure
functions over a half-edge sequence, so the builder can use them before a store exists.

Main Tasks:
-----------
   - next_around_vertex:  CCW successor among the half-edges leaving src(h).
   - next_along_boundary: successor of a boundary half-edge on its boundary loop.

Notes:
------
   - Triangles are CCW; for h = (v, a) in (v, a, b), next(next(h)) = (b, v) points into v,
     and its twin (v, b) leaves v in the neighbouring triangle.
   - No exceptions on bad input: a non-boundary argument to `next_along_boundary` is
     logged and answered with None.
"""

import logging
from typing import Optional, Sequence
from .half_edge import HalfEdge

logger = logging.getLogger(__name__)


def next_around_vertex(half_edges: Sequence[HalfEdge], h: int) -> Optional[int]:
    """
    Next half-edge out of src(h) in CCW order, or None when a boundary is hit.

    Defined as twin(next(next(h))).
    """
    incoming = half_edges[half_edges[h].next].next
    return half_edges[incoming].twin


def next_along_boundary(half_edges: Sequence[HalfEdge], h: int) -> Optional[int]:
    """
    Next boundary half-edge after boundary half-edge `h` on the same loop.

    Starting from next(h), repeatedly apply twin∘next until a boundary half-edge is
    reached. The result satisfies src(result) == dst(h).

    Parameters
    ----------
    half_edges : sequence of HalfEdge
        Flat half-edge array of a well-formed store.
    h : int
        Index of a boundary half-edge.

    Returns
    -------
    int or None
        Successor index; None if `h` is not on the boundary.
    """
    if not half_edges[h].is_boundary():
        logger.warning("[next_along_boundary] half-edge %d is not on the boundary.", h)
        return None

    cur = half_edges[h].next
    # Rotates clockwise around dst(h); bounded by the vertex degree on a manifold.
    for _ in range(len(half_edges)):
        he = half_edges[cur]
        if he.is_boundary():
            return cur
        cur = half_edges[he.twin].next
        if cur == half_edges[h].next:
            break
    logger.warning("[next_along_boundary] no boundary successor found for half-edge %d.", h)
    return None
