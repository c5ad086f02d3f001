# -*- coding: utf-8 -*-
# Edgexus/topology/checks/errors.py

"""
Project: Edgexus
Date: 10/19/2026

Purpose:
--------
ERROR-tier triangle-list rules. Each one mirrors a failure the half-edge builder would
raise, but collects every offender instead of stopping at the first.

Main Tasks:
-----------
   - Define checks with the uniform signature: `<rule_id>(src, th, cache) -> dict`.
   - Emit findings with a stable schema for machine consumption.

Finding Schema:
---------------
    {
      "id": "<rule_id>",
      "severity": "error",
      "ok": bool,
      "count": int,
      "examples": [...],     # capped by th["max_examples"]
      "details": {...},
    }
"""

from typing import Dict, List
import numpy as np
from .helpers import count_fans


def _finding(rule_id: str, ok: bool, count: int, examples: List, details: Dict, th: Dict) -> Dict:
    cap = int(th.get("max_examples", 25))
    return {
        "id": rule_id,
        "severity": "error",
        "ok": bool(ok),
        "count": int(count),
        "examples": list(examples)[:cap],
        "details": details or {},
    }


# ------------------------------------------------------------------------------------
# 1) invalid_indices
# ------------------------------------------------------------------------------------
def invalid_indices(src, th, cache) -> Dict:
    """Triangles referencing a vertex outside [0, N)."""
    tris = cache["triangles"]
    n = int(src.vertex_count)
    if len(tris):
        bad = np.nonzero(((tris < 0) | (tris >= n)).any(axis=1))[0].tolist()
    else:
        bad = []
    return _finding(
        "invalid_indices",
        ok=not bad,
        count=len(bad),
        examples=[(i, tuple(tris[i].tolist())) for i in bad],
        details={"vertex_count": n},
        th=th,
    )


# ------------------------------------------------------------------------------------
# 2) degenerate_triangles
# ------------------------------------------------------------------------------------
def degenerate_triangles(src, th, cache) -> Dict:
    """Triangles that repeat a vertex."""
    tris = cache["triangles"]
    if len(tris):
        rep = (tris[:, 0] == tris[:, 1]) | (tris[:, 1] == tris[:, 2]) | (tris[:, 2] == tris[:, 0])
        bad = np.nonzero(rep)[0].tolist()
    else:
        bad = []
    return _finding(
        "degenerate_triangles",
        ok=not bad,
        count=len(bad),
        examples=[(i, tuple(tris[i].tolist())) for i in bad],
        details={"note": "A triangle must reference three distinct vertices."},
        th=th,
    )


# ------------------------------------------------------------------------------------
# 3) nonmanifold_edges
# ------------------------------------------------------------------------------------
def nonmanifold_edges(src, th, cache) -> Dict:
    """
    Oriented pairs (s, d) claimed by more than one half-edge: duplicated triangles,
    inconsistent orientation, or an edge shared by more than two triangles.
    """
    oriented = cache["oriented_edges"]
    bad = [(e, tuple(h // 3 for h in hs)) for e, hs in sorted(oriented.items()) if len(hs) > 1]
    gt2 = sum(1 for tris in cache["edge_triangles"].values() if len(tris) > 2)
    return _finding(
        "nonmanifold_edges",
        ok=not bad,
        count=len(bad),
        examples=bad,
        details={"edges_incident_gt2": gt2},
        th=th,
    )


# ------------------------------------------------------------------------------------
# 4) nonmanifold_vertices
# ------------------------------------------------------------------------------------
def nonmanifold_vertices(src, th, cache) -> Dict:
    """Vertices whose incident triangles split into more than one fan (bow-ties)."""
    tris = cache["triangles"]
    bad = []
    for v in sorted(cache["vertex_triangles"].keys()):
        fans = count_fans(v, cache["vertex_triangles"][v], tris)
        if fans > 1:
            bad.append((v, fans))
    return _finding(
        "nonmanifold_vertices",
        ok=not bad,
        count=len(bad),
        examples=bad,
        details={"note": "Incident triangles of a vertex must form a single fan."},
        th=th,
    )
