# -*- coding: utf-8 -*-
# Edgexus/topology/checks/warnings.py

"""
Project: Edgexus
Date: 10/19/2026

Purpose:
--------
WARNING-tier triangle-list rules: advisory signals that do not stop the builder.

Main Tasks:
-----------
   - boundary_edges:    undirected edges used by exactly one triangle (open surface).
   - isolated_vertices: vertices referenced by no valid triangle.
"""

from typing import Dict, List


def _finding(rule_id: str, ok: bool, count: int, examples: List, details: Dict, th: Dict) -> Dict:
    cap = int(th.get("max_examples", 25))
    return {
        "id": rule_id,
        "severity": "warn",
        "ok": bool(ok),
        "count": int(count),
        "examples": list(examples)[:cap],
        "details": details or {},
    }


def boundary_edges(src, th, cache) -> Dict:
    """Open edges; a closed surface has none."""
    edges = sorted(e for e, tris in cache["edge_triangles"].items() if len(tris) == 1)
    return _finding(
        "boundary_edges",
        ok=not edges,
        count=len(edges),
        examples=edges,
        details={"note": "Surface is open; boundary loops will be reported."} if edges else {},
        th=th,
    )


def isolated_vertices(src, th, cache) -> Dict:
    """Vertices no triangle references; they get empty fans."""
    used = cache["vertex_triangles"]
    iso = [v for v in range(int(src.vertex_count)) if v not in used]
    return _finding(
        "isolated_vertices",
        ok=not iso,
        count=len(iso),
        examples=iso,
        details={},
        th=th,
    )
