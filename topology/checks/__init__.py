# -*- coding: utf-8 -*-
# Edgexus/topology/checks/__init__.py

"""
Project: Edgexus
Date: 10/19/2026

Purpose:
--------
Public API for diagnosing a raw triangle list before (or instead of) building
half-edges. Where the builder stops at the first problem, `run_checks` reports all of
them as normalized findings suitable for CLI/CI consumption.

Main Tasks
----------
   - Provide defaults (`DEFAULTS`) for enable/disable policy and thresholds.
   - Orchestrate registry-defined rules over a TriangleSource and shared cache.
   - Aggregate findings and compute a top-level `ok` status.

Returned Schema:
----------------
{
  "ok": bool,
  "rules": { <rule_id>: finding_dict, ... },
  "meta": {"n_vertices": int, "n_triangles": int, "thresholds": dict, "enabled": dict}
}
"""

from typing import Dict, Any, Optional
import copy
import logging
from geometry.triangle_mesh import as_triangle_source
from .helpers import precompute_cache
from .registry import REGISTRY, RULES_ORDER, get_enabled_ids

logger = logging.getLogger(__name__)


# -------------------------
# Defaults (policy)
# -------------------------
DEFAULTS: Dict[str, Any] = {
    "enabled": {rid: True for rid in RULES_ORDER},
    "thresholds": {
        "max_examples": 25,
    },
}


def _deep_merge(base: Dict[str, Any], upd: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Deep-merge two nested dicts (right-biased), not mutating inputs.
    """
    if not upd:
        return copy.deepcopy(base)
    out = copy.deepcopy(base)
    for k, v in upd.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def run_checks(source, config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Run all enabled rules (per registry order) against a triangle source.

    Parameters
    ----------
    source : Any
        TriangleMesh, TriangleSource, or anything `as_triangle_source` accepts.
    config : dict, optional
        Overrides for `DEFAULTS` with the same structure (keys: "enabled", "thresholds").

    Returns
    -------
    dict
        {"ok": False iff any ERROR-severity rule fails, "rules": {...}, "meta": {...}}
    """
    cfg = _deep_merge(DEFAULTS, config or {})
    th = cfg.get("thresholds", {})
    src = as_triangle_source(source)
    cache = precompute_cache(src, th)

    results: Dict[str, Any] = {}
    for rid in get_enabled_ids(cfg.get("enabled")):
        spec = REGISTRY[rid]
        finding = spec.fn(src, th, cache)
        finding["severity"] = spec.severity
        finding["id"] = rid
        results[rid] = finding

    ok = all(f["ok"] for rid, f in results.items() if REGISTRY[rid].severity == "error")
    if not ok:
        failed = [rid for rid, f in results.items() if REGISTRY[rid].severity == "error" and not f["ok"]]
        logger.warning("[run_checks] failed rules: %s", ", ".join(failed))

    return {
        "ok": ok,
        "rules": results,
        "meta": {
            "n_vertices": int(src.vertex_count),
            "n_triangles": int(len(src.triangles)),
            "thresholds": copy.deepcopy(th),
            "enabled": copy.deepcopy(cfg.get("enabled", {})),
        },
    }
