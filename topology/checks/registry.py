# -*- coding: utf-8 -*-
# Edgexus/topology/checks/registry.py

"""
Project: Edgexus
Date: 10/19/2026

Purpose:
--------
Central registry of triangle-list rules. Each rule is defined once here with its
metadata (id, function, severity), providing a single source of truth for execution
order and selection.

Notes:
------
   - Duplicates are disallowed: adding a rule with an existing id raises ValueError.
   - Severity is constrained to {"error", "warn"}.
   - Error rules mirror the builder's failure kinds; if they all pass, the build succeeds.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional
from . import errors as _err
from . import warnings as _wrn


@dataclass(frozen=True)
class RuleSpec:
    id: str
    fn: Callable  # signature: fn(source, thresholds_dict, cache_dict) -> finding_dict
    severity: str  # "error" | "warn"


REGISTRY: Dict[str, RuleSpec] = {}


def _add(spec: RuleSpec) -> None:
    if spec.id in REGISTRY:
        raise ValueError(f"Duplicate rule id in registry: {spec.id}")
    if spec.severity not in ("error", "warn"):
        raise ValueError(f"Invalid severity for {spec.id}: {spec.severity}")
    REGISTRY[spec.id] = spec


# Errors (the builder would refuse these)
_add(RuleSpec("invalid_indices",      _err.invalid_indices,      "error"))
_add(RuleSpec("degenerate_triangles", _err.degenerate_triangles, "error"))
_add(RuleSpec("nonmanifold_edges",    _err.nonmanifold_edges,    "error"))
_add(RuleSpec("nonmanifold_vertices", _err.nonmanifold_vertices, "error"))

# Warnings (advisories)
_add(RuleSpec("boundary_edges",       _wrn.boundary_edges,       "warn"))
_add(RuleSpec("isolated_vertices",    _wrn.isolated_vertices,    "warn"))


# Same order the builder fails in, then advisories.
RULES_ORDER: List[str] = [
    "invalid_indices",
    "degenerate_triangles",
    "nonmanifold_edges",
    "nonmanifold_vertices",
    "boundary_edges",
    "isolated_vertices",
]


def get_enabled_ids(enabled_map: Optional[Dict[str, bool]]) -> List[str]:
    """
    Filter RULES_ORDER by a rule_id -> bool map; absent ids default to enabled.
    """
    if not enabled_map:
        return list(RULES_ORDER)
    return [rid for rid in RULES_ORDER if enabled_map.get(rid, True)]
