# -*- coding: utf-8 -*-
# Edgexus/topology/export.py

"""
Project: Edgexus
Date: 10/19/2026

Purpose:
--------
Write topology summaries and check reports (nested dicts/lists) to JSON or to a flat
"key,value" CSV. numpy scalars and tuples are encoded cleanly.

Main Tasks:
-----------
    1. Flatten nested dictionaries into ("dot.path.key", value) rows.
    2. Export as CSV (2 columns) or indented JSON.
"""

from typing import Any, List, Tuple
import csv
import json
import os
import numpy as np


def _is_scalar(x: Any) -> bool:
    return isinstance(x, (str, bool, int, float, np.generic))


def _json_default(o):
    if isinstance(o, np.generic):
        return o.item()
    if isinstance(o, np.ndarray):
        return o.tolist()
    return str(o)


def _to_json_str(x: Any) -> str:
    return json.dumps(x, default=_json_default, ensure_ascii=False)


def _flatten(prefix: str, obj: Any, out: List[Tuple[str, Any]]) -> None:
    """
    Scalars are kept; dicts recurse over sorted keys joined with '.'; anything else
    (lists, tuples, arrays) becomes one JSON-encoded cell.
    """
    if _is_scalar(obj):
        out.append((prefix, obj.item() if isinstance(obj, np.generic) else obj))
        return
    if isinstance(obj, dict):
        for k in sorted(obj.keys(), key=str):
            key = str(k)
            _flatten(key if prefix == "" else "{}.{}".format(prefix, key), obj[k], out)
        return
    out.append((prefix, _to_json_str(obj)))


def _ensure_parent(path: str) -> None:
    folder = os.path.dirname(os.path.abspath(path))
    if folder and not os.path.exists(folder):
        os.makedirs(folder, exist_ok=True)


def write_summary_csv(summary: dict, path: str) -> str:
    """Write `summary` as a 2-column "key,value" CSV; returns the path."""
    rows: List[Tuple[str, Any]] = []
    _flatten("", summary, rows)
    _ensure_parent(path)
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["key", "value"])
        for k, v in rows:
            w.writerow([k, v])
    return path


def write_summary_json(summary: dict, path: str, indent: int = 2) -> str:
    """Write `summary` as indented JSON; returns the path."""
    _ensure_parent(path)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(summary, f, indent=indent, ensure_ascii=False, default=_json_default)
    return path
