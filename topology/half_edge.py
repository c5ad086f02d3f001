# -*- coding: utf-8 -*-
# Edgexus/topology/half_edge.py

"""
Project: Edgexus
Date: 10/19/2026

Purpose:
--------
The half-edge record. All cross-references are integer indices into the owning
store's flat half-edge sequence; `twin` is None on the boundary.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class HalfEdge:
    vertex_indices: Tuple[int, int]   # (src, dst)
    triangle_index: int
    next: int
    twin: Optional[int] = None

    @property
    def src(self) -> int:
        return self.vertex_indices[0]

    @property
    def dst(self) -> int:
        return self.vertex_indices[1]

    def is_boundary(self) -> bool:
        return self.twin is None
