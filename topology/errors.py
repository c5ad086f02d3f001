# -*- coding: utf-8 -*-
# Edgexus/topology/errors.py

"""
Project: Edgexus
Date: 10/19/2026

Purpose
-------
Typed exceptions for the half-edge builder with compact, context-aware messages, so
callers can tell an out-of-range index from a degenerate triangle or a non-manifold
configuration without parsing strings.

Main Tasks
----------
    1. Define BuildError(message, context) with a compact context suffix in __str__.
    2. Provide typed subclasses: InvalidIndexError, DegenerateTriangleError,
       NonManifoldEdgeError, NonManifoldVertexError.
    3. Tag every subclass with a stable `kind` string for machine consumption.

Notes
-----
- Context is optional; long values are truncated for readability.
- Build is all-or-nothing: when one of these is raised, no store was produced.
"""

__all__ = [
    "BuildError",
    "InvalidIndexError",
    "DegenerateTriangleError",
    "NonManifoldEdgeError",
    "NonManifoldVertexError",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    try:
        parts = []
        for k in sorted(ctx.keys()):
            sv = repr(ctx[k])
            if len(sv) > 120:
                sv = sv[:117] + "..."
            parts.append("{}={}".format(k, sv))
        return " | " + ", ".join(parts)
    except Exception:
        # Context should never break error rendering
        return ""


class BuildError(Exception):
    """
    Base class for all half-edge construction failures.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields appended in the string form (e.g., {"triangle": 4, "vertices": (1, 1, 2)}).
    """
    kind = "BuildError"

    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super(BuildError, self).__init__(message)

    def __str__(self):
        base = super(BuildError, self).__str__()
        return base + _format_context(self.context)


class InvalidIndexError(BuildError):
    """A triangle references a vertex index outside [0, N)."""
    kind = "InvalidIndex"


class DegenerateTriangleError(BuildError):
    """A triangle references the same vertex more than once."""
    kind = "DegenerateTriangle"


class NonManifoldEdgeError(BuildError):
    """
    Two half-edges claim the same oriented vertex pair (s, d):
      - duplicated triangles, or
      - adjacent triangles with inconsistent orientation, or
      - an edge shared by more than two triangles.
    """
    kind = "NonManifoldEdge"


class NonManifoldVertexError(BuildError):
    """The triangles around a vertex do not form a single (open or closed) fan."""
    kind = "NonManifoldVertex"
