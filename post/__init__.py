# -*- coding: utf-8 -*-
# Edgexus/post/__init__.py

"""
Project: Edgexus
Date: 10/19/2026

Modules:
--------
- plot_topology: matplotlib view of a half-edge mesh (wireframe + boundary loops),
                 headless-safe backend, optional PNG export.
"""

__all__ = ["plot_topology"]
