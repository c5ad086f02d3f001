# -*- coding: utf-8 -*-
# Edgexus/post/plot_topology.py

"""
Project: Edgexus
Date: 10/19/2026

Purpose
-------
Quick visualization of a half-edge mesh with matplotlib: the triangle wireframe in
light grey and every boundary loop as a closed, coloured polyline.

Main Tasks
----------
    1) Headless-safe pyplot import (Agg when no DISPLAY).
    2) `plot_boundaries`: 3D wireframe + boundary loops, optional PNG export.
"""

import os
import logging
import numpy as np

logger = logging.getLogger(__name__)


def _get_pyplot():
    """
    Import matplotlib.pyplot, choosing Agg when DISPLAY is not set.

    Raises
    ------
    RuntimeError
        If matplotlib cannot be imported.
    """
    try:
        import matplotlib
        if not os.environ.get("DISPLAY"):
            matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError("matplotlib is required for plotting: {}".format(e))


def plot_boundaries(mesh, show=True, save_path=None, *, linewidth=0.4, loop_linewidth=2.0):
    """
    Plot the triangle wireframe and the boundary loops of a HalfEdgeTriangleMesh.

    Parameters
    ----------
    mesh : HalfEdgeTriangleMesh
        Built store with vertex positions.
    show : bool, optional
        Display the figure (skipped on the Agg backend). Default True.
    save_path : str, optional
        If given, save the figure (PNG) to this path.
    linewidth, loop_linewidth : float, optional
        Line widths of the wireframe and of the loops.

    Returns
    -------
    list of list of int
        The plotted boundary loops (vertex indices).

    Raises
    ------
    ValueError
        If the mesh carries no vertex positions.
    """
    if len(mesh.vertices) == 0:
        raise ValueError("Mesh has no vertex positions to plot.")

    plt = _get_pyplot()
    from mpl_toolkits.mplot3d.art3d import Line3DCollection

    pts = np.asarray(mesh.vertices, dtype=float)
    loops = mesh.get_boundaries()

    fig = plt.figure(figsize=(8, 8))
    ax = fig.add_subplot(111, projection="3d")

    if len(mesh.triangles):
        t = np.asarray(mesh.triangles)
        segs = np.concatenate([
            np.stack([pts[t[:, 0]], pts[t[:, 1]]], axis=1),
            np.stack([pts[t[:, 1]], pts[t[:, 2]]], axis=1),
            np.stack([pts[t[:, 2]], pts[t[:, 0]]], axis=1),
        ])
        ax.add_collection3d(Line3DCollection(segs, colors="0.7", linewidths=linewidth))

    cmap = plt.get_cmap("tab10")
    for k, loop in enumerate(loops):
        ring = pts[loop + loop[:1]]
        ax.plot(ring[:, 0], ring[:, 1], ring[:, 2], color=cmap(k % 10),
                linewidth=loop_linewidth, label="loop {} ({} verts)".format(k, len(loop)))

    lo, hi = pts.min(axis=0), pts.max(axis=0)
    ax.set_xlim(lo[0], hi[0] if hi[0] > lo[0] else lo[0] + 1.0)
    ax.set_ylim(lo[1], hi[1] if hi[1] > lo[1] else lo[1] + 1.0)
    ax.set_zlim(lo[2], hi[2] if hi[2] > lo[2] else lo[2] + 1.0)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_zlabel("Z")
    ax.set_title("Boundary loops: {}".format(len(loops)))
    if loops:
        ax.legend(loc="upper right", fontsize=8)

    if save_path:
        fig.savefig(save_path, dpi=200, bbox_inches="tight")
        logger.info("[plot_boundaries] saved to %s", save_path)

    backend = plt.get_backend().lower()
    if show and not backend.startswith("agg"):
        plt.show()
    else:
        plt.close(fig)
    return loops
