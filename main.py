# -*- coding: utf-8 -*-
# Edgexus/main.py

"""
End-to-end driver:
  1) Load a triangle mesh (file given on the command line, else a demo open cylinder)
  2) Diagnose the raw triangle list (report-all checks)
  3) Build the half-edge mesh
  4) Boundary loops + one-ring of vertex 0
  5) Topology summary (JSON/CSV) + boundary plot
"""

import os
import sys
import logging

from geometry.io import read_triangle_mesh
from geometry.primitives import create_open_cylinder
from topology import build_half_edge_mesh, BuildError
from topology.checks import run_checks
from topology.stats import summarize
from topology.export import write_summary_json, write_summary_csv
from post.plot_topology import plot_boundaries


if __name__ == "__main__":
    # ------------------------------------------------------------------
    # 0) Logging
    # ------------------------------------------------------------------
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    log = logging.getLogger("Edgexus")

    os.makedirs("out", exist_ok=True)

    # ------------------------------------------------------------------
    # 1) Load
    # ------------------------------------------------------------------
    if len(sys.argv) > 1:
        tri_mesh = read_triangle_mesh(sys.argv[1])
        name = os.path.splitext(os.path.basename(sys.argv[1]))[0]
    else:
        tri_mesh = create_open_cylinder(resolution=16, radius=1.0, height=2.0)
        name = "cylinder"
    log.info("Loaded '%s': %d vertices, %d triangles", name, len(tri_mesh.vertices), len(tri_mesh.triangles))

    # ------------------------------------------------------------------
    # 2) Diagnose
    # ------------------------------------------------------------------
    report = run_checks(tri_mesh)
    for rid, f in report["rules"].items():
        if not f["ok"]:
            log.warning("[%s] %s: %d (e.g. %s)", f["severity"], rid, f["count"], f["examples"][:3])
    write_summary_json(report, os.path.join("out", name + "_checks.json"))

    # ------------------------------------------------------------------
    # 3) Build
    # ------------------------------------------------------------------
    try:
        he_mesh = build_half_edge_mesh(tri_mesh)
    except BuildError as e:
        log.error("Half-edge build failed (%s): %s", e.kind, e)
        sys.exit(1)

    # ------------------------------------------------------------------
    # 4) Queries
    # ------------------------------------------------------------------
    loops = he_mesh.get_boundaries()
    log.info("Boundary loops: %d %s", len(loops), [len(b) for b in loops])
    if he_mesh.has_half_edges():
        log.info("One-ring of vertex 0 (CCW): %s", he_mesh.one_ring_vertices(0))

    # ------------------------------------------------------------------
    # 5) Summary + plot
    # ------------------------------------------------------------------
    summary = summarize(he_mesh)
    log.info("Topology summary:\n%s", summary)
    write_summary_json(summary, os.path.join("out", name + "_topology.json"))
    write_summary_csv(summary, os.path.join("out", name + "_topology.csv"))

    try:
        plot_boundaries(he_mesh, show=True, save_path=os.path.join("out", name + "_boundaries.png"))
    except Exception as e:
        log.warning("Skipping boundary plot: %s", e)
