# -*- coding: utf-8 -*-
# Pixmesh/main.py

"""
End-to-end driver:
  1) Load a silhouette image and build the pixel-adjacency graph
  2) Smooth boundary corners and extrude into layers
  3) Export PYFEM (.nmesh), neutral (.mesh) and JSON graph files
  4) Graph checks (hard stop on errors) + summary CSV/JSON
  5) Quick wireframe plots

Usage:
  python main.py [image.png] [settings.json]
"""

import os
import sys
import json
import logging

from pathlib import Path
from mesh.api import mesh_from_image
from mesh.checks import run_checks
from mesh.config import load_settings, merge_settings
from mesh.stats import write_summary_csv, write_summary_json
from post.plot_graph import plot_graph_wireframe, plot_degree_hist


if __name__ == "__main__":
    # ------------------------------------------------------------------
    # 0) Logging
    # ------------------------------------------------------------------
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    log = logging.getLogger("Pixmesh")

    image_path = sys.argv[1] if len(sys.argv) > 1 else "silhouette.png"
    out_dir = "mesh_out"
    os.makedirs(out_dir, exist_ok=True)

    # ------------------------------------------------------------------
    # 1) Settings
    #    - thickness: number of layers stacked on top of the raster plane
    #    - max_dist:  smoothing search radius in pixels
    # ------------------------------------------------------------------
    if len(sys.argv) > 2:
        settings = load_settings(sys.argv[2])
    else:
        settings = merge_settings({
            "raster": {"channel_rule": "any", "invert": False},
            "smoothing": {"enabled": True, "max_dist": 5.0},
            "extrusion": {"thickness": 2},
            "export": {"include_volumes": True, "formats": ["nmesh", "neutral", "json"]},
        })

    # ------------------------------------------------------------------
    # 2-3) Mesh + export
    # ------------------------------------------------------------------
    result = mesh_from_image(image_path, out_dir, settings)
    graph = result["graph"]
    for fmt, path in result["paths"].items():
        log.info("%s written to: %s", fmt, path)

    # ------------------------------------------------------------------
    # 4) Checks + summary
    # ------------------------------------------------------------------
    findings = run_checks(graph, {"thresholds": {"include_volumes": settings["export"]["include_volumes"]}})
    report_path = Path(out_dir) / "checks.json"
    report_path.write_text(json.dumps(findings, indent=2, default=str))

    if not findings["ok"]:
        failures = [
            (rid, f.get("count", 0), f.get("examples", [])[:3])
            for rid, f in findings["rules"].items()
            if f.get("severity") == "error" and not f.get("ok", True)
        ]
        lines = [
            "Graph validation failed. The following error checks did not pass:",
            *("  - {}: count={}, examples={}".format(rid, cnt, ex) for rid, cnt, ex in failures),
            "See full report: {}".format(report_path),
        ]
        print("\n".join(lines), file=sys.stderr)
        sys.exit(1)

    summary = result["summary"]
    log.info("Graph summary:\n%s", json.dumps(summary, indent=2))
    write_summary_csv(summary, os.path.join(out_dir, "summary.csv"))
    write_summary_json(summary, os.path.join(out_dir, "summary.json"))

    # ------------------------------------------------------------------
    # 5) Plots (optional)
    # ------------------------------------------------------------------
    try:
        plot_graph_wireframe(graph, show=False, save_path=os.path.join(out_dir, "wireframe.png"))
        plot_degree_hist(graph, show=False, save_path=os.path.join(out_dir, "degree.png"))
    except (RuntimeError, ValueError) as e:
        log.warning("Skipping plots: %s", e)

    print("Checks passed. Outputs in: {}".format(out_dir))
