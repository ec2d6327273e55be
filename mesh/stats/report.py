# -*- coding: utf-8 -*-
# Pixmesh/mesh/stats/report.py

"""
Project: Pixmesh
Date: 10/19/2026

Purpose:
--------
Compact structural summary of a graph, returned as a nested dict ready for export
(CSV/JSON) or logging.

Main Tasks:
-----------
    1) `inventory`:      vertex/link counts, layers, bounding box.
    2) `degree`:         neighbor-count distribution (min/max/mean/std + histogram).
    3) `vertex_classes`: corner/side/interior counts on the base layer.
    4) `summarize`:      all of the above plus element counts.

Notes:
------
- Undirected links count each unordered vertex pair once, whichever side holds it.
- Histogram is returned as {degree: frequency}.
"""

from typing import Any, Dict
import numpy as np

from mesh.core.graph import Graph
from mesh.core.smoother import CORNER_MAX_SURROUNDING, SIDE_SURROUNDING
from mesh.export.elements import surface_elements, volume_elements


def inventory(graph: Graph) -> Dict[str, Any]:
    """
    Global inventory of graph size and extent.

    Returns
    -------
    dict
        {"n_vertices", "n_links", "n_edges", "n_layers", "bbox": {xmin..zmax}}
        bbox values are None for an empty graph.
    """
    n = len(graph)
    edges = set()
    for v in graph:
        for u in v.neighbors:
            edges.add((min(v.idx, u), max(v.idx, u)))

    if n:
        P = np.array([v.coords for v in graph], dtype=np.int64)
        lo, hi = P.min(axis=0), P.max(axis=0)
        bbox = {
            "xmin": int(lo[0]), "xmax": int(hi[0]),
            "ymin": int(lo[1]), "ymax": int(hi[1]),
            "zmin": int(lo[2]), "zmax": int(hi[2]),
        }
        n_layers = int(np.unique(P[:, 2]).size)
    else:
        bbox = {k: None for k in ("xmin", "xmax", "ymin", "ymax", "zmin", "zmax")}
        n_layers = 0

    return {
        "n_vertices": n,
        "n_links": graph.n_links(),
        "n_edges": len(edges),
        "n_layers": n_layers,
        "bbox": bbox,
    }


def degree(graph: Graph) -> Dict[str, Any]:
    """
    Neighbor-count distribution; zeros and an empty histogram for an empty graph.
    """
    counts = np.array([len(v.neighbors) for v in graph], dtype=int)
    if counts.size == 0:
        return {"min": 0, "max": 0, "mean": 0.0, "std": 0.0, "hist": {}}

    unique, freq = np.unique(counts, return_counts=True)
    return {
        "min": int(counts.min()),
        "max": int(counts.max()),
        "mean": float(counts.mean()),
        "std": float(counts.std()),
        "hist": {int(u): int(f) for u, f in zip(unique, freq)},
    }


def vertex_classes(graph: Graph) -> Dict[str, int]:
    """
    Smoother classification of the base layer by surrounding-pixel count.
    """
    out = {"corner": 0, "side": 0, "interior": 0}
    for v in graph:
        if v.z != 0:
            continue
        k = len(v.surrounding)
        if k <= CORNER_MAX_SURROUNDING:
            out["corner"] += 1
        elif k == SIDE_SURROUNDING:
            out["side"] += 1
        else:
            out["interior"] += 1
    return out


def summarize(graph: Graph, include_volumes: bool = True) -> Dict[str, Any]:
    """
    Full structural summary of `graph`.
    """
    return {
        "inventory": inventory(graph),
        "degree": degree(graph),
        "vertex_classes": vertex_classes(graph),
        "elements": {
            "surfaces": len(surface_elements(graph)),
            "volumes": len(volume_elements(graph, enabled=include_volumes)),
        },
    }
