# -*- coding: utf-8 -*-
# Pixmesh/post/plot_graph.py

"""
Project: Pixmesh
Date: 10/19/2026

Purpose
-------
Static matplotlib diagnostics for a mesh graph: a wireframe of its neighbor links
(3D by default, or the XY projection) and the degree histogram. Intended for saving
PNGs from scripts and CI, not for interactive viewing.

Main Tasks
----------
    1) `plot_graph_wireframe`: one segment per undirected link, colored by layer.
    2) `plot_degree_hist`: bar chart of neighbor counts.
"""

import os

import numpy as np


def _get_pyplot():
    """
    Import matplotlib.pyplot with a headless-safe backend if needed.

    Raises
    ------
    RuntimeError
        If matplotlib cannot be imported.
    """
    try:
        import matplotlib
        # Choose Agg when DISPLAY is not set to avoid GUI backend errors in headless/CI.
        if not os.environ.get("DISPLAY"):
            try:
                matplotlib.use("Agg")  # must be set before importing pyplot
            except Exception:
                pass
        import matplotlib.pyplot as plt
        return plt
    except Exception as e:
        raise RuntimeError("matplotlib is required for plotting: {}".format(e))


def _finish(plt, fig, show, save_path):
    if save_path:
        fig.savefig(save_path, dpi=200, bbox_inches="tight")
        print("Graph plot saved to:", save_path)

    backend = plt.get_backend().lower()
    if show and not backend.startswith("agg"):
        plt.show()
    else:
        plt.close(fig)


def _segments(graph):
    """
    (Nseg, 2, 3) array of undirected link endpoints, plus the lower depth of each link.
    """
    seen = set()
    segs = []
    depth = []
    for v in graph:
        for u in v.neighbors:
            key = (min(v.idx, u), max(v.idx, u))
            if key in seen:
                continue
            seen.add(key)
            w = graph[u]
            segs.append((v.coords, w.coords))
            depth.append(min(v.z, w.z))
    return np.asarray(segs, dtype=float).reshape(-1, 2, 3), np.asarray(depth, dtype=float)


def plot_graph_wireframe(graph, show=True, save_path=None, *, planar=False, linewidth=0.5):
    """
    Wireframe of all neighbor links.

    Parameters
    ----------
    graph : Graph
        Graph at any pipeline stage.
    show : bool, optional
        Whether to display the figure (ignored on non-GUI backends). Default True.
    save_path : str, optional
        If given, save the figure (PNG) to this path.
    planar : bool, optional
        Draw the XY projection instead of a 3D view. Default False.
    linewidth : float, optional
        Segment width. Default 0.5.

    Raises
    ------
    ValueError
        If the graph has no links.
    """
    plt = _get_pyplot()
    segs, depth = _segments(graph)
    if len(segs) == 0:
        raise ValueError("Graph has no links to plot.")

    cmap = plt.get_cmap("viridis")
    span = depth.max() if depth.max() > 0 else 1.0
    colors = cmap(depth / span)

    fig = plt.figure(figsize=(8, 8))
    if planar:
        from matplotlib.collections import LineCollection
        ax = fig.add_subplot(111)
        ax.add_collection(LineCollection(segs[:, :, :2], colors=colors, linewidths=linewidth))
        ax.autoscale()
        ax.set_aspect("equal", adjustable="box")
        ax.invert_yaxis()  # raster rows grow downward
    else:
        from mpl_toolkits.mplot3d.art3d import Line3DCollection
        ax = fig.add_subplot(111, projection="3d")
        ax.add_collection3d(Line3DCollection(segs, colors=colors, linewidths=linewidth))
        lo, hi = segs.reshape(-1, 3).min(axis=0), segs.reshape(-1, 3).max(axis=0)
        ax.set_xlim(lo[0], hi[0] if hi[0] > lo[0] else lo[0] + 1)
        ax.set_ylim(lo[1], hi[1] if hi[1] > lo[1] else lo[1] + 1)
        ax.set_zlim(lo[2], hi[2] if hi[2] > lo[2] else lo[2] + 1)
        ax.set_zlabel("Z (layer)")
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_title("Mesh graph ({} vertices, {} links)".format(len(graph), len(segs)))

    _finish(plt, fig, show, save_path)


def plot_degree_hist(graph, show=True, save_path=None):
    """
    Bar chart of neighbor counts per vertex.
    """
    plt = _get_pyplot()
    counts = np.array([len(v.neighbors) for v in graph], dtype=int)
    if counts.size == 0:
        raise ValueError("Graph is empty.")
    values, freq = np.unique(counts, return_counts=True)

    fig = plt.figure(figsize=(6, 4))
    ax = fig.add_subplot(111)
    ax.bar(values, freq, width=0.8)
    ax.set_xlabel("Neighbor count")
    ax.set_ylabel("Vertices")
    ax.set_title("Degree distribution")

    _finish(plt, fig, show, save_path)
