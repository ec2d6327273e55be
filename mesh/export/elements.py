# -*- coding: utf-8 -*-
# Pixmesh/mesh/export/elements.py

"""
Project: Pixmesh
Date: 10/19/2026

Purpose:
--------
Enumerate surface (triangle) and volume (tetrahedron) elements from vertex/neighbor
combinations of a finished graph. Pure functions: the graph is only read.

Main Tasks:
-----------
    1) `surface_elements`: (v, a, b) for every neighbor pair of v, kept when all three
       vertices are exterior and exactly one axis is constant across them.
    2) `volume_elements`: (v, a, b, c) for every neighbor triple of v, kept when no axis
       is constant across the four.
    3) `element_arrays`: both lists as int64 numpy arrays for array-based writers.

Notes:
------
- Pairs and triples follow neighbor-list order, so output order is deterministic.
- Cost is O(V * d^2) and O(V * d^3) with neighbor degree d, which stays small by
  construction.
- Elements are recomputed on every call and never stored on the graph.
"""

from itertools import combinations
from typing import List, Sequence, Tuple
import numpy as np

from mesh.core.graph import Graph, Vertex

Surface = Tuple[int, int, int]
Volume = Tuple[int, int, int, int]


def constant_axes(vertices: Sequence[Vertex]) -> int:
    """
    Number of coordinate axes (x, y, z) on which all `vertices` agree.
    """
    first = vertices[0]
    return (
        int(all(v.x == first.x for v in vertices))
        + int(all(v.y == first.y for v in vertices))
        + int(all(v.z == first.z for v in vertices))
    )


def surface_elements(graph: Graph) -> List[Surface]:
    """
    Exterior triangles that are planar in exactly one axis.
    """
    out: List[Surface] = []
    for v in graph:
        if len(v.neighbors) < 2:
            continue
        for a, b in combinations(v.neighbors, 2):
            nodes = (v, graph[a], graph[b])
            if not all(n.exterior for n in nodes):
                continue
            if constant_axes(nodes) != 1:
                continue
            out.append((v.idx, a, b))
    return out


def volume_elements(graph: Graph, enabled: bool = True) -> List[Volume]:
    """
    Tetrahedra with extent along every axis. Returns [] when `enabled` is False.
    """
    if not enabled:
        return []
    out: List[Volume] = []
    for v in graph:
        if len(v.neighbors) < 3:
            continue
        for a, b, c in combinations(v.neighbors, 3):
            if constant_axes((v, graph[a], graph[b], graph[c])) != 0:
                continue
            out.append((v.idx, a, b, c))
    return out


def element_arrays(graph: Graph, include_volumes: bool = True) -> Tuple[np.ndarray, np.ndarray]:
    """
    Return (volumes (S,4), surfaces (F,3)) as int64 arrays; empty arrays keep their width.
    """
    vols = np.asarray(volume_elements(graph, enabled=include_volumes), dtype=np.int64).reshape(-1, 4)
    surfs = np.asarray(surface_elements(graph), dtype=np.int64).reshape(-1, 3)
    return vols, surfs
