# -*- coding: utf-8 -*-
# Pixmesh/mesh/core/reducer.py

"""
Project: Pixmesh
Date: 10/19/2026

Purpose:
--------
Redundant-Edge Reducer: drop axis links on odd-parity cells when the even-parity
neighbor already reaches the relevant diagonal, which otherwise leaves overlapping,
too-short edges along checkerboard boundaries.

Main Tasks:
-----------
   - Rebuild the row,col -> idx lookup grid from the depth-0 vertices.
   - For each odd-parity cell (row % 2 != col % 2), mark each existing axis neighbor
     removable when every diagonal that would make it redundant is already linked.
   - Remove the marked neighbors from the visited vertex only.

Notes:
------
   - Only odd-parity vertices are edited and only even-parity vertices are read, so the
     result does not depend on visiting order.
   - Vertices are never removed; only neighbor lists change.
"""

import logging
import numpy as np

from mesh.errors import InvalidInput

from .graph import Graph
from .lattice import neighbor_map

logger = logging.getLogger(__name__)

# axis neighbor -> ((guard, diagonal), (guard, diagonal))
# The axis neighbor is removable when, for both pairs, the guard cell is absent or the
# axis neighbor already links to the diagonal.
_REDUNDANCY_RULES = {
    "left": (("top", "top_left"), ("bottom", "bottom_left")),
    "right": (("top", "top_right"), ("bottom", "bottom_right")),
    "top": (("left", "top_left"), ("right", "top_right")),
    "bottom": (("left", "bottom_left"), ("right", "bottom_right")),
}


def _planar_grid(graph: Graph) -> np.ndarray:
    """
    Lookup grid of the depth-0 vertices; the first vertex at a coordinate owns the cell.
    """
    base = [v for v in graph if v.z == 0]
    if not base:
        return np.full((0, 0), -1, dtype=np.int64)
    negative = [v.idx for v in base if v.x < 0 or v.y < 0]
    if negative:
        raise InvalidInput("depth-0 vertices must have non-negative x and y.", {"vertices": negative[:5]})
    h = max(v.y for v in base) + 1
    w = max(v.x for v in base) + 1
    grid = np.full((h, w), -1, dtype=np.int64)
    for v in base:
        if grid[v.y, v.x] < 0:
            grid[v.y, v.x] = v.idx
    return grid


def _is_redundant(graph: Graph, nmap, axis: str) -> bool:
    target = nmap[axis]
    nbrs = graph[target].neighbors
    for guard, diagonal in _REDUNDANCY_RULES[axis]:
        if nmap[guard] is None:
            continue
        if nmap[diagonal] is None or nmap[diagonal] not in nbrs:
            return False
    return True


def reduce_redundant_edges(graph: Graph) -> Graph:
    """
    Remove redundant axis links in place and return the same graph.

    Raises
    ------
    InvalidInput
        If a depth-0 vertex has a negative coordinate.
    """
    grid = _planar_grid(graph)
    removed = 0

    rows, cols = np.nonzero(grid >= 0)
    for r, c in zip(rows.tolist(), cols.tolist()):
        if r % 2 == c % 2:
            continue
        v = graph[int(grid[r, c])]
        nmap = neighbor_map(grid, r, c)

        marked = [
            nmap[axis] for axis in _REDUNDANCY_RULES
            if nmap[axis] is not None and _is_redundant(graph, nmap, axis)
        ]
        for idx in marked:
            if graph.unlink(v.idx, idx):
                removed += 1

    logger.info("[reduce_redundant_edges] removed %d redundant links", removed)
    return graph
