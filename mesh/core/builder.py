# -*- coding: utf-8 -*-
# Pixmesh/mesh/core/builder.py

"""
Project: Pixmesh
Date: 10/19/2026

Purpose:
--------
Graph Builder: turn a binary silhouette into an indexed vertex graph whose links come
from pixel adjacency.

Main Tasks:
-----------
    1. Binarize the raster (see `raster.bitmap`).
    2. Allocate one vertex per foreground pixel in row-major order at (col, row, 0) and
       record row,col -> idx in a lookup grid (-1 = background).
    3. Record each vertex's 8-connected surrounding foreground pixels and link it to its
       left/right/top/bottom foreground pixels, except fully surrounded cells on the
       odd checkerboard parity, which stay unlinked.
    4. Optionally run the redundant-edge reducer (off by default here, on in the
       settings-driven pipeline).
"""

import logging
from typing import Any, List
import numpy as np

from raster.bitmap import binarize
from .graph import Graph
from .lattice import AXIS_ORDER, index_grid, neighbor_map
from .reducer import reduce_redundant_edges

logger = logging.getLogger(__name__)


def build(
    width: int,
    height: int,
    pixels: Any,
    *,
    channel_rule: str = "any",
    reduce: bool = False,
) -> Graph:
    """
    Build the planar pixel-adjacency graph of a raster.

    Parameters
    ----------
    width, height : int
        Raster dimensions.
    pixels : bytes-like or np.ndarray
        width * height * 4 bytes.
    channel_rule : {"any", "first"}
        Foreground rule forwarded to `binarize`.
    reduce : bool, optional
        Run `reduce_redundant_edges` on the result (default False; the high-level
        pipeline turns it on through settings["graph"]["reduce"]).

    Returns
    -------
    Graph
        Empty when the raster has no foreground pixels.

    Raises
    ------
    InvalidInput
        If the buffer does not match the dimensions.
    """
    binary = binarize(width, height, pixels, channel_rule=channel_rule)
    graph = Graph()

    rows, cols = np.nonzero(binary)
    if rows.size == 0:
        logger.info("[build] no foreground pixels in %dx%d raster; empty graph", width, height)
        return graph

    grid = index_grid(binary)
    for r, c in zip(rows.tolist(), cols.tolist()):
        graph.add_vertex(c, r, 0)

    skipped = 0
    for r, c in zip(rows.tolist(), cols.tolist()):
        v = graph[int(grid[r, c])]
        nmap = neighbor_map(grid, r, c)
        surrounding: List[int] = [i for i in nmap.values() if i is not None]
        v.surrounding = surrounding

        # Interior cells of the odd parity are left to the diagonal mesh
        if len(surrounding) == 8 and r % 2 != c % 2:
            skipped += 1
            continue

        for name in AXIS_ORDER:
            if nmap[name] is not None:
                graph.link(v.idx, nmap[name])

    logger.info(
        "[build] %d vertices, %d links from %dx%d raster (%d interior cells unlinked)",
        len(graph), graph.n_links(), width, height, skipped,
    )

    if reduce:
        reduce_redundant_edges(graph)
    return graph
