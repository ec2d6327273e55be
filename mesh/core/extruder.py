# -*- coding: utf-8 -*-
# Pixmesh/mesh/core/extruder.py

"""
Project: Pixmesh
Date: 10/19/2026

Purpose:
--------
Mesh Extruder: stack copies of the planar graph into `thickness` additional layers along
a sheared y/z axis and cross-link consecutive layers on a checkerboard pattern, giving a
lattice the exporter can cut into tetrahedra.

Main Tasks:
-----------
   1) Snapshot layer i-1 and append one copy per vertex at depth i.
   2) Remap the copied neighbor indices into the new layer by index offset.
   3) Shift the new layer by +i in y (oblique layering).
   4) Bridge lower -> new and new -> lower on alternating parities.

Notes:
------
   - The y shift is cumulative: layer i sits at y0 + 1 + 2 + ... + i because each copy
     starts from the already shifted layer below it.
   - Bridges only join vertices that share (x, y) after the shift.
   - Copies carry no surrounding pixels.
"""

import logging
import numbers
from typing import Dict, List, Tuple

from mesh.errors import ConfigError, InvalidInput
from .graph import Graph

logger = logging.getLogger(__name__)


def _first_by_xy(graph: Graph, indices: List[int]) -> Dict[Tuple[int, int], int]:
    """
    (x, y) -> index of the first vertex of `indices` at that position.
    """
    out: Dict[Tuple[int, int], int] = {}
    for i in indices:
        v = graph[i]
        out.setdefault((v.x, v.y), i)
    return out


def _skip_lower(layer: int, x: int, y: int) -> bool:
    same = (x % 2) == (y % 2)
    return (layer % 2 == 0 and same) or (layer % 2 == 1 and not same)


def _skip_new(layer: int, x: int, y: int) -> bool:
    same = (x % 2) == (y % 2)
    return (layer % 2 == 0 and not same) or (layer % 2 == 1 and same)


def extrude(graph: Graph, thickness: int) -> Graph:
    """
    Append `thickness` layers in place and return the same graph.

    Parameters
    ----------
    graph : Graph
        Planar (optionally smoothed) graph; its depth-0 vertices form the first layer.
    thickness : int
        Number of additional layers; 0 leaves the graph untouched.

    Raises
    ------
    ConfigError
        If `thickness` is negative or not an integer.
    """
    if isinstance(thickness, bool) or not isinstance(thickness, numbers.Integral):
        raise ConfigError("thickness must be an integer.", {"thickness": thickness})
    thickness = int(thickness)
    if thickness < 0:
        raise ConfigError("thickness must be >= 0.", {"thickness": thickness})

    for i in range(1, thickness + 1):
        lower = graph.layer(i - 1)
        offset = len(lower)

        new = []
        for li in lower:
            src = graph[li]
            v = graph.add_vertex(src.x, src.y, i, exterior=src.exterior)
            v.neighbors = list(dict.fromkeys(n + offset for n in src.neighbors))
            new.append(v.idx)

        dangling = [ni for ni in new if any(n >= len(graph) for n in graph[ni].neighbors)]
        if dangling:
            raise InvalidInput(
                "neighbor indices fall outside the graph after remapping.",
                {"layer": i, "vertices": dangling[:5]},
            )

        for ni in new:
            graph[ni].y += i

        new_by_xy = _first_by_xy(graph, new)
        lower_by_xy = _first_by_xy(graph, lower)
        bridges = 0

        for li in lower:
            v = graph[li]
            if _skip_lower(i, v.x, v.y) or not v.neighbors:
                continue
            match = new_by_xy.get((v.x, v.y))
            if match is not None and graph.link(li, match):
                bridges += 1

        for ni in new:
            v = graph[ni]
            if _skip_new(i, v.x, v.y) or not v.neighbors:
                continue
            match = lower_by_xy.get((v.x, v.y))
            if match is not None and graph.link(ni, match):
                bridges += 1

        logger.info("[extrude] layer %d: %d vertices, %d inter-layer bridges", i, len(new), bridges)

    return graph
