# -*- coding: utf-8 -*-
# Pixmesh/mesh/core/smoother.py

"""
Project: Pixmesh
Date: 10/19/2026

Purpose:
--------
Mesh Smoother: close small staircase gaps on the silhouette boundary by bridging each
corner vertex to up to two nearby corners (or, failing that, to far side vertices).

Main Tasks:
-----------
   1) Classify vertices by surrounding count: corner (< 5), side (== 5), interior (>= 6).
   2) Rank corner candidates by distance and keep at most one per relative quadrant,
      two in total.
   3) For each accepted candidate, walk the surrounding pixels towards it while the walk
      stays on side vertices, then append one bridging vertex linked to both ends.
   4) Top up with side vertices (farthest first) when fewer than two corners qualified.

Notes:
------
   - Distances are Euclidean in the XY plane; z is ignored.
   - Classification is snapshotted before any vertex is appended.
   - Local repair only; the result is not globally optimal.
"""

import logging
import math
from typing import List, Optional, Sequence

from mesh.errors import ConfigError
from .graph import Graph, Vertex

logger = logging.getLogger(__name__)

CORNER_MAX_SURROUNDING = 4
SIDE_SURROUNDING = 5
MAX_BRIDGES = 2


def distance(a: Vertex, b: Vertex) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def quadrant(origin: Vertex, other: Vertex) -> int:
    """
    Relative direction of `other` seen from `origin`; zero components fall into 4.
    """
    dx = other.x - origin.x
    dy = other.y - origin.y
    if dx > 0 and dy > 0:
        return 1
    if dx > 0 and dy < 0:
        return 2
    if dx < 0 and dy < 0:
        return 3
    return 4


def is_corner(v: Vertex) -> bool:
    return len(v.surrounding) <= CORNER_MAX_SURROUNDING


def is_side(v: Vertex) -> bool:
    return len(v.surrounding) == SIDE_SURROUNDING


def _distinct_quadrants(origin: Vertex, ranked: Sequence[Vertex]) -> List[Vertex]:
    """
    Keep the best-ranked vertex plus every vertex lying in a different quadrant from it.
    """
    if not ranked:
        return []
    q0 = quadrant(origin, ranked[0])
    return [ranked[0]] + [c for c in ranked[1:] if quadrant(origin, c) != q0]


def _next_step(graph: Graph, v: Vertex, target: Vertex) -> Optional[Vertex]:
    """
    Surrounding pixel of `v` closest to `target` (first in surrounding order on ties).
    """
    if not v.surrounding:
        return None
    return min((graph[i] for i in v.surrounding), key=lambda n: distance(n, target))


def _bridge(graph: Graph, v: Vertex, target: Vertex) -> Vertex:
    """
    Walk from `v` towards `target` along side pixels and append the bridging vertex.
    """
    stop = _next_step(graph, v, target)
    if stop is None:
        stop = v
    else:
        visited = set()
        while is_side(stop) and stop.x != target.x and stop.y != target.y:
            visited.add(stop.idx)
            nxt = _next_step(graph, stop, target)
            if nxt.idx in visited:
                break
            stop = nxt

    bridge = graph.add_vertex(stop.x, stop.y, 0, neighbors=(v.idx, target.idx), exterior=True)
    logger.debug(
        "[smooth] bridge %d -> %d via (%d, %d) as vertex %d",
        v.idx, target.idx, stop.x, stop.y, bridge.idx,
    )
    return bridge


def smooth(graph: Graph, max_dist: float = 5.0) -> Graph:
    """
    Bridge boundary corners in place and return the same graph.

    Parameters
    ----------
    graph : Graph
        Graph produced by the builder (and reducer).
    max_dist : float, optional
        Search radius in raster units (default 5). Values <= 0 only match coincident
        vertices, which normally makes the pass a no-op.

    Raises
    ------
    ConfigError
        If `max_dist` is not a finite number.
    """
    try:
        max_dist = float(max_dist)
    except (TypeError, ValueError):
        raise ConfigError("max_dist must be a number.", {"max_dist": max_dist})
    if not math.isfinite(max_dist):
        raise ConfigError("max_dist must be finite.", {"max_dist": max_dist})

    corners = [v for v in graph if is_corner(v)]
    sides = [v for v in graph if is_side(v)]
    n_before = len(graph)

    for v in corners:
        ranked = sorted(
            (c for c in corners if c.idx != v.idx and distance(v, c) <= max_dist),
            key=lambda c: distance(v, c),
        )
        candidates = _distinct_quadrants(v, ranked)[:MAX_BRIDGES]

        for c in candidates:
            _bridge(graph, v, c)

        if len(candidates) >= MAX_BRIDGES:
            continue

        # Not enough corners in range: fall back to the farthest side vertices
        ranked_sides = sorted(
            (s for s in sides if distance(v, s) <= max_dist),
            key=lambda s: distance(v, s),
            reverse=True,
        )
        if candidates:
            taken = quadrant(v, candidates[0])
            ranked_sides = [s for s in ranked_sides if quadrant(v, s) != taken]

        for s in _distinct_quadrants(v, ranked_sides)[:MAX_BRIDGES - len(candidates)]:
            _bridge(graph, v, s)

    logger.info(
        "[smooth] %d corners, %d sides; added %d bridging vertices (max_dist=%g)",
        len(corners), len(sides), len(graph) - n_before, max_dist,
    )
    return graph
