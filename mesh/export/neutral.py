# -*- coding: utf-8 -*-
# Pixmesh/mesh/export/neutral.py

"""
Project: Pixmesh
Date: 10/19/2026

Purpose:
--------
Serialize a graph to the Netgen/NGSolve neutral mesh format.

Layout:
-------
    N, then N lines "x<TAB>y<TAB>z"
    V, then V lines "region<TAB>v0<TAB>v1<TAB>v2<TAB>v3"
    F, then F lines "region<TAB>v0<TAB>v1<TAB>v2"

Notes:
------
- Indices are 1-based; the single region tag is 1.
"""

from mesh.core.graph import Graph
from .elements import surface_elements, volume_elements

REGION = 1


def _row(values) -> str:
    return "\t".join(str(v) for v in values)


def export_neutral(graph: Graph, include_volumes: bool = True) -> str:
    """
    Render `graph` as neutral mesh text (no trailing newline).
    """
    points = [_row(v.coords) for v in graph]
    volumes = [
        _row((REGION,) + tuple(i + 1 for i in vol))
        for vol in volume_elements(graph, enabled=include_volumes)
    ]
    surfaces = [_row((REGION,) + tuple(i + 1 for i in s)) for s in surface_elements(graph)]

    lines = [
        str(len(points)),
        *points,
        str(len(volumes)),
        *volumes,
        str(len(surfaces)),
        *surfaces,
    ]
    return "\n".join(lines)
