# -*- coding: utf-8 -*-
# Pixmesh/mesh/export/nmesh.py

"""
Project: Pixmesh
Date: 10/19/2026

Purpose:
--------
Serialize a graph to the Nmag ASCII mesh format (PYFEM mesh file version 1.0).
https://nmag.readthedocs.io/en/latest/finite_element_mesh_generation.html#ascii-nmesh

Layout:
-------
    # PYFEM mesh file version 1.0
    # dim = 3<TAB>nodes = N<TAB>simplices = S<TAB>surfaces = F<TAB>periodic = P
    N, then N lines "x<TAB>y<TAB>z"
    S, then S lines "region<TAB>v0<TAB>v1<TAB>v2<TAB>v3"
    F, then F lines "region<TAB>outer_region<TAB>v0<TAB>v1<TAB>v2"
    P, then P periodic lines (always none)

Notes:
------
- Indices are 0-based.
- Single material: every simplex is in region 1; every surface separates region 1 from
  the outside (-1).
"""

from typing import List

from mesh.core.graph import Graph
from .elements import surface_elements, volume_elements

HEADER = "# PYFEM mesh file version 1.0"
REGION = 1
OUTER_REGION = -1


def _row(values) -> str:
    return "\t".join(str(v) for v in values)


def export_pyfem(graph: Graph, include_volumes: bool = True) -> str:
    """
    Render `graph` as PYFEM ASCII mesh text (no trailing newline).

    Parameters
    ----------
    graph : Graph
        Finished (extruded) graph.
    include_volumes : bool, optional
        Emit tetrahedral simplices (default True); False writes an empty section.
    """
    nodes = [_row(v.coords) for v in graph]
    simplices = [_row((REGION,) + vol) for vol in volume_elements(graph, enabled=include_volumes)]
    surfaces = [_row((REGION, OUTER_REGION) + s) for s in surface_elements(graph)]
    periodic: List[str] = []

    lines = [
        HEADER,
        "# dim = 3\tnodes = {}\tsimplices = {}\tsurfaces = {}\tperiodic = {}".format(
            len(nodes), len(simplices), len(surfaces), len(periodic)
        ),
        str(len(nodes)),
        *nodes,
        str(len(simplices)),
        *simplices,
        str(len(surfaces)),
        *surfaces,
        str(len(periodic)),
        *periodic,
    ]
    return "\n".join(lines)
