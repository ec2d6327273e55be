# -*- coding: utf-8 -*-
# Pixmesh/mesh/export/__init__.py

"""
Project: Pixmesh
Date: 10/19/2026

Modules
-------
- elements:   surface/volume element enumeration from neighbor combinations.
- nmesh:      PYFEM (Nmag) ASCII mesh v1.0 serializer.
- neutral:    Netgen/NGSolve neutral mesh serializer.
- graph_json: lossless JSON dump/load of a graph.
- writer:     atomic text writes and meshio output.
"""

from .elements import constant_axes, surface_elements, volume_elements, element_arrays
from .nmesh import export_pyfem
from .neutral import export_neutral
from .graph_json import graph_to_dict, graph_from_dict, dump_graph, load_graph
from .writer import write_text, write_meshio

__all__ = [
    "constant_axes",
    "surface_elements",
    "volume_elements",
    "element_arrays",
    "export_pyfem",
    "export_neutral",
    "graph_to_dict",
    "graph_from_dict",
    "dump_graph",
    "load_graph",
    "write_text",
    "write_meshio",
]
