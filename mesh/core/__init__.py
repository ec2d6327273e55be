# -*- coding: utf-8 -*-
# Pixmesh/mesh/core/__init__.py

"""
Project: Pixmesh
Date: 10/19/2026

Core Subpackage:
----------------
The meshing engine proper. Data flows strictly forward:

    raster -> build -> reduce_redundant_edges -> smooth -> extrude

Modules:
--------
- graph:    Vertex record and the append-only Graph arena
- lattice:  pixel-grid numbering and 8-neighborhood lookups
- builder:  raster -> planar pixel-adjacency graph
- reducer:  removal of checkerboard-redundant axis links
- smoother: corner bridging on the silhouette boundary
- extruder: sheared layering with parity-gated inter-layer links
"""

from .graph import Graph, Vertex
from .builder import build
from .reducer import reduce_redundant_edges
from .smoother import smooth
from .extruder import extrude

__all__ = [
    "Graph",
    "Vertex",
    "build",
    "reduce_redundant_edges",
    "smooth",
    "extrude",
]
