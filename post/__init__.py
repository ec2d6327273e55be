# -*- coding: utf-8 -*-
# Pixmesh/post/__init__.py

"""
Project: Pixmesh
Date: 10/19/2026

Modules:
--------
- plot_graph: Static wireframe and degree-histogram plots of a mesh graph.
              Wraps matplotlib with a headless-safe backend.
"""

__all__ = ["plot_graph"]
