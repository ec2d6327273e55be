# -*- coding: utf-8 -*-
# Pixmesh/mesh/__init__.py

"""
Project: Pixmesh
Date: 10/19/2026

Modules:
--------
- core:    graph model and the builder/reducer/smoother/extruder stages.
- export:  element enumeration, PYFEM and neutral serializers, JSON and meshio output.
- checks:  rule-based validation of graphs and their exports.
- stats:   structural summaries of a graph.
- config:  settings defaults, merge and validation.
- errors:  typed exceptions.
- api:     high-level raster -> mesh file pipeline.
"""

__all__ = ["core", "export", "checks", "stats", "config", "errors", "api"]
