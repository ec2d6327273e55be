# -*- coding: utf-8 -*-
# Pixmesh/mesh/stats/__init__.py

"""
Project: Pixmesh
Date: 10/19/2026

Modules
-------
- report: structural summary of a graph (inventory, degree, vertex classes, elements).
- export: CSV/JSON writers for summaries.
"""

from .report import summarize, inventory, degree, vertex_classes
from .export import write_summary_csv, write_summary_json

__all__ = [
    "summarize",
    "inventory",
    "degree",
    "vertex_classes",
    "write_summary_csv",
    "write_summary_json",
]
