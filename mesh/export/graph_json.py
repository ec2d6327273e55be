# -*- coding: utf-8 -*-
# Pixmesh/mesh/export/graph_json.py

"""
Project: Pixmesh
Date: 10/19/2026

Purpose:
--------
Lossless JSON form of a graph, so that pre-built component models can be saved once and
re-exported or re-extruded later without rasterizing again.

Schema:
-------
    {
      "version": 1,
      "vertices": [
        {"x": int, "y": int, "z": int, "neighbors": [int], "surrounding": [int], "exterior": bool},
        ...
      ]
    }

Notes:
------
- `idx` is implied by list position and not stored.
- Loading validates keys and neighbor ranges; violations raise InvalidInput.
"""

import json
from typing import Any, Dict

from mesh.core.graph import Graph
from mesh.errors import InvalidInput
from .writer import write_text

FORMAT_VERSION = 1
_REQUIRED = ("x", "y", "z", "neighbors")


def graph_to_dict(graph: Graph) -> Dict[str, Any]:
    return {
        "version": FORMAT_VERSION,
        "vertices": [
            {
                "x": v.x,
                "y": v.y,
                "z": v.z,
                "neighbors": list(v.neighbors),
                "surrounding": list(v.surrounding),
                "exterior": bool(v.exterior),
            }
            for v in graph
        ],
    }


def graph_from_dict(data: Dict[str, Any]) -> Graph:
    """
    Rebuild a graph from `graph_to_dict` output.

    Raises
    ------
    InvalidInput
        On unsupported versions, missing keys or indices outside the vertex range.
    """
    if not isinstance(data, dict) or "vertices" not in data:
        raise InvalidInput("graph payload must be a dict with a 'vertices' list.")
    version = data.get("version", FORMAT_VERSION)
    if version != FORMAT_VERSION:
        raise InvalidInput("unsupported graph format version.", {"version": version})

    records = data["vertices"]
    n = len(records)
    graph = Graph()
    for i, rec in enumerate(records):
        missing = [k for k in _REQUIRED if k not in rec]
        if missing:
            raise InvalidInput("vertex record is missing keys.", {"vertex": i, "missing": missing})
        refs = list(rec["neighbors"]) + list(rec.get("surrounding", []))
        bad = [r for r in refs if not isinstance(r, int) or r < 0 or r >= n]
        if bad:
            raise InvalidInput("vertex references unknown indices.", {"vertex": i, "indices": bad[:5]})
        graph.add_vertex(
            rec["x"], rec["y"], rec["z"],
            neighbors=rec["neighbors"],
            surrounding=rec.get("surrounding", []),
            exterior=rec.get("exterior", True),
        )
    return graph


def dump_graph(graph: Graph, path: str) -> str:
    """Write the graph as indented JSON; returns the path written."""
    return write_text(json.dumps(graph_to_dict(graph), indent=2), path)


def load_graph(path: str) -> Graph:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidInput("graph file is not valid JSON.", {"path": path, "error": str(e)})
    return graph_from_dict(data)
