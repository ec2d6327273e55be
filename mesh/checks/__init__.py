# -*- coding: utf-8 -*-
# Pixmesh/mesh/checks/__init__.py

"""
Project: Pixmesh
Date: 10/19/2026

Purpose:
--------
Public API for validating a graph and returning normalized findings suitable for
CLI/CI consumption.

Returned Schema:
----------------
{
  "ok": bool,
  "rules": { <rule_id>: finding_dict, ... },
  "meta": {"n_vertices": int, "n_links": int, "thresholds": dict, "enabled": dict}
}
"""

from typing import Any, Dict, Optional
import copy

from mesh.config import _deep_merge
from mesh.core.graph import Graph
from .registry import REGISTRY, RULES_ORDER, get_enabled_ids
from .rules import precompute_cache

DEFAULTS: Dict[str, Any] = {
    "enabled": {rid: True for rid in RULES_ORDER},
    "thresholds": {
        "max_examples": 5,
        "include_volumes": True,
    },
}


def run_checks(graph: Graph, config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Run all enabled rules (in registry order) against `graph`.

    Parameters
    ----------
    graph : Graph
        Graph at any pipeline stage.
    config : dict, optional
        Overrides for `DEFAULTS` (keys: "enabled", "thresholds").

    Returns
    -------
    dict
        "ok" is False iff an enabled error-severity rule fails.
    """
    cfg = _deep_merge(DEFAULTS, config or {})
    thresholds = cfg.get("thresholds", {})
    cache = precompute_cache(graph, thresholds)

    results: Dict[str, Any] = {}
    for rid in get_enabled_ids(cfg.get("enabled")):
        spec = REGISTRY.get(rid)
        if spec is None:
            continue
        finding = spec.fn(graph, thresholds, cache)
        finding["severity"] = spec.severity
        finding["id"] = rid
        results[rid] = finding

    ok = all(f.get("ok", False) for rid, f in results.items() if REGISTRY[rid].severity == "error")

    return {
        "ok": ok,
        "rules": results,
        "meta": {
            "n_vertices": len(graph),
            "n_links": graph.n_links(),
            "thresholds": copy.deepcopy(thresholds),
            "enabled": copy.deepcopy(cfg.get("enabled", {})),
        },
    }


__all__ = ["DEFAULTS", "run_checks", "REGISTRY", "RULES_ORDER"]
