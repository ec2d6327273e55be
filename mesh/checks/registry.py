# -*- coding: utf-8 -*-
# Pixmesh/mesh/checks/registry.py

"""
Project: Pixmesh
Date: 10/19/2026

Purpose:
--------
Central registry of graph validation rules. Each rule is defined once here with its
metadata (id, function, severity), providing a single source of truth for execution
order and selection.

Notes:
------
   - Duplicates are disallowed: adding a rule with an existing id raises ValueError.
   - Severity is constrained to {"error", "warn"}.
   - Structural rules run first; element and export rules depend on them.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from . import rules as _r


@dataclass(frozen=True)
class RuleSpec:
    id: str
    fn: Callable  # signature: fn(graph, thresholds_dict, cache_dict) -> finding_dict
    severity: str  # "error" | "warn"


REGISTRY: Dict[str, RuleSpec] = {}


def _add(spec: RuleSpec) -> None:
    if spec.id in REGISTRY:
        raise ValueError(f"Duplicate rule id in registry: {spec.id}")
    if spec.severity not in ("error", "warn"):
        raise ValueError(f"Invalid severity for {spec.id}: {spec.severity}")
    REGISTRY[spec.id] = spec


_add(RuleSpec("index_invariant",    _r.index_invariant,    "error"))
_add(RuleSpec("dangling_neighbors", _r.dangling_neighbors, "error"))
_add(RuleSpec("self_links",         _r.self_links,         "warn"))
_add(RuleSpec("volume_degeneracy",  _r.volume_degeneracy,  "error"))
_add(RuleSpec("surface_planarity",  _r.surface_planarity,  "error"))
_add(RuleSpec("export_counts",      _r.export_counts,      "error"))
_add(RuleSpec("isolated_vertices",  _r.isolated_vertices,  "warn"))


RULES_ORDER: List[str] = [
    "index_invariant",
    "dangling_neighbors",
    "self_links",
    "volume_degeneracy",
    "surface_planarity",
    "export_counts",
    "isolated_vertices",
]


def get_enabled_ids(enabled_map: Optional[Dict[str, bool]]) -> List[str]:
    """
    Filter RULES_ORDER by a rule_id -> bool map; absent ids default to enabled.
    """
    if not enabled_map:
        return list(RULES_ORDER)
    return [rid for rid in RULES_ORDER if enabled_map.get(rid, True)]
