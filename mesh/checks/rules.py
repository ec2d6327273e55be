# -*- coding: utf-8 -*-
# Pixmesh/mesh/checks/rules.py

"""
Project: Pixmesh
Date: 10/19/2026

Purpose:
--------
Validation rules over a Graph and its exports. Each rule returns a finding dict and
never raises on a bad graph; the orchestrator decides what a failure means.

Rule signature:
---------------
    fn(graph, thresholds_dict, cache_dict) -> {"ok": bool, "count": int, "examples": list, "notes": str}

Rules:
------
   - index_invariant:    graph[i].idx == i for every i.
   - dangling_neighbors: neighbor/surrounding indices name existing vertices.
   - self_links:         no vertex lists itself as a neighbor.
   - volume_degeneracy:  no tetrahedron is constant on any axis.
   - surface_planarity:  every triangle is exterior and constant on exactly one axis.
   - export_counts:      declared section counts match the data lines of both formats.
   - isolated_vertices:  vertices with no links in either direction.
"""

from typing import Any, Dict, List, Sequence

from mesh.core.graph import Graph
from mesh.export.elements import constant_axes, surface_elements, volume_elements
from mesh.export.nmesh import export_pyfem
from mesh.export.neutral import export_neutral


def _finding(bad: Sequence[Any], thresholds: Dict[str, Any], ok_notes: str, bad_notes: str) -> Dict[str, Any]:
    k = int(thresholds.get("max_examples", 5))
    return {
        "ok": not bad,
        "count": len(bad),
        "examples": list(bad[:k]),
        "notes": bad_notes.format(len(bad)) if bad else ok_notes,
    }


def _skipped(reason: str) -> Dict[str, Any]:
    return {"ok": False, "count": 0, "examples": [], "notes": "skipped: " + reason}


def precompute_cache(graph: Graph, thresholds: Dict[str, Any]) -> Dict[str, Any]:
    """
    Enumerate elements and render both formats once for all rules. Skipped when the
    graph has dangling references, which would make enumeration fail.
    """
    n = len(graph)
    refs_ok = all(0 <= i < n for v in graph for i in list(v.neighbors) + list(v.surrounding))
    cache: Dict[str, Any] = {"refs_ok": refs_ok}
    if refs_ok:
        include_volumes = bool(thresholds.get("include_volumes", True))
        cache["surfaces"] = surface_elements(graph)
        cache["volumes"] = volume_elements(graph, enabled=include_volumes)
        cache["nmesh"] = export_pyfem(graph, include_volumes=include_volumes)
        cache["neutral"] = export_neutral(graph, include_volumes=include_volumes)
    return cache


# ---------- section parsing ----------
def _walk_sections(lines: List[str], start: int, n_sections: int) -> List[int]:
    """
    Read `n_sections` count-prefixed blocks from `lines[start:]`; returns the counts.
    Raises ValueError if a count is malformed or the blocks do not cover all lines.
    """
    pos = start
    counts = []
    for _ in range(n_sections):
        if pos >= len(lines):
            raise ValueError("missing section count at line {}".format(pos + 1))
        count = int(lines[pos])
        if count < 0 or pos + 1 + count > len(lines):
            raise ValueError("section at line {} declares {} lines".format(pos + 1, count))
        counts.append(count)
        pos += 1 + count
    if pos != len(lines):
        raise ValueError("{} trailing lines after last section".format(len(lines) - pos))
    return counts


def _nmesh_problems(text: str) -> List[str]:
    lines = text.split("\n")
    try:
        counts = _walk_sections(lines, 2, 4)
    except ValueError as e:
        return ["nmesh: {}".format(e)]
    try:
        header = dict(
            part.strip().split(" = ")
            for part in lines[1].lstrip("#").split("\t")
        )
        declared = [int(header[k]) for k in ("nodes", "simplices", "surfaces", "periodic")]
    except (ValueError, KeyError, IndexError):
        return ["nmesh: malformed header line"]
    if declared != counts:
        return ["nmesh: header {} != sections {}".format(declared, counts)]
    return []


def _neutral_problems(text: str) -> List[str]:
    try:
        _walk_sections(text.split("\n"), 0, 3)
    except ValueError as e:
        return ["neutral: {}".format(e)]
    return []


# ---------- rules ----------
def index_invariant(graph: Graph, thresholds: Dict[str, Any], cache: Dict[str, Any]) -> Dict[str, Any]:
    bad = [i for i, v in enumerate(graph) if v.idx != i]
    return _finding(bad, thresholds, "All vertex indices match their position.", "{} vertices out of place.")


def dangling_neighbors(graph: Graph, thresholds: Dict[str, Any], cache: Dict[str, Any]) -> Dict[str, Any]:
    n = len(graph)
    bad = [
        (v.idx, i) for v in graph
        for i in list(v.neighbors) + list(v.surrounding)
        if not 0 <= i < n
    ]
    return _finding(bad, thresholds, "All references resolve.", "{} references to missing vertices.")


def self_links(graph: Graph, thresholds: Dict[str, Any], cache: Dict[str, Any]) -> Dict[str, Any]:
    bad = [v.idx for v in graph if v.idx in v.neighbors]
    return _finding(bad, thresholds, "No self links.", "{} vertices link to themselves.")


def volume_degeneracy(graph: Graph, thresholds: Dict[str, Any], cache: Dict[str, Any]) -> Dict[str, Any]:
    if not cache.get("refs_ok"):
        return _skipped("dangling neighbors")
    bad = [vol for vol in cache["volumes"] if constant_axes([graph[i] for i in vol]) != 0]
    return _finding(bad, thresholds, "{} volumes, none degenerate.".format(len(cache["volumes"])),
                    "{} degenerate volumes.")


def surface_planarity(graph: Graph, thresholds: Dict[str, Any], cache: Dict[str, Any]) -> Dict[str, Any]:
    if not cache.get("refs_ok"):
        return _skipped("dangling neighbors")
    bad = []
    for s in cache["surfaces"]:
        nodes = [graph[i] for i in s]
        if not all(n.exterior for n in nodes) or constant_axes(nodes) != 1:
            bad.append(s)
    return _finding(bad, thresholds, "{} surfaces, all planar and exterior.".format(len(cache["surfaces"])),
                    "{} surfaces not planar in exactly one axis or not exterior.")


def export_counts(graph: Graph, thresholds: Dict[str, Any], cache: Dict[str, Any]) -> Dict[str, Any]:
    if not cache.get("refs_ok"):
        return _skipped("dangling neighbors")
    bad = _nmesh_problems(cache["nmesh"]) + _neutral_problems(cache["neutral"])
    return _finding(bad, thresholds, "Section counts match in both formats.", "{} count mismatches.")


def isolated_vertices(graph: Graph, thresholds: Dict[str, Any], cache: Dict[str, Any]) -> Dict[str, Any]:
    n = len(graph)
    referenced = set(i for v in graph for i in v.neighbors if 0 <= i < n)
    bad = [v.idx for v in graph if not v.neighbors and v.idx not in referenced]
    return _finding(bad, thresholds, "No isolated vertices.", "{} isolated vertices.")
