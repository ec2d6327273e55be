# -*- coding: utf-8 -*-
# Pixmesh/mesh/stats/export.py

"""
Project: Pixmesh
Date: 10/19/2026

Purpose:
--------
Write graph summaries (nested dicts from `report.summarize`) to CSV and JSON. The CSV
writer flattens nested keys into dot-paths; numpy scalars and lists are JSON-encoded.

Main Tasks:
-----------
    1. Flatten nested dictionaries into ("dot.path.key", value) rows.
    2. CSV: 2-column "key,value" table.
    3. JSON: structured, indented JSON.
"""

from typing import Any, Dict, List, Tuple
import csv
import json
import os

import numpy as np


def _is_scalar(x: Any) -> bool:
    return isinstance(x, (str, bool, int, float, np.generic))


def _default(o: Any) -> Any:
    if isinstance(o, np.generic):
        return o.item()
    return str(o)


def _to_json_str(x: Any) -> str:
    """
    JSON string of `x`, unwrapping numpy scalars.
    """
    return json.dumps(x, default=_default, ensure_ascii=False)


def _flatten(prefix: str, obj: Any, out: List[Tuple[str, Any]]) -> None:
    """
    Recursively flatten nested dicts into (key_path, value) rows; lists and other
    objects are stored as JSON strings.
    """
    if _is_scalar(obj):
        out.append((prefix, obj))
        return

    if isinstance(obj, dict):
        for k in sorted(obj.keys(), key=str):
            key = str(k)
            p2 = key if prefix == "" else "{}.{}".format(prefix, key)
            _flatten(p2, obj[k], out)
        return

    out.append((prefix, _to_json_str(obj)))


def _ensure_parent(path: str) -> None:
    folder = os.path.dirname(os.path.abspath(path))
    if folder and not os.path.exists(folder):
        os.makedirs(folder, exist_ok=True)


def write_summary_csv(summary: Dict[str, Any], path: str) -> str:
    """
    Write `summary` as a "key,value" CSV; returns the path written.
    """
    rows: List[Tuple[str, Any]] = []
    _flatten("", summary, rows)

    _ensure_parent(path)
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["key", "value"])
        for k, v in rows:
            w.writerow([k, v])
    return path


def write_summary_json(summary: Dict[str, Any], path: str, indent: int = 2) -> str:
    """
    Write `summary` as indented JSON; returns the path written.
    """
    _ensure_parent(path)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(summary, f, indent=indent, default=_default, ensure_ascii=False)
    return path
