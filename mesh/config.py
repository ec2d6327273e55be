# -*- coding: utf-8 -*-
# Pixmesh/mesh/config.py

"""
Project: Pixmesh
Date: 10/19/2026

Purpose:
--------
Pipeline settings: curated defaults, a right-biased deep merge for user overrides, and
validation that fails fast with ConfigError before any stage runs.

Settings schema:
----------------
{
  "raster":    {"channel_rule": "any" | "first", "invert": bool},
  "graph":     {"reduce": bool},
  "smoothing": {"enabled": bool, "max_dist": float},
  "extrusion": {"thickness": int >= 0},
  "export":    {"include_volumes": bool, "formats": [ "nmesh" | "neutral" | "json" | "vtu" ]},
}

Notes:
------
- Unknown top-level sections pass through untouched.
- `include_volumes` switches tetrahedron output on or off in every exporter.
"""

from typing import Any, Dict, Optional
import copy
import json
import math
import numbers

from raster.bitmap import CHANNEL_RULES
from .errors import ConfigError

EXPORT_FORMATS = ("nmesh", "neutral", "json", "vtu")

DEFAULTS: Dict[str, Any] = {
    "raster": {
        "channel_rule": "any",
        "invert": False,
    },
    "graph": {
        "reduce": True,
    },
    "smoothing": {
        "enabled": True,
        "max_dist": 5.0,
    },
    "extrusion": {
        "thickness": 0,
    },
    "export": {
        "include_volumes": True,
        "formats": ["nmesh", "neutral"],
    },
}


def _deep_merge(base: Dict[str, Any], upd: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Deep-merge two nested dicts (right-biased), preserving types and not mutating inputs.
    """
    if not upd:
        return copy.deepcopy(base)
    out = copy.deepcopy(base)
    for k, v in upd.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def validate_settings(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check a merged settings dict; returns it unchanged.

    Raises
    ------
    ConfigError
        On unknown channel rules or formats, non-finite max_dist, or a negative or
        non-integer thickness.
    """
    rule = cfg["raster"]["channel_rule"]
    if rule not in CHANNEL_RULES:
        raise ConfigError("unknown channel rule.", {"channel_rule": rule, "allowed": CHANNEL_RULES})

    max_dist = cfg["smoothing"]["max_dist"]
    if isinstance(max_dist, bool) or not isinstance(max_dist, numbers.Real) or not math.isfinite(max_dist):
        raise ConfigError("smoothing.max_dist must be a finite number.", {"max_dist": max_dist})

    thickness = cfg["extrusion"]["thickness"]
    if isinstance(thickness, bool) or not isinstance(thickness, numbers.Integral) or thickness < 0:
        raise ConfigError("extrusion.thickness must be an integer >= 0.", {"thickness": thickness})

    formats = cfg["export"]["formats"]
    if isinstance(formats, str):
        raise ConfigError("export.formats must be a list.", {"formats": formats})
    unknown = [f for f in formats if f not in EXPORT_FORMATS]
    if unknown:
        raise ConfigError("unknown export format.", {"formats": unknown, "allowed": EXPORT_FORMATS})

    return cfg


def merge_settings(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Merge `overrides` over DEFAULTS and validate the result.
    """
    return validate_settings(_deep_merge(DEFAULTS, overrides or {}))


def load_settings(path: str) -> Dict[str, Any]:
    """
    Read JSON overrides from `path` and return merged, validated settings.
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            overrides = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError("settings file is not valid JSON.", {"path": path, "error": str(e)})
    if not isinstance(overrides, dict):
        raise ConfigError("settings file must hold a JSON object.", {"path": path})
    return merge_settings(overrides)
