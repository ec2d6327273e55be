# -*- coding: utf-8 -*-
# Pixmesh/mesh/errors.py

"""
Project: Pixmesh
Date: 10/19/2026

Purpose
-------
Typed exceptions for the meshing pipeline with compact, context-aware messages so that
input-contract violations and bad settings read the same way across the builder,
smoother, extruder and exporters.

Main Tasks
----------
    1. Define MeshError(message, context) with a compact context suffix in __str__.
    2. Provide typed subclasses: InvalidInput, ConfigError.

Notes
-----
- Context is optional; long values are truncated for readability.
- Nothing in the pipeline retries: every raised error is a caller contract violation.
"""

__all__ = [
    "MeshError",
    "InvalidInput",
    "ConfigError",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class MeshError(Exception):
    """
    Base class for all pipeline errors.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields appended to the string form (e.g., {"expected": 16, "got": 12}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super().__init__(message)

    def __str__(self):
        base = super().__str__()
        return base + _format_context(self.context)


class InvalidInput(MeshError):
    """
    The caller handed the pipeline data that breaks its input contract:
      - pixel buffer length != width * height * 4
      - negative or non-integer raster dimensions
      - malformed serialized graphs (missing keys, dangling neighbor indices)
    """


class ConfigError(MeshError):
    """
    Settings or stage arguments that cannot be honored:
      - unknown channel rule or export format
      - non-finite smoothing distance
      - negative or non-integer extrusion thickness
    """
