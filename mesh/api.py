# -*- coding: utf-8 -*-
# Pixmesh/mesh/api.py

"""
Project: Pixmesh
Date: 10/19/2026

Purpose
-------
High-level API for turning a raster silhouette into finite-element mesh files. Ties
together the builder, smoother, extruder and exporters behind a settings dict, and
exposes three entry points: `build_mesh` (raster -> Graph), `export_mesh`
(Graph -> files) and `mesh_from_image` (image file -> files + summary).

Main Tasks
----------
    1. Merge and validate settings (`mesh.config`).
    2. Build the planar graph (optionally reducing redundant edges).
    3. Smooth boundary corners when enabled.
    4. Extrude into `thickness` extra layers.
    5. Write the requested formats and return their paths.
"""

from typing import Any, Dict, Optional
import logging
import os

from raster.loaders import load_image
from .config import merge_settings
from .core import Graph, build, smooth, extrude
from .export import export_pyfem, export_neutral, dump_graph, write_text, write_meshio
from .stats import summarize

logger = logging.getLogger(__name__)

# format -> file suffix
SUFFIXES = {
    "nmesh": ".nmesh",
    "neutral": ".mesh",
    "json": ".json",
    "vtu": ".vtu",
}


def build_mesh(width: int, height: int, pixels: Any, settings: Optional[Dict[str, Any]] = None) -> Graph:
    """
    Run the full meshing pipeline on an in-memory raster.

    Parameters
    ----------
    width, height : int
        Raster dimensions.
    pixels : bytes-like or np.ndarray
        width * height * 4 bytes.
    settings : dict, optional
        Overrides merged over `mesh.config.DEFAULTS`.

    Returns
    -------
    Graph
        The extruded graph.

    Raises
    ------
    InvalidInput
        If the pixel buffer does not match the dimensions.
    ConfigError
        If the merged settings are invalid.
    """
    cfg = merge_settings(settings)

    graph = build(
        width, height, pixels,
        channel_rule=cfg["raster"]["channel_rule"],
        reduce=bool(cfg["graph"]["reduce"]),
    )

    if cfg["smoothing"]["enabled"]:
        smooth(graph, max_dist=cfg["smoothing"]["max_dist"])
    else:
        logger.info("[build_mesh] smoothing disabled")

    extrude(graph, int(cfg["extrusion"]["thickness"]))
    logger.info("[build_mesh] %r", graph)
    return graph


def export_mesh(
    graph: Graph,
    out_dir: str,
    basename: str = "mesh",
    settings: Optional[Dict[str, Any]] = None,
) -> Dict[str, str]:
    """
    Write every format listed in settings["export"]["formats"] into `out_dir`.

    Returns
    -------
    dict
        {format: written_path}
    """
    cfg = merge_settings(settings)
    include_volumes = bool(cfg["export"]["include_volumes"])

    paths: Dict[str, str] = {}
    for fmt in cfg["export"]["formats"]:
        path = os.path.join(out_dir, basename + SUFFIXES[fmt])
        if fmt == "nmesh":
            paths[fmt] = write_text(export_pyfem(graph, include_volumes=include_volumes), path)
        elif fmt == "neutral":
            paths[fmt] = write_text(export_neutral(graph, include_volumes=include_volumes), path)
        elif fmt == "json":
            paths[fmt] = dump_graph(graph, path)
        elif fmt == "vtu":
            paths[fmt] = write_meshio(graph, path, include_volumes=include_volumes)
        logger.info("[export_mesh] %s written to %s", fmt, paths[fmt])
    return paths


def mesh_from_image(
    filename: str,
    out_dir: str,
    settings: Optional[Dict[str, Any]] = None,
    basename: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Load an image, mesh it and write the configured formats.

    Returns
    -------
    dict
        {"graph": Graph, "paths": {format: path}, "summary": dict}
    """
    cfg = merge_settings(settings)
    img = load_image(filename, invert=bool(cfg["raster"]["invert"]))
    logger.info("[mesh_from_image] %s: %dx%d", filename, img.width, img.height)

    graph = build_mesh(img.width, img.height, img.pixels, cfg)
    if basename is None:
        basename = os.path.splitext(os.path.basename(filename))[0]
    paths = export_mesh(graph, out_dir, basename=basename, settings=cfg)
    summary = summarize(graph, include_volumes=bool(cfg["export"]["include_volumes"]))
    return {"graph": graph, "paths": paths, "summary": summary}
