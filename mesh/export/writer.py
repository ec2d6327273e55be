# -*- coding: utf-8 -*-
# Pixmesh/mesh/export/writer.py

"""
Project: Pixmesh
Date: 10/19/2026

Purpose:
--------
File output for exported meshes: atomic text writes for the native formats, and a
meshio bridge for everything meshio can write (VTU, VTK, XDMF, Gmsh, ...).

Main Tasks:
-----------
   - `write_text`: atomic UTF-8 write (temp file + os.replace), parents created.
   - `write_meshio`: tetra + triangle cells from the element enumerators.

Notes:
------
   - meshio is imported lazily so the text exporters work without it.
"""

import os
import tempfile
from pathlib import Path
from typing import Optional
import numpy as np

from mesh.core.graph import Graph
from .elements import element_arrays


def write_text(text: str, path: str) -> str:
    """
    Atomic UTF-8 write; returns the path written.
    """
    p = Path(path)
    if not p.parent.exists():
        p.parent.mkdir(parents=True)
    tf = tempfile.NamedTemporaryFile("w", encoding="utf-8", dir=str(p.parent), delete=False)
    tmp_name = tf.name
    try:
        with tf:
            tf.write(text)
        os.replace(tmp_name, str(p))
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
    return str(p)


def write_meshio(
    graph: Graph,
    path: str,
    include_volumes: bool = True,
    file_format: Optional[str] = None,
) -> str:
    """
    Write the graph's tetrahedra and surface triangles with meshio.

    Parameters
    ----------
    graph : Graph
        Finished graph.
    path : str
        Output file; the format is inferred from the suffix unless `file_format` is given.
    include_volumes : bool, optional
        Include tetra cells (default True).
    file_format : str, optional
        Explicit meshio format name (e.g., "vtu", "gmsh22").

    Raises
    ------
    RuntimeError
        If meshio is not installed.
    """
    try:
        import meshio  # lazy import
    except ImportError:
        raise RuntimeError("meshio is required for this export. Install via: pip install meshio")

    vols, surfs = element_arrays(graph, include_volumes=include_volumes)
    points = np.array([v.coords for v in graph], dtype=float).reshape(-1, 3)

    cells = []
    if len(vols):
        cells.append(("tetra", vols))
    if len(surfs):
        cells.append(("triangle", surfs))

    p = Path(path)
    if not p.parent.exists():
        p.parent.mkdir(parents=True)
    meshio.write(str(p), meshio.Mesh(points=points, cells=cells), file_format=file_format)
    return str(p)
