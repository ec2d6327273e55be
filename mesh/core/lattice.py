# -*- coding: utf-8 -*-
# Pixmesh/mesh/core/lattice.py

"""
Project: Pixmesh
Date: 10/19/2026

Purpose:
--------
Pixel-lattice helpers shared by the builder and the reducer: row-major vertex
numbering of a binary grid and 8-neighborhood lookups.

Notes:
------
- Surrounding order is fixed: top-left, top, top-right, left, right, bottom-left,
  bottom, bottom-right. The smoother's nearest-step tie-breaking relies on it.
"""

from typing import Dict, Optional
import numpy as np

# (name, drow, dcol) in surrounding order
SURROUNDING_OFFSETS = (
    ("top_left", -1, -1),
    ("top", -1, 0),
    ("top_right", -1, 1),
    ("left", 0, -1),
    ("right", 0, 1),
    ("bottom_left", 1, -1),
    ("bottom", 1, 0),
    ("bottom_right", 1, 1),
)

AXIS_ORDER = ("left", "right", "top", "bottom")


def index_grid(binary: np.ndarray) -> np.ndarray:
    """
    Row-major vertex numbering of foreground cells; background cells hold -1.
    """
    grid = np.full(binary.shape, -1, dtype=np.int64)
    rows, cols = np.nonzero(binary)
    grid[rows, cols] = np.arange(rows.size, dtype=np.int64)
    return grid


def neighbor_map(grid: np.ndarray, row: int, col: int) -> Dict[str, Optional[int]]:
    """
    Vertex index of each of the 8 surrounding cells of (row, col); None where the cell
    is outside the raster or background.
    """
    h, w = grid.shape
    out: Dict[str, Optional[int]] = {}
    for name, dr, dc in SURROUNDING_OFFSETS:
        r, c = row + dr, col + dc
        if 0 <= r < h and 0 <= c < w and grid[r, c] >= 0:
            out[name] = int(grid[r, c])
        else:
            out[name] = None
    return out
