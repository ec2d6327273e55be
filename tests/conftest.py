# -*- coding: utf-8 -*-
# Pixmesh/tests/conftest.py

"""
Shared fixtures: tiny rasters described as 0/1 rows and the graphs built from them.
"""

import pytest

from mesh.core import Graph, build

FG = b"\xff\xff\xff\xff"
BG = b"\x00\x00\x00\x00"


def raster_from_rows(rows):
    """
    (width, height, pixels) for a list of equal-length 0/1 rows; foreground pixels are
    opaque white, background pixels all-zero.
    """
    height = len(rows)
    width = len(rows[0]) if rows else 0
    pixels = b"".join(FG if cell else BG for row in rows for cell in row)
    return width, height, pixels


@pytest.fixture
def make_raster():
    return raster_from_rows


@pytest.fixture
def block3():
    """3x3 solid block, built without the reducer."""
    return build(*raster_from_rows([[1, 1, 1], [1, 1, 1], [1, 1, 1]]))


@pytest.fixture
def column2():
    """1-wide, 2-tall column: v0 (0,0) -> [1], v1 (0,1) -> [0]."""
    return build(*raster_from_rows([[1], [1]]))


@pytest.fixture
def tetra_graph():
    """
    One corner vertex linked to three axis neighbors: a single tetrahedron and three
    faces in the coordinate planes.
    """
    g = Graph()
    g.add_vertex(0, 0, 0)
    g.add_vertex(1, 0, 0)
    g.add_vertex(0, 1, 0)
    g.add_vertex(0, 0, 1)
    for n in (1, 2, 3):
        g.link(0, n)
    return g


@pytest.fixture
def l_shape_rows():
    return [
        [1, 1, 0, 0, 0, 0],
        [1, 1, 0, 0, 0, 0],
        [1, 1, 0, 0, 0, 0],
        [1, 1, 1, 1, 1, 1],
        [1, 1, 1, 1, 1, 1],
        [0, 1, 1, 1, 1, 0],
    ]
