# -*- coding: utf-8 -*-
# Pixmesh/tests/test_reducer.py

import pytest

from mesh.core import build, reduce_redundant_edges
from mesh.errors import InvalidInput
from mesh.export import graph_from_dict


def test_block_loses_odd_cell_links(block3):
    assert block3.n_links() == 24
    out = reduce_redundant_edges(block3)
    assert out is block3
    for i in (1, 3, 5, 7):
        assert block3[i].neighbors == []
    assert block3[0].neighbors == [1, 3]
    assert block3[2].neighbors == [1, 5]
    assert block3[4].neighbors == [3, 5, 1, 7]
    assert block3[6].neighbors == [7, 3]
    assert block3[8].neighbors == [7, 5]
    assert block3.n_links() == 12


def test_vertices_and_coordinates_untouched(block3):
    before = [(v.idx, v.coords, list(v.surrounding)) for v in block3]
    reduce_redundant_edges(block3)
    assert [(v.idx, v.coords, list(v.surrounding)) for v in block3] == before


def test_missing_diagonal_keeps_link(make_raster):
    # (row 0, col 1) links left to (0, 0); bottom (1, 1) exists but bottom-left does not
    g = build(*make_raster([[1, 1], [0, 1]]))
    assert g[1].neighbors == [0, 2]
    reduce_redundant_edges(g)
    assert 0 in g[1].neighbors


def test_idempotent(make_raster, l_shape_rows):
    g = build(*make_raster(l_shape_rows), reduce=True)
    once = g.copy()
    reduce_redundant_edges(g)
    assert g == once


def test_empty_graph():
    g = build(0, 0, b"")
    assert len(reduce_redundant_edges(g)) == 0


def test_negative_coordinates_rejected():
    g = graph_from_dict({"vertices": [
        {"x": 0, "y": -3, "z": 0, "neighbors": [1]},
        {"x": 1, "y": -3, "z": 0, "neighbors": [0]},
    ]})
    with pytest.raises(InvalidInput):
        reduce_redundant_edges(g)
