# -*- coding: utf-8 -*-
# Pixmesh/tests/test_extruder.py

import pytest

from mesh.core import Graph, build, extrude
from mesh.errors import ConfigError, InvalidInput


def test_zero_thickness_is_identity(block3):
    expected = block3.copy()
    assert extrude(block3, 0) is block3
    assert block3 == expected


def test_single_layer_on_column(column2):
    extrude(column2, 1)
    assert [v.coords for v in column2] == [(0, 0, 0), (0, 1, 0), (0, 1, 1), (0, 2, 1)]
    assert column2[0].neighbors == [1]
    assert column2[1].neighbors == [0]
    # copy of v0 keeps its remapped link and bridges down to v1 (same x, y)
    assert column2[2].neighbors == [3, 1]
    assert column2[3].neighbors == [2]
    assert column2[2].surrounding == [] and column2[3].surrounding == []


def test_cumulative_shear(column2):
    extrude(column2, 2)
    assert len(column2) == 6
    assert column2[4].coords == (0, 3, 2)
    assert column2[5].coords == (0, 4, 2)
    assert column2[4].neighbors == [5, 3]
    assert column2[5].neighbors == [4]


def test_layer_sizes_and_depths(make_raster, l_shape_rows):
    g = build(*make_raster(l_shape_rows), reduce=True)
    base = len(g)
    extrude(g, 3)
    assert len(g) == 4 * base
    for z in range(4):
        assert g.layer(z) == list(range(z * base, (z + 1) * base))
    assert all(v.idx == i for i, v in enumerate(g))


def test_y_offset_per_layer(make_raster, l_shape_rows):
    g = build(*make_raster(l_shape_rows))
    base = len(g)
    extrude(g, 3)
    shift = 0
    for z in range(1, 4):
        shift += z
        for k in range(base):
            src, dst = g[k], g[z * base + k]
            assert (dst.x, dst.y) == (src.x, src.y + shift)
            assert dst.exterior == src.exterior


def test_bridges_join_matching_xy(make_raster, l_shape_rows):
    g = build(*make_raster(l_shape_rows), reduce=True)
    extrude(g, 1)
    for v in g:
        for n in v.neighbors:
            u = g[n]
            if u.z != v.z:
                assert (u.x, u.y) == (v.x, v.y)


def test_cross_links_span_one_layer(make_raster, l_shape_rows):
    g = build(*make_raster(l_shape_rows), reduce=True)
    extrude(g, 3)
    for v in g:
        assert all(abs(g[n].z - v.z) <= 1 for n in v.neighbors)


def test_parity_gates_bridges(make_raster):
    g = build(*make_raster([[1, 1, 1]] * 4))
    base = len(g)
    extrude(g, 1)
    for v in g:
        cross = [n for n in v.neighbors if g[n].z != v.z]
        if not cross:
            continue
        same = (v.x % 2) == (v.y % 2)
        # layer 1: lower vertices bridge on same parity, new vertices on mixed parity
        assert same if v.z == 0 else not same
    assert any(g[n].z != g[i].z for i in range(base, len(g)) for n in g[i].neighbors)


def test_copies_get_no_surrounding(block3):
    extrude(block3, 1)
    assert all(v.surrounding == [] for v in block3 if v.z == 1)


@pytest.mark.parametrize("bad", [-1, 1.5, "2", True])
def test_bad_thickness(block3, bad):
    with pytest.raises(ConfigError):
        extrude(block3, bad)


def test_dangling_neighbor_raises():
    g = Graph()
    g.add_vertex(0, 0, 0)
    g.add_vertex(1, 0, 0)
    g[0].neighbors = [7]
    with pytest.raises(InvalidInput):
        extrude(g, 1)
