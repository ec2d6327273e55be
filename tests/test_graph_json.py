# -*- coding: utf-8 -*-
# Pixmesh/tests/test_graph_json.py

import json

import pytest

from mesh.core import build, extrude
from mesh.errors import InvalidInput
from mesh.export import dump_graph, graph_from_dict, graph_to_dict, load_graph


def test_dump_and_load(tmp_path, make_raster, l_shape_rows):
    g = build(*make_raster(l_shape_rows), reduce=True)
    extrude(g, 1)
    path = dump_graph(g, str(tmp_path / "g.json"))
    assert load_graph(path) == g


def test_idx_is_positional(tetra_graph):
    data = graph_to_dict(tetra_graph)
    assert data["version"] == 1
    assert "idx" not in data["vertices"][0]
    assert data["vertices"][0]["neighbors"] == [1, 2, 3]


def test_defaults_for_optional_keys():
    g = graph_from_dict({"vertices": [{"x": 0, "y": 0, "z": 0, "neighbors": []}]})
    assert g[0].exterior is True
    assert g[0].surrounding == []


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"version": 1},
        {"version": 99, "vertices": []},
        {"vertices": [{"x": 0, "y": 0, "neighbors": []}]},
        {"vertices": [{"x": 0, "y": 0, "z": 0, "neighbors": [1]}]},
        {"vertices": [{"x": 0, "y": 0, "z": 0, "neighbors": [], "surrounding": [-1]}]},
    ],
)
def test_rejects_malformed(payload):
    with pytest.raises(InvalidInput):
        graph_from_dict(payload)


def test_load_rejects_bad_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(InvalidInput):
        load_graph(str(path))


def test_dump_is_plain_json(tmp_path, tetra_graph):
    path = dump_graph(tetra_graph, str(tmp_path / "t.json"))
    with open(path) as f:
        assert len(json.load(f)["vertices"]) == 4
