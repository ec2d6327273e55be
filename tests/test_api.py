# -*- coding: utf-8 -*-
# Pixmesh/tests/test_api.py

import os

import pytest

from mesh.api import build_mesh, export_mesh, mesh_from_image
from mesh.core import build, extrude, smooth
from mesh.errors import ConfigError, InvalidInput
from mesh.export import export_neutral, export_pyfem, load_graph


def test_build_mesh_matches_stages(make_raster, l_shape_rows):
    raster = make_raster(l_shape_rows)
    g = build_mesh(*raster, {"extrusion": {"thickness": 2}})

    expected = build(*raster, reduce=True)
    smooth(expected, max_dist=5.0)
    extrude(expected, 2)
    assert g == expected


def test_build_mesh_without_optional_stages(make_raster, l_shape_rows):
    raster = make_raster(l_shape_rows)
    g = build_mesh(*raster, {"graph": {"reduce": False}, "smoothing": {"enabled": False}})
    assert g == build(*raster)


def test_build_mesh_rejects_bad_input(make_raster):
    with pytest.raises(InvalidInput):
        build_mesh(3, 3, bytes(5))
    with pytest.raises(ConfigError):
        build_mesh(*make_raster([[1]]), {"extrusion": {"thickness": -2}})


def test_export_mesh_writes_formats(tmp_path, make_raster, l_shape_rows):
    settings = {"extrusion": {"thickness": 1}, "export": {"formats": ["nmesh", "neutral", "json"]}}
    g = build_mesh(*make_raster(l_shape_rows), settings)
    paths = export_mesh(g, str(tmp_path), basename="ell", settings=settings)

    assert set(paths) == {"nmesh", "neutral", "json"}
    assert paths["nmesh"].endswith("ell.nmesh")
    assert paths["neutral"].endswith("ell.mesh")
    with open(paths["nmesh"], encoding="utf-8") as f:
        assert f.read() == export_pyfem(g)
    with open(paths["neutral"], encoding="utf-8") as f:
        assert f.read() == export_neutral(g)
    assert load_graph(paths["json"]) == g


def test_export_mesh_vtu(tmp_path, tetra_graph):
    pytest.importorskip("meshio")
    paths = export_mesh(tetra_graph, str(tmp_path), settings={"export": {"formats": ["vtu"]}})
    assert os.path.isfile(paths["vtu"])


def test_mesh_from_image(tmp_path):
    from PIL import Image

    img = Image.new("RGBA", (4, 4), (0, 0, 0, 0))
    for x in range(1, 3):
        for y in range(4):
            img.putpixel((x, y), (255, 255, 255, 255))
    src = tmp_path / "bar.png"
    img.save(src)

    out = mesh_from_image(str(src), str(tmp_path / "out"), {"extrusion": {"thickness": 1}})
    g = out["graph"]
    assert out["summary"]["inventory"]["n_vertices"] == len(g)
    assert out["summary"]["inventory"]["n_layers"] == 2
    assert os.path.basename(out["paths"]["nmesh"]) == "bar.nmesh"
    assert os.path.isfile(out["paths"]["neutral"])
