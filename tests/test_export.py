# -*- coding: utf-8 -*-
# Pixmesh/tests/test_export.py

import numpy as np
import pytest

from mesh.core import build, extrude, smooth
from mesh.export import (
    constant_axes,
    element_arrays,
    export_neutral,
    export_pyfem,
    surface_elements,
    volume_elements,
    write_meshio,
    write_text,
)


def _sections(lines, start, n):
    """Counts of `n` count-prefixed sections starting at `lines[start]`."""
    counts, pos = [], start
    for _ in range(n):
        c = int(lines[pos])
        counts.append(c)
        pos += 1 + c
    assert pos == len(lines)
    return counts


@pytest.fixture
def solid(make_raster, l_shape_rows):
    g = build(*make_raster(l_shape_rows), reduce=True)
    smooth(g)
    extrude(g, 2)
    return g


def test_tetra_pyfem(tetra_graph):
    assert export_pyfem(tetra_graph) == "\n".join([
        "# PYFEM mesh file version 1.0",
        "# dim = 3\tnodes = 4\tsimplices = 1\tsurfaces = 3\tperiodic = 0",
        "4",
        "0\t0\t0",
        "1\t0\t0",
        "0\t1\t0",
        "0\t0\t1",
        "1",
        "1\t0\t1\t2\t3",
        "3",
        "1\t-1\t0\t1\t2",
        "1\t-1\t0\t1\t3",
        "1\t-1\t0\t2\t3",
        "0",
    ])


def test_tetra_neutral_is_one_based(tetra_graph):
    assert export_neutral(tetra_graph) == "\n".join([
        "4",
        "0\t0\t0",
        "1\t0\t0",
        "0\t1\t0",
        "0\t0\t1",
        "1",
        "1\t1\t2\t3\t4",
        "3",
        "1\t1\t2\t3",
        "1\t1\t2\t4",
        "1\t1\t3\t4",
    ])


def test_isolated_pixel(make_raster):
    g = build(*make_raster([[1]]))
    assert export_pyfem(g) == "\n".join([
        "# PYFEM mesh file version 1.0",
        "# dim = 3\tnodes = 1\tsimplices = 0\tsurfaces = 0\tperiodic = 0",
        "1",
        "0\t0\t0",
        "0",
        "0",
        "0",
    ])
    assert export_neutral(g) == "1\n0\t0\t0\n0\n0"


def test_empty_graph(make_raster):
    g = build(*make_raster([[0]]))
    assert export_neutral(g) == "0\n0\n0"
    assert export_pyfem(g).split("\n")[2:] == ["0", "0", "0", "0"]


def test_volumes_can_be_disabled(tetra_graph):
    assert volume_elements(tetra_graph, enabled=False) == []
    lines = export_pyfem(tetra_graph, include_volumes=False).split("\n")
    assert "simplices = 0" in lines[1]
    assert _sections(lines, 2, 4) == [4, 0, 3, 0]
    assert _sections(export_neutral(tetra_graph, include_volumes=False).split("\n"), 0, 3) == [4, 0, 3]


def test_interior_vertices_excluded_from_surfaces(tetra_graph):
    tetra_graph[3].exterior = False
    assert surface_elements(tetra_graph) == [(0, 1, 2)]
    # volumes ignore the exterior flag
    assert volume_elements(tetra_graph) == [(0, 1, 2, 3)]


def test_planar_block_surfaces(block3):
    from mesh.core import reduce_redundant_edges

    reduce_redundant_edges(block3)
    surfs = surface_elements(block3)
    assert len(surfs) == 8
    assert (0, 1, 3) in surfs
    # collinear triples are not faces
    assert (4, 3, 5) not in surfs and (4, 1, 7) not in surfs
    assert volume_elements(block3) == []


def test_count_fidelity(solid):
    lines = export_pyfem(solid).split("\n")
    header = dict(p.strip().split(" = ") for p in lines[1].lstrip("#").split("\t"))
    counts = _sections(lines, 2, 4)
    assert [int(header[k]) for k in ("nodes", "simplices", "surfaces", "periodic")] == counts
    assert counts[0] == len(solid)
    assert counts[1] == len(volume_elements(solid))
    assert counts[2] == len(surface_elements(solid))

    neutral = _sections(export_neutral(solid).split("\n"), 0, 3)
    assert neutral == counts[:3]


def test_element_geometry(solid):
    vols = volume_elements(solid)
    assert vols, "extruded solid should produce tetrahedra"
    for vol in vols:
        assert constant_axes([solid[i] for i in vol]) == 0
    for s in surface_elements(solid):
        nodes = [solid[i] for i in s]
        assert constant_axes(nodes) == 1
        assert all(n.exterior for n in nodes)


def test_neutral_indices_in_range(solid):
    lines = export_neutral(solid).split("\n")
    n = int(lines[0])
    n_vol = int(lines[n + 1])
    for row in lines[n + 2:n + 2 + n_vol]:
        idx = [int(t) for t in row.split("\t")[1:]]
        assert all(1 <= i <= n for i in idx)


def test_element_arrays_shapes(tetra_graph, block3):
    vols, surfs = element_arrays(tetra_graph)
    assert vols.shape == (1, 4) and surfs.shape == (3, 3)
    assert vols.dtype == np.int64
    vols, _ = element_arrays(block3, include_volumes=False)
    assert vols.shape == (0, 4)


def test_exports_do_not_mutate(solid):
    before = solid.copy()
    export_pyfem(solid)
    export_neutral(solid)
    assert solid == before


def test_write_text_creates_parents(tmp_path):
    path = tmp_path / "a" / "b" / "m.nmesh"
    assert write_text("x\ty", str(path)) == str(path)
    assert path.read_text(encoding="utf-8") == "x\ty"


def test_write_text_cleans_up_on_failure(tmp_path):
    out = tmp_path / "out"
    target = out / "m.nmesh"
    write_text("old", str(target))
    with pytest.raises(TypeError):
        write_text(123, str(target))
    assert [p.name for p in out.iterdir()] == ["m.nmesh"]
    assert target.read_text(encoding="utf-8") == "old"


def test_write_meshio_vtu(tmp_path, tetra_graph):
    meshio = pytest.importorskip("meshio")
    path = write_meshio(tetra_graph, str(tmp_path / "m.vtu"))
    mesh = meshio.read(path)
    assert mesh.points.shape == (4, 3)
    types = {block.type: len(block.data) for block in mesh.cells}
    assert types == {"tetra": 1, "triangle": 3}
