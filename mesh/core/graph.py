# -*- coding: utf-8 -*-
# Pixmesh/mesh/core/graph.py

"""
Project: Pixmesh
Date: 10/19/2026

Purpose:
--------
Append-only vertex arena shared by every pipeline stage. A vertex is a fixed record
(coordinates, stable index, neighbor and surrounding index lists, exterior flag);
the Graph owns the ordered sequence and guarantees `graph[i].idx == i`.

Main Tasks:
-----------
   - `Vertex` dataclass with defaulted fields set at construction.
   - `Graph.add_vertex` appends and assigns the next index.
   - Directed, idempotent `link`/`unlink` on integer indices.
   - Layer snapshots (`layer(z)`) and structural equality/copy.

Notes:
------
   - Neighbor lists are deduplicated and keep insertion order; element enumeration
     in the exporters depends on that order.
   - Vertices are never removed or reordered.
"""

import copy
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List


@dataclass
class Vertex:
    """
    One point of the mesh graph.

    `surrounding` holds the 8-connected foreground pixels found by the builder and is
    empty for every vertex created afterwards (smoothing bridges, extruded layers).
    """
    x: int
    y: int
    z: int
    idx: int
    neighbors: List[int] = field(default_factory=list)
    surrounding: List[int] = field(default_factory=list)
    exterior: bool = True

    @property
    def coords(self):
        return (self.x, self.y, self.z)


class Graph:
    """
    Ordered, append-only sequence of vertices.
    """

    def __init__(self):
        self._vertices: List[Vertex] = []

    # ---------- sequence protocol ----------
    def __len__(self) -> int:
        return len(self._vertices)

    def __getitem__(self, i: int) -> Vertex:
        return self._vertices[i]

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._vertices == other._vertices

    def __repr__(self) -> str:
        return "Graph(vertices={}, links={})".format(len(self), self.n_links())

    # ---------- construction ----------
    def add_vertex(
        self,
        x: int,
        y: int,
        z: int,
        neighbors: Iterable[int] = (),
        surrounding: Iterable[int] = (),
        exterior: bool = True,
    ) -> Vertex:
        """
        Append a vertex at the end of the arena and return it.
        """
        v = Vertex(x=int(x), y=int(y), z=int(z), idx=len(self._vertices), exterior=bool(exterior))
        self._vertices.append(v)
        for n in neighbors:
            self.link(v.idx, n)
        v.surrounding = list(surrounding)
        return v

    def link(self, a: int, b: int) -> bool:
        """
        Add `b` to the neighbor list of `a`; returns False if already present.
        """
        nbrs = self._vertices[a].neighbors
        if b in nbrs:
            return False
        nbrs.append(b)
        return True

    def unlink(self, a: int, b: int) -> bool:
        nbrs = self._vertices[a].neighbors
        if b not in nbrs:
            return False
        nbrs.remove(b)
        return True

    # ---------- views ----------
    def layer(self, z: int) -> List[int]:
        """
        Snapshot of the indices of all vertices at depth `z`, in arena order.
        """
        return [v.idx for v in self._vertices if v.z == z]

    def n_links(self) -> int:
        """Number of directed neighbor entries."""
        return sum(len(v.neighbors) for v in self._vertices)

    def copy(self) -> "Graph":
        g = Graph()
        g._vertices = copy.deepcopy(self._vertices)
        return g
