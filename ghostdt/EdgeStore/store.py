import numpy as np
from typing import Dict, Iterator, List, Optional, Tuple

from ghostdt.EdgeStore.vertex import Vertex
from ghostdt.EdgeStore.errors import DuplicateEdgeError, MissingEdgeError

Edge = Tuple[Vertex, Vertex]
Triangle = Tuple[Vertex, Vertex, Vertex]


class EdgeStore:
    """
    Triangles kept implicitly as directed edges. For a CCW triangle (u, v, w):

        (u, v) -> w      (v, w) -> u      (w, u) -> v

    Each edge maps to the apex on its left. An edge whose reverse is absent
    is a boundary edge of the triangulated region. Triangles only enter and
    leave whole, through add_triangle / delete_triangle.
    """

    def __init__(self):
        self.edges: Dict[Edge, Vertex] = {}

    def add_triangle(self, u: Vertex, v: Vertex, w: Vertex):
        for e in ((u, v), (v, w), (w, u)):
            if e in self.edges:
                raise DuplicateEdgeError(e)
        self.edges[(u, v)] = w
        self.edges[(v, w)] = u
        self.edges[(w, u)] = v

    def delete_triangle(self, u: Vertex, v: Vertex, w: Vertex):
        for e, apex in (((u, v), w), ((v, w), u), ((w, u), v)):
            if self.edges.get(e) != apex:
                raise MissingEdgeError(e)
        del self.edges[(u, v)]
        del self.edges[(v, w)]
        del self.edges[(w, u)]

    def adjacent(self, u: Vertex, v: Vertex) -> Optional[Vertex]:
        """Apex of the triangle holding (u, v), None if there is none."""
        return self.edges.get((u, v))

    def has_edge(self, u: Vertex, v: Vertex) -> bool:
        return (u, v) in self.edges

    def is_boundary(self, u: Vertex, v: Vertex) -> bool:
        return (u, v) in self.edges and (v, u) not in self.edges

    @staticmethod
    def is_ghost_triangle(t: Triangle) -> bool:
        return any(p.is_ghost for p in t)

    def vertices(self) -> List[Vertex]:
        """Distinct real vertices, in the order they were first seen."""
        seen = {}
        for u, _ in self.edges:
            if not u.is_ghost:
                seen.setdefault(u, None)
        return list(seen)

    def points(self) -> np.ndarray:
        vs = self.vertices()
        if not vs:
            return np.zeros((0, 2), dtype=np.float64)
        return np.array([[v.x, v.y] for v in vs], dtype=np.float64)

    def triangles(self, include_ghosts=False) -> Iterator[Triangle]:
        """
        Every stored triangle once, in stored CCW order, rotated so the
        smallest vertex comes first.
        """
        for (u, v), w in self.edges.items():
            if not (u < v and u < w):
                continue
            t = (u, v, w)
            if not include_ghosts and self.is_ghost_triangle(t):
                continue
            yield t

    def num_triangles(self, include_ghosts=False) -> int:
        return sum(1 for _ in self.triangles(include_ghosts))

    def triangle_indices(self):
        """(points, simplices) arrays of the real triangles, e.g. for triplot."""
        vs = self.vertices()
        index = {v: i for i, v in enumerate(vs)}
        simplices = [[index[p] for p in t] for t in self.triangles()]
        return self.points(), np.array(simplices, dtype=np.int64).reshape(-1, 3)

    def edge_set(self):
        return dict(self.edges)

    def __len__(self):
        return len(self.edges) // 3

    def __repr__(self):
        return (f"{type(self).__name__}(vertices={len(self.vertices())}, "
                f"triangles={self.num_triangles()}, "
                f"ghosts={len(self) - self.num_triangles()})")
