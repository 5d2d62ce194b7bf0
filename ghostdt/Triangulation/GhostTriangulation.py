import collections
import logging
from typing import List, Optional

import matplotlib.pyplot as plt
from matplotlib.lines import Line2D

from ghostdt.config import WEIGHT, MIN_ANGLE, MAX_REFINE
from ghostdt.EdgeStore.store import EdgeStore, Triangle
from ghostdt.EdgeStore.vertex import Vertex, GHOST
from ghostdt.EdgeStore.errors import NotFoundError, DegenerateInputError
from ghostdt.Predicates.geometry import LiftedPredicates, circumcenter
from ghostdt.Predicates import geometry

log = logging.getLogger(__name__)


class GhostTriangulation(EdgeStore):
    """
    Incremental Delaunay triangulation over an EdgeStore.

    The hull is closed by ghost triangles (far, near, GHOST), so every stored
    edge has a reverse once the mesh is seeded. A ghost triangle's circumdisk
    is the open half-plane beyond its hull edge (plus the open edge itself),
    which lets points outside the hull be located and inserted like any
    other point.
    """

    def __init__(self, weight: float = WEIGHT, predicates=None):
        super().__init__()
        self.predicates = predicates if predicates is not None else LiftedPredicates(weight)

    @property
    def weight(self) -> float:
        return self.predicates.weight

    def seed(self, a, b, c) -> Triangle:
        """First triangle of the mesh, reordered CCW, with its ghost triangles."""
        a, b, c = Vertex.of(a), Vertex.of(b), Vertex.of(c)
        o = self.predicates.orient2d(a, b, c)
        if o == 0:
            raise DegenerateInputError((a, b, c))
        if o < 0:
            b, c = c, b
        self.add_triangle(a, b, c)
        self.insert_ghost_triangles()
        return a, b, c

    # ------------------------------------------------------------------
    #  conflict test / point location
    # ------------------------------------------------------------------
    def in_conflict(self, t: Triangle, p: Vertex) -> bool:
        """True if p lies in the open circumdisk of triangle t."""
        u, v, w = t
        if not (u.is_ghost or v.is_ghost or w.is_ghost):
            return self.predicates.in_circle(u, v, w, p) > 0

        # rotate to (a, b, GHOST)
        if u.is_ghost:
            a, b = v, w
        elif v.is_ghost:
            a, b = w, u
        else:
            a, b = u, v
        o = self.predicates.orient2d(a, b, p)
        if o > 0:
            return True
        if o < 0:
            return False
        # collinear: only the open segment ab belongs to the ghost disk
        return self.predicates.in_segment(a, b, p) < 0

    def locate(self, p, include_ghosts=True) -> Triangle:
        """
        One triangle whose open circumdisk contains p, first one found.
        Raises NotFoundError when there is none (p is already a vertex, lies
        on every candidate circle, or the hull has no ghost triangles yet).
        """
        p = Vertex.of(p)
        for (u, v), w in self.edges.items():
            t = (u, v, w)
            if not include_ghosts and self.is_ghost_triangle(t):
                continue
            if self.in_conflict(t, p):
                return t
        raise NotFoundError(p)

    def is_outside_hull(self, p) -> bool:
        p = Vertex.of(p)
        for t in self.triangles(include_ghosts=True):
            if self.is_ghost_triangle(t) and self.in_conflict(t, p):
                return True
        return False

    # ------------------------------------------------------------------
    #  insertion
    # ------------------------------------------------------------------
    def insert_vertex(self, u, t: Triangle) -> Vertex:
        """
        Insert u given a triangle t whose circumdisk contains it (see locate).
        Store errors raised while digging are bugs and propagate as is.
        """
        u = Vertex.of(u)
        v, w, x = t
        before = len(self)
        self.delete_triangle(v, w, x)
        self.dig(u, v, w)
        self.dig(u, w, x)
        self.dig(u, x, v)
        added = self.insert_ghost_triangles()
        log.debug("inserted %s: %d -> %d triangles, %d new ghosts",
                  u, before, len(self), added)
        return u

    def dig(self, u: Vertex, v: Vertex, w: Vertex):
        """
        Grow the cavity of u outward across edge (v, w).

        The triangle (w, v, x) on the far side is deleted if u is in its
        circumdisk and its two outer edges are dug in turn; otherwise the
        cavity stops there and (u, v, w) is added. A missing neighbour is
        the edge of the mesh and also closes with (u, v, w).
        """
        stack = collections.deque([(v, w)])
        while stack:
            v, w = stack.pop()
            x = self.adjacent(w, v)
            if x is None:
                self.add_triangle(u, v, w)
                continue
            if self.in_conflict((w, v, x), u):
                self.delete_triangle(w, v, x)
                # (v, x) is dug before (x, w)
                stack.append((x, w))
                stack.append((v, x))
            else:
                self.add_triangle(u, v, w)

    def insert_ghost_triangles(self) -> int:
        """Close every boundary edge of the real triangles with a ghost triangle."""
        pending = []
        for u, v, w in self.triangles():
            for near, far in ((u, v), (v, w), (w, u)):
                if not self.has_edge(far, near):
                    pending.append((far, near, GHOST))
        for t in pending:
            self.add_triangle(*t)
        if pending:
            log.debug("added %d ghost triangles", len(pending))
        return len(pending)

    def insert(self, p) -> Vertex:
        p = Vertex.of(p)
        return self.insert_vertex(p, self.locate(p))

    # ------------------------------------------------------------------
    #  refinement
    # ------------------------------------------------------------------
    def touches_hull(self, t: Triangle) -> bool:
        u, v, w = t
        return any(self.adjacent(b, a) is None or self.adjacent(b, a).is_ghost
                   for a, b in ((u, v), (v, w), (w, u)))

    def _find_skinny(self, threshold, rejected) -> Optional[Triangle]:
        for t in self.triangles():
            if t in rejected or self.touches_hull(t):
                continue
            if geometry.min_angle(*t) < threshold:
                return t
        return None

    def refine(self, min_angle: float = MIN_ANGLE,
               max_insertions: int = MAX_REFINE) -> List[Vertex]:
        """
        Insert circumcenters of interior triangles whose smallest angle is
        below min_angle. Circumcenters outside the hull or not locatable are
        skipped. No quality guarantee; stops after max_insertions points.
        """
        inserted = []
        rejected = set()
        while len(inserted) < max_insertions:
            t = self._find_skinny(min_angle, rejected)
            if t is None:
                break
            try:
                c = Vertex(*circumcenter(*t))
            except ValueError:
                rejected.add(t)
                continue
            if self.is_outside_hull(c):
                rejected.add(t)
                continue
            try:
                home = self.locate(c, include_ghosts=False)
            except NotFoundError:
                rejected.add(t)
                continue
            self.insert_vertex(c, home)
            inserted.append(c)
        log.debug("refine inserted %d points, rejected %d triangles",
                  len(inserted), len(rejected))
        return inserted

    # ------------------------------------------------------------------
    #  drawing
    # ------------------------------------------------------------------
    def draw(self, show=True, draw_vertices=True, draw_hull=True, title="Delaunay triangulation"):
        plt.figure()
        ax = plt.gca()

        cmap = plt.get_cmap('tab10')
        face_color = cmap(2)
        vertex_color = cmap(0)
        hull_color = cmap(1)

        # 1) 三角形边，最底层
        for u, v, w in self.triangles():
            xs = [u.x, v.x, w.x, u.x]
            ys = [u.y, v.y, w.y, u.y]
            ax.plot(xs, ys, color=face_color, linewidth=1, zorder=1)

        # 2) 凸包边 = ghost 三角形的实边
        if draw_hull:
            for t in self.triangles(include_ghosts=True):
                if not self.is_ghost_triangle(t):
                    continue
                a, b = [p for p in t if not p.is_ghost]
                ax.plot([a.x, b.x], [a.y, b.y], color=hull_color, linewidth=2, zorder=2)

        # 3) 顶点
        if draw_vertices:
            pts = self.points()
            if len(pts):
                ax.plot(pts[:, 0], pts[:, 1], 'o', color=vertex_color, zorder=3)

        ax.axis('equal')
        ax.set_title(title)
        legend_handles = [Line2D([0], [0], color=face_color, linewidth=1, label='Triangle edge')]
        if draw_hull:
            legend_handles.append(Line2D([0], [0], color=hull_color, linewidth=2, label='Convex hull'))
        if draw_vertices:
            legend_handles.append(
                Line2D([0], [0], marker='o', color=vertex_color, linestyle='None', label='Vertex'))
        ax.legend(handles=legend_handles, loc='best')

        if show:
            plt.show()
        return ax

    def __repr__(self):
        return (f"GhostTriangulation(vertices={len(self.vertices())}, "
                f"triangles={self.num_triangles()}, weight={self.weight})")
