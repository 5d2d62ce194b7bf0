import logging

from scipy.spatial import Delaunay

from ghostdt.config import DELAUNAY_EPS
from ghostdt.EdgeStore.errors import InvariantError
from ghostdt.Predicates.geometry import in_circle, orient2d

log = logging.getLogger(__name__)


def check_invariants(tri, closed=True):
    """
    Raise InvariantError on the first broken mesh invariant:
      - the three edges of a triangle point at each other's apexes
      - an edge and its reverse belong to different triangles
      - every real triangle is strictly CCW
      - (closed) every edge has its reverse, i.e. the ghosts close the hull
    """
    edges = tri.edges
    for (u, v), w in edges.items():
        if edges.get((v, w)) != u or edges.get((w, u)) != v:
            raise InvariantError((u, v), f"triangle {u}, {v}, {w} is not closed")
        back = edges.get((v, u))
        if back is None:
            if closed:
                raise InvariantError((u, v), "no reverse edge")
        elif back == w:
            raise InvariantError((u, v), f"reverse edge shares apex {w}")
        if not (u.is_ghost or v.is_ghost or w.is_ghost) and orient2d(u, v, w) <= 0:
            raise InvariantError((u, v), f"triangle {u}, {v}, {w} is not counter-clockwise")


def global_test_delaunay(tri, eps=DELAUNAY_EPS) -> bool:
    """No real vertex strictly inside the circumcircle of a real triangle."""
    points = tri.vertices()
    for a, b, c in tri.triangles():
        for p in points:
            if p == a or p == b or p == c:
                continue
            val = in_circle(a, b, c, p)
            if val > eps:
                log.warning("Triangle %s %s %s includes point %s: %g", a, b, c, p, val)
                return False
    return True


def agrees_with_scipy(tri) -> bool:
    """
    Compare the real triangles against scipy.spatial.Delaunay (Qhull) on the
    same vertices. Only meaningful for points in general position, where
    the Delaunay triangulation is unique.
    """
    pts, simplices = tri.triangle_indices()
    ours = {frozenset(s) for s in simplices.tolist()}
    ref = {frozenset(s) for s in Delaunay(pts).simplices.tolist()}
    if ours != ref:
        log.warning("%d triangles differ from scipy", len(ours ^ ref))
        return False
    return True
