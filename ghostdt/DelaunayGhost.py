import logging

from ghostdt.config import WEIGHT
from ghostdt.EdgeStore.vertex import Vertex
from ghostdt.EdgeStore.errors import DegenerateInputError
from ghostdt.Predicates.geometry import orient2d
from ghostdt.Triangulation.GhostTriangulation import GhostTriangulation

log = logging.getLogger(__name__)


def _seed_indices(vertexs):
    """Indices of the first three points that are not collinear."""
    first = vertexs[0]
    second = next((j for j, v in enumerate(vertexs) if v != first), None)
    if second is None:
        return None
    for k, v in enumerate(vertexs):
        if orient2d(first, vertexs[second], v) != 0:
            return 0, second, k
    return None


def compute_delaunay(points, weight=WEIGHT, draw=False) -> GhostTriangulation:
    """
    Delaunay triangulation of points (an (N, 2) array-like or Vertex list),
    inserted one at a time in input order after a seed triangle.
    Exact duplicates are skipped.
    """
    vertexs = [Vertex.of(p) for p in points]
    seed = _seed_indices(vertexs) if vertexs else None
    if seed is None:
        raise DegenerateInputError(vertexs)

    dcel = GhostTriangulation(weight=weight)
    dcel.seed(*(vertexs[i] for i in seed))
    seen = {vertexs[i] for i in seed}
    for i, v in enumerate(vertexs):
        if i in seed:
            continue
        if v in seen:
            log.debug("skip duplicate point %s", v)
            continue
        seen.add(v)
        dcel.insert(v)
        if draw:
            dcel.draw()
    return dcel


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    from ghostdt.RandomPointsInTrian import random_points_in_square
    from ghostdt.GlobalTestDelaunay import global_test_delaunay

    vertexs = [Vertex(0.5, 0.3),
               Vertex(0.3, 0.4),
               Vertex(0.4, 0.1),
               Vertex(0.6, 0.4),
               Vertex(0.3, 0.2),
               Vertex(0.5, 0.45),
               Vertex(0.6, 0.2),
               Vertex(0.7, 0.35),
               Vertex(0.7, 0.1), ]
    dcel = compute_delaunay(vertexs)
    print(dcel, global_test_delaunay(dcel))
    dcel.draw()

    dcel = compute_delaunay(random_points_in_square(200))
    dcel.refine()
    print(dcel, global_test_delaunay(dcel))
    dcel.draw()
