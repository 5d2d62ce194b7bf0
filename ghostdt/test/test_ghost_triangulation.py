import unittest

from ghostdt.EdgeStore.vertex import Vertex, GHOST
from ghostdt.EdgeStore.errors import (NotFoundError, DegenerateInputError,
                                      DuplicateEdgeError, MissingEdgeError)
from ghostdt.Predicates.geometry import LiftedPredicates, orient2d
from ghostdt.Triangulation.GhostTriangulation import GhostTriangulation
from ghostdt.GlobalTestDelaunay import check_invariants, global_test_delaunay


class CountingPredicates(LiftedPredicates):

    def __init__(self, weight):
        super().__init__(weight)
        self.calls = 0
        self.segment_calls = 0

    def in_circle(self, a, b, c, d):
        self.calls += 1
        return super().in_circle(a, b, c, d)

    def in_segment(self, a, b, p):
        self.segment_calls += 1
        return super().in_segment(a, b, p)


class TestSeed(unittest.TestCase):

    def setUp(self):
        self.a, self.b, self.c = Vertex(0, 0), Vertex(1, 0), Vertex(0, 1)
        self.tri = GhostTriangulation()

    def test_seed_closes_hull(self):
        self.tri.seed(self.a, self.b, self.c)
        self.assertEqual(self.tri.num_triangles(), 1)
        self.assertEqual(len(self.tri), 4)
        self.assertEqual(len(self.tri.edges), 12)
        check_invariants(self.tri)
        # a second pass finds nothing left to close
        self.assertEqual(self.tri.insert_ghost_triangles(), 0)

    def test_seed_reorders_clockwise(self):
        t = self.tri.seed(self.a, self.c, self.b)
        self.assertGreater(orient2d(*t), 0)
        self.assertEqual(self.tri.adjacent(self.a, self.b), self.c)
        check_invariants(self.tri)

    def test_seed_collinear(self):
        with self.assertRaises(DegenerateInputError) as cm:
            self.tri.seed((0, 0), (1, 1), (2, 2))
        self.assertEqual(cm.exception.points, (Vertex(0, 0), Vertex(1, 1), Vertex(2, 2)))
        with self.assertRaises(ValueError):
            self.tri.seed((0, 0), (1, 1), (2, 2))
        self.assertEqual(len(self.tri), 0)

    def test_ghost_orientation(self):
        self.tri.seed(self.a, self.b, self.c)
        # hull edge (a, b) is closed by ghost triangle (b, a, GHOST)
        self.assertIs(self.tri.adjacent(self.b, self.a), GHOST)
        self.assertEqual(self.tri.adjacent(self.a, GHOST), self.b)
        self.assertEqual(self.tri.adjacent(GHOST, self.b), self.a)


class TestLocate(unittest.TestCase):

    def setUp(self):
        self.a, self.b, self.c = Vertex(0, 0), Vertex(1, 0), Vertex(0, 1)
        self.tri = GhostTriangulation()
        self.tri.seed(self.a, self.b, self.c)

    def test_inside(self):
        t = self.tri.locate((0.2, 0.2))
        self.assertNotIn(GHOST, t)
        self.assertEqual(set(t), {self.a, self.b, self.c})

    def test_outside_hull_finds_ghost(self):
        t = self.tri.locate((2, 2))
        self.assertIn(GHOST, t)
        self.assertEqual({p for p in t if not p.is_ghost}, {self.b, self.c})
        self.assertTrue(self.tri.is_outside_hull((2, 2)))
        self.assertFalse(self.tri.is_outside_hull((0.2, 0.2)))

    def test_outside_hull_without_ghosts(self):
        with self.assertRaises(NotFoundError):
            self.tri.locate((2, 2), include_ghosts=False)

    def test_existing_vertex(self):
        for p in (self.a, self.b, self.c):
            with self.assertRaises(NotFoundError) as cm:
                self.tri.locate(p)
            self.assertEqual(cm.exception.point, p)

    def test_empty_mesh(self):
        with self.assertRaises(NotFoundError):
            GhostTriangulation().locate((0, 0))

    def test_open_hull_edge_belongs_to_ghost(self):
        ghost = (self.b, self.a, GHOST)
        self.assertTrue(self.tri.in_conflict(ghost, Vertex(0.5, 0)))
        self.assertFalse(self.tri.in_conflict(ghost, Vertex(2, 0)))
        self.assertFalse(self.tri.in_conflict(ghost, Vertex(0.5, 0.1)))
        self.assertTrue(self.tri.in_conflict(ghost, Vertex(0.5, -0.1)))


class TestInsert(unittest.TestCase):

    def setUp(self):
        self.a, self.b, self.c = Vertex(0, 0), Vertex(1, 0), Vertex(0, 1)
        self.tri = GhostTriangulation()
        self.tri.seed(self.a, self.b, self.c)

    def assertHull(self, real, ghosts):
        check_invariants(self.tri)
        self.assertEqual(self.tri.num_triangles(), real)
        self.assertEqual(len(self.tri) - self.tri.num_triangles(), ghosts)

    def test_inside(self):
        u = self.tri.insert((0.2, 0.2))
        self.assertEqual(u, Vertex(0.2, 0.2))
        self.assertHull(real=3, ghosts=3)
        self.assertIn(u, self.tri.vertices())

    def test_outside(self):
        self.tri.insert((0.2, 0.2))
        self.tri.insert((2, 2))
        self.assertHull(real=4, ghosts=4)
        self.assertTrue(global_test_delaunay(self.tri))

    def test_on_hull_edge(self):
        self.tri.insert((0.5, 0))
        self.assertHull(real=2, ghosts=4)
        self.assertEqual(self.tri.adjacent(self.b, Vertex(0.5, 0)), GHOST)

    def test_on_hull_line_beyond_edge(self):
        self.tri.insert((2, 0))
        self.assertHull(real=2, ghosts=4)
        self.assertEqual(self.tri.adjacent(Vertex(2, 0), self.b), GHOST)

    def test_flip(self):
        # (0.9, 0.9) is inside the circle of a, b, c: the diagonal b-c flips
        self.tri.insert((0.9, 0.9))
        self.assertHull(real=2, ghosts=4)
        self.assertFalse(self.tri.has_edge(self.b, self.c))
        self.assertTrue(self.tri.has_edge(self.a, Vertex(0.9, 0.9)))

    def test_duplicate_point(self):
        self.tri.insert((0.2, 0.2))
        with self.assertRaises(NotFoundError):
            self.tri.insert((0.2, 0.2))
        self.assertHull(real=3, ghosts=3)

    def test_insert_vertex_needs_stored_triangle(self):
        with self.assertRaises(MissingEdgeError):
            self.tri.insert_vertex((0.2, 0.2), (self.a, self.c, self.b))

    def test_dig_fills_open_boundary(self):
        tri = GhostTriangulation()
        tri.add_triangle(self.a, self.b, self.c)
        tri.insert_vertex((0.2, 0.2), (self.a, self.b, self.c))
        self.assertEqual(tri.num_triangles(), 3)
        self.assertEqual(len(tri) - tri.num_triangles(), 3)
        check_invariants(tri)

    def test_store_errors_propagate_from_dig(self):
        # (u, a) is already claimed, so closing the cavity at a-b must fail
        u = Vertex(0.2, 0.2)
        self.tri.edges[(u, self.a)] = Vertex(9, 9)
        with self.assertRaises(DuplicateEdgeError) as cm:
            self.tri.insert_vertex(u, (self.a, self.b, self.c))
        self.assertEqual(cm.exception.edge, (u, self.a))

    def test_weight_is_fixed_per_mesh(self):
        tri = GhostTriangulation(weight=0.01)
        self.assertEqual(tri.weight, 0.01)
        self.assertEqual(tri.predicates.weight, 0.01)

    def test_predicate_kernel_is_pluggable(self):
        kernel = CountingPredicates(0.001)
        tri = GhostTriangulation(predicates=kernel)
        tri.seed(self.a, self.b, self.c)
        tri.insert((0.2, 0.2))
        tri.insert((0.9, 0.9))
        self.assertGreater(kernel.calls, 0)
        check_invariants(tri)

    def test_collinear_hull_point_uses_kernel(self):
        kernel = CountingPredicates(0.001)
        tri = GhostTriangulation(predicates=kernel)
        tri.seed(self.a, self.b, self.c)
        tri.insert((0.5, 0))
        self.assertGreater(kernel.segment_calls, 0)
        self.assertEqual(tri.num_triangles(), 2)
        check_invariants(tri)


if __name__ == "__main__":
    unittest.main()
