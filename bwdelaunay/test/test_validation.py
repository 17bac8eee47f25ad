import unittest

from bwdelaunay import config
from bwdelaunay.mesh.triangle import Triangle
from bwdelaunay.triangulation.bowyer_watson import BowyerWatson
from bwdelaunay.triangulation.super_triangle import enclosing_triangle
from bwdelaunay.validation import (check_euler, delaunay_violations, euler_counts, is_delaunay,
                                   matches_reference, reference_triangles)

# long axis along x, so the Delaunay diagonal is the short vertical one
RHOMBUS = [(-2.0, 0.0), (0.0, -0.5), (2.0, 0.0), (0.0, 0.5)]


class TestGlobalChecks(unittest.TestCase):

    def setUp(self):
        self.dt = BowyerWatson([c for p in RHOMBUS for c in p], enclosing_triangle(RHOMBUS))

    def test_rhombus_uses_short_diagonal(self):
        self.assertEqual(sorted(self.dt.triangles), [(3, 4, 6), (4, 5, 6)])
        self.assertEqual(delaunay_violations(self.dt), [])
        self.assertTrue(is_delaunay(self.dt))
        self.assertTrue(matches_reference(self.dt))

    def test_flipped_diagonal_is_reported(self):
        self.dt.mesh.replace_triangles([Triangle(3, 4, 5), Triangle(3, 5, 6)])
        bad = delaunay_violations(self.dt)
        self.assertIn(((3, 4, 5), 6), bad)
        self.assertIn(((3, 5, 6), 4), bad)
        with self.assertLogs("bwdelaunay.validation", level="WARNING"):
            self.assertFalse(is_delaunay(self.dt))
        with self.assertLogs("bwdelaunay.validation", level="WARNING"):
            self.assertFalse(matches_reference(self.dt))
        # still a valid triangulation of the rhombus
        self.assertTrue(check_euler(self.dt))

    def test_euler_counts(self):
        square = BowyerWatson(config.SQUARE_BOUNDARY, config.BIG_TRIANGLE)
        self.assertEqual(euler_counts(square), (4, 5, 2, 4))
        self.assertTrue(check_euler(square))

    def test_reference_triangles(self):
        ref = reference_triangles(RHOMBUS)
        self.assertEqual(len(ref), 2)
        self.assertIn(frozenset([(-2.0, 0.0), (0.0, -0.5), (0.0, 0.5)]), ref)


if __name__ == "__main__":
    unittest.main()
