import unittest

from bwdelaunay.errors import DegenerateTriangle
from bwdelaunay.mesh.geometry import (in_circumcircle, is_degenerate, on_segment,
                                      orientation, point_in_triangle)


class TestGeometry(unittest.TestCase):

    def setUp(self):
        # right triangle, circumcircle centred at (0.5, 0.5) with radius sqrt(0.5)
        self.a = (0.0, 0.0)
        self.b = (1.0, 0.0)
        self.c = (0.0, 1.0)

    def test_orientation_sign(self):
        self.assertEqual(orientation(self.a, self.b, self.c), 1.0)
        self.assertEqual(orientation(self.a, self.c, self.b), -1.0)
        self.assertEqual(orientation((0, 0), (1, 1), (2, 2)), 0)

    def test_in_circumcircle_independent_of_winding(self):
        inside = (0.5, 0.5)
        outside = (2.0, 2.0)
        for tri in [(self.a, self.b, self.c), (self.a, self.c, self.b), (self.c, self.b, self.a)]:
            self.assertTrue(in_circumcircle(inside, *tri))
            self.assertFalse(in_circumcircle(outside, *tri))

    def test_point_on_circle_is_outside(self):
        self.assertFalse(in_circumcircle((1.0, 1.0), self.a, self.b, self.c))
        self.assertFalse(in_circumcircle((1.0, 1.0), self.c, self.b, self.a))

    def test_point_inside_circle_but_outside_triangle(self):
        self.assertTrue(in_circumcircle((0.9, 0.9), self.a, self.b, self.c))
        self.assertFalse(point_in_triangle((0.9, 0.9), self.a, self.b, self.c))

    def test_degenerate_triangle_raises(self):
        with self.assertRaises(DegenerateTriangle):
            in_circumcircle((0.5, 0.5), (0, 0), (1, 1), (2, 2))
        with self.assertRaises(DegenerateTriangle):
            point_in_triangle((0.5, 0.5), (0, 0), (1, 1), (2, 2))
        self.assertTrue(is_degenerate((0, 0), (1, 1), (2, 2)))
        self.assertFalse(is_degenerate(self.a, self.b, self.c))

    def test_point_in_triangle_closed(self):
        self.assertTrue(point_in_triangle((0.2, 0.2), self.a, self.b, self.c))
        self.assertTrue(point_in_triangle((0.5, 0.0), self.a, self.b, self.c))
        self.assertTrue(point_in_triangle(self.b, self.a, self.b, self.c))
        self.assertFalse(point_in_triangle((-0.1, 0.5), self.a, self.b, self.c))

    def test_on_segment(self):
        self.assertTrue(on_segment((0.5, 0.0), self.a, self.b))
        self.assertFalse(on_segment((1.5, 0.0), self.a, self.b))
        self.assertFalse(on_segment((0.5, 0.1), self.a, self.b))

    def test_tolerance_follows_triangle_size(self):
        for s in (1e-5, 1e-7, 1e5):
            a, b, c = [(x * s, y * s) for x, y in (self.a, self.b, self.c)]
            self.assertFalse(is_degenerate(a, b, c))
            self.assertTrue(in_circumcircle((0.5 * s, 0.5 * s), a, b, c))
            self.assertFalse(in_circumcircle((2.0 * s, 2.0 * s), a, b, c))
            self.assertTrue(point_in_triangle((0.2 * s, 0.2 * s), a, b, c))
            self.assertFalse(point_in_triangle((-0.1 * s, 0.5 * s), a, b, c))
            self.assertTrue(is_degenerate((0, 0), (s, s), (2 * s, 2 * s)))
            self.assertTrue(on_segment((0.5 * s, 0.0), a, b))
            self.assertFalse(on_segment((1.5 * s, 0.0), a, b))
            self.assertFalse(on_segment((0.5 * s, 0.1 * s), a, b))


if __name__ == "__main__":
    unittest.main()
