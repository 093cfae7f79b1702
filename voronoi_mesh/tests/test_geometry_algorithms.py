import math
import unittest

import torch

from voronoi_mesh.geometry_algorithms import (
    Circumcircle, compute_circumcircle_2d, polar_angle, signed_area_2d
)


class TestCircumcircle2D(unittest.TestCase):
    def test_circumcircle_right_angle(self):
        circle = compute_circumcircle_2d((0., 0.), (4., 0.), (0., 4.))
        self.assertAlmostEqual(circle.center[0], 2.0, places=9)
        self.assertAlmostEqual(circle.center[1], 2.0, places=9)
        self.assertAlmostEqual(circle.radius, 2 * math.sqrt(2), places=9)

    def test_circumcircle_accepts_tensors(self):
        p1 = torch.tensor([0., 0.])
        p2 = torch.tensor([2., 0.])
        p3 = torch.tensor([0., 2.])
        circle = compute_circumcircle_2d(p1, p2, p3)
        self.assertTrue(torch.allclose(circle.center_tensor(), torch.tensor([1., 1.], dtype=torch.float64)))
        self.assertAlmostEqual(circle.radius, math.sqrt(2), places=6)

    def test_circumcircle_equilateral(self):
        circle = compute_circumcircle_2d((0., 0.), (2., 0.), (1., math.sqrt(3.0)))
        # Expected center: (1, sqrt(3)/3), radius 2/sqrt(3)
        self.assertAlmostEqual(circle.center[0], 1.0, places=9)
        self.assertAlmostEqual(circle.center[1], 1.0 / math.sqrt(3.0), places=9)
        self.assertAlmostEqual(circle.radius, 2.0 / math.sqrt(3.0), places=9)

    def test_center_equidistant_from_corners(self):
        corners = [(1.5, -2.0), (7.25, 3.0), (-4.0, 5.5)]
        circle = compute_circumcircle_2d(*corners)
        for corner in corners:
            self.assertAlmostEqual(math.dist(circle.center, corner), circle.radius, places=9)

    def test_winding_does_not_change_circle(self):
        ccw = compute_circumcircle_2d((0., 0.), (3., 1.), (1., 4.))
        cw = compute_circumcircle_2d((0., 0.), (1., 4.), (3., 1.))
        self.assertAlmostEqual(ccw.center[0], cw.center[0], places=9)
        self.assertAlmostEqual(ccw.center[1], cw.center[1], places=9)
        self.assertAlmostEqual(ccw.radius, cw.radius, places=9)

    def test_circumcircle_collinear_is_degenerate(self):
        circle = compute_circumcircle_2d((0., 0.), (1., 1.), (2., 2.))
        self.assertFalse(math.isfinite(circle.radius))
        # A degenerate circle contains nothing
        self.assertFalse(circle.contains(1.0, 0.5))
        self.assertFalse(circle.contains(1.0, 1.0))


class TestCircumcircleContains(unittest.TestCase):
    def test_inside_point(self):
        circle = Circumcircle((0.0, 0.0), 1.0)
        self.assertTrue(circle.contains(0.0, 0.0))
        self.assertTrue(circle.contains(0.5, -0.5))

    def test_boundary_point_is_not_inside(self):
        circle = Circumcircle((0.0, 0.0), 1.0)
        self.assertFalse(circle.contains(1.0, 0.0))
        self.assertFalse(circle.contains(0.0, -1.0))

    def test_outside_point(self):
        circle = Circumcircle((2.0, 2.0), 2 * math.sqrt(2))
        self.assertFalse(circle.contains(10.0, 10.0))

    def test_value_equality(self):
        self.assertEqual(Circumcircle((1, 2), 3), Circumcircle((1.0, 2.0), 3.0))
        self.assertEqual(len({Circumcircle((1, 2), 3), Circumcircle((1.0, 2.0), 3.0)}), 1)
        self.assertNotEqual(Circumcircle((1, 2), 3), Circumcircle((1, 2), 4))


class TestAngleAndArea(unittest.TestCase):
    def test_polar_angle(self):
        self.assertAlmostEqual(polar_angle(0., 0., 0., 1.), math.pi / 2)
        self.assertAlmostEqual(polar_angle(1., 1., 2., 1.), 0.0)
        self.assertAlmostEqual(polar_angle(1., 1., 0., 1.), math.pi)

    def test_signed_area_sign_follows_winding(self):
        self.assertGreater(signed_area_2d((0, 0), (1, 0), (0, 1)), 0)
        self.assertLess(signed_area_2d((0, 0), (0, 1), (1, 0)), 0)
        self.assertEqual(signed_area_2d((0, 0), (1, 1), (2, 2)), 0)


if __name__ == '__main__':
    unittest.main()
