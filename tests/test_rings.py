# ==============================================================================
# File: tests/test_rings.py
# Purpose: unit tests for the ring / circle geometry helpers.
# ==============================================================================
import math
import sys
import unittest
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from scatter_engine.algorithms.rings import (
    circles_intersect,
    intersection_point,
    mirror_intersection_point,
    point_in_bounds,
    ring_radius,
)
from scatter_engine.core.preset.errors import DegenerateGeometryError
from scatter_engine.core.types import AreaBounds


class TestRingRadius(unittest.TestCase):
    def test_innermost_pair_always_staggered(self):
        for modulo in (1, 2, 5, 7):
            self.assertEqual(ring_radius(0, 0, 3.0, modulo, 1.5), 1.5)

    def test_stagger_follows_other_ring_index(self):
        # own index is a multiple of the modulo, the other is not -> no offset
        self.assertEqual(ring_radius(5, 1, 2.0, 5, 100.0), 10.0)
        # own index is not a multiple, the other is -> offset applied
        self.assertEqual(ring_radius(1, 5, 2.0, 5, 100.0), 102.0)

    def test_modulo_five_sequence(self):
        """increment=5, modulo=5, 3 rings: ring 1 only staggered against ring 0."""
        offset = 0.75
        radii_ring1 = [ring_radius(1, other, 5.0, 5, offset) for other in range(3)]
        self.assertEqual(radii_ring1, [5.0 + offset, 5.0, 5.0])

        radii_ring0 = [ring_radius(0, other, 5.0, 5, offset) for other in range(3)]
        self.assertEqual(radii_ring0, [offset, 0.0, 0.0])

    def test_zero_modulo_raises(self):
        with self.assertRaises(ZeroDivisionError):
            ring_radius(1, 1, 1.0, 0, 1.0)


class TestCirclesIntersect(unittest.TestCase):
    def test_crossing(self):
        self.assertTrue(circles_intersect(20.0, 15.0, 15.0))

    def test_too_far_apart(self):
        self.assertFalse(circles_intersect(20.0, 5.0, 5.0))

    def test_containment(self):
        self.assertFalse(circles_intersect(2.0, 10.0, 1.0))

    def test_tangent_is_not_intersecting(self):
        # external tangency
        self.assertFalse(circles_intersect(20.0, 10.0, 10.0))
        # internal tangency
        self.assertFalse(circles_intersect(5.0, 15.0, 10.0))

    def test_symmetric(self):
        values = [0.0, 0.5, 5.0, 10.0, 12.5, 15.0, 20.0, 30.0]
        for d in (1.0, 10.0, 20.0):
            for ra in values:
                for rb in values:
                    self.assertEqual(
                        circles_intersect(d, ra, rb),
                        circles_intersect(d, rb, ra),
                        f"asymmetric for d={d}, ra={ra}, rb={rb}",
                    )


class TestIntersectionPoint(unittest.TestCase):
    center_a = (-10.0, -10.0)
    delta = (0.0, 20.0)

    def test_equal_radii(self):
        x, y = intersection_point(self.center_a, self.delta, 20.0, 15.0, 15.0)
        self.assertAlmostEqual(x, math.sqrt(125.0) - 10.0)
        self.assertAlmostEqual(y, 0.0)

    def test_point_lies_on_both_circles(self):
        ra, rb = 13.0, 17.5
        x, y = intersection_point(self.center_a, self.delta, 20.0, ra, rb)
        bx, by = self.center_a[0] + self.delta[0], self.center_a[1] + self.delta[1]
        self.assertAlmostEqual(math.hypot(x - self.center_a[0], y - self.center_a[1]), ra)
        self.assertAlmostEqual(math.hypot(x - bx, y - by), rb)

    def test_primary_point_is_right_of_upward_center_line(self):
        x, _ = intersection_point(self.center_a, self.delta, 20.0, 12.0, 14.0)
        self.assertGreater(x, self.center_a[0])

    def test_mirror_is_reflection_across_center_line(self):
        px, py = intersection_point(self.center_a, self.delta, 20.0, 12.0, 14.0)
        mx, my = mirror_intersection_point(self.center_a, self.delta, 20.0, 12.0, 14.0)
        self.assertAlmostEqual(py, my)
        self.assertAlmostEqual(px - self.center_a[0], self.center_a[0] - mx)

    def test_negative_height_is_clamped(self):
        # no real intersection: h^2 < 0 must not produce NaN
        x, y = intersection_point(self.center_a, self.delta, 20.0, 1.0, 10.0)
        self.assertFalse(math.isnan(x) or math.isnan(y))
        self.assertEqual(x, self.center_a[0])

    def test_coincident_centers_raise(self):
        with self.assertRaises(DegenerateGeometryError):
            intersection_point((0.0, 0.0), (0.0, 0.0), 0.0, 5.0, 5.0)


class TestBounds(unittest.TestCase):
    bounds = AreaBounds.centered_square(10.0)

    def test_inside_and_outside(self):
        self.assertTrue(point_in_bounds(self.bounds, (0.0, 0.0)))
        self.assertFalse(point_in_bounds(self.bounds, (10.5, 0.0)))
        self.assertFalse(point_in_bounds(self.bounds, (0.0, -10.5)))

    def test_lower_edges_are_inside(self):
        self.assertTrue(point_in_bounds(self.bounds, (-10.0, 0.0)))
        self.assertTrue(point_in_bounds(self.bounds, (0.0, -10.0)))
        self.assertTrue(point_in_bounds(self.bounds, (-10.0, -10.0)))

    def test_upper_edges_are_outside(self):
        self.assertFalse(point_in_bounds(self.bounds, (10.0, 0.0)))
        self.assertFalse(point_in_bounds(self.bounds, (0.0, 10.0)))
        self.assertFalse(point_in_bounds(self.bounds, (-10.0, 10.0)))


if __name__ == "__main__":
    unittest.main()
