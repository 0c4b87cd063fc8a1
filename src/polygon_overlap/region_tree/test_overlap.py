import unittest

import torch

from .overlap import OverlapDetector
from ..common.bounds import make_bounds

class OverlapDetectorTest(unittest.TestCase):
    def test_recomputes_after_each_add(self):
        detector = OverlapDetector()
        self.assertEqual([], detector.common_points)

        detector.add_points("admin", torch.tensor([[100., 100.], [150., 150.]]))
        self.assertEqual([], detector.common_points)

        detector.add_points("user", torch.tensor([[100., 100.], [200., 200.]]))
        self.assertEqual(1, len(detector.common_points))
        torch.testing.assert_close(torch.tensor([100., 100.], dtype=torch.float64), detector.common_points[0])

        detector.add_points("user", [[150., 150.]])
        self.assertEqual(
            [(100., 100.), (150., 150.)],
            sorted(tuple(p.tolist()) for p in detector.common_points))

    def test_admin_points_are_reported(self):
        """
        Duplicated admin points are each reported once per copy; duplicated
        user points do not multiply the result.
        """
        detector = OverlapDetector()
        detector.add_points("admin", [[10., 10.], [10., 10.]])
        detector.add_points("user", [[10., 10.], [10., 10.], [10., 10.]])
        self.assertEqual(2, len(detector.common_points))

    def test_out_of_bounds_points_are_dropped(self):
        detector = OverlapDetector(bbox=make_bounds(0., 0., 100., 100.))
        self.assertEqual(1, detector.add_points("admin", [[50., 50.], [150., 50.]]))
        self.assertEqual(1, detector.add_points("user", [[150., 50.], [50., 50.]]))
        self.assertEqual(1, len(detector.common_points))

    def test_near_points_do_not_overlap(self):
        detector = OverlapDetector()
        detector.add_points("admin", [[100.000001, 100.]])
        detector.add_points("user", [[100., 100.]])
        self.assertEqual([], detector.common_points)

    def test_tolerance(self):
        detector = OverlapDetector(tolerance=1.)
        detector.add_points("admin", [[100., 100.]])
        detector.add_points("user", [[101., 99.]])
        self.assertEqual(1, len(detector.common_points))
        with self.assertRaises(ValueError):
            OverlapDetector(tolerance=-1.)

    def test_unknown_role(self):
        detector = OverlapDetector()
        with self.assertRaises(ValueError):
            detector.add_points("guest", [[1., 1.]])
        self.assertIs(detector.admin_tree, detector.tree_for("admin"))
        self.assertIs(detector.user_tree, detector.tree_for("user"))

if __name__ == '__main__':
    unittest.main()
