"""Easing curve tests: endpoints, monotonicity and the start/stop symmetry."""
import sys
import unittest
from pathlib import Path

import numpy as np

sys.path.append(str(Path(__file__).parent.parent))

from noise_rng.core import easing
from noise_rng.core.errors import InvalidArgument

CURVES = [
    easing.smooth_start2, easing.smooth_start3, easing.smooth_start4,
    easing.smooth_stop2, easing.smooth_stop3, easing.smooth_stop4,
    easing.smooth_step2, easing.smooth_step3, easing.smooth_step4,
]


class TestEasing(unittest.TestCase):

    def test_endpoints(self):
        for curve in CURVES:
            self.assertAlmostEqual(curve(0.0), 0.0, msg=curve.__name__)
            self.assertAlmostEqual(curve(1.0), 1.0, msg=curve.__name__)

    def test_monotonic(self):
        ts = [i / 50 for i in range(51)]
        for curve in CURVES:
            values = [curve(t) for t in ts]
            self.assertEqual(values, sorted(values), msg=curve.__name__)

    def test_start_stop_symmetry(self):
        for start, stop in (
            (easing.smooth_start2, easing.smooth_stop2),
            (easing.smooth_start3, easing.smooth_stop3),
            (easing.smooth_start4, easing.smooth_stop4),
        ):
            for t in (0.1, 0.25, 0.6, 0.9):
                self.assertAlmostEqual(stop(t), 1.0 - start(1.0 - t))

    def test_known_values(self):
        self.assertAlmostEqual(easing.smooth_start2(0.5), 0.25)
        self.assertAlmostEqual(easing.smooth_start3(0.5), 0.125)
        self.assertAlmostEqual(easing.smooth_stop2(0.5), 0.75)
        self.assertAlmostEqual(easing.smooth_step2(0.5), 0.5)
        self.assertAlmostEqual(easing.smooth_step3(0.5), 0.5)

    def test_flip_rejects_out_of_range(self):
        with self.assertRaises(InvalidArgument):
            easing.flip(1.5)
        with self.assertRaises(InvalidArgument):
            easing.smooth_stop2(-0.1)

    def test_lerp_and_powers_on_arrays(self):
        t = np.array([0.0, 0.5, 1.0])
        np.testing.assert_allclose(easing.lerp(2.0, 4.0, t), [2.0, 3.0, 4.0])
        np.testing.assert_allclose(easing.pow4(t), [0.0, 0.0625, 1.0])


if __name__ == "__main__":
    unittest.main()
