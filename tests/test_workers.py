# ==============================================================================
# File: tests/test_workers.py
# Purpose: Parallel draws and the command line harness must reproduce the
#          single-threaded sequence exactly.
# ==============================================================================
import io
import sys
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

import numpy as np

sys.path.append(str(Path(__file__).parent.parent))

from noise_rng.cli import main
from noise_rng.core.errors import InvalidArgument
from noise_rng.core.sequence import SequenceGenerator
from noise_rng.workers import draw_parallel, fork_generators

SEED_42_HEX = ["0x79F5D4D6", "0xCD70F577", "0x0E917EC6", "0x3175BC81", "0xCD656C51"]


def _replay(seed, count, start=0):
    rng = SequenceGenerator(seed, start)
    return np.array([rng.next_u32() for _ in range(count)], dtype=np.uint32)


class TestForkGenerators(unittest.TestCase):

    def test_positions(self):
        forks = fork_generators(42, workers=4, stride=100, start=7)
        self.assertEqual([g.position for g in forks], [7, 107, 207, 307])
        self.assertTrue(all(g.seed == 42 for g in forks))

    def test_forks_do_not_share_state(self):
        a, b = fork_generators(42, workers=2, stride=0)
        a.next_u32()
        self.assertEqual(b.position, 0)
        self.assertEqual(b.next_u32(), 0x79F5D4D6)

    def test_rejects_zero_workers(self):
        with self.assertRaises(InvalidArgument):
            fork_generators(1, workers=0, stride=1)


class TestDrawParallel(unittest.TestCase):

    def test_matches_single_threaded_replay(self):
        for workers in (1, 2, 3, 8):
            np.testing.assert_array_equal(draw_parallel(99, 1001, workers=workers), _replay(99, 1001))

    def test_start_offset_and_more_workers_than_draws(self):
        np.testing.assert_array_equal(draw_parallel(42, 3, workers=16, start=2), _replay(42, 3, start=2))

    def test_empty_and_invalid(self):
        self.assertEqual(draw_parallel(1, 0, workers=2).shape, (0,))
        with self.assertRaises(InvalidArgument):
            draw_parallel(1, -1)
        with self.assertRaises(InvalidArgument):
            draw_parallel(1, 10, workers=0)


class TestCommandLine(unittest.TestCase):

    def _run(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(argv)
        return code, out.getvalue().splitlines()

    def test_reference_table(self):
        code, lines = self._run(["--seed", "42", "--count", "5", "--log-level", "WARNING"])
        self.assertEqual(code, 0)
        self.assertEqual(lines, SEED_42_HEX)

    def test_workers_and_small_blocks_agree(self):
        _, threaded = self._run(["--seed", "42", "--count", "5", "--workers", "3", "--log-level", "WARNING"])
        self.assertEqual(threaded, SEED_42_HEX)

    def test_dec_and_float_formats(self):
        _, dec = self._run(["--seed", "42", "--count", "1", "--format", "dec", "--log-level", "WARNING"])
        self.assertEqual(dec, ["2046153942"])
        _, flt = self._run(["--seed", "42", "--count", "1", "--format", "float", "--log-level", "WARNING"])
        self.assertEqual(float(flt[0]), 0x79F5D4D6 / 4294967296.0)

    def test_start_position(self):
        _, lines = self._run(["--seed", "42", "--start", "3", "--count", "2", "--log-level", "WARNING"])
        self.assertEqual(lines, SEED_42_HEX[3:5])

    def test_invalid_seed_reports_error(self):
        code, lines = self._run(["--seed", "-1"])
        self.assertEqual(code, 2)
        self.assertEqual(lines, [])


if __name__ == "__main__":
    unittest.main()
