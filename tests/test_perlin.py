# ==============================================================================
# File: tests/test_perlin.py
# Purpose: Unit tests for fractal (Perlin) noise and blocky simple noise.
# ==============================================================================
import unittest

import numpy as np

from noise_generator import InvalidParameterError, Perlin, SimpleNoise
from noise_generator.hashing import lattice_noise
from noise_generator.perlin import fold_seed
from noise_generator.value_noise import smooth_noise_1d, smooth_noise_2d


class TestSeedFolding(unittest.TestCase):

    def test_fold(self):
        self.assertEqual(fold_seed(0), 2)
        self.assertEqual(fold_seed(42), 2 + 42 * 42)
        self.assertEqual(fold_seed(0x1FF), 2 + 255 * 255)
        # Negative seeds use their two's-complement low byte.
        self.assertEqual(fold_seed(-1), 2 + 255 * 255)
        self.assertEqual(fold_seed(2**63 + 3), 2 + 9)


class TestPerlin(unittest.TestCase):

    def test_repeated_query_is_identical(self):
        p = Perlin(frequency=1.0, amplitude=1.0, persistence=0.5, octaves=4, seed=42)
        self.assertEqual(p.get(3.5), p.get(3.5))

    def test_independent_instances_match(self):
        a = Perlin(0.7, 1.3, 0.5, 5, seed=99)
        b = Perlin(0.7, 1.3, 0.5, 5, seed=99)
        for x, y in [(0.1, 0.2), (12.5, -3.25), (-100.0, 47.75)]:
            self.assertEqual(a.get(x, y), b.get(x, y))
            self.assertEqual(a.get(x), b.get(x))

    def test_single_octave_matches_value_noise(self):
        p = Perlin(frequency=0.5, amplitude=1.0, persistence=0.5, octaves=1, seed=3)
        offset = fold_seed(3)
        self.assertAlmostEqual(p.get(4.2), smooth_noise_1d(4.2 * 0.5 + offset))
        self.assertAlmostEqual(p.get(4.2, -1.5), smooth_noise_2d(4.2 * 0.5 + offset, -1.5 * 0.5 + offset))

    def test_two_octaves_sum(self):
        p = Perlin(frequency=1.0, amplitude=0.5, persistence=0.25, octaves=2, seed=8)
        off = fold_seed(8)
        x, y = 1.3, 2.7
        expected = 0.5 * (smooth_noise_2d(x + off, y + off) + 0.25 * smooth_noise_2d(2 * x + off, 2 * y + off))
        self.assertAlmostEqual(p.get(x, y), max(-1.0, min(1.0, expected)))

    def test_range_bound_with_large_amplitude(self):
        p = Perlin(frequency=2.0, amplitude=25.0, persistence=0.9, octaves=6, seed=5)
        for x in np.linspace(-20, 20, 41):
            for y in np.linspace(-5, 5, 11):
                v = p.get(x, y)
                self.assertGreaterEqual(v, -1.0)
                self.assertLessEqual(v, 1.0)

    def test_more_octaves_changes_output_but_stays_clamped(self):
        one = Perlin(1.0, 1.0, 0.5, 1, seed=11)
        two = Perlin(1.0, 1.0, 0.5, 2, seed=11)
        points = [(x * 0.37, x * 0.11) for x in range(1, 40)]
        self.assertTrue(any(one.get(x, y) != two.get(x, y) for x, y in points))
        for x, y in points:
            self.assertLessEqual(abs(two.get(x, y)), 1.0)

    def test_seed_changes_output(self):
        a = Perlin(1.0, 1.0, 0.5, 3, seed=1)
        b = Perlin(1.0, 1.0, 0.5, 3, seed=2)
        self.assertNotEqual(a.get(0.3, 0.6), b.get(0.3, 0.6))

    def test_sample_grid_matches_scalar(self):
        p = Perlin(0.8, 1.0, 0.5, 3, seed=21)
        xs, ys = np.meshgrid(np.linspace(-2, 2, 7), np.linspace(0, 3, 5))
        grid = p.sample_grid(xs, ys)
        self.assertEqual(grid.shape, xs.shape)
        for idx in np.ndindex(xs.shape):
            self.assertAlmostEqual(grid[idx], p.get(xs[idx], ys[idx]), places=12)

    def test_sample_grid_shape_mismatch(self):
        p = Perlin(1.0, 1.0, 0.5, 2)
        with self.assertRaises(InvalidParameterError):
            p.sample_grid(np.zeros((2, 2)), np.zeros((3, 2)))

    def test_rejects_zero_octaves(self):
        with self.assertRaises(InvalidParameterError):
            Perlin(1.0, 1.0, 0.5, 0)

    def test_rejects_fractional_octaves(self):
        for bad in (2.9, 0.5, float('nan'), 'many'):
            with self.assertRaises(InvalidParameterError):
                Perlin(1.0, 1.0, 0.5, bad)

    def test_accepts_integral_octaves(self):
        self.assertEqual(Perlin(1.0, 1.0, 0.5, 3.0).octaves, 3)
        self.assertEqual(Perlin(1.0, 1.0, 0.5, np.int64(5)).octaves, 5)

    def test_rejects_non_positive_frequency(self):
        for bad in (0.0, -1.0, float('nan'), float('inf')):
            with self.assertRaises(InvalidParameterError):
                Perlin(bad, 1.0, 0.5, 2)

    def test_parameters_are_read_only(self):
        p = Perlin(1.0, 1.0, 0.5, 2, seed=4)
        with self.assertRaises(AttributeError):
            p.octaves = 3
        self.assertEqual(p.seed_offset, fold_seed(4))


class TestSimpleNoise(unittest.TestCase):

    def test_step_function(self):
        n = SimpleNoise(1.0, 1.0, seed=7)
        self.assertEqual(n.get(2.2, 3.9), n.get(2.999, 3.999))
        self.assertEqual(n.get(2.2, 3.9), n.get(2.0, 3.0))
        self.assertNotEqual(n.get(2.2, 3.9), n.get(3.0, 3.9))

    def test_value_is_lattice_noise(self):
        n = SimpleNoise(2.0, 0.5, seed=7)
        off = fold_seed(7)
        # floor(1.3 * 2) = 2, floor(-0.2 * 2) = -1
        self.assertAlmostEqual(n.get(1.3, -0.2), 0.5 * lattice_noise(2 + off, -1 + off))
        self.assertAlmostEqual(n.get(1.3), 0.5 * lattice_noise(2 + off, 0))

    def test_deterministic_and_bounded(self):
        a = SimpleNoise(3.0, 4.0, seed=123)
        b = SimpleNoise(3.0, 4.0, seed=123)
        for x in np.linspace(-10, 10, 57):
            self.assertEqual(a.get(x, -x), b.get(x, -x))
            self.assertLessEqual(abs(a.get(x, -x)), 1.0)

    def test_sample_grid_matches_scalar(self):
        n = SimpleNoise(1.5, 1.0, seed=9)
        xs, ys = np.meshgrid(np.linspace(-3, 3, 9), np.linspace(-1, 1, 4))
        grid = n.sample_grid(xs, ys)
        for idx in np.ndindex(xs.shape):
            self.assertEqual(grid[idx], n.get(xs[idx], ys[idx]))

    def test_rejects_bad_frequency(self):
        with self.assertRaises(InvalidParameterError):
            SimpleNoise(0.0, 1.0)


if __name__ == '__main__':
    unittest.main()
