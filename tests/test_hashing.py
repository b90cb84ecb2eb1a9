# ==============================================================================
# File: tests/test_hashing.py
# Purpose: Unit tests for the lattice hash and value noise.
# ==============================================================================
import math
import unittest

from noise_generator.hashing import hash2, lattice_noise, to_int32
from noise_generator.interpolation import clamp, cos_interpolate, fit, lerp
from noise_generator.value_noise import smooth_noise_1d, smooth_noise_2d


def reference_hash(x, y):
    """Straight transcription of the hash with explicit 32-bit wrapping."""
    n = to_int32(x + y * 57)
    n = to_int32((n << 13) ^ n)
    return (n * (n * n * 60493 + 19990303) + 1376312589) & 0x7fffffff


class TestHash(unittest.TestCase):

    def test_spread_for_neighbouring_points(self):
        h00 = hash2(0, 0)
        h10 = hash2(1, 0)
        for h in (h00, h10):
            self.assertGreaterEqual(h, 0)
            self.assertLessEqual(h, 0x7fffffff)
        self.assertNotEqual(h00, h10)

    def test_known_value_at_origin(self):
        # n = 0 so the result is just the final additive constant.
        self.assertEqual(hash2(0, 0), 1376312589)

    def test_matches_wrapped_reference(self):
        for x, y in [(1, 0), (0, 1), (-1, -1), (123456, -98765), (2**31 - 1, 7), (-2**31, 3)]:
            self.assertEqual(hash2(x, y), reference_hash(x, y), f"hash2({x}, {y})")

    def test_pure(self):
        self.assertEqual(hash2(17, -4), hash2(17, -4))
        self.assertEqual(lattice_noise(17, -4), lattice_noise(17, -4))

    def test_lattice_noise_range(self):
        for x in range(-50, 50, 7):
            for y in range(-50, 50, 11):
                v = lattice_noise(x, y)
                self.assertGreater(v, -1.0)
                self.assertLessEqual(v, 1.0)
                self.assertAlmostEqual(v, 1.0 - hash2(x, y) / 1073741824.0)

    def test_to_int32_wraps(self):
        self.assertEqual(to_int32(2**31), -2**31)
        self.assertEqual(to_int32(-1), -1)
        self.assertEqual(to_int32(2**32 + 5), 5)


class TestInterpolation(unittest.TestCase):

    def test_clamp(self):
        self.assertEqual(clamp(2.0, -1.0, 1.0), 1.0)
        self.assertEqual(clamp(-3.0, -1.0, 1.0), -1.0)
        self.assertEqual(clamp(0.25, -1.0, 1.0), 0.25)

    def test_cos_interpolate_endpoints_and_midpoint(self):
        self.assertAlmostEqual(cos_interpolate(2.0, 6.0, 0.0), 2.0)
        self.assertAlmostEqual(cos_interpolate(2.0, 6.0, 1.0), 6.0)
        self.assertAlmostEqual(cos_interpolate(2.0, 6.0, 0.5), 4.0)
        # Eased: closer to the start than linear at t = 0.25.
        self.assertLess(cos_interpolate(0.0, 1.0, 0.25), lerp(0.0, 1.0, 0.25))

    def test_fit(self):
        self.assertAlmostEqual(fit(5.0, 0.0, 10.0, -1.0, 1.0), 0.0)


class TestValueNoise(unittest.TestCase):

    def test_matches_lattice_at_integer_points(self):
        for x, y in [(0, 0), (3, 4), (-2, 5), (10, -10)]:
            self.assertAlmostEqual(smooth_noise_2d(float(x), float(y)), lattice_noise(x, y))
        self.assertAlmostEqual(smooth_noise_1d(7.0), lattice_noise(7, 0))

    def test_continuous_across_cell_edges(self):
        eps = 1e-7
        for x in (1.0, 2.0, -3.0):
            self.assertAlmostEqual(smooth_noise_1d(x - eps), smooth_noise_1d(x + eps), places=5)
            self.assertAlmostEqual(smooth_noise_2d(x - eps, 0.3), smooth_noise_2d(x + eps, 0.3), places=5)

    def test_stays_between_corner_values(self):
        a, b = lattice_noise(4, 0), lattice_noise(5, 0)
        lo, hi = min(a, b), max(a, b)
        for i in range(1, 10):
            v = smooth_noise_1d(4.0 + i / 10.0)
            self.assertGreaterEqual(v, lo - 1e-12)
            self.assertLessEqual(v, hi + 1e-12)

    def test_negative_coordinates_floor(self):
        # -0.5 lies in cell [-1, 0], halfway between the two lattice values.
        expected = (lattice_noise(-1, 0) + lattice_noise(0, 0)) / 2.0
        self.assertAlmostEqual(smooth_noise_1d(-0.5), expected)
        self.assertTrue(math.isfinite(smooth_noise_2d(-0.5, -7.25)))


if __name__ == '__main__':
    unittest.main()
