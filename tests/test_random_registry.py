# ==============================================================================
# File: tests/test_random_registry.py
# Purpose: Unit tests for the explicit, context-keyed random registry.
# ==============================================================================
import math
import threading
import unittest

from noise_generator import RandomRegistry, random_unit_vector2, random_unit_vector3


class TestRandomRegistry(unittest.TestCase):

    def test_lazy_creation_and_reuse(self):
        registry = RandomRegistry()
        self.assertNotIn("terrain", registry)
        rng = registry.get("terrain")
        self.assertIs(registry.get("terrain"), rng)
        self.assertIn("terrain", registry)
        self.assertEqual(len(registry), 1)

    def test_reseed_restarts_sequence(self):
        registry = RandomRegistry()
        first = registry.reseed("vectors", 1234).random(3)
        registry.get("vectors").random(10)
        again = registry.reseed("vectors", 1234).random(3)
        self.assertEqual(list(first), list(again))

    def test_base_seed_is_repeatable_per_key(self):
        a = RandomRegistry(base_seed=7)
        b = RandomRegistry(base_seed=7)
        self.assertEqual(a.get("worker-1").random(), b.get("worker-1").random())
        self.assertNotEqual(a.get("worker-2").random(), b.get("worker-1").random())

    def test_discard(self):
        registry = RandomRegistry()
        registry.get(1)
        registry.discard(1)
        registry.discard(1)
        self.assertNotIn(1, registry)

    def test_concurrent_get_returns_single_instance(self):
        registry = RandomRegistry(base_seed=3)
        seen = []

        def worker():
            seen.append(registry.get("shared"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertTrue(all(rng is seen[0] for rng in seen))


class TestRandomVectors(unittest.TestCase):

    def test_unit_length(self):
        registry = RandomRegistry()
        rng = registry.reseed("vectors", 99)
        for _ in range(20):
            x, y = random_unit_vector2(rng)
            self.assertAlmostEqual(math.hypot(x, y), 1.0)
            vx, vy, vz = random_unit_vector3(rng)
            self.assertAlmostEqual(math.sqrt(vx * vx + vy * vy + vz * vz), 1.0)

    def test_explicit_generator_is_deterministic(self):
        registry = RandomRegistry()
        first = random_unit_vector2(registry.reseed("a", 5))
        second = random_unit_vector2(registry.reseed("b", 5))
        self.assertEqual(first, second)


if __name__ == '__main__':
    unittest.main()
