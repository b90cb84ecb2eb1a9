# noise_generator/random_registry.py

"""
================================================================================
SEEDED RANDOM REGISTRY
================================================================================
Holds one NumPy random generator per caller-chosen context key (a worker id,
a subsystem name, ...), created lazily and reseedable on demand. Callers pass
the generator they get from the registry into whatever needs randomness;
nothing looks generators up implicitly.

Cellular noise never uses this registry. Its per-cell generators are derived
from cell coordinates and the noise seed alone.

Data Contract:
---------------
- get(key): The generator for key, created on first use.
- reseed(key, seed): Replace the generator for key with a freshly seeded one.
- discard(key): Forget the generator for key.
- Side Effects: Mutates the registry's own table only. Thread-safe.
================================================================================
"""
import math
import threading

import numpy as np


class RandomRegistry:
    """Context-keyed table of numpy.random.Generator instances."""

    def __init__(self, base_seed: int = None):
        """
        Args:
            base_seed (int, optional): When given, a key's first generator is
                seeded from (base_seed, key) so runs are repeatable. When None,
                generators draw fresh OS entropy.
        """
        self._base_seed = base_seed
        self._generators = {}
        self._lock = threading.Lock()

    def _spawn(self, key) -> np.random.Generator:
        if self._base_seed is None:
            return np.random.default_rng()
        key_entropy = int.from_bytes(repr(key).encode('utf-8'), 'little')
        return np.random.default_rng([int(self._base_seed) & 0xFFFFFFFFFFFFFFFF, key_entropy])

    def get(self, key) -> np.random.Generator:
        with self._lock:
            rng = self._generators.get(key)
            if rng is None:
                rng = self._spawn(key)
                self._generators[key] = rng
            return rng

    def reseed(self, key, seed: int) -> np.random.Generator:
        rng = np.random.default_rng(seed)
        with self._lock:
            self._generators[key] = rng
        return rng

    def discard(self, key) -> None:
        with self._lock:
            self._generators.pop(key, None)

    def __contains__(self, key):
        with self._lock:
            return key in self._generators

    def __len__(self):
        with self._lock:
            return len(self._generators)


def random_unit_vector2(rng: np.random.Generator) -> tuple:
    """A 2D unit vector with a uniformly random heading."""
    theta = rng.random() * 2.0 * math.pi
    return (math.cos(theta), math.sin(theta))

def random_unit_vector3(rng: np.random.Generator) -> tuple:
    """A 3D unit vector from two random angles (not uniform over the sphere)."""
    inclination = rng.random() * 2.0 * math.pi
    azimuth = rng.random() * 2.0 * math.pi
    return (
        math.sin(inclination) * math.cos(azimuth),
        math.sin(inclination) * math.sin(azimuth),
        math.cos(inclination),
    )
