# noise_generator/simple.py

"""
================================================================================
SIMPLE (BLOCKY) NOISE
================================================================================
Single-octave, unsmoothed noise. The coordinate is scaled by the frequency,
floored onto the lattice and hashed directly, so the field is a step function
that is constant across each lattice cell.

Data Contract:
---------------
- Inputs (on initialization): frequency, amplitude, seed.
- Outputs: get(x[, y]) -> float in [-1, 1]; sample_grid(x, y) -> np.ndarray.
- Side Effects: None.
================================================================================
"""
import math

import numpy as np
from numba import njit

from . import config as DEFAULTS
from .hashing import lattice_noise
from .errors import InvalidParameterError
from .interpolation import clamp
from .perlin import fold_seed, validate_frequency


@njit(cache=True)
def _step_1d(x, frequency, amplitude, offset):
    return clamp(amplitude * lattice_noise(int(math.floor(x * frequency)) + offset, 0), -1.0, 1.0)

@njit(cache=True)
def _step_2d(x, y, frequency, amplitude, offset):
    xi = int(math.floor(x * frequency)) + offset
    yi = int(math.floor(y * frequency)) + offset
    return clamp(amplitude * lattice_noise(xi, yi), -1.0, 1.0)

@njit(cache=True)
def simple_grid_2d(x, y, frequency, amplitude, offset):
    xs = x.ravel()
    ys = y.ravel()
    out = np.empty(xs.shape[0])
    for i in range(xs.shape[0]):
        out[i] = _step_2d(xs[i], ys[i], frequency, amplitude, offset)
    return out.reshape(x.shape)


class SimpleNoise:
    """Unsmoothed lattice noise; cheap and blocky."""

    def __init__(self, frequency: float = DEFAULTS.DEFAULT_FREQUENCY,
                 amplitude: float = DEFAULTS.DEFAULT_AMPLITUDE,
                 seed: int = DEFAULTS.DEFAULT_SEED):
        self._frequency = validate_frequency(frequency)
        self._amplitude = float(amplitude)
        self._seed = int(seed)
        self._offset = fold_seed(seed)

    @property
    def frequency(self) -> float:
        return self._frequency

    @property
    def amplitude(self) -> float:
        return self._amplitude

    @property
    def seed(self) -> int:
        return self._seed

    def get(self, x: float, y: float = None) -> float:
        if y is None:
            return _step_1d(float(x), self._frequency, self._amplitude, self._offset)
        return _step_2d(float(x), float(y), self._frequency, self._amplitude, self._offset)

    def sample_grid(self, x_coords: np.ndarray, y_coords: np.ndarray) -> np.ndarray:
        x = np.ascontiguousarray(x_coords, dtype=np.float64)
        y = np.ascontiguousarray(y_coords, dtype=np.float64)
        if x.shape != y.shape:
            raise InvalidParameterError(f"coordinate shapes differ: {x.shape} vs {y.shape}")
        return simple_grid_2d(x, y, self._frequency, self._amplitude, self._offset)

    def __repr__(self):
        return f"SimpleNoise(frequency={self._frequency}, amplitude={self._amplitude}, seed={self._seed})"
