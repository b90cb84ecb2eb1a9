# noise_generator/perlin.py

"""
================================================================================
FRACTAL (PERLIN) NOISE
================================================================================
Cloudy, smoothed noise built by summing several octaves of value noise. Each
octave doubles the sampling frequency and scales its contribution by the
persistence factor.

Data Contract:
---------------
- Inputs (on initialization):
    - frequency, amplitude, persistence, octaves: Standard noise parameters.
    - seed: Any integer. Folded to a small offset, 2 + (seed & 0xFF)^2.
- Outputs:
    - get(x[, y]): One float in [-1, 1].
    - sample_grid(x, y): A NumPy array of floats in [-1, 1], shaped like x.
- Side Effects: None.
- Invariants: Two instances with equal parameters return identical values.
================================================================================
"""
import math

import numpy as np
from numba import njit

from . import config as DEFAULTS
from .errors import InvalidParameterError
from .interpolation import clamp
from .value_noise import smooth_noise_1d, smooth_noise_2d

_OCTAVE_STEP = DEFAULTS.OCTAVE_FREQUENCY_STEP


def fold_seed(seed: int) -> int:
    """Fold any integer seed into the small offset used by lattice noises."""
    s = int(seed) & DEFAULTS.SEED_FOLD_MASK
    return DEFAULTS.SEED_FOLD_BASE + s * s

def validate_octaves(octaves) -> int:
    try:
        count = int(octaves)
    except (TypeError, ValueError, OverflowError):
        raise InvalidParameterError(f"octaves must be a whole number, got {octaves!r}") from None
    if count != octaves:
        raise InvalidParameterError(f"octaves must be a whole number, got {octaves!r}")
    if count < 1:
        raise InvalidParameterError(f"octaves must be >= 1, got {octaves!r}")
    return count

def validate_frequency(frequency) -> float:
    frequency = float(frequency)
    if not math.isfinite(frequency) or frequency <= 0.0:
        raise InvalidParameterError(f"frequency must be a positive finite number, got {frequency!r}")
    return frequency

@njit(cache=True)
def _fbm_1d(x, frequency, amplitude, persistence, octaves, offset):
    total = 0.0
    freq = frequency
    amp = 1.0
    for _ in range(octaves):
        total += amp * smooth_noise_1d(x * freq + offset)
        freq *= _OCTAVE_STEP
        amp *= persistence
    return clamp(amplitude * total, -1.0, 1.0)

@njit(cache=True)
def _fbm_2d(x, y, frequency, amplitude, persistence, octaves, offset):
    total = 0.0
    freq = frequency
    amp = 1.0
    for _ in range(octaves):
        total += amp * smooth_noise_2d(x * freq + offset, y * freq + offset)
        freq *= _OCTAVE_STEP
        amp *= persistence
    return clamp(amplitude * total, -1.0, 1.0)

@njit(cache=True)
def perlin_grid_2d(x, y, frequency, amplitude, persistence, octaves, offset):
    """
    Evaluate 2D fractal noise over a grid of coordinates.
    This function is JIT-compiled with Numba; it uses explicit loops over
    the flattened arrays and the same per-point kernel as Perlin.get.
    """
    xs = x.ravel()
    ys = y.ravel()
    out = np.empty(xs.shape[0])
    for i in range(xs.shape[0]):
        out[i] = _fbm_2d(xs[i], ys[i], frequency, amplitude, persistence, octaves, offset)
    return out.reshape(x.shape)


class Perlin:
    """Multi-octave smoothed value noise."""

    def __init__(self, frequency: float, amplitude: float, persistence: float,
                 octaves: int, seed: int = DEFAULTS.DEFAULT_SEED):
        """
        Args:
            frequency (float): Scale of the noise. Must be positive.
            amplitude (float): Contrast applied to the summed octaves.
            persistence (float): Per-octave amplitude decay.
            octaves (int): Number of layers to sum. Must be at least 1.
            seed (int): Any integer.
        """
        self._frequency = validate_frequency(frequency)
        self._amplitude = float(amplitude)
        self._persistence = float(persistence)
        self._octaves = validate_octaves(octaves)
        self._seed = int(seed)
        self._offset = fold_seed(seed)

    # --- Read-only parameters; re-seeding means building a new instance ---
    @property
    def frequency(self) -> float:
        return self._frequency

    @property
    def amplitude(self) -> float:
        return self._amplitude

    @property
    def persistence(self) -> float:
        return self._persistence

    @property
    def octaves(self) -> int:
        return self._octaves

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def seed_offset(self) -> int:
        return self._offset

    def get(self, x: float, y: float = None) -> float:
        """Sample 1D noise at x, or 2D noise at (x, y)."""
        if y is None:
            return _fbm_1d(float(x), self._frequency, self._amplitude,
                           self._persistence, self._octaves, float(self._offset))
        return _fbm_2d(float(x), float(y), self._frequency, self._amplitude,
                       self._persistence, self._octaves, float(self._offset))

    def sample_grid(self, x_coords: np.ndarray, y_coords: np.ndarray) -> np.ndarray:
        """Sample 2D noise at every (x, y) pair of two equally shaped arrays."""
        x = np.ascontiguousarray(x_coords, dtype=np.float64)
        y = np.ascontiguousarray(y_coords, dtype=np.float64)
        if x.shape != y.shape:
            raise InvalidParameterError(f"coordinate shapes differ: {x.shape} vs {y.shape}")
        return perlin_grid_2d(x, y, self._frequency, self._amplitude,
                              self._persistence, self._octaves, float(self._offset))

    def __repr__(self):
        return (f"Perlin(frequency={self._frequency}, amplitude={self._amplitude}, "
                f"persistence={self._persistence}, octaves={self._octaves}, seed={self._seed})")
