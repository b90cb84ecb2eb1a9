# noise_generator/value_noise.py

"""
================================================================================
SMOOTHED VALUE NOISE
================================================================================
Samples the lattice hash at the integer corners surrounding a point and
blends them with cosine interpolation, producing a continuous field that is
flat-sloped at every lattice point. This is the single octave that the
Perlin fractal sum stacks.

Data Contract:
---------------
- Inputs: Continuous coordinates (1D or 2D).
- Outputs: A float in [-1, 1].
- Side Effects: None.
- Invariants: At integer coordinates the result equals the lattice value,
  smooth_noise_2d(i, j) == lattice_noise(i, j).
================================================================================
"""
import math

from numba import njit

from .hashing import lattice_noise
from .interpolation import cos_interpolate


@njit(cache=True)
def smooth_noise_1d(x):
    """1D smoothed noise along the y = 0 row of the lattice."""
    xi = int(math.floor(x))
    xf = x - xi
    return cos_interpolate(lattice_noise(xi, 0), lattice_noise(xi + 1, 0), xf)

@njit(cache=True)
def smooth_noise_2d(x, y):
    """
    2D smoothed noise. Corners are blended along x first (once for each of
    the two bounding rows), then the two row values are blended along y.
    """
    xi = int(math.floor(x))
    yi = int(math.floor(y))
    xf = x - xi
    yf = y - yi

    n00 = lattice_noise(xi, yi)
    n10 = lattice_noise(xi + 1, yi)
    n01 = lattice_noise(xi, yi + 1)
    n11 = lattice_noise(xi + 1, yi + 1)

    row0 = cos_interpolate(n00, n10, xf)
    row1 = cos_interpolate(n01, n11, xf)
    return cos_interpolate(row0, row1, yf)
