# noise_generator/interpolation.py

"""
================================================================================
SCALAR INTERPOLATION UTILITIES
================================================================================
Small numeric helpers shared by the noise modules. They are compiled with
Numba so the noise kernels can inline them, and remain callable from plain
Python.

Data Contract:
---------------
- Inputs: Python or NumPy scalars.
- Outputs: A single float.
- Side Effects: None.
================================================================================
"""
import math

from numba import njit


@njit(cache=True)
def clamp(value, lo, hi):
    "Clamp value to the bounds of [lo, hi]."
    if value <= lo:
        return lo
    if value >= hi:
        return hi
    return value

@njit(cache=True)
def lerp(a, b, t):
    "Linear interpolation."
    return a + t * (b - a)

@njit(cache=True)
def cos_interpolate(a, b, t):
    """
    Cosine interpolation. The ratio is eased with (1 - cos(pi * t)) / 2
    before the linear blend, which gives a zero slope at both ends.
    """
    f = (1.0 - math.cos(t * math.pi)) * 0.5
    return a * (1.0 - f) + b * f

@njit(cache=True)
def to_ratio(value, lo, hi):
    """Position of value along [lo, hi]. May lie outside 0..1."""
    return (value - lo) / (hi - lo)

@njit(cache=True)
def fit(value, old_lo, old_hi, new_lo, new_hi):
    """Rescale value from one range to another, keeping its relative position."""
    return lerp(new_lo, new_hi, to_ratio(value, old_lo, old_hi))
