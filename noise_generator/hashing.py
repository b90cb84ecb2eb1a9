# noise_generator/hashing.py

"""
================================================================================
LATTICE HASH
================================================================================
A branchless integer hash that turns 2D integer lattice coordinates into a
pseudo-random 31-bit magnitude, and a normalised float derived from it. Every
noise generator in this package samples the lattice through these two
functions.

Data Contract:
---------------
- Inputs:
    - x, y: Integer lattice coordinates. Values outside the 32-bit range wrap.
- Outputs:
    - hash2: An int in [0, 0x7fffffff].
    - lattice_noise: A float in (-1, 1].
- Side Effects: None.
- Invariants: Pure functions. Arithmetic wraps modulo 2^32 exactly as signed
  32-bit integer arithmetic would, so results are bit-stable across platforms.
================================================================================
"""
from numba import njit

_MASK_32 = 0xFFFFFFFF
_MASK_31 = 0x7FFFFFFF
# Spreading constants (odd, chosen to scatter the low bits).
_Y_STRIDE = 57
_MUL_A = 60493
_ADD_A = 19990303
_ADD_B = 1376312589
_NOISE_SCALE = 1073741824.0 # 2^30


@njit(cache=True)
def hash2(x, y):
    """Hash a pair of lattice coordinates into [0, 0x7fffffff]."""
    n = (x + y * _Y_STRIDE) & _MASK_32
    n = ((n << 13) & _MASK_32) ^ n
    inner = (n * n) & _MASK_32
    inner = (inner * _MUL_A + _ADD_A) & _MASK_32
    return (n * inner + _ADD_B) & _MASK_31

@njit(cache=True)
def lattice_noise(x, y):
    """Map the hash of (x, y) into the range (-1, 1]."""
    return 1.0 - hash2(x, y) / _NOISE_SCALE

def to_int32(value: int) -> int:
    """Wrap an arbitrary Python int into the signed 32-bit range."""
    value &= _MASK_32
    if value > _MASK_31:
        value -= _MASK_32 + 1
    return value
