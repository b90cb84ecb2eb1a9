# noise_generator/config.py

"""
================================================================================
INTERNAL DEFAULT CONFIGURATION
================================================================================
This module contains the default, fallback internal constants for the noise
generators. These values are used if they are not explicitly provided by the
user's configuration.

DO NOT MODIFY THIS FILE FOR A SPECIFIC TEXTURE OR TERRAIN.
Instead, pass a configuration dictionary to the NoiseGenerator instance.
================================================================================
"""

# --- Noise Selection ---
# One of 'perlin', 'simple' or 'cellular'.
DEFAULT_NOISE_TYPE = 'perlin'
DEFAULT_SEED = 1337

# --- Shared Sampling Parameters ---
DEFAULT_FREQUENCY = 1.0
DEFAULT_AMPLITUDE = 1.0

# --- Fractal (Perlin) Synthesis ---
DEFAULT_PERSISTENCE = 0.5
DEFAULT_OCTAVES = 4
# Frequency multiplier between consecutive octaves.
OCTAVE_FREQUENCY_STEP = 2.0

# --- Seed Folding ---
# Perlin and simple noise fold the seed into 2 + (seed & SEED_FOLD_MASK)^2.
SEED_FOLD_MASK = 0xFF
SEED_FOLD_BASE = 2
# Cellular noise shifts the seed into the high half of a 32-bit integer.
CELLULAR_SEED_SHIFT = 16

# --- Cellular (Worley) Noise ---
# A 2D cell holds between 1 and MAX_FEATURE_POINTS - 1 feature points,
# a 1D cell between 1 and MAX_FEATURE_POINTS // 2 - 1.
MAX_FEATURE_POINTS = 8
DEFAULT_DISTANCE_FUNCTION = 'euclidean'
DEFAULT_COMBINATOR = 'f1'
# Combinator output that maps to a neutral 0.0 noise value.
CELLULAR_MIDPOINT = 0.5

# --- Output Range ---
NOISE_MIN = -1.0
NOISE_MAX = 1.0

# --- Baking ---
DEFAULT_OUTPUT_DIR = 'baked_noise'
DEFAULT_TILES_X = 4
DEFAULT_TILES_Y = 4
DEFAULT_TILE_RESOLUTION = 64 # Pixels on one side of a tile image
DEFAULT_TILE_SIZE = 4.0 # Noise-space units covered by one tile
DEFAULT_PALETTE = 'grayscale'
