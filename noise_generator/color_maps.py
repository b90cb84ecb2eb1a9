# noise_generator/color_maps.py

"""
================================================================================
SHARED COLOR MAPPING UTILITIES
================================================================================
This module contains the color mapping constants and functions for converting
raw noise values in [-1, 1] into RGB color arrays.

It is a pure, stateless utility with no windowing dependencies, so the baker
and any preview code can share it.

Data Contract:
---------------
- Inputs: NumPy arrays of noise values, shape (H, W), nominally in [-1, 1].
- Outputs: uint8 RGB arrays of shape (H, W, 3), ready for PIL.Image.fromarray.
- Side Effects: None.
================================================================================
"""
import numpy as np

from . import config as DEFAULTS

# --- Terrain Ramp Levels (normalized 0.0 to 1.0) ---
TERRAIN_LEVELS = {
    "water": 0.35,
    "sand": 0.40,
    "grass": 0.65,
    "dirt": 0.80,
    "mountain": 1.0 # The rest is mountain
}

COLOR_MAP_TERRAIN = {
    "deep_water": (10, 20, 80),
    "shallow_water": (26, 102, 255),
    "sand": (240, 230, 140),
    "grass": (34, 139, 34),
    "dirt": (139, 69, 19),
    "mountain": (112, 128, 144),
    "snow": (255, 255, 255),
}

COLOR_MAP_HEAT = {
    "cold": (0, 0, 100),
    "mid": (255, 255, 0),
    "hot": (150, 0, 0),
}

LUT_SIZE = 256

# --- Color Lookup Table (LUT) Generation ---
def create_grayscale_lut() -> np.ndarray:
    """Creates a 256-entry black-to-white LUT."""
    ramp = np.arange(LUT_SIZE, dtype=np.uint8)
    return np.stack([ramp] * 3, axis=-1)

def create_heat_lut() -> np.ndarray:
    """Creates a 256-entry cold -> mid -> hot LUT."""
    t = np.linspace(0.0, 1.0, LUT_SIZE)[..., np.newaxis]
    cold = np.array(COLOR_MAP_HEAT["cold"])
    mid = np.array(COLOR_MAP_HEAT["mid"])
    hot = np.array(COLOR_MAP_HEAT["hot"])
    colors = np.where(
        t < 0.5,
        (1 - t / 0.5) * cold + (t / 0.5) * mid,
        (1 - (t - 0.5) / 0.5) * mid + ((t - 0.5) / 0.5) * hot,
    )
    return np.round(colors).astype(np.uint8)

def create_terrain_lut() -> np.ndarray:
    """Creates a 256-entry LUT that reads noise as a height field."""
    t = np.linspace(0.0, 1.0, LUT_SIZE)[..., np.newaxis]
    levels = TERRAIN_LEVELS
    cmap = {name: np.array(rgb) for name, rgb in COLOR_MAP_TERRAIN.items()}

    water_t = t / levels["water"]
    mountain_t = (t - levels["dirt"]) / (1.0 - levels["dirt"])
    colors = np.select(
        [t < levels["water"], t < levels["sand"], t < levels["grass"], t < levels["dirt"]],
        [
            (1 - water_t) * cmap["deep_water"] + water_t * cmap["shallow_water"],
            cmap["sand"] * np.ones_like(t),
            cmap["grass"] * np.ones_like(t),
            cmap["dirt"] * np.ones_like(t),
        ],
        default=(1 - mountain_t) * cmap["mountain"] + mountain_t * cmap["snow"],
    )
    return np.round(colors).astype(np.uint8)

PALETTES = {
    "grayscale": create_grayscale_lut,
    "heat": create_heat_lut,
    "terrain": create_terrain_lut,
}

def create_lut(palette: str) -> np.ndarray:
    """Look up a palette by name and build its LUT."""
    try:
        return PALETTES[palette]()
    except KeyError:
        raise ValueError(f"Unknown palette '{palette}'. Expected one of {sorted(PALETTES)}.") from None

# --- Color Array Generation ---
def noise_to_indices(noise_values: np.ndarray) -> np.ndarray:
    """Quantizes noise in [-1, 1] to LUT indices in [0, 255]. Out-of-range values are clipped."""
    normalized = (np.asarray(noise_values, dtype=np.float64) - DEFAULTS.NOISE_MIN) / (DEFAULTS.NOISE_MAX - DEFAULTS.NOISE_MIN)
    normalized = np.clip(normalized, 0.0, 1.0)
    return np.round(normalized * (LUT_SIZE - 1)).astype(np.uint8)

def get_color_array(noise_values: np.ndarray, lut: np.ndarray) -> np.ndarray:
    """Converts a noise array into an RGB color array using a pre-computed LUT."""
    return lut[noise_to_indices(noise_values)]
