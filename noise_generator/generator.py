# noise_generator/generator.py

"""
================================================================================
NOISE GENERATOR FACADE
================================================================================
This module contains the NoiseGenerator class, the single entry point that
turns a configuration dictionary into a ready-to-sample noise field.

Data Contract:
---------------
- Inputs (on initialization):
    - config (dict): Parameters which override the internal defaults. Keys:
      'noise_type', 'seed', 'frequency', 'amplitude', 'persistence',
      'octaves', 'distance_function', 'combinator'.
    - logger: A configured Python logging object for runtime messages.
- Outputs (from methods):
    - get(x[, y]): One float in [-1, 1].
    - sample_grid(x, y): A NumPy array of floats in [-1, 1].
- Side Effects: Logs messages using the provided logger.
- Invariants: Given the same configuration, the output is deterministic.
================================================================================
"""
import logging

import numpy as np

from . import config as DEFAULTS
from .cellular import CellularNoise
from .errors import InvalidParameterError
from .perlin import Perlin
from .simple import SimpleNoise

NOISE_TYPES = ('perlin', 'simple', 'cellular')


class NoiseGenerator:
    """
    Builds and wraps one noise generator from a configuration dictionary.
    This class is backend-only and does not handle any visualization.
    """
    def __init__(self, config: dict, logger: logging.Logger = None):
        """
        Initializes the noise generator.

        Args:
            config (dict): User-defined parameters to override defaults.
            logger (logging.Logger, optional): The logger instance for all
                output. Defaults to this module's logger.
        """
        self.logger = logger or logging.getLogger(__name__)
        self.user_config = dict(config or {})

        # --- Consolidate Configuration ---
        self.settings = {
            'noise_type': self.user_config.get('noise_type', DEFAULTS.DEFAULT_NOISE_TYPE),
            'seed': self.user_config.get('seed', DEFAULTS.DEFAULT_SEED),
            'frequency': self.user_config.get('frequency', DEFAULTS.DEFAULT_FREQUENCY),
            'amplitude': self.user_config.get('amplitude', DEFAULTS.DEFAULT_AMPLITUDE),
            'persistence': self.user_config.get('persistence', DEFAULTS.DEFAULT_PERSISTENCE),
            'octaves': self.user_config.get('octaves', DEFAULTS.DEFAULT_OCTAVES),
            'distance_function': self.user_config.get('distance_function', DEFAULTS.DEFAULT_DISTANCE_FUNCTION),
            'combinator': self.user_config.get('combinator', DEFAULTS.DEFAULT_COMBINATOR),
        }

        unknown = sorted(set(self.user_config) - set(self.settings))
        if unknown:
            self.logger.warning(f"Ignoring unknown noise parameters: {', '.join(unknown)}")

        self.noise_type = str(self.settings['noise_type']).lower()
        self.seed = self.settings['seed']
        self.noise = self._build_noise()

        self.logger.info(f"NoiseGenerator initialized: {self.noise!r}")

    def _build_noise(self):
        s = self.settings
        if self.noise_type == 'perlin':
            return Perlin(s['frequency'], s['amplitude'], s['persistence'], s['octaves'], seed=s['seed'])
        if self.noise_type == 'simple':
            return SimpleNoise(s['frequency'], s['amplitude'], seed=s['seed'])
        if self.noise_type == 'cellular':
            return (CellularNoise.builder()
                    .set_frequency(s['frequency'])
                    .set_amplitude(s['amplitude'])
                    .set_seed(s['seed'])
                    .set_distance_function(s['distance_function'])
                    .set_distance_combinator(s['combinator'])
                    .build())
        raise InvalidParameterError(
            f"unknown noise_type {s['noise_type']!r}; expected one of {', '.join(NOISE_TYPES)}")

    def get(self, x: float, y: float = None) -> float:
        return self.noise.get(x, y)

    def sample_grid(self, x_coords: np.ndarray, y_coords: np.ndarray) -> np.ndarray:
        """Samples the noise over a coordinate grid (e.g. from np.meshgrid)."""
        return self.noise.sample_grid(x_coords, y_coords)

    def sample_region(self, x0: float, y0: float, size: float, resolution: int) -> np.ndarray:
        """
        Samples a square region of noise space starting at (x0, y0).
        Returns an array of shape (resolution, resolution), rows along y.
        """
        step = size / resolution
        xs = x0 + np.arange(resolution) * step
        ys = y0 + np.arange(resolution) * step
        x_grid, y_grid = np.meshgrid(xs, ys)
        return self.sample_grid(x_grid, y_grid)
