# noise_generator/cellular.py

"""
================================================================================
CELLULAR (WORLEY) NOISE
================================================================================
Voronoi-style noise. Space is divided into unit cells; each cell holds a
small, pseudo-random population of feature points derived only from the
cell's coordinates and the generator's seed. A query measures the distance
from the sample point to every feature point in its own cell and the
surrounding ring of neighbours, then reduces those distances with a
combinator (F1, F2, ...).

Data Contract:
---------------
- Inputs (on initialization):
    - frequency, amplitude, seed: Standard noise parameters.
    - distance_function: A DistanceFunction instance or its name.
    - combinator: A DistanceCombinator instance or its name.
- Outputs:
    - get(x[, y]): One float in [-1, 1].
    - distances(x[, y]): The CandidateDistanceSet gathered for that query.
    - feature_points(cell_x[, cell_y]): The points seeded in one cell.
- Side Effects: None. Single queries build their own per-cell generators;
  sample_grid memoises cell populations for the duration of one call.
- Invariants: A cell's feature points depend only on (cell coordinates, seed),
  never on which query or neighbour triggered the lookup. Instances are
  immutable; use the builder or the with_* methods to change strategies.
================================================================================
"""
import logging
import math

import numpy as np

from . import config as DEFAULTS
from .candidates import CandidateDistanceSet
from .combinators import DistanceCombinator, get_combinator
from .distance import DistanceFunction, get_distance_function
from .errors import InvalidParameterError
from .hashing import hash2, to_int32
from .interpolation import clamp
from .perlin import validate_frequency

logger = logging.getLogger(__name__)

_NEIGHBOUR_OFFSETS = (-1, 0, 1)


def fold_cellular_seed(seed: int) -> int:
    """Shift the seed into the high half of a signed 32-bit integer."""
    return to_int32(int(seed) << DEFAULTS.CELLULAR_SEED_SHIFT)

def _resolve_distance_function(value) -> DistanceFunction:
    if value is None:
        raise InvalidParameterError("a distance function is required")
    if isinstance(value, DistanceFunction):
        return value
    if isinstance(value, str):
        return get_distance_function(value)
    raise InvalidParameterError(f"not a distance function: {value!r}")

def _resolve_combinator(value) -> DistanceCombinator:
    if value is None:
        raise InvalidParameterError("a distance combinator is required")
    if isinstance(value, DistanceCombinator):
        return value
    if isinstance(value, str):
        return get_combinator(value)
    raise InvalidParameterError(f"not a distance combinator: {value!r}")


class CellularNoise:
    """Worley noise with pluggable distance metric and combinator."""

    def __init__(self, frequency: float = DEFAULTS.DEFAULT_FREQUENCY,
                 amplitude: float = DEFAULTS.DEFAULT_AMPLITUDE,
                 seed: int = DEFAULTS.DEFAULT_SEED,
                 distance_function=DEFAULTS.DEFAULT_DISTANCE_FUNCTION,
                 combinator=DEFAULTS.DEFAULT_COMBINATOR):
        self._frequency = validate_frequency(frequency)
        self._amplitude = float(amplitude)
        self._seed = int(seed)
        self._cell_seed = fold_cellular_seed(seed)
        self._distance_function = _resolve_distance_function(distance_function)
        self._combinator = _resolve_combinator(combinator)

    @classmethod
    def builder(cls) -> "CellularNoiseBuilder":
        return CellularNoiseBuilder()

    @property
    def frequency(self) -> float:
        return self._frequency

    @property
    def amplitude(self) -> float:
        return self._amplitude

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def distance_function(self) -> DistanceFunction:
        return self._distance_function

    @property
    def combinator(self) -> DistanceCombinator:
        return self._combinator

    def with_distance_function(self, distance_function) -> "CellularNoise":
        """A copy of this generator using another distance function."""
        return CellularNoise(self._frequency, self._amplitude, self._seed,
                             distance_function, self._combinator)

    def with_distance_combinator(self, combinator) -> "CellularNoise":
        """A copy of this generator using another combinator."""
        return CellularNoise(self._frequency, self._amplitude, self._seed,
                             self._distance_function, combinator)

    # --- Feature Points ---
    def _cell_rng(self, cell_x: int, cell_y: int = None) -> np.random.Generator:
        if cell_y is None:
            cell_hash = hash2(to_int32(cell_x + self._cell_seed), 0)
        else:
            cell_hash = hash2(to_int32(cell_x + self._cell_seed), to_int32(cell_y + self._cell_seed))
        return np.random.default_rng(int(cell_hash))

    def feature_points(self, cell_x: int, cell_y: int = None) -> list:
        """
        The feature points of one cell, in cell-space coordinates.

        1D cells hold 1 to MAX_FEATURE_POINTS // 2 - 1 points (floats); 2D cells
        hold 1 to MAX_FEATURE_POINTS - 1 points ((x, y) tuples).
        """
        cell_x = int(cell_x)
        rng = self._cell_rng(cell_x, None if cell_y is None else int(cell_y))
        if cell_y is None:
            count = int(rng.integers(1, DEFAULTS.MAX_FEATURE_POINTS // 2))
            return [cell_x + float(rng.random()) for _ in range(count)]

        cell_y = int(cell_y)
        count = int(rng.integers(1, DEFAULTS.MAX_FEATURE_POINTS))
        points = []
        for _ in range(count):
            px = cell_x + float(rng.random())
            py = cell_y + float(rng.random())
            points.append((px, py))
        return points

    def _points_for(self, cells, *cell) -> list:
        # cells maps cell coordinates to populations already built in this call.
        if cells is None:
            return self.feature_points(*cell)
        points = cells.get(cell)
        if points is None:
            points = cells[cell] = self.feature_points(*cell)
        return points

    # --- Queries ---
    def distances(self, x: float, y: float = None) -> CandidateDistanceSet:
        """Every candidate distance found around (x[, y]) after frequency scaling."""
        return self._gather(x, y, None)

    def _gather(self, x, y, cells) -> CandidateDistanceSet:
        candidates = CandidateDistanceSet()
        measure = self._distance_function.apply
        sx = float(x) * self._frequency
        cx = math.floor(sx)

        if y is None:
            for ox in _NEIGHBOUR_OFFSETS:
                for fp in self._points_for(cells, cx + ox):
                    candidates.add(measure(sx, fp))
            return candidates

        sy = float(y) * self._frequency
        cy = math.floor(sy)
        query = (sx, sy)
        for oy in _NEIGHBOUR_OFFSETS:
            for ox in _NEIGHBOUR_OFFSETS:
                for fp in self._points_for(cells, cx + ox, cy + oy):
                    candidates.add(measure(query, fp))
        return candidates

    def _reduce(self, candidates: CandidateDistanceSet, x, y) -> float:
        value = self._combinator.apply(candidates)
        if value is None:
            logger.debug(f"No feature points around ({x}, {y}); using neutral value.")
            return DEFAULTS.CELLULAR_MIDPOINT
        return value

    def _map(self, raw: float) -> float:
        mapped = (raw - DEFAULTS.CELLULAR_MIDPOINT) * 2.0
        return clamp(self._amplitude * mapped, DEFAULTS.NOISE_MIN, DEFAULTS.NOISE_MAX)

    def raw_value(self, x: float, y: float = None) -> float:
        """The combinator output before range mapping and amplitude."""
        return self._reduce(self.distances(x, y), x, y)

    def get(self, x: float, y: float = None) -> float:
        """Sample 1D noise at x, or 2D noise at (x, y)."""
        return self._map(self.raw_value(x, y))

    def sample_grid(self, x_coords: np.ndarray, y_coords: np.ndarray) -> np.ndarray:
        """
        Sample 2D noise at every (x, y) pair of two equally shaped arrays.
        Each cell's population is built once per call and shared by every
        pixel whose neighbourhood touches it.
        """
        x = np.asarray(x_coords, dtype=np.float64)
        y = np.asarray(y_coords, dtype=np.float64)
        if x.shape != y.shape:
            raise InvalidParameterError(f"coordinate shapes differ: {x.shape} vs {y.shape}")
        cells = {}
        out = np.empty(x.shape)
        for idx in np.ndindex(x.shape):
            px, py = x[idx], y[idx]
            out[idx] = self._map(self._reduce(self._gather(px, py, cells), px, py))
        return out

    def __repr__(self):
        return (f"CellularNoise(frequency={self._frequency}, amplitude={self._amplitude}, "
                f"seed={self._seed}, distance_function={self._distance_function!r}, "
                f"combinator={self._combinator!r})")


class CellularNoiseBuilder:
    """
    Collects cellular noise settings and produces an immutable CellularNoise.

        noise = (CellularNoise.builder()
                 .set_frequency(4.0)
                 .set_distance_function('manhattan')
                 .set_distance_combinator('f2-f1')
                 .build())
    """

    def __init__(self):
        self._frequency = DEFAULTS.DEFAULT_FREQUENCY
        self._amplitude = DEFAULTS.DEFAULT_AMPLITUDE
        self._seed = DEFAULTS.DEFAULT_SEED
        self._distance_function = DEFAULTS.DEFAULT_DISTANCE_FUNCTION
        self._combinator = DEFAULTS.DEFAULT_COMBINATOR

    def set_frequency(self, frequency: float) -> "CellularNoiseBuilder":
        self._frequency = frequency
        return self

    def set_amplitude(self, amplitude: float) -> "CellularNoiseBuilder":
        self._amplitude = amplitude
        return self

    def set_seed(self, seed: int) -> "CellularNoiseBuilder":
        self._seed = seed
        return self

    def set_distance_function(self, distance_function) -> "CellularNoiseBuilder":
        self._distance_function = distance_function
        return self

    def set_distance_combinator(self, combinator) -> "CellularNoiseBuilder":
        self._combinator = combinator
        return self

    def build(self) -> CellularNoise:
        return CellularNoise(self._frequency, self._amplitude, self._seed,
                             self._distance_function, self._combinator)
