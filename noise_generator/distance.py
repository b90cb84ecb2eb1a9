# noise_generator/distance.py

"""
================================================================================
DISTANCE FUNCTIONS
================================================================================
Pluggable metrics used by cellular noise to measure how far a query point is
from a feature point.

Data Contract:
---------------
- apply(a, b):
    - Two scalars: the signed difference b - a. Only used to rank candidates
      in 1D cellular noise, so it is not a true metric.
    - Two 2D or 3D points (tuples, lists or NumPy arrays) of equal length:
      a non-negative distance.
- Side Effects: None.
- Invariants: The Euclidean variant returns the squared distance for every
  dimension. Ranking is unaffected because the square is monotonic.
================================================================================
"""
import numbers
from abc import ABC, abstractmethod

from .errors import InvalidParameterError


class DistanceFunction(ABC):
    """Base class for the distance strategies."""

    name = None

    def apply(self, a, b) -> float:
        if isinstance(a, numbers.Real) and isinstance(b, numbers.Real):
            return float(b) - float(a)

        if len(a) != len(b) or len(a) not in (2, 3):
            raise InvalidParameterError(
                f"points must both be 2D or 3D, got lengths {len(a)} and {len(b)}")
        return self._measure([float(pa) - float(pb) for pa, pb in zip(a, b)])

    @abstractmethod
    def _measure(self, deltas: list) -> float:
        """Reduce per-axis differences to a single distance."""

    def __call__(self, a, b) -> float:
        return self.apply(a, b)

    def __repr__(self):
        return f"{type(self).__name__}()"


class EuclideanDistance(DistanceFunction):
    """Squared Euclidean distance; never square-rooted."""

    name = 'euclidean'

    def _measure(self, deltas):
        return sum(d * d for d in deltas)


class ManhattanDistance(DistanceFunction):
    name = 'manhattan'

    def _measure(self, deltas):
        return sum(abs(d) for d in deltas)


class ChebyshevDistance(DistanceFunction):
    name = 'chebyshev'

    def _measure(self, deltas):
        return max(abs(d) for d in deltas)


DISTANCE_FUNCTIONS = {
    'euclidean': EuclideanDistance,
    'manhattan': ManhattanDistance,
    'chebyshev': ChebyshevDistance,
    'cheby': ChebyshevDistance,
}

def get_distance_function(name: str) -> DistanceFunction:
    """Build a distance function from its configuration name."""
    try:
        return DISTANCE_FUNCTIONS[str(name).lower()]()
    except KeyError:
        raise InvalidParameterError(
            f"unknown distance function {name!r}; expected one of {sorted(DISTANCE_FUNCTIONS)}") from None
