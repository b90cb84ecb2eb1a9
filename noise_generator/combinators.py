# noise_generator/combinators.py

"""
================================================================================
DISTANCE COMBINATORS
================================================================================
Reducers that turn the ranked candidate distances of one cellular noise query
into a single value. F1 is the distance to the nearest feature point, F2 the
second nearest, and so on; FN is the farthest candidate found.

Data Contract:
---------------
- Inputs: A CandidateDistanceSet (ascending, duplicates collapsed).
- Outputs: A float, or None when the set is empty. Callers map None to a
  neutral value; combinators never raise for missing data.
- Side Effects: None.
================================================================================
"""
from abc import ABC, abstractmethod

from .candidates import CandidateDistanceSet
from .errors import InvalidParameterError


class DistanceCombinator(ABC):
    """Base class for the combinator strategies."""

    name = None

    def apply(self, distances: CandidateDistanceSet):
        if distances.is_empty():
            return None
        return self._combine(distances)

    @abstractmethod
    def _combine(self, distances: CandidateDistanceSet) -> float:
        """Reduce a non-empty set."""

    def __call__(self, distances):
        return self.apply(distances)

    def __repr__(self):
        return f"{type(self).__name__}()"


class F1Combinator(DistanceCombinator):
    """Nearest feature point; the classic Voronoi cell value."""

    name = 'f1'

    def _combine(self, distances):
        return distances.first()


class F2Combinator(DistanceCombinator):
    """Second nearest, or the nearest when only one candidate exists."""

    name = 'f2'

    def _combine(self, distances):
        first = distances.first()
        second = distances.higher(first)
        return first if second is None else second


class F3Combinator(DistanceCombinator):
    """Third nearest, stepping back toward the nearest as candidates run out."""

    name = 'f3'

    def _combine(self, distances):
        value = distances.first()
        for _ in range(2):
            nxt = distances.higher(value)
            if nxt is None:
                break
            value = nxt
        return value


class FNCombinator(DistanceCombinator):
    """Farthest candidate found."""

    name = 'fn'

    def _combine(self, distances):
        return distances.last()


class F2F1DiffCombinator(DistanceCombinator):
    """
    F2 - F1. When there is no distinct second candidate, 2 * F1 stands in for
    F2, so the result is F1 rather than 0.
    """

    name = 'f2-f1'

    def _combine(self, distances):
        first = distances.first()
        second = distances.higher(first)
        if second is None:
            second = 2.0 * first
        return second - first


COMBINATORS = {
    'f1': F1Combinator,
    'f2': F2Combinator,
    'f3': F3Combinator,
    'fn': FNCombinator,
    'f2-f1': F2F1DiffCombinator,
    'f2f1': F2F1DiffCombinator,
}

def get_combinator(name: str) -> DistanceCombinator:
    """Build a combinator from its configuration name."""
    try:
        return COMBINATORS[str(name).lower()]()
    except KeyError:
        raise InvalidParameterError(
            f"unknown combinator {name!r}; expected one of {sorted(COMBINATORS)}") from None
