# noise_generator/candidates.py

"""
The ordered collection of distances gathered during one cellular noise query.
Equal distances collapse into a single entry, so "higher" always means a
strictly larger distance.
"""
from bisect import bisect_right


class CandidateDistanceSet:
    """Ascending set of candidate distances with navigation queries."""

    def __init__(self, distances=()):
        self._items = []
        for d in distances:
            self.add(d)

    def add(self, distance: float) -> bool:
        """Insert a distance. Returns False if an equal one is already held."""
        distance = float(distance)
        i = bisect_right(self._items, distance)
        if i and self._items[i - 1] == distance:
            return False
        self._items.insert(i, distance)
        return True

    def first(self):
        """Smallest distance, or None when empty."""
        return self._items[0] if self._items else None

    def last(self):
        """Largest distance, or None when empty."""
        return self._items[-1] if self._items else None

    def higher(self, distance: float):
        """Smallest distance strictly greater than the argument, or None."""
        i = bisect_right(self._items, distance)
        return self._items[i] if i < len(self._items) else None

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __repr__(self):
        return f"CandidateDistanceSet({self._items!r})"
