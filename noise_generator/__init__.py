# noise_generator/__init__.py

# This file makes the 'noise_generator' directory a Python package.
# It also defines the public API of the package.

from .errors import InvalidParameterError
from .hashing import hash2, lattice_noise
from .value_noise import smooth_noise_1d, smooth_noise_2d
from .perlin import Perlin
from .simple import SimpleNoise
from .distance import (
    DistanceFunction, EuclideanDistance, ManhattanDistance, ChebyshevDistance,
    get_distance_function,
)
from .candidates import CandidateDistanceSet
from .combinators import (
    DistanceCombinator, F1Combinator, F2Combinator, F3Combinator,
    FNCombinator, F2F1DiffCombinator, get_combinator,
)
from .cellular import CellularNoise, CellularNoiseBuilder
from .random_registry import RandomRegistry, random_unit_vector2, random_unit_vector3
from .generator import NoiseGenerator

__all__ = [
    "InvalidParameterError",
    "hash2", "lattice_noise", "smooth_noise_1d", "smooth_noise_2d",
    "Perlin", "SimpleNoise",
    "DistanceFunction", "EuclideanDistance", "ManhattanDistance", "ChebyshevDistance",
    "get_distance_function",
    "CandidateDistanceSet",
    "DistanceCombinator", "F1Combinator", "F2Combinator", "F3Combinator",
    "FNCombinator", "F2F1DiffCombinator", "get_combinator",
    "CellularNoise", "CellularNoiseBuilder",
    "RandomRegistry", "random_unit_vector2", "random_unit_vector3",
    "NoiseGenerator",
]
