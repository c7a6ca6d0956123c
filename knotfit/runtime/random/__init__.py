from .rng import MODULUS, MULTIPLIER, SeededPRNG
from .shuffle import fisher_yates_permutation

__all__ = [
    "MODULUS",
    "MULTIPLIER",
    "SeededPRNG",
    "fisher_yates_permutation",
]
