from .cross_validation import cross_validation
from .grid_search import find_optimal_combination, grid_search
from .knots import candidate_knots, initial_combinations, refined_combinations

__all__ = [
    "candidate_knots",
    "initial_combinations",
    "refined_combinations",
    "find_optimal_combination",
    "grid_search",
    "cross_validation",
]
