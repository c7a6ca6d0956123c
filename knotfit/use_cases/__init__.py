from .facade import fit_piecewise_linear
from .model_selection import PiecewiseLinearRegression, select_best_knot_count

__all__ = [
    "fit_piecewise_linear",
    "PiecewiseLinearRegression",
    "select_best_knot_count",
]
