"""Public knotfit API.

This module is the **stable public surface** for fitting piecewise-linear
models. Prefer importing from here instead of reaching into internal
subpackages:

    from knotfit.api import PiecewiseLinearRegression, fit_piecewise_linear

The underlying implementations live under :mod:`knotfit.use_cases` and
:mod:`knotfit.components`.
"""

from __future__ import annotations

from knotfit.use_cases.facade import fit_piecewise_linear
from knotfit.use_cases.model_selection import PiecewiseLinearRegression

# Lower-level building blocks that are still part of the stable public surface.
from knotfit.components.models.design import build_design_matrix, fit_coefficients, predict
from knotfit.components.tuning.cross_validation import cross_validation
from knotfit.components.tuning.grid_search import grid_search
from knotfit.contracts.regression_config import RegressionConfig
from knotfit.core.progress import ProgressCallback
from knotfit.runtime.random.rng import SeededPRNG

__all__ = [
    "fit_piecewise_linear",
    "PiecewiseLinearRegression",
    "RegressionConfig",
    "SeededPRNG",
    "build_design_matrix",
    "fit_coefficients",
    "predict",
    "grid_search",
    "cross_validation",
    "ProgressCallback",
]
