"""Shared schema contracts.

This package contains the Pydantic models used to validate configuration and
to describe fitting results.

Export policy:
- Keep module imports explicit in most of the codebase:
    from knotfit.contracts.regression_config import RegressionConfig
- The names re-exported here are a small set of convenience imports for
  callers that prefer a single namespace.
"""

from .regression_config import DEFAULT_SEED, RegressionConfig
from .results import (
    CrossValidationResult,
    KnotSearchResult,
    PiecewiseFitResult,
    PiecewiseModel,
    PlotData,
    XYSeries,
)

__all__ = [
    # configs
    "DEFAULT_SEED",
    "RegressionConfig",
    # results
    "PiecewiseModel",
    "KnotSearchResult",
    "CrossValidationResult",
    "XYSeries",
    "PlotData",
    "PiecewiseFitResult",
]
