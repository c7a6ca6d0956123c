"""Public façade entry points.

This module is the sanctioned invocation surface for fitting. Scripts and
callers should go through :mod:`knotfit.api`, which re-exports it.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence, Union

from knotfit.contracts.regression_config import RegressionConfig
from knotfit.contracts.results import PiecewiseFitResult
from knotfit.core.progress import ProgressCallback

from ._deps import resolve_config


def _with_overridden_seed(cfg: RegressionConfig, seed: Optional[int]) -> RegressionConfig:
    """Override ``cfg.seed`` without mutating the input config."""

    if seed is None:
        return cfg
    return cfg.model_copy(update={"seed": int(seed)})


def fit_piecewise_linear(
    x: Sequence[float],
    y: Sequence[float],
    config: Union[None, RegressionConfig, Mapping[str, Any]] = None,
    *,
    seed: Optional[int] = None,
    progress: Optional[ProgressCallback] = None,
) -> PiecewiseFitResult:
    """Select the knot count, fit the final model and return a typed summary.

    Parameters
    ----------
    x, y:
        Sample set (equal length, at least one sample).
    config:
        :class:`RegressionConfig` or a mapping of its options
        (camelCase aliases accepted).
    seed:
        Optional seed override for fold shuffling.
    progress:
        Optional :class:`ProgressCallback`.
    """

    from knotfit.use_cases.model_selection import PiecewiseLinearRegression

    cfg = _with_overridden_seed(resolve_config(config), seed)
    return PiecewiseLinearRegression(x, y, cfg, progress=progress).summary()
