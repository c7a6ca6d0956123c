from __future__ import annotations

"""Knot-count selection by cross-validation, then a full-data refit."""

import logging
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from knotfit.components.interfaces import RandomSource
from knotfit.components.models.design import evaluate_model
from knotfit.components.tuning.cross_validation import cross_validation
from knotfit.components.tuning.grid_search import grid_search
from knotfit.contracts.regression_config import RegressionConfig
from knotfit.contracts.results import (
    CrossValidationResult,
    JSONDict,
    KnotSearchResult,
    PiecewiseFitResult,
    PiecewiseModel,
    TableRow,
)
from knotfit.core.errors import ModelNotFitError
from knotfit.core.progress import ProgressCallback
from knotfit.core.shapes import ensure_sample_set
from knotfit.reporting.plot_payload import build_plot_data

from ._deps import resolve_config, resolve_rng

logger = logging.getLogger(__name__)


def select_best_knot_count(cv_results: Sequence[CrossValidationResult]) -> int:
    """Knot count with the lowest test RMSE; the first one wins on ties."""
    if not cv_results:
        raise ValueError("No cross-validation results to select from.")
    best = cv_results[0]
    for result in cv_results[1:]:
        if result.test_rmse < best.test_rmse:
            best = result
    return best.knot_count


class PiecewiseLinearRegression:
    """Continuous piecewise-linear regression with data-driven knots.

    Construction does all the work: for every knot count in
    ``1..max_knot_count`` a cross-validation run estimates the test RMSE,
    sharing one random source so later knot counts continue its sequence.
    The knot count with the lowest test RMSE is then refit on the whole data.

    Parameters
    ----------
    x, y : array-like of shape (n,)
        Sample set.
    config : RegressionConfig | mapping | None
        Model-selection knobs; camelCase option names are accepted.
    rng : RandomSource, optional
        Random source for fold shuffling. Defaults to ``SeededPRNG`` seeded
        from ``config.seed`` (161 when unset).
    progress : ProgressCallback, optional
        Receives one update per knot count plus one for the final fit.
    **options
        Overrides applied on top of ``config``.
    """

    def __init__(
        self,
        x: Sequence[float],
        y: Sequence[float],
        config: Union[None, RegressionConfig, Mapping[str, Any]] = None,
        *,
        rng: Optional[RandomSource] = None,
        progress: Optional[ProgressCallback] = None,
        **options: Any,
    ):
        self._x, self._y = ensure_sample_set(x, y)
        self.config = resolve_config(config, **options)
        self._rng = resolve_rng(rng, self.config)
        self._cv_results: List[CrossValidationResult] = []
        self._best_knot_count: Optional[int] = None
        self._search: Optional[KnotSearchResult] = None

        self._fit(progress)

    @classmethod
    def from_params(cls, params: Mapping[str, Any], **kwargs: Any) -> "PiecewiseLinearRegression":
        """Build from a single mapping holding ``x``, ``y`` and the options."""
        options = dict(params)
        try:
            x = options.pop("x")
            y = options.pop("y")
        except KeyError as e:
            raise ValueError(f"params must contain 'x' and 'y'; missing {e}") from e
        return cls(x, y, options, **kwargs)

    def _fit(self, progress: Optional[ProgressCallback]) -> None:
        cfg = self.config
        total = cfg.max_knot_count + 1
        if progress is not None:
            progress.init(total=total, label="cross-validating knot counts")

        # Learn the best knot count
        for knot_count in range(1, cfg.max_knot_count + 1):
            result = cross_validation(
                self._x,
                self._y,
                cfg.n_candidate_knots,
                knot_count,
                cfg.folds,
                cfg.refinement_iterations,
                self._rng,
            )
            self._cv_results.append(result)
            logger.debug(
                "knot_count=%d: train_rmse=%.6g test_rmse=%.6g",
                knot_count,
                result.train_rmse,
                result.test_rmse,
            )
            if progress is not None:
                progress.update(current=knot_count, label=f"knot count {knot_count}")

        self._best_knot_count = select_best_knot_count(self._cv_results)
        logger.debug("selected knot count %d", self._best_knot_count)

        # Fit the model with the best knot count
        self._search = grid_search(
            self._x,
            self._y,
            cfg.n_candidate_knots,
            self._best_knot_count,
            cfg.refinement_iterations,
        )
        if progress is not None:
            progress.update(current=total, label="final fit")
            progress.finalize(label="done")

    def _require_fit(self) -> KnotSearchResult:
        if self._search is None:
            raise ModelNotFitError("Model not fitted yet")
        return self._search

    def get_cross_validation_results(self) -> Tuple[CrossValidationResult, ...]:
        return tuple(self._cv_results)

    def get_best_knot_count(self) -> int:
        if self._best_knot_count is None:
            raise ModelNotFitError("Model not fitted yet")
        return self._best_knot_count

    def get_model(self) -> PiecewiseModel:
        return self._require_fit().model

    def get_rmse(self) -> float:
        return self._require_fit().rmse

    def get_diagnostic_table(self) -> Tuple[TableRow, ...]:
        return self._require_fit().table

    def get_plot_data(self) -> JSONDict:
        """``{"original": {"x", "y"}, "fitted": {"x", "y"}}`` for plotting."""
        search = self._require_fit()
        return build_plot_data(self._x, self._y, search.model).model_dump(mode="json")

    def predict(self, x: Sequence[float]) -> np.ndarray:
        return evaluate_model(self.get_model(), np.asarray(x, dtype=float).reshape(-1))

    def summary(self) -> PiecewiseFitResult:
        search = self._require_fit()
        return PiecewiseFitResult(
            cv_results=list(self._cv_results),
            best_knot_count=self.get_best_knot_count(),
            model=search.model,
            rmse=search.rmse,
            table=list(search.table),
            plot=build_plot_data(self._x, self._y, search.model),
        )
