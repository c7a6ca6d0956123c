from __future__ import annotations

"""Coarse-to-fine grid search over knot placement.

Phase 1 scores every strictly increasing subset of evenly spaced candidate
knots. Phase 2 repeatedly perturbs each knot of the current best set by
``-d, 0, +d`` and halves ``d`` after every round, a derivative-free local
search around the coarse solution.

Infeasible (singular) knot combinations are skipped. The first combination
reaching the minimum RMSE wins, so results depend only on enumeration order.
"""

import logging
import math
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from knotfit.components.evaluation.scoring import rmse
from knotfit.components.models.design import build_design_matrix, fit_coefficients, predict
from knotfit.components.tuning.knots import (
    KnotSet,
    candidate_knots,
    initial_combinations,
    refined_combinations,
)
from knotfit.contracts.results import KnotSearchResult, PiecewiseModel
from knotfit.core.errors import NoFeasibleFitError
from knotfit.core.shapes import ensure_sample_set

logger = logging.getLogger(__name__)


def find_optimal_combination(
    x: np.ndarray,
    y: np.ndarray,
    knot_combinations: Iterable[Sequence[float]],
) -> KnotSearchResult:
    """Fit every combination and keep the first one with the lowest RMSE."""
    best_rmse = math.inf
    best: Optional[Tuple[KnotSet, np.ndarray, np.ndarray]] = None
    n_tried = 0
    n_skipped = 0

    for knots in knot_combinations:
        n_tried += 1
        X, Y = build_design_matrix(x, y, knots)
        outcome = fit_coefficients(X, Y)
        if not outcome.ok:
            n_skipped += 1
            continue

        y_pred = predict(X, outcome.coefficients)
        score = rmse(y, y_pred)
        if score < best_rmse:
            best_rmse = score
            best = (tuple(float(k) for k in knots), outcome.coefficients, y_pred)

    if best is None:
        raise NoFeasibleFitError(
            f"No best fit found: all {n_tried} knot combination(s) were infeasible."
        )

    if n_skipped:
        logger.debug("skipped %d/%d singular knot combination(s)", n_skipped, n_tried)

    knots, coefficients, y_pred = best
    table = tuple(
        (float(xi), float(yi), float(pi)) for xi, yi, pi in zip(x, y, y_pred)
    )
    return KnotSearchResult(
        model=PiecewiseModel(
            knots=knots,
            coefficients=tuple(float(b) for b in coefficients),
        ),
        rmse=best_rmse,
        table=table,
    )


def grid_search(
    x: Sequence[float],
    y: Sequence[float],
    n_candidate_knots: int,
    knot_count: int,
    refinement_iterations: int,
) -> KnotSearchResult:
    """Search knot positions minimising training RMSE for a fixed knot count.

    Parameters
    ----------
    x, y : array-like of shape (n,)
        Training sample set.
    n_candidate_knots : int
        Number of evenly spaced candidate knots in ``[min(x), max(x))``.
    knot_count : int
        Number of knots to place. 0 reduces to ordinary linear regression
        (only valid with ``refinement_iterations=0``).
    refinement_iterations : int
        Local refinement rounds; the first uses distance
        ``(max(x) - min(x)) / (2 * n_candidate_knots)``.

    Raises
    ------
    NoFeasibleFitError
        If every combination of a phase is singular.
    InvalidKnotArrangementError
        If refinement is requested with ``knot_count=0``.
    """
    x, y = ensure_sample_set(x, y)
    if refinement_iterations < 0:
        raise ValueError(f"refinement_iterations must be >= 0, got {refinement_iterations}.")

    x_min = float(np.min(x))
    x_max = float(np.max(x))

    # exhaustive rough cut of the search space
    candidates = candidate_knots(x_min, x_max, n_candidate_knots)
    result = find_optimal_combination(x, y, initial_combinations(candidates, knot_count))
    logger.debug("coarse phase: knots=%s rmse=%.6g", list(result.model.knots), result.rmse)

    # refine the search space around the best combination
    distance = (x_max - x_min) / (2 * n_candidate_knots)
    for i in range(refinement_iterations):
        result = find_optimal_combination(
            x, y, refined_combinations(result.model.knots, distance)
        )
        logger.debug(
            "refinement %d (distance=%.6g): knots=%s rmse=%.6g",
            i + 1,
            distance,
            list(result.model.knots),
            result.rmse,
        )
        distance /= 2

    return result
