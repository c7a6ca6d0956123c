from __future__ import annotations

import logging
from typing import Sequence

from knotfit.components.evaluation.scoring import rmse
from knotfit.components.interfaces import RandomSource
from knotfit.components.models.design import evaluate_model
from knotfit.components.splitters.kfold import KFoldPartitioner
from knotfit.components.tuning.grid_search import grid_search
from knotfit.contracts.results import CrossValidationResult
from knotfit.core.shapes import ensure_sample_set

logger = logging.getLogger(__name__)


def cross_validation(
    x: Sequence[float],
    y: Sequence[float],
    n_candidate_knots: int,
    knot_count: int,
    folds: int,
    refinement_iterations: int,
    rng: RandomSource,
) -> CrossValidationResult:
    """K-fold estimate of train/test RMSE for one knot count.

    The fold permutation is drawn from ``rng``, which is advanced in place.
    Each round runs :func:`grid_search` on the train side and scores the
    resulting model on the held-out block; both RMSEs are averaged over
    ``folds``. With ``folds=1`` train and test are the same full sample set.
    """
    x, y = ensure_sample_set(x, y)
    splitter = KFoldPartitioner(folds=folds, rng=rng)

    total_train_rmse = 0.0
    total_test_rmse = 0.0

    for fold_id, split in enumerate(splitter.split(x, y), start=1):
        search = grid_search(
            split.xtr,
            split.ytr,
            n_candidate_knots,
            knot_count,
            refinement_iterations,
        )
        total_train_rmse += search.rmse

        test_rmse = rmse(split.yte, evaluate_model(search.model, split.xte))
        total_test_rmse += test_rmse

        logger.debug(
            "knot_count=%d fold %d/%d: train_rmse=%.6g test_rmse=%.6g",
            knot_count,
            fold_id,
            folds,
            search.rmse,
            test_rmse,
        )

    return CrossValidationResult(
        knot_count=knot_count,
        train_rmse=total_train_rmse / folds,
        test_rmse=total_test_rmse / folds,
    )
