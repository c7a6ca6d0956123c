from __future__ import annotations

import numpy as np
import pytest

from knotfit.components.evaluation.scoring import rmse
from knotfit.components.models.design import build_design_matrix, predict
from knotfit.components.tuning.grid_search import find_optimal_combination, grid_search
from knotfit.core.errors import InvalidKnotArrangementError, NoFeasibleFitError


def _hinge_data() -> tuple[np.ndarray, np.ndarray]:
    x = np.arange(0.0, 11.0)
    y = x + 2.0 * np.maximum(0.0, x - 5.0)
    return x, y


def _noisy_two_knot_data() -> tuple[np.ndarray, np.ndarray]:
    rng = np.random.default_rng(123)
    x = np.sort(rng.uniform(0.0, 20.0, 60))
    y = (
        3.0
        - 0.5 * x
        + 1.5 * np.maximum(0.0, x - 6.0)
        - 2.0 * np.maximum(0.0, x - 14.0)
        + rng.normal(0.0, 0.3, x.size)
    )
    return x, y


def test_recovers_exact_knot() -> None:
    x, y = _hinge_data()

    result = grid_search(x, y, 10, 1, 4)

    assert result.model.knots == pytest.approx((5.0,), abs=1e-9)
    assert result.model.coefficients == pytest.approx((0.0, 1.0, 2.0), abs=1e-8)
    assert result.rmse < 1e-8


def test_refinement_never_increases_rmse() -> None:
    x, y = _noisy_two_knot_data()

    scores = [grid_search(x, y, 8, 2, r).rmse for r in range(6)]

    for prev, cur in zip(scores, scores[1:]):
        assert cur <= prev + 1e-12


def test_refinement_moves_knots_off_the_coarse_grid() -> None:
    x, y = _noisy_two_knot_data()
    coarse = grid_search(x, y, 8, 2, 0)
    refined = grid_search(x, y, 8, 2, 8)

    assert refined.rmse < coarse.rmse
    assert refined.model.knots[0] == pytest.approx(6.0, abs=1.0)
    assert refined.model.knots[1] == pytest.approx(14.0, abs=1.0)


def test_reported_rmse_round_trips_through_design_matrix() -> None:
    x, y = _noisy_two_knot_data()
    result = grid_search(x, y, 8, 2, 5)

    X, _ = build_design_matrix(x, y, result.model.knots)
    y_pred = predict(X, result.model.coefficients)

    assert rmse(y, y_pred) == pytest.approx(result.rmse, rel=1e-12)


def test_diagnostic_table_pairs_training_rows() -> None:
    x, y = _hinge_data()
    result = grid_search(x, y, 10, 1, 0)

    assert len(result.table) == x.size
    for (tx, ty, tp), xi, yi in zip(result.table, x, y):
        assert tx == xi
        assert ty == yi
        assert tp == pytest.approx(yi, abs=1e-8)


def test_zero_knots_reduce_to_linear_regression() -> None:
    x = [1.0, 2.0, 3.0, 4.0, 5.0]
    y = [2.0, 4.0, 5.0, 4.0, 5.0]

    result = grid_search(x, y, 5, 0, 0)

    assert result.model.knots == ()
    assert result.model.coefficients == pytest.approx((2.2, 0.6))


def test_refining_zero_knots_is_rejected() -> None:
    with pytest.raises(InvalidKnotArrangementError):
        grid_search([1.0, 2.0, 3.0], [1.0, 2.0, 2.5], 3, 0, 1)


def test_no_feasible_fit_propagates() -> None:
    with pytest.raises(NoFeasibleFitError):
        grid_search([1.0, 1.0, 1.0], [1.0, 2.0, 3.0], 4, 1, 0)


def test_find_optimal_combination_skips_singular_candidates() -> None:
    x, y = _hinge_data()

    # 0.0 and 10.0 are singular for this data, 5.0 is exact
    result = find_optimal_combination(x, y, [(0.0,), (5.0,), (10.0,)])

    assert result.model.knots == (5.0,)


def test_find_optimal_combination_all_singular() -> None:
    x, y = _hinge_data()
    with pytest.raises(NoFeasibleFitError):
        find_optimal_combination(x, y, [(0.0,), (10.0,)])
