from __future__ import annotations

import math
from typing import List, Optional, Tuple

import numpy as np
import pytest
from pydantic import ValidationError

from knotfit.components.tuning.cross_validation import cross_validation
from knotfit.contracts.results import CrossValidationResult, PiecewiseModel
from knotfit.core.errors import ModelNotFitError
from knotfit.runtime.random import SeededPRNG
from knotfit.use_cases.model_selection import PiecewiseLinearRegression, select_best_knot_count

QUARTERLY_REVENUE = [
    480908734.61,
    418598119.85,
    427460738.33,
    618999891.13,
    313439976.55,
    299484629.79,
    519625618.31,
    665667339.66,
    708570866.01,
    766344390.58,
    749944347.47,
    902043201.84,
    674475488.50,
    631845186.90,
    652163993.42,
    779891715.88,
    797533136.93,
    836989815.67,
    956302630.94,
    1124572881.12,
    1010948927.96,
]


class RecordingProgress:
    def __init__(self) -> None:
        self.calls: List[Tuple[str, Optional[int]]] = []

    def init(self, *, total: int, label: Optional[str] = None) -> None:
        self.calls.append(("init", total))

    def update(self, *, current: int, label: Optional[str] = None) -> None:
        self.calls.append(("update", current))

    def finalize(self, *, label: Optional[str] = None) -> None:
        self.calls.append(("finalize", None))


def _small_params() -> dict:
    return {
        "x": [0.0, 1.0, 2.0, 3.0, 4.0],
        "y": [0.0, 1.0, 2.0, 3.0, 10.0],
        "maxKnotCount": 1,
        "numberOfPossibleKnotsValues": 4,
        "folds": 2,
    }


def test_small_dataset_bends_upward_near_the_end() -> None:
    plr = PiecewiseLinearRegression.from_params(_small_params())

    assert plr.get_best_knot_count() == 1
    assert len(plr.get_cross_validation_results()) == 1
    assert math.isfinite(plr.get_rmse())

    model = plr.get_model()
    assert len(model.knots) == 1
    assert 2.5 <= model.knots[0] < 4.0
    # hinge coefficient > 0: slope increases after the knot
    assert model.coefficients[2] > 0.0
    assert plr.predict([4.0])[0] == pytest.approx(10.0, abs=1e-6)


def test_quarterly_revenue_cross_validation_table() -> None:
    x = [2019.25 + i / 4 for i in range(len(QUARTERLY_REVENUE))]

    plr = PiecewiseLinearRegression(
        x,
        QUARTERLY_REVENUE,
        numberOfPossibleKnotsValues=14,
        maxKnotCount=5,
        numFolds=5,
        refinementIterations=8,
        seed=161,
    )

    cv_results = plr.get_cross_validation_results()
    assert [r.knot_count for r in cv_results] == [1, 2, 3, 4, 5]
    test_rmse = [r.test_rmse for r in cv_results]
    expected = [145.6e6, 134.0e6, 125.6e6, 181.5e6, 117.8e6]
    np.testing.assert_allclose(test_rmse, expected, rtol=1e-3)

    assert plr.get_best_knot_count() == 5
    assert len(plr.get_model().knots) == 5
    assert plr.get_rmse() < math.inf


def test_default_configuration() -> None:
    plr = PiecewiseLinearRegression([0.0, 1.0, 2.0, 3.0, 4.0, 5.0], [0.0, 1.0, 2.0, 2.0, 2.0, 2.0], maxKnotCount=1)
    cfg = plr.config
    assert cfg.n_candidate_knots == 10
    assert cfg.folds == 5
    assert cfg.refinement_iterations == 8
    assert cfg.max_knot_count == 1


def test_random_source_is_shared_across_knot_counts() -> None:
    x = np.linspace(0.0, 10.0, 20)
    y = np.abs(x - 4.0) + 0.1 * np.sin(3.0 * x)

    plr = PiecewiseLinearRegression(x, y, maxKnotCount=2, n_candidate_knots=5, folds=4, refinement_iterations=2, seed=12)

    rng = SeededPRNG(12)
    expected = [cross_validation(x, y, 5, k, 4, 2, rng) for k in (1, 2)]
    assert list(plr.get_cross_validation_results()) == expected


def test_same_seed_is_reproducible_and_injected_rng_wins() -> None:
    x = np.linspace(0.0, 10.0, 20)
    y = np.abs(x - 4.0) + 0.1 * np.cos(2.0 * x)
    opts = dict(maxKnotCount=2, n_candidate_knots=5, folds=4, refinement_iterations=1)

    a = PiecewiseLinearRegression(x, y, seed=99, **opts)
    b = PiecewiseLinearRegression(x, y, rng=SeededPRNG(99), **opts)

    assert a.get_cross_validation_results() == b.get_cross_validation_results()
    assert a.get_model() == b.get_model()


def test_select_best_knot_count_first_minimum_wins() -> None:
    results = [
        CrossValidationResult(knot_count=1, train_rmse=1.0, test_rmse=3.0),
        CrossValidationResult(knot_count=2, train_rmse=0.8, test_rmse=2.0),
        CrossValidationResult(knot_count=3, train_rmse=0.5, test_rmse=2.0),
    ]
    assert select_best_knot_count(results) == 2

    with pytest.raises(ValueError):
        select_best_knot_count([])


def test_plot_data_payload() -> None:
    params = _small_params()
    plr = PiecewiseLinearRegression.from_params(params)
    payload = plr.get_plot_data()

    assert set(payload) == {"original", "fitted"}
    assert payload["original"] == {"x": params["x"], "y": params["y"]}

    knots = list(plr.get_model().knots)
    assert payload["fitted"]["x"] == [0.0, *knots, 4.0]
    np.testing.assert_allclose(payload["fitted"]["y"], plr.predict(payload["fitted"]["x"]))


def test_diagnostic_table_covers_full_dataset() -> None:
    plr = PiecewiseLinearRegression.from_params(_small_params())
    table = plr.get_diagnostic_table()
    assert [row[0] for row in table] == [0.0, 1.0, 2.0, 3.0, 4.0]
    assert [row[1] for row in table] == [0.0, 1.0, 2.0, 3.0, 10.0]


def test_progress_callback_is_driven() -> None:
    progress = RecordingProgress()
    PiecewiseLinearRegression.from_params({**_small_params(), "maxKnotCount": 1}, progress=progress)

    assert progress.calls == [("init", 2), ("update", 1), ("update", 2), ("finalize", None)]


def test_accessors_require_a_fitted_model() -> None:
    plr = PiecewiseLinearRegression.__new__(PiecewiseLinearRegression)
    plr._search = None
    plr._best_knot_count = None
    plr._cv_results = []

    assert plr.get_cross_validation_results() == ()
    for accessor in (plr.get_model, plr.get_rmse, plr.get_plot_data, plr.get_best_knot_count, plr.summary):
        with pytest.raises(ModelNotFitError):
            accessor()


def test_summary_is_a_frozen_contract() -> None:
    summary = PiecewiseLinearRegression.from_params(_small_params()).summary()

    assert summary.best_knot_count == 1
    assert isinstance(summary.model, PiecewiseModel)
    with pytest.raises(ValidationError):
        summary.rmse = 0.0


def test_unknown_options_are_rejected() -> None:
    with pytest.raises(ValidationError):
        PiecewiseLinearRegression.from_params({**_small_params(), "knots": 3})


def test_params_require_samples() -> None:
    with pytest.raises(ValueError):
        PiecewiseLinearRegression.from_params({"y": [1.0, 2.0]})


def test_mismatched_samples_are_rejected() -> None:
    with pytest.raises(ValueError):
        PiecewiseLinearRegression([0.0, 1.0, 2.0], [0.0, 1.0])
