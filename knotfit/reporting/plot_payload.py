from __future__ import annotations

from typing import List, Sequence

import numpy as np

from knotfit.components.models.design import evaluate_model
from knotfit.contracts.results import PiecewiseModel, PlotData, XYSeries

from .json_safety import safe_float_list


def fitted_polyline_x(x: Sequence[float], model: PiecewiseModel) -> List[float]:
    """``[min(x), knot_1, ..., knot_n, max(x)]``, the vertices of the fitted curve."""
    xa = np.asarray(x, dtype=float)
    return [float(np.min(xa)), *[float(k) for k in model.knots], float(np.max(xa))]


def build_plot_data(x: Sequence[float], y: Sequence[float], model: PiecewiseModel) -> PlotData:
    """Pair the original points with the fitted piecewise curve.

    The curve is linear between consecutive vertices, so evaluating the model at
    the data extent and at every knot describes it exactly. Values that
    overflow during evaluation are made JSON-safe.
    """
    fx = fitted_polyline_x(x, model)
    fy = evaluate_model(model, fx)
    return PlotData(
        original=XYSeries(x=safe_float_list(x), y=safe_float_list(y)),
        fitted=XYSeries(x=safe_float_list(fx), y=safe_float_list(fy)),
    )
