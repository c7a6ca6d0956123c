from __future__ import annotations

from typing import Any

import numpy as np
from sklearn.metrics import mean_squared_error

from knotfit.core.shapes import coerce_1d


def _check_len(y_true: np.ndarray, y_pred: np.ndarray) -> None:
    if y_true.shape[0] != y_pred.shape[0]:
        raise ValueError(
            f"Length mismatch: y_true({y_true.shape[0]}) vs y_pred({y_pred.shape[0]})."
        )


def rmse(y_true: Any, y_pred: Any) -> float:
    """Root-mean-squared error between actual and predicted values."""
    y_true = coerce_1d(y_true, name="y_true")
    y_pred = coerce_1d(y_pred, name="y_pred")
    _check_len(y_true, y_pred)
    if y_true.shape[0] == 0:
        raise ValueError("RMSE is undefined for an empty sample set.")
    return float(np.sqrt(mean_squared_error(y_true, y_pred)))
