from __future__ import annotations

"""Hinge-basis design matrices and the ordinary-least-squares solve.

For input x and ordered knots k1 < ... < kn a design row is

    [1, x, max(0, x - k1), ..., max(0, x - kn)]

so the fitted function is continuous and piecewise-linear, with slope changes
exactly at the knots.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from knotfit.contracts.results import PiecewiseModel
from knotfit.core.errors import SingularMatrixError


def build_design_matrix(
    x: Sequence[float],
    y: Optional[Sequence[float]],
    knots: Sequence[float],
) -> Tuple[np.ndarray, Optional[np.ndarray]]:
    """Return ``(X, Y)``.

    ``X`` has shape ``(n, 2 + len(knots))``; ``Y`` is the ``(n, 1)`` column
    vector of targets, or None when ``y`` is None (prediction-only use).
    """
    xa = np.asarray(x, dtype=float).reshape(-1)
    ka = np.asarray(knots, dtype=float).reshape(-1)

    X = np.empty((xa.shape[0], 2 + ka.shape[0]), dtype=float)
    X[:, 0] = 1.0
    X[:, 1] = xa
    if ka.size:
        X[:, 2:] = np.maximum(0.0, xa[:, None] - ka[None, :])

    if y is None:
        return X, None

    Y = np.asarray(y, dtype=float).reshape(-1, 1)
    if Y.shape[0] != X.shape[0]:
        raise ValueError(f"x and y length mismatch: {X.shape[0]} vs {Y.shape[0]}.")
    return X, Y


@dataclass(frozen=True)
class FitOutcome:
    """Result of a least-squares solve: coefficients on success, a reason otherwise."""

    coefficients: Optional[np.ndarray] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.coefficients is not None

    @classmethod
    def success(cls, coefficients: np.ndarray) -> "FitOutcome":
        return cls(coefficients=coefficients)

    @classmethod
    def failure(cls, reason: str) -> "FitOutcome":
        return cls(reason=reason)

    def unwrap(self) -> np.ndarray:
        if self.coefficients is None:
            raise SingularMatrixError(self.reason or "normal-equations matrix is singular")
        return self.coefficients


def fit_coefficients(X: np.ndarray, Y: np.ndarray) -> FitOutcome:
    """Solve the normal equations ``(X^T X)^-1 X^T Y``.

    A rank-deficient design (duplicate or collinear hinge columns, a knot with
    no samples above it, too few samples for the knot count) makes ``X^T X``
    non-invertible; that is reported as a failed outcome, not raised.
    """
    X = np.asarray(X, dtype=float)
    Y = np.asarray(Y, dtype=float).reshape(-1, 1)
    n_cols = X.shape[1]

    if X.shape[0] < n_cols or np.linalg.matrix_rank(X) < n_cols:
        return FitOutcome.failure(f"design matrix of shape {X.shape} is rank deficient")

    XtX = X.T @ X
    try:
        inv = np.linalg.inv(XtX)
    except np.linalg.LinAlgError as e:
        return FitOutcome.failure(f"normal-equations inverse failed: {e}")

    betas = inv @ X.T @ Y
    if not np.all(np.isfinite(betas)):
        return FitOutcome.failure("normal-equations solve produced non-finite coefficients")
    return FitOutcome.success(betas.reshape(-1))


def predict(X: np.ndarray, coefficients: Sequence[float]) -> np.ndarray:
    """``X @ coefficients`` flattened to one value per row."""
    betas = np.asarray(coefficients, dtype=float).reshape(-1, 1)
    return (np.asarray(X, dtype=float) @ betas).reshape(-1)


def evaluate_model(model: PiecewiseModel, x: Sequence[float]) -> np.ndarray:
    """Evaluate a fitted piecewise model at ``x``."""
    X, _ = build_design_matrix(x, None, model.knots)
    return predict(X, model.coefficients)
