from __future__ import annotations

import math
from typing import List, Tuple

from pydantic import Field, model_validator

from .common import ResultModel

TableRow = Tuple[float, float, float]


class PiecewiseModel(ResultModel):
    """Ordered knot set plus the basis coefficients fitted for it.

    ``coefficients`` follow the design-matrix column order:
    intercept, slope, then one hinge coefficient per knot.
    """

    knots: Tuple[float, ...] = ()
    coefficients: Tuple[float, ...]

    @model_validator(mode="after")
    def _check_shape(self) -> "PiecewiseModel":
        if len(self.coefficients) != len(self.knots) + 2:
            raise ValueError(
                f"Expected {len(self.knots) + 2} coefficients for {len(self.knots)} knots, "
                f"got {len(self.coefficients)}."
            )
        for prev, cur in zip(self.knots, self.knots[1:]):
            if not cur > prev:
                raise ValueError(f"Knots must be strictly increasing; got {list(self.knots)}.")
        return self


class KnotSearchResult(ResultModel):
    """Outcome of one grid search.

    ``table`` pairs every training x with its actual and predicted y,
    i.e. rows of ``(x, y, y_pred)``.
    """

    model: PiecewiseModel
    rmse: float
    table: Tuple[TableRow, ...] = ()


class CrossValidationResult(ResultModel):
    knot_count: int
    train_rmse: float
    test_rmse: float


class XYSeries(ResultModel):
    x: List[float] = Field(default_factory=list)
    y: List[float] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_len(self) -> "XYSeries":
        if len(self.x) != len(self.y):
            raise ValueError(f"x and y length mismatch: {len(self.x)} vs {len(self.y)}.")
        return self


class PlotData(ResultModel):
    """Payload for presentation layers: raw points and the fitted polyline."""

    original: XYSeries
    fitted: XYSeries


class PiecewiseFitResult(ResultModel):
    cv_results: List[CrossValidationResult] = Field(default_factory=list)
    best_knot_count: int
    model: PiecewiseModel
    rmse: float
    table: List[TableRow] = Field(default_factory=list)
    plot: PlotData

    @model_validator(mode="after")
    def _check_rmse(self) -> "PiecewiseFitResult":
        if not math.isfinite(self.rmse):
            raise ValueError(f"Final RMSE must be finite; got {self.rmse}.")
        return self
