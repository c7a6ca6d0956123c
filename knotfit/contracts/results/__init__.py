from .common import JSONDict, ResultModel
from .regression import (
    CrossValidationResult,
    KnotSearchResult,
    PiecewiseFitResult,
    PiecewiseModel,
    PlotData,
    TableRow,
    XYSeries,
)

__all__ = [
    "ResultModel",
    "JSONDict",
    "TableRow",
    "PiecewiseModel",
    "KnotSearchResult",
    "CrossValidationResult",
    "XYSeries",
    "PlotData",
    "PiecewiseFitResult",
]
