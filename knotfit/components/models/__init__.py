from .design import (
    FitOutcome,
    build_design_matrix,
    evaluate_model,
    fit_coefficients,
    predict,
)

__all__ = [
    "FitOutcome",
    "build_design_matrix",
    "fit_coefficients",
    "predict",
    "evaluate_model",
]
