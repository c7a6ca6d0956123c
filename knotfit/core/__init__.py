from .errors import (
    InvalidKnotArrangementError,
    KnotFitError,
    ModelNotFitError,
    NoFeasibleFitError,
    SingularMatrixError,
)

__all__ = [
    "KnotFitError",
    "SingularMatrixError",
    "NoFeasibleFitError",
    "InvalidKnotArrangementError",
    "ModelNotFitError",
]
