"""Fitting exceptions.

These are intentionally lightweight so they can be raised from compute paths
without importing contracts or reporting modules.
"""


class KnotFitError(RuntimeError):
    """Base class for piecewise-linear fitting failures."""


class SingularMatrixError(KnotFitError):
    """Raised when the normal-equations matrix cannot be inverted."""


class NoFeasibleFitError(KnotFitError):
    """Raised when every knot combination considered in a search is singular."""


class InvalidKnotArrangementError(KnotFitError):
    """Raised when refinement is requested for an empty knot set."""


class ModelNotFitError(KnotFitError):
    """Raised when a fitted-model accessor is used before a model exists."""
