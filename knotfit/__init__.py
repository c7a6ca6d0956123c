"""Continuous piecewise-linear regression with cross-validated knot selection."""

__version__ = "0.1.0"
