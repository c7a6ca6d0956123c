from .scoring import rmse

__all__ = ["rmse"]
