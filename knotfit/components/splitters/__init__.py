from .types import Split

__all__ = ["Split"]
