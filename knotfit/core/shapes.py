from __future__ import annotations

"""Public shape utilities for sample sets.

Conventions
-----------
- x is 1D: (n_samples,), the single continuous predictor
- y is 1D: (n_samples,), paired with x by index
"""

from typing import Any, Tuple

import numpy as np


def coerce_1d(a: Any, *, name: str = "array") -> np.ndarray:
    """Return ``a`` as a 1D float array.

    Column vectors (n, 1) and row vectors (1, n) are flattened; anything with
    more than one non-trivial axis is rejected.
    """
    arr = np.asarray(a, dtype=float)
    if arr.ndim == 0:
        raise ValueError(f"{name} must be 1D; got a scalar.")
    if arr.ndim > 1:
        if sum(dim > 1 for dim in arr.shape) > 1:
            raise ValueError(f"{name} must be 1D; got {arr.shape}")
        arr = arr.reshape(-1)
    return arr


def ensure_sample_set(x: Any, y: Any) -> Tuple[np.ndarray, np.ndarray]:
    """Strict sample-set check: no truncation, no reordering.

    - x and y must be 1D and of equal length
    - at least one sample
    - all values finite
    """
    x = coerce_1d(x, name="x")
    y = coerce_1d(y, name="y")

    if x.shape[0] != y.shape[0]:
        raise ValueError(f"x and y length mismatch: {x.shape[0]} vs {y.shape[0]}.")
    if x.shape[0] < 1:
        raise ValueError("A sample set needs at least 1 sample.")
    if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y))):
        raise ValueError("x and y must contain only finite values.")

    return x, y
