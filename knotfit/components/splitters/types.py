from __future__ import annotations

"""Splitter return contracts.

Splitters yield a *single, stable* fold payload shape. This avoids tuple-shape
guessing in the cross-validation loop and keeps typing and testing simple.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Split:
    """A single train/test split (fold) of a one-dimensional sample set.

    Notes
    -----
    - `idx_tr` / `idx_te` are row indices into the *original* x/y, sorted
      ascending.
    """

    xtr: np.ndarray
    xte: np.ndarray
    ytr: np.ndarray
    yte: np.ndarray
    idx_tr: np.ndarray
    idx_te: np.ndarray
