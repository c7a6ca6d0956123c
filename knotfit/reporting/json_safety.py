from __future__ import annotations

"""JSON-safety helpers.

Payload builders use these so response objects contain only finite,
JSON-serializable numbers.

Policy
------
* NaN      -> 0.0
* +inf     -> 1.0
* -inf     -> 0.0
"""

from typing import Any, List

import numpy as np


def safe_float_list(arr: Any) -> List[float]:
    """Convert array-like to a flat JSON-safe list of finite floats."""

    a = np.asarray(arr, dtype=float).reshape(-1)
    a = np.nan_to_num(a, nan=0.0, posinf=1.0, neginf=0.0)
    return a.tolist()

