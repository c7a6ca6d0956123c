from __future__ import annotations

import math
from typing import List

from knotfit.components.interfaces import RandomSource


__all__ = ["fisher_yates_permutation"]


def fisher_yates_permutation(n: int, rng: RandomSource) -> List[int]:
    """
    Return a shuffled list of the indices ``0..n-1``.

    Parameters
    ----------
    n : int
        Number of indices to permute.
    rng : RandomSource
        Random source. It is advanced by exactly ``n - 1`` draws, so callers
        sharing one instance see a continuing sequence.

    Returns
    -------
    list of int
        Backward Fisher-Yates shuffle of ``range(n)``: for ``i`` from the last
        index down to 1, ``j`` is drawn uniformly in ``[0, i]`` and positions
        ``i`` and ``j`` are swapped.

    Raises
    ------
    ValueError
        If `n` is negative.
    """
    if n < 0:
        raise ValueError(f"fisher_yates_permutation expects n >= 0, got {n}.")

    indices = list(range(n))
    for i in range(n - 1, 0, -1):
        j = int(math.floor(rng.next_float() * (i + 1)))
        indices[i], indices[j] = indices[j], indices[i]
    return indices
