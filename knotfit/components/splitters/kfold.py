from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Sequence

import numpy as np

from knotfit.components.interfaces import RandomSource, Splitter
from knotfit.components.splitters.types import Split
from knotfit.core.shapes import ensure_sample_set
from knotfit.runtime.random.shuffle import fisher_yates_permutation

logger = logging.getLogger(__name__)


def partition_indices(permutation: Sequence[int], folds: int) -> List[tuple[np.ndarray, np.ndarray]]:
    """Slice a permutation into ``folds`` contiguous test blocks.

    Each block holds ``len(permutation) // folds`` indices. The train side of a
    round is every index outside its block, so trailing remainder indices are
    always trained on and never tested. With ``folds == 1`` there is nothing to
    hold out and train and test are both the full index set.

    Returns a list of ``(idx_tr, idx_te)`` pairs, each sorted ascending.
    """
    n = len(permutation)
    if folds < 1:
        raise ValueError(f"folds must be >= 1, got {folds}.")
    if folds > n:
        raise ValueError(f"folds ({folds}) cannot exceed the number of samples ({n}).")

    perm = np.asarray(permutation, dtype=int)
    if folds == 1:
        everything = np.sort(perm)
        return [(everything, everything.copy())]

    fold_size = n // folds
    if n % folds:
        logger.debug("%d remainder sample(s) are never held out with %d folds", n % folds, folds)

    rounds: List[tuple[np.ndarray, np.ndarray]] = []
    for i in range(folds):
        idx_te = np.sort(perm[i * fold_size:(i + 1) * fold_size])
        idx_tr = np.sort(np.setdiff1d(perm, idx_te, assume_unique=True))
        rounds.append((idx_tr, idx_te))
    return rounds


@dataclass
class KFoldPartitioner(Splitter):
    """Seeded k-fold splitter driven by a :class:`RandomSource`.

    Every call to :meth:`split` draws a fresh permutation, advancing ``rng``.
    """

    folds: int
    rng: RandomSource

    def split(self, x: np.ndarray, y: np.ndarray) -> Iterator[Split]:
        x, y = ensure_sample_set(x, y)
        permutation = fisher_yates_permutation(x.shape[0], self.rng)

        for idx_tr, idx_te in partition_indices(permutation, self.folds):
            yield Split(
                xtr=x[idx_tr],
                xte=x[idx_te],
                ytr=y[idx_tr],
                yte=y[idx_te],
                idx_tr=idx_tr,
                idx_te=idx_te,
            )
