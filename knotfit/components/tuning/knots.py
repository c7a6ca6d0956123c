from __future__ import annotations

import itertools
from typing import Iterator, List, Sequence, Tuple

from knotfit.core.errors import InvalidKnotArrangementError

KnotSet = Tuple[float, ...]


def is_strictly_increasing(knots: Sequence[float]) -> bool:
    return all(cur > prev for prev, cur in zip(knots, knots[1:]))


def candidate_knots(x_min: float, x_max: float, n_candidates: int) -> List[float]:
    """Evenly spaced candidate locations covering ``[x_min, x_max)``.

    The step is ``(x_max - x_min) / n_candidates``; ``x_max`` itself is never
    a candidate.
    """
    if n_candidates < 1:
        raise ValueError(f"n_candidates must be >= 1, got {n_candidates}.")
    return [x_min + i * (x_max - x_min) / n_candidates for i in range(n_candidates)]


def initial_combinations(candidates: Sequence[float], knot_count: int) -> Iterator[KnotSet]:
    """All ``knot_count``-subsets of ``candidates`` in lexicographic order.

    Subsets that are not strictly increasing (possible only when candidates
    repeat, e.g. a zero-width x range) are dropped.
    """
    if knot_count < 0:
        raise ValueError(f"knot_count must be >= 0, got {knot_count}.")
    for combo in itertools.combinations(candidates, knot_count):
        if is_strictly_increasing(combo):
            yield combo


def refined_combinations(knots: Sequence[float], distance: float) -> Iterator[KnotSet]:
    """Perturb every knot independently to ``{k - d, k, k + d}``.

    Yields the strictly increasing members of the cartesian product, first
    knot varying slowest. The unperturbed ``knots`` are always among them.
    """
    if len(knots) < 1:
        raise InvalidKnotArrangementError("The array of knots must have a length greater than 0")

    axes = [(k - distance, k, k + distance) for k in knots]
    for combo in itertools.product(*axes):
        if is_strictly_increasing(combo):
            yield combo
