from __future__ import annotations
from typing import Protocol, Iterator

import numpy as np

from knotfit.components.splitters.types import Split


class RandomSource(Protocol):
    def next(self) -> int:
        """Advance the generator and return its new integer state."""
        ...

    def next_float(self) -> float:
        """Return the next value in [0, 1)."""
        ...


class Splitter(Protocol):
    def split(
        self,
        x: np.ndarray,
        y: np.ndarray,
    ) -> Iterator[Split]:
        """Yield a sequence of train/test splits.

        Implementations must yield :class:`knotfit.components.splitters.types.Split`.
        """
        ...

