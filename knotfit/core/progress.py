from __future__ import annotations

"""Progress reporting primitives for model selection.

Model selection runs one cross-validation per candidate knot count and then a
final full-data fit; with many candidate knots the coarse phase becomes
combinatorially expensive. Callers may pass a progress callback to follow the
run. The library never requires one.
"""

from typing import Protocol, Optional


class ProgressCallback(Protocol):
    """A minimal progress reporting interface."""

    def init(self, *, total: int, label: Optional[str] = None) -> None:  # pragma: no cover
        ...

    def update(self, *, current: int, label: Optional[str] = None) -> None:  # pragma: no cover
        ...

    def finalize(self, *, label: Optional[str] = None) -> None:  # pragma: no cover
        ...
