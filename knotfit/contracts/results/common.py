from __future__ import annotations

"""Result contracts for the fitting pipeline.

These models represent *outputs* produced by the search and selection code and
are intended to be stable for callers that serialise them.

Design goals:
- JSON-friendly field types (tuples, lists, dicts, scalars) at the contract boundary.
- Strict validation (extra fields forbidden) to prevent silent drift.
- Immutable once created.

Note: contracts should only depend on stdlib + pydantic.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class ResultModel(BaseModel):
    """Base class for result contracts (strict and frozen)."""

    model_config = ConfigDict(extra="forbid", frozen=True)


JSONDict = Dict[str, Any]
