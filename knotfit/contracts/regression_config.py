from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

DEFAULT_SEED = 161


class RegressionConfig(BaseModel):
    """
    Knobs for piecewise-linear model selection.

    Field names are snake_case; the camelCase option names used by plain
    configuration objects (``numberOfPossibleKnotsValues``, ``maxKnotCount``,
    ``numFolds``, ``refinementIterations``) are accepted as aliases.
    """

    model_config = ConfigDict(extra="forbid")

    # Coarse grid resolution: number of evenly spaced candidate knot locations.
    n_candidate_knots: int = Field(
        10,
        ge=1,
        validation_alias=AliasChoices(
            "n_candidate_knots",
            "numberOfPossibleKnotsValues",
            "numberOfPossibleKnotValues",
        ),
    )
    # Knot counts 1..max_knot_count are cross-validated.
    max_knot_count: int = Field(
        5,
        ge=1,
        validation_alias=AliasChoices("max_knot_count", "maxKnotCount"),
    )
    folds: int = Field(
        5,
        ge=1,
        validation_alias=AliasChoices("folds", "numFolds", "n_folds"),
    )
    # Local-search depth; each round halves the perturbation distance.
    refinement_iterations: int = Field(
        8,
        ge=0,
        validation_alias=AliasChoices("refinement_iterations", "refinementIterations"),
    )
    seed: Optional[int] = None
