"""Dependency helpers for use-cases.

Use-cases avoid ambient randomness and accept their dependencies (random
source, seed) explicitly.

This module keeps *small* helpers only.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from knotfit.components.interfaces import RandomSource
from knotfit.contracts.regression_config import DEFAULT_SEED, RegressionConfig
from knotfit.runtime.random.rng import SeededPRNG


def resolve_seed(seed: Optional[int], *, fallback: int = DEFAULT_SEED) -> int:
    """Return a deterministic seed.

    The config seed is optional; when absent we still want repeatable
    behavior, hence a stable fallback.
    """

    return int(seed) if seed is not None else int(fallback)


def resolve_config(
    config: Union[None, RegressionConfig, Mapping[str, Any]],
    **overrides: Any,
) -> RegressionConfig:
    """Validate ``config`` (model, mapping or None) and apply keyword overrides.

    Overrides use the same names or aliases as the config itself.
    """

    if isinstance(config, RegressionConfig):
        payload = config.model_dump()
    else:
        payload = dict(config or {})
    payload.update({k: v for k, v in overrides.items() if v is not None})
    return RegressionConfig.model_validate(payload)


def resolve_rng(rng: Optional[RandomSource], cfg: RegressionConfig) -> RandomSource:
    """Return ``rng`` if provided, otherwise a fresh generator seeded from ``cfg``."""

    return rng if rng is not None else SeededPRNG(resolve_seed(cfg.seed))
