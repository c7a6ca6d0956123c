from __future__ import annotations

MODULUS = 2147483647
MULTIPLIER = 16807


class SeededPRNG:
    """
    Single source of randomness for a fitting run.

    Park-Miller "minimal standard" linear congruential generator over the
    Mersenne prime 2**31 - 1. The state always stays in the multiplicative
    group of the field, so ``next()`` never returns 0:
      next()        -> int in [1, MODULUS - 1]
      next_float()  -> float in [0, 1)
    """

    def __init__(self, seed: int):
        seed = int(seed)
        # truncated remainder: the sign follows the seed
        state = abs(seed) % MODULUS
        if seed < 0:
            state = -state
        if state <= 0:
            state += MODULUS - 1
        self._state = state

    @property
    def state(self) -> int:
        return self._state

    def next(self) -> int:
        self._state = (self._state * MULTIPLIER) % MODULUS
        return self._state

    def next_float(self) -> float:
        return (self.next() - 1) / (MODULUS - 1)

    def __repr__(self) -> str:
        return f"SeededPRNG(state={self._state})"
