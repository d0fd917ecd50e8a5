"""Seeded Park-Miller random stream.

The scalar ``next()`` interface is what every shaping stage uses. The noise
lattice needs thousands of draws per octave, so the stream also exposes
jump-ahead access: the k-th value of a multiplicative LCG is
``state * A**k mod M``, which numpy evaluates for whole index arrays at once.
"""

import numpy as np
from numpy.typing import NDArray

MODULUS = 2147483647  # 2**31 - 1
MULTIPLIER = 16807


def _pow_mod(exponents: NDArray[np.int64]) -> NDArray[np.int64]:
    """Compute MULTIPLIER**e mod MODULUS elementwise.

    Products of two residues stay below 2**62, so int64 never overflows.
    """
    result = np.ones_like(exponents, dtype=np.int64)
    base = np.full_like(exponents, MULTIPLIER, dtype=np.int64)
    remaining = exponents.astype(np.int64).copy()

    while np.any(remaining > 0):
        odd = (remaining & 1) == 1
        result = np.where(odd, (result * base) % MODULUS, result)
        base = (base * base) % MODULUS
        remaining >>= 1

    return result


class Rng:
    """Deterministic pseudorandom stream of floats in [0, 1)."""

    def __init__(self, seed: int):
        state = ((seed % MODULUS) + MODULUS) % MODULUS
        self._state = state or 1

    @property
    def state(self) -> int:
        return self._state

    def next(self) -> float:
        """Advance the stream and return the next value."""
        self._state = (self._state * MULTIPLIER) % MODULUS
        return (self._state - 1) / (MODULUS - 1)

    def uniform(self, low: float, high: float) -> float:
        """Next value scaled to [low, high)."""
        return low + (high - low) * self.next()

    def advance(self, steps: int) -> None:
        """Skip ``steps`` values without materializing them."""
        if steps < 0:
            raise ValueError(f"Cannot rewind the stream: steps={steps}")
        self._state = (self._state * pow(MULTIPLIER, steps, MODULUS)) % MODULUS

    def values_at(self, offsets: NDArray[np.int64]) -> NDArray[np.float64]:
        """Values the stream would yield at the given 0-based offsets.

        ``values_at([0])`` equals the result of the next ``next()`` call.
        The stream itself is not advanced.
        """
        offsets = np.asarray(offsets, dtype=np.int64)
        if offsets.size and offsets.min() < 0:
            raise ValueError("Stream offsets must be non-negative")
        states = (_pow_mod(offsets + 1) * self._state) % MODULUS
        return (states - 1).astype(np.float64) / (MODULUS - 1)

    def draw(self, count: int) -> NDArray[np.float64]:
        """Return the next ``count`` values and advance past them."""
        values = self.values_at(np.arange(count, dtype=np.int64))
        self.advance(count)
        return values
