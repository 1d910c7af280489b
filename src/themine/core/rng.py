"""Deterministic RNG wrapper built on top of random.Random."""
from __future__ import annotations

from random import Random
from typing import MutableSequence, TypeVar

T_co = TypeVar("T_co")


class RNG:
    """Wrapper around random.Random so every draw in a round is reproducible."""

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._random = Random(seed)

    def random(self) -> float:
        """Return the next random floating point number in the range [0.0, 1.0)."""
        return self._random.random()

    def shuffle(self, seq: MutableSequence[T_co]) -> None:
        """Shuffle the sequence in-place (Fisher-Yates)."""
        self._random.shuffle(seq)
