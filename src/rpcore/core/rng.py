"""Seedable RNG wrapper used for dice rolls."""
from __future__ import annotations

from random import Random
from typing import Sequence, TypeVar

T_co = TypeVar("T_co")


class RNG:
    """Wrapper around random.Random so rolls can be replayed from a seed."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._random.randint(a, b)

    def roll_die(self, sides: int) -> int:
        """Roll a single die with the given number of faces."""
        if sides < 1:
            raise ValueError(f"A die needs at least one side, got {sides}.")
        return self._random.randint(1, sides)

    def roll_dice(self, count: int, sides: int) -> list[int]:
        """Roll ``count`` dice and return every face rolled."""
        if count < 0:
            raise ValueError(f"Cannot roll a negative number of dice ({count}).")
        return [self.roll_die(sides) for _ in range(count)]

    def choice(self, seq: Sequence[T_co]) -> T_co:
        """Return a random element from the non-empty sequence."""
        if not seq:
            raise ValueError("Cannot choose from an empty sequence.")
        return self._random.choice(seq)
