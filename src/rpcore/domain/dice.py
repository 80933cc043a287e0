"""Dice notation parsing and rolling."""
from __future__ import annotations

import re
from dataclasses import dataclass

from rpcore.core.rng import RNG

_DICE_PATTERN = re.compile(
    r"^(?P<count>\d*)d(?P<sides>\d+|%)(?:(?P<sign>[+-])(?P<modifier>\d+))?$"
)
_CONSTANT_PATTERN = re.compile(r"^(?P<sign>[+-]?)(?P<modifier>\d+)$")


@dataclass(frozen=True, slots=True)
class Dice:
    """A roll of ``count`` dice with ``sides`` faces plus a flat modifier.

    ``count == 0`` describes a constant, e.g. ``Dice(0, 1, 3)`` always rolls 3.
    """

    count: int
    sides: int
    modifier: int = 0

    @property
    def minimum(self) -> int:
        return self.count + self.modifier

    @property
    def maximum(self) -> int:
        return self.count * self.sides + self.modifier

    def roll(self, rng: RNG) -> int:
        """Roll every die and apply the modifier."""
        return sum(rng.roll_dice(self.count, self.sides)) + self.modifier

    def __str__(self) -> str:
        if self.count == 0:
            return str(self.modifier)
        notation = f"{self.count}d{self.sides}"
        if self.modifier > 0:
            notation += f"+{self.modifier}"
        elif self.modifier < 0:
            notation += f"-{-self.modifier}"
        return notation


def parse_dice(text: str) -> Dice | None:
    """Parse notations like ``"2d4+1"``, ``"d20"``, ``"d%"`` or ``"3"``."""
    compact = re.sub(r"\s+", "", text).lower()
    match = _DICE_PATTERN.match(compact)
    if match is not None:
        count = int(match.group("count")) if match.group("count") else 1
        sides = 100 if match.group("sides") == "%" else int(match.group("sides"))
        if count < 1 or sides < 1:
            return None
        modifier = int(match.group("modifier") or 0)
        if match.group("sign") == "-":
            modifier = -modifier
        return Dice(count, sides, modifier)

    match = _CONSTANT_PATTERN.match(compact)
    if match is not None:
        modifier = int(match.group("modifier"))
        return Dice(0, 1, -modifier if match.group("sign") == "-" else modifier)
    return None


def dice_from(value: object) -> Dice | None:
    """Coerce a dice notation string into Dice; anything else yields None."""
    if not isinstance(value, str):
        return None
    return parse_dice(value)
