"""Character alignment parsed from names like "Chaotic Good"."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Ethics(str, Enum):
    LAWFUL = "Lawful"
    NEUTRAL = "Neutral"
    CHAOTIC = "Chaotic"


class Morals(str, Enum):
    GOOD = "Good"
    NEUTRAL = "Neutral"
    EVIL = "Evil"


@dataclass(frozen=True, slots=True)
class Alignment:
    ethics: Ethics
    morals: Morals

    @property
    def name(self) -> str:
        if self.ethics is Ethics.NEUTRAL and self.morals is Morals.NEUTRAL:
            return "Neutral"
        return f"{self.ethics.value} {self.morals.value}"

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_name(cls, name: str) -> Alignment | None:
        words = name.lower().split()
        if words in (["neutral"], ["true", "neutral"]):
            return cls(Ethics.NEUTRAL, Morals.NEUTRAL)
        if len(words) != 2:
            return None
        ethics = next((item for item in Ethics if item.value.lower() == words[0]), None)
        morals = next((item for item in Morals if item.value.lower() == words[1]), None)
        if ethics is None or morals is None:
            return None
        return cls(ethics, morals)


def alignment_from(value: object) -> Alignment | None:
    if not isinstance(value, str):
        return None
    return Alignment.from_name(value)
