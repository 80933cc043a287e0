"""Ability score vectors used for racial increases."""
from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Iterable, List, Mapping

# Each ability named in a list contributes this much.
NAMED_ABILITY_INCREMENT = 1


class Ability(str, Enum):
    STR = "Strength"
    DEX = "Dexterity"
    CON = "Constitution"
    INT = "Intelligence"
    WIS = "Wisdom"
    CHA = "Charisma"

    @classmethod
    def from_name(cls, name: str) -> Ability | None:
        """Resolve ``"DEX"``, ``"dex"`` or ``"Dexterity"`` to an Ability."""
        key = name.strip()
        for ability in cls:
            if key.upper() == ability.name or key.lower() == ability.value.lower():
                return ability
        return None


@dataclass(frozen=True, slots=True)
class AbilityScores:
    """Per-ability bonuses; the default instance is the zero vector."""

    STR: int = 0
    DEX: int = 0
    CON: int = 0
    INT: int = 0
    WIS: int = 0
    CHA: int = 0

    def __getitem__(self, ability: Ability) -> int:
        return getattr(self, ability.name)

    def __add__(self, other: AbilityScores) -> AbilityScores:
        if not isinstance(other, AbilityScores):
            return NotImplemented
        return AbilityScores(
            **{field.name: getattr(self, field.name) + getattr(other, field.name) for field in fields(self)}
        )

    def is_zero(self) -> bool:
        return all(getattr(self, field.name) == 0 for field in fields(self))

    def nonzero(self) -> dict[str, int]:
        """Return the abilities with a bonus, keyed by abbreviation."""
        return {
            field.name: getattr(self, field.name)
            for field in fields(self)
            if getattr(self, field.name) != 0
        }

    def to_names(self) -> List[str]:
        """Encode as a list of ability names, repeating a name once per point.

        Only non-negative whole-point vectors can be encoded this way; use
        ``nonzero()`` for anything else.
        """
        names: List[str] = []
        for ability in Ability:
            amount = self[ability]
            if amount < 0 or amount % NAMED_ABILITY_INCREMENT:
                raise ValueError(f"{ability.name} bonus {amount} cannot be encoded as names.")
            names.extend([ability.name] * (amount // NAMED_ABILITY_INCREMENT))
        return names

    @classmethod
    def from_names(cls, names: Iterable[object]) -> AbilityScores | None:
        totals = dict.fromkeys((ability.name for ability in Ability), 0)
        for name in names:
            if not isinstance(name, str):
                return None
            ability = Ability.from_name(name)
            if ability is None:
                return None
            totals[ability.name] += NAMED_ABILITY_INCREMENT
        return cls(**totals)

    @classmethod
    def from_mapping(cls, raw: Mapping[object, object]) -> AbilityScores | None:
        totals = dict.fromkeys((ability.name for ability in Ability), 0)
        for name, amount in raw.items():
            if not isinstance(name, str) or isinstance(amount, bool) or not isinstance(amount, int):
                return None
            ability = Ability.from_name(name)
            if ability is None:
                return None
            totals[ability.name] += amount
        return cls(**totals)


def ability_scores_from(value: object) -> AbilityScores | None:
    """Build an increase vector from a list of names or a name-to-bonus mapping."""
    if isinstance(value, (list, tuple)):
        return AbilityScores.from_names(value)
    if isinstance(value, Mapping):
        return AbilityScores.from_mapping(value)
    return None
