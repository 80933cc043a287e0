"""Value entity exports."""

from .ability_scores import Ability, AbilityScores

__all__ = [
    "Ability",
    "AbilityScores",
]
