"""Property bag keys recognized by the racial trait builder and encoder."""
from __future__ import annotations

from typing import Tuple

NAME = "name"
PLURAL = "plural"
ALIASES = "aliases"
ABILITY_SCORES = "ability scores"
MINIMUM_AGE = "minimum age"
LIFESPAN = "lifespan"
BASE_HEIGHT = "base height"
HEIGHT_MODIFIER = "height modifier"
BASE_WEIGHT = "base weight"
WEIGHT_MODIFIER = "weight modifier"
SPEED = "speed"
DARK_VISION = "darkvision"
ALIGNMENT = "alignment"
HIT_POINTS = "hit points"
SUBRACES = "subraces"

# Validation order for base races.
REQUIRED_KEYS: Tuple[str, ...] = (
    NAME,
    PLURAL,
    MINIMUM_AGE,
    LIFESPAN,
    BASE_HEIGHT,
    HEIGHT_MODIFIER,
    BASE_WEIGHT,
    SPEED,
)

OPTIONAL_KEYS: Tuple[str, ...] = (
    ALIASES,
    ABILITY_SCORES,
    ALIGNMENT,
    WEIGHT_MODIFIER,
    DARK_VISION,
    HIT_POINTS,
)

__all__ = [
    "ABILITY_SCORES",
    "ALIASES",
    "ALIGNMENT",
    "BASE_HEIGHT",
    "BASE_WEIGHT",
    "DARK_VISION",
    "HEIGHT_MODIFIER",
    "HIT_POINTS",
    "LIFESPAN",
    "MINIMUM_AGE",
    "NAME",
    "OPTIONAL_KEYS",
    "PLURAL",
    "REQUIRED_KEYS",
    "SPEED",
    "SUBRACES",
    "WEIGHT_MODIFIER",
]
