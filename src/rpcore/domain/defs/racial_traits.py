"""Racial trait record structures."""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from rpcore.core.rng import RNG
from rpcore.domain import trait_keys as keys
from rpcore.domain.alignment import Alignment
from rpcore.domain.dice import Dice
from rpcore.domain.entities.ability_scores import AbilityScores
from rpcore.domain.units import Height, Weight

SMALL_HEIGHT_LIMIT_FT = 4.0
MEDIUM_HEIGHT_LIMIT_FT = 7.0


class Size(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @classmethod
    def for_height(cls, height: Height) -> Size:
        feet = height.converted("ft").value
        if feet < SMALL_HEIGHT_LIMIT_FT:
            return cls.SMALL
        if feet < MEDIUM_HEIGHT_LIMIT_FT:
            return cls.MEDIUM
        return cls.LARGE


@dataclass(frozen=True, slots=True)
class RacialTraits:
    """A race or subrace with its physical and ability traits.

    Instances are immutable snapshots. Subraces are built from a parent with
    ``rpcore.domain.racial_traits_builder.build_subrace`` rather than by
    changing an existing record.
    """

    name: str
    plural: str
    minimum_age: int
    lifespan: int
    base_height: Height
    height_modifier: Dice
    base_weight: Weight
    speed: int
    aliases: Tuple[str, ...] = ()
    descriptive_traits: Mapping[str, object] = field(default_factory=dict, hash=False)
    ability_score_increase: AbilityScores = field(default_factory=AbilityScores)
    alignment: Alignment | None = None
    weight_modifier: Dice | None = None
    dark_vision: int = 0
    hit_points_bonus: int = 0
    subraces: Tuple[RacialTraits, ...] = ()

    def __post_init__(self) -> None:
        # Each record owns a read-only copy so subraces cannot edit their parent.
        object.__setattr__(self, "descriptive_traits", MappingProxyType(dict(self.descriptive_traits)))

    @property
    def size(self) -> Size:
        return Size.for_height(self.base_height)

    def all_names(self) -> Tuple[str, ...]:
        return (self.name, *self.aliases)

    def find_subrace(self, name: str) -> RacialTraits | None:
        """Return the subrace whose name or alias matches ``name``."""
        wanted = name.casefold()
        for subrace in self.subraces:
            if any(candidate.casefold() == wanted for candidate in subrace.all_names()):
                return subrace
        return None

    def roll_height(self, rng: RNG) -> Height:
        """Sample a height: the base plus the height modifier in inches."""
        return self.base_height + Height(float(self.height_modifier.roll(rng)), "in")

    def roll_physique(self, rng: RNG) -> Tuple[Height, Weight]:
        """Sample a matching height and weight from a single height roll.

        Height is the base plus the height roll in inches; weight is the base
        plus the same height roll times the weight modifier roll in pounds.
        """
        height_roll = self.height_modifier.roll(rng)
        weight_roll = self.weight_modifier.roll(rng) if self.weight_modifier is not None else 1
        height = self.base_height + Height(float(height_roll), "in")
        weight = self.base_weight + Weight(float(height_roll * weight_roll), "lb")
        return height, weight

    def to_bag(self, parent: RacialTraits | None = None) -> Dict[str, object]:
        """Encode as a property bag.

        With ``parent`` only the overrides relative to that parent are
        written, so building a subrace from the result reproduces this record.
        Raises ValueError when the record cannot be expressed as overrides of
        ``parent`` (for example aliases that do not extend the parent's).
        """
        if parent is None:
            bag = _encode_full(self)
        else:
            bag = _encode_overrides(self, parent)
        if self.subraces:
            bag[keys.SUBRACES] = [subrace.to_bag(parent=self) for subrace in self.subraces]
        return bag


def _encode_full(traits: RacialTraits, include_defaults: bool = False) -> Dict[str, object]:
    bag: Dict[str, object] = {
        keys.NAME: traits.name,
        keys.PLURAL: traits.plural,
        keys.MINIMUM_AGE: traits.minimum_age,
        keys.LIFESPAN: traits.lifespan,
        keys.BASE_HEIGHT: str(traits.base_height),
        keys.HEIGHT_MODIFIER: str(traits.height_modifier),
        keys.BASE_WEIGHT: str(traits.base_weight),
        keys.SPEED: traits.speed,
    }
    if traits.aliases:
        bag[keys.ALIASES] = list(traits.aliases)
    if not traits.ability_score_increase.is_zero():
        bag[keys.ABILITY_SCORES] = _encode_ability_scores(traits.ability_score_increase)
    if traits.alignment is not None:
        bag[keys.ALIGNMENT] = traits.alignment.name
    if traits.weight_modifier is not None:
        bag[keys.WEIGHT_MODIFIER] = str(traits.weight_modifier)
    if traits.dark_vision or include_defaults:
        bag[keys.DARK_VISION] = traits.dark_vision
    if traits.hit_points_bonus or include_defaults:
        bag[keys.HIT_POINTS] = traits.hit_points_bonus
    return bag


def _encode_overrides(traits: RacialTraits, parent: RacialTraits) -> Dict[str, object]:
    full = _encode_full(traits, include_defaults=True)
    inherited = _encode_full(parent, include_defaults=True)
    dropped = set(inherited) - set(full) - {keys.ALIASES, keys.ABILITY_SCORES}
    if dropped:
        raise ValueError(
            f"'{traits.name}' clears {sorted(dropped)} inherited from '{parent.name}'; "
            "overrides cannot remove traits."
        )
    inherited_count = len(parent.aliases)
    if traits.aliases[:inherited_count] != parent.aliases:
        raise ValueError(f"Aliases of '{traits.name}' do not extend the aliases of '{parent.name}'.")
    bag = {
        key: value
        for key, value in full.items()
        if key not in (keys.ALIASES, keys.ABILITY_SCORES) and inherited.get(key) != value
    }
    if len(traits.aliases) > inherited_count:
        bag[keys.ALIASES] = list(traits.aliases[inherited_count:])
    difference = _subtract(traits.ability_score_increase, parent.ability_score_increase)
    if not difference.is_zero():
        bag[keys.ABILITY_SCORES] = _encode_ability_scores(difference)
    return bag


def _encode_ability_scores(scores: AbilityScores) -> object:
    try:
        return scores.to_names()
    except ValueError:
        return scores.nonzero()


def _subtract(left: AbilityScores, right: AbilityScores) -> AbilityScores:
    return AbilityScores(
        **{item.name: getattr(left, item.name) - getattr(right, item.name) for item in fields(left)}
    )
