"""Build racial trait records from untyped property bags.

Two entry points:

* ``build_base_race`` validates the eight required traits in a fixed order and
  returns ``None`` (after reporting the first bad key) when any is missing or
  malformed.
* ``build_subrace`` layers a bag onto a parent record and never fails. Fields
  the bag does not validly supply keep the parent's value.
"""
from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Mapping, Tuple

from rpcore.core.types import MissingTraitSink, TraitBag
from rpcore.domain import trait_keys as keys
from rpcore.domain.alignment import Alignment, alignment_from
from rpcore.domain.defs import RacialTraits
from rpcore.domain.dice import Dice, dice_from
from rpcore.domain.entities.ability_scores import AbilityScores, ability_scores_from
from rpcore.domain.units import Height, Weight, height_from, weight_from

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TraitCoercers:
    """Conversions from raw bag values to typed trait values."""

    height: Callable[[object], Height | None] = height_from
    weight: Callable[[object], Weight | None] = weight_from
    dice: Callable[[str], Dice | None] = dice_from
    ability_scores: Callable[[object], AbilityScores | None] = ability_scores_from
    alignment: Callable[[str], Alignment | None] = alignment_from


DEFAULT_COERCERS = TraitCoercers()

FieldCoercer = Callable[[TraitCoercers, object], object]


class MergePolicy(str, Enum):
    REPLACE = "replace"
    APPEND = "append"
    VECTOR_ADD = "vector_add"


@dataclass(frozen=True, slots=True)
class FieldMergeRule:
    key: str
    attribute: str
    coerce: FieldCoercer
    policy: MergePolicy = MergePolicy.REPLACE


def _coerce_str(_: TraitCoercers, value: object) -> str | None:
    return value if isinstance(value, str) else None


def _coerce_int(_: TraitCoercers, value: object) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _coerce_str_list(_: TraitCoercers, value: object) -> Tuple[str, ...] | None:
    if not isinstance(value, (list, tuple)):
        return None
    if not all(isinstance(item, str) for item in value):
        return None
    return tuple(value)


def _coerce_height(coercers: TraitCoercers, value: object) -> Height | None:
    if value is None:
        return None
    return coercers.height(value)


def _coerce_weight(coercers: TraitCoercers, value: object) -> Weight | None:
    if value is None:
        return None
    return coercers.weight(value)


def _coerce_dice(coercers: TraitCoercers, value: object) -> Dice | None:
    if not isinstance(value, str):
        return None
    return coercers.dice(value)


def _coerce_ability_scores(coercers: TraitCoercers, value: object) -> AbilityScores | None:
    if value is None:
        return None
    return coercers.ability_scores(value)


def _coerce_alignment(coercers: TraitCoercers, value: object) -> Alignment | None:
    if not isinstance(value, str):
        return None
    return coercers.alignment(value)


# Validation order matters: the first failure is the one reported.
REQUIRED_FIELDS: Tuple[Tuple[str, str, FieldCoercer], ...] = (
    (keys.NAME, "name", _coerce_str),
    (keys.PLURAL, "plural", _coerce_str),
    (keys.MINIMUM_AGE, "minimum_age", _coerce_int),
    (keys.LIFESPAN, "lifespan", _coerce_int),
    (keys.BASE_HEIGHT, "base_height", _coerce_height),
    (keys.HEIGHT_MODIFIER, "height_modifier", _coerce_dice),
    (keys.BASE_WEIGHT, "base_weight", _coerce_weight),
    (keys.SPEED, "speed", _coerce_int),
)

SUBRACE_MERGE_POLICIES: Tuple[FieldMergeRule, ...] = (
    FieldMergeRule(keys.NAME, "name", _coerce_str),
    FieldMergeRule(keys.PLURAL, "plural", _coerce_str),
    FieldMergeRule(keys.ALIASES, "aliases", _coerce_str_list, MergePolicy.APPEND),
    FieldMergeRule(keys.MINIMUM_AGE, "minimum_age", _coerce_int),
    FieldMergeRule(keys.LIFESPAN, "lifespan", _coerce_int),
    FieldMergeRule(keys.BASE_HEIGHT, "base_height", _coerce_height),
    FieldMergeRule(keys.BASE_WEIGHT, "base_weight", _coerce_weight),
    FieldMergeRule(keys.HEIGHT_MODIFIER, "height_modifier", _coerce_dice),
    FieldMergeRule(keys.WEIGHT_MODIFIER, "weight_modifier", _coerce_dice),
    FieldMergeRule(keys.SPEED, "speed", _coerce_int),
    FieldMergeRule(
        keys.ABILITY_SCORES, "ability_score_increase", _coerce_ability_scores, MergePolicy.VECTOR_ADD
    ),
    FieldMergeRule(keys.ALIGNMENT, "alignment", _coerce_alignment),
    FieldMergeRule(keys.DARK_VISION, "dark_vision", _coerce_int),
    FieldMergeRule(keys.HIT_POINTS, "hit_points_bonus", _coerce_int),
)

_RULES_BY_ATTRIBUTE: Dict[str, FieldMergeRule] = {rule.attribute: rule for rule in SUBRACE_MERGE_POLICIES}


def _log_missing(key: str) -> None:
    logger.warning("Missing or invalid required racial trait '%s'.", key)


def build_base_race(
    bag: TraitBag,
    *,
    coercers: TraitCoercers | None = None,
    on_missing: MissingTraitSink | None = None,
) -> RacialTraits | None:
    """Build a top-level race, or return None if a required trait is bad.

    ``on_missing`` receives the first missing or invalid key; it defaults to a
    warning on this module's logger.
    """
    coercers = coercers or DEFAULT_COERCERS
    report = on_missing or _log_missing
    if not isinstance(bag, Mapping):
        bag = {}

    required: Dict[str, object] = {}
    for key, attribute, coerce in REQUIRED_FIELDS:
        value = coerce(coercers, bag.get(key))
        if value is None:
            report(key)
            return None
        required[attribute] = value

    ability_score_increase = _coerce_ability_scores(coercers, bag.get(keys.ABILITY_SCORES))
    return RacialTraits(
        **required,
        aliases=_coerce_str_list(coercers, bag.get(keys.ALIASES)) or (),
        ability_score_increase=ability_score_increase or AbilityScores(),
        alignment=_coerce_alignment(coercers, bag.get(keys.ALIGNMENT)),
        weight_modifier=_coerce_dice(coercers, bag.get(keys.WEIGHT_MODIFIER)),
        dark_vision=_coerce_int(coercers, bag.get(keys.DARK_VISION)) or 0,
        hit_points_bonus=_coerce_int(coercers, bag.get(keys.HIT_POINTS)) or 0,
    )


def coerce_overrides(bag: TraitBag, coercers: TraitCoercers | None = None) -> Dict[str, object]:
    """Return the validly typed overrides in ``bag`` keyed by record attribute.

    Keys whose values cannot be coerced are left out.
    """
    coercers = coercers or DEFAULT_COERCERS
    if not isinstance(bag, Mapping):
        return {}

    overrides: Dict[str, object] = {}
    for rule in SUBRACE_MERGE_POLICIES:
        if rule.key not in bag:
            continue
        raw = bag[rule.key]
        value = rule.coerce(coercers, raw)
        if value is None:
            logger.debug("Ignoring malformed subrace override '%s': %r", rule.key, raw)
            continue
        overrides[rule.attribute] = value
    return overrides


def merge_traits(base: RacialTraits, overrides: Mapping[str, object]) -> RacialTraits:
    """Return a new record with ``overrides`` applied to ``base``.

    Each attribute is merged according to its rule in SUBRACE_MERGE_POLICIES:
    replaced, appended after the base's entries, or added to the base vector.
    """
    unknown = set(overrides) - set(_RULES_BY_ATTRIBUTE)
    if unknown:
        raise ValueError(f"Cannot merge unknown racial trait attributes: {sorted(unknown)}")

    changes: Dict[str, object] = {}
    for attribute, value in overrides.items():
        policy = _RULES_BY_ATTRIBUTE[attribute].policy
        current = getattr(base, attribute)
        if policy is MergePolicy.APPEND:
            changes[attribute] = tuple(current) + tuple(value)
        elif policy is MergePolicy.VECTOR_ADD:
            changes[attribute] = current + value
        else:
            changes[attribute] = value
    return dataclasses.replace(base, **changes)


def build_subrace(
    bag: TraitBag,
    parent: RacialTraits,
    *,
    coercers: TraitCoercers | None = None,
) -> RacialTraits:
    """Build a subrace from ``parent`` and the overrides in ``bag``."""
    return merge_traits(parent, coerce_overrides(bag, coercers))
