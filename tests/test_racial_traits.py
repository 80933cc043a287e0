from __future__ import annotations

import dataclasses

import pytest

from rpcore.core.rng import RNG
from rpcore.domain import trait_keys as keys
from rpcore.domain.alignment import Alignment, Ethics, Morals
from rpcore.domain.defs import RacialTraits, Size
from rpcore.domain.dice import Dice
from rpcore.domain.entities import AbilityScores
from rpcore.domain.racial_traits_builder import build_base_race, build_subrace
from rpcore.domain.units import Height, Weight


@pytest.mark.parametrize(
    ("height", "expected"),
    [
        (Height(3.5, "ft"), Size.SMALL),
        (Height(4.0, "ft"), Size.MEDIUM),
        (Height(48.0, "in"), Size.MEDIUM),
        (Height(6.99, "ft"), Size.MEDIUM),
        (Height(7.0, "ft"), Size.LARGE),
        (Height(84.0, "in"), Size.LARGE),
    ],
)
def test_size_is_derived_from_base_height(height: Height, expected: Size) -> None:
    assert _race(base_height=height).size is expected


def test_size_follows_base_height_of_subrace() -> None:
    parent = _race(base_height=Height(4.5, "ft"))

    subrace = build_subrace({keys.BASE_HEIGHT: "3 ft"}, parent)

    assert parent.size is Size.MEDIUM
    assert subrace.size is Size.SMALL


def test_records_are_frozen() -> None:
    race = _race()
    with pytest.raises(AttributeError):
        race.speed = 40  # type: ignore[misc]


def test_all_names_lists_name_then_aliases() -> None:
    race = _race(aliases=("Fair Folk", "Eladrin"))
    assert race.all_names() == ("Elf", "Fair Folk", "Eladrin")


def test_find_subrace_matches_name_or_alias_case_insensitively() -> None:
    drow = build_subrace({keys.NAME: "Dark Elf", keys.ALIASES: ["Drow"]}, _race())
    race = _race(subraces=(drow,))

    assert race.find_subrace("dark elf") is drow
    assert race.find_subrace("DROW") is drow
    assert race.find_subrace("Wood Elf") is None


def test_to_bag_round_trips_through_base_builder() -> None:
    race = _race(
        aliases=("Fair Folk",),
        ability_score_increase=AbilityScores(DEX=2),
        alignment=Alignment(Ethics.CHAOTIC, Morals.GOOD),
        weight_modifier=Dice(1, 4),
        dark_vision=60,
    )

    assert build_base_race(race.to_bag()) == race


def test_to_bag_omits_defaults() -> None:
    bag = _race().to_bag()

    assert keys.ALIASES not in bag
    assert keys.ABILITY_SCORES not in bag
    assert keys.ALIGNMENT not in bag
    assert keys.WEIGHT_MODIFIER not in bag
    assert keys.DARK_VISION not in bag
    assert keys.HIT_POINTS not in bag
    assert bag[keys.BASE_HEIGHT] == "54 in"
    assert bag[keys.HEIGHT_MODIFIER] == "2d10"


def test_to_bag_with_parent_writes_only_overrides() -> None:
    parent = _race(aliases=("Fair Folk",), ability_score_increase=AbilityScores(DEX=2), dark_vision=60)
    subrace = build_subrace(
        {keys.NAME: "Dark Elf", keys.ALIASES: ["Drow"], keys.ABILITY_SCORES: ["CHA"], keys.DARK_VISION: 120},
        parent,
    )

    bag = subrace.to_bag(parent=parent)

    assert bag == {
        keys.NAME: "Dark Elf",
        keys.ALIASES: ["Drow"],
        keys.ABILITY_SCORES: ["CHA"],
        keys.DARK_VISION: 120,
    }
    assert build_subrace(bag, parent) == subrace


def test_to_bag_encodes_negative_increase_as_mapping() -> None:
    race = _race(ability_score_increase=AbilityScores(STR=-2, INT=1))

    bag = race.to_bag()

    assert bag[keys.ABILITY_SCORES] == {"STR": -2, "INT": 1}
    assert build_base_race(bag) == race


def test_roll_height_adds_modifier_in_inches() -> None:
    race = _race(base_height=Height(4.0, "ft"), height_modifier=Dice(0, 1, 6))

    assert race.roll_height(RNG(1)) == Height(4.5, "ft")


def test_roll_physique_multiplies_height_and_weight_rolls() -> None:
    race = _race(base_height=Height(4.0, "ft"), height_modifier=Dice(0, 1, 3), weight_modifier=Dice(0, 1, 4))

    assert race.roll_physique(RNG(1)) == (Height(4.25, "ft"), Weight(102.0, "lb"))


def test_roll_physique_without_weight_modifier_uses_height_roll() -> None:
    race = _race(height_modifier=Dice(0, 1, 5))

    height, weight = race.roll_physique(RNG(1))

    assert height == Height(59.0, "in")
    assert weight == Weight(95.0, "lb")


def test_roll_physique_shares_one_height_roll() -> None:
    race = _race(weight_modifier=Dice(0, 1, 1))
    for seed in range(20):
        height, weight = race.roll_physique(RNG(seed))
        inches_added = height.converted("in").value - 54
        pounds_added = weight.converted("lb").value - 90
        assert pounds_added == inches_added


def test_rolls_stay_within_dice_bounds() -> None:
    race = _race()
    rng = RNG(2024)
    for _ in range(50):
        inches = race.roll_height(rng).converted("in").value
        assert 54 + 2 <= inches <= 54 + 20


def test_to_bag_rejects_aliases_that_do_not_extend_parent() -> None:
    parent = _race(aliases=("Fair Folk",))
    renamed = RacialTraits(**{**_fields_of(parent), "aliases": ("Drow",)})

    with pytest.raises(ValueError):
        renamed.to_bag(parent=parent)


def test_to_bag_rejects_cleared_inherited_trait() -> None:
    parent = _race(alignment=Alignment(Ethics.CHAOTIC, Morals.GOOD))
    unaligned = RacialTraits(**{**_fields_of(parent), "alignment": None})

    with pytest.raises(ValueError):
        unaligned.to_bag(parent=parent)


def test_descriptive_traits_are_read_only_and_not_shared_with_subrace() -> None:
    source = {"languages": ["Elvish"]}
    parent = _race(descriptive_traits=source)
    subrace = build_subrace({keys.NAME: "Dark Elf"}, parent)

    with pytest.raises(TypeError):
        subrace.descriptive_traits["languages"] = ["Undercommon"]  # type: ignore[index]
    source["languages"] = ["Common"]

    assert parent.descriptive_traits == {"languages": ["Elvish"]}
    assert subrace.descriptive_traits == {"languages": ["Elvish"]}


def test_records_are_hashable() -> None:
    parent = _race(descriptive_traits={"languages": ["Elvish"]})

    assert hash(parent) == hash(build_subrace({}, parent))
    assert len({parent, build_subrace({keys.SPEED: 35}, parent)}) == 2


def _fields_of(race: RacialTraits) -> dict[str, object]:
    return {item.name: getattr(race, item.name) for item in dataclasses.fields(race)}


def _race(**overrides: object) -> RacialTraits:
    values: dict[str, object] = {
        "name": "Elf",
        "plural": "Elves",
        "minimum_age": 100,
        "lifespan": 750,
        "base_height": Height(54.0, "in"),
        "height_modifier": Dice(2, 10),
        "base_weight": Weight(90.0, "lb"),
        "speed": 30,
    }
    values.update(overrides)
    return RacialTraits(**values)
