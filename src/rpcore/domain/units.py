"""Height and weight measurements parsed from definition data.

Values keep the unit they were written in; conversion happens on demand so a
record encodes back to the same text it was loaded from.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Dict, TypeVar

M = TypeVar("M", bound="_Measurement")

_NUMBER_WITH_UNIT = re.compile(r"^\s*(?P<value>\d+(?:\.\d+)?)\s*(?P<unit>[A-Za-z]*)\s*$")
_FEET_AND_INCHES = re.compile(
    r"^\s*(?P<feet>\d+(?:\.\d+)?)\s*'\s*(?:(?P<inches>\d+(?:\.\d+)?)\s*\")?\s*$"
)
_INCHES_ONLY = re.compile(r"^\s*(?P<inches>\d+(?:\.\d+)?)\s*\"\s*$")


@dataclass(frozen=True, slots=True)
class _Measurement:
    value: float
    unit: str

    # Scale of each canonical unit relative to the base unit.
    _FACTORS: ClassVar[Dict[str, float]] = {}
    _ALIASES: ClassVar[Dict[str, str]] = {}
    DEFAULT_UNIT: ClassVar[str] = ""

    def __post_init__(self) -> None:
        if self.unit not in self._FACTORS:
            raise ValueError(f"Unknown {type(self).__name__.lower()} unit '{self.unit}'.")

    @classmethod
    def normalize_unit(cls, unit: str) -> str | None:
        """Map a written unit ("feet", "LBS", ...) to its canonical symbol."""
        key = unit.strip().lower()
        if key in cls._FACTORS:
            return key
        return cls._ALIASES.get(key)

    def converted(self: M, unit: str) -> M:
        """Return the same quantity expressed in ``unit``."""
        target = self.normalize_unit(unit)
        if target is None:
            raise ValueError(f"Unknown {type(self).__name__.lower()} unit '{unit}'.")
        base_value = self.value * self._FACTORS[self.unit]
        return type(self)(base_value / self._FACTORS[target], target)

    def __add__(self: M, other: M) -> M:
        if not isinstance(other, type(self)):
            return NotImplemented
        return type(self)(self.value + other.converted(self.unit).value, self.unit)

    def __str__(self) -> str:
        value = int(self.value) if float(self.value).is_integer() else self.value
        return f"{value} {self.unit}"

    @classmethod
    def _from_number_and_unit(cls: type[M], text: str) -> M | None:
        match = _NUMBER_WITH_UNIT.match(text)
        if match is None:
            return None
        unit_text = match.group("unit")
        unit = cls.normalize_unit(unit_text) if unit_text else cls.DEFAULT_UNIT
        if unit is None:
            return None
        return cls(float(match.group("value")), unit)


@dataclass(frozen=True, slots=True)
class Height(_Measurement):
    """A length, used for base heights."""

    _FACTORS: ClassVar[Dict[str, float]] = {
        "in": 1.0,
        "ft": 12.0,
        "cm": 1 / 2.54,
        "m": 100 / 2.54,
    }
    _ALIASES: ClassVar[Dict[str, str]] = {
        "inch": "in",
        "inches": "in",
        "foot": "ft",
        "feet": "ft",
        "centimeter": "cm",
        "centimeters": "cm",
        "meter": "m",
        "meters": "m",
    }
    DEFAULT_UNIT: ClassVar[str] = "ft"

    @classmethod
    def parse(cls, text: str) -> Height | None:
        """Parse ``"5 ft"``, ``"150cm"``, ``"4'6\\""`` and similar strings."""
        match = _FEET_AND_INCHES.match(text)
        if match is not None:
            inches = float(match.group("inches") or 0)
            if inches == 0:
                return cls(float(match.group("feet")), "ft")
            return cls(float(match.group("feet")) * 12 + inches, "in")
        match = _INCHES_ONLY.match(text)
        if match is not None:
            return cls(float(match.group("inches")), "in")
        return cls._from_number_and_unit(text)


@dataclass(frozen=True, slots=True)
class Weight(_Measurement):
    """A mass, used for base weights."""

    _FACTORS: ClassVar[Dict[str, float]] = {
        "lb": 1.0,
        "oz": 1 / 16,
        "kg": 2.20462262185,
        "g": 0.00220462262185,
    }
    _ALIASES: ClassVar[Dict[str, str]] = {
        "lbs": "lb",
        "pound": "lb",
        "pounds": "lb",
        "ounce": "oz",
        "ounces": "oz",
        "kgs": "kg",
        "kilogram": "kg",
        "kilograms": "kg",
        "gram": "g",
        "grams": "g",
    }
    DEFAULT_UNIT: ClassVar[str] = "lb"

    @classmethod
    def parse(cls, text: str) -> Weight | None:
        """Parse ``"130 lb"``, ``"60kg"`` and similar strings."""
        return cls._from_number_and_unit(text)


def height_from(value: object) -> Height | None:
    """Coerce a string or bare number (feet) into a Height."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return Height(float(value), Height.DEFAULT_UNIT) if value >= 0 else None
    if isinstance(value, str):
        return Height.parse(value)
    return None


def weight_from(value: object) -> Weight | None:
    """Coerce a string or bare number (pounds) into a Weight."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return Weight(float(value), Weight.DEFAULT_UNIT) if value >= 0 else None
    if isinstance(value, str):
        return Weight.parse(value)
    return None
