import pytest

from rpcore.domain.units import Height, Weight, height_from, weight_from


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("5 ft", Height(5.0, "ft")),
        ("4.5ft", Height(4.5, "ft")),
        ("4 feet", Height(4.0, "ft")),
        ("4'", Height(4.0, "ft")),
        ("4'6\"", Height(54.0, "in")),
        ("60\"", Height(60.0, "in")),
        ("60 in", Height(60.0, "in")),
        ("150 cm", Height(150.0, "cm")),
        ("1.8 M", Height(1.8, "m")),
        ("6", Height(6.0, "ft")),
    ],
)
def test_height_parses_unit_strings(text: str, expected: Height) -> None:
    assert height_from(text) == expected


@pytest.mark.parametrize("value", ["tall", "5 furlongs", "-4 ft", "", None, True, [5], -1])
def test_height_rejects_malformed_values(value: object) -> None:
    assert height_from(value) is None


def test_height_accepts_bare_numbers_as_feet() -> None:
    assert height_from(5) == Height(5.0, "ft")
    assert height_from(4.5) == Height(4.5, "ft")


def test_height_conversion() -> None:
    assert Height(54.0, "in").converted("ft").value == pytest.approx(4.5)
    assert Height(6.0, "ft").converted("inches") == Height(72.0, "in")
    assert Height(254.0, "cm").converted("in").value == pytest.approx(100.0)


def test_height_addition_keeps_left_unit() -> None:
    total = Height(4.0, "ft") + Height(6.0, "in")
    assert total == Height(4.5, "ft")


def test_measurement_rejects_unknown_unit() -> None:
    with pytest.raises(ValueError):
        Height(1.0, "furlong")
    with pytest.raises(ValueError):
        Weight(1.0, "lb").converted("stone")


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("130 lb", Weight(130.0, "lb")),
        ("130 lbs", Weight(130.0, "lb")),
        ("60kg", Weight(60.0, "kg")),
        ("8 oz", Weight(8.0, "oz")),
        ("90", Weight(90.0, "lb")),
    ],
)
def test_weight_parses_unit_strings(text: str, expected: Weight) -> None:
    assert weight_from(text) == expected


def test_weight_accepts_bare_numbers_as_pounds() -> None:
    assert weight_from(90) == Weight(90.0, "lb")
    assert weight_from(False) is None


def test_weight_conversion() -> None:
    assert Weight(1.0, "kg").converted("lb").value == pytest.approx(2.20462, rel=1e-5)
    assert Weight(32.0, "oz").converted("lb").value == pytest.approx(2.0)


def test_string_form_drops_trailing_zero() -> None:
    assert str(Height(54.0, "in")) == "54 in"
    assert str(Weight(2.5, "kg")) == "2.5 kg"
