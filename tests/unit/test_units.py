"""Unit tests for unit conversion"""

import itertools
import pytest
from calc_hub.domain.exceptions import InvalidInputError
from calc_hub.domain.units import CATEGORY_NAMES, convert, units_for


@pytest.mark.parametrize(
    "category,value,from_unit,to_unit,expected",
    [
        ("length", 1, "mile", "km", 1.609344),
        ("length", 12, "inch", "ft", 1.0),
        ("length", 250, "cm", "m", 2.5),
        ("weight", 1, "geun", "g", 600),
        ("weight", 1, "lb", "oz", 16.0),
        ("volume", 1, "gallon", "l", 3.78541),
        ("volume", 500, "cc", "ml", 500),
        ("temperature", 100, "c", "f", 212),
        ("temperature", 32, "f", "k", 273.15),
        ("temperature", 0, "k", "c", -273.15),
        ("temperature", 36.5, "c", "f", 97.7),
    ],
)
def test_convert(category: str, value: float, from_unit: str, to_unit: str, expected: float):
    result = convert(value, category, from_unit, to_unit)
    assert result.converted == pytest.approx(expected, rel=1e-4)


def test_linear_units_go_through_base():
    result = convert(3, "length", "km", "mm")
    assert result.base_value == pytest.approx(3000)
    assert result.converted == pytest.approx(3_000_000)


@pytest.mark.parametrize("category", list(CATEGORY_NAMES))
def test_round_trip_every_pair(category: str):
    codes = [code for code, _ in units_for(category)]
    for from_unit, to_unit in itertools.permutations(codes, 2):
        there = convert(123.456, category, from_unit, to_unit).converted
        back = convert(there, category, to_unit, from_unit).converted
        assert back == pytest.approx(123.456, rel=1e-9)


def test_units_for_lists_display_names():
    assert ("c", "섭씨") in units_for("temperature")
    assert len(units_for("weight")) == 8


def test_unknown_category_rejected():
    with pytest.raises(InvalidInputError):
        convert(1, "time", "s", "h")


def test_unknown_unit_rejected():
    with pytest.raises(InvalidInputError) as exc_info:
        convert(1, "length", "m", "parsec")
    assert exc_info.value.field == "to_unit"
