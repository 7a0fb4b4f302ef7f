"""Unit conversion through a common base unit per category"""

from typing import Callable, Dict, List, Tuple

from calc_hub.domain.exceptions import InvalidInputError
from calc_hub.domain.models import ConversionResult

# code -> (display name, size of one unit in the category's base unit)
LINEAR_UNITS: Dict[str, Dict[str, Tuple[str, float]]] = {
    # base: metre
    "length": {
        "mm": ("밀리미터", 0.001),
        "cm": ("센티미터", 0.01),
        "m": ("미터", 1.0),
        "km": ("킬로미터", 1000.0),
        "inch": ("인치", 0.0254),
        "ft": ("피트", 0.3048),
        "yard": ("야드", 0.9144),
        "mile": ("마일", 1609.344),
    },
    # base: kilogram
    "weight": {
        "mg": ("밀리그램", 0.000001),
        "g": ("그램", 0.001),
        "kg": ("킬로그램", 1.0),
        "t": ("톤", 1000.0),
        "oz": ("온스", 0.0283495),
        "lb": ("파운드", 0.453592),
        "don": ("돈", 0.00375),
        "geun": ("근", 0.6),
    },
    # base: litre
    "volume": {
        "ml": ("밀리리터", 0.001),
        "l": ("리터", 1.0),
        "cc": ("cc", 0.001),
        "cup": ("컵", 0.2365882365),
        "tbsp": ("테이블스푼", 0.0147868),
        "tsp": ("티스푼", 0.00492892),
        "gallon": ("갤런", 3.78541),
        "hop": ("홉", 0.18039),
    },
}

# code -> (display name, to Celsius, from Celsius)
TEMPERATURE_UNITS: Dict[str, Tuple[str, Callable[[float], float], Callable[[float], float]]] = {
    "c": ("섭씨", lambda v: v, lambda v: v),
    "f": ("화씨", lambda v: (v - 32) * 5 / 9, lambda v: v * 9 / 5 + 32),
    "k": ("켈빈", lambda v: v - 273.15, lambda v: v + 273.15),
}

CATEGORY_NAMES: Dict[str, str] = {
    "length": "길이",
    "weight": "무게",
    "volume": "부피",
    "temperature": "온도",
}


def _check_category(category: str) -> None:
    if category not in CATEGORY_NAMES:
        raise InvalidInputError(f"category: unknown category {category!r}", field="category")


def units_for(category: str) -> List[Tuple[str, str]]:
    """(code, display name) pairs available in a category"""
    _check_category(category)
    if category == "temperature":
        return [(code, entry[0]) for code, entry in TEMPERATURE_UNITS.items()]
    return [(code, entry[0]) for code, entry in LINEAR_UNITS[category].items()]


def to_base(value: float, category: str, unit: str, field: str = "from_unit") -> float:
    _check_category(category)
    if category == "temperature":
        if unit not in TEMPERATURE_UNITS:
            raise InvalidInputError(f"{field}: unknown temperature unit {unit!r}", field=field)
        return TEMPERATURE_UNITS[unit][1](value)

    table = LINEAR_UNITS[category]
    if unit not in table:
        raise InvalidInputError(f"{field}: unknown {category} unit {unit!r}", field=field)
    return value * table[unit][1]


def from_base(value: float, category: str, unit: str, field: str = "to_unit") -> float:
    _check_category(category)
    if category == "temperature":
        if unit not in TEMPERATURE_UNITS:
            raise InvalidInputError(f"{field}: unknown temperature unit {unit!r}", field=field)
        return TEMPERATURE_UNITS[unit][2](value)

    table = LINEAR_UNITS[category]
    if unit not in table:
        raise InvalidInputError(f"{field}: unknown {category} unit {unit!r}", field=field)
    return value / table[unit][1]


def convert(value: float, category: str, from_unit: str, to_unit: str) -> ConversionResult:
    """
    Convert through the category's base unit (m, kg, l, or Celsius).

    Linear units scale by their size in the base unit; temperatures go
    through Celsius with the Fahrenheit and Kelvin offset formulas.

    Example:
        convert(1, "length", "mile", "km").converted == 1.609344
    """
    base_value = to_base(value, category, from_unit)
    converted = from_base(base_value, category, to_unit)
    return ConversionResult(
        category=category,
        value=value,
        from_unit=from_unit,
        to_unit=to_unit,
        base_value=base_value,
        converted=converted,
    )
