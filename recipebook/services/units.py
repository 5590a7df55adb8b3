"""
Unit catalog for recipe ingredient amounts.

Holds the cooking units the application knows about, their human-readable names
and the category (mass, weight, volume, piece) each one belongs to. All tables are
built once at import and exposed read-only.
"""

import logging
from enum import Enum
from types import MappingProxyType
from typing import NamedTuple

from ..core.errors import UnknownUnitError
from ..core.result import Failure, Result, Success

logger = logging.getLogger("recipebook.units")


# --- Types ---

class UnitType(str, Enum):
    """Shorthand codes, as persisted in ingredient amounts."""

    MILLIGRAM = "mg"
    GRAM = "g"
    KILOGRAM = "kg"

    OUNCE = "oz"
    POUND = "lb"

    MILLILITER = "ml"
    LITER = "l"
    TEASPOON = "tsp"
    TABLESPOON = "tbsp"
    FLUID_OUNCE = "fl oz"
    CUP = "cup"
    PINT = "pt"
    QUART = "qt"
    GALLON = "gal"

    PIECE = "piece"
    PINCH = "pinch"

    def __str__(self) -> str:
        return self.value


class UnitName(str, Enum):
    """Human-readable labels used for display and pick-lists."""

    milligram = "milligram"
    gram = "gram"
    kilogram = "kilogram"

    ounce = "ounce"
    pound = "pound"

    milliliter = "milliliter"
    liter = "liter"
    teaspoon = "teaspoon"
    tablespoon = "tablespoon"
    fluid_ounce = "fluid ounce"
    cup = "cup"
    pint = "pint"
    quart = "quart"
    gallon = "gallon"

    piece = "piece"
    pinch = "pinch"

    def __str__(self) -> str:
        return self.value


class UnitCategory(str, Enum):
    MASS = "Mass"
    WEIGHT = "Weight"
    VOLUME = "Volume"
    PIECE = "Piece"

    def __str__(self) -> str:
        return self.value


class Unit(NamedTuple):
    value: UnitType
    label: UnitName


class Amount(NamedTuple):
    value: float
    unit: UnitType


def amount_for(value: float, unit: UnitType) -> Amount:
    return Amount(value, unit)


# --- Data Tables ---

# Category -> units, in display order
_UNITS_BY_CATEGORY = {
    UnitCategory.MASS: (
        Unit(UnitType.MILLIGRAM, UnitName.milligram),
        Unit(UnitType.GRAM, UnitName.gram),
        Unit(UnitType.KILOGRAM, UnitName.kilogram),
    ),
    UnitCategory.WEIGHT: (
        Unit(UnitType.OUNCE, UnitName.ounce),
        Unit(UnitType.POUND, UnitName.pound),
    ),
    UnitCategory.VOLUME: (
        Unit(UnitType.MILLILITER, UnitName.milliliter),
        Unit(UnitType.LITER, UnitName.liter),
        Unit(UnitType.TEASPOON, UnitName.teaspoon),
        Unit(UnitType.TABLESPOON, UnitName.tablespoon),
        Unit(UnitType.FLUID_OUNCE, UnitName.fluid_ounce),
        Unit(UnitType.CUP, UnitName.cup),
        Unit(UnitType.PINT, UnitName.pint),
        Unit(UnitType.QUART, UnitName.quart),
        Unit(UnitType.GALLON, UnitName.gallon),
    ),
    UnitCategory.PIECE: (
        Unit(UnitType.PIECE, UnitName.piece),
        Unit(UnitType.PINCH, UnitName.pinch),
    ),
}


def _check_catalog(units_by_category) -> list[str]:
    """Return a description of every configuration problem in the catalog."""
    problems = []
    seen_types: dict[UnitType, UnitCategory] = {}
    seen_names: dict[UnitName, UnitType] = {}
    for category, units in units_by_category.items():
        for unit in units:
            if unit.value in seen_types:
                problems.append(
                    f"[duplicate unit type {unit.value} in {category} and {seen_types[unit.value]}]"
                )
            if unit.label in seen_names:
                problems.append(
                    f"[label {unit.label} mapped to {seen_names[unit.label]} and {unit.value}]"
                )
            seen_types[unit.value] = category
            seen_names[unit.label] = unit.value

    for unit_type in UnitType:
        if unit_type not in seen_types:
            problems.append(f"[unit type {unit_type} has no category]")
    for unit_name in UnitName:
        if unit_name not in seen_names:
            problems.append(f"[orphan label {unit_name}]")
    return problems


_problems = _check_catalog(_UNITS_BY_CATEGORY)
if _problems:
    raise RuntimeError(
        "Measurement setup failed. This is a logic/configuration error; " + " ".join(_problems)
    )

UNITS_BY_CATEGORY = MappingProxyType(_UNITS_BY_CATEGORY)

MEASUREMENT_UNITS: tuple[Unit, ...] = tuple(
    unit for units in _UNITS_BY_CATEGORY.values() for unit in units
)

_CATEGORY_BY_TYPE = MappingProxyType({
    unit.value: category
    for category, units in _UNITS_BY_CATEGORY.items()
    for unit in units
})
_UNIT_BY_TYPE = MappingProxyType({unit.value: unit for unit in MEASUREMENT_UNITS})
_UNIT_BY_NAME = MappingProxyType({unit.label: unit for unit in MEASUREMENT_UNITS})
_TYPE_BY_SHORTHAND = MappingProxyType({unit_type.value: unit_type for unit_type in UnitType})


# --- Catalog lookups ---

def unit_for(name: UnitName) -> Unit:
    return _UNIT_BY_NAME[name]


def unit_for_type(unit_type: UnitType) -> Unit:
    return _UNIT_BY_TYPE[unit_type]


def unit_name_for(unit_type: UnitType) -> UnitName:
    return _UNIT_BY_TYPE[unit_type].label


def shorthand_of(unit_type: UnitType) -> str:
    return unit_type.value


def unit_type_from_shorthand(code: str) -> Result[UnitType, UnknownUnitError]:
    """
    Look up the unit for a persisted shorthand code (e.g. "tbsp", "fl oz").

    Matching is exact apart from surrounding whitespace; "Tbsp" is not "tbsp".
    """
    unit_type = _TYPE_BY_SHORTHAND.get(code.strip()) if isinstance(code, str) else None
    if unit_type is None:
        logger.debug(f"Unknown unit shorthand: {code!r}")
        return Failure(UnknownUnitError(code))
    return Success(unit_type)


# --- Category resolver ---

def category_for(unit_type: UnitType) -> UnitCategory:
    return _CATEGORY_BY_TYPE[unit_type]


def units_in_category(category: UnitCategory) -> tuple[Unit, ...]:
    return _UNITS_BY_CATEGORY[category]


# Mass and weight units are listed together in pick-lists; numerically they stay apart.
_TARGET_GROUPS = {
    UnitCategory.MASS: (UnitCategory.MASS, UnitCategory.WEIGHT),
    UnitCategory.WEIGHT: (UnitCategory.MASS, UnitCategory.WEIGHT),
    UnitCategory.VOLUME: (UnitCategory.VOLUME,),
    UnitCategory.PIECE: (UnitCategory.PIECE,),
}


def target_units_for(unit_type: UnitType) -> tuple[Unit, ...]:
    """Units offered as conversion targets when the source amount is in `unit_type`."""
    return tuple(
        unit
        for category in _TARGET_GROUPS[category_for(unit_type)]
        for unit in _UNITS_BY_CATEGORY[category]
    )
