"""
Unit Conversion Service.

Converts ingredient amounts between units of compatible categories. Mass, weight and
volume each convert on their own basis (grams, pound-force, milliliters); mass and
weight are bridged through the avoirdupois equivalence, with no gravity or density.
Piece units (piece, pinch) only convert to themselves.
"""

import logging
from functools import lru_cache
from typing import Callable

import pint

from ..core.errors import ConversionError, IncompatibleUnitsError, UnknownUnitError
from ..core.result import Failure, Result, Success
from .units import Amount, UnitCategory, UnitType, amount_for, category_for

logger = logging.getLogger("recipebook.units")

ureg = pint.UnitRegistry()

# --- Data Tables ---

# UnitType -> pint unit name
CONVERSION_UNITS = {
    # Mass
    UnitType.MILLIGRAM: "milligram",
    UnitType.GRAM: "gram",
    UnitType.KILOGRAM: "kilogram",

    # Weight (force)
    UnitType.OUNCE: "force_ounce",
    UnitType.POUND: "force_pound",

    # Volume (US customary)
    UnitType.MILLILITER: "milliliter",
    UnitType.LITER: "liter",
    UnitType.TEASPOON: "teaspoon",
    UnitType.TABLESPOON: "tablespoon",
    UnitType.FLUID_OUNCE: "fluid_ounce",
    UnitType.CUP: "cup",
    UnitType.PINT: "pint",
    UnitType.QUART: "quart",
    UnitType.GALLON: "gallon",
}

# Weight unit -> the mass unit it is read as when crossing into the mass category
WEIGHT_AS_MASS = {
    UnitType.OUNCE: "ounce",
    UnitType.POUND: "pound",
}

_BRIDGED = frozenset({UnitCategory.MASS, UnitCategory.WEIGHT})


# --- Core Functions ---

def _conversion_unit(unit: UnitType, bridge_to_mass: bool) -> str:
    if bridge_to_mass and unit in WEIGHT_AS_MASS:
        return WEIGHT_AS_MASS[unit]
    return CONVERSION_UNITS[unit]


@lru_cache(maxsize=None)
def conversion_factor(from_unit: UnitType, to_unit: UnitType) -> float:
    """
    Multiplier taking a value in `from_unit` to `to_unit`.

    Raises KeyError when a unit has no conversion entry and pint errors when the
    pair is dimensionally incompatible; `convert` turns both into failures.
    """
    bridge = category_for(from_unit) != category_for(to_unit)
    source = _conversion_unit(from_unit, bridge)
    target = _conversion_unit(to_unit, bridge)
    return float(ureg.Quantity(1.0, source).to(target).magnitude)


def convert(amount: Amount, to_unit: UnitType) -> Result[Amount, ConversionError]:
    """
    Convert `amount` to `to_unit`.

    Returns Success(Amount) holding the converted value (unrounded), or a Failure
    carrying IncompatibleUnitsError / UnknownUnitError. Never raises for those.
    """
    from_unit = amount.unit
    try:
        from_category = category_for(from_unit)
        to_category = category_for(to_unit)
    except KeyError as e:
        return Failure(UnknownUnitError(e.args[0], "No unit category found for unit type"))

    # Plain shorthand strings pass the lookup; results always carry the enum
    from_unit = UnitType(from_unit)
    to_unit = UnitType(to_unit)

    if from_unit == to_unit and from_category == UnitCategory.PIECE:
        return Success(amount_for(amount.value, to_unit))

    if UnitCategory.PIECE in (from_category, to_category) or (
        from_category != to_category and {from_category, to_category} != _BRIDGED
    ):
        error = IncompatibleUnitsError(from_unit, to_unit, from_category, to_category)
        logger.debug(error.message)
        return Failure(error)

    for unit in (from_unit, to_unit):
        if unit not in CONVERSION_UNITS:
            error = UnknownUnitError(unit, "Cannot find conversion for units")
            logger.debug(error.message)
            return Failure(error)

    try:
        factor = conversion_factor(from_unit, to_unit)
    except (KeyError, pint.errors.PintError) as e:
        logger.warning(f"Conversion table mismatch for {from_unit} -> {to_unit}: {e}")
        return Failure(UnknownUnitError(from_unit, f"Conversion failed ({e})"))

    return Success(amount_for(amount.value * factor, to_unit))


def convert_to(unit: UnitType) -> Callable[[Amount], Result[Amount, ConversionError]]:
    """convert_to(UnitType.CUP)(amount) == convert(amount, UnitType.CUP)"""
    return lambda amount: convert(amount, unit)


def convert_from(amount: Amount) -> Callable[[UnitType], Result[Amount, ConversionError]]:
    """convert_from(amount)(UnitType.CUP) == convert(amount, UnitType.CUP)"""
    return lambda unit: convert(amount, unit)


# (source unit, target unit, line template); {value} is the rounded conversion of 1 source unit
QUICK_REFERENCE = (
    (UnitType.TEASPOON, UnitType.MILLILITER, "1 tsp ≈ {value} ml"),
    (UnitType.TABLESPOON, UnitType.MILLILITER, "1 tbsp ≈ {value} ml"),
    (UnitType.TABLESPOON, UnitType.TEASPOON, "1 tbsp = {value} tsps"),
    (UnitType.FLUID_OUNCE, UnitType.TABLESPOON, "1 fl oz = {value} tbsps"),
    (UnitType.CUP, UnitType.FLUID_OUNCE, "1 cup = {value} fl ozs"),
    (UnitType.QUART, UnitType.PINT, "1 qt = {value} pts"),
    (UnitType.GALLON, UnitType.QUART, "1 gal = {value} qts"),
)


def quick_reference() -> list[str]:
    """Kitchen cheat-sheet lines; a line whose conversion fails is left out."""
    lines = []
    for from_unit, to_unit, template in QUICK_REFERENCE:
        line = (
            convert(amount_for(1, from_unit), to_unit)
            .map(lambda amount, template=template: template.format(value=round(amount.value)))
            .get_or_default("")
        )
        if line:
            lines.append(line)
    return lines
