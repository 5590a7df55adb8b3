"""
Quantity formatting for display.

Turns a value and unit into text such as "1/4 cup", "2 cups", "1,250 g" or "1.5 ℓ".
Metric units show a locale-formatted number and a symbol; kitchen units show a
simplified fraction where one fits and a pluralized label.
Every function here returns a string; bad input degrades to a bare number.
"""

import logging
import math
from decimal import Decimal
from fractions import Fraction
from functools import lru_cache
from typing import Optional, Union

from babel import Locale, UnknownLocaleError
from babel.numbers import format_decimal

from ..settings import settings
from .units import Amount, UnitName, UnitType, unit_for, unit_name_for, unit_type_from_shorthand

logger = logging.getLogger("recipebook.format")

# Below this magnitude a value is shown as zero
ZERO_EPSILON = 1e-5

# A fraction is used only when it is this close to the value
FRACTION_TOLERANCE = 1e-3

# Metric units: fixed symbol, never pluralized
METRIC_SYMBOLS = {
    UnitType.MILLIGRAM: "mg",
    UnitType.GRAM: "g",
    UnitType.KILOGRAM: "kg",
    UnitType.MILLILITER: "ml",
    UnitType.LITER: "ℓ",
}

_ES_ENDINGS = ("ch", "sh", "s", "x", "z")


def pluralize(label: str, count: float) -> str:
    """English plural of a unit label for `count` ("pinch", 2 -> "pinches")."""
    if count == 1:
        return label
    if label.endswith(_ES_ENDINGS):
        return label + "es"
    return label + "s"


@lru_cache(maxsize=64)
def _resolve_locale(locale: Optional[str]) -> Locale:
    identifier = (locale or settings.default_locale).replace("-", "_")
    try:
        return Locale.parse(identifier)
    except (ValueError, TypeError, UnknownLocaleError) as e:
        logger.warning(f"Unknown locale {locale!r}, using {settings.default_locale}: {e}")
        return Locale.parse(settings.default_locale.replace("-", "_"))


_LABELS = frozenset(name.value for name in UnitName)


def _resolve_unit(unit: Union[UnitType, UnitName, str, None]) -> Optional[UnitType]:
    """Accept a UnitType, a shorthand ("tbsp") or a label ("tablespoon")."""
    if not unit:
        return None
    if isinstance(unit, UnitType):
        return unit
    if isinstance(unit, UnitName):
        return unit_for(unit).value
    if isinstance(unit, str):
        code = unit.strip()
        unit_type = unit_type_from_shorthand(code).get_or_none()
        if unit_type is None and code in _LABELS:
            unit_type = unit_for(UnitName(code)).value
        if unit_type is not None:
            return unit_type
    logger.debug(f"Cannot format unit {unit!r}; showing number only")
    return None


def round_significant(value: float, digits: int) -> Decimal:
    """Round to `digits` significant digits, as a Decimal so no float noise is shown."""
    return Decimal(f"{value:.{max(1, digits)}g}")


def format_number(
    value: float,
    locale: Optional[str] = None,
    significant_digits: Optional[int] = None,
) -> str:
    """Locale-aware number with at most `significant_digits` significant digits."""
    if not math.isfinite(value):
        return str(value)
    digits = significant_digits or settings.significant_digits
    return format_decimal(
        round_significant(value, digits),
        locale=_resolve_locale(locale),
        decimal_quantization=False,
    )


def to_fraction(
    value: float,
    max_denominator: Optional[int] = None,
    tolerance: float = FRACTION_TOLERANCE,
) -> Optional[Fraction]:
    """
    Closest simple fraction to `value`, or None when none is within `tolerance`.

    >>> to_fraction(0.25)
    Fraction(1, 4)
    >>> to_fraction(0.123) is None
    True
    """
    if not math.isfinite(value):
        return None
    fraction = Fraction(value).limit_denominator(max_denominator or settings.fraction_max_denominator)
    if abs(float(fraction) - value) > tolerance:
        return None
    return fraction


def format_fraction(fraction: Fraction, locale: Optional[str] = None) -> str:
    """Mixed-number text for a fraction: 3/2 -> "1 1/2", 1/4 -> "1/4", 2 -> "2"."""
    sign = "-" if fraction < 0 else ""
    whole, remainder = divmod(abs(fraction.numerator), fraction.denominator)
    if remainder == 0:
        return sign + format_decimal(whole, locale=_resolve_locale(locale))
    part = f"{remainder}/{fraction.denominator}"
    if whole == 0:
        return sign + part
    return f"{sign}{format_decimal(whole, locale=_resolve_locale(locale))} {part}"


def format_quantity(
    value: float,
    unit: Union[UnitType, str, None] = None,
    locale: Optional[str] = None,
    *,
    significant_digits: Optional[int] = None,
) -> str:
    """
    Format a quantity and its unit for display.

    Examples (en-US):
        format_quantity(0.25, "cup")      -> "1/4 cup"
        format_quantity(2, "cup")         -> "2 cups"
        format_quantity(0.000001, "cup")  -> "0 cups"
        format_quantity(1500, "g")        -> "1,500 g"
        format_quantity(3)                -> "3"
    """
    unit_type = _resolve_unit(unit)
    if unit_type is None:
        return format_number(value, locale, significant_digits)

    symbol = METRIC_SYMBOLS.get(unit_type)
    label = unit_name_for(unit_type).value

    if math.isfinite(value) and abs(value) < ZERO_EPSILON:
        return f"0 {symbol or pluralize(label, 0)}"

    if symbol is not None:
        return f"{format_number(value, locale, significant_digits)} {symbol}"

    text = format_number(value, locale, significant_digits)
    if not math.isfinite(value):
        return f"{text} {pluralize(label, 2)}"

    shown = round_significant(value, significant_digits or settings.significant_digits)
    fraction = to_fraction(float(shown))
    if fraction == 0:
        return f"0 {pluralize(label, 0)}"
    if fraction is not None:
        return f"{format_fraction(fraction, locale)} {pluralize(label, max(1, abs(fraction)))}"

    return f"{text} {pluralize(label, max(1, abs(shown)))}"


def format_amount(amount: Amount, locale: Optional[str] = None, **kwargs) -> str:
    return format_quantity(amount.value, amount.unit, locale, **kwargs)
