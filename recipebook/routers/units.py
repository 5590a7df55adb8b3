"""
Router for unit catalog, conversion and formatting utilities.
"""

import logging
import math

from fastapi import APIRouter, HTTPException

from ..schemas import (
    QuantityFormatRequest,
    QuantityFormatResponse,
    QuickReferenceResponse,
    UnitCatalogResponse,
    UnitCategoryOut,
    UnitConvertRequest,
    UnitConvertResponse,
    UnitOut,
)
from ..services.quantity_format import format_amount, format_quantity
from ..services.unit_conversion import convert, quick_reference
from ..services.units import (
    UNITS_BY_CATEGORY,
    Unit,
    UnitCategory,
    amount_for,
    target_units_for,
    unit_name_for,
    unit_type_from_shorthand,
    units_in_category,
)

logger = logging.getLogger("recipebook.units")

router = APIRouter()


def _unit_out(unit: Unit) -> UnitOut:
    return UnitOut(value=unit.value.value, label=unit.label.value)


@router.get("", response_model=UnitCatalogResponse)
def list_units():
    """All units, grouped by category, in display order."""
    return UnitCatalogResponse(categories=[
        UnitCategoryOut(category=category.value, units=[_unit_out(u) for u in units])
        for category, units in UNITS_BY_CATEGORY.items()
    ])


@router.get("/quick-reference", response_model=QuickReferenceResponse)
def get_quick_reference():
    return QuickReferenceResponse(lines=quick_reference())


@router.get("/categories/{category}", response_model=list[UnitOut])
def list_category_units(category: str):
    matched = next((c for c in UnitCategory if c.value.lower() == category.lower()), None)
    if matched is None:
        raise HTTPException(status_code=404, detail=f"Unknown unit category '{category}'")
    return [_unit_out(u) for u in units_in_category(matched)]


@router.get("/{shorthand}/targets", response_model=list[UnitOut])
def list_target_units(shorthand: str):
    """Units a picker should offer when converting from `shorthand`."""
    result = unit_type_from_shorthand(shorthand)
    if result.failed:
        raise HTTPException(status_code=400, detail=str(result.failure_or_none()))
    return [_unit_out(u) for u in target_units_for(result.get_or_raise())]


@router.post("/convert", response_model=UnitConvertResponse)
def convert_units(req: UnitConvertRequest):
    """
    Convert a value from one unit to another.

    Unknown shorthands and incompatible units (e.g. cup -> oz) are 400s.
    """
    result = (
        unit_type_from_shorthand(req.unit)
        .and_then(lambda from_unit: unit_type_from_shorthand(req.to_unit).and_then(
            lambda to_unit: convert(amount_for(req.value, from_unit), to_unit)
        ))
    )
    if result.failed:
        error = result.failure_or_none()
        logger.info(f"Conversion rejected: {error}")
        raise HTTPException(status_code=400, detail=str(error))

    amount = result.get_or_raise()
    if not math.isfinite(amount.value):
        logger.info(f"Conversion overflowed: {req.value} {req.unit} -> {req.to_unit}")
        raise HTTPException(
            status_code=400,
            detail=f"Converted value is not a finite number; {req.value} {req.unit} -> {req.to_unit}",
        )
    return UnitConvertResponse(
        value=amount.value,
        unit=amount.unit.value,
        label=unit_name_for(amount.unit).value,
        display=format_amount(amount, req.locale),
    )


@router.post("/format", response_model=QuantityFormatResponse)
def format_units(req: QuantityFormatRequest):
    return QuantityFormatResponse(text=format_quantity(
        req.value,
        req.unit,
        req.locale,
        significant_digits=req.significant_digits,
    ))
