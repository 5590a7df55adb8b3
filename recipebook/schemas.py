"""Pydantic schemas for the units API.

Request/response models for:
- Unit catalog listings
- Conversions
- Quantity formatting
"""

from typing import Optional

from pydantic import BaseModel, Field


# --- Catalog ---

class UnitOut(BaseModel):
    value: str
    label: str


class UnitCategoryOut(BaseModel):
    category: str
    units: list[UnitOut]


class UnitCatalogResponse(BaseModel):
    categories: list[UnitCategoryOut]


# --- Conversion ---

class UnitConvertRequest(BaseModel):
    value: float
    unit: str = Field(..., min_length=1, description="Shorthand of the source unit, e.g. 'tbsp'")
    to_unit: str = Field(..., min_length=1, description="Shorthand of the target unit")
    locale: Optional[str] = None


class UnitConvertResponse(BaseModel):
    value: float
    unit: str
    label: str
    display: str


# --- Formatting ---

class QuantityFormatRequest(BaseModel):
    value: float
    unit: Optional[str] = None
    locale: Optional[str] = None
    significant_digits: Optional[int] = Field(None, ge=1, le=15)


class QuantityFormatResponse(BaseModel):
    text: str


class QuickReferenceResponse(BaseModel):
    lines: list[str]
