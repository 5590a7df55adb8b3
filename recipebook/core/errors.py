"""Conversion error taxonomy. Returned inside a Failure, not raised by the core."""


class ConversionError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __eq__(self, other):
        return type(self) is type(other) and self.message == other.message

    def __hash__(self):
        return hash((type(self), self.message))


class UnknownUnitError(ConversionError):
    """A shorthand or unit has no catalog or conversion-table entry."""

    def __init__(self, unit, reason: str = "Unable to find unit type for shorthand"):
        self.unit = unit
        super().__init__(f"{reason}; unit: {unit}")


class IncompatibleUnitsError(ConversionError):
    """Source and target units belong to categories that cannot be bridged."""

    def __init__(self, from_unit, to_unit, from_category=None, to_category=None):
        self.from_unit = from_unit
        self.to_unit = to_unit
        detail = f"from: {from_unit}, to: {to_unit}"
        if from_category is not None and to_category is not None:
            detail += f", categories: {from_category} -> {to_category}"
        super().__init__(f"Cannot convert between incompatible units; {detail}")
