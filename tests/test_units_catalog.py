from recipebook.core.errors import UnknownUnitError
from recipebook.services.units import (
    MEASUREMENT_UNITS,
    UNITS_BY_CATEGORY,
    Amount,
    Unit,
    UnitCategory,
    UnitName,
    UnitType,
    _check_catalog,
    amount_for,
    category_for,
    shorthand_of,
    target_units_for,
    unit_for,
    unit_for_type,
    unit_name_for,
    unit_type_from_shorthand,
    units_in_category,
)


def test_every_unit_has_one_label_and_one_category():
    types = [u.value for u in MEASUREMENT_UNITS]
    labels = [u.label for u in MEASUREMENT_UNITS]

    assert sorted(types) == sorted(UnitType)
    assert sorted(labels) == sorted(UnitName)
    assert len(set(types)) == len(types)
    assert len(set(labels)) == len(labels)

    for unit_type in UnitType:
        assert isinstance(category_for(unit_type), UnitCategory)


def test_name_and_type_lookups_agree():
    for unit in MEASUREMENT_UNITS:
        assert unit_for(unit.label) == unit
        assert unit_for_type(unit.value) == unit
        assert unit_name_for(unit.value) == unit.label

    assert unit_for(UnitName.fluid_ounce) == Unit(UnitType.FLUID_OUNCE, UnitName.fluid_ounce)
    assert unit_name_for(UnitType.TABLESPOON).value == "tablespoon"


def test_shorthand_round_trip():
    for unit in MEASUREMENT_UNITS:
        assert unit_type_from_shorthand(shorthand_of(unit.value)).get_or_raise() == unit.value


def test_shorthand_lookup():
    assert unit_type_from_shorthand("fl oz").get_or_raise() == UnitType.FLUID_OUNCE
    assert unit_type_from_shorthand("  tbsp ").get_or_raise() == UnitType.TABLESPOON

    result = unit_type_from_shorthand("Tbsp")
    assert result.failed
    assert isinstance(result.failure_or_none(), UnknownUnitError)
    assert "Tbsp" in str(result.failure_or_none())

    assert unit_type_from_shorthand("").failed
    assert unit_type_from_shorthand("tablespoon").failed


def test_categories():
    assert category_for(UnitType.GRAM) == UnitCategory.MASS
    assert category_for(UnitType.POUND) == UnitCategory.WEIGHT
    assert category_for(UnitType.FLUID_OUNCE) == UnitCategory.VOLUME
    assert category_for(UnitType.PINCH) == UnitCategory.PIECE


def test_units_in_category_keeps_display_order():
    assert [u.value for u in units_in_category(UnitCategory.MASS)] == [
        UnitType.MILLIGRAM, UnitType.GRAM, UnitType.KILOGRAM
    ]
    volume = [u.value.value for u in units_in_category(UnitCategory.VOLUME)]
    assert volume == ["ml", "l", "tsp", "tbsp", "fl oz", "cup", "pt", "qt", "gal"]
    assert list(UNITS_BY_CATEGORY) == [
        UnitCategory.MASS, UnitCategory.WEIGHT, UnitCategory.VOLUME, UnitCategory.PIECE
    ]


def test_target_units_group_mass_with_weight():
    mass_and_weight = units_in_category(UnitCategory.MASS) + units_in_category(UnitCategory.WEIGHT)

    assert target_units_for(UnitType.GRAM) == mass_and_weight
    assert target_units_for(UnitType.OUNCE) == mass_and_weight
    assert target_units_for(UnitType.CUP) == units_in_category(UnitCategory.VOLUME)
    assert target_units_for(UnitType.PIECE) == units_in_category(UnitCategory.PIECE)


def test_amount_is_a_plain_value():
    amount = amount_for(2.5, UnitType.CUP)
    assert amount == Amount(2.5, UnitType.CUP)
    assert amount.value == 2.5
    assert amount.unit is UnitType.CUP


def test_catalog_check_reports_problems():
    assert _check_catalog(UNITS_BY_CATEGORY) == []

    broken = {
        UnitCategory.MASS: (
            Unit(UnitType.GRAM, UnitName.gram),
            Unit(UnitType.GRAM, UnitName.kilogram),
        ),
    }
    problems = " ".join(_check_catalog(broken))
    assert "duplicate unit type g" in problems
    assert "unit type cup has no category" in problems
    assert "orphan label pinch" in problems
