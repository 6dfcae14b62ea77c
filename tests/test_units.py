import pytest

from recipe_lang.errors import ParseError, UnitParseError
from recipe_lang.vocabulary.keywords import Keyword, lookup_keyword
from recipe_lang.vocabulary.units import (
    IngredientUnit,
    TemperatureUnit,
    TimeUnit,
    parse_ingredient_unit,
    parse_temperature_unit,
    parse_time_unit,
)


@pytest.mark.parametrize(
    "raw, expected_unit",
    [
        ("g", IngredientUnit.GRAMS),
        ("oz", IngredientUnit.OUNCES),
        ("cup", IngredientUnit.CUPS),
        ("cups", IngredientUnit.CUPS),
        ("tsp", IngredientUnit.TEASPOONS),
        ("tbsp", IngredientUnit.TABLESPOONS),
    ],
)
def test_parse_ingredient_unit(raw, expected_unit):
    """Test that every amount alias resolves to its unit."""
    assert parse_ingredient_unit(raw) is expected_unit


@pytest.mark.parametrize(
    "raw, expected_unit",
    [
        ("F", TemperatureUnit.FAHRENHEIT),
        ("C", TemperatureUnit.CELSIUS),
    ],
)
def test_parse_temperature_unit(raw, expected_unit):
    assert parse_temperature_unit(raw) is expected_unit


@pytest.mark.parametrize(
    "raw, expected_unit",
    [
        ("s", TimeUnit.SECONDS),
        ("min", TimeUnit.MINUTES),
        ("mins", TimeUnit.MINUTES),
        ("hr", TimeUnit.HOURS),
        ("hrs", TimeUnit.HOURS),
    ],
)
def test_parse_time_unit(raw, expected_unit):
    assert parse_time_unit(raw) is expected_unit


@pytest.mark.parametrize(
    "parse_unit, raw",
    [
        (parse_ingredient_unit, "Cups"),
        (parse_ingredient_unit, "kg"),
        (parse_ingredient_unit, ""),
        (parse_ingredient_unit, "units"),
        (parse_temperature_unit, "f"),
        (parse_temperature_unit, "K"),
        (parse_time_unit, "Min"),
        (parse_time_unit, "seconds"),
    ],
)
def test_unknown_unit_raises(parse_unit, raw):
    """Test that lookups are case-sensitive and never fall back to a default."""
    with pytest.raises(UnitParseError) as excinfo:
        parse_unit(raw)
    assert excinfo.value.raw == raw
    assert isinstance(excinfo.value, ParseError)


def test_unit_aliases():
    assert IngredientUnit.CUPS.aliases() == ["cup", "cups"]
    assert IngredientUnit.UNITS.aliases() == []
    assert TimeUnit.HOURS.aliases() == ["hr", "hrs"]
    assert TemperatureUnit.CELSIUS.aliases() == ["C"]


@pytest.mark.parametrize(
    "word, expected_keyword",
    [
        ("Ingredients", Keyword.INGREDIENTS),
        ("Instructions", Keyword.INSTRUCTIONS),
        ("Combine", Keyword.COMBINE),
        ("Mix", Keyword.MIX),
        ("Cut", Keyword.CUT),
        ("into", Keyword.INTO),
        ("Into", Keyword.INTO),
        ("Refridgerate", Keyword.REFRIDGERATE),
        ("Bake", Keyword.BAKE),
        ("bake", None),
        ("mix", None),
        ("result", None),
        ("Result", None),
    ],
)
def test_lookup_keyword(word, expected_keyword):
    assert lookup_keyword(word) is expected_keyword
